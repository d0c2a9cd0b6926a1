import json
import logging
from pathlib import Path

import imgpack.intern.dbc as dbc
from imgpack.intern import msg


logger = logging.getLogger(__name__)


def build_images_document(entries: list[dict]) -> dict:
    return {"images": entries}


def build_hashes_document(entries: list[dict]) -> dict:
    return {"hashes": entries}


def dump_document(document: dict) -> str:
    """
    Serializes a document as pretty printed JSON with an indentation of two spaces and without trailing newline.
    """
    return json.dumps(document, ensure_ascii=False, indent=2)


def ensure_output_root(output_root: str) -> Path:
    """
    Creates the output directory including its parents. Nothing happens if it exists already.

    Args:
        output_root (str): The output directory.

    Returns:
        Path: The output directory.

    Raises:
        Raises an error if the directory can't be created.
    """
    path = Path(output_root)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        dbc.raise_os_error("WRITE_FAILED", path, e)
    return path


def write_document(path: Path, document: dict) -> None:
    """
    Writes a document to a file. An existing file is overwritten.

    Args:
        path (Path): The file to write.
        document (dict): The document, either with key "images" or "hashes".

    Raises:
        Raises an error if the file can't be written.
    """
    content = dump_document(document).encode("utf-8")
    try:
        path.write_bytes(content)
    except OSError as e:
        dbc.raise_os_error("WRITE_FAILED", path, e)
    kind, entries = next(iter(document.items()))
    msg.log(logger.info, {"msg": "DOCUMENT_WRITTEN", "kind": kind, "number": len(entries), "path": str(path)})


def write_documents(output_root: str, images_document: dict, hashes_document: dict,
                    images_file: str = "image_base85.json", hashes_file: str = "image_hash.json") -> tuple[Path, Path]:
    """
    Writes the images document and the hashes document into the output directory, which is created if necessary.

    Args:
        output_root (str): The output directory.
        images_document (dict): The document with the payloads.
        hashes_document (dict): The document with the digests.
        images_file (str, optional): File name of the images document.
        hashes_file (str, optional): File name of the hashes document.

    Returns:
        tuple: The paths (images_path, hashes_path) of the written files.
    """
    out_dir = ensure_output_root(output_root)
    images_path = out_dir / images_file
    hashes_path = out_dir / hashes_file
    write_document(images_path, images_document)
    write_document(hashes_path, hashes_document)
    return images_path, hashes_path
