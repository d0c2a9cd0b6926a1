import base64
from pathlib import Path

import imgpack.intern.dbc as dbc
import imgpack.intern.helper as h


def read_file_bytes(path: Path) -> bytes:
    """
    Reads the complete content of a file into memory.

    Args:
        path (Path): The file to read.

    Returns:
        bytes: The content of the file.

    Raises:
        Raises an error if the file can't be opened or read. This aborts the whole run.
    """
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        dbc.raise_os_error("READ_FAILED", path, e)


def encode_payload(data: bytes) -> str:
    """
    Encodes bytes as base85 text (RFC 1924 alphabet). The last group is not padded, thus b"" is encoded as "".

    Args:
        data (bytes): The raw bytes.

    Returns:
        str: The pure ASCII payload.
    """
    return base64.b85encode(data).decode("ascii")


def decode_payload(payload: str, name: str = "payload") -> bytes:
    """
    Decodes a payload created by encode_payload back to the original bytes.

    Args:
        payload (str): The base85 text.
        name (str, optional): Name of the entry, used in the error message.

    Returns:
        bytes: The original bytes.

    Raises:
        Raises an error if the payload is no valid base85 text.
    """
    try:
        return base64.b85decode(payload)
    except ValueError as e:
        dbc.raise_error({"msg": "INVALID_PAYLOAD", "name": name, "reason": str(e)})


def digest_of_payload(payload: str) -> str:
    """
    Computes the SHA-256 digest of the ASCII bytes of the payload.
    Note, that this is the hash of the encoded text, not of the original file content.

    Args:
        payload (str): The base85 text.

    Returns:
        str: The lowercase hexadecimal digest.
    """
    return h.make_sha256_hash_of_bytes(payload.encode("ascii"))


def encode_file(path: Path) -> tuple[str, str]:
    """
    Reads a file, encodes its content and hashes the encoded text.

    Args:
        path (Path): The file to process.

    Returns:
        tuple: A tuple (payload, digest).
    """
    payload = encode_payload(read_file_bytes(path))
    return payload, digest_of_payload(payload)
