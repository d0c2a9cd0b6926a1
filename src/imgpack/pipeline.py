import logging

from imgpack.intern import msg
import imgpack.component.discovery as disc
import imgpack.component.encoding as enc
import imgpack.component.ordering as order
import imgpack.component.artifact as art


logger = logging.getLogger(__name__)


def run(settings: dict) -> dict:
    """
    Encodes and hashes all matching files below the input root and writes the two JSON documents.
    The run is a single sequential pass. The first file that can't be read aborts it, the output directory
    created before stays in place.

    Args:
        settings (dict): The settings as returned by helper.get_settings.

    Returns:
        dict: A summary with keys "count", "images_path" and "hashes_path".
    """
    art.ensure_output_root(settings["output_root"])

    images = []
    hashes = []
    msg.log(logger.info, {"msg": "SCAN_STARTED", "input_root": settings["input_root"], "extension": settings["extension"]})
    for path in disc.iter_candidate_files(settings["input_root"], settings["extension"]):
        name = disc.base_name(path)
        payload, digest = enc.encode_file(path)
        msg.log(logger.debug, {"msg": "FILE_ENCODED", "path": str(path), "name": name, "digest": digest})
        images.append({name: payload})
        hashes.append({name: digest})

    images = order.order_entries(images)
    hashes = order.order_entries(hashes)

    images_path, hashes_path = art.write_documents(
        settings["output_root"],
        art.build_images_document(images),
        art.build_hashes_document(hashes),
        settings["images_file"],
        settings["hashes_file"])
    msg.log(logger.info, {"msg": "RUN_FINISHED", "number": len(images), "extension": settings["extension"], "input_root": settings["input_root"]})
    return {"count": len(images), "images_path": images_path, "hashes_path": hashes_path}
