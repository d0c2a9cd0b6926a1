import os
import logging
from pathlib import Path
from typing import Iterator

from imgpack.intern import msg


logger = logging.getLogger(__name__)


def iter_candidate_files(input_root: str, extension: str) -> Iterator[Path]:
    """
    Recursively walks the input root and yields the regular files whose extension equals the given one.
    The comparison is exact and case-sensitive. The order of the files is the traversal order of the file system.
    Entries that can't be traversed (unreadable directories, a missing input root, broken symlinks) are skipped.

    Args:
        input_root (str): The directory to scan.
        extension (str): The extension without leading dot, e.g. "avif".

    Returns:
        Iterator[Path]: A one-pass generator of the matching files.
    """
    suffix = f".{extension}"
    for dirpath, _, filenames in os.walk(input_root, onerror=_skip_entry):
        for filename in filenames:
            path = Path(dirpath) / filename
            if path.suffix != suffix:
                continue
            if not path.is_file():
                msg.log(logger.warning, {"msg": "ENTRY_SKIPPED", "path": str(path), "reason": "no regular file"})
                continue
            yield path


def base_name(path: Path) -> str:
    """
    Returns the file name without directory and extension, e.g. "12" for "resources/a/12.avif".
    Bytes of the name that are no valid UTF-8 are replaced by U+FFFD, thus the name can always be written as JSON.
    """
    return os.fsencode(Path(path).stem).decode("utf-8", "replace")


def _skip_entry(error: OSError) -> None:
    msg.log(logger.warning, {"msg": "ENTRY_SKIPPED", "path": str(error.filename), "reason": error.strerror or str(error)})
