"""
Atomic file output.

Encoded images are written to a temporary sibling of the destination and
moved into place with a single rename, so a failed write never leaves a
truncated file at the destination path.
"""

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Union

from imfconv.constants import FormatConstants

logger = logging.getLogger(__name__)


def _target_mode(dest: Path) -> int:
    """Mode of the existing destination, else the umask default for new files."""
    try:
        return stat.S_IMODE(dest.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_atomically(dest_path: Union[str, Path], data: bytes) -> Path:
    """
    Write bytes to dest_path in one rename.

    Args:
        dest_path: Final file path (created or overwritten)
        data: Complete file contents

    Returns:
        Resolved destination path

    Raises:
        OSError: If the directory is missing or the file cannot be written
    """
    dest = Path(dest_path)
    fd, tmp_name = tempfile.mkstemp(
        prefix=FormatConstants.TEMP_FILE_PREFIX,
        suffix=FormatConstants.TEMP_FILE_SUFFIX,
        dir=dest.parent,
    )
    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.chmod(tmp, _target_mode(dest))
        os.replace(tmp, dest)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise

    logger.debug(f"Wrote {len(data)} bytes to {dest}")
    return dest
