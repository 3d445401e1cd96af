"""
Filename helpers for the interactive session.
"""

from pathlib import Path
from typing import List, Union

from watermark_manager.config import Settings

OUTPUT_SUFFIX = Settings.output_suffix


def derive_output_filename(filename: str, suffix: str = OUTPUT_SUFFIX) -> str:
    """
    Insert suffix before the last extension, or append it if there is none.

    >>> derive_output_filename("archive.tar.gz")
    'archive.tar-with-watermark.gz'
    >>> derive_output_filename("noext")
    'noext-with-watermark'
    """
    stem, dot, extension = filename.rpartition(".")
    if not dot:
        return filename + suffix
    return f"{stem}{suffix}.{extension}"


def find_missing(*paths: Union[str, Path]) -> List[Path]:
    """
    Return the paths that are not existing regular files.

    A blank filename resolves to the images folder itself and is reported
    as missing too.
    """
    return [Path(p) for p in paths if not Path(p).is_file()]
