"""
Line sources for the banlist parser.

The parser grammar does not care where lines come from; these helpers cover
the usual origins: an in-memory string, a loose file and an entry inside a
zip resource package.
"""

import zipfile
from collections.abc import Iterator
from pathlib import Path


def iter_text_lines(text: str) -> Iterator[str]:
    """Yield lines of an in-memory string, split on LF only, endings kept."""
    *lines, tail = text.split("\n")
    for line in lines:
        yield line + "\n"
    if tail:
        yield tail



def iter_file_lines(path: Path | str) -> Iterator[bytes]:
    """
    Yield raw lines of a file.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    with open(path, "rb") as f:
        yield from f


def iter_archive_lines(archive_path: Path | str, member: str) -> Iterator[bytes]:
    """
    Yield raw lines of one entry inside a zip package.

    Raises:
        FileNotFoundError: If the archive does not exist
        KeyError: If the archive has no such entry
    """
    with zipfile.ZipFile(archive_path) as archive:
        with archive.open(member) as f:
            yield from f
