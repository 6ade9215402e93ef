"""Reading and writing desktop files from strings, streams and paths.

Components:
    loads / load / load_path - parse text, a text or binary stream, or a file
    dumps / dump / dump_path - serialize to text, a stream, or a file

Binary input is decoded as UTF-8. Read and decode failures surface as
StreamReadError with the original exception chained.

Python 3.13+.
"""

from __future__ import annotations

import io
import logging
import os
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import IO, TypeAlias

from desktopfile.constants import DEFAULT_ENCODING
from desktopfile.diagnostics import ErrorTemplate, StreamReadError
from desktopfile.model import DesktopFile
from desktopfile.options import Options
from desktopfile.syntax import DesktopFileParser, DesktopFileSerializer

__all__ = [
    "dump",
    "dump_path",
    "dumps",
    "load",
    "load_path",
    "loads",
]

logger = logging.getLogger(__name__)

StrPath: TypeAlias = str | os.PathLike[str]


def _read_lines(
    stream: Iterable[str] | Iterable[bytes], source_name: str | None
) -> Iterator[str]:
    """Yield decoded lines, turning reader failures into StreamReadError."""
    try:
        for line in stream:
            if isinstance(line, bytes):
                yield line.decode(DEFAULT_ENCODING)
            else:
                yield line
    except (OSError, UnicodeDecodeError) as e:
        raise StreamReadError(ErrorTemplate.stream_read_failed(str(e), source_name)) from e


def loads(source: str, options: Options | None = None) -> DesktopFile:
    """Parse desktop file text."""
    return DesktopFileParser(options).parse(source)


def load(
    stream: IO[str] | IO[bytes],
    options: Options | None = None,
    *,
    source_name: str | None = None,
) -> DesktopFile:
    """Parse a desktop file from an open text or binary stream.

    The stream is read once, line by line, and not closed.

    Args:
        stream: Readable stream positioned at the start of the file
        options: Parser options (default: strict Options())
        source_name: Name used in diagnostics; defaults to stream.name

    Raises:
        StreamReadError: If reading or UTF-8 decoding fails
        DesktopSyntaxError: If the content is not a valid desktop file
    """
    if source_name is None:
        name = getattr(stream, "name", None)
        source_name = name if isinstance(name, str) else None
    return DesktopFileParser(options).parse_lines(
        _read_lines(stream, source_name), source_name=source_name
    )


def load_path(path: StrPath, options: Options | None = None) -> DesktopFile:
    """Parse the desktop file at ``path``.

    Raises:
        StreamReadError: If the file cannot be opened, read or decoded
        DesktopSyntaxError: If the content is not a valid desktop file
    """
    source_name = os.fspath(path)
    logger.debug("Loading desktop file %s", source_name)
    try:
        stream = Path(path).open("rb")  # noqa: SIM115 - closed below
    except OSError as e:
        logger.error("Failed to open desktop file %s: %s", source_name, e)
        raise StreamReadError(ErrorTemplate.stream_read_failed(str(e), source_name)) from e
    with stream:
        return load(stream, options, source_name=source_name)


def dumps(document: DesktopFile, *, validate: bool = False) -> str:
    """Serialize document to text."""
    return DesktopFileSerializer().serialize(document, validate=validate)


def dump(
    document: DesktopFile, stream: IO[str] | IO[bytes], *, validate: bool = False
) -> None:
    """Write document to an open text or binary stream (binary gets UTF-8)."""
    text = dumps(document, validate=validate)
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        stream.write(text.encode(DEFAULT_ENCODING))
    else:
        stream.write(text)  # type: ignore[arg-type]


def dump_path(document: DesktopFile, path: StrPath, *, validate: bool = False) -> None:
    """Write document to ``path`` as UTF-8, replacing any existing file."""
    text = dumps(document, validate=validate)
    Path(path).write_text(text, encoding=DEFAULT_ENCODING, newline="\n")
    logger.debug("Wrote desktop file %s (%d groups)", os.fspath(path), len(document))
