"""Line-oriented input/output adapters over text streams.

:class:`LineSource` and :class:`LineSink` are the protocols the collector
depends on.  The stream-backed implementations translate end-of-stream and
``OSError``/``ValueError`` (operations on a closed file) into
:class:`~menagerie.domain.errors.IOFailure`.
"""

from __future__ import annotations

from typing import Protocol, TextIO

from menagerie.domain.errors import IOFailure


class LineSource(Protocol):
    """Reads one line of text per call, blocking until it arrives."""

    def read_line(self) -> str: ...


class LineSink(Protocol):
    """Receives prompts and report lines."""

    def prompt(self, text: str) -> None: ...

    def write_line(self, text: str) -> None: ...


class StreamLineSource:
    """Read newline-delimited lines from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def read_line(self) -> str:
        """Return the next line without its terminator.

        Raises:
            IOFailure: on end of stream or an underlying I/O error.
        """
        try:
            line = self._stream.readline()
        except (OSError, ValueError) as exc:
            raise IOFailure(f"read failed: {exc}") from exc
        if line == "":
            raise IOFailure("unexpected end of input")
        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
        return line


class StreamLineSink:
    """Write prompts and lines to a text stream.

    With ``show_prompts=False`` prompts are dropped and only report lines
    and notices are written (``--quiet``).
    """

    def __init__(self, stream: TextIO, *, show_prompts: bool = True) -> None:
        self._stream = stream
        self._show_prompts = show_prompts

    def prompt(self, text: str) -> None:
        if not self._show_prompts:
            return
        self._write(text)

    def write_line(self, text: str) -> None:
        self._write(f"{text}\n")

    def _write(self, text: str) -> None:
        try:
            self._stream.write(text)
            self._stream.flush()
        except (OSError, ValueError) as exc:
            raise IOFailure(f"write failed: {exc}") from exc
