"""Tests for the stream-backed line source and sink."""

from __future__ import annotations

from io import StringIO

import pytest

from menagerie.domain.errors import IOFailure
from menagerie.infrastructure.lines import StreamLineSink, StreamLineSource


class TestStreamLineSource:
    def test_strips_newline(self) -> None:
        source = StreamLineSource(StringIO("Rex\nDog\n"))
        assert source.read_line() == "Rex"
        assert source.read_line() == "Dog"

    def test_strips_crlf(self) -> None:
        source = StreamLineSource(StringIO("Rex\r\n"))
        assert source.read_line() == "Rex"

    def test_keeps_inner_whitespace(self) -> None:
        source = StreamLineSource(StringIO("  Rex  \n"))
        assert source.read_line() == "  Rex  "

    def test_empty_line_is_not_eof(self) -> None:
        source = StreamLineSource(StringIO("\n"))
        assert source.read_line() == ""

    def test_last_line_without_newline(self) -> None:
        source = StreamLineSource(StringIO("no"))
        assert source.read_line() == "no"

    def test_eof_raises(self) -> None:
        source = StreamLineSource(StringIO(""))
        with pytest.raises(IOFailure, match="end of input"):
            source.read_line()

    def test_closed_stream_raises(self) -> None:
        stream = StringIO("Rex\n")
        stream.close()
        with pytest.raises(IOFailure, match="read failed"):
            StreamLineSource(stream).read_line()


class TestStreamLineSink:
    def test_prompt_has_no_newline(self) -> None:
        buf = StringIO()
        StreamLineSink(buf).prompt("Name: ")
        assert buf.getvalue() == "Name: "

    def test_write_line_appends_newline(self) -> None:
        buf = StringIO()
        StreamLineSink(buf).write_line("Rex is a Dog and is 3 years old")
        assert buf.getvalue() == "Rex is a Dog and is 3 years old\n"

    def test_prompts_suppressed(self) -> None:
        buf = StringIO()
        sink = StreamLineSink(buf, show_prompts=False)
        sink.prompt("Name: ")
        sink.write_line("report")
        assert buf.getvalue() == "report\n"

    def test_closed_stream_raises(self) -> None:
        buf = StringIO()
        buf.close()
        with pytest.raises(IOFailure, match="write failed"):
            StreamLineSink(buf).write_line("x")
