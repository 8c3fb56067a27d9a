"""Unit tests for console, stream and callback sinks."""

from __future__ import annotations

import io
from datetime import UTC, datetime
from typing import Any

import pytest

from sinklog.events import Event, Level
from sinklog.sinks import CallbackSink, ConsoleSink, Sink, SinkEntry, StreamSink

_TS = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)


def _event(
    level: int = Level.INFO, fmt: str = "hello %s", args: tuple[object, ...] = ("world",)
) -> Event:
    return Event(level=level, timestamp=_TS, file="svc.py", line=7, fmt=fmt, args=args)


class _TTY(io.StringIO):
    def isatty(self) -> bool:
        return True


class _TrackingHandle(io.StringIO):
    def __init__(self) -> None:
        super().__init__()
        self.flushes = 0

    def flush(self) -> None:
        self.flushes += 1
        super().flush()


# ---------------------------------------------------------------------------
# Protocol + entries
# ---------------------------------------------------------------------------


class TestSinkProtocol:
    def test_concrete_sinks_satisfy_protocol(self) -> None:
        assert isinstance(ConsoleSink(stream=io.StringIO()), Sink)
        assert isinstance(StreamSink(io.StringIO()), Sink)
        assert isinstance(CallbackSink(lambda e, u: None), Sink)

    def test_entry_threshold_is_inclusive(self) -> None:
        entry = SinkEntry(sink=StreamSink(io.StringIO()), threshold=Level.WARN)
        assert entry.accepts(Level.WARN)
        assert entry.accepts(Level.FATAL)
        assert not entry.accepts(Level.INFO)


# ---------------------------------------------------------------------------
# ConsoleSink
# ---------------------------------------------------------------------------


class TestConsoleSink:
    def test_writes_one_line(self) -> None:
        stream = io.StringIO()
        ConsoleSink(stream=stream, color=False).write(_event())
        lines = stream.getvalue().splitlines()
        assert len(lines) == 1
        assert lines[0].endswith("INFO  svc.py:7: hello world")

    def test_defaults_to_stderr_at_write_time(self, capsys: pytest.CaptureFixture[str]) -> None:
        ConsoleSink(color=False).write(_event(Level.ERROR))
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "ERROR svc.py:7: hello world" in captured.err

    def test_auto_color_off_for_non_tty(self) -> None:
        stream = io.StringIO()
        sink = ConsoleSink(stream=stream)
        assert sink.use_color() is False
        sink.write(_event())
        assert "\x1b[" not in stream.getvalue()

    def test_auto_color_on_for_tty(self) -> None:
        stream = _TTY()
        ConsoleSink(stream=stream).write(_event())
        assert "\x1b[32mINFO" in stream.getvalue()

    def test_forced_color(self) -> None:
        stream = io.StringIO()
        ConsoleSink(stream=stream, color=True).write(_event())
        assert "\x1b[90msvc.py:7:" in stream.getvalue()

    def test_stream_can_be_replaced(self) -> None:
        first, second = io.StringIO(), io.StringIO()
        sink = ConsoleSink(stream=first, color=False)
        sink.stream = second
        sink.write(_event())
        assert first.getvalue() == ""
        assert second.getvalue()


# ---------------------------------------------------------------------------
# StreamSink
# ---------------------------------------------------------------------------


class TestStreamSink:
    def test_appends_plain_lines_and_flushes(self) -> None:
        handle = _TrackingHandle()
        sink = StreamSink(handle)
        sink.write(_event(Level.WARN, "a", ()))
        sink.write(_event(Level.ERROR, "b", ()))
        lines = handle.getvalue().splitlines()
        assert [l.split(" ", 2)[2] for l in lines] == ["WARN  svc.py:7: a", "ERROR svc.py:7: b"]
        assert handle.flushes == 2

    def test_never_closes_the_handle(self) -> None:
        handle = io.StringIO()
        StreamSink(handle).write(_event())
        assert not handle.closed

    def test_handle_without_flush(self) -> None:
        class _Bare:
            def __init__(self) -> None:
                self.chunks: list[str] = []

            def write(self, text: str) -> None:
                self.chunks.append(text)

        handle = _Bare()
        StreamSink(handle).write(_event())
        assert handle.chunks[0].endswith("hello world\n")

    def test_repr_uses_handle_name(self, tmp_path: Any) -> None:
        path = tmp_path / "app.log"
        with path.open("w", encoding="utf-8") as fh:
            assert str(path) in repr(StreamSink(fh))


# ---------------------------------------------------------------------------
# CallbackSink
# ---------------------------------------------------------------------------


class TestCallbackSink:
    def test_passes_event_and_user_data(self) -> None:
        seen: list[tuple[Event, Any]] = []
        marker = object()
        sink = CallbackSink(lambda event, udata: seen.append((event, udata)), marker)
        event = _event()
        sink.write(event)
        assert seen == [(event, marker)]

    def test_user_data_defaults_to_none(self) -> None:
        seen: list[Any] = []
        CallbackSink(lambda event, udata: seen.append(udata)).write(_event())
        assert seen == [None]

    def test_callback_errors_propagate_to_caller(self) -> None:
        def boom(event: Event, udata: Any) -> None:
            raise RuntimeError("nope")

        with pytest.raises(RuntimeError):
            CallbackSink(boom).write(_event())
