"""Sinks – console, stream and callback destinations behind one protocol."""
from sinklog.sinks.callback import CallbackSink, EventCallback
from sinklog.sinks.console import ConsoleSink
from sinklog.sinks.protocol import Sink, SinkEntry
from sinklog.sinks.stream import StreamSink

__all__ = [
    "CallbackSink",
    "ConsoleSink",
    "EventCallback",
    "Sink",
    "SinkEntry",
    "StreamSink",
]
