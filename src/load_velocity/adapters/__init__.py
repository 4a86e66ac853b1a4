from .input_source import FileInputSource
from .log_sinks import JsonlLogSink, NullLogSink, StdoutLogSink
from .output_sink import FileOutputSink

# Public adapter exports make wiring simpler.
__all__ = [
    "FileInputSource",
    "FileOutputSink",
    "JsonlLogSink",
    "NullLogSink",
    "StdoutLogSink",
]
