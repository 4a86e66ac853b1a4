from .consume_load import ConsumeLoad
from .format_output import FormatOutput
from .parse_load_event import ParseLoadEvent
from .write_output import WriteOutput

__all__ = [
    "ConsumeLoad",
    "FormatOutput",
    "ParseLoadEvent",
    "WriteOutput",
]
