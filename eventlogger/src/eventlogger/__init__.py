"""
Event logger package.

Records timestamped events, each with an originator address and a
free-text message, through one contract with interchangeable backends:
events can be discarded, printed to standard output, appended to a text
file, or stored in an indexed embedded database.
"""

from .base import BaseEventLogger  # noqa: F401
from .errors import EventLoggerError  # noqa: F401
from .event import Event, format_line  # noqa: F401
from .factory import create_event_logger, get_default_event_logger  # noqa: F401
from .loggers import (  # noqa: F401
    NULL_LASTN_RESPONSE,
    STDOUT_LASTN_RESPONSE,
    DBEventLogger,
    NullEventLogger,
    StdoutEventLogger,
    TextfileEventLogger,
)
