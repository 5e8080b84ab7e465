"""Event logger backends.

Each module provides one implementation of
:class:`eventlogger.base.BaseEventLogger`.
"""

from .db_logger import DBEventLogger  # noqa: F401
from .null_logger import NULL_LASTN_RESPONSE, NullEventLogger  # noqa: F401
from .stdout_logger import STDOUT_LASTN_RESPONSE, StdoutEventLogger  # noqa: F401
from .textfile_logger import BLOCK_SIZE, TextfileEventLogger  # noqa: F401
