# -----------------------------------------------------------------------------
# es7s/bytetab [Configurable byte table writer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from .const import PRINTABLE_CHAR_MAP, PRINTABLE_CHARCODES, MISSING_BYTE_CHAR, NON_PRINTABLE_CHAR
from .sink import AbstractSink, StringSink, TextIOSink, make_sink
from .config import TableConfig
from .writer import TableWriter

from .reader import Reader
