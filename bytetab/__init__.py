# -----------------------------------------------------------------------------
# es7s/bytetab [Configurable byte table writer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from .common import ArgumentError, OutOfRangeError, InvalidStateError
from .version import __version__

import logging
from logging import NullHandler

logging.getLogger(__name__).addHandler(NullHandler())

from .byteio import TableConfig, TableWriter, StringSink, TextIOSink
from .arghelp import AppArgumentParser
from .app import App
