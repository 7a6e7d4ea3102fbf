# -----------------------------------------------------------------------------
# es7s/bytetab [Configurable byte table writer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import sys

from . import AbstractRunner
from ..byteio import Reader, TableWriter, TextIOSink
from ..console import ConsoleDebugBuffer
from ..settings import SettingsManager


class DumpRunner(AbstractRunner):
    def __init__(self, output=None):
        self._output = output or sys.stdout

    def run(self):
        app_settings = SettingsManager.app_settings
        self._debug_buffer = ConsoleDebugBuffer('dump')
        self._writer = TableWriter(TextIOSink(self._output), app_settings.table_config())
        self._debug_buffer.write(2, f'Bytes per line: {self._writer.bytes_per_line}')

        self._reader = Reader(app_settings.filename, self._process_chunk)
        with self._writer:
            self._reader.read()

    def _process_chunk(self, raw_input: bytes, offset: int, finish: bool):
        self._writer.write_many(raw_input)
        self._debug_buffer.write(3, f'State: {self._writer!r}', offset=offset)
        if finish:
            self._writer.complete_row()
