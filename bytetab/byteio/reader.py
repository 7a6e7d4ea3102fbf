# -----------------------------------------------------------------------------
# es7s/bytetab [Configurable byte table writer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import sys
from typing import Callable, IO

from pytermor import Style, render

from ..console import ConsoleDebugBuffer, Console
from ..settings import SettingsManager


class Reader:
    READ_CHUNK_SIZE: int = 4096
    READ_CHUNK_SIZE_DEBUG: int = 128

    def __init__(self, filename: str|None, read_callback: Callable[[bytes, int, bool], None]):
        self._filename = filename
        self._io: IO|None = None
        self._offset = 0
        self._chunk_size = self._get_chunk_size()
        self._read_callback = read_callback
        self._debug_buffer = ConsoleDebugBuffer('reader')

    @property
    def reading_stdin(self) -> bool:
        return not self._filename or self._filename == '-'

    def read(self):
        self._open()
        self._debug_buffer.write(2, f'Read buffer: size {_bold(self._chunk_size)}')

        limit: int|None = SettingsManager.app_settings.max_bytes or None
        try:
            while limit is None or self._offset < limit:
                chunk = self._io.read(self._chunk_size)
                if not chunk:
                    break
                if limit is not None and self._offset + len(chunk) > limit:
                    chunk = chunk[:limit - self._offset]
                    self._debug_buffer.write(2, f'Input cropped to {_bold(limit)} bytes', offset=self._offset)

                self._debug_buffer.write(3, Console.printd(chunk), offset=self._offset)
                self._read_callback(chunk, self._offset, False)
                self._offset += len(chunk)

            self._debug_buffer.write(1, 'Input finished', offset=self._offset)
        except KeyboardInterrupt:
            self._debug_buffer.write(1, 'Interrupted', offset=self._offset)
        finally:
            self.close()
        self._read_callback(b'', self._offset, True)

    def _open(self):
        if self.reading_stdin:
            self._io = sys.stdin.buffer
            self._debug_buffer.write(1, 'Reading from stdin')
        else:
            self._io = open(self._filename, 'rb')
            self._debug_buffer.write(1, f'Opened file: {_bold(self._filename)}')

    def _get_chunk_size(self) -> int:
        if SettingsManager.app_settings.buffer:
            return int(SettingsManager.app_settings.buffer)
        if SettingsManager.app_settings.debug > 0:
            return self.READ_CHUNK_SIZE_DEBUG
        return self.READ_CHUNK_SIZE

    def close(self):
        if self._io and not self.reading_stdin and not self._io.closed:
            self._io.close()


def _bold(v) -> str:
    return render(str(v), Style(bold=True))
