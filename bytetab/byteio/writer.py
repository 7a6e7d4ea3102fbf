# -----------------------------------------------------------------------------
# es7s/bytetab [Configurable byte table writer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import logging
from typing import Any, Iterable, List, Sequence

from .config import TableConfig
from .const import PRINTABLE_CHAR_MAP, MISSING_BYTE_CHAR
from .sink import AbstractSink, StringSink, make_sink
from ..common import InvalidStateError, verify_offset_and_count

logger = logging.getLogger(__name__)


class TableWriter:
    """
    Writes bytes as a table, incrementally. By default the first column holds
    the byte offset, then 8 columns of 2 hex-formatted bytes, then a column
    with printable representation of the bytes::

           0 0001 0203 0405 0607 0809 0A0B 0C0D 0E0F ................
          16 1011 1213 1415 1617 1819 1A1B 1C1D 1E1F ................
          32 2021 2223 2425 2627 2829 2A2B 2C2D 2E2F .!"#$%&'()*+,-./
          48 3031 3233 3435 3637 3839 3A3B 3C3D 3E3F 0123456789:;<=>?

    Bytes can be fed one by one or in sequences of any size across multiple
    calls; a row is emitted as soon as it is full. Incomplete last row is
    padded with blanks by :meth:`complete_row` or :meth:`close`.

    Without a ``sink`` the writer accumulates the text in memory, see
    :meth:`current_text`. Not thread-safe.
    """

    def __init__(self, sink: Any = None, config: TableConfig = None, *, owns_sink: bool = False, **overrides):
        config = config or TableConfig()
        if overrides:
            config = config.replace(**overrides)
        self._config: TableConfig = config

        self._has_internal_sink = sink is None
        if self._has_internal_sink:
            self._sink: AbstractSink = StringSink()
            self._owns_sink = True
        else:
            self._sink: AbstractSink = make_sink(sink)
            self._owns_sink = owns_sink

        self._bytes_per_line = config.bytes_per_line
        self._text_buf: List[str] = [MISSING_BYTE_CHAR] * self._bytes_per_line
        self._offset = 0
        self._bytes_in_row = 0
        self._bytes_in_column = 0
        self._filling_row = False
        self._boundary_written = False
        self._closed = False

    def __enter__(self) -> TableWriter:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}[offset={self._offset}, row={self._bytes_in_row}/{self._bytes_per_line}, ' \
               f'col={self._bytes_in_column}/{self._config.column_width}{", closed" if self._closed else ""}]'

    @property
    def config(self) -> TableConfig:
        return self._config

    @property
    def sink(self) -> AbstractSink:
        return self._sink

    @property
    def owns_sink(self) -> bool:
        return self._owns_sink

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def bytes_in_row(self) -> int:
        return self._bytes_in_row

    @property
    def bytes_in_column(self) -> int:
        return self._bytes_in_column

    @property
    def bytes_per_line(self) -> int:
        return self._bytes_per_line

    @property
    def filling_row(self) -> bool:
        return self._filling_row

    @property
    def closed(self) -> bool:
        return self._closed

    def write_byte(self, b: int):
        if self._closed:
            raise InvalidStateError('Cannot write to closed table writer')
        if not isinstance(b, int) or not 0 <= b <= 0xFF:
            raise ValueError(f'Byte value out of range: {b!r}')
        self._write(b)

    def write_many(self, data: Iterable[int]):
        for b in data:
            self.write_byte(b)

    def write(self, data: Sequence[int], offset: int = 0, count: int = None):
        if count is None:
            count = len(data) - offset
        verify_offset_and_count(len(data), offset, count)
        self.write_many(data[offset:offset + count])

    def complete_row(self):
        """
        Write the remaining byte columns and the text column of the current
        row, rendering missing bytes as blanks. Does nothing at a row boundary
        or when rows are unbounded (``bytes_per_line`` is 0).
        """
        if self._bytes_per_line == 0 or self._bytes_in_row == 0:
            return

        logger.debug('Completing row with %d missing byte(s)', self._bytes_per_line - self._bytes_in_row)
        try:
            self._filling_row = True
            while self._bytes_in_row != 0:
                self._write(0)
        finally:
            self._filling_row = False

    def reset(self):
        """
        Set byte offset to zero to start a new table. Output already written
        to the sink stays as is; consider completing the row first.
        """
        logger.debug('Resetting at offset %d', self._offset)
        self._offset = 0
        self._reset_line_counters()
        self._boundary_written = False
        self._clear_text_buf()

    def close(self):
        if self._closed:
            return
        self._closed = True
        try:
            self.complete_row()
        finally:
            logger.debug('Closed at offset %d', self._offset)
            if self._owns_sink:
                self._sink.close()

    def current_text(self) -> str:
        if not self._has_internal_sink:
            raise InvalidStateError('Table writer does not own an in-memory sink')
        return self._sink.getvalue()

    def _write(self, b: int):
        self._write_row_start()
        self._try_write_offset_column()
        self._write_byte(b)
        if self._should_start_new_line():
            self._reset_line_counters()
            self._try_write_text_column()
            self._write_row_end()
        else:
            self._try_write_byte_column_separator()

    def _write_row_start(self):
        if self._bytes_in_row == 0 and self._config.row_prefix:
            self._sink.write(self._config.row_prefix)

    def _try_write_offset_column(self):
        if self._config.show_offset_column and self._bytes_in_row == 0:
            self._sink.write_format(self._config.offset_format, self._offset)
            self._sink.write(self._config.column_separator)

    def _write_byte(self, b: int):
        if self._filling_row:
            self._set_text_char(MISSING_BYTE_CHAR)
            if not self._config.omit_missing_byte_columns:
                self._sink.write(' ' * self._config.missing_byte_width)
        else:
            self._set_text_char(PRINTABLE_CHAR_MAP[b])
            self._sink.write_format(self._config.byte_format, b)
        self._offset += 1
        self._bytes_in_row += 1

    def _set_text_char(self, c: str):
        # unbounded rows have no text buffer
        if 0 <= self._bytes_in_row < len(self._text_buf):
            self._text_buf[self._bytes_in_row] = c

    def _should_start_new_line(self) -> bool:
        if self._bytes_per_line <= 0:
            return False
        return self._bytes_in_row >= self._bytes_per_line

    def _is_omitting(self) -> bool:
        return self._filling_row and self._config.omit_missing_byte_columns

    def _try_write_text_column(self):
        if not self._config.show_text_column:
            self._clear_text_buf()
            return

        # omitted padding keeps the separator written after the last present byte, if any
        if not (self._is_omitting() and self._boundary_written):
            self._sink.write(self._config.column_separator)

        text = ''.join(self._text_buf)
        if self._config.text_format:
            trimmed = text.rstrip(MISSING_BYTE_CHAR)
            self._sink.write_format(self._config.text_format, trimmed)
            self._sink.write(MISSING_BYTE_CHAR * (len(text) - len(trimmed)))
        else:
            self._sink.write(text)

        self._clear_text_buf()

    def _write_row_end(self):
        if self._config.row_suffix:
            self._sink.write(self._config.row_suffix)
        self._sink.write_line()

    def _try_write_byte_column_separator(self):
        if self._config.column_width <= 0:
            return

        self._bytes_in_column += 1
        if self._bytes_in_column < self._config.column_width:
            if not self._filling_row:
                self._boundary_written = False
            return

        self._bytes_in_column = 0
        if self._is_omitting():
            return
        self._sink.write(self._config.column_separator)
        self._boundary_written = True

    def _reset_line_counters(self):
        self._bytes_in_row = 0
        self._bytes_in_column = 0

    def _clear_text_buf(self):
        for idx in range(len(self._text_buf)):
            self._text_buf[idx] = MISSING_BYTE_CHAR
