# -----------------------------------------------------------------------------
# es7s/bytetab [Configurable byte table writer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from .const import DEFAULT_COLUMN_WIDTH, DEFAULT_COLUMN_COUNT, DEFAULT_COLUMN_SEPARATOR, \
    DEFAULT_OFFSET_FORMAT, DEFAULT_BYTE_FORMAT


@dataclass(frozen=True)
class TableConfig:
    """
    Table layout. All format templates are ``str.format`` templates with one
    positional argument and are expected to produce fixed-width output:

        - ``offset_format`` gets the offset of the first byte in a row;
        - ``byte_format`` gets each byte value;
        - ``text_format``, if not empty, gets the whole printable text of a row
          with trailing blanks stripped.
    """
    row_prefix: str = ''
    row_suffix: str = ''
    column_separator: str = DEFAULT_COLUMN_SEPARATOR
    column_width: int = DEFAULT_COLUMN_WIDTH
    column_count: int = DEFAULT_COLUMN_COUNT
    show_offset_column: bool = True
    show_text_column: bool = True
    offset_format: str = DEFAULT_OFFSET_FORMAT
    byte_format: str = DEFAULT_BYTE_FORMAT
    text_format: str = ''
    omit_missing_byte_columns: bool = False

    @property
    def bytes_per_line(self) -> int:
        return max(0, self.column_width * self.column_count)

    @property
    def missing_byte_width(self) -> int:
        # template is user-defined, so measure it instead of assuming 2 chars
        return len(self.byte_format.format(0))

    def replace(self, **changes) -> TableConfig:
        return dataclasses.replace(self, **changes)
