# -----------------------------------------------------------------------------
# es7s/bytetab [Configurable byte table writer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from argparse import Namespace
from typing import Any

from .byteio.config import TableConfig
from .byteio.const import DEFAULT_COLUMN_WIDTH, DEFAULT_COLUMN_COUNT, DEFAULT_COLUMN_SEPARATOR, \
    DEFAULT_OFFSET_FORMAT, DEFAULT_BYTE_FORMAT


class Settings(Namespace):
    def __init__(self, **kwargs: Any):
        super().__init__(**kwargs)

        self.buffer: int|None = None  # auto
        self.byte_format: str = DEFAULT_BYTE_FORMAT
        self.column_count: int = DEFAULT_COLUMN_COUNT
        self.column_width: int = DEFAULT_COLUMN_WIDTH
        self.debug: int = 0
        self.demo: bool = False
        self.filename: str|None = None
        self.max_bytes: int|None = None  # no limit
        self.no_offsets: bool = False
        self.no_text: bool = False
        self.offset_format: str = DEFAULT_OFFSET_FORMAT
        self.omit_missing: bool = False
        self.row_prefix: str = ''
        self.row_suffix: str = ''
        self.separator: str = DEFAULT_COLUMN_SEPARATOR
        self.text_format: str = ''
        self.version: bool = False

        for k, v in kwargs.items():
            setattr(self, k, v)

    def table_config(self) -> TableConfig:
        return TableConfig(
            row_prefix=self.row_prefix,
            row_suffix=self.row_suffix,
            column_separator=self.separator,
            column_width=self.column_width,
            column_count=self.column_count,
            show_offset_column=self.effective_print_offsets,
            show_text_column=not self.no_text,
            offset_format=self.offset_format,
            byte_format=self.byte_format,
            text_format=self.text_format,
            omit_missing_byte_columns=self.omit_missing,
        )

    @property
    def effective_print_offsets(self) -> bool:
        return not self.no_offsets

    @property
    def debug_settings(self) -> bool:
        return self.debug >= 3

    @property
    def debug_buffer_contents(self) -> bool:
        return self.debug >= 3

    @property
    def debug_buffer_contents_full(self) -> bool:
        return self.debug >= 4


class SettingsManager:
    app_settings: Settings

    @staticmethod
    def init(**kwargs: Any):
        SettingsManager.app_settings = Settings(**kwargs)
