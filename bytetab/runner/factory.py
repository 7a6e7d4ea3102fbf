# -----------------------------------------------------------------------------
# es7s/bytetab [Configurable byte table writer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from . import AbstractRunner, DemoRunner, VersionRunner, DumpRunner
from .. import ArgumentError
from ..settings import SettingsManager


class RunnerFactory:
    @staticmethod
    def create() -> AbstractRunner:
        settings = SettingsManager.app_settings
        if settings.version:
            return VersionRunner()
        if settings.demo:
            return DemoRunner()
        if settings.column_width < 0 or settings.column_count < 0:
            raise ArgumentError('Column width and count cannot be negative')
        if settings.buffer is not None and settings.buffer <= 0:
            raise ArgumentError(f'Invalid buffer size: {settings.buffer}')
        return DumpRunner()
