# -----------------------------------------------------------------------------
# es7s/bytetab [Configurable byte table writer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import sys
import traceback
from abc import ABCMeta, abstractmethod
from typing import Any, List

from pytermor import Style, render, cv

from . import ArgumentError
from .settings import SettingsManager, Settings


class AbstractConsoleBuffer(metaclass=ABCMeta):
    @abstractmethod
    def flush(self): raise NotImplementedError


class ConsoleDebugBuffer(AbstractConsoleBuffer):
    def __init__(self, key_prefix: str = None, prefix_offset_style: Style = None):
        self._buf = ''

        self._default_prefix = Console.format_prefix(key_prefix, Console.STYLE_DEBUG_KEY) if key_prefix else None
        self._prefix_style = prefix_offset_style or Console.STYLE_DEBUG_OFFSET

        Console.register_buffer(self)

    def write(self, level: int, s: str, offset: int = None, end='\n', no_default_prefix=False, flush=True):
        if SettingsManager.app_settings.debug < level:
            return

        prefix = ''
        if isinstance(offset, int):
            prefix = Console.format_prefix_with_offset(offset, self._prefix_style)
        elif self._default_prefix is not None:
            if not no_default_prefix:
                prefix = self._default_prefix

        self._buf += f'{prefix}{s}{end}'
        if flush:
            self.flush()

    def flush(self):
        if not self._buf:
            return

        Console.debug(self._buf, end='')
        self._buf = ''


class Console:
    STYLE_ERROR_TRACE = Style(fg=cv.RED)
    STYLE_ERROR = Style(fg=cv.HI_RED)
    STYLE_BOLD = Style(bold=True)
    STYLE_SEPARATOR = Style(fg=cv.GRAY)
    STYLE_DEBUG_KEY = Style(fg=cv.GRAY, bg=cv.BLACK)
    STYLE_DEBUG_OFFSET = Style(fg=cv.YELLOW, bg=cv.BLACK)
    STYLE_SETTING_CHANGED = Style(fg=cv.GREEN)
    STYLE_SETTING_DEFAULT = Style(fg=cv.YELLOW)
    MAIN_PREFIX_LEN = 8

    buffers: List[AbstractConsoleBuffer] = list()

    @staticmethod
    def register_buffer(buffer: AbstractConsoleBuffer):
        Console.buffers.append(buffer)

    @staticmethod
    def flush_buffers():
        for buffer in Console.buffers:
            buffer.flush()

    @staticmethod
    def on_exception(e: Exception):
        Console.flush_buffers()

        if isinstance(e, ArgumentError):
            Console.error(f'{e.__class__.__name__}: {e!s}')
            Console.info(e.USAGE_MSG)

        elif SettingsManager.app_settings.debug > 0:
            tb_lines = [line.rstrip('\n')
                        for line
                        in traceback.format_exception(e.__class__, e, e.__traceback__)]
            error = tb_lines.pop(-1)
            Console.print(render('\n'.join(tb_lines), Console.STYLE_ERROR_TRACE))
            Console.error(error)

        else:
            Console.error(f'{e.__class__.__name__}: {e!s}')
            Console.info("Run the app with '" + render('--debug', Console.STYLE_BOLD) + "' argument to see the details")

    @staticmethod
    def debug(s: str = '', end='\n'):
        Console.print(s, end=end, file=sys.stderr)

    @staticmethod
    def info(s: str = '', end='\n'):
        Console.print(s, end=end)

    @staticmethod
    def error(s: str = '', end='\n'):
        Console.print(render('ERROR: ', Style(Console.STYLE_ERROR, bold=True)) +
                      render(s, Console.STYLE_ERROR), end=end, file=sys.stderr)

    @staticmethod
    def get_separator() -> str:
        return render('│', Console.STYLE_SEPARATOR)

    @staticmethod
    def debug_settings():
        app_settings = SettingsManager.app_settings
        if not app_settings.debug_settings:
            return

        debug_buffer = ConsoleDebugBuffer()
        default_settings = Settings()
        attrs = sorted(attr for attr in vars(app_settings) if not attr.startswith('_'))
        max_attr_len = max(len(attr) for attr in attrs) + 3

        debug_buffer.write(3, render('Settings'.upper().ljust(max_attr_len), Console.STYLE_BOLD) + Console.get_separator())
        for attr in attrs:
            app_value = getattr(app_settings, attr)
            default_value = getattr(default_settings, attr, None)
            if app_value != default_value:
                values = render(f'{app_value!r}', Console.STYLE_SETTING_CHANGED) + ' ' + \
                         render(f'[{default_value!r}]', Console.STYLE_SEPARATOR)
            else:
                values = render(f'{default_value!r}', Console.STYLE_SETTING_DEFAULT)
            debug_buffer.write(3, attr.rjust(max_attr_len) + Console.get_separator() + values)

    @staticmethod
    def format_prefix(label: str, style: Style) -> str:
        return render(f'{label!s:>{Console.MAIN_PREFIX_LEN}.{Console.MAIN_PREFIX_LEN}s}', style) + Console.get_separator()

    @staticmethod
    def format_prefix_with_offset(offset: int, style: Style) -> str:
        return Console.format_prefix(f'0x{offset:x}', style)

    @staticmethod
    def print(s: str, end='\n', **kwargs):
        print(s, end=end, **kwargs)

    @staticmethod
    def printd(v: Any, max_input_len: int = 5) -> str:
        if SettingsManager.app_settings.debug_buffer_contents_full:
            max_input_len = sys.maxsize

        if isinstance(v, (bytes, bytearray)):
            result = 'len ' + render(str(len(v)), Console.STYLE_BOLD)
            if not SettingsManager.app_settings.debug_buffer_contents:
                return result

            if len(v) == 0:
                return f'{result} ' + render('[]', Console.STYLE_SEPARATOR)
            hexed = ' '.join(f'{b:02x}' for b in v)
            cut = 3 * (max_input_len - 1)
            if len(hexed) > cut:
                hexed = hexed[:cut] + '.. ' + hexed[-2:]
            return f'{result} ' + render(f'[{hexed}]', Console.STYLE_SEPARATOR)

        return f'{v!s}'
