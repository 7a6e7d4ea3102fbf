# -----------------------------------------------------------------------------
# es7s/bytetab [Configurable byte table writer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import sys
from abc import ABCMeta, abstractmethod
from typing import Any, IO, List

from .const import DEFAULT_NEWLINE
from ..common import InvalidStateError


class AbstractSink(metaclass=ABCMeta):
    """
    Appendable character destination. Table writer and hex codec never look
    inside, they only append.
    """
    def __init__(self, newline: str = DEFAULT_NEWLINE):
        self._newline = newline
        self._closed = False

    @property
    def newline(self) -> str:
        return self._newline

    @property
    def closed(self) -> bool:
        return self._closed

    @abstractmethod
    def write(self, s: str): raise NotImplementedError

    def write_format(self, template: str, value: Any):
        self.write(template.format(value))

    def write_line(self):
        self.write(self._newline)

    def close(self):
        self._closed = True


class StringSink(AbstractSink):
    def __init__(self, newline: str = DEFAULT_NEWLINE):
        super().__init__(newline)
        self._buf: List[str] = []

    def write(self, s: str):
        if self._closed:
            raise InvalidStateError('Cannot write to closed sink')
        if s:
            self._buf.append(s)

    def getvalue(self) -> str:
        if len(self._buf) > 1:
            self._buf[:] = [''.join(self._buf)]
        return self._buf[0] if self._buf else ''


class TextIOSink(AbstractSink):
    def __init__(self, io: IO[str], newline: str = DEFAULT_NEWLINE):
        super().__init__(newline)
        self._io = io

    @property
    def io(self) -> IO[str]:
        return self._io

    def write(self, s: str):
        if s:
            self._io.write(s)

    def close(self):
        if self._closed:
            return
        super().close()
        if self._io in (sys.stdout, sys.stderr, sys.__stdout__, sys.__stderr__):
            self._io.flush()
            return
        self._io.close()


def make_sink(target: Any) -> AbstractSink:
    if isinstance(target, AbstractSink):
        return target
    if callable(getattr(target, 'write', None)):
        return TextIOSink(target)
    raise TypeError(f'Expected a sink or a text stream, got {target.__class__.__name__}')
