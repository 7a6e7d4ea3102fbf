# -----------------------------------------------------------------------------
# es7s/bytetab [Configurable byte table writer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import sys
from typing import Any, Dict, List, NamedTuple, Tuple

from . import AbstractRunner
from ..byteio import TableWriter, TextIOSink

ALL_BYTES = bytes(range(0x100))
SAMPLE_BYTES = ALL_BYTES[110:150]


class DemoSection(NamedTuple):
    title: str
    options: Dict[str, Any]
    data: bytes = SAMPLE_BYTES
    data_expr: str = 'data'
    fence: str = '```'
    before: Tuple[str, ...] = ()
    after: Tuple[str, ...] = ()


SECTIONS = [
    DemoSection('Printing all bytes', {}, ALL_BYTES, data_expr='bytes(range(256))'),
    DemoSection('Printing a table where the last row isn\'t full', {}),
    DemoSection('Change layout to 3 columns of 3 bytes', {'column_count': 3, 'column_width': 3}),
    DemoSection('Remove the offset column', {'show_offset_column': False}),
    DemoSection('Remove the text column', {'show_text_column': False}),
    DemoSection('Change hex to lower case', {'byte_format': '{0:02x}'}),
    DemoSection('Print bytes as decimal', {'byte_format': '{0:>4}'}),
    DemoSection('Print bytes as binary', {'byte_format': '{0:08b}', 'column_width': 1, 'column_count': 4}),
    DemoSection('Change column separator', {'column_separator': ' | '}),
    DemoSection('Prefix every row with >>>', {'row_prefix': '>>> '}),
    DemoSection('End every row with <<<', {'row_suffix': ' <<<'}),
    DemoSection(
        'Make it a markdown table',
        {'column_separator': ' | ', 'row_prefix': '| ', 'row_suffix': ' |', 'text_format': '`{0}`'},
        fence='',
        before=(
            '| offset | byte 0-1 | byte 2-3 | byte 4-5 | byte 6-7 | byte 8-9 | byte 10-11 | byte 12-13 | byte 14-15 | text |',
            '|--------|----------|----------|----------|----------|----------|------------|------------|------------|------|',
        ),
    ),
    DemoSection(
        'Generate some code',
        {
            'row_prefix': '    ',
            'show_offset_column': False,
            'column_separator': ', ',
            'column_width': 1,
            'byte_format': '0x{0:02X}',
            'text_format': '# {0}',
            'omit_missing_byte_columns': True,
        },
        SAMPLE_BYTES[:-2],
        data_expr='data[:-2]',
        fence='```python',
        before=('data = bytes([',),
        after=('])',),
    ),
]


class DemoRunner(AbstractRunner):
    """
    Prints markdown document with examples of table layouts, each one as
    a code snippet followed by the output it produces.
    """
    def __init__(self, output=None):
        self._output = output or sys.stdout

    def run(self):
        self._print('# bytetab')
        self._print()
        self._print('## TableWriter')
        self._print()
        for section in SECTIONS:
            self._print_section(section)

    def _print_section(self, section: DemoSection):
        self._print(f'#### {section.title}')
        self._print()
        self._print('```python')
        self._print('\n'.join(self._format_snippet(section)))
        self._print('```')
        self._print('Output:')
        self._print()

        if section.fence:
            self._print(section.fence)
        for line in section.before:
            self._print(line)
        with TableWriter(TextIOSink(self._output), **section.options) as writer:
            writer.write_many(section.data)
        for line in section.after:
            self._print(line)
        if section.fence:
            self._print('```')
        self._print()

    def _format_snippet(self, section: DemoSection) -> List[str]:
        lines = [f'print({line!r})' for line in section.before]
        if section.options:
            lines.append('with TableWriter(sys.stdout,')
            lines.extend(f'                 {k}={v!r},' for k, v in section.options.items())
            lines.append('                 ) as writer:')
        else:
            lines.append('with TableWriter(sys.stdout) as writer:')
        lines.append(f'    writer.write_many({section.data_expr})')
        lines.extend(f'print({line!r})' for line in section.after)
        return lines

    def _print(self, s: str = ''):
        self._output.write(s + '\n')
