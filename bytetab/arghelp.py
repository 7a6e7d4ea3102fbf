# -----------------------------------------------------------------------------
# es7s/bytetab [Configurable byte table writer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from argparse import HelpFormatter, ArgumentParser, SUPPRESS
from typing import Optional, List

from pytermor import Style, render, cv

from .byteio import Reader
from .byteio.const import DEFAULT_COLUMN_WIDTH, DEFAULT_COLUMN_COUNT, DEFAULT_OFFSET_FORMAT, DEFAULT_BYTE_FORMAT

_STYLE_BOLD = Style(bold=True)
_STYLE_UNDERLINED = Style(underlined=True)
_STYLE_DEFAULT = Style(fg=cv.YELLOW)


class TableHelpFormatter(HelpFormatter):
    """Bold upper-case section headers, multi-line texts kept as is."""
    def __init__(self, prog):
        super().__init__(prog, max_help_position=30, indent_increment=2)

    def start_section(self, heading: Optional[str]):
        super().start_section(render(heading.upper(), _STYLE_BOLD))

    def add_examples(self, examples: List[str]):
        self.start_section('examples')
        self.add_text('\n'.join(examples))
        self.end_section()

    def _fill_text(self, text, width, indent):
        return ''.join(indent + line for line in text.splitlines(keepends=True))


class AppArgumentParser(ArgumentParser):
    def __init__(self):
        def fmt_u(s) -> str:
            return render(str(s), _STYLE_UNDERLINED)

        def fmt_default(s) -> str:
            return render(s, _STYLE_DEFAULT)

        self.examples = [
            'Dump a file as 4 columns of 4 bytes each',
            ''.ljust(4) + f"{fmt_u('%(prog)s')} -w{fmt_u(4)} -c{fmt_u(4)} file.bin",
            '',
            'Dump first 64 bytes of stdin as decimal values, without text column',
            ''.ljust(4) + f"{fmt_u('%(prog)s')} -B{fmt_u(64)} --byte-format '{{0:>4}}' --no-text",
            '',
            'Dump a file as a markdown table',
            ''.ljust(4) + f"{fmt_u('%(prog)s')} --row-prefix '| ' --row-suffix ' |' -s ' | ' --text-format '`{{0}}`' file.bin",
            '',
            'Print the examples of various layouts in markdown',
            ''.ljust(4) + f"{fmt_u('%(prog)s')} --demo",
        ]
        super().__init__(
            description='Configurable byte table writer',
            usage='\n  '.join([
                '%(prog)s [<options>] [<file>]',
                '%(prog)s --demo',
                '%(prog)s --version',
                '%(prog)s --help',
            ]),
            epilog='\n'.join([
                'Format templates are python format strings with one positional argument: the offset for '
                f'{render("--offset-format", _STYLE_BOLD)}, byte value for {render("--byte-format", _STYLE_BOLD)} and '
                f'printable text of a row for {render("--text-format", _STYLE_BOLD)}. Templates should produce output of '
                'the same width for any value, otherwise the columns will not be aligned.',
                '',
                f'Debug mode sets {render("--buffer", _STYLE_BOLD)} setting to {Reader.READ_CHUNK_SIZE_DEBUG} bytes '
                '(however, it can be overriden as usual).',
                '',
                '(c) 2022 A. Shavykin <0.delameter@gmail.com>',
            ]),
            add_help=False,
            formatter_class=TableHelpFormatter,
            prog='bytetab'
        )

        self.add_argument('filename', metavar='<file>', nargs='?', help='file to read from; if empty or "-", read stdin instead')

        modes_group = self.add_argument_group('operating mode')
        modes_group.add_argument('--demo', action='store_true', default=False, help='print layout examples in markdown and exit')
        modes_group.add_argument('-v', '--version', action='store_true', default=False, help='show app version and exit')
        modes_group.add_argument('-h', '--help', action='help', default=SUPPRESS, help='show this help message and exit')

        layout_group = self.add_argument_group('layout options')
        layout_group.add_argument('-w', '--column-width', metavar='<num>', action='store', type=int, default=DEFAULT_COLUMN_WIDTH, help='bytes per column '+fmt_default('[default: %(default)s]'))
        layout_group.add_argument('-c', '--column-count', metavar='<num>', action='store', type=int, default=DEFAULT_COLUMN_COUNT, help='byte columns per row; 0 disables line breaks '+fmt_default('[default: %(default)s]'))
        layout_group.add_argument('-s', '--separator', metavar='<str>', action='store', default=' ', help='column separator '+fmt_default('[default: space]'))
        layout_group.add_argument('--row-prefix', metavar='<str>', action='store', default='', help='string to start every row with')
        layout_group.add_argument('--row-suffix', metavar='<str>', action='store', default='', help='string to end every row with')
        layout_group.add_argument('--offset-format', metavar='<tpl>', action='store', default=DEFAULT_OFFSET_FORMAT, help='offset column template '+fmt_default('[default: %(default)s]'))
        layout_group.add_argument('--byte-format', metavar='<tpl>', action='store', default=DEFAULT_BYTE_FORMAT, help='byte value template '+fmt_default('[default: %(default)s]'))
        layout_group.add_argument('--text-format', metavar='<tpl>', action='store', default='', help='text column template '+fmt_default('[default: verbatim]'))
        layout_group.add_argument('--no-offsets', action='store_true', default=False, help='do not print offset column')
        layout_group.add_argument('--no-text', action='store_true', default=False, help='do not print text column')
        layout_group.add_argument('--omit-missing', action='store_true', default=False, help='do not pad missing bytes of the last row')

        generic_group = self.add_argument_group('generic options')
        generic_group.add_argument('-B', '--max-bytes', metavar='<num>', action='store', type=int, default=0, help='stop after reading <num> bytes '+fmt_default('[default: no limit]'))
        generic_group.add_argument('-f', '--buffer', metavar='<size>', type=int, default=None, help='read buffer size, in bytes '+fmt_default(f'[default: {Reader.READ_CHUNK_SIZE}]'))
        generic_group.add_argument('-d', '--debug', action='count', default=0, help='enable debug mode; can be used from 1 to 4 times, each level increases verbosity (-d|dd|ddd|dddd)')

    def format_help(self) -> str:
        formatter = self._get_formatter()
        formatter.add_examples(self.examples)
        return super().format_help() + formatter.format_help()
