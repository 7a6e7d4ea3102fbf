# -----------------------------------------------------------------------------
# es7s/bytetab [Configurable byte table writer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------

PRINTABLE_CHARCODES = list(range(0x21, 0x7f))
NON_PRINTABLE_CHAR = '.'

# space is a placeholder for a missing byte, so 0x20 itself is rendered as a dot
MISSING_BYTE_CHAR = ' '

PRINTABLE_CHAR_MAP = ''.join(
    chr(b) if b in PRINTABLE_CHARCODES else NON_PRINTABLE_CHAR
    for b in range(0x00, 0x100)
)

DEFAULT_COLUMN_WIDTH = 2
DEFAULT_COLUMN_COUNT = 8
DEFAULT_COLUMN_SEPARATOR = ' '
DEFAULT_OFFSET_FORMAT = '{0:>4}'
DEFAULT_BYTE_FORMAT = '{0:02X}'
DEFAULT_NEWLINE = '\n'
