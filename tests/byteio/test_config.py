# -----------------------------------------------------------------------------
# es7s/bytetab [Configurable byte table writer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
import dataclasses
import unittest

from bytetab.byteio import TableConfig, PRINTABLE_CHAR_MAP


class TableConfigTestCase(unittest.TestCase):
    def test_defaults(self):
        config = TableConfig()

        self.assertEqual(config.column_width, 2)
        self.assertEqual(config.column_count, 8)
        self.assertEqual(config.column_separator, ' ')
        self.assertEqual(config.bytes_per_line, 16)
        self.assertEqual(config.missing_byte_width, 2)
        self.assertTrue(config.show_offset_column)
        self.assertTrue(config.show_text_column)
        self.assertFalse(config.omit_missing_byte_columns)

    def test_bytes_per_line_is_not_negative(self):
        self.assertEqual(TableConfig(column_width=-1).bytes_per_line, 0)
        self.assertEqual(TableConfig(column_count=0).bytes_per_line, 0)

    def test_missing_byte_width_follows_byte_format(self):
        self.assertEqual(TableConfig(byte_format='0x{0:02X}').missing_byte_width, 4)
        self.assertEqual(TableConfig(byte_format='{0:08b}').missing_byte_width, 8)
        self.assertEqual(TableConfig(byte_format='').missing_byte_width, 0)

    def test_replace(self):
        config = TableConfig()

        changed = config.replace(column_count=4)

        self.assertEqual(changed.column_count, 4)
        self.assertEqual(config.column_count, 8)

    def test_immutable(self):
        with self.assertRaises(dataclasses.FrozenInstanceError):
            TableConfig().column_count = 3


class PrintableCharMapTestCase(unittest.TestCase):
    def test_size(self):
        self.assertEqual(len(PRINTABLE_CHAR_MAP), 256)

    def test_mapping(self):
        self.assertEqual(PRINTABLE_CHAR_MAP[0x41], 'A')
        self.assertEqual(PRINTABLE_CHAR_MAP[0x7E], '~')
        self.assertEqual(PRINTABLE_CHAR_MAP[0x20], '.')
        self.assertEqual(PRINTABLE_CHAR_MAP[0x00], '.')
        self.assertEqual(PRINTABLE_CHAR_MAP[0x7F], '.')
        self.assertEqual(PRINTABLE_CHAR_MAP[0xFF], '.')


if __name__ == '__main__':
    unittest.main()
