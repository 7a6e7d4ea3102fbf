# -----------------------------------------------------------------------------
# es7s/bytetab [Configurable byte table writer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
import unittest

from bytetab import AppArgumentParser
from bytetab.byteio import TableConfig
from bytetab.settings import SettingsManager


class SettingsTestCase(unittest.TestCase):
    def setUp(self) -> None:
        SettingsManager.init()
        self.settings = SettingsManager.app_settings

    def test_default_table_config(self):
        self.assertEqual(self.settings.table_config(), TableConfig())

    def test_init_overrides(self):
        SettingsManager.init(column_count=4, no_text=True)

        config = SettingsManager.app_settings.table_config()

        self.assertEqual(config.column_count, 4)
        self.assertFalse(config.show_text_column)

    def test_parsed_args(self):
        AppArgumentParser().parse_args([
            '-w', '1', '-c', '4', '-s', ', ',
            '--row-prefix', '| ', '--row-suffix', ' |',
            '--byte-format', '0x{0:02X}', '--text-format', '# {0}',
            '--no-offsets', '--omit-missing', '-dd', 'file.bin',
        ], namespace=self.settings)

        config = self.settings.table_config()

        self.assertEqual(self.settings.filename, 'file.bin')
        self.assertEqual(self.settings.debug, 2)
        self.assertEqual(config, TableConfig(
            row_prefix='| ',
            row_suffix=' |',
            column_separator=', ',
            column_width=1,
            column_count=4,
            show_offset_column=False,
            byte_format='0x{0:02X}',
            text_format='# {0}',
            omit_missing_byte_columns=True,
        ))

    def test_debug_levels(self):
        self.settings.debug = 3
        self.assertTrue(self.settings.debug_settings)
        self.assertFalse(self.settings.debug_buffer_contents_full)


if __name__ == '__main__':
    unittest.main()
