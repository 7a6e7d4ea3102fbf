# -----------------------------------------------------------------------------
# es7s/bytetab [Configurable byte table writer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
import io
import re
import unittest
from contextlib import redirect_stdout, redirect_stderr

import pytermor

from bytetab import App, __version__
from bytetab.console import Console
from bytetab.settings import SettingsManager


def strip_sgr(s: str) -> str:
    return re.sub(r'\x1b\[[0-9;]*m', '', s)


class AppTestCase(unittest.TestCase):
    def _run(self, *argv: str):
        stdout, stderr = io.StringIO(), io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            with self.assertRaises(SystemExit) as cm:
                App().run(list(argv))
        return cm.exception.code, strip_sgr(stdout.getvalue()), strip_sgr(stderr.getvalue())

    def test_version(self):
        code, stdout, _ = self._run('--version')

        self.assertEqual(code, 0)
        self.assertIn(__version__, stdout)
        self.assertIn(pytermor.__version__, stdout)

    def test_demo(self):
        code, stdout, _ = self._run('--demo')

        self.assertEqual(code, 0)
        self.assertTrue(stdout.startswith('# bytetab\n'))

    def test_help(self):
        code, stdout, _ = self._run('--help')

        self.assertEqual(code, 0)
        self.assertIn('LAYOUT OPTIONS', stdout)
        self.assertIn('Format templates are python format strings', stdout)
        self.assertIn('EXAMPLES', stdout)
        self.assertIn('    bytetab --demo', stdout)

    def test_negative_layout_is_rejected(self):
        code, _, stderr = self._run('--column-width=-1')

        self.assertEqual(code, 1)
        self.assertIn('ArgumentError', stderr)

    def test_missing_file(self):
        code, _, stderr = self._run('/nonexistent/file.bin')

        self.assertEqual(code, 1)
        self.assertIn('FileNotFoundError', stderr)

    def test_missing_file_debug_traceback(self):
        code, stdout, stderr = self._run('-d', '/nonexistent/file.bin')

        self.assertEqual(code, 1)
        self.assertIn('Traceback', stdout)
        self.assertIn('FileNotFoundError', stderr)


class ConsoleTestCase(unittest.TestCase):
    def setUp(self) -> None:
        SettingsManager.init()

    def test_printd_length_only(self):
        self.assertEqual(strip_sgr(Console.printd(b'abc')), 'len 3')

    def test_printd_contents(self):
        SettingsManager.app_settings.debug = 3

        self.assertEqual(strip_sgr(Console.printd(b'\x01\x02')), 'len 2 [01 02]')
        self.assertEqual(strip_sgr(Console.printd(b'')), 'len 0 []')

    def test_format_prefix_with_offset(self):
        prefix = strip_sgr(Console.format_prefix_with_offset(0x1F, Console.STYLE_DEBUG_OFFSET))

        self.assertEqual(prefix, '    0x1f│')
        self.assertEqual(strip_sgr(Console.format_prefix_with_offset(0x100, Console.STYLE_DEBUG_OFFSET)), '   0x100│')


if __name__ == '__main__':
    unittest.main()
