# -----------------------------------------------------------------------------
# es7s/bytetab [Configurable byte table writer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
import io
import sys
import unittest

from bytetab import InvalidStateError
from bytetab.byteio.sink import StringSink, TextIOSink, make_sink


class StringSinkTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.sink = StringSink()

    def test_write(self):
        self.sink.write('ab')
        self.sink.write('')
        self.sink.write_format('{0:>3}', 7)
        self.sink.write_line()

        self.assertEqual(self.sink.getvalue(), 'ab  7\n')

    def test_custom_newline(self):
        sink = StringSink(newline='\r\n')

        sink.write('x')
        sink.write_line()

        self.assertEqual(sink.getvalue(), 'x\r\n')

    def test_value_available_after_close(self):
        self.sink.write('abc')

        self.sink.close()
        self.sink.close()

        self.assertTrue(self.sink.closed)
        self.assertEqual(self.sink.getvalue(), 'abc')

    def test_write_after_close(self):
        self.sink.close()

        with self.assertRaises(InvalidStateError):
            self.sink.write('x')


class TextIOSinkTestCase(unittest.TestCase):
    def test_write(self):
        buf = io.StringIO()
        sink = TextIOSink(buf)

        sink.write('a')
        sink.write_format('{0:02X}', 10)
        sink.write_line()

        self.assertEqual(buf.getvalue(), 'a0A\n')

    def test_close_closes_stream(self):
        buf = io.StringIO()
        sink = TextIOSink(buf)

        sink.close()

        self.assertTrue(sink.closed)
        self.assertTrue(buf.closed)

    def test_close_keeps_stdout_open(self):
        sink = TextIOSink(sys.stdout)

        sink.close()

        self.assertTrue(sink.closed)
        self.assertFalse(sys.stdout.closed)


class MakeSinkTestCase(unittest.TestCase):
    def test_sink_is_returned_as_is(self):
        sink = StringSink()
        self.assertIs(make_sink(sink), sink)

    def test_stream_is_wrapped(self):
        buf = io.StringIO()

        sink = make_sink(buf)

        self.assertIsInstance(sink, TextIOSink)
        self.assertIs(sink.io, buf)

    def test_invalid_target(self):
        with self.assertRaises(TypeError):
            make_sink(42)


if __name__ == '__main__':
    unittest.main()
