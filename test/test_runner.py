import io
import os
import unittest
from unittest import mock

from librarytree.errors import ToolLaunchError
from librarytree.render import ASCII_GLYPHS, UTF8_GLYPHS
from librarytree.runner import Runner, main

from toolfakes import FakeTools, TEST_BINARY, TEST_LIBC, foo_tools, \
    readelf_needed

TOOL_ARGS = ['--ldd', 'ldd', '--elf-tool', 'readelf']

def simple_tools():
    fake = FakeTools()
    fake.add(['ldd', '/bin/foo'],
             '\tlibc.so.6 => /lib/libc.so.6 (0x00007f0000000000)\n'
             '\tlibm.so.6 => not found\n')
    fake.add(['readelf', '-d', '/bin/foo'],
             readelf_needed('libc.so.6', 'libm.so.6'))
    fake.add(['readelf', '-d', '/lib/libc.so.6'], readelf_needed())
    fake.add(['ldd', '/bin/bar'],
             '\tlibc.so.6 => /lib/libc.so.6 (0x00007f0000100000)\n')
    fake.add(['readelf', '-d', '/bin/bar'], readelf_needed('libc.so.6'))
    return fake

class TestRunner(unittest.TestCase):

    def run_main(self, argv, fake):
        out = io.StringIO()
        err = io.StringIO()
        with mock.patch('librarytree.tools.run_tool', fake), \
                mock.patch('sys.stdout', out), mock.patch('sys.stderr', err):
            try:
                status = main(argv)
            except SystemExit as exit:
                status = exit.code
        return status, out.getvalue(), err.getvalue()

    def test_0_simple_ascii_full(self):
        status, out, _ = self.run_main(['-A', '-f'] + TOOL_ARGS + ['/bin/foo'],
                                       simple_tools())
        self.assertEqual(status, 0)
        self.assertEqual(out,
                         '/bin/foo\n'
                         '|_libc.so.6 => /lib/libc.so.6 0x00007f0000000000\n'
                         '\\_libm.so.6 => not found\n')

    def test_0_two_files_separated(self):
        status, out, _ = self.run_main(['--ascii'] + TOOL_ARGS +
                                       ['/bin/foo', '/bin/bar'],
                                       simple_tools())
        self.assertEqual(status, 0)
        self.assertEqual(out,
                         '/bin/foo\n'
                         '|_libc.so.6 => /lib/libc.so.6 0x00007f0000000000\n'
                         '\\_libm.so.6 => not found\n'
                         '--\n'
                         '/bin/bar\n'
                         '\\_libc.so.6 => /lib/libc.so.6 0x00007f0000100000\n')
        self.assertEqual(out.count('--\n'), 1)
        self.assertFalse(out.endswith('--\n'))

    def test_0_pruned_by_default(self):
        status, out, _ = self.run_main(['-A'] + TOOL_ARGS + [TEST_BINARY],
                                       foo_tools())
        self.assertEqual(status, 0)
        self.assertEqual(out.count('libc.so.6 =>'), 1)
        status, out, _ = self.run_main(['-A', '--full'] + TOOL_ARGS +
                                       [TEST_BINARY], foo_tools())
        self.assertEqual(out.count('libc.so.6 =>'), 3)
        self.assertIn(TEST_LIBC, out)
        self.assertNotIn('linux-vdso', out)

    def test_1_glyph_selection(self):
        with mock.patch('librarytree.tools.run_tool', simple_tools()):
            self.assertIs(Runner(['-U', '/bin/foo'],
                                 out=io.StringIO()).glyphs, UTF8_GLYPHS)
            self.assertIs(Runner(['-U', '-A', '/bin/foo'],
                                 out=io.StringIO()).glyphs, ASCII_GLYPHS)
            self.assertIs(Runner(['-A', '-U', '/bin/foo'],
                                 out=io.StringIO()).glyphs, UTF8_GLYPHS)
            # Not a terminal
            self.assertIs(Runner(['/bin/foo'], out=io.StringIO()).glyphs,
                          ASCII_GLYPHS)
            terminal = mock.Mock()
            terminal.isatty.return_value = True
            self.assertIs(Runner(['/bin/foo'], out=terminal).glyphs,
                          UTF8_GLYPHS)

    def test_1_utf8_output(self):
        status, out, _ = self.run_main(['-U'] + TOOL_ARGS + ['/bin/foo'],
                                       simple_tools())
        self.assertEqual(status, 0)
        self.assertEqual(out,
                         '/bin/foo\n'
                         '├─libc.so.6 => /lib/libc.so.6 0x00007f0000000000\n'
                         '└─libm.so.6 => not found\n')

    def test_2_unknown_option(self):
        fake = simple_tools()
        status, out, err = self.run_main(['-z', '/bin/foo'], fake)
        self.assertEqual(status, 1)
        self.assertIn('-z', err)
        self.assertEqual(out, '')
        self.assertIn('invalid option -- \'-z\'', err)
        self.assertEqual(fake.calls, [])

    def test_2_unknown_option_without_file(self):
        fake = simple_tools()
        status, out, err = self.run_main(['-z'], fake)
        self.assertEqual(status, 1)
        self.assertIn('invalid option -- \'-z\'', err)
        self.assertIn('usage:', err)
        self.assertEqual(out, '')
        self.assertEqual(fake.calls, [])

    def test_2_unknown_option_between_files(self):
        fake = simple_tools()
        status, _, err = self.run_main(['/bin/foo', '--bogus', '/bin/bar'],
                                       fake)
        self.assertEqual(status, 1)
        self.assertIn('invalid option -- \'--bogus\'', err)
        self.assertEqual(fake.calls, [])

    def test_2_options_after_files(self):
        status, out, _ = self.run_main(TOOL_ARGS + ['/bin/foo', '-A', '-f'],
                                       simple_tools())
        self.assertEqual(status, 0)
        self.assertTrue(out.startswith('/bin/foo\n|_libc.so.6'))

    def test_2_missing_file(self):
        status, _, err = self.run_main(['-A'], simple_tools())
        self.assertEqual(status, 1)
        self.assertIn('usage:', err)

    def test_2_help(self):
        status, out, _ = self.run_main(['--help'], simple_tools())
        self.assertEqual(status, 0)
        for option in ('--full', '--ascii', '--utf8', '--help'):
            self.assertIn(option, out)
        self.assertIn('display this help and exit', out)
        self.assertNotIn('show this help message', out)

    def test_2_unknown_elf_tool_in_environment(self):
        with mock.patch.dict(os.environ, {'LIBRARYTREE_ELF_TOOL': 'nm'}):
            status, _, err = self.run_main(['/bin/foo'], simple_tools())
        self.assertEqual(status, 1)
        self.assertIn('nm', err)

    def test_3_ldd_failure_stops_run(self):
        fake = simple_tools()
        fake.add(['ldd', '/bin/static'], returncode=1,
                 stderr='\tnot a dynamic executable\n')
        with self.assertLogs(level='ERROR') as logs:
            status, out, _ = self.run_main(['-A'] + TOOL_ARGS +
                                           ['/bin/static', '/bin/foo'], fake)
        self.assertEqual(status, 1)
        self.assertEqual(out, '')
        self.assertIn('not a dynamic executable', logs.output[0])
        self.assertNotIn(['ldd', '/bin/foo'], fake.calls)

    def test_3_launch_failure(self):
        def fail(cmdline):
            raise ToolLaunchError(cmdline[0], 'No such file or directory')
        with self.assertLogs(level='ERROR') as logs:
            status, _, _ = self.run_main(TOOL_ARGS + ['/bin/foo'], fail)
        self.assertEqual(status, 1)
        self.assertIn('cannot execute \'ldd\'', logs.output[0])

    def test_3_unresolved_dependency(self):
        fake = simple_tools()
        fake.add(['readelf', '-d', '/bin/foo'],
                 readelf_needed('libc.so.6', 'libghost.so'))
        with self.assertLogs(level='ERROR') as logs:
            status, out, _ = self.run_main(['-A'] + TOOL_ARGS + ['/bin/foo'],
                                           fake)
        self.assertEqual(status, 1)
        self.assertEqual(out, '')
        self.assertIn('libghost.so', logs.output[0])

    def test_3_failure_after_first_file(self):
        fake = simple_tools()
        fake.add(['ldd', '/bin/bar'], returncode=1, stderr='ldd: boom\n')
        with self.assertLogs(level='ERROR'):
            status, out, _ = self.run_main(['-A'] + TOOL_ARGS +
                                           ['/bin/foo', '/bin/bar'], fake)
        self.assertEqual(status, 1)
        self.assertTrue(out.startswith('/bin/foo\n'))
        self.assertTrue(out.endswith('--\n'))


if __name__ == '__main__':
    unittest.main()
