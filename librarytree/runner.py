# Copyright 2024, librarytree developers
#
# This file is part of librarytree.
#
# librarytree is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# librarytree is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with librarytree.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import logging
import sys

from librarytree.common.datatypes import Library
from librarytree.errors import LibraryTreeError
from librarytree.ldd import LDD_VARIABLE, parse_ldd
from librarytree.pruner import full_edges, prune
from librarytree.render import print_tree, select_glyphs
from librarytree.tagreader import ELF_TOOL_VARIABLE, TAG_READERS, \
    get_tag_reader

class ArgumentParser(argparse.ArgumentParser):

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, '{}: error: {}\n'.format(self.prog, message))


class Runner():

    def __init__(self, argv=None, out=None):
        self.out = out if out is not None else sys.stdout
        self.parse_arguments(argv)
        try:
            self.tag_reader = get_tag_reader(self.args.elf_tool)
        except ValueError as err:
            self.parser.error(str(err))

        utf8 = self.args.utf8
        if utf8 is None:
            utf8 = self.out.isatty()
        self.glyphs = select_glyphs(utf8)

    def parse_arguments(self, argv):
        parser = ArgumentParser(add_help=False, description='Print the tree ' \
            'of shared library dependencies of ELF executables and libraries.')
        parser.add_argument('files', metavar='FILE', type=str, nargs='*',
                            help='the executables or libraries to inspect')
        parser.add_argument('-f', '--full', action='store_true',
                            help='allow libraries to be shown more than once')
        parser.add_argument('-A', '--ascii', dest='utf8', action='store_false',
                            help='use ASCII line-drawing characters')
        parser.add_argument('-U', '--utf8', dest='utf8', action='store_true',
                            help='use UTF-8 line-drawing characters')
        parser.add_argument('-h', '--help', action='help',
                            help='display this help and exit')
        parser.add_argument('-v', '--verbose', action='store_true',
                            help='verbose output')
        parser.add_argument('--debug', action='store_true',
                            help=argparse.SUPPRESS)
        parser.add_argument('--ldd', action='store',
                            help='dynamic linker inspection command ' \
                            '(default: ${} or ldd)'.format(LDD_VARIABLE))
        parser.add_argument('--elf-tool', action='store',
                            choices=sorted(TAG_READERS),
                            help='tool used to read NEEDED and SONAME tags ' \
                            '(default: ${} or platform ' \
                            'default)'.format(ELF_TOOL_VARIABLE))
        parser.set_defaults(utf8=None)
        self.parser = parser
        self.args, extras = parser.parse_known_intermixed_args(argv)
        for extra in [arg for arg in extras if arg.startswith('-')]:
            sys.stderr.write('{}: invalid option -- \'{}\'\n'.format(parser.prog,
                                                                  extra))
        if extras:
            parser.print_usage(sys.stderr)
            parser.exit(1)
        if not self.args.files:
            parser.error('the following arguments are required: FILE')

        loglevel = logging.WARNING
        if self.args.verbose:
            loglevel = logging.INFO
        if self.args.debug:
            loglevel = logging.DEBUG

        logging.basicConfig(level=loglevel,
                            format='{}: %(message)s'.format(parser.prog))

    def process_file(self, path):
        logging.info('Processing %s', path)
        graph = parse_ldd(path, self.tag_reader, self.args.ldd)

        root = Library.root(path)
        graph.resolve(root, self.tag_reader)

        if self.args.full:
            edges = full_edges(root, graph)
        else:
            edges = prune(root, graph)

        print_tree(root, graph, edges, self.glyphs, self.out)

    def process(self):
        for index, path in enumerate(self.args.files):
            if index > 0:
                self.out.write('--\n')
            self.process_file(path)

def main(argv=None):
    runner = Runner(argv)
    try:
        runner.process()
    except LibraryTreeError as err:
        logging.error('%s', err)
        return 1
    return 0

if __name__ == '__main__':
    sys.exit(main())
