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

import logging
import os

from librarytree import tools
from librarytree.common.datatypes import Library
from librarytree.librarygraph import LibraryGraph

LDD_VARIABLE = 'LIBRARYTREE_LDD'
DEFAULT_LDD = 'ldd'

def _strip_address(address):
    return address.strip('()')

def parse_line(line, tag_reader):
    """Turn one line of ldd output into a Library, or None.

    Handles both 'soname => path (address)' and 'path (address)', the
    latter being printed for the dynamic loader itself. The soname of such
    an entry is read from the file.
    """
    words = line.split()
    if len(words) < 2:
        return None

    if words[1] == '=>':
        if len(words) < 3:
            return None
        library = Library(words[0], words[2])
        if library.path == 'not':
            # 'not found'
            library.path = ''
        elif len(words) > 3:
            library.address = _strip_address(words[3])
        return library

    path, address = words[0], words[1]
    if '/' not in path:
        # linux-vdso.so.1 and friends live in memory only
        logging.debug('Skipping virtual object %s', path)
        return None
    soname = tag_reader.read_soname_single(path)
    return Library(soname, path, _strip_address(address))

def ldd_command():
    return os.environ.get(LDD_VARIABLE, DEFAULT_LDD)

def parse_ldd(path, tag_reader, ldd=None):
    ldd = ldd or ldd_command()
    graph = LibraryGraph()
    for line in tools.check_tool([ldd, path]):
        library = parse_line(line, tag_reader)
        if library is None:
            logging.debug('ignoring line \'%s\'', line.strip())
            continue
        graph.add(library)

    logging.info('%s reported %d libraries for %s', ldd, len(graph), path)
    return graph
