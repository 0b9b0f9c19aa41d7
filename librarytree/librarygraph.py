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

from librarytree.common.datatypes import BaseStore
from librarytree.errors import UnresolvedDependencyLookup

class LibraryGraph(BaseStore):
    """All libraries the dynamic linker reported for one input file.

    Keys are sonames. The root library (the input file itself) is owned
    by the caller and never stored here, its dependencies point into the
    graph like those of every other library.
    """

    def add(self, library):
        if library.soname in self:
            logging.debug('Replacing entry for %s', library.soname)
        self[library.soname] = library

    def resolve(self, library, tag_reader):
        # Missing libraries have no file to read tags from
        if not library.is_found() or library.resolved or library.dependencies:
            return

        logging.debug('Resolving %s', library.path)
        needed = tag_reader.read_needed(library.path)
        for soname in needed:
            if soname not in self:
                raise UnresolvedDependencyLookup(soname,
                                                 library.soname or library.path)

        # The edge list has to be complete before descending so that a
        # cycle back to this library stops here
        library.dependencies.extend(needed)
        library.resolved = True

        for soname in needed:
            self.resolve(self[soname], tag_reader)

    def dangling_edges(self, root=None):
        libraries = list(self.values())
        if root is not None:
            libraries.append(root)
        return [(library.soname, soname) for library in libraries
                for soname in library.dependencies if soname not in self]
