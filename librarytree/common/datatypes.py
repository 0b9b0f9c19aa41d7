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

class BaseStore(object):

    def __init__(self):
        self.storage = {}

    def __setitem__(self, key, value):
        self.storage[key] = value

    def __getitem__(self, key):
        return self.storage[key]

    def __iter__(self):
        return iter(self.storage)

    def __len__(self):
        return len(self.storage)

    def __contains__(self, key):
        return key in self.storage

    def keys(self):
        return self.storage.keys()

    def values(self):
        return self.storage.values()

    def items(self):
        return self.storage.items()


class Library(object):
    """One shared library as reported by the dynamic linker.

    An empty path means the linker could not find the library, an empty
    address means it was not (or not yet) mapped. Dependencies are kept
    as sonames, the owning LibraryGraph maps them back to Library objects.
    """

    def __init__(self, soname='', path='', address=''):
        self.soname = soname
        self.path = path
        self.address = address
        self.dependencies = []
        # Set once the NEEDED entries of path have been read
        self.resolved = False

    @classmethod
    def root(cls, path):
        return cls(soname='', path=path)

    def is_found(self):
        return bool(self.path)

    def __eq__(self, other):
        if not isinstance(other, Library):
            return NotImplemented
        return (self.soname, self.path, self.address, self.dependencies) == \
            (other.soname, other.path, other.address, other.dependencies)

    def __repr__(self):
        return 'Library({!r}, {!r}, {!r})'.format(self.soname, self.path,
                                                  self.address)
