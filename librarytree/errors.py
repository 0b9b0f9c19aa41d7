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

class LibraryTreeError(Exception):
    pass


class ToolLaunchError(LibraryTreeError):

    def __init__(self, command, reason):
        super(ToolLaunchError, self).__init__(
            'cannot execute \'{}\': {}'.format(command, reason))
        self.command = command
        self.reason = reason


class ToolExecutionError(LibraryTreeError):

    def __init__(self, command, returncode, stderr):
        message = stderr.strip() or 'exit status {}'.format(returncode)
        super(ToolExecutionError, self).__init__(
            'error executing {}: {}'.format(command, message))
        self.command = command
        self.returncode = returncode
        self.stderr = stderr


class UnresolvedDependencyLookup(LibraryTreeError):

    def __init__(self, soname, requester):
        super(UnresolvedDependencyLookup, self).__init__(
            '\'{}\' needed by {} was not reported by the dynamic linker'
            .format(soname, requester))
        self.soname = soname
        self.requester = requester


class MissingSonameTag(LibraryTreeError):

    def __init__(self, path, message=None):
        super(MissingSonameTag, self).__init__(
            message or 'no SONAME tag found in {}'.format(path))
        self.path = path


class AmbiguousSonameTag(MissingSonameTag):

    def __init__(self, path, sonames):
        super(AmbiguousSonameTag, self).__init__(
            path, 'multiple SONAME tags in {}: {}'.format(path,
                                                          ', '.join(sonames)))
        self.sonames = sonames
