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
import sys

from librarytree import tools
from librarytree.errors import AmbiguousSonameTag, MissingSonameTag

ELF_TOOL_VARIABLE = 'LIBRARYTREE_ELF_TOOL'

NO_MATCH = (False, '')

def _strip_decoration(value):
    # [libc.so.6] -> libc.so.6
    return value[1:-1]

class TagReader(object):
    """Reads dynamic section tags of a file through an external tool."""

    tool = None

    def command(self, path):
        return [self.tool, '-d', path]

    def read_tag(self, path, match):
        results = []
        returncode, lines, err = tools.run_tool(self.command(path))
        if returncode != 0:
            logging.warning('%s exited with status %d for %s: %s', self.tool,
                            returncode, path, err.strip())
        for line in lines:
            matched, value = match(line.split())
            if matched:
                results.append(value)
        return results

    def read_needed(self, path):
        return self.read_tag(path, self.match_needed)

    def read_soname(self, path):
        return self.read_tag(path, self.match_soname)

    def read_soname_single(self, path):
        sonames = self.read_soname(path)
        if not sonames:
            raise MissingSonameTag(path)
        if len(sonames) > 1:
            raise AmbiguousSonameTag(path, sonames)
        return sonames[0]

    def match_needed(self, words):
        raise NotImplementedError

    def match_soname(self, words):
        raise NotImplementedError


class ReadelfTagReader(TagReader):

    tool = 'readelf'

    def match_needed(self, words):
        if len(words) == 5 and words[1] == '(NEEDED)' and \
                words[2] == 'Shared' and words[3] == 'library:':
            return (True, _strip_decoration(words[4]))
        return NO_MATCH

    def match_soname(self, words):
        if len(words) == 5 and words[1] == '(SONAME)' and \
                words[2] == 'Library' and words[3] == 'soname:':
            return (True, _strip_decoration(words[4]))
        return NO_MATCH


class EuReadelfTagReader(TagReader):

    tool = 'eu-readelf'

    def match_needed(self, words):
        if len(words) == 4 and words[0] == 'NEEDED' and \
                words[1] == 'Shared' and words[2] == 'library:':
            return (True, _strip_decoration(words[3]))
        return NO_MATCH

    def match_soname(self, words):
        if len(words) == 4 and words[0] == 'SONAME' and \
                words[1] == 'Library' and words[2] == 'soname:':
            return (True, _strip_decoration(words[3]))
        return NO_MATCH


class ElfdumpTagReader(TagReader):

    tool = 'elfdump'

    def match_needed(self, words):
        if len(words) == 4 and words[1] == 'NEEDED':
            return (True, words[3])
        return NO_MATCH

    def match_soname(self, words):
        if len(words) == 4 and words[1] == 'SONAME':
            return (True, words[3])
        return NO_MATCH


TAG_READERS = {
    'readelf': ReadelfTagReader,
    'eu-readelf': EuReadelfTagReader,
    'elfdump': ElfdumpTagReader,
}

def default_tool(platform=None):
    platform = platform or sys.platform
    if platform.startswith('sunos'):
        return 'elfdump'
    return 'readelf'

def get_tag_reader(name=None):
    name = name or os.environ.get(ELF_TOOL_VARIABLE) or default_tool()
    if name not in TAG_READERS:
        raise ValueError('unknown ELF tool \'{}\', choose from {}'.format(
            name, ', '.join(sorted(TAG_READERS))))
    logging.debug('Reading dynamic tags with %s', name)
    return TAG_READERS[name]()
