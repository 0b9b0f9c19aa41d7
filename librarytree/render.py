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

import collections
import io
import sys

Glyphs = collections.namedtuple('Glyphs', ['continues', 'finished',
                                           'parent_continues',
                                           'parent_finished'])

UTF8_GLYPHS = Glyphs('├─', '└─', '│ ', '  ')
ASCII_GLYPHS = Glyphs('|_', '\\_', '| ', '  ')

def select_glyphs(utf8):
    return UTF8_GLYPHS if utf8 else ASCII_GLYPHS

def format_entry(library):
    if not library.is_found():
        return '{} => not found'.format(library.soname)
    if not library.address:
        return '{} => {}'.format(library.soname, library.path)
    return '{} => {} {}'.format(library.soname, library.path, library.address)

def print_tree(root, graph, edges, glyphs, out=None):
    if out is None:
        out = sys.stdout
    out.write('{}\n'.format(root.path))
    _print_children(root.soname, graph, edges, glyphs, out, '',
                    set([root.soname]))

def _print_children(soname, graph, edges, glyphs, out, prefix, ancestors):
    children = edges.get(soname, [])
    for index, child in enumerate(children):
        last = index == len(children) - 1
        out.write('{}{}{}\n'.format(prefix,
                                    glyphs.finished if last else glyphs.continues,
                                    format_entry(graph[child])))
        # Only reachable in full mode: a cycle back to an ancestor
        if child in ancestors:
            continue
        ancestors.add(child)
        _print_children(child, graph, edges, glyphs, out,
                        prefix + (glyphs.parent_finished if last
                                  else glyphs.parent_continues),
                        ancestors)
        ancestors.discard(child)

def render_tree(root, graph, edges, glyphs):
    out = io.StringIO()
    print_tree(root, graph, edges, glyphs, out)
    return out.getvalue()
