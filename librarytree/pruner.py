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

def full_edges(root, graph):
    """Edge lists of all libraries exactly as they were resolved."""
    edges = {root.soname: list(root.dependencies)}
    for soname, library in graph.items():
        edges[soname] = list(library.dependencies)
    return edges

def prune(root, graph, edges=None):
    """Drop edges so that every library is reached only once.

    The walk is depth-first in declaration order, a library stays below
    the first parent that reaches it. Returns a new mapping from soname
    to the kept child sonames for every library on the pruned tree, the
    graph itself is left untouched.
    """
    if edges is None:
        edges = full_edges(root, graph)

    seen = set([root.soname])
    pruned = {}
    _prune(root.soname, edges, seen, pruned)
    return pruned

def _prune(soname, edges, seen, pruned):
    kept = []
    pruned[soname] = kept
    for child in edges.get(soname, []):
        if child in seen:
            continue
        seen.add(child)
        kept.append(child)
        _prune(child, edges, seen, pruned)
