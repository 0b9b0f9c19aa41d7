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
import subprocess

from librarytree.errors import ToolExecutionError, ToolLaunchError

def run_tool(cmdline):
    """Run cmdline to completion.

    Returns a tuple of the exit status, the lines written to stdout and
    the complete text written to stderr.
    """
    logging.debug('Running %s', ' '.join(cmdline))
    try:
        proc = subprocess.Popen(cmdline, stdout=subprocess.PIPE,
                                stderr=subprocess.PIPE,
                                universal_newlines=True)
    except OSError as err:
        raise ToolLaunchError(cmdline[0], err.strerror or str(err))

    with proc:
        out, err = proc.communicate()
    return (proc.returncode, out.splitlines(), err)

def check_tool(cmdline):
    returncode, lines, err = run_tool(cmdline)
    if returncode != 0:
        raise ToolExecutionError(cmdline[0], returncode, err)
    return lines
