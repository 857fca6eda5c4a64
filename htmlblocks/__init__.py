# -*- coding: utf-8 -*-
#
# This file is part of `htmlblocks`, a library for building and writing Html
#
# Copyright © 2019-2020 by Wilbert Berendsen <info@wilbertberendsen.nl>
#
# This module is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This module is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.


"""
The htmlblocks module.

Build a Html document as a tree of nodes, and write it out::

    >>> import htmlblocks
    >>> from htmlblocks.dom.htm import m
    >>> htmlblocks.render_minified_string(m.p("Hello", class_="greeting"))
    '<p class="greeting">Hello</p>'

"""

from .pkginfo import version, version_string
from .dom.render import render, render_string, render_minified, render_minified_string


__all__ = (
    'render', 'render_string', 'render_minified', 'render_minified_string',
    'version', 'version_string',
)
