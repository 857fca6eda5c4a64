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
This module defines a DOM (Document Object Model) for Html documents.

The DOM is a simple tree of immutable nodes. An :class:`~.element.Element`
has a tag name, attributes and child nodes; texts, comments and raw
fragments are leaf nodes (see the :mod:`~.base` module).

The tree can be built using the constructors directly, or using the
functions and the ``m`` element constructor in the :mod:`~.htm` module, and
is written out by the :mod:`~.render` module, either indented or minified.

"""
