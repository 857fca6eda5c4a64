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
Some utility functions.
"""


import html
import numbers
import re

from parce.util import caching_dict


#: The default number of spaces per indent level.
INDENT_WIDTH = 2


def _spaces(count):
    return ' ' * count

#: Maps a number to a string of that many spaces.
spaces = caching_dict(_spaces)


def check_attr_value(value):
    """Raise TypeError if ``value`` can't be used as an attribute value.

    Valid values are None (for an attribute without value), strings, ints
    and floats. Booleans are not accepted, use None or leave the attribute
    out.

    """
    if value is None or isinstance(value, (str, float)):
        return
    if isinstance(value, int) and not isinstance(value, bool):
        return
    raise TypeError("invalid attribute value: {}".format(repr(value)))


def quote_value(value):
    r"""Return the text representing an attribute value.

    Strings are double-quoted, a backslash or double quote inside the string
    is escaped with a backslash. Ints are written as is, floats using their
    shortest representation::

        >>> quote_value('a "b"')
        '"a \\"b\\""'
        >>> quote_value(12)
        '12'
        >>> quote_value(0.5)
        '0.5'

    """
    if isinstance(value, str):
        return '"{}"'.format(re.sub(r'([\\"])', r'\\\1', value))
    elif isinstance(value, float):
        return repr(value)
    return str(value)


def format_attr(attr):
    """Return the text for one :class:`~.element.AttrPair`, without leading space."""
    if attr.value is None:
        return attr.key
    return attr.key + '=' + quote_value(attr.value)


def escape(text):
    """Escape ``&``, ``<``, ``>`` and quotes in text, for use as Html content."""
    return html.escape(text)


def has_text(obj):
    """Return True if ``obj`` has a meaningful text conversion.

    This is the case for strings, numbers and objects whose type defines its
    own ``__str__`` method. For None, lists, dicts etc. False is returned.

    """
    return (isinstance(obj, (str, numbers.Number))
            or type(obj).__str__ is not object.__str__)
