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
The leaf node types: text, comments, raw fragments and wrapped values.

None of these types escape their contents, the text is written out exactly
as it is given. Use :meth:`Raw.escaped` or :func:`~.util.escape` for text
that could contain ``<`` or ``&`` characters.

"""


import reprlib

from . import element, util


## Kinds of raw fragments:

MARKUP = "markup"               #: Html markup
STYLE = "style"                 #: CSS stylesheet contents
SCRIPT = "script"               #: JavaScript code
STYLE_ATTR = "style-attribute"  #: CSS declarations for a style attribute
SCRIPT_ATTR = "script-attribute"    #: JavaScript for an event handler attribute
SCRIPT_STRING = "script-string"     #: text for inside a JavaScript string
URL = "url"                     #: a URL

RAW_KINDS = frozenset((MARKUP, STYLE, SCRIPT, STYLE_ATTR, SCRIPT_ATTR, SCRIPT_STRING, URL))


class TextNode(element.Node):
    """Base class for nodes that have a text ``content``.

    The content must be given to the constructor and can't be changed later.
    The :meth:`check_content` method is called to validate the content; by
    default it must be a string.

    """
    __slots__ = ('_content',)

    def __init__(self, content):
        if not self.check_content(content):
            raise TypeError("invalid content for {}: {}".format(
                type(self).__name__, repr(content)))
        self._content = content

    @classmethod
    def check_content(cls, content):
        """Returns whether the proposed content value is valid."""
        return isinstance(content, str)

    @property
    def content(self):
        """The text contents."""
        return self._content

    def write_content(self):
        """Return the text that is written out for this node.

        The default implementation returns the content unchanged.

        """
        return self._content

    def body(self):
        return (self._content,)

    def __repr__(self):
        cls = self.__class__
        mod = cls.__module__.split('.')[-1]
        return "<{}.{} {}>".format(mod, cls.__name__, reprlib.repr(self._content))


class Text(TextNode):
    """Text, written out unmodified."""
    __slots__ = ()

    node_type = "text"


class Comment(TextNode):
    """A Html comment, written out as ``<!--content-->``."""
    __slots__ = ()

    node_type = "comment"

    def write_content(self):
        return "<!--{}-->".format(self._content)


class Raw(TextNode):
    """A text fragment that is known to be safe to write out unmodified.

    The ``kind`` says what the content is, one of :data:`MARKUP` (the default),
    :data:`STYLE`, :data:`SCRIPT`, :data:`STYLE_ATTR`, :data:`SCRIPT_ATTR`,
    :data:`SCRIPT_STRING` or :data:`URL`. It does not change the output.

    """
    __slots__ = ('_kind',)

    node_type = "raw"

    def __init__(self, content, kind=MARKUP):
        if kind not in RAW_KINDS:
            raise ValueError("unknown raw fragment kind: {}".format(repr(kind)))
        super().__init__(content)
        self._kind = kind

    @classmethod
    def escaped(cls, text):
        """Return a :data:`MARKUP` Raw node with the text Html-escaped."""
        return cls(util.escape(text), MARKUP)

    @property
    def kind(self):
        """What kind of text the content is."""
        return self._kind

    def body(self):
        return self._content, self._kind


class Value(element.Node):
    """Wraps any value, written out using its string conversion.

    Strings, numbers and objects that implement ``__str__`` are written out
    as ``str(payload)``. Other values, such as None or a list, can't be
    written and result in an error marker in the output.

    """
    __slots__ = ('_payload',)

    node_type = "value"

    def __init__(self, payload):
        self._payload = payload

    @property
    def payload(self):
        """The wrapped value."""
        return self._payload

    def body(self):
        return (self._payload,)

    def __repr__(self):
        return "<base.Value {}>".format(reprlib.repr(self._payload))
