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
Write a node tree out as Html text, indented or minified.

In indented (formatted) output, every text, comment and element tag starts on
a new line, indented two spaces per nesting level::

    >>> from htmlblocks.dom.htm import div, meta
    >>> from htmlblocks.dom.render import render_string, render_minified_string
    >>> tree = div([('id', 'x'), ('class', 'y')], meta([('charset', 'utf-8')]), "hi")
    >>> print(render_string(tree), end='')
    <div id="x" class="y">
      <meta charset="utf-8">
      hi
    </div>
    >>> render_minified_string(tree)
    '<div id="x" class="y"><meta charset="utf-8">hi</div>'

Minified output has no indenting and no newlines at all.

Contents of text, comments and raw fragments is never escaped. Attribute
values are quoted with :func:`~.util.quote_value`.

Values in the tree that are no node and can't be expanded to one, are written
as an error marker: ``{{ ERROR value=42 }}``. Writing a tree never fails
because of its contents; only exceptions raised by the output file are
propagated.

"""

import collections
import io
import logging

from parce.util import Dispatcher

from . import util
from .element import is_expandable


logger = logging.getLogger(__name__)


#: The state of a render pass at a certain node.
Context = collections.namedtuple("Context", "write level item")
Context.write.__doc__ = "The callable that writes text to the output."
Context.level.__doc__ = "The current nesting level, 0 for the root."
Context.item.__doc__ = "The number of nodes already written on the current level."


class Renderer:
    """Writes the output of a node tree.

    Preferences can be given on instantiation or by setting the attributes of
    the same name.

    The ``indent_width`` is the number of spaces per nesting level, the
    ``start_indent`` the number of spaces prepended to every output line. If
    ``minified`` is True, no indenting and newlines are written at all.

    A Renderer keeps no state between or during render passes, so it can be
    used for multiple trees at the same time.

    Call :meth:`render` to write to a file, or :meth:`write` to get the
    output as a string.

    """
    def __init__(self,
            indent_width = util.INDENT_WIDTH,
            start_indent = 0,
            minified = False,
        ):

        #: the number of spaces per indent level
        self.indent_width = indent_width

        #: the number of spaces to prepend to every output line
        self.start_indent = start_indent

        #: whether to leave out all indenting and newlines
        self.minified = minified

    def render(self, node, file, encoding=None):
        """Write the output of the node to the file.

        The ``file`` can be any object with a ``write()`` method. If an
        ``encoding`` is given, the text is encoded before writing, for files
        opened in binary mode. Exceptions raised by the file are not caught.

        """
        write = file.write
        if encoding:
            def write(text):
                file.write(text.encode(encoding))
        self.render_node(node, Context(write, 0, 0))

    def write(self, node):
        """Return the output of the node as a string."""
        f = io.StringIO()
        self.render(node, f)
        return f.getvalue()

    def render_node(self, node, context):
        """Write one node and its children, and return the updated context.

        Chooses the method to call based on the ``node_type`` of the node.

        """
        return self._render(getattr(type(node), 'node_type', None), node, context)

    @Dispatcher
    def _render(self, node_type, node, context):
        """Called for values that have no known node type.

        The value is expanded if it has a ``html_node`` method, otherwise an
        error marker is written.

        """
        if is_expandable(node):
            expansion = node.html_node()
            if expansion is not None:
                return self.render_node(expansion, context)
        return self.render_error(node, context)

    @_render("text", "raw", "comment")
    def render_text(self, node, context):
        """Write a text, raw fragment or comment node."""
        return self.render_line(node.write_content(), context)

    @_render("value")
    def render_value(self, node, context):
        """Write the string value of the payload of a Value node."""
        payload = node.payload
        if util.has_text(payload):
            return self.render_line(str(payload), context)
        return self.render_error(payload, context)

    @_render("list")
    def render_list(self, node, context):
        """Write the items of a NodeList, on the same level."""
        for item in node:
            context = self.render_node(item, context)
        return context

    @_render("element")
    def render_element(self, node, context):
        """Write an Element, its children and the closing tag if needed."""
        self.write_indent(context)
        context.write(self.open_tag(node))
        if node.has_close_tag():
            if node.children:
                self.write_newline(context)
                self.render_node(node.children, context._replace(level=context.level + 1, item=0))
                self.write_indent(context)
            context.write(self.close_tag(node))
        self.write_newline(context)
        return context._replace(item=context.item + 1)

    def render_error(self, value, context):
        """Write an error marker for a value that can't be written."""
        logger.debug("can't render value at level %d: %r", context.level, value)
        return self.render_line("{{{{ ERROR value={} }}}}".format(repr(value)), context)

    def render_line(self, text, context):
        """Write text on its own line, and return the updated context."""
        self.write_indent(context)
        context.write(text)
        self.write_newline(context)
        return context._replace(item=context.item + 1)

    def write_indent(self, context):
        """Write the indent for the current level, unless minified."""
        if not self.minified:
            indent = self.start_indent + context.level * self.indent_width
            if indent:
                context.write(util.spaces[indent])

    def write_newline(self, context):
        """Write a newline, unless minified."""
        if not self.minified:
            context.write('\n')

    def open_tag(self, node):
        """Return the opening tag of an Element, with its attributes."""
        attrs = ''.join(' ' + util.format_attr(attr) for attr in node.attrs)
        return '<{}{}{}'.format(node.tag, attrs, '/>' if node.is_self_closing() else '>')

    def close_tag(self, node):
        """Return the closing tag of an Element."""
        return '</{}>'.format(node.tag)


def render(node, file, minified=False):
    """Write the node to the file, indented, or minified if ``minified`` is True."""
    Renderer(minified=minified).render(node, file)


def render_string(node, minified=False):
    """Return the output of the node as a string, indented by default."""
    return Renderer(minified=minified).write(node)


def render_minified(node, file):
    """Write the minified output of the node to the file."""
    render(node, file, True)


def render_minified_string(node):
    """Return the minified output of the node as a string."""
    return render_string(node, True)
