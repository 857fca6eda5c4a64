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
This module defines the :class:`Node` base class and the container node types
:class:`Element` and :class:`NodeList`.

A node is an immutable value: it is constructed once, with all its
attributes and children, and can then be written out any number of times.
Nodes have no reference to their parent, so the same tree can't be built
bottom-up by appending; build it in one expression instead::

    >>> from htmlblocks.dom.element import Element, VOID
    >>> from htmlblocks.dom.base import Text
    >>> doc = Element('div', [('id', 'main')], [
    ...     Element('meta', [('charset', 'utf-8')], options=VOID),
    ...     Text('hi'),
    ... ])
    >>> print(doc.write_indented(), end='')
    <div id="main">
      <meta charset="utf-8">
      hi
    </div>

Every node type has a ``node_type`` class attribute, used by the
:class:`~htmlblocks.dom.render.Renderer` to choose the way to write it out.
Nodes that have no ``node_type`` of their own are *expanded*: their
:meth:`Node.html_node` method is called and the returned node is written in
their place. This is how composite components plug into the tree, see
:class:`Component`.

"""

import collections
import collections.abc
import reprlib

from . import util


#: Element option: the element never has a closing tag or contents.
VOID = 1
#: Element option: the opening tag closes itself (``<tag/>``).
SELF_CLOSE = 2
#: Element option: marks a ``style`` element, no effect on the output.
CSS_ELEMENT = 4
#: Element option: marks a ``script`` element, no effect on the output.
JS_ELEMENT = 8


#: An attribute, a key and an optional value.
AttrPair = collections.namedtuple("AttrPair", "key value", defaults=(None,))
AttrPair.key.__doc__ = "The attribute name."
AttrPair.value.__doc__ = "The value: None, a string, an int or a float."


class Node:
    """Base class for all node types.

    A Node itself has no ``node_type``, so it is written out by calling
    :meth:`html_node`, which should return another node. The default
    implementation returns None, causing an error marker in the output.

    """
    __slots__ = ()

    node_type = None

    def html_node(self):
        """Return the node this node expands to when written out.

        The built-in node types return None, they are written out directly.

        """
        return None

    def body(self):
        """Return a tuple with the values that make up this node.

        Used for comparing and hashing nodes.

        """
        return ()

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.body() == other.body()

    def __ne__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.body() != other.body()

    def __hash__(self):
        return hash((type(self), self.body()))

    def __repr__(self):
        cls = self.__class__
        mod = cls.__module__.split('.')[-1]
        return "<{}.{}>".format(mod, cls.__name__)

    def write(self, minified=True):
        """Return the output of this node and its children as a string.

        By default, the output is minified, without indenting and newlines.
        To get indented output, use :meth:`write_indented`.

        """
        from . import render
        return render.Renderer(minified=minified).write(self)

    def write_indented(self, indent_width=util.INDENT_WIDTH, start_indent=0):
        """Return the output of this node and its children with indentation
        added.

        See for the arguments the :class:`~htmlblocks.dom.render.Renderer`
        class.

        """
        from . import render
        return render.Renderer(indent_width, start_indent).write(self)


class NodeList(Node, tuple):
    """An ordered, immutable list of nodes.

    A NodeList is transparent: its items are written out as if they were
    direct children of the list's parent, it adds no indenting level or
    separators.

    Adding a NodeList to another NodeList, a tuple or a list returns a new
    NodeList.

    """
    __slots__ = ()

    node_type = "list"

    def __new__(cls, nodes=()):
        return tuple.__new__(cls, nodes)

    def body(self):
        return tuple(self)

    def __add__(self, other):
        if isinstance(other, (tuple, list)):
            return type(self)(tuple(self) + tuple(other))
        return NotImplemented

    def __radd__(self, other):
        if isinstance(other, (tuple, list)):
            return type(self)(tuple(other) + tuple(self))
        return NotImplemented

    def __eq__(self, other):
        if isinstance(other, NodeList):
            return tuple.__eq__(self, other)
        return NotImplemented

    def __ne__(self, other):
        if isinstance(other, NodeList):
            return tuple.__ne__(self, other)
        return NotImplemented

    def __hash__(self):
        return tuple.__hash__(self)

    def __repr__(self):
        return "<element.NodeList ({} item{})>".format(len(self), '' if len(self) == 1 else 's')


def make_attrs(attrs):
    """Return a tuple of :class:`AttrPair` from the specified attributes.

    ``attrs`` may be None, a mapping, or an iterable of ``(key, value)``
    tuples or bare key strings. The order is kept and nothing is removed.
    Raises TypeError or ValueError on invalid keys or values.

    """
    if attrs is None:
        return ()
    if isinstance(attrs, collections.abc.Mapping):
        attrs = attrs.items()
    result = []
    for attr in attrs:
        if isinstance(attr, str):
            key, value = attr, None
        else:
            key, value = attr
        if not isinstance(key, str):
            raise TypeError("attribute name must be a string: {}".format(repr(key)))
        if not key:
            raise ValueError("attribute name can't be empty")
        util.check_attr_value(value)
        result.append(AttrPair(key, value))
    return tuple(result)


def make_children(children):
    """Return a :class:`NodeList` from the specified children.

    ``children`` can be None, a single Node, or an iterable of nodes. An
    existing NodeList is returned unchanged. Other single objects (a string,
    a number) become the only item; they are not converted to nodes.

    """
    if children is None:
        return NodeList()
    elif isinstance(children, NodeList):
        return children
    elif isinstance(children, (Node, str)) or not isinstance(children, collections.abc.Iterable):
        return NodeList((children,))
    return NodeList(children)


class Element(Node):
    """An Html element, with a tag name, attributes, children and options.

    The ``attrs`` can be given as a list of ``(key, value)`` tuples, or as a
    dictionary. The ``children`` can be a list of nodes or a single node.
    The ``options`` are a combination of the :data:`VOID`,
    :data:`SELF_CLOSE`, :data:`CSS_ELEMENT` and :data:`JS_ELEMENT` flags.

    The children of an Element with the :data:`VOID` or :data:`SELF_CLOSE`
    option are never written out.

    """
    __slots__ = ('_tag', '_attrs', '_children', '_options')

    node_type = "element"

    def __init__(self, tag, attrs=(), children=(), options=0):
        if not isinstance(tag, str):
            raise TypeError("tag name must be a string: {}".format(repr(tag)))
        if not tag:
            raise ValueError("tag name can't be empty")
        self._tag = tag
        self._attrs = make_attrs(attrs)
        self._children = make_children(children)
        self._options = int(options)

    @property
    def tag(self):
        """The tag name."""
        return self._tag

    @property
    def attrs(self):
        """The tuple of :class:`AttrPair` attributes."""
        return self._attrs

    @property
    def children(self):
        """The :class:`NodeList` with the child nodes."""
        return self._children

    @property
    def options(self):
        """The option flags."""
        return self._options

    def is_void(self):
        """Return True if the :data:`VOID` option is set."""
        return bool(self._options & VOID)

    def is_self_closing(self):
        """Return True if the :data:`SELF_CLOSE` option is set."""
        return bool(self._options & SELF_CLOSE)

    def has_close_tag(self):
        """Return True if this element gets a closing tag.

        This only depends on the options, not on the presence of children.

        """
        return not self._options & (VOID | SELF_CLOSE)

    def get(self, key, default=None):
        """Return the value of the first attribute named ``key``."""
        for attr in self._attrs:
            if attr.key == key:
                return attr.value
        return default

    def body(self):
        return self._tag, self._attrs, self._children, self._options

    def __repr__(self):
        n = len(self._children)
        children = " ({} child{})".format(n, '' if n == 1 else 'ren') if n else ""
        return "<element.Element {}{}>".format(reprlib.repr(self._tag), children)


class Component(Node):
    """A node that expands to another node when written out.

    The ``func`` is called with the ``args`` and ``kwargs`` each time the
    component is written, and should return a Node. For example::

        >>> def card(title, text):
        ...     return Element('div', [('class', 'card')], [
        ...         Element('h2', children=Text(title)), Text(text)])
        ...
        >>> Component(card, 'Hello', 'World').write()
        '<div class="card"><h2>Hello</h2>World</div>'

    """
    __slots__ = ('_func', '_args', '_kwargs')

    def __init__(self, func, *args, **kwargs):
        if not callable(func):
            raise TypeError("not callable: {}".format(repr(func)))
        self._func = func
        self._args = args
        self._kwargs = kwargs

    @property
    def func(self):
        """The callable that produces the expansion."""
        return self._func

    def html_node(self):
        """Call the function and return its result."""
        return self._func(*self._args, **self._kwargs)

    def body(self):
        return self._func, self._args, tuple(sorted(self._kwargs.items()))

    def __repr__(self):
        name = getattr(self._func, '__qualname__', None) or repr(self._func)
        return "<element.Component {}>".format(name)


def is_expandable(obj):
    """Return True if ``obj`` is written out via its ``html_node`` method.

    This is the case for all objects that are not one of the built-in node
    types and have a callable ``html_node`` attribute.

    """
    if getattr(type(obj), 'node_type', None) is not None:
        return False
    return callable(getattr(obj, 'html_node', None))
