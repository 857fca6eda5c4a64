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
Functions to construct Html elements quickly.

This module is called ``htm`` to keep its name short and to avoid confusion
with the :func:`html` element function and Python's :mod:`html` module.

Every function takes an attribute list as the first argument, and the child
nodes as the other arguments. Strings are turned into
:class:`~.base.Text` nodes. For example::

    >>> from htmlblocks.dom.htm import *
    >>> doc = html(NO_ATTR,
    ...     head(NO_ATTR, meta([('charset', 'utf-8')]), title(NO_ATTR, "Hi")),
    ...     body(NO_ATTR, h1([('class', 'big')], "Hello")))
    >>> doc.write()
    '<html><head><meta charset="utf-8"><title>Hi</title></head><body><h1 class="big">Hello</h1></body></html>'

For tags that have no function here, use the :data:`m` element constructor.

"""

from .base import Text
from .element import (
    Element, NodeList, VOID, SELF_CLOSE, CSS_ELEMENT, JS_ELEMENT)


__all__ = (
    'NO_ATTR', 'VOID_TAGS', 'wrap_children', 'make_element', 'm',
    'doctype', 'html', 'head', 'noscript', 'iframe', 'link', 'meta', 'title',
    'body', 'button', 'style', 'script', 'textarea', 'main', 'div', 'a',
    'h1', 'h2', 'h3',
)


#: An empty attribute list.
NO_ATTR = ()

#: Tag names that get the VOID option when created with :data:`m`.
VOID_TAGS = frozenset((
    '!DOCTYPE', 'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input',
    'link', 'meta', 'param', 'source', 'track', 'wbr',
))


def wrap_children(children):
    """Return one node for the iterable of children.

    Returns an empty NodeList if there are no children, the child itself if
    there is one child, or a NodeList with all children. Strings are
    converted to Text nodes.

    """
    nodes = [Text(c) if isinstance(c, str) else c for c in children]
    if not nodes:
        return NodeList()
    elif len(nodes) == 1:
        return nodes[0]
    return NodeList(nodes)


def make_element(tag, attrs, children, options=0):
    """Return an :class:`~.element.Element` with the children wrapped by
    :func:`wrap_children`.

    """
    return Element(tag, attrs, wrap_children(children), options)


def doctype(attrs, *children):
    """The ``<!DOCTYPE>`` declaration, use ``doctype([('html', None)])``."""
    return make_element("!DOCTYPE", attrs, children, VOID)

def html(attrs, *children):
    return make_element("html", attrs, children)

def head(attrs, *children):
    return make_element("head", attrs, children)

def noscript(attrs, *children):
    return make_element("noscript", attrs, children)

def iframe(attrs, *children):
    return make_element("iframe", attrs, children)

def link(attrs, *children):
    """A self-closing ``<link/>`` element."""
    return make_element("link", attrs, children, SELF_CLOSE)

def meta(attrs, *children):
    """A void ``<meta>`` element."""
    return make_element("meta", attrs, children, VOID)

def title(attrs, *children):
    return make_element("title", attrs, children)

def body(attrs, *children):
    return make_element("body", attrs, children)

def button(attrs, *children):
    return make_element("button", attrs, children)

def style(attrs, *children):
    """A ``<style>`` element, put a :class:`~.base.Raw` STYLE node in it."""
    return make_element("style", attrs, children, CSS_ELEMENT)

def script(attrs, *children):
    """A ``<script>`` element, put a :class:`~.base.Raw` SCRIPT node in it."""
    return make_element("script", attrs, children, JS_ELEMENT)

def textarea(attrs, *children):
    return make_element("textarea", attrs, children)

def main(attrs, *children):
    return make_element("main", attrs, children)

def div(attrs, *children):
    return make_element("div", attrs, children)

def a(attrs, *children):
    return make_element("a", attrs, children)

def h1(attrs, *children):
    return make_element("h1", attrs, children)

def h2(attrs, *children):
    return make_element("h2", attrs, children)

def h3(attrs, *children):
    return make_element("h3", attrs, children)


class _ElementConstructor:
    """The ``m`` "element constructor" object can be used to make
    :class:`~.element.Element` nodes easily. You call any method on it; the
    name will become the tag name. Arguments can be either strings or other
    nodes, they become the children. Keyword arguments become attributes of
    the created element, a value of None creates an attribute without value.

    For example::

        >>> from htmlblocks.dom.htm import m
        >>> m.div(m.h1('title', style="font-weight: bold;"), m.img(src="bla.png")).write()
        '<div><h1 style="font-weight: bold;">title</h1><img src="bla.png"></div>'

    Tag names in :data:`VOID_TAGS` get the VOID option. A single trailing
    underscore is removed from tag and attribute names, so that Python
    keywords can be used::

        >>> m.label('Name', for_="name", class_="req").write()
        '<label for="name" class="req">Name</label>'

    If you need a name that is not a valid Python identifier, call ``m``
    directly with the tag name as the first argument, and use a dictionary
    for the attributes::

        >>> m('my-tag', 'text', **{'data-id': 3}).write()
        '<my-tag data-id=3>text</my-tag>'

    """
    def __getattr__(self, name):
        if name.startswith('__'):
            raise AttributeError(name)
        return self._factory(name[:-1] if name.endswith('_') else name)

    def __call__(self, name, *children, **attrs):
        return self._factory(name)(*children, **attrs)

    @staticmethod
    def _factory(name):
        def func(*children, **attrs):
            attributes = [(key[:-1] if key.endswith('_') else key, value)
                          for key, value in attrs.items()]
            options = VOID if name in VOID_TAGS else 0
            return make_element(name, attributes, children, options)
        return func


m = _ElementConstructor()
