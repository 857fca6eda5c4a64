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
Test writing node trees, indented and minified.
"""

### find htmlblocks
import sys
sys.path.insert(0, '.')

import io
import logging
import re
import threading

import pytest

from htmlblocks import render, render_string, render_minified, render_minified_string
from htmlblocks.dom.base import Text, Comment, Raw, Value, STYLE, URL
from htmlblocks.dom.element import (
    Element, NodeList, Node, Component, VOID, SELF_CLOSE, CSS_ELEMENT)
from htmlblocks.dom.render import Renderer


def page():
    return Element("html", (), [
        Element("head", (), [Element("title", (), Text("T"))]),
        Element("body", [("class", "x")], [Comment(" c "), Text("t")]),
    ])


def test_main():
    div = Element("div", [], [Text("hi")], 0)
    assert render_string(div) == "<div>\n  hi\n</div>\n"
    assert render_minified_string(div) == "<div>hi</div>"

    meta = Element("meta", [("charset", "utf-8")], [], VOID)
    assert render_string(meta) == '<meta charset="utf-8">\n'
    assert render_minified_string(meta) == '<meta charset="utf-8">'

    assert render_string(page()) == '''\
<html>
  <head>
    <title>
      T
    </title>
  </head>
  <body class="x">
    <!-- c -->
    t
  </body>
</html>
'''
    assert render_minified_string(page()) == \
        '<html><head><title>T</title></head><body class="x"><!-- c -->t</body></html>'


def test_minified_equals_stripped_formatted():
    tree = NodeList([
        Element("!DOCTYPE", [("html", None)], options=VOID),
        page(),
        Element("link", [("rel", "icon")], options=SELF_CLOSE),
    ])
    formatted = render_string(tree)
    assert re.sub(r'\n *', '', formatted) == render_minified_string(tree)


def test_void_and_self_close():
    br = Element("br", (), [Text("x")], VOID)
    assert render_string(br) == "<br>\n"
    assert render_minified_string(br) == "<br>"

    link = Element("link", [("rel", "icon")], [Text("x")], SELF_CLOSE)
    assert render_string(link) == '<link rel="icon"/>\n'
    assert render_minified_string(link) == '<link rel="icon"/>'

    # other options have no influence
    s = Element("style", (), Raw("p{}", STYLE), CSS_ELEMENT)
    assert render_minified_string(s) == "<style>p{}</style>"


def test_empty_element():
    assert render_string(Element("div")) == "<div></div>\n"
    assert render_minified_string(Element("div")) == "<div></div>"
    p = Element("p", (), [Element("div")])
    assert render_string(p) == "<p>\n  <div></div>\n</p>\n"

    # a child that happens to be an empty list still counts as a child
    d = Element("div", (), [NodeList()])
    assert render_string(d) == "<div>\n</div>\n"
    assert render_minified_string(d) == "<div></div>"


def test_node_list():
    a, b, c = Text("A"), Comment("B"), Element("i", (), Text("C"))
    flat = Element("div", (), [a, b, c])
    nested = Element("div", (), [NodeList([a, NodeList([b, c])])])
    assert render_string(flat) == render_string(nested)
    assert render_minified_string(flat) == render_minified_string(nested)
    assert render_string(NodeList()) == ""
    assert render_minified_string(NodeList()) == ""
    assert render_string(NodeList([a, b])) == "A\n<!--B-->\n"


def test_attributes():
    assert render_minified_string(Element("a", [("id", "x"), ("class", "y")])) == \
        '<a id="x" class="y"></a>'
    assert render_minified_string(Element("a", [("class", "y"), ("id", "x"), ("id", "z")])) == \
        '<a class="y" id="x" id="z"></a>'
    el = Element("input", [("disabled", None), ("value", 3), ("step", 0.5)], options=VOID)
    assert render_minified_string(el) == '<input disabled value=3 step=0.5>'
    el = Element("img", [("alt", 'say "hi"')], options=VOID)
    assert render_minified_string(el) == r'<img alt="say \"hi\"">'


def test_leaves():
    assert render_minified_string(Raw("<b>x</b>")) == "<b>x</b>"
    assert render_string(Raw("http://x.org/?a=1&b=2", URL)) == "http://x.org/?a=1&b=2\n"
    assert render_minified_string(Text("a < b")) == "a < b"
    assert render_minified_string(Comment("x")) == "<!--x-->"
    assert render_minified_string(Value(3)) == "3"
    assert render_minified_string(Value(1.5)) == "1.5"
    assert render_minified_string(Value("<x>")) == "<x>"
    assert render_minified_string(Value(None)) == "{{ ERROR value=None }}"
    assert render_minified_string(Value([1])) == "{{ ERROR value=[1] }}"


def test_error_marker():
    assert render_string(42) == "{{ ERROR value=42 }}\n"
    assert render_minified_string(42) == "{{ ERROR value=42 }}"
    p = Element("p", (), [Text("a"), 42, Text("b")])
    assert render_minified_string(p) == "<p>a{{ ERROR value=42 }}b</p>"
    assert render_string(p) == "<p>\n  a\n  {{ ERROR value=42 }}\n  b\n</p>\n"
    assert render_minified_string(Element("p", (), "text")) == "<p>{{ ERROR value='text' }}</p>"


def test_error_marker_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="htmlblocks.dom.render"):
        render_minified_string(Element("p", (), [object()]))
    assert "can't render" in caplog.text


def test_expansion():
    def greeting(name):
        return Element("p", (), Text("Hello " + name))

    tree = Element("div", (), [Component(greeting, "you")])
    assert render_string(tree) == "<div>\n  <p>\n    Hello you\n  </p>\n</div>\n"

    class Card(Node):
        def __init__(self, text):
            self.text = text

        def html_node(self):
            return Element("section", (), Text(self.text))

    class Widget:
        """Not a Node, but has the html_node method."""
        def html_node(self):
            return NodeList([Text("w1"), Text("w2")])

    tree = Element("main", (), [Card("c"), Widget()])
    assert render_minified_string(tree) == "<main><section>c</section>w1w2</main>"

    class Bare(Node):
        pass

    output = render_minified_string(Element("div", (), Bare()))
    assert output.startswith("<div>{{ ERROR value=<")
    assert "Bare" in output


def test_renderer_options():
    div = Element("div", [], [Text("hi")])
    assert Renderer(indent_width=4, start_indent=1).write(div) == " <div>\n     hi\n </div>\n"
    assert Renderer(minified=True).write(div) == "<div>hi</div>"
    assert div.write() == "<div>hi</div>"
    assert div.write(minified=False) == "<div>\n  hi\n</div>\n"
    assert div.write_indented(indent_width=1) == "<div>\n hi\n</div>\n"


def test_files():
    div = Element("div", [], [Text("hé")])
    f = io.StringIO()
    render(div, f)
    assert f.getvalue() == "<div>\n  hé\n</div>\n"

    f = io.StringIO()
    render_minified(div, f)
    assert f.getvalue() == "<div>hé</div>"

    f = io.BytesIO()
    Renderer(minified=True).render(div, f, encoding="utf-8")
    assert f.getvalue() == "<div>hé</div>".encode("utf-8")


def test_file_error():
    class FailingFile:
        def __init__(self):
            self.count = 0

        def write(self, text):
            self.count += 1
            if self.count > 2:
                raise OSError("disk full")

    f = FailingFile()
    with pytest.raises(OSError):
        render(page(), f)
    assert f.count == 3


def test_threads():
    renderer = Renderer()
    expected = renderer.write(page())
    results = []

    def work():
        results.append(renderer.write(page()))

    threads = [threading.Thread(target=work) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert results == [expected] * 8



if __name__ == "__main__" and 'test_main' in globals():
    test_main()
