# The tagsmith project
#   Copyright (c) 2017 Ben Nuttall <https://github.com/bennuttall>
#   Copyright (c) 2017 Dave Jones <dave@waveform.org.uk>
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
#     * Redistributions of source code must retain the above copyright
#       notice, this list of conditions and the following disclaimer.
#     * Redistributions in binary form must reproduce the above copyright
#       notice, this list of conditions and the following disclaimer in the
#       documentation and/or other materials provided with the distribution.
#     * Neither the name of the copyright holder nor the
#       names of its contributors may be used to endorse or promote products
#       derived from this software without specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
# ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE
# LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
# CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF
# SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS
# INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
# CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
# ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.


import pytest

from tagsmith import tags
from tagsmith.tags import (
    TagFactory,
    tag,
    doctype,
    html,
    head,
    title,
    body,
    main,
    p,
    br,
    hr,
    img,
    ul,
    li,
    del_,
    div,
    link,
)
from tagsmith.template import Template, Placeholder
from tagsmith.patterns import ValidationError


def test_named_helpers():
    for name in ('a', 'div', 'section', 'table', 'td', 'h1', 'video'):
        factory = getattr(tags, name)
        t = factory()('x')
        assert isinstance(t, Template)
        assert t.render() == '<{name}>x</{name}>'.format(name=name)


def test_doctype():
    assert doctype()().render() == '<!DOCTYPE html>'
    assert doctype()(html()()).render() == '<!DOCTYPE html><html></html>'


def test_del():
    assert del_()('gone').render() == '<del>gone</del>'


def test_void_helpers():
    assert br()().render() == '<br>'
    assert hr()().void
    assert img(src='a.png', alt='A & B')().render() == (
        '<img src="a.png" alt="A &amp; B">')
    assert p()('Hello,', br(), 'World!').render() == '<p>Hello,<br>World!</p>'
    assert p()('Hello,', br()(), 'World!').render() == '<p>Hello,<br>World!</p>'


def test_keyword_attrs():
    t = div({'id': 'x'}, class_='y', data_count='3', hidden=True)('z')
    assert t.render() == '<div id="x" class="y" data-count="3" hidden>z</div>'


def test_mapped_helpers():
    t_title = Placeholder('title')
    t_style = Placeholder('style')
    page = html()(head()(t_title, t_style), body()())
    assert page.render({
        t_title: title()('Home'),
        t_style: link(rel='stylesheet', href='a.css'),
    }) == (
        '<html><head><title>Home</title>'
        '<link rel="stylesheet" href="a.css"></head><body></body></html>')


def test_list_comprehension():
    t = ul(id='greetings')(
        li({'id': 'greeting-%d' % index})(greeting)
        for index, greeting in enumerate(['Hello, World!', 'Saluton, Mondo!'])
    )
    assert t.render() == (
        '<ul id="greetings"><li id="greeting-0">Hello, World!</li>'
        '<li id="greeting-1">Saluton, Mondo!</li></ul>')


def test_end_to_end(greetings):
    page = doctype()(html()(head()(), body()(main({'id': 'x'})(greetings))))
    assert page.render({greetings: ul()(li()('Hello'), li()('World'))}) == (
        '<!DOCTYPE html><html><head></head><body><main id="x"><ul>'
        '<li>Hello</li><li>World</li></ul></main></body></html>')


def test_tag_factory():
    factory = TagFactory()
    assert factory.foo()().render() == '<foo></foo>'
    assert factory.a(href='/foo')('foo').render() == '<a href="/foo">foo</a>'
    assert factory.foo({'bar': 'baz'}, class_='quux')().render() == (
        '<foo bar="baz" class="quux"></foo>')
    assert factory.foo is factory.foo


def test_tag_factory_reserved_words():
    assert tag.del_()('x').render() == '<del>x</del>'
    assert tag.object__()().render() == '<object></object>'


def test_tag_factory_validates():
    factory = TagFactory()
    bad = factory.my_element
    with pytest.raises(ValidationError):
        bad()
    with pytest.raises(AttributeError):
        factory._private
    with pytest.raises(AttributeError):
        factory.__wrapped__
