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


from html import unescape
from types import MappingProxyType

import pytest

from tagsmith.escape import (
    literal,
    content,
    html,
    keyword_attrs,
    merge_attrs,
    format_attr,
    format_attrs,
)
from tagsmith.patterns import ValidationError


def test_literals():
    assert html(literal('foo')) == 'foo'
    assert html(literal('<foo>')) == '<foo>'
    assert html(literal('foo & bar')) == 'foo & bar'


def test_content():
    assert html(content('foo')) == 'foo'
    assert html(content('<foo>')) == '&lt;foo&gt;'
    assert html(content('foo & bar')) == 'foo &amp; bar'
    assert html(content('"foo"')) == '&quot;foo&quot;'
    assert html(content("'foo'")) == "'foo'"


def test_str():
    assert html('foo') == 'foo'
    assert html('<foo>') == '&lt;foo&gt;'
    assert html('foo & bar') == 'foo &amp; bar'
    assert isinstance(html('foo'), literal)


def test_html_protocol():
    class Markup:
        def __html__(self):
            return literal('<b>bold</b>')
    assert html(Markup()) == '<b>bold</b>'


def test_escape_round_trip():
    for value in ('a & b', '<tag attr="v">', '&amp;', '&&<<>>""'):
        escaped = html(value)
        for char in '<>"':
            assert char not in escaped
        assert unescape(escaped) == value
        assert html(unescape(escaped)) == escaped


def test_keyword_attrs():
    assert keyword_attrs({}) == {}
    assert keyword_attrs({'class_': 'x', 'data_id': '1', 'for_': 'y'}) == {
        'class': 'x', 'data-id': '1', 'for': 'y'}


def test_merge_attrs():
    assert merge_attrs() == {}
    assert merge_attrs(None, {}) == {}
    attrs = {'class': 'a', 'id': 'b'}
    assert merge_attrs(attrs, {'class_': 'c'}) == {'class': 'c', 'id': 'b'}
    assert attrs == {'class': 'a', 'id': 'b'}
    assert list(merge_attrs({'b': '1'}, {'a': '2'})) == ['b', 'a']
    with pytest.raises(TypeError) as exc:
        merge_attrs(['id'])
    assert str(exc.value) == 'attributes must be a mapping, not list'
    with pytest.raises(TypeError):
        merge_attrs((('id', 'x'),), {'class_': 'c'})


def test_merge_attrs_any_mapping():
    attrs = MappingProxyType({'id': 'x'})
    assert merge_attrs(attrs, {'lang': 'en'}) == {'id': 'x', 'lang': 'en'}


def test_format_attr():
    assert format_attr('id', 'x') == ' id="x"'
    assert format_attr('id', '') == ' id=""'
    assert format_attr('v', 'a&b<c>"d"') == ' v="a&amp;b&lt;c&gt;&quot;d&quot;"'
    assert format_attr('v', "it's") == ' v="it\'s"'
    assert format_attr('v', literal('&amp;')) == ' v="&amp;amp;"'
    assert format_attr('hidden', True) == ' hidden'
    assert format_attr('hidden', False) == ''
    assert format_attr('hidden', None) == ''
    assert format_attr('size', 1) == ''
    assert format_attr('name', b'foo') == ''


def test_format_attr_validates():
    with pytest.raises(ValidationError):
        format_attr('a=b', 'x')
    with pytest.raises(ValidationError):
        format_attr('a=b', None)
    with pytest.raises(ValidationError):
        format_attr('x', '\x00')


def test_format_attrs():
    assert format_attrs(None) == ''
    assert format_attrs({}) == ''
    assert format_attrs({'a': '1', 'b': True, 'c': False, 'd': 'x"y'}) == (
        ' a="1" b d="x&quot;y"')
