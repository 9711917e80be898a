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

"""
Named factories for the HTML elements, plus :class:`TagFactory` for any other
tag name. Each factory accepts an optional mapping of attributes (and keyword
attributes) and returns a builder; calling the builder with content returns
the resulting :class:`~tagsmith.template.Template`::

    >>> from tagsmith.tags import doctype, html, head, body, main, ul, li
    >>> from tagsmith.template import Placeholder
    >>> greetings = Placeholder('greetings')
    >>> page = doctype()(html()(head()(), body()(main(id='x')(greetings))))
    >>> page.render({greetings: ul()(li()('Hello'), li()('World'))})
    '<!DOCTYPE html><html><head></head><body><main id="x"><ul><li>Hello</li><li>World</li></ul></main></body></html>'

Void elements may be passed to a builder without content, in which case only
their start tag is emitted::

    >>> from tagsmith.tags import p, br
    >>> p()('Hello,', br(), 'World!').render()
    '<p>Hello,<br>World!</p>'

The ``del`` element is available as ``del_`` as ``del`` is reserved in Python.
"""

from .template import sigil


class TagFactory():
    """
    A factory class for generating templates for arbitrary elements.

    Instances of this class use __getattr__ magic to provide a factory for
    any element. Accessing an attribute with a particular name returns a
    factory for the element of that name; calling the factory with an optional
    mapping of attributes (and keyword attributes) returns the builder of a new
    template. If the element or attribute you wish to name is a reserved word
    in Python, you can simply append underscore ("_") to the name (all
    trailing underscore characters will be stripped implicitly).

    For example::

        >>> tag = TagFactory()
        >>> tag.a()().render()
        '<a></a>'
        >>> tag.a(href='/foo')('foo').render()
        '<a href="/foo">foo</a>'
        >>> tag.foo({'bar': 'baz'}, class_='quux')().render()
        '<foo bar="baz" class="quux"></foo>'

    Tag names are validated when the factory is called, not when it is looked
    up.
    """
    def __getattr__(self, attr):
        if attr.startswith('_'):
            raise AttributeError(attr)
        factory = sigil(attr.rstrip('_'))
        setattr(self, attr, factory)
        return factory

tag = TagFactory()


doctype = sigil('!DOCTYPE html')

a = sigil('a')
abbr = sigil('abbr')
address = sigil('address')
area = sigil('area')
article = sigil('article')
aside = sigil('aside')
audio = sigil('audio')
b = sigil('b')
base = sigil('base')
bdi = sigil('bdi')
bdo = sigil('bdo')
blockquote = sigil('blockquote')
body = sigil('body')
br = sigil('br')
button = sigil('button')
canvas = sigil('canvas')
caption = sigil('caption')
cite = sigil('cite')
code = sigil('code')
col = sigil('col')
colgroup = sigil('colgroup')
data = sigil('data')
datalist = sigil('datalist')
dd = sigil('dd')
del_ = sigil('del')
details = sigil('details')
dfn = sigil('dfn')
dialog = sigil('dialog')
div = sigil('div')
dl = sigil('dl')
dt = sigil('dt')
em = sigil('em')
embed = sigil('embed')
fieldset = sigil('fieldset')
figcaption = sigil('figcaption')
figure = sigil('figure')
footer = sigil('footer')
form = sigil('form')
h1 = sigil('h1')
h2 = sigil('h2')
h3 = sigil('h3')
h4 = sigil('h4')
h5 = sigil('h5')
h6 = sigil('h6')
head = sigil('head')
header = sigil('header')
hgroup = sigil('hgroup')
hr = sigil('hr')
html = sigil('html')
i = sigil('i')
iframe = sigil('iframe')
img = sigil('img')
input = sigil('input')  # pylint: disable=redefined-builtin
ins = sigil('ins')
kbd = sigil('kbd')
label = sigil('label')
legend = sigil('legend')
li = sigil('li')
link = sigil('link')
main = sigil('main')
map = sigil('map')  # pylint: disable=redefined-builtin
mark = sigil('mark')
menu = sigil('menu')
meta = sigil('meta')
meter = sigil('meter')
nav = sigil('nav')
noscript = sigil('noscript')
object = sigil('object')  # pylint: disable=redefined-builtin
ol = sigil('ol')
optgroup = sigil('optgroup')
option = sigil('option')
output = sigil('output')
p = sigil('p')
param = sigil('param')
picture = sigil('picture')
pre = sigil('pre')
progress = sigil('progress')
q = sigil('q')
rp = sigil('rp')
rt = sigil('rt')
ruby = sigil('ruby')
s = sigil('s')
samp = sigil('samp')
script = sigil('script')
search = sigil('search')
section = sigil('section')
select = sigil('select')
slot = sigil('slot')
small = sigil('small')
source = sigil('source')
span = sigil('span')
strong = sigil('strong')
style = sigil('style')
sub = sigil('sub')
summary = sigil('summary')
sup = sigil('sup')
table = sigil('table')
tbody = sigil('tbody')
td = sigil('td')
template = sigil('template')
textarea = sigil('textarea')
tfoot = sigil('tfoot')
th = sigil('th')
thead = sigil('thead')
time = sigil('time')
title = sigil('title')
tr = sigil('tr')
track = sigil('track')
u = sigil('u')
ul = sigil('ul')
var = sigil('var')
video = sigil('video')
wbr = sigil('wbr')
