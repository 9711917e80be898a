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
Defines :class:`Template`, the node type from which documents are built, along
with :class:`Placeholder` tokens which mark insertion points to be filled at
render time, and the :func:`sigil` helper which binds arbitrary tag names to
template factories.

A template holds its pre-rendered start and end tags and an ordered list of
children. Children are only ever text (adjacent text is coalesced) or
placeholders: when one template is appended to another its tags and children
are spliced into the parent and the appended template is *consumed*; its
children are dropped and it renders as the empty string from then on.

.. autoclass:: Template
    :members:

.. autoclass:: Placeholder

.. autoexception:: UnsupportedNodeError

.. autofunction:: render

.. autofunction:: sigil
"""

import logging
from itertools import count
from collections.abc import Iterable, Mapping

from .escape import literal, format_attrs, merge_attrs
from .patterns import check_tag_name, is_preamble


logger = logging.getLogger('tagsmith.template')


# The set of HTML elements which never have a closing tag or any content

VOID_ELEMENTS = frozenset({
    # From the HTML standard
    'area',
    'base',
    'br',
    'col',
    'embed',
    'hr',
    'img',
    'input',
    'link',
    'meta',
    'param',
    'source',
    'track',
    'wbr',
    # Legacy and proprietary elements
    'basefont',
    'bgsound',
    'frame',
    'isindex',
    'keygen',
    'spacer',
})


class UnsupportedNodeError(TypeError):
    """
    Raised when :meth:`Template.append` or :meth:`Template.render` encounters
    content of an unsupported type, or a deferred constructor which does not
    return a :class:`Template`. The rejected value is available as
    :attr:`node`.
    """
    def __init__(self, message, node=None):
        super().__init__(message)
        self.node = node


class Placeholder:
    """
    An opaque token marking a point in a :class:`Template` to be substituted
    at render time. Placeholders compare (and hash) by identity, so two
    placeholders never collide even if they share a *name*; the name only
    serves to make the :func:`repr` readable.
    """
    __slots__ = ('id', 'name')
    _ids = count()

    def __init__(self, name=None):
        self.id = next(Placeholder._ids)
        self.name = name

    def __repr__(self):
        if self.name is None:
            return '<Placeholder #{self.id}>'.format(self=self)
        else:
            return '<Placeholder #{self.id} {self.name!r}>'.format(self=self)


_SCALARS = (str, bytes, bytearray, Mapping)


def flatten(content):
    """
    Yield the items of *content*, descending into any nested lists, tuples,
    generators or other iterables (but not strings) to any depth.
    """
    stack = [iter(content)]
    while stack:
        for item in stack[-1]:
            if isinstance(item, _SCALARS) or not isinstance(item, Iterable):
                yield item
            else:
                stack.append(iter(item))
                break
        else:
            stack.pop()


class Template:
    """
    A document tree node for the element (or doctype preamble) *name* with the
    optional *attrs* mapping of attribute names to values.

    The name must be a valid tag name or a ``!DOCTYPE html`` preamble, and the
    attributes must have valid names and values; otherwise
    :exc:`~tagsmith.patterns.ValidationError` is raised. String attribute
    values are escaped, ``True`` produces a bare attribute, and any other value
    is ignored.

    Preambles and void elements (like ``br`` or ``link``) have no end tag.
    Void elements are additionally marked :attr:`void` and refuse content.
    """
    __slots__ = ('start_tag', 'end_tag', 'void', 'children')

    def __init__(self, name, attrs=None):
        check_tag_name(name)
        preamble = is_preamble(name)
        self.void = not preamble and name.lower() in VOID_ELEMENTS
        self.start_tag = '<%s%s>' % (name, format_attrs(merge_attrs(attrs)))
        if preamble or self.void:
            self.end_tag = ''
        else:
            self.end_tag = '</%s>' % name
        self.children = []

    def __repr__(self):
        if self.consumed:
            state = 'consumed'
        else:
            state = '%d children' % len(self.children)
        return '<Template %s %s>' % (self.start_tag, state)

    def __html__(self):
        return literal(self.render())

    @property
    def consumed(self):
        """
        ``True`` once this template has been appended to another template.
        A consumed template renders as the empty string and cannot be
        appended to, or appended elsewhere, again.
        """
        return self.children is None

    def _add_text(self, text):
        if text:
            if self.children and isinstance(self.children[-1], str):
                self.children[-1] += text
            else:
                self.children.append(text)

    def _merge(self, template):
        self._add_text(template.start_tag)
        for child in template.children:
            if isinstance(child, str):
                self._add_text(child)
            else:
                self.children.append(child)
        self._add_text(template.end_tag)
        template.children = None

    def _classify(self, content):
        # Resolve everything (invoking deferred constructors) before the
        # child list is touched so a failed append leaves no trace
        parts = []
        merging = set()
        for item in flatten(content):
            if isinstance(item, (str, Placeholder)):
                parts.append(item)
            elif isinstance(item, Template):
                if item is self:
                    raise UnsupportedNodeError(
                        'Cannot append %r to itself' % item, item)
                if item.consumed or id(item) in merging:
                    logger.debug('rejecting consumed %r', item)
                    raise UnsupportedNodeError(
                        'The template %r has already been appended to '
                        'another template' % item, item)
                merging.add(id(item))
                parts.append(item)
            elif callable(item):
                # A deferred constructor, e.g. the builder of a void element
                # like br(); only its start tag is used
                result = item()
                if not isinstance(result, Template):
                    raise UnsupportedNodeError(
                        'The function %r returned an unhandled type %s' % (
                            item, type(result).__name__), item)
                parts.append(result.start_tag)
            else:
                raise UnsupportedNodeError(
                    'The node %r is an unhandled type %s' % (
                        item, type(item).__name__), item)
        return parts

    def append(self, *content):
        """
        Append *content* to this template and return the template, so that
        calls may be chained or nested. Each item of *content* may be:

        * a :class:`str`, appended verbatim (it is *not* escaped)

        * a :class:`Template`, whose tags and children are spliced into this
          template; the appended template is consumed

        * a :class:`Placeholder`, substituted at render time

        * a callable taking no arguments which returns a :class:`Template`
          (typically the builder of a void element like ``br()``), of which
          only the start tag is appended

        * a list, tuple, or other iterable of the above, nested to any depth

        Anything else raises :exc:`UnsupportedNodeError`, as does appending
        content to a void element or appending to a consumed template. A
        failed append leaves the template unchanged.
        """
        if self.consumed:
            raise UnsupportedNodeError(
                'Cannot append to %r; it has been appended to another '
                'template' % self, self)
        parts = self._classify(content)
        if parts and self.void:
            raise UnsupportedNodeError(
                'The void element %r cannot have content' % self, self)
        for part in parts:
            if isinstance(part, str):
                self._add_text(part)
            elif isinstance(part, Template):
                self._merge(part)
            else:
                self.children.append(part)
        return self

    def render(self, symbols=None):
        """
        Return the markup of this template as a string, substituting each
        :class:`Placeholder` with its value in the *symbols* mapping.

        Placeholders which are missing from *symbols*, or map to a false
        value, render as the empty string. Strings are substituted verbatim.
        Templates are rendered (with the same *symbols*) without being
        consumed. Callables are invoked and must return a :class:`Template`,
        of which only the start tag is substituted. Any other value raises
        :exc:`UnsupportedNodeError`.

        Rendering never modifies the template or the values in *symbols*, so
        it may be repeated freely. A consumed template renders as the empty
        string.
        """
        if symbols is None:
            symbols = {}
        return self._render(symbols, ())

    def _render(self, symbols, active):
        if self.consumed:
            logger.debug('rendering consumed %r as an empty string', self)
            return ''
        active += (self,)
        result = [self.start_tag]
        for child in self.children:
            if isinstance(child, Placeholder):
                result.append(self._substitute(child, symbols, active))
            else:
                result.append(child)
        result.append(self.end_tag)
        return ''.join(result)

    @staticmethod
    def _substitute(placeholder, symbols, active):
        value = symbols.get(placeholder)
        if not value:
            return ''
        elif isinstance(value, str):
            return value
        elif isinstance(value, Template):
            if any(value is template for template in active):
                raise UnsupportedNodeError(
                    'The template %r is substituted into itself via %r' % (
                        value, placeholder), value)
            return value._render(symbols, active)
        elif callable(value):
            result = value()
            if not isinstance(result, Template):
                raise UnsupportedNodeError(
                    'The function %r returned an unhandled type %s' % (
                        value, type(result).__name__), value)
            return result.start_tag
        else:
            raise UnsupportedNodeError(
                'The value %r for %r is an unhandled type %s' % (
                    value, placeholder, type(value).__name__), value)


def render(template, symbols=None):
    """
    Return the markup of *template* with *symbols* substituted for its
    placeholders. Equivalent to ``template.render(symbols)``.
    """
    return template.render(symbols)


def sigil(name):
    """
    Return a factory for elements named *name*, for tags which have no named
    helper in :mod:`tagsmith.tags`. The factory accepts an optional mapping of
    attributes (and keyword attributes) and returns the builder, i.e. the
    bound :meth:`Template.append`, of a new :class:`Template`::

        >>> my_element = sigil('mine')
        >>> my_element({'class': 'custom'})('Hello, World!').render()
        '<mine class="custom">Hello, World!</mine>'
    """
    def factory(attrs=None, **kwattrs):
        return Template(name, merge_attrs(attrs, kwattrs)).append
    factory.__name__ = factory.__qualname__ = str(name)
    factory.__doc__ = 'Return the builder of a new <%s> template' % name
    return factory
