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
Escaping and attribute serialization. Only attribute values are escaped by
the library itself; free text appended to a template is emitted verbatim, so
callers use :func:`html` (or :class:`content`) to escape it beforehand.

.. autoclass:: literal

.. autoclass:: content

.. autofunction:: html

.. autofunction:: format_attrs
"""

from collections.abc import Mapping

from voluptuous import Schema, Invalid

from .patterns import check_attr_name, check_attr_value


class literal(str):
    "A str sub-class that assumes its content is HTML"
    def __html__(self):
        return self


class content(str):
    "A str sub-class which escapes content for inclusion in HTML"
    def __html__(self):
        return literal(self.\
                replace('&', '&amp;').\
                replace('"', '&quot;').\
                replace('<', '&lt;').\
                replace('>', '&gt;'))


def html(s):
    "Return s in a form suitable for inclusion in an HTML document"
    if hasattr(s, '__html__'):
        return s.__html__()
    else:
        return content(s).__html__()


_attrs_schema = Schema(Mapping)


def keyword_attrs(kwattrs):
    """
    Convert Python keyword arguments to attribute names. Trailing underscores
    are stripped (so reserved words like ``class_`` can be used) and any
    remaining underscores become hyphens, so ``data_id`` becomes ``data-id``.
    """
    return {
        name.rstrip('_').replace('_', '-'): value
        for name, value in kwattrs.items()
    }


def merge_attrs(attrs=None, kwattrs=None):
    """
    Combine an *attrs* mapping with the *kwattrs* keyword arguments of a tag
    factory. Keyword attributes take precedence on collisions.
    """
    result = {}
    if attrs:
        try:
            _attrs_schema(attrs)
        except Invalid:
            raise TypeError(
                'attributes must be a mapping, not {}'.format(
                    type(attrs).__name__)) from None
        result.update(attrs)
    if kwattrs:
        result.update(keyword_attrs(kwattrs))
    return result


def format_attr(name, value):
    """
    Return the serialized form of the attribute *name* with *value*, including
    the leading space. String values are validated and escaped; ``True``
    renders the bare attribute name; any other value contributes nothing. The
    name is validated regardless.
    """
    check_attr_name(name)
    if isinstance(value, str):
        check_attr_value(value)
        return ' %s="%s"' % (name, html(content(value)))
    elif value is True:
        return ' %s' % name
    else:
        return ''


def format_attrs(attrs):
    """
    Return the serialized form of the *attrs* mapping, in mapping order, for
    inclusion in a start tag.
    """
    if not attrs:
        return ''
    return ''.join(format_attr(name, value) for name, value in attrs.items())
