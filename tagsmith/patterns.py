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
Defines the character-class rules which decide whether a tag name, a doctype
preamble, an attribute name or an attribute value is well-formed. Each rule is
matched against the whole string; a failure raises :exc:`ValidationError`
naming the offending string and the rule it violated.

.. autoexception:: ValidationError

.. autofunction:: is_preamble

.. autofunction:: check_tag_name

.. autofunction:: check_attr_name

.. autofunction:: check_attr_value
"""

import re
from collections import namedtuple

from voluptuous import Schema, Match, Any, Invalid


class Rule(namedtuple('Rule', ('name', 'regex'))):
    """
    Named tuple associating a human-readable *name* with the compiled *regex*
    that strings must match in their entirety.
    """
    __slots__ = ()

    def __str__(self):
        return self.regex.pattern


# The private use ranges (U+E000-U+F8FF and plane 15) are excluded from
# attribute names and values to prevent ambiguous or spoofed characters
TAG_NAME = Rule('tag name', re.compile(r'[0-9A-Za-z]+\Z'))
PREAMBLE = Rule('preamble', re.compile(r'!DOCTYPE +html\Z', re.IGNORECASE))
ATTR_NAME = Rule('attribute name', re.compile(
    r'[^\x00-\x1f"\x27>/=\ue000-\uf8ff\U000f0000-\U000ffffd]+\Z'))
ATTR_VALUE = Rule('attribute value', re.compile(
    r'[^\x00-\x08\x0b\x0e-\x1f\ue000-\uf8ff\U000f0000-\U000ffffd]*\Z'))


_tag_schema = Schema(Any(Match(TAG_NAME.regex), Match(PREAMBLE.regex)))
_preamble_schema = Schema(Match(PREAMBLE.regex))
_attr_name_schema = Schema(Match(ATTR_NAME.regex))
_attr_value_schema = Schema(Match(ATTR_VALUE.regex))


class ValidationError(ValueError):
    """
    Raised when a tag name, preamble, attribute name or attribute value fails
    its character-class rule. The offending string is available as
    :attr:`value` and the violated rules as :attr:`rules`.
    """
    def __init__(self, value, *rules):
        self.value = value
        self.rules = rules
        super().__init__(
            'The {kind} {value!r} does not match {patterns}'.format(
                kind=' or '.join(rule.name for rule in rules),
                value=value,
                patterns=' nor '.join(
                    'the regular expression {}'.format(rule)
                    for rule in rules)))


def _validate(schema, value, *rules):
    try:
        return schema(value)
    except Invalid:
        raise ValidationError(value, *rules) from None


def is_preamble(name):
    """
    Return ``True`` if *name* is a doctype preamble (``!DOCTYPE html`` in any
    case, with any number of spaces) rather than an ordinary tag name.
    """
    try:
        _preamble_schema(name)
    except Invalid:
        return False
    else:
        return True


def check_tag_name(name):
    """
    Return *name* if it is a valid tag name or doctype preamble, and raise
    :exc:`ValidationError` otherwise.
    """
    return _validate(_tag_schema, name, TAG_NAME, PREAMBLE)


def check_attr_name(name):
    """
    Return *name* if it is a valid attribute name, and raise
    :exc:`ValidationError` otherwise.
    """
    return _validate(_attr_name_schema, name, ATTR_NAME)


def check_attr_value(value):
    """
    Return *value* if it is a valid (unescaped) attribute value, and raise
    :exc:`ValidationError` otherwise.
    """
    return _validate(_attr_value_schema, value, ATTR_VALUE)
