# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for the path codec and the value codec."""

import logging

import pytest

from env_dot_prop import Options, decode_value, encode_value
from env_dot_prop.codec import (
    fold_key,
    fold_path,
    split_path,
    to_key_form,
    to_path_form,
    transform,
)
from env_dot_prop.values import to_text


class TestToKeyForm:
    """Tests for path -> key encoding."""

    def test_dots_become_underscores(self):
        """Test segment separators are converted."""
        assert to_key_form('foo.bar.baz') == 'foo_bar_baz'

    def test_literal_underscore_is_escaped(self):
        """Test a literal underscore is protected with a backslash."""
        assert to_key_form('foo.und_und') == 'foo_und\\_und'

    def test_escaped_dot_becomes_literal_dot(self):
        """Test \\. in a path is a literal dot in the key."""
        assert to_key_form('foo.dot\\.dot') == 'foo_dot.dot'

    def test_other_characters_are_copied(self):
        """Test characters other than delimiters pass through."""
        assert to_key_form('Ab-9 $x') == 'Ab-9 $x'

    def test_empty_path(self):
        """Test the root path encodes to the empty key."""
        assert to_key_form('') == ''

    def test_trailing_backslash_is_kept(self):
        """Test a lone backslash is not an escape."""
        assert to_key_form('foo\\') == 'foo\\'
        assert to_key_form('a\\b') == 'a\\b'


class TestToPathForm:
    """Tests for key -> path decoding."""

    def test_underscores_become_dots(self):
        """Test key separators are converted."""
        assert to_path_form('FOO_BAR') == 'FOO.BAR'

    def test_literal_dot_is_escaped(self):
        """Test a literal dot is protected with a backslash."""
        assert to_path_form('FOO_DOT.DOT') == 'FOO.DOT\\.DOT'

    def test_escaped_underscore_becomes_literal(self):
        """Test \\_ in a key is a literal underscore in the path."""
        assert to_path_form('FOO_UND\\_UND') == 'FOO.UND_UND'

    def test_leading_and_double_separators(self):
        """Test empty segments survive decoding."""
        assert to_path_form('_FOO__BAR') == '.FOO..BAR'


class TestRoundTrip:
    """Tests for lossless encoding in both directions."""

    @pytest.mark.parametrize('path', [
        '',
        'foo',
        'foo.bar.baz',
        'foo.und_und',
        'a_b.c_d',
        'foo.dot\\.dot',
        'a.b\\.c.d',
    ])
    def test_path_key_path(self, path):
        """Test encoding then decoding restores the path."""
        assert to_path_form(to_key_form(path)) == path

    @pytest.mark.parametrize('key', [
        'FOO',
        'FOO_BAR',
        'FOO_DOT.DOT',
        'FOO_UND\\_UND',
        'PATH',
    ])
    def test_key_path_key(self, key):
        """Test decoding then encoding restores the key."""
        assert to_key_form(to_path_form(key)) == key

    def test_transform_is_generic(self):
        """Test transform works with any pair of delimiters."""
        assert transform('a/b-c', '/', '-') == 'a-b\\-c'


class TestSplitPath:
    """Tests for splitting paths into segments."""

    def test_simple(self):
        """Test plain segments."""
        assert split_path('a.b.c') == ['a', 'b', 'c']

    def test_escaped_dot_joins_segments(self):
        """Test \\. keeps a literal dot in one segment."""
        assert split_path('foo.dot\\.dot') == ['foo', 'dot.dot']
        assert split_path('a\\.b\\.c.d') == ['a.b.c', 'd']

    def test_empty_path(self):
        """Test the root path has no segments."""
        assert split_path('') == []

    def test_empty_segments(self):
        """Test consecutive dots produce empty segments."""
        assert split_path('a..b') == ['a', '', 'b']

    def test_trailing_backslash(self):
        """Test a final backslash with nothing after it is kept."""
        assert split_path('a\\') == ['a\\']


class TestFolding:
    """Tests for case folding helpers."""

    def test_fold_key(self):
        """Test keys fold to uppercase unless case sensitive."""
        assert fold_key('foo_Bar') == 'FOO_BAR'
        assert fold_key('foo_Bar', case_sensitive=True) == 'foo_Bar'

    def test_fold_path(self):
        """Test paths fold to lowercase unless case sensitive."""
        assert fold_path('FOO.Bar') == 'foo.bar'
        assert fold_path('FOO.Bar', case_sensitive=True) == 'FOO.Bar'


class TestDecodeValue:
    """Tests for reading values."""

    def test_text_unchanged_without_parse(self):
        """Test text is returned as is by default."""
        assert decode_value('42') == '42'
        assert decode_value('{"a": 1}') == '{"a": 1}'

    def test_parse_json(self):
        """Test JSON text is decoded with parse."""
        opts = Options(parse=True)
        assert decode_value('{"a": 1}', opts) == {'a': 1}
        assert decode_value('42', opts) == 42
        assert decode_value('true', opts) is True
        assert decode_value('null', opts) is None

    def test_parse_falls_back_to_text(self):
        """Test malformed JSON is returned as text."""
        assert decode_value('not json', Options(parse=True)) == 'not json'
        assert decode_value('{broken', Options(parse=True)) == '{broken'

    def test_parse_rejects_non_standard_constants(self):
        """Test NaN and Infinity literals are kept as text."""
        opts = Options(parse=True)
        assert decode_value('NaN', opts) == 'NaN'
        assert decode_value('Infinity', opts) == 'Infinity'
        assert decode_value('-Infinity', opts) == '-Infinity'
        assert decode_value('[1, NaN]', opts) == '[1, NaN]'
        assert decode_value('1.5e3', opts) == 1500.0

    def test_non_text_unchanged(self):
        """Test already decoded values pass through."""
        value = {'a': 1}
        assert decode_value(value, Options(parse=True)) is value
        assert decode_value(None, Options(parse=True)) is None


class TestEncodeValue:
    """Tests for writing values."""

    def test_text_unchanged(self):
        """Test strings are never re-encoded."""
        assert encode_value('hello') == 'hello'
        assert encode_value('hello', Options(stringify=True)) == 'hello'

    def test_default_coercion(self):
        """Test non-string values without stringify."""
        assert encode_value(42) == '42'
        assert encode_value(True) == 'true'
        assert encode_value(False) == 'false'
        assert encode_value(None) == 'null'
        assert encode_value({'a': 1}) == "{'a': 1}"

    def test_stringify_json(self):
        """Test non-string values are JSON encoded with stringify."""
        opts = Options(stringify=True)
        assert encode_value({'a': 1, 'b': [1, 2]}, opts) == '{"a":1,"b":[1,2]}'
        assert encode_value(3.5, opts) == '3.5'
        assert encode_value(None, opts) == 'null'

    def test_stringify_falls_back_on_unserializable(self, caplog):
        """Test values JSON cannot encode fall back to text."""
        caplog.set_level(logging.DEBUG, logger='env_dot_prop.values')
        assert encode_value({1}, Options(stringify=True)) == '{1}'
        assert 'Cannot encode set as JSON' in caplog.text

    def test_stringify_falls_back_on_circular(self):
        """Test circular structures fall back to text."""
        value = []
        value.append(value)
        assert encode_value(value, Options(stringify=True)) == '[[...]]'

    def test_stringify_rejects_non_finite_floats(self):
        """Test non-finite floats are never written as JSON constants."""
        opts = Options(stringify=True)
        assert encode_value(float('nan'), opts) == 'nan'
        assert encode_value(float('inf'), opts) == 'inf'
        assert encode_value({'a': float('-inf')}, opts) == "{'a': -inf}"

    def test_to_text(self):
        """Test the default coercion helper."""
        assert to_text('x') == 'x'
        assert to_text(1.5) == '1.5'
