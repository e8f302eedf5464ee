# -*- encoding: utf-8 -*-
# @File   : test_parser.py
# @Time   : 2026/10/17 15:24:10
# @Author : Kariko Lin

"""Line rules of `parse()`: comments, sections, trimming, rejection."""

from io import StringIO

import pytest

from simple_config_parser import ConfigParser, Entry, InvalidConfigError, parse


def test_sample_document(sample_text):
    assert parse(sample_text) == [
        Entry('hello', 'World'),
        Entry('rust', 'Is great, trimmed at ends'),
        Entry('test', '"TEST"'),
    ]


def test_empty_text():
    assert parse('') == []
    assert parse('\n\n   \n') == []


@pytest.mark.parametrize('line', [
    '#', ';', '[', '# key = value', '; key = value',
    '   ; indented', '[section]', '[broken', '[a = b]',
])
def test_skipped_lines(line):
    assert parse(line) == []


def test_inline_comment():
    assert parse('hello = world ; trailing comment') == [
        Entry('hello', 'world')]
    assert parse('hello = world # trailing comment') == [
        Entry('hello', 'world')]


def test_first_comment_char_wins():
    assert parse('a = 1 # x ; y') == [Entry('a', '1')]
    assert parse('a = 1 ; x # y') == [Entry('a', '1')]


def test_comment_inside_quotes_still_truncates():
    assert parse('msg = "a;b"') == [Entry('msg', '"a')]


def test_section_header_is_inert():
    assert parse('[s]\nkey = v') == [Entry('key', 'v')]


def test_key_normalization():
    assert parse('a b c = v') == [Entry('abc', 'v')]
    assert parse('My Key = v') == [Entry('mykey', 'v')]
    assert parse('HELLO = world') == [Entry('hello', 'world')]
    # only plain spaces go away.
    assert parse('a\tb = v') == [Entry('a\tb', 'v')]


def test_value_keeps_internal_spaces():
    assert parse('k =   a   b   ') == [Entry('k', 'a   b')]


def test_whitespace_robustness():
    assert parse('   hello   =   world   ') == parse('hello = world')


def test_empty_value_and_key():
    assert parse('k =') == [Entry('k', '')]
    assert parse('= v') == [Entry('', 'v')]


def test_duplicates_are_kept_in_order():
    assert parse('a = 1\nb = 2\na = 3') == [
        Entry('a', '1'), Entry('b', '2'), Entry('a', '3')]


@pytest.mark.parametrize('text', [
    'hello = world\r\nrust = is great\r\n',
    'hello = world\nrust = is great\n',
    'hello = world\r\n\rrust = is great',
])
def test_carriage_returns(text):
    assert parse(text) == [
        Entry('hello', 'world'), Entry('rust', 'is great')]


@pytest.mark.parametrize('text, lineno', [
    ('not-a-valid-line', 1),
    ('a = 1\nb == 2', 2),
    ('a = 1\nb = 2 = 3', 2),
    ('a = 1\n\n; c\nkey ; = value', 4),
])
def test_invalid_line(text, lineno):
    with pytest.raises(InvalidConfigError) as e:
        parse(text)
    assert e.value.lineno == lineno


def test_invalid_line_is_a_value_error():
    with pytest.raises(ValueError):
        parse('oops')


def test_readstream():
    assert ConfigParser.readstream(StringIO('a = 1\n[x]\nb = 2\n')) == [
        Entry('a', '1'), Entry('b', '2')]


def test_parse_is_deterministic(sample_text):
    assert parse(sample_text) == parse(sample_text)
