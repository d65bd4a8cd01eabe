import io

import pytest

from pywc.core.counter import WordCounter

from .conftest import NO_NEWLINE, TWO_LINES


def test_counts_plain_text(counter):
    c = counter.count_text(TWO_LINES, name="a.txt")
    assert (c.lines, c.words, c.chars, c.bytes, c.max_line_length) == (2, 5, 24, 24, 11)
    assert c.name == "a.txt"


def test_last_line_without_newline_is_not_a_line(counter):
    c = counter.count_text(NO_NEWLINE)
    assert c.lines == 0
    assert c.words == 2
    assert c.bytes == 7
    # ...but it still has a width
    assert c.max_line_length == 7


def test_empty_input(counter):
    c = counter.count_bytes(b"")
    assert (c.lines, c.words, c.chars, c.bytes, c.max_line_length) == (0, 0, 0, 0, 0)
    assert c.name is None


def test_whitespace_only(counter):
    c = counter.count_text("  \t\n\n")
    assert c.lines == 2
    assert c.words == 0
    assert c.max_line_length == 8


def test_multibyte_characters(counter):
    c = counter.count_text("héllo\n")
    assert c.bytes == 7
    assert c.chars == 6
    assert c.words == 1
    assert c.max_line_length == 5


def test_multibyte_character_split_across_reads():
    counter = WordCounter(chunk_size=1)
    c = counter.count_stream(io.BytesIO("héllo wörld\n".encode("utf-8")))
    assert c.bytes == 14
    assert c.chars == 12
    assert c.words == 2
    assert c.max_line_length == 11


def test_word_split_across_reads_counts_once():
    counter = WordCounter(chunk_size=3)
    c = counter.count_bytes(b"abcdefgh ijk\n")
    assert c.words == 2


def test_wide_characters_take_two_columns(counter):
    c = counter.count_text("日本\n")
    assert c.chars == 3
    assert c.bytes == 7
    assert c.max_line_length == 4


def test_combining_mark_has_no_width(counter):
    c = counter.count_text("e\u0301\n")
    assert c.chars == 3
    assert c.max_line_length == 1


def test_invalid_bytes_are_word_constituents_but_not_chars(counter):
    c = counter.count_bytes(b"ab\xffcd\n")
    assert c.bytes == 6
    assert c.chars == 5
    assert c.words == 1
    assert c.lines == 1
    assert c.max_line_length == 4


def test_utf16_odd_length_input_is_counted():
    counter = WordCounter(encoding="utf-16-le")
    c = counter.count_bytes(b"a\x00b")
    assert c.bytes == 3
    assert c.chars == 1
    assert c.words == 1
    assert c.lines == 0
    assert c.max_line_length == 1


def test_utf16_unpaired_surrogate_is_not_a_char():
    counter = WordCounter(encoding="utf-16-le", chunk_size=1)
    c = counter.count_bytes(b"\x00\xd8a\x00")
    assert c.bytes == 4
    assert c.chars == 1
    assert c.words == 1


def test_unicode_whitespace_separates_words(counter):
    # ideographic space and no-break space
    c = counter.count_text("a\u3000b\u00a0c\n")
    assert c.words == 3
    assert c.chars == 6
    assert c.max_line_length == 6


def test_truncated_sequence_at_end_of_input(counter):
    c = counter.count_bytes(b"ok \xc3")
    assert c.bytes == 4
    assert c.chars == 3
    assert c.words == 2


@pytest.mark.parametrize("tab_width, expected", [(8, 9), (4, 5), (1, 3)])
def test_tabs_advance_to_next_stop(tab_width, expected):
    counter = WordCounter(tab_width=tab_width)
    c = counter.count_text("a\tb\n")
    assert c.max_line_length == expected
    assert c.words == 2


def test_carriage_return_and_form_feed_reset_the_column(counter):
    c = counter.count_text("abcdef\rxy\n")
    assert c.max_line_length == 6
    assert c.words == 2
    assert c.lines == 1

    c = counter.count_text("abc\fde\n")
    assert c.max_line_length == 3
    assert c.lines == 1


def test_vertical_tab_separates_words_without_width(counter):
    c = counter.count_text("ab\vcd\n")
    assert c.words == 2
    assert c.max_line_length == 4


def test_widest_line_is_tracked_across_lines(counter):
    c = counter.count_text("a\nabcdefghij\nabc\n")
    assert c.max_line_length == 10
    assert c.lines == 3


def test_latin1_encoding_counts_every_byte_as_a_char():
    counter = WordCounter(encoding="latin-1")
    c = counter.count_bytes(b"caf\xe9 \xff\n")
    assert c.chars == 7
    assert c.words == 2
    assert c.bytes == 7


def test_invalid_arguments():
    with pytest.raises(ValueError):
        WordCounter(tab_width=0)
    with pytest.raises(ValueError):
        WordCounter(chunk_size=0)
    with pytest.raises(LookupError):
        WordCounter(encoding="no-such-encoding")
    with pytest.raises(LookupError):
        WordCounter(encoding="base64")
