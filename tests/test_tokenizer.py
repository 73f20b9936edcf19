"""
Test the numeric tokenizer and the shared line cursor.
"""
import io

import pytest

from gacode_reader.stream import NumericTokenizer, ProfileStream

pytestmark = pytest.mark.unit


def make_tokenizer(text):
    stream = ProfileStream(io.StringIO(text))
    return stream, NumericTokenizer(stream)


def drain(tokenizer):
    tokens = []
    while True:
        ok, token = tokenizer.next_token()
        if not ok:
            return tokens
        tokens.append(token)


@pytest.mark.parametrize('text, expected', [
    ('1 2 3', ['1', '2', '3']),
    ('-1.0000000E+00', ['-1.0000000E+00']),
    ('5.4488741E-04 +7 .5', ['5.4488741E-04', '+7', '.5']),
    ('1.0e19,2e-3;3', ['1.0e19', '2e-3', '3']),
    ('# ne | 10^19/m^3', ['10', '19', '3']),
    ('[therm] D C', []),
])
def test_tokens_in_line(text, expected):
    """Numbers are extracted in order and surrounding text is skipped."""
    _, tokenizer = make_tokenizer(text)
    assert drain(tokenizer) == expected


def test_tokens_cross_line_boundaries():
    """A token search continues on the following lines, skipping lines without numbers."""
    _, tokenizer = make_tokenizer("1\n\n   \nno numbers here\n  2 3\n4")
    assert drain(tokenizer) == ['1', '2', '3', '4']


def test_exhaustion_is_reported_not_raised():
    _, tokenizer = make_tokenizer("7\n")
    assert tokenizer.next_token() == (True, '7')
    assert tokenizer.next_token() == (False, '')
    # Stays exhausted
    assert tokenizer.next_token() == (False, '')


def test_empty_stream():
    _, tokenizer = make_tokenizer("")
    assert tokenizer.next_token() == (False, '')


def test_line_cursor_and_token_cursor_share_the_stream():
    """
    The line cursor resumes after the last line the tokenizer pulled, while
    the tokenizer keeps the unread remainder of that line.
    """
    stream, tokenizer = make_tokenizer("1 2\nfoo\n3\nbar\n")

    assert tokenizer.next_token() == (True, '1')
    assert stream.readline() == 'foo'
    assert tokenizer.next_token() == (True, '2')
    assert tokenizer.next_token() == (True, '3')
    assert stream.readline() == 'bar'
    assert stream.readline() is None


def test_line_cursor_counts_lines():
    stream, _ = make_tokenizer("a\r\nb\n1\n")
    assert stream.readline() == 'a'
    assert stream.line_number == 1
    assert list(stream) == ['b', '1']
    assert stream.line_number == 3


def test_custom_pattern():
    tokenizer = NumericTokenizer(ProfileStream(io.StringIO("a1 b22 c333")), pattern=r'\d{2,}')
    assert drain(tokenizer) == ['22', '333']
