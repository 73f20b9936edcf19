"""
Line and token cursors over one input.gacode stream.

The driver walks the file line by line looking for directive lines, while
directive bodies are read token by token. Both cursors pull from the same
ProfileStream, so a body that spans several lines (index/value pairs, one
grid point per line) is consumed by the tokenizer and the driver resumes
at the first line the tokenizer has not pulled.

The tokenizer keeps the unread remainder of the last line it pulled.
Leftover tokens on that line are handed out by the next body read.
"""

import re
from typing import Iterator, Optional, TextIO, Tuple

# Optional sign, digits with optional fractional part, optional exponent
NUMBER_PATTERN = r'[+-]?\d*\.?\d+(?:[Ee][+-]?\d+)?'


class ProfileStream:
    """Shared line source for the directive driver and the tokenizer."""

    def __init__(self, source: TextIO):
        self._source = source
        self.line_number = 0

    def readline(self) -> Optional[str]:
        """Next physical line without its line terminator, or None at end of stream."""
        line = self._source.readline()
        if not line:
            return None
        self.line_number += 1
        return line.rstrip('\r\n')

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.readline()
            if line is None:
                return
            yield line


class NumericTokenizer:
    """
    Pulls numeric tokens from a ProfileStream regardless of line breaks.

    Text between numbers is skipped. Lines without any number are skipped
    too; only the end of the stream stops the search.
    """

    def __init__(self, stream: ProfileStream, pattern: str = NUMBER_PATTERN):
        self._stream = stream
        self._regex = re.compile(pattern)
        self._buffer = ''
        self._pos = 0

    def next_token(self) -> Tuple[bool, str]:
        """
        Find the next numeric token.

        Returns:
            (True, token) on success, (False, '') once the stream is exhausted
        """
        while True:
            match = self._regex.search(self._buffer, self._pos)
            if match:
                self._pos = match.end()
                return True, match.group()

            line = self._stream.readline()
            if line is None:
                self._buffer, self._pos = '', 0
                return False, ''
            self._buffer, self._pos = line, 0
