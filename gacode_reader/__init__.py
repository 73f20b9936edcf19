"""
gacode_reader - Read plasma profiles from input.gacode files.

Public API:
    read_input_gacode: Read a file into a Plasma (sentinel on open failure)
    load_input_gacode: Read a file into a ReadResult with explicit status
    parse_input_gacode: Parse input.gacode content held in a string
    Plasma: Profile container
"""

from .core import Plasma, ReadResult, ReadStatus
from .exceptions import DirectiveBodyError, GacodeError, GacodeParseError, MissingHeaderError
from .reader import GacodeReader, load_input_gacode, parse_input_gacode, read_input_gacode

__all__ = [
    'read_input_gacode', 'load_input_gacode', 'parse_input_gacode', 'GacodeReader',
    'Plasma', 'ReadResult', 'ReadStatus',
    'GacodeError', 'GacodeParseError', 'MissingHeaderError', 'DirectiveBodyError',
]
