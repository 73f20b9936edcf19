"""
input.gacode reader.

Official format documentation: https://gacode.io/input_gacode.html

Parsing runs in two phases over one stream:

HEADER: lines are classified against the sizing directives (shot, nion,
        nexp) until both nion and nexp are known. shot is optional.
BODY:   the Plasma container is allocated with its final sizes and every
        remaining line is classified against the body directives.

Lines that are not directives are skipped in both phases. A stream that
ends during HEADER raises MissingHeaderError; a short or malformed
directive body raises DirectiveBodyError. Both are fatal and nothing
parsed so far is returned.

Usage:
    species = []
    plasma = read_input_gacode('input.gacode', species)
    plasma.ne          # (nexp,) electron density
    plasma.ni[0]       # density of species[0]
"""

import io
import logging
import os
from dataclasses import dataclass
from typing import List, Optional, TextIO, Union

from .config import get_default, get_sentinel
from .core import Plasma, ReadResult, ReadStatus
from .directives import DirectiveClassifier, Phase
from .exceptions import GacodeParseError, MissingHeaderError
from .handlers import ParseContext, dispatch
from .stream import NumericTokenizer, ProfileStream

logger = logging.getLogger(__name__)

Source = Union[str, os.PathLike, TextIO]


@dataclass
class HeaderFields:
    shot: int
    nexp: Optional[int] = None
    nion: Optional[int] = None

    @property
    def complete(self) -> bool:
        return self.nexp is not None and self.nion is not None

    def missing(self) -> List[str]:
        return [name for name in ('nexp', 'nion') if getattr(self, name) is None]


class GacodeReader:
    """
    Two-phase directive driver.

    Args:
        negative_psi: Negate polflux to match the G-EQDSK sign convention.
            None uses the configured default.
    """

    def __init__(self, negative_psi: Optional[bool] = None):
        if negative_psi is None:
            negative_psi = bool(get_default('negative_psi', True))
        self.negative_psi = negative_psi
        self.classifier = DirectiveClassifier()

    def parse(self, source: TextIO) -> Plasma:
        """
        Parse an open text stream.

        Raises:
            MissingHeaderError: If nion and/or nexp are never declared
            DirectiveBodyError: If a directive body runs out of tokens
        """
        stream = ProfileStream(source)
        ctx = ParseContext(
            stream=stream,
            tokenizer=NumericTokenizer(stream),
            polflux_sign=-1.0 if self.negative_psi else 1.0,
        )
        try:
            header = self._read_header(ctx)
            plasma = Plasma.allocate(header.shot, header.nexp, header.nion)
            logger.info("Header complete at line %d: shot=%d nexp=%d nion=%d",
                        stream.line_number, plasma.shot, plasma.nexp, plasma.nion)
            self._read_body(ctx, plasma)
        except GacodeParseError as e:
            logger.error("Parse failed: %s", e)
            raise

        logger.info("Read %d lines, directives: %s", stream.line_number, ', '.join(plasma.seen))
        return plasma

    def _read_header(self, ctx: ParseContext) -> HeaderFields:
        header = HeaderFields(shot=get_sentinel()['shot'])
        while not header.complete:
            line = ctx.stream.readline()
            if line is None:
                raise MissingHeaderError(header.missing())
            spec = self.classifier.classify(line, Phase.HEADER)
            if spec is None:
                continue
            ctx.directive_line = ctx.stream.line_number
            dispatch(spec, header, ctx)
        return header

    def _read_body(self, ctx: ParseContext, plasma: Plasma) -> None:
        for line in ctx.stream:
            spec = self.classifier.classify(line, Phase.BODY)
            if spec is None:
                continue
            ctx.directive_line = ctx.stream.line_number
            dispatch(spec, plasma, ctx)
            plasma.seen.append(spec.name)


def load_input_gacode(source: Source,
                      species_identifiers: Optional[List[str]] = None,
                      negative_psi: Optional[bool] = None) -> ReadResult:
    """
    Read an input.gacode file into a ReadResult.

    Args:
        source: File path or readable text stream. Streams are not closed.
        species_identifiers: Optional list receiving the species names
        negative_psi: Negate polflux (default from gacode.yaml: True)

    Returns:
        ReadResult with status OK, or OPEN_ERROR and the sentinel container
        if the path could not be opened

    Raises:
        GacodeParseError: If the content cannot be parsed
    """
    reader = GacodeReader(negative_psi=negative_psi)

    if isinstance(source, (str, os.PathLike)):
        try:
            f = open(source, 'r', encoding='utf-8', errors='replace')
        except OSError as e:
            logger.error("Couldn't open file %s: %s", os.fspath(source), e)
            return ReadResult(status=ReadStatus.OPEN_ERROR, plasma=Plasma.sentinel(), error=e)
        with f:
            plasma = reader.parse(f)
    else:
        plasma = reader.parse(source)

    if species_identifiers is not None:
        species_identifiers.extend(plasma.species_identifiers)
    return ReadResult(status=ReadStatus.OK, plasma=plasma)


def read_input_gacode(source: Source,
                      species_identifiers: Optional[List[str]] = None,
                      negative_psi: Optional[bool] = None) -> Plasma:
    """
    Read an input.gacode file.

    Same as load_input_gacode but returns the Plasma directly; an input that
    cannot be opened gives the sentinel container (shot=-1, nexp=0, nion=0).
    """
    return load_input_gacode(source, species_identifiers, negative_psi).plasma


def parse_input_gacode(text: str,
                       species_identifiers: Optional[List[str]] = None,
                       negative_psi: Optional[bool] = None) -> Plasma:
    """Parse input.gacode content held in a string."""
    return load_input_gacode(io.StringIO(text), species_identifiers, negative_psi).plasma
