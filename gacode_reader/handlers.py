"""
Directive body handlers.

Each handler reads its own body from the shared cursors and writes into the
target object: the header fields during the HEADER phase, the allocated
Plasma during the BODY phase. Handlers are registered per body layout
(see the 'layout' key of each directive in gacode.yaml):

    integer          1 signed integer                 (shot)
    count            1 positive integer               (nion, nexp)
    scalar           1 float                          (masse, ze)
    names            next whole line, nion words      (name)
    species          nion floats                      (mass, z)
    profile          nexp (index, value) pairs        (polflux, ne, te)
    species_profile  nexp x (index, nion floats)      (ni, ti)

Index tokens are discarded: values land in file order whatever the label.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict

from .directives import DirectiveSpec
from .exceptions import DirectiveBodyError
from .stream import NumericTokenizer, ProfileStream

logger = logging.getLogger(__name__)


@dataclass
class ParseContext:
    stream: ProfileStream
    tokenizer: NumericTokenizer
    polflux_sign: float = -1.0
    directive_line: int = 0


Handler = Callable[[DirectiveSpec, Any, ParseContext], None]

HANDLERS: Dict[str, Handler] = {}


def handles(layout: str):
    def register(func: Handler) -> Handler:
        HANDLERS[layout] = func
        return func
    return register


def _token(spec: DirectiveSpec, ctx: ParseContext, expected: int, found: int) -> str:
    ok, token = ctx.tokenizer.next_token()
    if not ok:
        raise DirectiveBodyError(spec.name, expected, found, line_number=ctx.directive_line)
    return token


def _float(spec: DirectiveSpec, ctx: ParseContext, expected: int, found: int) -> float:
    return float(_token(spec, ctx, expected, found))


def _int(spec: DirectiveSpec, ctx: ParseContext) -> int:
    """Read one integer token; integer-valued floats such as '2.0' are accepted."""
    token = _token(spec, ctx, 1, 0)
    try:
        return int(token)
    except ValueError:
        pass
    value = float(token)
    if value.is_integer():
        return int(value)
    raise DirectiveBodyError(
        spec.name, 1, 0, line_number=ctx.directive_line,
        reason=f"expected an integer, got '{token}'"
    )


@handles('integer')
def read_integer(spec: DirectiveSpec, target: Any, ctx: ParseContext) -> None:
    setattr(target, spec.field, _int(spec, ctx))


@handles('count')
def read_count(spec: DirectiveSpec, target: Any, ctx: ParseContext) -> None:
    value = _int(spec, ctx)
    if value <= 0:
        raise DirectiveBodyError(
            spec.name, 1, 0, line_number=ctx.directive_line,
            reason=f"expected a positive count, got {value}"
        )
    setattr(target, spec.field, value)


@handles('scalar')
def read_scalar(spec: DirectiveSpec, target: Any, ctx: ParseContext) -> None:
    setattr(target, spec.field, _float(spec, ctx, 1, 0))


@handles('names')
def read_names(spec: DirectiveSpec, target: Any, ctx: ParseContext) -> None:
    """Species names come from the next whole line, not from the tokenizer."""
    line = ctx.stream.readline()
    words = line.split() if line is not None else []
    if len(words) < target.nion:
        raise DirectiveBodyError(spec.name, target.nion, len(words), line_number=ctx.directive_line)
    getattr(target, spec.field).extend(words[:target.nion])


@handles('species')
def read_species(spec: DirectiveSpec, target: Any, ctx: ParseContext) -> None:
    values = getattr(target, spec.field)
    for ion in range(target.nion):
        values[ion] = _float(spec, ctx, target.nion, ion)


@handles('profile')
def read_profile(spec: DirectiveSpec, target: Any, ctx: ParseContext) -> None:
    values = getattr(target, spec.field)
    sign = ctx.polflux_sign if spec.signed else 1.0
    expected = 2 * target.nexp
    for i in range(target.nexp):
        _token(spec, ctx, expected, 2 * i)  # index
        values[i] = sign * _float(spec, ctx, expected, 2 * i + 1)


@handles('species_profile')
def read_species_profile(spec: DirectiveSpec, target: Any, ctx: ParseContext) -> None:
    values = getattr(target, spec.field)
    per_point = target.nion + 1
    expected = per_point * target.nexp
    for i in range(target.nexp):
        _token(spec, ctx, expected, per_point * i)  # index
        for ion in range(target.nion):
            values[ion, i] = _float(spec, ctx, expected, per_point * i + ion + 1)


def dispatch(spec: DirectiveSpec, target: Any, ctx: ParseContext) -> None:
    """Run the handler registered for the directive's layout."""
    handler = HANDLERS.get(spec.layout)
    if handler is None:
        raise ValueError(
            f"No handler for layout '{spec.layout}' of directive '{spec.name}'. "
            f"Available: {list(HANDLERS.keys())}"
        )
    logger.debug("line %d: %s (%s)", ctx.directive_line, spec.name, spec.layout)
    handler(spec, target, ctx)
