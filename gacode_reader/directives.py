"""
Directive classification for input.gacode lines.

A directive line is a comment line ('#' as first non-blank character) that
names one field, e.g. '# ne | 10^19/m^3'. Keywords overlap ('z' and 'ze',
'mass' and 'masse', 'ne' and 'nexp'), so every keyword must appear as a
whole word and rules are tried longest keyword first. The first matching
rule wins and each directive line maps to exactly one directive.

This is stricter than a plain substring search: a keyword glued to a
letter, digit or underscore ('# nexp' for ne, '# z_eff' for z) does not match,
and lines not starting with '#' are never directives.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .config import load_config


class Phase(Enum):
    HEADER = "header"
    BODY = "body"


@dataclass(frozen=True)
class DirectiveSpec:
    name: str
    phase: Phase
    layout: str
    field: str
    summary: str = ''
    signed: bool = False


_DIRECTIVE_LINE = re.compile(r'^\s*#')

# Cache for the directive ledger
_DIRECTIVES_CACHE: Optional[Dict[str, DirectiveSpec]] = None


def load_directives() -> Dict[str, DirectiveSpec]:
    """
    Build the directive ledger from gacode.yaml.

    Returns:
        Dict mapping directive name -> DirectiveSpec, in ledger order
    """
    global _DIRECTIVES_CACHE

    if _DIRECTIVES_CACHE is not None:
        return _DIRECTIVES_CACHE

    directives = {}
    for name, entry in load_config()['directives'].items():
        directives[name] = DirectiveSpec(
            name=name,
            phase=Phase(entry['phase']),
            layout=entry['layout'],
            field=entry.get('field', name),
            summary=entry.get('summary', ''),
            signed=bool(entry.get('signed', False)),
        )

    _DIRECTIVES_CACHE = directives
    return directives


def keyword_pattern(keyword: str) -> re.Pattern:
    """Regex matching keyword as a whole word."""
    return re.compile(rf'(?<!\w){re.escape(keyword)}(?!\w)')


class DirectiveClassifier:
    """Maps a physical line to at most one directive of the requested phase."""

    def __init__(self, directives: Optional[Dict[str, DirectiveSpec]] = None):
        if directives is None:
            directives = load_directives()

        # Most specific (longest) keyword first; ties keep ledger order
        ordered = sorted(directives.values(), key=lambda spec: -len(spec.name))
        self._rules: Dict[Phase, List[Tuple[re.Pattern, DirectiveSpec]]] = {
            phase: [(keyword_pattern(spec.name), spec) for spec in ordered if spec.phase is phase]
            for phase in Phase
        }

    def names(self, phase: Phase) -> List[str]:
        """Directive names of a phase, in priority order."""
        return [spec.name for _, spec in self._rules[phase]]

    def classify(self, line: str, phase: Phase) -> Optional[DirectiveSpec]:
        """
        Classify one line.

        Args:
            line: Physical line from the stream
            phase: Phase whose directives are candidates

        Returns:
            The matching DirectiveSpec, or None for inert lines
        """
        if not _DIRECTIVE_LINE.match(line):
            return None
        for pattern, spec in self._rules[phase]:
            if pattern.search(line):
                return spec
        return None
