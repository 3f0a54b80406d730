"""
Selector Module
Scores a single CSS selector by specificity, combinators and functional pseudo-classes.
"""

import re
from typing import Dict, Tuple

from cssselect2 import parser as selector_parser

from .constants import FUNCTIONAL_PSEUDO_CLASSES, SELECTOR_COMBINATORS
from .errors import SelectorSyntaxError
from .sanitizer import sanitize_selector

# Both patterns are built from the lists so the lists stay the single source of truth
COMBINATOR_REGEX = re.compile('[' + re.escape(''.join(SELECTOR_COMBINATORS)) + ']')
FUNCTIONAL_PSEUDO_REGEX = re.compile(
    ':(' + '|'.join(FUNCTIONAL_PSEUDO_CLASSES) + ')', re.IGNORECASE)


def calculate_specificity(selector: str) -> Tuple[int, int, int]:
    """
    Return the (A, B, C) specificity of a selector.

    For a selector list the most specific complex selector wins.

    Raises:
        SelectorSyntaxError: if cssselect2 cannot parse the selector
    """
    if not selector:
        return (0, 0, 0)
    try:
        parsed = list(selector_parser.parse(selector))
    except selector_parser.SelectorError as e:
        raise SelectorSyntaxError(f"Cannot compute specificity of {selector!r}: {e}", selector) from e
    if not parsed:
        return (0, 0, 0)
    return max(tuple(item.specificity) for item in parsed)


class Selector:
    """A sanitized selector and the weights derived from it."""

    def __init__(self, selector: str = '', calculate=calculate_specificity):
        self._calculate = calculate
        self.selector = sanitize_selector(selector) if selector else ''

    def __repr__(self):
        return f"Selector({self.selector!r})"

    @property
    def specificity(self) -> Dict[str, int]:
        a, b, c = self._calculate(self.selector)
        return {'id': a, 'class': b, 'type': c}

    @property
    def specificity_weight(self) -> int:
        return sum(self.specificity.values())

    @property
    def combinators(self) -> Dict[str, int]:
        """Count of each combinator symbol, found by a plain character scan."""
        counts = {combinator: 0 for combinator in SELECTOR_COMBINATORS}
        for match in COMBINATOR_REGEX.findall(self.selector):
            counts[match] += 1
        return counts

    @property
    def combinator_weight(self) -> int:
        return sum(self.combinators.values())

    @property
    def functional_pseudos(self) -> Dict[str, int]:
        """Count of :is, :where, :has and :not occurrences."""
        counts = {pseudo: 0 for pseudo in FUNCTIONAL_PSEUDO_CLASSES}
        for name in FUNCTIONAL_PSEUDO_REGEX.findall(self.selector):
            counts[name.lower()] += 1
        return counts

    @property
    def functional_pseudo_weight(self) -> int:
        return sum(self.functional_pseudos.values())

    @property
    def selector_complexity(self) -> int:
        return self.specificity_weight + self.combinator_weight + self.functional_pseudo_weight
