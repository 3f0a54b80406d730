"""
At-Rule Module
Tokenizes at-rule conditions (media queries, @supports, @scope, ...) and weighs them.
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from .constants import AT_RULE_OPERATORS, AT_RULE_TYPES, CONDITIONAL_AT_RULE_TYPES, MEDIA_FEATURES
from .errors import AtRuleTypeNotFoundError
from .sanitizer import sanitize_at_rule

AT_RULE_TYPE_REGEX = re.compile(r'@\w+')


def _vocabulary_regex(words: List[str]):
    # Unanchored: a token only needs to contain one of the words
    return re.compile('|'.join(re.escape(word) for word in words), re.IGNORECASE)


AT_TYPE_MATCHER = _vocabulary_regex(AT_RULE_TYPES)
MEDIA_FEATURE_MATCHER = _vocabulary_regex(MEDIA_FEATURES)
OPERATOR_MATCHER = _vocabulary_regex(AT_RULE_OPERATORS)


@dataclass(frozen=True)
class AtRuleToken:
    kind: str  # 'at', 'feature' or 'operator'
    value: str
    is_conditional: Optional[bool] = None
    is_range: Optional[bool] = None

    def to_dict(self) -> Dict[str, Union[str, bool]]:
        data = {'type': self.kind, 'value': self.value}
        if self.is_conditional is not None:
            data['isConditional'] = self.is_conditional
        if self.is_range is not None:
            data['isRange'] = self.is_range
        return data


def get_at_rule_type(at_rule: str) -> Optional[str]:
    """
    Return the at-rule keyword without its ``@`` (``'media'`` for ``@media ...``).

    Raises:
        AtRuleTypeNotFoundError: if the text holds no ``@word`` marker
    """
    if not at_rule:
        return None
    match = AT_RULE_TYPE_REGEX.search(sanitize_at_rule(at_rule))
    if match is None:
        raise AtRuleTypeNotFoundError(f"No at-rule marker found in {at_rule!r}")
    return match.group(0).replace('@', '', 1)


def get_condition_text(at_rule: str) -> Optional[str]:
    """
    Return whatever follows the at-rule keyword, with original casing kept.

    The split key comes from the sanitized (lowercased) keyword, so a keyword
    written as ``@Media`` in the source is not found and raises.
    """
    if not at_rule:
        return None
    at_rule_type = get_at_rule_type(at_rule)
    parts = at_rule.split(at_rule_type)
    if len(parts) < 2:
        raise AtRuleTypeNotFoundError(f"At-rule keyword {at_rule_type!r} not found in {at_rule!r}")
    return parts[1].strip()


def tokenize_at_type(token: str) -> Optional[AtRuleToken]:
    """Build an ``at`` token, or return None when the token is not a known at-rule."""
    sanitized = sanitize_at_rule(token)
    if '@' not in sanitized:
        return None
    at_rule_type = get_at_rule_type(sanitized)
    if not AT_TYPE_MATCHER.search(at_rule_type):
        return None
    return AtRuleToken(
        kind='at',
        value=at_rule_type,
        is_conditional=at_rule_type in CONDITIONAL_AT_RULE_TYPES,
    )


def tokenize_at_rule(at_rule: str) -> List[AtRuleToken]:
    """
    Split an at-rule into typed tokens.

    Matchers are tried in a fixed order and the first hit wins: at-rule type,
    media type, operator, then anything parenthesized (a range feature).
    Tokens matching none of them are dropped.
    """
    tokens = []
    for raw_token in sanitize_at_rule(at_rule).split(' '):
        if AT_TYPE_MATCHER.search(raw_token):
            token = tokenize_at_type(raw_token)
        elif MEDIA_FEATURE_MATCHER.search(raw_token):
            token = AtRuleToken(kind='feature', value=raw_token)
        elif OPERATOR_MATCHER.search(raw_token):
            token = AtRuleToken(kind='operator', value=raw_token)
        elif '(' in raw_token and ')' in raw_token:
            token = AtRuleToken(kind='feature', value=raw_token, is_range=True)
        else:
            token = None
        if token is not None:
            tokens.append(token)
    return tokens


def at_rule_weight(at_rule: str) -> int:
    """Count at-rule keywords, plain features and operators; range features add nothing."""
    weight = 0
    for token in tokenize_at_rule(at_rule):
        if token.kind == 'at' or token.kind == 'operator':
            weight += 1
        elif token.kind == 'feature' and not token.is_range:
            weight += 1
    return weight


class AtRule:
    """One at-rule header such as ``@media screen and (min-width: 900px)``."""

    def __init__(self, at_rule: str = ''):
        self.at_rule = at_rule.strip() if at_rule else ''

    def __repr__(self):
        return f"AtRule({self.at_rule!r})"

    @property
    def at_rule_type(self) -> Optional[str]:
        return get_at_rule_type(self.at_rule)

    @property
    def condition_text(self) -> Optional[str]:
        return get_condition_text(self.at_rule)

    @property
    def tokens(self) -> List[AtRuleToken]:
        return tokenize_at_rule(self.at_rule)

    @property
    def at_rule_weight(self) -> int:
        return at_rule_weight(self.at_rule)

    def to_dict(self) -> Dict[str, Union[str, int, None]]:
        return {
            'atRuleType': self.at_rule_type,
            'conditionText': self.condition_text,
            'atRuleWeight': self.at_rule_weight,
        }
