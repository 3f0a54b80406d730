"""
Rule Tree Module
Node types for a parsed stylesheet and the walkers that flatten it.

Style rules and grouping at-rules may nest to any depth. Each node keeps a weak
back-reference to the rule enclosing it, so the tree alone owns its nodes.
"""

import weakref
from typing import Dict, List, Optional

from .errors import MissingRuleTreeError


class RuleNode:
    """Shared parent back-reference handling."""

    def __init__(self, parent_rule=None):
        self._parent_ref = None
        self.parent_rule = parent_rule

    @property
    def parent_rule(self):
        return self._parent_ref() if self._parent_ref is not None else None

    @parent_rule.setter
    def parent_rule(self, rule):
        self._parent_ref = weakref.ref(rule) if rule is not None else None


class RuleContainer(RuleNode):
    """A node holding an ordered list of child rules."""

    def __init__(self, css_rules: Optional[List[RuleNode]] = None, parent_rule=None):
        super().__init__(parent_rule)
        self.css_rules: List[RuleNode] = []
        for rule in css_rules or []:
            self.append_rule(rule)

    def append_rule(self, rule: RuleNode) -> RuleNode:
        rule.parent_rule = self if not isinstance(self, StyleSheet) else None
        self.css_rules.append(rule)
        return rule


class StyleSheet(RuleContainer):
    """Root of a parsed document. Top-level rules have no parent rule."""

    def __repr__(self):
        return f"StyleSheet({len(self.css_rules)} rules)"


class StyleRule(RuleContainer):
    """A qualified rule: a selector, its declarations and any nested rules."""

    def __init__(self, selector_text: str, declarations: Optional[Dict[str, str]] = None,
                 css_rules: Optional[List[RuleNode]] = None, parent_rule=None):
        super().__init__(css_rules, parent_rule)
        self.selector_text = selector_text
        self.declarations = declarations or {}

    @property
    def resolved_selector_text(self) -> str:
        """
        The selector with CSS nesting resolved against the enclosing style rule.

        ``&`` stands for the parent selector; a nested selector without ``&``
        is a descendant of it. A parent selector list is wrapped in ``:is()``.
        """
        parent = self.parent_rule
        while parent is not None and not isinstance(parent, StyleRule):
            parent = parent.parent_rule
        if parent is None:
            return self.selector_text

        parent_text = parent.resolved_selector_text
        if len(split_selector_list(parent_text)) > 1:
            parent_text = f":is({parent_text})"
        resolved = []
        for part in split_selector_list(self.selector_text):
            resolved.append(part.replace('&', parent_text) if '&' in part else f"{parent_text} {part}")
        return ', '.join(resolved)

    def __repr__(self):
        return f"StyleRule({self.selector_text!r})"


class GroupingRule(RuleContainer):
    """
    An at-rule wrapping other rules, e.g. ``@media`` or ``@layer``.

    Conditional at-rules carry ``condition_text``; named ones such as
    ``@layer base`` or ``@keyframes fade`` carry ``name``.
    """

    def __init__(self, at_keyword: str, condition_text: Optional[str] = None, name: Optional[str] = None,
                 css_rules: Optional[List[RuleNode]] = None, parent_rule=None):
        super().__init__(css_rules, parent_rule)
        self.at_keyword = at_keyword
        self.condition_text = condition_text
        self.name = name

    @property
    def at_rule_text(self) -> str:
        """The rule header as written, e.g. ``@media screen and (min-width: 480px)``."""
        prelude = self.condition_text or self.name or ''
        return f"@{self.at_keyword} {prelude}".strip()

    def __repr__(self):
        return f"GroupingRule({self.at_rule_text!r})"


class AtRuleNode(RuleNode):
    """A statement or descriptor at-rule such as ``@import`` or ``@font-face``."""

    def __init__(self, at_keyword: str, prelude: str = '', parent_rule=None):
        super().__init__(parent_rule)
        self.at_keyword = at_keyword
        self.prelude = prelude

    def __repr__(self):
        return f"AtRuleNode({self.at_keyword!r})"


class KeyframeRule(RuleNode):
    """One step (``from``, ``50%``) inside ``@keyframes``."""

    def __init__(self, key_text: str, declarations: Optional[Dict[str, str]] = None, parent_rule=None):
        super().__init__(parent_rule)
        self.key_text = key_text
        self.declarations = declarations or {}

    def __repr__(self):
        return f"KeyframeRule({self.key_text!r})"


def split_selector_list(selector: str) -> List[str]:
    """Split a selector list on top-level commas, leaving commas inside brackets alone."""
    parts, depth, start = [], 0, 0
    for index, char in enumerate(selector):
        if char in '([':
            depth += 1
        elif char in ')]':
            depth = max(depth - 1, 0)
        elif char == ',' and depth == 0:
            parts.append(selector[start:index].strip())
            start = index + 1
    parts.append(selector[start:].strip())
    return [part for part in parts if part]


def flatten_leaf_rules(tree) -> List[RuleNode]:
    """
    Collect every style rule reachable from ``tree``, depth first.

    Grouping rules are replaced by the style rules beneath them. A rule seen
    twice (same object) is kept once, at its first position.

    Raises:
        MissingRuleTreeError: if ``tree`` is falsy or has no ``css_rules``
    """
    css_rules = getattr(tree, 'css_rules', None) if tree else None
    if css_rules is None:
        raise MissingRuleTreeError('A rule tree with css_rules is required')

    leaves = {}
    for rule in css_rules:
        if getattr(rule, 'selector_text', None):
            leaves.setdefault(id(rule), rule)
        if getattr(rule, 'css_rules', None):
            for nested in flatten_leaf_rules(rule):
                leaves.setdefault(id(nested), nested)
    return list(leaves.values())


def unique_selectors(tree) -> List[str]:
    """Selector texts of all leaf rules, duplicates removed, in first-seen order."""
    return list(dict.fromkeys(rule.selector_text for rule in flatten_leaf_rules(tree)))


def enclosing_at_rules(tree) -> List[GroupingRule]:
    """
    The named or conditional rules that directly enclose at least one leaf rule.

    Only the immediate parent of each leaf is considered, and rules are
    deduplicated by identity: two textually equal ``@media`` blocks both stay.
    """
    parents = {}
    for rule in flatten_leaf_rules(tree):
        parent = getattr(rule, 'parent_rule', None)
        if parent is None:
            continue
        if not (getattr(parent, 'name', None) or getattr(parent, 'condition_text', None)):
            continue
        parents.setdefault(id(parent), parent)
    return list(parents.values())
