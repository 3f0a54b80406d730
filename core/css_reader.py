"""
CSS Reader Module
Reads CSS from disk and parses it with tinycss2 into a rule tree.
"""

import logging
import re
from pathlib import Path
from typing import List, Optional, Union

import tinycss2

from utils.file_utils import read_file_content
from .css_weights import WeightedRule, weight_rule
from .rule_tree import (
    AtRuleNode,
    GroupingRule,
    KeyframeRule,
    RuleContainer,
    StyleRule,
    StyleSheet,
    flatten_leaf_rules,
    unique_selectors,
)

logger = logging.getLogger(__name__)

# At-rules whose block holds nested rules, and which of those carry a condition
GROUPING_AT_RULES = {'media', 'supports', 'scope', 'starting-style', 'document', 'container', 'layer'}
CONDITION_AT_RULES = {'media', 'supports', 'scope', 'starting-style', 'document', 'container'}
VENDOR_PREFIX = re.compile(r'^-[a-z]+-')


def _parse_declarations(nodes) -> dict:
    declarations = {}
    for node in nodes:
        if node.type == 'declaration':
            declarations[node.name] = tinycss2.serialize(node.value).strip()
    return declarations


def _build_rules(nodes, container: RuleContainer) -> None:
    for node in nodes:
        if node.type == 'qualified-rule':
            container.append_rule(_build_style_rule(node))
        elif node.type == 'at-rule':
            container.append_rule(_build_at_rule(node))
        elif node.type == 'error':
            logger.warning(f"Skipping invalid CSS at {node.source_line}:{node.source_column}: {node.message}")


def _build_style_rule(node) -> StyleRule:
    selector = tinycss2.serialize(node.prelude).strip()
    contents = tinycss2.parse_blocks_contents(node.content, skip_comments=True, skip_whitespace=True)
    rule = StyleRule(selector, _parse_declarations(contents))
    # CSS nesting: rules inside a style rule's block
    _build_rules([item for item in contents if item.type != 'declaration'], rule)
    return rule


def _build_at_rule(node):
    keyword = node.lower_at_keyword
    prelude = tinycss2.serialize(node.prelude).strip()

    if keyword.endswith('keyframes') and node.content is not None:
        rule = GroupingRule(keyword, name=prelude or None)
        for step in tinycss2.parse_rule_list(node.content, skip_comments=True, skip_whitespace=True):
            if step.type == 'qualified-rule':
                key_text = tinycss2.serialize(step.prelude).strip()
                declarations = tinycss2.parse_declaration_list(step.content, skip_comments=True, skip_whitespace=True)
                rule.append_rule(KeyframeRule(key_text, _parse_declarations(declarations)))
        return rule

    unprefixed = VENDOR_PREFIX.sub('', keyword)
    if unprefixed in GROUPING_AT_RULES and node.content is not None:
        keyword = unprefixed
        if keyword in CONDITION_AT_RULES:
            rule = GroupingRule(keyword, condition_text=prelude)
        else:
            rule = GroupingRule(keyword, name=prelude or None)
        _build_rules(tinycss2.parse_rule_list(node.content, skip_comments=True, skip_whitespace=True), rule)
        return rule

    if node.content is not None:
        logger.debug(f"Not descending into @{keyword} block")
    return AtRuleNode(keyword, prelude)


def parse_stylesheet(raw_css: str) -> StyleSheet:
    """Parse CSS text into a StyleSheet. Invalid fragments are skipped with a warning."""
    sheet = StyleSheet()
    _build_rules(tinycss2.parse_stylesheet(raw_css, skip_comments=True, skip_whitespace=True), sheet)
    return sheet


class CSSReader:
    """Reads a CSS file and exposes its parsed rule tree and selectors."""

    def __init__(self, file_name: Union[str, Path, None] = None):
        self.file_name = file_name
        self.raw_css: Optional[str] = None
        self._parsed_css: Optional[StyleSheet] = None
        self._parsed_source: Optional[str] = None

    @staticmethod
    def read_file_contents(file_name: Union[str, Path, None]) -> Optional[str]:
        """
        Read a file from disk.

        Returns:
            The file contents, or None if the file could not be read

        Raises:
            ValueError: if no file name is given
        """
        if not file_name:
            raise ValueError('FileName not provided')
        try:
            return read_file_content(Path(file_name))
        except OSError as e:
            logger.error(f"Error reading file {file_name}: {str(e)}", exc_info=True)
            return None

    def read_file(self) -> Optional[str]:
        """Read ``file_name`` and keep its contents as ``raw_css``."""
        try:
            contents = CSSReader.read_file_contents(self.file_name)
        except ValueError as e:
            logger.error(f"Error reading CSS: {str(e)}", exc_info=True)
            raise
        self.set_raw_css(contents)
        return contents

    def set_raw_css(self, raw_css: Optional[str]) -> None:
        if raw_css:
            self.raw_css = raw_css

    @staticmethod
    def get_parsed_css(raw_css: str) -> Optional[StyleSheet]:
        """Parse CSS text, logging and returning None if parsing fails."""
        try:
            logger.info('Starting CSS parsing')
            sheet = parse_stylesheet(raw_css)
            logger.debug(f"Parsed {len(sheet.css_rules)} top-level rules")
            return sheet
        except Exception as e:
            logger.error(f"Error parsing CSS: {str(e)}", exc_info=True)
            return None

    @staticmethod
    def get_css_rules(parsed_css: StyleSheet) -> List[StyleRule]:
        return flatten_leaf_rules(parsed_css)

    @staticmethod
    def get_weighted_css_rules(css_rules: List[StyleRule]) -> List[WeightedRule]:
        return [weight_rule(rule) for rule in css_rules]

    @property
    def parsed_css(self) -> Optional[StyleSheet]:
        """The parsed rule tree, or None while no CSS has been read."""
        if not self.raw_css:
            return None
        # Reuse the tree so weak parent references stay alive with the reader
        if self._parsed_source != self.raw_css:
            self._parsed_css = CSSReader.get_parsed_css(self.raw_css)
            self._parsed_source = self.raw_css
        return self._parsed_css

    @property
    def selectors(self) -> Optional[List[str]]:
        if self.parsed_css is None:
            return None
        return unique_selectors(self.parsed_css)
