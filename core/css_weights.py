"""
CSS Weights Module
Assembles weighted rules and the at-rule inventory for a parsed stylesheet.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Union

from .at_rule import AtRule
from .rule_tree import StyleRule, enclosing_at_rules, flatten_leaf_rules, unique_selectors
from .selector import Selector

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class WeightedRule:
    """A leaf style rule and the complexity of its selector."""
    rule: StyleRule
    selector_text: str
    selector_complexity: int

    def to_dict(self) -> Dict[str, Union[str, int]]:
        return {
            'selectorText': self.selector_text,
            'selectorComplexity': self.selector_complexity,
        }


def weight_rule(rule: StyleRule) -> WeightedRule:
    # Nested rules are scored as their resolved selector; the stored text stays verbatim
    selector = Selector(getattr(rule, 'resolved_selector_text', rule.selector_text))
    return WeightedRule(
        rule=rule,
        selector_text=rule.selector_text,
        selector_complexity=selector.selector_complexity,
    )


def weighted_rules(tree) -> List[WeightedRule]:
    """One WeightedRule per leaf style rule, in depth-first order."""
    rules = [weight_rule(rule) for rule in flatten_leaf_rules(tree)]
    logger.debug(f"Weighted {len(rules)} rules")
    return rules


def at_rule_inventory(tree) -> List[Dict[str, Union[str, int, None]]]:
    """Type, condition and weight of every at-rule directly enclosing a leaf rule."""
    inventory = [AtRule(rule.at_rule_text).to_dict() for rule in enclosing_at_rules(tree)]
    logger.debug(f"Found {len(inventory)} enclosing at-rules")
    return inventory


def build_report(tree) -> Dict[str, list]:
    """Everything the outputter persists for one stylesheet."""
    return {
        'selectors': unique_selectors(tree),
        'atRules': at_rule_inventory(tree),
        'weightedRules': [rule.to_dict() for rule in weighted_rules(tree)],
    }
