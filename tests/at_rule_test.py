import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from core.at_rule import (
    AtRule,
    AtRuleToken,
    at_rule_weight,
    get_at_rule_type,
    get_condition_text,
    tokenize_at_rule,
    tokenize_at_type,
)
from core.errors import AtRuleTypeNotFoundError, InvalidInputError
from core.sanitizer import sanitize_at_rule

@pytest.mark.parametrize('condition', [
    'SCREEN and (Min-width: 900px)',
    'screen and (min-width: 900px)',
    'screen and (min-width : 900px)',
    'screen and ( min-width: 900px)',
    'screen and ( min-width: 900px )',
    ' screen and  ( min-width: 900px ) ',
])
def test_sanitize_at_rule(condition):
    assert sanitize_at_rule(condition) == 'screen and (min-width:900px)'

def test_sanitize_at_rule_collapses_long_runs_of_spaces():
    condition = sanitize_at_rule('@media   screen and       ( min-width  : 900px) ')
    assert condition == '@media screen and (min-width:900px)'

def test_sanitize_at_rule_only_tightens_first_parenthesis():
    assert sanitize_at_rule('( a ) and ( b )') == '(a) and ( b )'

def test_sanitize_at_rule_is_idempotent():
    for text in ['@media   SCREEN and ( min-width : 900px )', '@supports not (display: grid)', '']:
        once = sanitize_at_rule(text)
        assert sanitize_at_rule(once) == once

def test_sanitize_at_rule_rejects_non_strings():
    with pytest.raises(InvalidInputError):
        sanitize_at_rule(['screen'])

def test_get_at_rule_type():
    assert get_at_rule_type('@media screen and (min-width: 900px)') == 'media'
    assert get_at_rule_type('@SUPPORTS (display: grid)') == 'supports'

def test_get_at_rule_type_empty():
    assert get_at_rule_type('') is None
    assert get_at_rule_type(None) is None

def test_get_at_rule_type_without_marker():
    with pytest.raises(AtRuleTypeNotFoundError):
        get_at_rule_type('screen and (min-width: 900px)')

def test_get_condition_text():
    assert get_condition_text('@media screen and (min-width: 900px)') == 'screen and (min-width: 900px)'
    assert get_condition_text('') is None

def test_get_condition_text_keyword_case_mismatch():
    # The split key is the lowercased keyword, so @Media is not found in the original text
    with pytest.raises(AtRuleTypeNotFoundError):
        get_condition_text('@Media screen')

def test_tokenize_at_type():
    assert tokenize_at_type('@media') == AtRuleToken(kind='at', value='media', is_conditional=True)
    assert tokenize_at_type('@layer') == AtRuleToken(kind='at', value='layer', is_conditional=False)

def test_tokenize_at_type_not_an_at_rule():
    assert tokenize_at_type('@container') is None
    assert tokenize_at_type('media') is None

def test_tokenize_at_rule():
    tokens = tokenize_at_rule('@media screen and (min-width: 900px)')
    assert tokens == [
        AtRuleToken(kind='at', value='media', is_conditional=True),
        AtRuleToken(kind='feature', value='screen'),
        AtRuleToken(kind='operator', value='and'),
        AtRuleToken(kind='feature', value='(min-width:900px)', is_range=True),
    ]

def test_tokenize_at_rule_drops_unknown_tokens():
    tokens = tokenize_at_rule('@layer base')
    assert [token.kind for token in tokens] == ['at']

def test_tokenize_at_rule_matches_substrings():
    # "orientation" contains "or", so the whole feature is read as an operator
    tokens = tokenize_at_rule('@media (orientation: portrait)')
    assert tokens[1] == AtRuleToken(kind='operator', value='(orientation:portrait)')

def test_token_to_dict():
    assert AtRuleToken(kind='at', value='media', is_conditional=True).to_dict() == {
        'type': 'at', 'value': 'media', 'isConditional': True}
    assert AtRuleToken(kind='operator', value='and').to_dict() == {'type': 'operator', 'value': 'and'}

@pytest.mark.parametrize('at_rule, weight', [
    ('@media screen and (min-width: 900px)', 3),
    ('screen and (min-width:900px)', 2),
    ('@supports not (display: grid)', 2),
    ('@media screen and (min-height: 680px) and (orientation: portrait)', 5),
    ('@layer base', 1),
    ('', 0),
])
def test_at_rule_weight(at_rule, weight):
    assert at_rule_weight(at_rule) == weight

def test_at_rule_properties():
    at_rule = AtRule('  @media screen and (min-width: 900px) ')
    assert at_rule.at_rule_type == 'media'
    assert at_rule.condition_text == 'screen and (min-width: 900px)'
    assert len(at_rule.tokens) == 4
    assert at_rule.to_dict() == {
        'atRuleType': 'media',
        'conditionText': 'screen and (min-width: 900px)',
        'atRuleWeight': 3,
    }

def test_empty_at_rule():
    at_rule = AtRule()
    assert at_rule.at_rule_type is None
    assert at_rule.condition_text is None
