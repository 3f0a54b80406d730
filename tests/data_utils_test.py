import sys
import os
from types import MappingProxyType
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from core.at_rule import AtRuleToken
from utils.data_utils import convert_map_to_object, jsonify_data

def test_convert_map_to_object_returns_dicts_unchanged():
    data = {'foo': 'bar'}
    assert convert_map_to_object(data) is data

def test_convert_map_to_object_converts_mappings():
    assert convert_map_to_object(MappingProxyType({'foo': 'bar'})) == {'foo': 'bar'}
    assert type(convert_map_to_object(MappingProxyType({}))) is dict

def test_jsonify_data():
    data = {
        'string': 'string',
        'number': 1,
        'boolean': False,
        'array': ['string'],
    }
    assert jsonify_data(data) == """{
  "string": "string",
  "number": 1,
  "boolean": false,
  "array": [
    "string"
  ]
}"""

def test_jsonify_data_converts_nested_values():
    data = {'counts': MappingProxyType({'foo': 1}), 'token': AtRuleToken(kind='operator', value='and')}
    assert jsonify_data(data) == """{
  "counts": {
    "foo": 1
  },
  "token": {
    "type": "operator",
    "value": "and"
  }
}"""
