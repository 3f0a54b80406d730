import sys
import os
import json
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from reporting.report_builder import ReportBuilder

WEIGHTED_RULES = [
    {'selectorText': 'body', 'selectorComplexity': 1},
    {'selectorText': 'main article h2', 'selectorComplexity': 3},
    {'selectorText': 'body', 'selectorComplexity': 1},
]
AT_RULES = [{'atRuleType': 'media', 'conditionText': 'print', 'atRuleWeight': 2}]
SELECTORS = ['body', 'main article h2']

@pytest.fixture
def builder():
    builder = ReportBuilder()
    builder.collect_metrics(WEIGHTED_RULES, AT_RULES, SELECTORS, source='site.css')
    return builder

def test_collect_metrics(builder):
    assert builder.data['source'] == 'site.css'
    assert builder.data['summary'] == {
        'totalRules': 3,
        'uniqueSelectors': 2,
        'atRules': 1,
        'maxSelectorComplexity': 3,
        'meanSelectorComplexity': 1.67,
        'maxAtRuleWeight': 2,
    }
    assert builder.data['weightedRules'] == WEIGHTED_RULES

def test_collect_metrics_empty():
    data = ReportBuilder().collect_metrics([], [], [])
    assert data['summary']['maxSelectorComplexity'] == 0
    assert data['summary']['meanSelectorComplexity'] == 0
    assert data['summary']['maxAtRuleWeight'] == 0

def test_generate_json_report(builder, tmp_path):
    path = builder.generate_json_report(tmp_path / 'site')
    assert path == tmp_path / 'site.complexity.json'
    assert json.loads(path.read_text(encoding='utf-8'))['summary']['totalRules'] == 3

def test_generate_html_report(builder, tmp_path):
    path = builder.generate_html_report(tmp_path / 'report.html')
    html = path.read_text(encoding='utf-8')
    assert 'CSS complexity: site.css' in html
    assert 'main article h2' in html
    assert '@media' in html
    # Ranked most complex first
    assert html.index('main article h2') < html.index('<code>body</code>')
