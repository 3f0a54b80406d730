"""
Report Builder Module
Generates complexity reports using Jinja2 templates.
"""

from pathlib import Path
from statistics import mean
from typing import Dict, List, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape

from reporting.outputter import Outputter

TEMPLATE_DIR = Path(__file__).parent / 'templates'


class ReportBuilder:
    def __init__(self, outputter: Outputter = None):
        self.env = Environment(loader=FileSystemLoader(str(TEMPLATE_DIR)),
                               autoescape=select_autoescape(['html']))
        self.template = self.env.get_template('report.html')
        self.outputter = outputter or Outputter()
        self.data = {}

    def collect_metrics(self, weighted_rules: List[Dict], at_rules: List[Dict], selectors: List[str],
                        source: str = '') -> Dict:
        """Organize weighted rules and at-rules into report data with summary figures."""
        complexities = [rule['selectorComplexity'] for rule in weighted_rules]
        at_rule_weights = [rule['atRuleWeight'] for rule in at_rules]
        self.data = {
            'source': source,
            'summary': {
                'totalRules': len(weighted_rules),
                'uniqueSelectors': len(selectors),
                'atRules': len(at_rules),
                'maxSelectorComplexity': max(complexities, default=0),
                'meanSelectorComplexity': round(mean(complexities), 2) if complexities else 0,
                'maxAtRuleWeight': max(at_rule_weights, default=0),
            },
            'selectors': selectors,
            'atRules': at_rules,
            'weightedRules': weighted_rules,
        }
        return self.data

    def render_html(self) -> str:
        # Most complex selectors first in the HTML view
        ranked = sorted(self.data.get('weightedRules', []), key=lambda r: r['selectorComplexity'], reverse=True)
        return self.template.render(report=self.data, ranked_rules=ranked)

    def generate_html_report(self, output_path: Union[str, Path]) -> Path:
        """Generate an HTML report of the collected metrics."""
        return self.outputter.write_file(self.render_html(), output_path)

    def generate_json_report(self, output_path: Union[str, Path, None] = None) -> Path:
        """Generate a JSON report with the raw metrics."""
        return self.outputter.write_data(self.data, output_path)
