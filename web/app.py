"""
Web Interface for CSS Complexity Analysis
"""

import logging
import os

from flask import Flask, jsonify, request

from core.css_reader import CSSReader
from core.css_weights import build_report
from core.errors import CSSWeightsError
from reporting.report_builder import ReportBuilder

logger = logging.getLogger(__name__)

DEFAULT_MAX_UPLOAD = 5 * 1024 * 1024


def _read_css_from_request():
    """CSS text from the ``css`` form field or the ``css_file`` upload."""
    if 'css_file' in request.files and request.files['css_file'].filename:
        return request.files['css_file'].read().decode('utf-8'), request.files['css_file'].filename
    return request.form.get('css', ''), request.form.get('source', '')


def _analyze(css: str, source: str):
    sheet = CSSReader.get_parsed_css(css)
    if sheet is None:
        raise CSSWeightsError('CSS could not be parsed')
    report = build_report(sheet)
    builder = ReportBuilder()
    builder.collect_metrics(report['weightedRules'], report['atRules'], report['selectors'], source=source)
    return builder


def create_app() -> Flask:
    app = Flask(__name__)
    app.config['MAX_CONTENT_LENGTH'] = int(os.environ.get('CSS_WEIGHTS_MAX_UPLOAD', DEFAULT_MAX_UPLOAD))

    @app.errorhandler(UnicodeDecodeError)
    def undecodable_upload(e):
        logger.error(f"Error decoding uploaded CSS: {str(e)}")
        return jsonify({'error': 'Uploaded CSS must be UTF-8 encoded'}), 400

    @app.route('/analyze', methods=['POST'])
    def analyze():
        """Return the complexity report for the posted CSS as JSON."""
        css, source = _read_css_from_request()
        if not css.strip():
            return jsonify({'error': 'A css field or css_file upload is required'}), 400
        try:
            builder = _analyze(css, source)
        except CSSWeightsError as e:
            logger.error(f"Error analyzing CSS: {str(e)}", exc_info=True)
            return jsonify({'error': str(e)}), 422
        return jsonify(builder.data)

    @app.route('/report', methods=['POST'])
    def report():
        """Return the complexity report for the posted CSS as HTML."""
        css, source = _read_css_from_request()
        if not css.strip():
            return jsonify({'error': 'A css field or css_file upload is required'}), 400
        try:
            builder = _analyze(css, source)
        except CSSWeightsError as e:
            logger.error(f"Error analyzing CSS: {str(e)}", exc_info=True)
            return jsonify({'error': str(e)}), 422
        return builder.render_html(), 200, {'Content-Type': 'text/html; charset=utf-8'}

    return app


app = create_app()

if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    app.run(debug=True)
