"""
JSON API in front of the analyzer.

Run with either of:
    flask --app pwstrength.app run
    python -m pwstrength.app

Overrides come from PWSTRENGTH_* environment variables, e.g.
PWSTRENGTH_GUESS_RATE=1e12. Passwords are analyzed in memory only; nothing is
stored or logged apart from length and strength label.
"""

import logging

from flask import Flask, jsonify, request
from werkzeug.exceptions import BadRequest, HTTPException

from .config import AnalyzerConfig
from .logging_config import configure_logging
from .models import StrengthLevel
from .report import build_report

logger = logging.getLogger(__name__)


def create_app(test_config=None):
    app = Flask(__name__)
    # request bodies are a single small JSON object
    app.config.from_mapping(MAX_CONTENT_LENGTH=64 * 1024,
                            GUESS_RATE=None, LOWERCASE_SIZE=None, UPPERCASE_SIZE=None,
                            NUMBERS_SIZE=None, SPECIAL_SIZE=None)
    if test_config is None:
        app.config.from_prefixed_env("PWSTRENGTH")
    else:
        app.config.from_mapping(test_config)

    analyzer_config = AnalyzerConfig.from_mapping(app.config)
    app.extensions["pwstrength"] = analyzer_config

    @app.errorhandler(HTTPException)
    def handle_http_error(err):
        response = jsonify(error=err.name.lower().replace(" ", "_"), message=err.description)
        response.status_code = err.code
        return response

    @app.route("/health")
    def health():
        return jsonify(status="ok")

    @app.route("/api/levels")
    def levels():
        thresholds = {level: min_score for min_score, level in analyzer_config.strength_thresholds}
        out = []
        for level in StrengthLevel:
            item = level.to_dict()
            item["minScore"] = thresholds.get(level, 0.0)
            out.append(item)
        return jsonify(levels=out)

    @app.route("/api/analyze", methods=["POST"])
    def analyze_password():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            logger.warning("Rejected analyze request without a JSON object body")
            raise BadRequest("Request body must be a JSON object")
        password = data.get("password")
        if not isinstance(password, str):
            logger.warning("Rejected analyze request: password missing or not a string")
            raise BadRequest("Field 'password' must be a string")

        report = build_report(password, analyzer_config)
        if report["analysis"] is not None:
            logger.debug("Analyzed password of length %d: %s",
                         report["analysis"]["length"],
                         report["analysis"]["strengthLevel"]["label"])
        return jsonify(report)

    return app


if __name__ == "__main__":
    configure_logging()
    create_app().run(debug=True)
