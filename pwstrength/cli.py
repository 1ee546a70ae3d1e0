"""
pwstrength: score a password from the command line.

The password is read from the first argument or, if omitted, prompted for
without echo. The report never prints the password itself.
"""

import argparse
import getpass
import json
import logging
import sys

from .config import DEFAULT_CONFIG, AnalyzerConfig
from .logging_config import configure_logging
from .report import build_report

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="pwstrength", description="Password strength estimator")
    p.add_argument("password", nargs="?", help="Password to analyze (prompted for if omitted)")
    p.add_argument("--json", action="store_true", help="Print the report as JSON")
    p.add_argument("--guess-rate", type=float, default=None,
                   help=f"Assumed guesses per second (default {DEFAULT_CONFIG.guess_rate:.0e})")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p.parse_args(argv)


def render_text(report: dict) -> str:
    analysis = report["analysis"]
    level = analysis["strengthLevel"]
    lines = [
        f"Length: {analysis['length']}",
        f"Strength: {level['emoji']} {level['label']} (score {analysis['score']:g}/5)",
        "",
        "Why:",
    ]
    lines.extend(f" - {e}" for e in analysis["explanations"])
    brute = report["bruteForce"]
    if brute:
        lines.append("")
        lines.append(f"Total combinations: {brute['totalCombinationsDisplay']}")
        lines.append(f"Estimated time to brute-force: {brute['timeDisplay']}")
    lines.append("")
    lines.append("Checklist:")
    for c in report["criteria"]:
        lines.append(f" [{'x' if c['met'] else ' '}] {c['text']}")
    return "\n".join(lines)


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    config = DEFAULT_CONFIG
    if args.guess_rate is not None:
        try:
            config = AnalyzerConfig.from_mapping({"GUESS_RATE": args.guess_rate})
        except ValueError as e:
            print(f"[!] {e}", file=sys.stderr)
            return 2

    pw = args.password
    if pw is None:
        try:
            pw = getpass.getpass("Password to analyze: ")
        except (KeyboardInterrupt, EOFError):
            print("\nExiting.")
            return 0

    if not pw:
        print("No password entered.")
        return 0

    report = build_report(pw, config)
    logger.debug("Analyzed password of length %d", report["analysis"]["length"])
    if args.json:
        print(json.dumps(report, indent=2, ensure_ascii=False))
    else:
        print(render_text(report))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
