"""CLI entrypoint for scoring a single piece of text."""

from __future__ import annotations

import argparse
import json
import sys

from sentiru.analysis.analyzer import SentimentAnalyzer
from sentiru.lexicon.loader import load_lexicon


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Classify the sentiment of Russian text with the lexicon model")
    parser.add_argument("--text", help="Text to analyze (read from stdin when omitted)")
    parser.add_argument(
        "--lexicon-path",
        default=None,
        help="Path to the lexicon JSON file (bundled lexicon by default)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print cleaned text, tokens and lexicon matches alongside the result",
    )
    args = parser.parse_args(argv)
    text = args.text if args.text is not None else sys.stdin.read()

    analyzer = SentimentAnalyzer(load_lexicon(args.lexicon_path))
    if args.debug:
        payload = analyzer.debug(text).to_dict()
    else:
        payload = analyzer.analyze(text).to_dict()

    print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
