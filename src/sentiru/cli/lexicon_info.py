"""CLI for inspecting the lexicon that the analyzer would use."""

from __future__ import annotations

import argparse
import json

from sentiru.analysis.analyzer import SentimentAnalyzer
from sentiru.lexicon.loader import load_lexicon


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Show word counts of the sentiment lexicon")
    parser.add_argument(
        "--lexicon-path",
        default=None,
        help="Path to the lexicon JSON file (bundled lexicon by default)",
    )
    args = parser.parse_args(argv)

    lexicon = load_lexicon(args.lexicon_path)
    payload = SentimentAnalyzer(lexicon).describe_lexicon().to_dict()
    payload["source"] = lexicon.source
    print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
