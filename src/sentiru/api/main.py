"""HTTP API entrypoint served by uvicorn."""

from __future__ import annotations

import logging
import sys

from dotenv import load_dotenv
import uvicorn

from sentiru.analysis.analyzer import SentimentAnalyzer
from sentiru.api.app import create_app
from sentiru.config import LOG_FORMAT, Settings
from sentiru.lexicon.loader import load_lexicon


logger = logging.getLogger(__name__)


def main() -> None:
    """Load settings and lexicon, then serve the API until interrupted."""
    load_dotenv()
    try:
        settings = Settings.from_env()
    except ValueError as e:
        logging.basicConfig(format=LOG_FORMAT, level=logging.INFO)
        logger.error("Configuration error: %s", e)
        sys.exit(1)

    logging.basicConfig(format=LOG_FORMAT, level=settings.log_level)
    analyzer = SentimentAnalyzer(load_lexicon(settings.lexicon_path))
    info = analyzer.describe_lexicon()
    logger.info(
        "Starting API on %s:%d with %d lexicon words",
        settings.api_host,
        settings.api_port,
        info.total_words,
    )

    uvicorn.run(
        create_app(analyzer),
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
