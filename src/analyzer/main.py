import sys

import uvicorn
from loguru import logger
from rich import print

from src.analyzer.config import settings


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


def main():
    configure_logging(settings.log_level)

    mode = "MOCK DATA" if settings.uses_mock_data else "Financial Modeling Prep"
    print(f"[bold]Stock Sentiment Analyzer[/bold] | data source: {mode}")
    print(f"Listening on http://{settings.api_host}:{settings.api_port}")

    uvicorn.run(
        "src.analyzer.api.server:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
