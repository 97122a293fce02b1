# meeting_summarizer/__main__.py
import logging
import sys

import uvicorn

from meeting_summarizer.core.config import get_settings
from meeting_summarizer.core.logging_setup import setup_logging
from meeting_summarizer.main import create_app

logger = logging.getLogger("meeting_summarizer")


def main() -> None:
    try:
        settings = get_settings()
    except RuntimeError as e:
        setup_logging()
        logger.critical("ERROR: %s", e)
        sys.exit(1)

    setup_logging(settings.log_level)
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
