"""
Single place to:
- Load env vars from .env if present
- Read the app settings (word server, log level)
- Configure logging once for the whole app

Why: centralizing this keeps settings consistent and testable.
"""

import logging
import os

from dotenv import load_dotenv

# 1) Load env vars from .env if present
# dev convenience; in prod the platform injects env vars
load_dotenv()

# 2) Pull the settings.
WORD_SERVER_URL = os.getenv("JOTTO_WORD_SERVER_URL", "http://localhost:3030")
WORD_SERVER_TIMEOUT = float(os.getenv("JOTTO_WORD_SERVER_TIMEOUT", "3.0"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


# 3) Logging: one basicConfig for the process, modules use getLogger(__name__).
def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
