"""
Logging setup

Importing this module configures the root logger once for the application.
"""

import logging

from directions.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

logging.basicConfig(level=settings.LOG_LEVEL.upper(), format=LOG_FORMAT)

# httpx logs every request at INFO
logging.getLogger("httpx").setLevel(logging.WARNING)
