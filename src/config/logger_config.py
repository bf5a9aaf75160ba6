import os
import sys
from pathlib import Path

from loguru import logger

log_dir = Path(os.getenv("WIKTIONARY_LOG_DIR", "logs"))
log_file = log_dir / "{time}.log"

logger.remove()
logger.add(
    sys.stderr,
    level=os.getenv("WIKTIONARY_LOG_LEVEL", "INFO"),
)
logger.add(
    log_file,
    rotation="64 MB",
    retention="10 days",
    compression="zip",
    encoding="utf-8",
    level="DEBUG",
)
