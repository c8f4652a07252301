"""
Logging setup

Purpose: configure the root logger once for the API, the UI and scripts.

Input: LOG_LEVEL from config.

Output: a configured logging module; modules keep using logging.getLogger(__name__).

Example: setup_logging() -> "2026-01-05 10:00:00 - analysis_service - INFO - [ANALYZE] ..."
"""
import logging
from typing import Optional

import config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: Optional[str] = None) -> None:
    level = (level or config.LOG_LEVEL).upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
