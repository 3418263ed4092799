"""
Centralized logging configuration for the application.
"""

import logging
import sys
from typing import Optional

from dreamweaver.core.config import Settings


def setup_logging(config: Optional[Settings] = None) -> None:
    """
    Configure the root logger once.

    Args:
        config: Settings instance, uses the global settings if None
    """
    if config is None:
        from dreamweaver.core.config import settings as default_settings
        config = default_settings

    level = logging.DEBUG if config.DEBUG else getattr(logging, config.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(level=level,
                        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                        handlers=[logging.StreamHandler(sys.stdout)])
