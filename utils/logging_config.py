"""Logging configuration for the application."""

import logging
import sys

_HANDLER_NAME = "calendar-console"


def setup_logging(level: str = "INFO"):
    """Configure the root logger once; repeated calls only adjust the level."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if not any(h.get_name() == _HANDLER_NAME for h in root_logger.handlers):
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.set_name(_HANDLER_NAME)
        console_handler.setFormatter(
            logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        )
        root_logger.addHandler(console_handler)

    # HTTP 라이브러리 디버그 로그 비활성화
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
