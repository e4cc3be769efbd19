# log_search/logger.py
from __future__ import annotations

import os
import sys
from functools import wraps
from time import perf_counter
from typing import Callable, Optional

from loguru import logger

from log_search.config import LogConfig

CONSOLE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}"


class Logging:
    """
    Process-wide loguru setup
    ---------------------------------------
    - stderr sink, always
    - optional daily-rotated file sink with retention
    - catch() decorator: log, time and re-raise
    ---------------------------------------
    """

    def __init__(self, config: Optional[LogConfig] = None):
        self.configure(config or LogConfig())

    def configure(self, config: LogConfig) -> None:
        self.config = config

        logger.remove()
        logger.add(sys.stderr, level=config.level, format=CONSOLE_FORMAT)

        if config.dir:
            os.makedirs(config.dir, exist_ok=True)
            logger.add(
                sink=os.path.join(config.dir, "{time:YYYY-MM-DD}.log"),
                rotation=config.rotation,
                retention=config.retention,
                level=config.level,
                format=CONSOLE_FORMAT,
                enqueue=True,  # flask worker threads share the sink
                backtrace=True,
                diagnose=False,
            )

    # ---------- thin wrappers ----------
    def debug(self, msg: str, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        logger.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.exception(msg, *args, **kwargs)

    # ---------- decorator ----------
    def catch(self, msg: str = "Exception occurred", log_time: bool = True) -> Callable:
        def decorator(func: Callable):
            @wraps(func)
            def wrapper(*args, **kwargs):
                start = perf_counter()
                try:
                    result = func(*args, **kwargs)
                except Exception:
                    logger.exception(f"[ERROR] {func.__name__}: {msg}")
                    raise

                if log_time:
                    cost = perf_counter() - start
                    logger.info(f"[TIME] {func.__name__} took {cost:.4f}s")
                return result

            return wrapper

        return decorator


logs = Logging()
