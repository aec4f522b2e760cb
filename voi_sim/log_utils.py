from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

_FORMAT = logging.Formatter(
    fmt="%(asctime)s | %(levelname)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def _add_file_handler(logger: logging.Logger, log_path: Path, level: int) -> None:
    """Attach a file handler for `log_path` unless one is already attached."""
    target = os.path.abspath(log_path)
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == target:
            return

    log_path.parent.mkdir(parents=True, exist_ok=True)
    fh = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    fh.setLevel(level)
    fh.setFormatter(_FORMAT)
    logger.addHandler(fh)


def get_logger(*, level: int = logging.INFO, log_path: Optional[Path] = None) -> logging.Logger:
    """
    Configure and return the package logger.

    Logs to stderr, and also to `log_path` when given. Each new `log_path`
    gets its own file handler, even on later calls.
    """
    logger = logging.getLogger("voi_sim")
    logger.setLevel(level)

    # Avoid duplicate stderr handlers if called multiple times in-process.
    if not getattr(logger, "_configured", False):
        sh = logging.StreamHandler()
        sh.setLevel(level)
        sh.setFormatter(_FORMAT)
        logger.addHandler(sh)
        logger.propagate = False
        logger._configured = True  # type: ignore[attr-defined]

    if log_path is not None:
        _add_file_handler(logger, Path(log_path), level)

    return logger
