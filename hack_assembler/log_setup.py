"""
Logging setup for the hackasm command-line tool.

Library modules only call ``logging.getLogger(__name__)``; handlers are
attached here, once, by the program entry point. The console goes through
rich's ``RichHandler``. A timestamped plain-text log file is added when a
``log_dir`` is given.

Log files: ``<log_dir>/<name>_YYYYMMDD_HHMMSS.log``
"""

from __future__ import annotations
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(
    name: str = "hack_assembler",
    level: int = logging.DEBUG,
    console_level: int = logging.INFO,
    log_dir: Optional[Path] = None,
) -> logging.Logger:
    """Configure and return a logger. A second call for the same name is a no-op."""
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(level)

    # ── Console handler ──
    ch = RichHandler(
        console=Console(stderr=True),
        level=console_level,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    ch.setLevel(console_level)
    logger.addHandler(ch)

    # ── File handler: captures everything (DEBUG+) ──
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_dir / f"{name}_{ts}.log"
        fh = logging.FileHandler(str(log_file), encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)-7s | %(name)s | %(funcName)s:%(lineno)d | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        logger.addHandler(fh)
        logger.debug("Log file: %s", log_file)

    return logger
