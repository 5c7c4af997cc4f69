"""Shared utilities: logging setup."""

import logging
import sys
from pathlib import Path


def setup_logging(verbose: bool = False, log_dir: Path | str = "data") -> logging.Logger:
    """Configure console + file logging. Returns the root project logger."""
    logger = logging.getLogger("apptrack")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Already configured by an earlier call
    if logger.handlers:
        return logger

    # Console handler
    console = logging.StreamHandler(sys.stdout)
    console.setLevel(logging.DEBUG if verbose else logging.INFO)
    fmt = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s", datefmt="%H:%M:%S")
    console.setFormatter(fmt)
    logger.addHandler(console)

    # File handler for full debug log
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_dir / "session.log", mode="a")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    )
    logger.addHandler(file_handler)

    return logger
