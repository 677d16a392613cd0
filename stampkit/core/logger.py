"""Logging for stampkit: Rich output on the console, optional plain log file."""
import logging
import tempfile
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

console = Console()

ROOT_LOGGER = "stampkit"
LOG_DIR = Path.home() / ".cache" / "stampkit"
LOG_FILE = LOG_DIR / "stampkit.log"
FILE_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


def _level(verbose: bool) -> int:
    return logging.DEBUG if verbose else logging.INFO


def _writable_target(path: Path) -> Path:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except PermissionError:
        return Path(tempfile.gettempdir()) / LOG_FILE.name
    return path


def setup_file_logging(log_file: Optional[str] = None, verbose: bool = False) -> Path:
    """Mirror every stampkit log record into a file.

    Calling it again moves the log to the new target; the previous file
    handler is closed.

    Args:
        log_file: Path to log file (defaults to ~/.cache/stampkit/stampkit.log)
        verbose: Record debug messages too

    Returns:
        Path of the log file in use (the temp directory when the requested
        directory cannot be created)
    """
    target = _writable_target(Path(log_file) if log_file else LOG_FILE)

    root = logging.getLogger(ROOT_LOGGER)
    for old in [h for h in root.handlers if isinstance(h, logging.FileHandler)]:
        root.removeHandler(old)
        old.close()

    handler = logging.FileHandler(target, encoding="utf-8")
    handler.setLevel(_level(verbose))
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root.addHandler(handler)
    root.setLevel(_level(verbose))

    root.info(f"stampkit logging initialized: {target}")
    return target


def set_verbose(verbose: bool = True) -> None:
    """Raise or lower the level of every console-attached stampkit logger."""
    for name, logger in logging.Logger.manager.loggerDict.items():
        if not name.startswith(ROOT_LOGGER) or not isinstance(logger, logging.Logger):
            continue
        if any(isinstance(h, RichHandler) for h in logger.handlers):
            logger.setLevel(_level(verbose))


def get_logger(name: str) -> logging.Logger:
    """Return a logger that prints through the shared Rich console.

    Module loggers start at INFO; use set_verbose() for debug output and
    setup_file_logging() to keep a copy on disk.
    """
    logger = logging.getLogger(name)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=console, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger
