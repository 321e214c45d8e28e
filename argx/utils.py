# Argx Token Classifier — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Logging setup for programs that want to see what argx does.

The library only emits DEBUG records on the "argx" logger and never installs
handlers on its own. `setup_logging()` attaches one handler to that logger and
stops propagation, so the host program's root logger and its handlers are left
untouched.
"""
from __future__ import annotations

import logging
import os

import pythonjsonlogger.json
from rich.logging import RichHandler

LOG_MODES = ("cli", "json")


def _json_formatter() -> logging.Formatter:
    return pythonjsonlogger.json.JsonFormatter(
        "%(asctime)s %(name)s %(levelname)s %(message)s"
    )


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    handler = logging.StreamHandler()
    handler.setFormatter(_json_formatter())
    return handler


def setup_logging(
    mode: str | None = None,
    level: int = logging.WARNING,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
) -> logging.Logger:
    """
    Route the "argx" logger to the console and, optionally, a file.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        mode (str | None): "cli" for Rich console output, "json" for JSON lines.
            Defaults to the `ARGX_LOG_MODE` environment variable, then "cli".
        level (int): Level of the "argx" logger and its console handler.
        log_filename (str | None): Also append records to this file when set.
            The file handler always records DEBUG and above.
        json_log_to_file (bool): Format file records as JSON instead of text.

    Returns:
        logging.Logger: The configured "argx" logger.

    Raises:
        ValueError: If `mode` is not one of "cli" or "json". Nothing is changed
            in that case.
    """
    mode = mode or os.getenv("ARGX_LOG_MODE") or "cli"
    if mode not in LOG_MODES:
        raise ValueError(f"Invalid log mode: {mode}")

    logger = logging.getLogger("argx")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = _console_handler(mode)
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            _json_formatter()
            if json_log_to_file
            else logging.Formatter(
                "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)
        level = logging.DEBUG

    logger.setLevel(level)
    logger.propagate = False
    logger.debug("Logging initialized in '%s' mode.", mode)
    return logger
