# Argwalk CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Logging setup for programs built on argwalk.

argwalk itself only logs through the `argwalk` logger and never installs handlers.
`setup_logging()` is what the `argwalk` console script calls once it knows the
requested mode.
"""
from __future__ import annotations

import logging
import os

import pythonjsonlogger.json
from rich.logging import RichHandler

LOG_MODE_ENV = "ARGWALK_LOG_MODE"
JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def running_in_container() -> bool:
    """True if the control groups of PID 1 name a container runtime."""
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
    except OSError:
        return False
    return any(
        runtime in content for runtime in ("docker", "kubepods", "containerd", "podman")
    )


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    if mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_FORMAT))
        return handler
    raise ValueError(f"Invalid log mode: {mode}")


def _file_handler(log_file: str, as_json: bool) -> logging.Handler:
    handler = logging.FileHandler(log_file, "a", "UTF-8")
    if as_json:
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_FORMAT))
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    return handler


def setup_logging(
    mode: str | None = None,
    console_log_level: int = logging.WARNING,
    log_file: str | None = None,
    json_log_to_file: bool = False,
) -> None:
    """
    Replace the root handlers with a console handler and, optionally, a log file.

    Args:
        mode (str | None): "cli" for Rich console output, "json" for one JSON
            object per record. Defaults to `$ARGWALK_LOG_MODE`, else "json" inside
            a container and "cli" elsewhere.
        console_log_level (int): Level of the console handler.
        log_file (str | None): Also log everything from DEBUG up to this file.
        json_log_to_file (bool): Write the file as JSON instead of plain text.

    Raises:
        ValueError: `mode` is neither "cli" nor "json".
    """
    if not mode:
        mode = os.getenv(LOG_MODE_ENV) or ("json" if running_in_container() else "cli")

    console_handler = _console_handler(mode)
    console_handler.setLevel(console_log_level)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)
    root.addHandler(console_handler)
    if log_file:
        root.addHandler(_file_handler(log_file, json_log_to_file))

    logging.getLogger("argwalk").debug("Logging initialized in '%s' mode", mode)
