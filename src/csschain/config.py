"""Runtime settings and logging setup for the csschain command line."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass

_HANDLER_NAME = "csschain-cli"


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    json_indent: int | None = None  # None = compact JSON

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Create settings from CSSCHAIN_* environment variables.

        Reads CSSCHAIN_LOG_LEVEL and CSSCHAIN_JSON_INDENT; unset or empty
        variables fall back to the defaults.

        Raises:
            ValueError: the log level is not a logging level name, or the
                indent is not a non-negative integer.
        """
        env = os.environ if environ is None else environ
        level = (env.get("CSSCHAIN_LOG_LEVEL") or "WARNING").strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"CSSCHAIN_LOG_LEVEL: unknown log level {level!r}")

        indent = env.get("CSSCHAIN_JSON_INDENT", "").strip()
        if indent and not indent.isdecimal():
            raise ValueError(
                f"CSSCHAIN_JSON_INDENT: expected a non-negative integer, got {indent!r}"
            )
        return cls(log_level=level, json_indent=int(indent) if indent else None)


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Send csschain log records at *level* and above to stderr.

    Calling it again replaces the handler installed by the previous call, so
    the handler always writes to the current ``sys.stderr``.
    """
    logger = logging.getLogger("csschain")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
    )
    logger.addHandler(handler)
    return logger
