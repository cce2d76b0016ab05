"""Runtime configuration loaded from the environment.

Recognised variables (a ``.env`` file in the working directory is read
first, without overriding variables that are already set):

    VDMRT_SEED        integer seed for the default random generator
    VDMRT_LOG_LEVEL   DEBUG, INFO, WARNING, ERROR or CRITICAL
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from vdmrt.result import Err, Ok, Result

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class RuntimeConfig:
    seed: int | None = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> Result["RuntimeConfig", ValueError]:
        load_dotenv()
        seed: int | None
        match os.getenv("VDMRT_SEED"):
            case None:
                seed = None
            case str(text) if not text.strip():
                seed = None
            case str(text):
                try:
                    seed = int(text.strip())
                except ValueError:
                    return Err(ValueError(f"VDMRT_SEED is not an integer: {text!r}"))

        level = os.getenv("VDMRT_LOG_LEVEL", "WARNING").strip().upper()
        if level not in LOG_LEVELS:
            return Err(ValueError(f"VDMRT_LOG_LEVEL is not a log level: {level!r}"))

        return Ok(cls(seed=seed, log_level=level))


def configure_logging(config: RuntimeConfig) -> logging.Logger:
    """Attach a stderr handler to the ``vdmrt`` logger at the configured level.

    Calling it again only adjusts the level.
    """
    logger = logging.getLogger("vdmrt")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(config.log_level)
    return logger
