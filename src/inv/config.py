"""Runtime configuration for the inv viewer."""

from __future__ import annotations

import os
from dataclasses import dataclass

LOG_FILE_ENV = "INV_LOG_FILE"


@dataclass
class Config:
    """Viewer configuration."""

    max_line_length: int = 4096
    read_timeout_ds: int = 1
    placeholder: bytes = b"~"
    farewell: bytes = b"Bye;D\n"
    log_file: str | None = None


def load_config() -> Config:
    config = Config()
    log_file = os.environ.get(LOG_FILE_ENV, "")
    if log_file:
        config.log_file = log_file
    return config
