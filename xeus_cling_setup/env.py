"""Environment variable overrides."""

import os
from pathlib import Path
from typing import Optional

INTERPRETER_ENV = "XEUS_CLING_XCPP"
"""Explicit path of the xcpp interpreter binary."""

JUPYTER_ENV = "XEUS_CLING_JUPYTER"
"""Explicit path of the jupyter executable."""

PREFIX_ENV = "XEUS_CLING_PREFIX"
"""Installation prefix of xeus-cling, holding etc/xeus-cling and share/xeus-cling."""

LOG_LEVEL_ENV = "XEUS_CLING_SETUP_LOG_LEVEL"
"""Default log level of the command line interface."""


def _get_path(name: str) -> Optional[Path]:
    value = os.environ.get(name)
    return Path(value) if value else None


def get_interpreter_override() -> Optional[Path]:
    return _get_path(INTERPRETER_ENV)


def get_jupyter_override() -> Optional[Path]:
    return _get_path(JUPYTER_ENV)


def get_prefix_override() -> Optional[Path]:
    return _get_path(PREFIX_ENV)


def get_log_level(default: str = "INFO") -> str:
    return os.environ.get(LOG_LEVEL_ENV, default).upper()
