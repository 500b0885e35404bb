"""Shared helpers: logger setup and id generation."""

# Swiss Manager
# Copyright (C) 2025  Swiss Manager developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import logging
import os
import uuid

from swissmanager.constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s"
ROOT_LOGGER_NAME = "swissmanager"


def _configure_root_logger() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        level = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
        root.setLevel(getattr(logging, level, logging.WARNING))
        root.propagate = False
    return root


def setup_logger(name: str) -> logging.Logger:
    """Return a module logger attached to the package root logger.

    The root ``swissmanager`` logger gets a single stream handler the first
    time this is called; its level comes from ``SWISSMANAGER_LOG_LEVEL``.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        The configured logger
    """
    _configure_root_logger()
    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def set_log_level(level: str) -> None:
    """Change the package log level at runtime (e.g. from the testing CLI)."""
    _configure_root_logger().setLevel(level.upper())


def generate_id(prefix: str = "") -> str:
    """Generate a unique identifier, optionally prefixed."""
    unique = uuid.uuid4().hex[:12]
    return f"{prefix}-{unique}" if prefix else unique


__all__ = ["setup_logger", "set_log_level", "generate_id"]
