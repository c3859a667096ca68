"""Shared utilities for Distant Start."""

# Distant Start
# Copyright (C) 2025  Distant Start developers
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
import uuid
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_root_configured = False


def setup_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Return a module logger under the ``distantstart`` hierarchy.

    The package root logger gets a single stream handler the first time
    this is called; module loggers propagate to it.

    Args:
        name: Logger name, normally ``__name__``
        level: Optional level for this logger only

    Returns:
        Configured logger
    """
    global _root_configured

    if not _root_configured:
        root = logging.getLogger("distantstart")
        if not root.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            root.addHandler(handler)
            root.setLevel(logging.WARNING)
        _root_configured = True

    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger


def set_log_level(level: int) -> None:
    """Set the level of the package root logger (used by the CLI)."""
    logging.getLogger("distantstart").setLevel(level)


def generate_id(prefix: str = "") -> str:
    """Generate a unique identifier, optionally prefixed with a type name."""
    unique = uuid.uuid4().hex
    return f"{prefix.lower()}_{unique}" if prefix else unique
