"""Exceptions for use in Distant Start"""

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


# ========== Base Application Exception ==========


class DistantStartException(Exception):
    """Base exception for all Distant Start errors.

    All custom exceptions in the package inherit from this class, so a
    host can catch every package-specific error with a single except clause.
    """

    pass


# ========== Spread Exceptions ==========


class SpreadException(DistantStartException):
    """Base exception for spread optimization errors."""

    pass


class PreconditionViolation(SpreadException):
    """Raised when the optimizer is invoked with inputs it does not support.

    Examples are fewer than two members per subset, a subset larger than
    the participant list, or more participants than the supported cap.
    These indicate a caller bug and are never recovered from.
    """

    pass


class ReconciliationException(SpreadException):
    """Raised when remaining targets and remaining humans differ in count."""

    pass


# ========== Participant Exceptions ==========


class ParticipantException(DistantStartException):
    """Base exception for participant-related errors."""

    pass


class InvalidSnapshotException(ParticipantException):
    """Raised when a participant snapshot is invalid or incomplete."""

    pass


# ========== Map Exceptions ==========


class MapException(DistantStartException):
    """Base exception for map and distance errors."""

    pass


class InvalidPositionException(MapException):
    """Raised when a position is unknown to the distance oracle."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(DistantStartException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a file cannot be saved."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(DistantStartException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
