# bcs — viewer for the Bash Coding Standard documents
# Copyright (C) 2024-2026 Dr Horst Herb
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""Exception hierarchy shared by all bcs modules.

Library code raises these; only :mod:`bcs.cli` turns them into a
diagnostic on stderr and a process exit status (``exit_code``).
"""

from __future__ import annotations


class BcsError(Exception):
    """Base class for all bcs errors."""

    exit_code = 1


class InvalidTierError(BcsError, ValueError):
    """A tier argument is neither empty nor one of the known tiers."""

    exit_code = 2

    def __init__(self, value: str | None) -> None:
        self.value = "" if value is None else str(value)
        super().__init__(f"Invalid tier {self.value!r}")


class DocumentNotFoundError(BcsError):
    """A document or the data directory could not be located."""


class BcsCodeError(BcsError, ValueError):
    """A BCS code is malformed or does not name an existing rule."""


class SearchError(BcsError):
    """A search pattern could not be compiled."""

    exit_code = 2
