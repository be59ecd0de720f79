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

"""Data models for document tiers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Base name shared by every tier of the full standard
BASE_NAME = "BASH-CODING-STANDARD"


class Tier(Enum):
    """Verbosity level at which the standard is published."""
    COMPLETE = "complete"
    SUMMARY = "summary"
    ABSTRACT = "abstract"

    @property
    def suffix(self) -> str:
        return f".{self.value}.md"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    def filename(self, base_name: str = BASE_NAME) -> str:
        return f"{base_name}{self.suffix}"


TIER_NAMES: tuple[str, ...] = tuple(t.value for t in Tier)


@dataclass(frozen=True)
class TierSelection:
    """Outcome of resolving one tier request."""
    requested: str
    default: Tier | None
    resolved: Tier
    document_path: str
