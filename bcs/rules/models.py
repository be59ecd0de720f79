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

"""Data models for the rule index and document search."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from bcs.tiers import Tier

CODE_PREFIX = "BCS"


@dataclass(frozen=True)
class RuleEntry:
    """One rule file of the standard, addressed by its BCS code."""

    code: str            # e.g. "BCS0102"
    tier: Tier
    path: Path
    relative_path: str   # relative to the data dir's parent, e.g. "data/01-.../02-shebang.abstract.md"
    title: str

    @property
    def digits(self) -> str:
        return self.code[len(CODE_PREFIX):]

    @property
    def depth(self) -> int:
        """1 for a section, 2 for a rule, 3 for a subrule, and so on."""
        return len(self.digits) // 2

    def to_line(self) -> str:
        return f"{self.code}:{self.relative_path}:{self.title}"


@dataclass(frozen=True)
class SearchMatch:
    """A matching (or context) line from a document search."""

    line_number: int
    text: str
    is_context: bool = False

    def to_line(self) -> str:
        sep = "-" if self.is_context else ":"
        return f"{self.line_number}{sep}{self.text}"
