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

"""Section listing and pattern search over a standard document."""

from __future__ import annotations

import re

from bcs.errors import SearchError
from bcs.rules.models import SearchMatch

_SECTION = re.compile(r"^##\s+(.+?)\s*$")
_LEADING_NUMBER = re.compile(r"^\d+(?:\.\d+)*\.?\s+")
_FENCE = re.compile(r"^\s*(```|~~~)")

GROUP_SEPARATOR = "--"


def list_sections(text: str) -> list[str]:
    """Return the titles of the level-2 headings in *text*.

    Headings inside fenced code blocks are ignored and any existing
    numbering (``1.``, ``2.3``) is stripped.
    """
    sections: list[str] = []
    in_fence = False
    for line in text.splitlines():
        if _FENCE.match(line):
            in_fence = not in_fence
            continue
        if in_fence:
            continue
        m = _SECTION.match(line)
        if m:
            sections.append(_LEADING_NUMBER.sub("", m.group(1)))
    return sections


def search(
    text: str,
    pattern: str,
    *,
    ignore_case: bool = False,
    context: int = 0,
) -> list[SearchMatch]:
    """Return matching lines of *text*, with *context* lines around each.

    Line numbers are 1-based.  Raises :class:`SearchError` when *pattern*
    is not a valid regular expression.
    """
    flags = re.IGNORECASE if ignore_case else 0
    try:
        regex = re.compile(pattern, flags)
    except re.error as e:
        raise SearchError(f"Invalid search pattern {pattern!r}: {e}") from e

    lines = text.splitlines()
    hits = [i for i, line in enumerate(lines) if regex.search(line)]
    if not hits:
        return []

    hit_set = set(hits)
    wanted: set[int] = set()
    for i in hits:
        wanted.update(range(max(0, i - context), min(len(lines), i + context + 1)))

    return [
        SearchMatch(line_number=i + 1, text=lines[i], is_context=i not in hit_set)
        for i in sorted(wanted)
    ]


def format_matches(matches: list[SearchMatch]) -> list[str]:
    """Render matches grep-style.

    As with ``grep -C``, non-adjacent groups are separated by ``--`` only
    when the matches carry context lines.
    """
    grouped = any(m.is_context for m in matches)
    out: list[str] = []
    previous: int | None = None
    for match in matches:
        if grouped and previous is not None and match.line_number > previous + 1:
            out.append(GROUP_SEPARATOR)
        out.append(match.to_line())
        previous = match.line_number
    return out
