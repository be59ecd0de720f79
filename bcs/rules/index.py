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

"""BCS code index over the per-rule data tree.

Layout and the codes it yields::

    data/00-header.abstract.md                          BCS00
    data/01-script-structure/00-section.abstract.md     BCS01
    data/01-script-structure/02-shebang.abstract.md     BCS0102
    data/01-script-structure/02-shebang/01-dual-purpose.abstract.md
                                                        BCS010201

A code is the concatenation of the two-digit prefixes along the path.  A
``00-*`` file inside a numbered directory describes the directory itself.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from pathlib import Path

from bcs.errors import BcsCodeError
from bcs.rules.models import CODE_PREFIX, RuleEntry
from bcs.tiers import Tier

logger = logging.getLogger(__name__)

_NUMBERED = re.compile(r"^(\d{2})-")
_CODE_DIGITS = re.compile(r"^\d+$")
_HEADING = re.compile(r"^#{1,6}\s+(.*?)\s*#*\s*$")

MAX_CODE_DIGITS = 8


def normalize_code(code: str) -> str:
    """Return *code* in canonical ``BCSnnnn`` form.

    Accepts the code with or without the ``BCS`` prefix, in any case.
    Raises :class:`BcsCodeError` for anything that is not 2-8 digits in
    pairs.
    """
    raw = code.strip().upper()
    digits = raw[len(CODE_PREFIX):] if raw.startswith(CODE_PREFIX) else raw
    if (
        not _CODE_DIGITS.match(digits)
        or len(digits) % 2
        or len(digits) > MAX_CODE_DIGITS
    ):
        raise BcsCodeError(f"Invalid BCS code format: {code!r}")
    return CODE_PREFIX + digits


def _prefix(path: Path) -> str | None:
    m = _NUMBERED.match(path.name)
    return m.group(1) if m else None


def _read_title(path: Path) -> str:
    """First Markdown heading of *path*, else a title made from its name."""
    try:
        with path.open(encoding="utf-8") as fh:
            for line in fh:
                m = _HEADING.match(line)
                if m and m.group(1):
                    return m.group(1)
    except OSError:
        logger.warning("Could not read %s", path, exc_info=True)
    stem = path.name.split(".", 1)[0]
    return _NUMBERED.sub("", stem).replace("-", " ").strip().capitalize()


def _entry(code: str, tier: Tier, path: Path, data_dir: Path) -> RuleEntry:
    return RuleEntry(
        code=code,
        tier=tier,
        path=path,
        relative_path=str(path.relative_to(data_dir.parent)),
        title=_read_title(path),
    )


def _walk(directory: Path, digits: str, tier: Tier) -> Iterator[tuple[str, Path]]:
    # Files sort before directories so a rule file wins over its subrule dir
    entries = sorted(directory.iterdir(), key=lambda p: (p.is_dir(), p.name))
    for entry in entries:
        num = _prefix(entry)
        if num is None:
            continue
        if entry.is_dir():
            yield from _walk(entry, digits + num, tier)
        elif entry.name.endswith(tier.suffix):
            code_digits = digits if (num == "00" and digits) else digits + num
            yield code_digits, entry


def iter_rules(data_dir: str | Path, tier: Tier) -> Iterator[RuleEntry]:
    """Yield every rule file of *tier* under *data_dir*, ordered by code."""
    data_dir = Path(data_dir)
    found: dict[str, Path] = {}
    for digits, path in _walk(data_dir, "", tier):
        if digits in found:
            logger.debug("Duplicate code %s%s at %s ignored", CODE_PREFIX, digits, path)
            continue
        found[digits] = path
    for digits in sorted(found):
        yield _entry(CODE_PREFIX + digits, tier, found[digits], data_dir)


def _child(directory: Path, num: str, *, want_dir: bool, suffix: str = "") -> Path | None:
    if not directory.is_dir():
        return None
    for entry in sorted(directory.iterdir()):
        if _prefix(entry) != num or entry.is_dir() != want_dir:
            continue
        if want_dir or entry.name.endswith(suffix):
            return entry
    return None


def locate(code: str, data_dir: str | Path, tier: Tier) -> Path | None:
    """Return the file for *code* at *tier*, or ``None`` if there is none."""
    digits = normalize_code(code)[len(CODE_PREFIX):]
    segments = [digits[i:i + 2] for i in range(0, len(digits), 2)]
    directory = Path(data_dir)
    for seg in segments[:-1]:
        directory = _child(directory, seg, want_dir=True)
        if directory is None:
            return None
    last = segments[-1]
    path = _child(directory, last, want_dir=False, suffix=tier.suffix)
    if path is not None:
        return path
    # A section or rule with subrules is described by its own 00-* file
    sub = _child(directory, last, want_dir=True)
    if sub is not None:
        return _child(sub, "00", want_dir=False, suffix=tier.suffix)
    return None


def decode(code: str, data_dir: str | Path, tier: Tier) -> RuleEntry:
    """Return the :class:`RuleEntry` for *code* at *tier*.

    Raises :class:`BcsCodeError` if the code is malformed or unknown.
    """
    canonical = normalize_code(code)
    data_dir = Path(data_dir)
    path = locate(canonical, data_dir, tier)
    if path is None:
        raise BcsCodeError(f"BCS code not found: {canonical} ({tier.value})")
    return _entry(canonical, tier, path, data_dir)


def decode_all(code: str, data_dir: str | Path) -> dict[Tier, RuleEntry]:
    """Return the entries for every tier *code* exists in."""
    canonical = normalize_code(code)
    data_dir = Path(data_dir)
    result: dict[Tier, RuleEntry] = {}
    for tier in Tier:
        path = locate(canonical, data_dir, tier)
        if path is not None:
            result[tier] = _entry(canonical, tier, path, data_dir)
    if not result:
        raise BcsCodeError(f"BCS code not found: {canonical}")
    return result
