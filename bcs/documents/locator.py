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

"""Locate the data directory and manage the default-tier symlink.

Search order used by :func:`find_data_dir`:

1. ``<explicit>`` and ``<explicit>/data`` (``--data-dir`` or ``BCS_DATA_DIR``)
2. ``./data`` in the current working directory
3. ``/usr/local/share/yatti/bash-coding-standard/data``
4. ``/usr/share/yatti/bash-coding-standard/data``

The installed default tier is recorded as a symlink
``BASH-CODING-STANDARD.md -> BASH-CODING-STANDARD.<tier>.md`` inside the
data directory.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from bcs.errors import DocumentNotFoundError
from bcs.tiers.models import BASE_NAME, Tier

logger = logging.getLogger(__name__)

SYSTEM_DATA_DIRS: tuple[Path, ...] = (
    Path("/usr/local/share/yatti/bash-coding-standard/data"),
    Path("/usr/share/yatti/bash-coding-standard/data"),
)

DEFAULT_LINK_NAME = f"{BASE_NAME}.md"


def _candidate_dirs(explicit: str | Path | None) -> list[Path]:
    candidates: list[Path] = []
    if explicit:
        root = Path(explicit).expanduser()
        candidates.extend([root, root / "data"])
    candidates.append(Path.cwd() / "data")
    candidates.extend(SYSTEM_DATA_DIRS)
    return candidates


def _has_documents(directory: Path) -> bool:
    if not directory.is_dir():
        return False
    return any(directory.glob(f"{BASE_NAME}.*.md"))


def find_data_dir(explicit: str | Path | None = None) -> Path:
    """Return the first directory on the search path holding the standard.

    Raises :class:`DocumentNotFoundError` naming every location tried.
    """
    searched = _candidate_dirs(explicit)
    for directory in searched:
        if _has_documents(directory):
            logger.debug("Using data directory %s", directory)
            return directory
    raise DocumentNotFoundError(
        "Cannot find the Bash Coding Standard; searched: "
        + ", ".join(str(d) for d in searched)
    )


def default_link(data_dir: Path) -> Path:
    """Return the path of the default-tier symlink."""
    return Path(data_dir) / DEFAULT_LINK_NAME


def detect_default_tier(data_dir: str | Path | None) -> Tier | None:
    """Return the tier the default symlink points to, or ``None``."""
    if data_dir is None:
        return None
    link = default_link(Path(data_dir))
    if not link.is_symlink():
        return None
    target = os.readlink(link)
    for tier in Tier:
        if target.endswith(tier.suffix):
            return tier
    logger.warning("Default link %s points to unrecognised target %s", link, target)
    return None


def set_default_tier(data_dir: str | Path, tier: Tier) -> Tier | None:
    """Point the default symlink at *tier* and return the previous tier.

    The link target is relative so the data directory stays relocatable.
    Raises :class:`DocumentNotFoundError` if the tier document is missing.
    """
    data_dir = Path(data_dir)
    target = data_dir / tier.filename()
    if not target.is_file():
        raise DocumentNotFoundError(f"Tier document not found: {target}")

    previous = detect_default_tier(data_dir)
    if previous is tier:
        return previous

    link = default_link(data_dir)
    if link.is_symlink() or link.exists():
        link.unlink()
    link.symlink_to(target.name)
    logger.info("Default tier changed from %s to %s",
                previous.value if previous else "none", tier.value)
    return previous
