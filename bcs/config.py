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

"""Process-wide settings, read once from the environment at startup.

Environment variables:

* ``BCS_DEFAULT_TIER`` — tier used when no tier argument is given
* ``BCS_DATA_DIR`` — directory holding the standard's documents
* ``BCS_TEMPLATE_DIR`` — user override directory for script templates
* ``BCS_VERBOSE`` — enable debug logging (``1``, ``true``, ``yes``, ``on``)

Default tier precedence: explicit argument, then ``BCS_DEFAULT_TIER``,
then the installed ``BASH-CODING-STANDARD.md`` symlink, then
:data:`FALLBACK_TIER`.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from bcs.documents.locator import detect_default_tier
from bcs.tiers import Tier, parse_tier

logger = logging.getLogger(__name__)

VERSION = "1.0.0"
FALLBACK_TIER = Tier.ABSTRACT

ENV_DEFAULT_TIER = "BCS_DEFAULT_TIER"
ENV_DATA_DIR = "BCS_DATA_DIR"
ENV_TEMPLATE_DIR = "BCS_TEMPLATE_DIR"
ENV_VERBOSE = "BCS_VERBOSE"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Immutable configuration for one bcs process."""
    default_tier: str | None = None      # raw BCS_DEFAULT_TIER; None -> symlink
    data_dir: Path | None = None
    template_dir: Path | None = None
    verbose: bool = False


def _path_or_none(value: str | None) -> Path | None:
    return Path(value).expanduser() if value else None


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from *environ* (defaults to ``os.environ``).

    ``BCS_DEFAULT_TIER`` is kept as given; it is validated only when a
    default is actually needed (see :func:`effective_default_tier`).
    """
    env = os.environ if environ is None else environ
    raw_tier = env.get(ENV_DEFAULT_TIER, "").strip()
    settings = Settings(
        default_tier=raw_tier or None,
        data_dir=_path_or_none(env.get(ENV_DATA_DIR)),
        template_dir=_path_or_none(env.get(ENV_TEMPLATE_DIR)),
        verbose=env.get(ENV_VERBOSE, "").strip().lower() in _TRUTHY,
    )
    logger.debug("Loaded settings: %s", settings)
    return settings


def effective_default_tier(settings: Settings, data_dir: Path | None) -> Tier:
    """Return the default tier after applying the full fallback chain.

    Raises :class:`~bcs.errors.InvalidTierError` if ``BCS_DEFAULT_TIER``
    holds an unknown tier name.
    """
    if settings.default_tier is not None:
        return parse_tier(settings.default_tier)
    linked = detect_default_tier(data_dir)
    if linked is not None:
        return linked
    return FALLBACK_TIER
