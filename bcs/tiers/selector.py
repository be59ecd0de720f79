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

"""Tier selection: map an optional tier argument to a document path.

Resolution order for ``resolve(arg, default)``:

1. ``arg`` when it names a tier (``complete``, ``summary``, ``abstract``)
2. ``default`` when ``arg`` is empty or ``None``

Anything else raises :class:`~bcs.errors.InvalidTierError`.  The default
is always passed in by the caller; nothing here keeps state between calls.
"""

from __future__ import annotations

import logging

from bcs.errors import InvalidTierError
from bcs.tiers.models import BASE_NAME, TIER_NAMES, Tier, TierSelection

logger = logging.getLogger(__name__)


def parse_tier(value: str | Tier | None) -> Tier:
    """Convert a tier name into a :class:`Tier`.

    Raises :class:`InvalidTierError` for empty or unknown names.
    """
    if isinstance(value, Tier):
        return value
    try:
        return Tier(value)
    except ValueError:
        raise InvalidTierError(value) from None


def resolve_tier(arg: str | Tier | None, default: str | Tier | None) -> Tier:
    """Return the tier *arg* selects, falling back to *default* when empty."""
    if arg:
        return parse_tier(arg)
    # An empty default means nothing valid can be resolved.
    return parse_tier(default)


def select(
    arg: str | Tier | None,
    default: str | Tier | None,
    base_name: str = BASE_NAME,
) -> TierSelection:
    """Resolve *arg* against *default* and build the full selection record."""
    tier = resolve_tier(arg, default)
    default_tier = default if isinstance(default, Tier) else None
    if default_tier is None and default in TIER_NAMES:
        default_tier = Tier(default)
    path = tier.filename(base_name)
    logger.debug("Resolved tier %r (default %r) -> %s", arg, default, path)
    requested = arg.value if isinstance(arg, Tier) else (arg or "")
    return TierSelection(
        requested=requested,
        default=default_tier,
        resolved=tier,
        document_path=path,
    )


def resolve(
    arg: str | Tier | None,
    default: str | Tier | None,
    base_name: str = BASE_NAME,
) -> str:
    """Return the document path ``<base_name>.<tier>.md`` for *arg*.

    >>> resolve("", "abstract")
    'BASH-CODING-STANDARD.abstract.md'
    """
    return select(arg, default, base_name).document_path
