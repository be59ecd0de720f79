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

"""Tier selection for the three published levels of the standard.

Usage::

    from bcs.tiers import Tier, resolve

    resolve("", Tier.ABSTRACT)        # 'BASH-CODING-STANDARD.abstract.md'
    resolve("complete", "abstract")   # 'BASH-CODING-STANDARD.complete.md'
"""

from bcs.errors import InvalidTierError
from bcs.tiers.models import BASE_NAME, TIER_NAMES, Tier, TierSelection
from bcs.tiers.selector import parse_tier, resolve, resolve_tier, select

__all__ = [
    "BASE_NAME",
    "InvalidTierError",
    "TIER_NAMES",
    "Tier",
    "TierSelection",
    "parse_tier",
    "resolve",
    "resolve_tier",
    "select",
]
