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

"""Rule index (BCS codes), section listing and document search."""

from bcs.errors import BcsCodeError, SearchError
from bcs.rules.index import decode, decode_all, iter_rules, locate, normalize_code
from bcs.rules.models import CODE_PREFIX, RuleEntry, SearchMatch
from bcs.rules.search import format_matches, list_sections, search

__all__ = [
    "BcsCodeError",
    "CODE_PREFIX",
    "RuleEntry",
    "SearchError",
    "SearchMatch",
    "decode",
    "decode_all",
    "format_matches",
    "iter_rules",
    "list_sections",
    "locate",
    "normalize_code",
    "search",
]
