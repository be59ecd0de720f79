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

"""Locating and reading the standard's Markdown documents.

Usage::

    from bcs.documents import DocumentReader, find_data_dir

    reader = DocumentReader(find_data_dir())
    print(reader.read("BASH-CODING-STANDARD.abstract.md"))
"""

from bcs.documents.locator import (
    SYSTEM_DATA_DIRS,
    default_link,
    detect_default_tier,
    find_data_dir,
    set_default_tier,
)
from bcs.documents.reader import DocumentReader
from bcs.errors import DocumentNotFoundError

__all__ = [
    "DocumentNotFoundError",
    "DocumentReader",
    "SYSTEM_DATA_DIRS",
    "default_link",
    "detect_default_tier",
    "find_data_dir",
    "set_default_tier",
]
