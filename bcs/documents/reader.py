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

"""Read resolved documents from the data directory."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import BinaryIO

from bcs.errors import DocumentNotFoundError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


class DocumentReader:
    """Access Markdown documents stored under one data directory.

    Parameters
    ----------
    data_dir:
        Directory holding ``BASH-CODING-STANDARD.<tier>.md`` and the
        per-section rule directories.
    """

    def __init__(self, data_dir: str | Path) -> None:
        self.data_dir = Path(data_dir)

    def path_for(self, name: str) -> Path:
        """Return the absolute path of *name*, which must exist."""
        path = self.data_dir / name
        if not path.is_file():
            raise DocumentNotFoundError(f"Document not found: {path}")
        return path

    def exists(self, name: str) -> bool:
        return (self.data_dir / name).is_file()

    def read(self, name: str) -> str:
        """Return the document text."""
        path = self.path_for(name)
        return path.read_text(encoding="utf-8")

    def stream(self, name: str, out: BinaryIO) -> int:
        """Copy the document's bytes to *out* and return the byte count."""
        path = self.path_for(name)
        with path.open("rb") as fh:
            shutil.copyfileobj(fh, out, CHUNK_SIZE)
        size = path.stat().st_size
        logger.debug("Streamed %s (%d bytes)", path, size)
        return size
