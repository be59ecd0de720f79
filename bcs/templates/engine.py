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

"""Jinja2-based script template loader with directory fallback.

Resolution order when rendering ``engine.render_script("basic", ...)``:

1. ``<user_dir>/basic.sh.j2`` — user's customised version
2. ``<default_dir>/basic.sh.j2`` — package-shipped default

This lets users adapt the generated skeletons without touching installed code.
Values substituted into shell source go through the ``shquote`` filter.
"""

from __future__ import annotations

import logging
import re
import shlex
import shutil
from collections.abc import Callable
from pathlib import Path
from typing import Any

from jinja2 import BaseLoader, Environment, StrictUndefined, TemplateNotFound

from bcs.errors import BcsError

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "defaults"
TEMPLATE_SUFFIX = ".sh.j2"
TEMPLATE_KINDS: tuple[str, ...] = ("minimal", "basic", "complete", "library")
DEFAULT_KIND = "basic"

# Library names become part of Bash variable and function names.
_LIBRARY_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_-]*")
_WS = re.compile(r"\s+")


class UnknownTemplateError(BcsError):
    """No template exists for the requested kind."""

    exit_code = 2


class ScriptNameError(BcsError, ValueError):
    """A script name cannot be used by the requested template."""

    exit_code = 2


class _FallbackLoader(BaseLoader):
    """Load ``*.sh.j2`` sources from the first directory that has them."""

    def __init__(self, *directories: Path | None) -> None:
        self.directories = [d for d in directories if d is not None]

    def get_source(
        self, environment: Environment, template: str,
    ) -> tuple[str, str, Callable[[], bool]]:
        for directory in self.directories:
            path = directory / template
            if not path.is_file():
                continue
            mtime = path.stat().st_mtime
            logger.debug("Loading template %s", path)
            return (
                path.read_text(encoding="utf-8"),
                str(path),
                lambda: path.is_file() and path.stat().st_mtime == mtime,
            )
        raise TemplateNotFound(template)

    def list_templates(self) -> list[str]:
        names = set()
        for directory in self.directories:
            if directory.is_dir():
                names.update(p.name for p in directory.glob(f"*{TEMPLATE_SUFFIX}"))
        return sorted(names)


class TemplateEngine:
    """Render BCS-compliant Bash script skeletons.

    Args:
        user_dir: User override directory (checked first).
        default_dir: Package default directory (fallback).
    """

    def __init__(
        self,
        user_dir: Path | None = None,
        default_dir: Path | None = DEFAULT_TEMPLATE_DIR,
    ) -> None:
        self.user_dir = Path(user_dir).expanduser() if user_dir else None
        self.default_dir = Path(default_dir).expanduser() if default_dir else None
        self._env = Environment(
            loader=_FallbackLoader(self.user_dir, self.default_dir),
            keep_trailing_newline=True,
            undefined=StrictUndefined,
            autoescape=False,  # Output is shell source, not HTML
        )
        self._env.filters["shquote"] = lambda value: shlex.quote(str(value))

    def render(self, template_name: str, **variables: Any) -> str:
        """Render a template file with the given variables.

        Raises ``jinja2.TemplateNotFound`` if the template does not
        exist in either directory.
        """
        tmpl = self._env.get_template(template_name)
        return tmpl.render(**variables)

    def render_script(
        self,
        kind: str = DEFAULT_KIND,
        *,
        name: str = "myscript",
        description: str = "",
        version: str = "1.0.0",
    ) -> str:
        """Render the script skeleton of *kind*.

        The description is folded onto one line so it can sit in a comment.
        Raises :class:`UnknownTemplateError` if no template exists for *kind*,
        and :class:`ScriptNameError` if *name* is unusable for a library.
        """
        template_name = f"{kind}{TEMPLATE_SUFFIX}"
        if not self.has_template(template_name):
            raise UnknownTemplateError(
                f"Unknown template type {kind!r}. Available: {', '.join(self.kinds())}"
            )
        if kind == "library" and not _LIBRARY_NAME.fullmatch(name):
            raise ScriptNameError(
                f"Invalid library name {name!r}: use letters, digits, '_' and '-'"
            )
        description = description or f"{name} - BCS-compliant Bash script"
        return self.render(
            template_name,
            name=name,
            description=_WS.sub(" ", description).strip(),
            version=version,
        )

    def has_template(self, template_name: str) -> bool:
        """Check whether a template exists in either directory."""
        try:
            self._env.get_template(template_name)
            return True
        except TemplateNotFound:
            return False

    def kinds(self) -> list[str]:
        """Return the template kinds available in either directory."""
        found = {n[: -len(TEMPLATE_SUFFIX)] for n in self._env.list_templates()}
        ordered = [k for k in TEMPLATE_KINDS if k in found]
        return ordered + sorted(found - set(TEMPLATE_KINDS))

    def install_defaults(self) -> list[Path]:
        """Copy the shipped templates into the user directory for editing.

        Existing user templates are left alone.  Returns the paths written.
        """
        if self.user_dir is None:
            raise BcsError("No user template directory configured (set BCS_TEMPLATE_DIR)")
        if self.default_dir is None or not self.default_dir.is_dir():
            return []

        self.user_dir.mkdir(parents=True, exist_ok=True)
        written = []
        for src in sorted(self.default_dir.glob(f"*{TEMPLATE_SUFFIX}")):
            dest = self.user_dir / src.name
            if dest.exists():
                logger.debug("Keeping existing template %s", dest)
                continue
            shutil.copyfile(src, dest)
            logger.info("Installed default template: %s", dest)
            written.append(dest)
        return written
