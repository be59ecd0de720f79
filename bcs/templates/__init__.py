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

"""Jinja2 template engine for Bash script skeletons.

Loads templates from a user-configurable directory with fallback to the
package-shipped defaults (``minimal``, ``basic``, ``complete``, ``library``).

Usage::

    from bcs.templates import TemplateEngine

    engine = TemplateEngine(user_dir=Path("~/.config/bcs/templates"))
    script = engine.render_script("complete", name="deploy", version="2.1.0")
"""

from bcs.templates.engine import (
    DEFAULT_KIND,
    TEMPLATE_KINDS,
    ScriptNameError,
    TemplateEngine,
    UnknownTemplateError,
)

__all__ = [
    "DEFAULT_KIND",
    "TEMPLATE_KINDS",
    "ScriptNameError",
    "TemplateEngine",
    "UnknownTemplateError",
]
