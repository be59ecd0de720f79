"""Shared fixtures: a miniature copy of the standard's data tree."""

from __future__ import annotations

from pathlib import Path

import pytest

TIERS = ("complete", "summary", "abstract")

STANDARD_BODY = """\
# Bash Coding Standard ({tier})

## 1. Script Structure

Every script starts with `set -euo pipefail`.

## 2. Variables

Use `readonly` for constants.
Use `declare -i` for integers.

```bash
## not a section
declare -fx helper
```

## 3. Functions

Export with declare -fx when needed.

## 4. Error Handling

Prefer set -e over manual checks.

## 5. Style & Development
"""


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


@pytest.fixture
def data_dir(tmp_path, monkeypatch) -> Path:
    """Build ``<tmp>/bcs/data`` with all three tiers and a default symlink."""
    for var in ("BCS_DEFAULT_TIER", "BCS_DATA_DIR", "BCS_TEMPLATE_DIR", "BCS_VERBOSE"):
        monkeypatch.delenv(var, raising=False)
    # Keep ./data lookups away from the real working directory
    monkeypatch.chdir(tmp_path)

    root = tmp_path / "bcs" / "data"
    for tier in TIERS:
        _write(root / f"BASH-CODING-STANDARD.{tier}.md", STANDARD_BODY.format(tier=tier))
        _write(root / f"00-header.{tier}.md", f"# Bash Coding Standard header ({tier})\n")
        section = root / "01-script-structure"
        _write(section / f"00-section.{tier}.md", "# Script Structure\n")
        _write(section / f"01-layout.{tier}.md", f"# Layout\n\n{tier} layout rule\n")
        _write(section / f"02-shebang.{tier}.md", "# Shebang\n")
        _write(section / "02-shebang" / f"01-dual-purpose.{tier}.md", "# Dual-purpose scripts\n")
        _write(root / "02-variables" / f"00-section.{tier}.md", "# Variables\n")
    # Only the complete tier exists for this rule
    _write(root / "02-variables" / "01-declarations.complete.md", "Declare everything.\n")
    # Non-numbered files are not rules
    _write(root / "02-variables" / "README.md", "notes\n")

    (root / "BASH-CODING-STANDARD.md").symlink_to("BASH-CODING-STANDARD.abstract.md")
    return root
