"""Tests for bcs.templates."""

from __future__ import annotations

import shutil
import subprocess

import pytest
from jinja2 import TemplateNotFound

from bcs.errors import BcsError
from bcs.templates import (
    TEMPLATE_KINDS,
    ScriptNameError,
    TemplateEngine,
    UnknownTemplateError,
)

needs_bash = pytest.mark.skipif(shutil.which("bash") is None, reason="bash not installed")


def bash_syntax_ok(script: str) -> bool:
    result = subprocess.run(["bash", "-n"], input=script, text=True, capture_output=True)
    return result.returncode == 0


def test_render_from_default_dir(tmp_path):
    default_dir = tmp_path / "defaults"
    default_dir.mkdir()
    (default_dir / "hello.sh.j2").write_text("echo 'Hello {{ name }}'")

    engine = TemplateEngine(default_dir=default_dir)
    assert engine.render("hello.sh.j2", name="World") == "echo 'Hello World'"


def test_user_dir_overrides_default(tmp_path):
    default_dir = tmp_path / "defaults"
    default_dir.mkdir()
    (default_dir / "basic.sh.j2").write_text("# default {{ name }}")

    user_dir = tmp_path / "user"
    user_dir.mkdir()
    (user_dir / "basic.sh.j2").write_text("# custom {{ name }}")

    engine = TemplateEngine(user_dir=user_dir, default_dir=default_dir)
    assert engine.render_script("basic", name="x") == "# custom x"


def test_missing_template_raises(tmp_path):
    engine = TemplateEngine(default_dir=tmp_path)
    with pytest.raises(TemplateNotFound):
        engine.render("nonexistent.sh.j2")


def test_unknown_kind_raises():
    engine = TemplateEngine()
    with pytest.raises(UnknownTemplateError) as exc:
        engine.render_script("fancy")
    assert "fancy" in str(exc.value)
    assert "minimal" in str(exc.value)


def test_shipped_kinds():
    engine = TemplateEngine()
    assert engine.kinds() == list(TEMPLATE_KINDS)


@pytest.mark.parametrize("kind", TEMPLATE_KINDS)
def test_shipped_templates_are_bcs_scripts(kind):
    script = TemplateEngine().render_script(kind, name="myapp")
    assert script.startswith("#!/usr/bin/env bash\n")
    assert script.rstrip().endswith("#fin")


def test_minimal_template():
    script = TemplateEngine().render_script("minimal", name="myapp")
    assert "set -euo pipefail" in script
    assert "error()" in script
    assert "die()" in script
    assert "main()" in script
    assert "VERSION=" not in script
    assert "Hello from myapp" in script


def test_basic_template_substitutions():
    script = TemplateEngine().render_script(
        "basic", name="deploy", description="Deploy the app", version="2.3.4",
    )
    assert "VERSION=2.3.4" in script
    assert "DESCRIPTION='Deploy the app'" in script
    assert "SCRIPT_PATH" in script
    assert "# Deploy the app" in script
    assert "Hello from deploy" in script


def test_complete_template_helpers():
    script = TemplateEngine().render_script("complete")
    for marker in ("VERBOSE=", "DEBUG=", "GREEN=", "vecho()", "success()", "warn()",
                   "info()", "debug()", "yn()", "show_help()", 'case "$1" in'):
        assert marker in script


def test_library_template():
    script = TemplateEngine().render_script("library", name="my-lib")
    assert "This is a sourceable library script" in script
    assert "MY_LIB_VERSION=1.0.0" in script
    assert "my_lib_hello()" in script


def test_install_defaults(tmp_path):
    default_dir = tmp_path / "defaults"
    default_dir.mkdir()
    (default_dir / "a.sh.j2").write_text("alpha")
    (default_dir / "b.sh.j2").write_text("beta")
    (default_dir / "notes.txt").write_text("skip me")

    user_dir = tmp_path / "user"
    # User dir doesn't exist yet — install_defaults should create it
    engine = TemplateEngine(user_dir=user_dir, default_dir=default_dir)
    engine.install_defaults()

    assert (user_dir / "a.sh.j2").read_text() == "alpha"
    assert (user_dir / "b.sh.j2").read_text() == "beta"
    assert not (user_dir / "notes.txt").exists()

    # Existing files are not overwritten
    (user_dir / "a.sh.j2").write_text("modified")
    engine.install_defaults()
    assert (user_dir / "a.sh.j2").read_text() == "modified"


def test_install_defaults_requires_user_dir(tmp_path):
    engine = TemplateEngine(default_dir=tmp_path)
    with pytest.raises(BcsError):
        engine.install_defaults()


def test_install_defaults_returns_written_paths(tmp_path):
    user_dir = tmp_path / "user"
    written = TemplateEngine(user_dir=user_dir).install_defaults()
    assert [p.name for p in written] == sorted(f"{k}.sh.j2" for k in TEMPLATE_KINDS)
    assert TemplateEngine(user_dir=user_dir).install_defaults() == []


def test_values_are_shell_quoted():
    script = TemplateEngine().render_script(
        "basic", name="it's", description="say $(hi) `now`", version="1'0",
    )
    assert "declare -r VERSION='1'\"'\"'0'" in script
    assert "echo 'Hello from it'\"'\"'s'" in script
    assert "DESCRIPTION='say $(hi) `now`'" in script


def test_description_folded_to_one_line():
    script = TemplateEngine().render_script("minimal", description="line one\nrm -rf /tmp/x")
    assert "# line one rm -rf /tmp/x\n" in script
    assert "\nrm -rf" not in script


@pytest.mark.parametrize("name", ["it's", "my lib", "1lib", ""])
def test_library_rejects_unusable_names(name):
    with pytest.raises(ScriptNameError):
        TemplateEngine().render_script("library", name=name)


@needs_bash
@pytest.mark.parametrize("kind", TEMPLATE_KINDS)
def test_rendered_scripts_parse(kind):
    name = "my-lib" if kind == "library" else "it's a \"test\""
    script = TemplateEngine().render_script(
        kind, name=name, description="quotes ' \" and $(subshell)", version="1'0",
    )
    assert bash_syntax_ok(script)
