"""Smoke tests for the config loader."""

from pathlib import Path, PurePosixPath

import pytest

from llvmweave import load_config
from llvmweave.config import DEFAULT_LAYOUT, WeaveConfig
from llvmweave.models import Component
from llvmweave.utils.errors import ConfigError


def test_defaults_without_yaml():
    """Loading without any YAML yields the built-in layout."""
    cfg = load_config()

    assert cfg.program == "weave-llvm-src"
    assert cfg.src_dir == Path(".")
    assert cfg.dst_dir == Path(".")
    assert cfg.layout == DEFAULT_LAYOUT
    assert cfg.temp_prefix == "txz-"


def test_overrides_win_and_none_is_ignored(tmp_path: Path):
    """Verify overrides win and none is ignored behavior."""
    yml = tmp_path / "weave.yaml"
    yml.write_text("temp_prefix: .weave-\nverbose: true\n")

    cfg = load_config(config_path=yml, verbose=False, dst_dir=None, src_dir=tmp_path)

    assert cfg.temp_prefix == ".weave-"
    assert cfg.verbose is False
    assert cfg.dst_dir == Path(".")
    assert cfg.src_dir == tmp_path


def test_partial_layout_is_merged(tmp_path: Path):
    """Verify partial layout is merged behavior."""
    yml = tmp_path / "weave.yaml"
    yml.write_text("layout:\n  compiler-rt: llvm/runtimes/compiler-rt\n")

    cfg = load_config(config_path=yml)

    assert cfg.layout[Component.COMPILER_RT] == PurePosixPath("llvm/runtimes/compiler-rt")
    assert cfg.layout[Component.CFE] == DEFAULT_LAYOUT[Component.CFE]
    assert set(cfg.layout) == set(Component)


def test_env_variable_is_used(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Verify env variable is used behavior."""
    yml = tmp_path / "env.yaml"
    yml.write_text("temp_prefix: from-env-\n")
    monkeypatch.setenv("WEAVE_LLVM_CONFIG", str(yml))

    assert load_config().temp_prefix == "from-env-"


def test_unknown_component_in_layout_is_rejected(tmp_path: Path):
    """Verify unknown component in layout is rejected behavior."""
    yml = tmp_path / "weave.yaml"
    yml.write_text("layout:\n  flang: llvm/tools/flang\n")

    with pytest.raises(ConfigError, match="invalid configuration"):
        load_config(config_path=yml)


@pytest.mark.parametrize("bad", ["/abs/path", "llvm/../../escape"])
def test_layout_paths_must_stay_inside_root(bad: str):
    """Verify layout paths must stay inside root behavior."""
    with pytest.raises(ValueError):
        WeaveConfig(layout={"cfe": bad})


def test_missing_explicit_config(tmp_path: Path):
    """Verify missing explicit config behavior."""
    with pytest.raises(ConfigError, match="does not exist"):
        load_config(config_path=tmp_path / "absent.yaml")


def test_non_mapping_yaml(tmp_path: Path):
    """Verify non mapping yaml behavior."""
    yml = tmp_path / "weave.yaml"
    yml.write_text("- just\n- a list\n")

    with pytest.raises(ConfigError, match="must contain a mapping"):
        load_config(config_path=yml)


def test_empty_yaml_is_fine(tmp_path: Path):
    """Verify empty yaml is fine behavior."""
    yml = tmp_path / "weave.yaml"
    yml.write_text("")

    assert load_config(config_path=yml).layout == DEFAULT_LAYOUT
