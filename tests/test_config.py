"""Tests for TOML config file loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from postfixer.cli import build_parser, load_config, main, resolve_options
from postfixer.limits import Limits


class TestLoadConfig:
    def test_missing_config_returns_empty(self, tmp_path: Path) -> None:
        assert load_config(None, tmp_path) == {}

    def test_explicit_path(self, tmp_path: Path) -> None:
        cfg = tmp_path / "custom.toml"
        cfg.write_text("[limits]\nmax_entries = 50\n")
        result = load_config(cfg, tmp_path)
        assert result["limits"] == {"max_entries": 50}

    def test_auto_discover_postfixer_toml(self, tmp_path: Path) -> None:
        cfg = tmp_path / "postfixer.toml"
        cfg.write_text("[limits]\nmax_text = 200\n")
        result = load_config(None, tmp_path)
        assert result["limits"] == {"max_text": 200}


class TestConfigMerge:
    def test_defaults(self, tmp_path: Path) -> None:
        doc = tmp_path / "in.inf"
        doc.write_text("")
        ns = build_parser().parse_args([str(doc)])
        assert resolve_options(ns).limits == Limits()

    def test_config_limits_merged(self, tmp_path: Path) -> None:
        cfg = tmp_path / "postfixer.toml"
        cfg.write_text("[limits]\nmax_entries = 20\nmax_lexeme = 16\n")
        doc = tmp_path / "in.inf"
        doc.write_text("")
        ns = build_parser().parse_args([str(doc)])
        opts = resolve_options(ns)
        assert opts.limits == Limits(max_entries=20, max_lexeme=16)

    def test_cli_overrides_config(self, tmp_path: Path) -> None:
        cfg = tmp_path / "postfixer.toml"
        cfg.write_text("[limits]\nmax_entries = 20\n")
        doc = tmp_path / "in.inf"
        doc.write_text("")
        ns = build_parser().parse_args([str(doc), "--max-entries", "5"])
        opts = resolve_options(ns)
        assert opts.limits.max_entries == 5

    def test_explicit_config_flag(self, tmp_path: Path) -> None:
        cfg = tmp_path / "alt.toml"
        cfg.write_text("[limits]\nmax_text = 42\n")
        doc = tmp_path / "in.inf"
        doc.write_text("")
        ns = build_parser().parse_args([str(doc), "--config", str(cfg)])
        opts = resolve_options(ns)
        assert opts.limits.max_text == 42

    def test_unknown_limit_rejected(self, tmp_path: Path) -> None:
        cfg = tmp_path / "postfixer.toml"
        cfg.write_text("[limits]\nmax_depth = 3\n")
        doc = tmp_path / "in.inf"
        doc.write_text("")
        ns = build_parser().parse_args([str(doc)])
        with pytest.raises(ValueError, match="max_depth"):
            resolve_options(ns)

    def test_limits_must_be_table(self, tmp_path: Path) -> None:
        cfg = tmp_path / "postfixer.toml"
        cfg.write_text("limits = 3\n")
        doc = tmp_path / "in.inf"
        doc.write_text("")
        ns = build_parser().parse_args([str(doc)])
        with pytest.raises(ValueError, match="must be a table"):
            resolve_options(ns)


class TestConfigEndToEnd:
    def test_config_limit_applies(self, tmp_path: Path, capsys) -> None:
        (tmp_path / "postfixer.toml").write_text("[limits]\nmax_lexeme = 3\n")
        doc = tmp_path / "in.inf"
        doc.write_text("abcd;\n")
        assert main([str(doc)]) == 1
        assert "longer than 3" in capsys.readouterr().err

    def test_invalid_toml_returns_2(self, tmp_path: Path, capsys) -> None:
        (tmp_path / "postfixer.toml").write_text("[limits\n")
        doc = tmp_path / "in.inf"
        doc.write_text("1;\n")
        assert main([str(doc)]) == 2
        assert capsys.readouterr().err.startswith("error:")
