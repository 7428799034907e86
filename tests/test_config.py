"""Tests for TOML config file loading."""

from __future__ import annotations

from pathlib import Path

from lox.cli import DEFAULT_PROMPT, build_parser, load_config, resolve_options


class TestLoadConfig:
    def test_missing_config_returns_empty(self, tmp_path: Path) -> None:
        assert load_config(None, tmp_path) == {}

    def test_explicit_path(self, tmp_path: Path) -> None:
        cfg = tmp_path / "custom.toml"
        cfg.write_text('[repl]\nprompt = "lox> "\n')
        result = load_config(cfg, tmp_path)
        assert result["repl"] == {"prompt": "lox> "}

    def test_auto_discover_lox_toml(self, tmp_path: Path) -> None:
        cfg = tmp_path / "lox.toml"
        cfg.write_text('[source]\nencoding = "utf-8"\n')
        result = load_config(None, tmp_path)
        assert result["source"] == {"encoding": "utf-8"}


class TestConfigMerge:
    def test_defaults(self, tmp_path: Path) -> None:
        script = tmp_path / "s.lox"
        script.write_text("")
        opts = resolve_options(build_parser().parse_args([str(script)]))
        assert opts.script == script
        assert opts.encoding is None
        assert opts.prompt == DEFAULT_PROMPT
        assert opts.context is False
        assert opts.debug is False

    def test_config_values_applied(self, tmp_path: Path) -> None:
        (tmp_path / "lox.toml").write_text(
            '[source]\nencoding = "latin-1"\n'
            '[repl]\nprompt = ">> "\n'
            "[diagnostics]\ncontext = true\n"
        )
        script = tmp_path / "s.lox"
        script.write_text("")
        opts = resolve_options(build_parser().parse_args([str(script)]))
        assert opts.encoding == "latin-1"
        assert opts.prompt == ">> "
        assert opts.context is True

    def test_cli_overrides_config(self, tmp_path: Path) -> None:
        (tmp_path / "lox.toml").write_text('[source]\nencoding = "latin-1"\n[repl]\nprompt = ">> "\n')
        script = tmp_path / "s.lox"
        script.write_text("")
        opts = resolve_options(
            build_parser().parse_args([str(script), "--encoding", "utf-8", "--prompt", "$ "])
        )
        assert opts.encoding == "utf-8"
        assert opts.prompt == "$ "

    def test_explicit_config_flag(self, tmp_path: Path) -> None:
        cfg = tmp_path / "other.toml"
        cfg.write_text("[diagnostics]\ncontext = true\n")
        script = tmp_path / "s.lox"
        script.write_text("")
        opts = resolve_options(build_parser().parse_args([str(script), "--config", str(cfg)]))
        assert opts.context is True

    def test_wrong_types_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "lox.toml").write_text('repl = "flat"\n[diagnostics]\ncontext = "yes"\n')
        script = tmp_path / "s.lox"
        script.write_text("")
        opts = resolve_options(build_parser().parse_args([str(script)]))
        assert opts.prompt == DEFAULT_PROMPT
        assert opts.context is False

    def test_prompt_mode_searches_cwd(self, tmp_path: Path, monkeypatch) -> None:
        (tmp_path / "lox.toml").write_text('[repl]\nprompt = "? "\n')
        monkeypatch.chdir(tmp_path)
        opts = resolve_options(build_parser().parse_args([]))
        assert opts.script is None
        assert opts.prompt == "? "
