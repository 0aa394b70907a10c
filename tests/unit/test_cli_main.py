"""Unit tests for the textcanvas command-line interface."""

import io
import logging
import subprocess
import sys

import pytest

from textcanvas import __version__
from textcanvas.cli import build_parser_config, main
from textcanvas.cli.actions import env_key_for
from textcanvas.cli.builder import EXIT_ERROR, EXIT_SUCCESS, EXIT_USAGE_ERROR, create_parser


@pytest.fixture
def html_file(tmp_path):
    """A small HTML document on disk."""
    path = tmp_path / "page.html"
    path.write_text('<div>x</div><a href="target">link</a><img alt="picture">', encoding="utf-8")
    return path


@pytest.mark.unit
@pytest.mark.cli
class TestParser:
    """Test the generated argument parser."""

    def test_defaults(self):
        args = create_parser().parse_args([])

        assert args.input == "-"
        assert args.out is None
        assert args.log_level == "WARNING"
        assert args.css_profile is None
        assert args.display_links is None
        assert args.html_parser is None

    def test_rendering_options(self):
        args = create_parser().parse_args(
            ["--profile", "strict", "--display-links", "--table-cell-separator", " | ", "--html-parser", "lxml"]
        )

        assert args.css_profile == "strict"
        assert args.display_links is True
        assert args.table_cell_separator == " | "
        assert args.html_parser == "lxml"

    def test_overrides_are_not_a_cli_option(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["--css-overrides", "{}"])

        assert exc_info.value.code == EXIT_USAGE_ERROR

    def test_invalid_choice(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["--profile", "fancy"])

        assert exc_info.value.code == EXIT_USAGE_ERROR
        assert "invalid choice" in capsys.readouterr().err

    def test_log_level_is_case_insensitive(self):
        assert create_parser().parse_args(["--log-level", "debug"]).log_level == "DEBUG"

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["--version"])

        assert exc_info.value.code == 0
        assert f"textcanvas {__version__}" in capsys.readouterr().out


@pytest.mark.unit
@pytest.mark.cli
class TestEnvironmentDefaults:
    """Test TEXTCANVAS_* environment variables."""

    def test_env_key(self):
        assert env_key_for("html_parser") == "TEXTCANVAS_HTML_PARSER"
        assert env_key_for("log-level") == "TEXTCANVAS_LOG_LEVEL"

    def test_value_from_environment(self, monkeypatch):
        monkeypatch.setenv("TEXTCANVAS_CSS_PROFILE", "strict")
        monkeypatch.setenv("TEXTCANVAS_TABLE_CELL_SEPARATOR", " | ")

        args = create_parser().parse_args([])

        assert args.css_profile == "strict"
        assert args.table_cell_separator == " | "

    def test_command_line_wins_over_environment(self, monkeypatch):
        monkeypatch.setenv("TEXTCANVAS_CSS_PROFILE", "strict")

        assert create_parser().parse_args(["--profile", "relaxed"]).css_profile == "relaxed"

    @pytest.mark.parametrize("value, expected", [("true", True), ("YES", True), ("1", True), ("off", False), ("0", False)])
    def test_boolean_from_environment(self, monkeypatch, value, expected):
        monkeypatch.setenv("TEXTCANVAS_DISPLAY_IMAGES", value)

        assert create_parser().parse_args([]).display_images is expected

    def test_invalid_environment_value_is_ignored(self, monkeypatch, caplog):
        monkeypatch.setenv("TEXTCANVAS_CSS_PROFILE", "fancy")

        with caplog.at_level(logging.WARNING, logger="textcanvas.cli.actions"):
            args = create_parser().parse_args([])

        assert args.css_profile is None
        assert "Invalid environment variable TEXTCANVAS_CSS_PROFILE" in caplog.text

    def test_log_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("TEXTCANVAS_LOG_LEVEL", "info")

        assert create_parser().parse_args([]).log_level == "INFO"


@pytest.mark.unit
@pytest.mark.cli
class TestBuildParserConfig:
    """Test the precedence of configuration sources."""

    def test_no_config(self, tmp_path, monkeypatch):
        (tmp_path / ".textcanvas.toml").write_text('css_profile = "strict"\n')
        monkeypatch.chdir(tmp_path)

        config = build_parser_config(create_parser().parse_args(["--no-config"]))

        assert config.css_profile == "relaxed"

    def test_discovered_config(self, tmp_path, monkeypatch):
        (tmp_path / ".textcanvas.toml").write_text('css_profile = "strict"\n')
        monkeypatch.chdir(tmp_path)

        assert build_parser_config(create_parser().parse_args([])).css_profile == "strict"

    def test_environment_wins_over_config_file(self, tmp_path, monkeypatch):
        config_file = tmp_path / "settings.yaml"
        config_file.write_text("css_profile: strict\ndisplay_links: true\n")
        monkeypatch.setenv("TEXTCANVAS_CSS_PROFILE", "relaxed")
        monkeypatch.setenv("TEXTCANVAS_DISPLAY_LINKS", "false")

        config = build_parser_config(create_parser().parse_args(["--config", str(config_file)]))

        assert config.css_profile == "relaxed"
        assert config.display_links is False

    def test_command_line_wins_over_config_file(self, tmp_path):
        config_file = tmp_path / "settings.json"
        config_file.write_text('{"display_links": false, "table_cell_separator": " "}')

        args = create_parser().parse_args(["--config", str(config_file), "--display-links"])
        config = build_parser_config(args)

        assert config.display_links is True
        assert config.table_cell_separator == " "


@pytest.mark.unit
@pytest.mark.cli
@pytest.mark.usefixtures("restore_logging")
class TestMain:
    """Test the textcanvas command."""

    def test_convert_file(self, html_file, capsys):
        assert main([str(html_file), "--no-config"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "  x\nlink\n"

    def test_rendering_flags(self, html_file, capsys):
        argv = [str(html_file), "--no-config", "--profile", "strict", "--display-links", "--display-images"]

        assert main(argv) == EXIT_SUCCESS
        assert capsys.readouterr().out == "x\n[link](target)[picture]\n"

    def test_environment_flags(self, html_file, capsys, monkeypatch):
        monkeypatch.setenv("TEXTCANVAS_DISPLAY_IMAGES", "true")

        assert main([str(html_file), "--no-config"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "  x\nlink[picture]\n"

    def test_config_file(self, html_file, tmp_path, capsys):
        config_file = tmp_path / "settings.toml"
        config_file.write_text('css_profile = "strict"\ndisplay_links = true\n')

        assert main([str(html_file), "--config", str(config_file)]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "x\n[link](target)\n"

    def test_output_file(self, html_file, tmp_path, capsys):
        out = tmp_path / "page.txt"

        assert main([str(html_file), "--no-config", "-o", str(out)]) == EXIT_SUCCESS
        assert out.read_text(encoding="utf-8") == "  x\nlink\n"
        assert capsys.readouterr().out == ""

    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"<p>piped</p>")))

        assert main(["--no-config"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "piped\n"

    def test_encoding(self, tmp_path, capsys):
        html_file = tmp_path / "latin.html"
        html_file.write_bytes("<p>café</p>".encode("latin-1"))

        assert main([str(html_file), "--no-config", "--encoding", "latin-1"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "café\n"

    def test_missing_input(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.html"), "--no-config"]) == EXIT_ERROR
        assert "Error: Could not read HTML file" in capsys.readouterr().err

    def test_unwritable_output(self, html_file, tmp_path, capsys):
        assert main([str(html_file), "--no-config", "-o", str(tmp_path)]) == EXIT_ERROR
        assert "could not write output" in capsys.readouterr().err

    def test_invalid_config_file(self, html_file, tmp_path, capsys):
        config_file = tmp_path / "settings.toml"
        config_file.write_text("width = 80\n")

        assert main([str(html_file), "--config", str(config_file)]) == EXIT_USAGE_ERROR
        assert "Unknown configuration option(s): width" in capsys.readouterr().err

    def test_invalid_option_value_in_config(self, html_file, tmp_path, capsys):
        config_file = tmp_path / "settings.json"
        config_file.write_text('{"css_profile": "fancy"}')

        assert main([str(html_file), "--config", str(config_file)]) == EXIT_USAGE_ERROR
        assert "Invalid value for css_profile" in capsys.readouterr().err

    def test_mistyped_style_override_in_config(self, html_file, tmp_path, capsys):
        config_file = tmp_path / ".textcanvas.toml"
        config_file.write_text('[css_overrides.p]\ndisplay = "block"\nmargin_before = "x"\n')

        assert main([str(html_file), "--config", str(config_file)]) == EXIT_USAGE_ERROR
        assert "css_overrides.p.margin_before must be a non-negative integer" in capsys.readouterr().err

    def test_string_flag_in_config(self, html_file, tmp_path, capsys):
        config_file = tmp_path / "settings.yaml"
        config_file.write_text('display_links: "false"\n')

        assert main([str(html_file), "--config", str(config_file)]) == EXIT_USAGE_ERROR
        assert "display_links must be a boolean" in capsys.readouterr().err

    def test_log_file(self, html_file, tmp_path, capsys):
        log_file = tmp_path / "textcanvas.log"

        assert main([str(html_file), "--no-config", "--log-level", "info", "--log-file", str(log_file)]) == EXIT_SUCCESS
        assert "Logging to file" in log_file.read_text(encoding="utf-8")


@pytest.mark.cli
@pytest.mark.integration
class TestModuleExecution:
    """Test running the package with ``python -m``."""

    def test_version(self):
        result = subprocess.run(
            [sys.executable, "-m", "textcanvas", "--version"], capture_output=True, text=True, check=False
        )

        assert result.returncode == 0
        assert __version__ in result.stdout

    def test_converts_stdin(self):
        result = subprocess.run(
            [sys.executable, "-m", "textcanvas", "--no-config"],
            input="<p>hello</p>",
            capture_output=True,
            text=True,
            check=False,
        )

        assert result.returncode == 0
        assert result.stdout == "hello\n"
