#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Integration tests for the mdlayout command line."""
import io
import json
import subprocess
import sys

import pytest

from mdlayout.cli import EXIT_ERROR, EXIT_SUCCESS, create_parser, main, resolve_settings
from mdlayout.config import CONFIG_ENV_VAR

DOCUMENT = {
    "schema_version": 1,
    "nodes": [
        {"tag": "h1", "children": [{"text": "Title"}]},
        {"tag": "p", "children": [{"text": "See https://example.com"}]},
        {"tag": "ul", "children": [{"tag": "li", "children": [{"text": "one"}]}]},
    ],
}


def node_types(payload):
    return [node["node_type"] for node in payload]


def find_nodes(value, node_type):
    """Return every serialized node of ``node_type`` inside ``value``."""
    found = []
    if isinstance(value, dict):
        if value.get("node_type") == node_type:
            found.append(value)
        for item in value.values():
            found.extend(find_nodes(item, node_type))
    elif isinstance(value, list):
        for item in value:
            found.extend(find_nodes(item, node_type))
    return found


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user and project configuration files out of the tests."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.setattr("mdlayout.config.discover_config_file", lambda: None)


@pytest.fixture
def document_file(tmp_path):
    path = tmp_path / "document.json"
    path.write_text(json.dumps(DOCUMENT), encoding="utf-8")
    return path


@pytest.mark.integration
@pytest.mark.cli
class TestCLIOutput:
    """Test output formats and destinations."""

    def test_json_to_stdout(self, document_file, capsys):
        assert main([str(document_file)]) == EXIT_SUCCESS

        payload = json.loads(capsys.readouterr().out)
        assert node_types(payload) == ["Column", "SizedBox", "Column", "SizedBox", "Column"]
        links = [span for span in find_nodes(payload, "TextSpan") if "recognizer" in span]
        assert links[0]["recognizer"]["href"] == "https://example.com"

    def test_json_to_file(self, document_file, tmp_path, capsys):
        out = tmp_path / "layout.json"
        assert main([str(document_file), "--out", str(out)]) == EXIT_SUCCESS

        assert capsys.readouterr().out == ""
        assert node_types(json.loads(out.read_text(encoding="utf-8")))[0] == "Column"

    def test_tree_to_stdout(self, document_file, capsys):
        assert main([str(document_file), "--format", "tree"]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert "RichText 'Title'" in out
        assert "Row" in out

    def test_tree_to_file(self, document_file, tmp_path):
        out = tmp_path / "layout.txt"
        assert main([str(document_file), "--format", "tree", "--out", str(out)]) == EXIT_SUCCESS

        text = out.read_text(encoding="utf-8")
        assert text.startswith("layout")
        assert "\x1b[" not in text

    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "stdin", io.StringIO(json.dumps(DOCUMENT)))
        assert main(["-"]) == EXIT_SUCCESS
        assert node_types(json.loads(capsys.readouterr().out))[0] == "Column"


@pytest.mark.integration
@pytest.mark.cli
class TestCLISettings:
    """Test flags, configuration files and their priority."""

    def test_selectable_flag(self, document_file, capsys):
        assert main([str(document_file), "--selectable"]) == EXIT_SUCCESS
        payload = json.loads(capsys.readouterr().out)
        assert find_nodes(payload, "SelectableText")

    def test_config_file(self, document_file, tmp_path, capsys):
        config = tmp_path / "layout.toml"
        config.write_text('list_item_alignment = "start"\n\n[style]\nblock_spacing = 3\n', encoding="utf-8")

        assert main([str(document_file), "--config", str(config)]) == EXIT_SUCCESS
        payload = json.loads(capsys.readouterr().out)
        assert payload[1] == {"node_type": "SizedBox", "height": 3.0}
        assert find_nodes(payload, "Row")[0]["cross_axis_alignment"] == "start"

    def test_flag_overrides_config(self, document_file, tmp_path, capsys):
        config = tmp_path / "layout.yaml"
        config.write_text("list_item_alignment: start\n", encoding="utf-8")

        args = [str(document_file), "--config", str(config), "--list-item-alignment", "baseline"]
        assert main(args) == EXIT_SUCCESS
        payload = json.loads(capsys.readouterr().out)
        assert find_nodes(payload, "Row")[0]["cross_axis_alignment"] == "baseline"

    def test_config_from_environment(self, document_file, tmp_path, monkeypatch, capsys):
        config = tmp_path / "env.json"
        config.write_text('{"selectable": true}', encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config))

        assert main([str(document_file)]) == EXIT_SUCCESS
        assert find_nodes(json.loads(capsys.readouterr().out), "SelectableText")

    def test_style_file(self, document_file, tmp_path, capsys):
        style = tmp_path / "style.yaml"
        style.write_text("h1:\n  color: '#ff0000'\n", encoding="utf-8")

        assert main([str(document_file), "--style", str(style)]) == EXIT_SUCCESS
        payload = json.loads(capsys.readouterr().out)
        title = find_nodes(payload[0], "TextSpan")[0]
        assert title["style"]["color"] == "#ff0000"

    def test_style_file_merges_with_config_style(self, document_file, tmp_path):
        config = tmp_path / "layout.toml"
        config.write_text("[style]\nblock_spacing = 12\nh1 = { font_size = 28 }\n", encoding="utf-8")
        style = tmp_path / "style.yaml"
        style.write_text("h1:\n  color: '#ff0000'\n", encoding="utf-8")

        parsed = create_parser().parse_args([str(document_file), "--config", str(config), "--style", str(style)])
        _, style_sheet = resolve_settings(parsed)

        assert style_sheet.block_spacing == 12
        assert style_sheet.style_for("h1").font_size == 28
        assert style_sheet.style_for("h1").color == "#ff0000"

    def test_resolve_settings_defaults(self, document_file):
        options, style_sheet = resolve_settings(create_parser().parse_args([str(document_file)]))
        assert options.selectable is False
        assert style_sheet.block_spacing == 8.0

    def test_code_theme(self, tmp_path, capsys):
        document = tmp_path / "code.json"
        document.write_text(
            json.dumps([{"tag": "pre", "label": "python", "children": [{"text": "def f(): pass\n"}]}]),
            encoding="utf-8",
        )

        assert main([str(document), "--code-theme", "monokai"]) == EXIT_SUCCESS
        payload = json.loads(capsys.readouterr().out)
        code = find_nodes(payload, "ScrollView")[0]["child"]["text"]
        assert len(code["children"]) > 1


@pytest.mark.integration
@pytest.mark.cli
class TestCLIErrors:
    """Test error reporting and exit codes."""

    def test_missing_input(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.json")]) == EXIT_ERROR
        assert "cannot read" in capsys.readouterr().err

    def test_invalid_json(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        assert main([str(path)]) == EXIT_ERROR
        assert "Error:" in capsys.readouterr().err

    def test_malformed_tree(self, tmp_path, capsys):
        path = tmp_path / "row.json"
        path.write_text(json.dumps([{"tag": "tr", "children": []}]), encoding="utf-8")
        assert main([str(path)]) == EXIT_ERROR
        assert "<tr>" in capsys.readouterr().err

    @pytest.mark.parametrize("depth", [300, 5000])
    def test_nesting_too_deep(self, tmp_path, capsys, depth):
        path = tmp_path / "deep.json"
        text = '[{"tag": "p", "children": [' + '{"tag": "em", "children": [' * depth + '{"text": "x"}'
        path.write_text(text + "]}" * depth + "]}]", encoding="utf-8")

        assert main([str(path)]) == EXIT_ERROR
        assert "nest" in capsys.readouterr().err

    def test_invalid_config(self, document_file, tmp_path, capsys):
        config = tmp_path / "layout.json"
        config.write_text('{"fit_contents": true}', encoding="utf-8")
        assert main([str(document_file), "--config", str(config)]) == EXIT_ERROR
        assert "fit_contents" in capsys.readouterr().err

    def test_unknown_theme_in_config(self, document_file, tmp_path, capsys):
        config = tmp_path / "layout.json"
        config.write_text('{"code_theme": "no-such-style"}', encoding="utf-8")
        assert main([str(document_file), "--config", str(config)]) == EXIT_ERROR
        assert "no-such-style" in capsys.readouterr().err

    @pytest.mark.parametrize(
        "args", [["--code-theme", "monokia"], ["--max-width", "-5"], ["--max-width", "wide"], ["--format", "xml"]]
    )
    def test_invalid_arguments(self, document_file, args):
        with pytest.raises(SystemExit) as exc_info:
            main([str(document_file), *args])
        assert exc_info.value.code == 2

    def test_unwritable_output(self, document_file, tmp_path, capsys):
        out = tmp_path / "missing-dir" / "layout.json"
        assert main([str(document_file), "--out", str(out)]) == EXIT_ERROR
        assert "cannot write" in capsys.readouterr().err


@pytest.mark.integration
@pytest.mark.cli
class TestCLILogging:
    """Test log output of the command line."""

    def test_log_file(self, document_file, tmp_path, capsys):
        log_file = tmp_path / "mdlayout.log"
        assert main([str(document_file), "--log-level", "DEBUG", "--log-file", str(log_file)]) == EXIT_SUCCESS

        log_text = log_file.read_text(encoding="utf-8")
        assert "Built layout with 5 top-level nodes" in log_text
        assert "DEBUG" in log_text

    def test_module_entry_point(self, document_file):
        result = subprocess.run(
            [sys.executable, "-m", "mdlayout", str(document_file), "--format", "tree"],
            capture_output=True,
            text=True,
        )
        assert result.returncode == 0
        assert "Title" in result.stdout
