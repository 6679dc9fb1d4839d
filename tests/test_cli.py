"""
tests/test_cli.py

Test suite for the superhook command line.
"""

import json
import sys
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from superhook.cli import EXIT_ERROR, EXIT_OK, EXIT_VIOLATIONS, find_source_files, run


BROKEN = "class Panel extends Base {\n  componentWillUnmount() {\n    this.stop();\n  }\n}\n"
CLEAN = "class Panel extends Base {\n  componentWillUnmount() {\n    super.componentWillUnmount();\n  }\n}\n"


@pytest.fixture
def project(tmp_path):
    """Small source tree with one violation in src/ and one in node_modules/."""
    src = tmp_path / "src"
    src.mkdir()
    (src / "Panel.jsx").write_text(BROKEN, encoding="utf-8")
    (src / "Clean.ts").write_text(CLEAN, encoding="utf-8")
    (src / "notes.md").write_text("# not source\n", encoding="utf-8")
    vendored = tmp_path / "node_modules" / "lib"
    vendored.mkdir(parents=True)
    (vendored / "index.js").write_text(BROKEN, encoding="utf-8")
    return tmp_path


class TestDiscovery:

    def test_finds_known_extensions_and_skips_vendored(self, project):
        files = find_source_files(project)
        assert [f.name for f in files] == ["Clean.ts", "Panel.jsx"]


class TestRun:
    """Tests for exit codes and output."""

    def test_violations_are_printed(self, project, capsys):
        code = run([str(project / "src" / "Panel.jsx")])

        out = capsys.readouterr().out
        assert code == EXIT_VIOLATIONS
        assert "Panel.jsx:2:3:" in out
        assert "componentWillUnmount" in out
        assert "call-component-super-lifecycle-hook" in out

    def test_clean_file(self, project, capsys):
        assert run([str(project / "src" / "Clean.ts")]) == EXIT_OK
        assert capsys.readouterr().out == ""

    def test_directory(self, project, capsys):
        assert run([str(project)]) == EXIT_VIOLATIONS
        out = capsys.readouterr().out
        assert out.count("componentWillUnmount") == 1
        assert "node_modules" not in out

    def test_fix_rewrites_file(self, project, capsys):
        path = project / "src" / "Panel.jsx"
        assert run(["--fix", str(path)]) == EXIT_OK

        fixed = path.read_text(encoding="utf-8")
        assert "    super.componentWillUnmount(...arguments);\n    this.stop();" in fixed
        assert run([str(path)]) == EXIT_OK

    def test_json_output(self, project, capsys):
        code = run(["--format", "json", str(project / "src")])
        payload = json.loads(capsys.readouterr().out)

        assert code == EXIT_VIOLATIONS
        assert payload["ok"] is True
        by_file = {Path(r["file"]).name: r for r in payload["results"]}
        assert by_file["Clean.ts"]["violations"] == []
        [violation] = by_file["Panel.jsx"]["violations"]
        assert violation["hook"] == "componentWillUnmount"
        assert violation["line"] == 2
        assert violation["fix"][0]["text"] == "\n    super.componentWillUnmount(...arguments);"

    def test_forward_parameters_flag(self, tmp_path, capsys):
        path = tmp_path / "a.js"
        path.write_text("class A extends B { componentDidUpdate(prev) {} }\n", encoding="utf-8")
        run(["--format", "json", "--forward", "parameters", str(path)])
        payload = json.loads(capsys.readouterr().out)
        fix = payload["results"][0]["violations"][0]["fix"][0]
        assert fix["text"].endswith("super.componentDidUpdate(prev);")

    def test_exact_flag(self, tmp_path):
        path = tmp_path / "a.js"
        path.write_text("class A extends B { 'componentDidMount'() {} }\n", encoding="utf-8")
        assert run([str(path)]) == EXIT_VIOLATIONS
        assert run(["--exact", str(path)]) == EXIT_OK

    def test_unfixable_violation_remains_after_fix(self, tmp_path):
        path = tmp_path / "a.js"
        path.write_text("class A extends B { 'componentDidMount'() {} }\n", encoding="utf-8")
        assert run(["--fix", str(path)]) == EXIT_VIOLATIONS

    def test_missing_path(self, tmp_path):
        assert run([str(tmp_path / "missing.ts")]) == EXIT_ERROR

    def test_unknown_extension(self, project):
        assert run([str(project / "src" / "notes.md")]) == EXIT_ERROR

    def test_dialect_override(self, project):
        assert run(["--dialect", "tsx", str(project / "src" / "notes.md")]) == EXIT_OK

    def test_bad_indent(self, project):
        with pytest.raises(SystemExit):
            run(["--indent", "wide", str(project)])
