"""Tests for the PyScript page builder."""

import ast

import pytest

import build_docs


class TestExtract:
    SOURCE = "X = 1\n\ndef f():\n    return X\n"

    def test_assignment_and_function(self):
        tree = ast.parse(self.SOURCE)
        assert build_docs._extract(self.SOURCE, tree, "X") == "X = 1"
        assert build_docs._extract(self.SOURCE, tree, "f").startswith("def f():")

    def test_missing_name(self):
        with pytest.raises(ValueError, match="'g' not found"):
            build_docs._extract(self.SOURCE, ast.parse(self.SOURCE), "g")


class TestBuild:
    def test_embedded_code_compiles(self):
        code = build_docs.build_code()
        compile(code, "<pyscript>", "exec")
        assert "def analyze_password" in code
        assert "def generate_password" in code
        assert "def reveal" in code
        assert "REVEAL_DELAY = 0.05" in code
        # the clipboard library is not available in the browser
        assert "pyperclip" not in code

    def test_writes_page(self, tmp_path, capsys):
        out = build_docs.build(tmp_path / "docs" / "index.html")
        html = out.read_text(encoding="utf-8")
        assert "__PYSCRIPT_CODE__" not in html
        assert "__PYSCRIPT_VERSION__" not in html
        assert build_docs.PYSCRIPT_VERSION in html
        assert 'id="lengthSlider" min="8" max="32" value="12"' in html
        assert "Built" in capsys.readouterr().out
