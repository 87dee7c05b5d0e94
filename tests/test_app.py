"""Static checks on the Streamlit app source."""

import ast
from pathlib import Path

APP = Path(__file__).parent.parent / "app.py"


def _streamlit_calls(name: str) -> list[ast.Call]:
    tree = ast.parse(APP.read_text(encoding="utf-8"))
    return [
        node for node in ast.walk(tree)
        if isinstance(node, ast.Call)
        and isinstance(node.func, ast.Attribute)
        and node.func.attr == name
        and isinstance(node.func.value, ast.Name)
        and node.func.value.id == "st"
    ]


def test_buttons_avoid_deprecated_width_flag():
    buttons = _streamlit_calls("button")
    assert buttons
    for call in buttons:
        assert "use_container_width" not in {kw.arg for kw in call.keywords}
