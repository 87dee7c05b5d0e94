"""Build docs/index.html for GitHub Pages (PyScript / Pyodide).

Embeds the core module passgen/__init__.py, plus the reveal helpers pulled
out of passgen/reveal.py with the ast module, in a PyScript page that runs
entirely in the browser.

Usage:
    python build_docs.py
"""

import ast
from pathlib import Path

ROOT = Path(__file__).parent
CORE = ROOT / "passgen" / "__init__.py"
REVEAL = ROOT / "passgen" / "reveal.py"
OUT = ROOT / "docs" / "index.html"

PYSCRIPT_VERSION = "2024.9.2"


# ── AST extraction ────────────────────────────────────────────────────────


def _extract(source: str, tree: ast.Module, name: str) -> str:
    """Return the source text of a top-level assignment or function."""
    for node in ast.iter_child_nodes(tree):
        if isinstance(node, ast.FunctionDef) and node.name == name:
            return ast.get_source_segment(source, node)
        if isinstance(node, ast.Assign):
            for target in node.targets:
                if isinstance(target, ast.Name) and target.id == name:
                    return ast.get_source_segment(source, node)
    raise ValueError(f"{name!r} not found in source")


# ── Python code that runs inside PyScript ─────────────────────────────────

_PY_IMPORTS = """\
import asyncio
from typing import Iterator

from pyscript import when, document
from js import navigator
"""

_PY_BROWSER = r'''
# ── DOM helpers ──

ICON_GLYPHS = {
    "lock": "&#128274;",
    "alert-triangle": "&#9888;",
    "x-circle": "&#10006;",
    "shield-check": "&#128737;",
}

_state = {"password": "", "reveal": 0}


def render_verdict(el, password):
    if not password:
        el.innerHTML = ""
        return
    verdict = analyze_password(password)
    message = (
        f'<span class="message">{verdict.message}</span>' if verdict.message else ""
    )
    el.innerHTML = (
        f'<span class="icon" style="color:{verdict.color}">'
        f'{ICON_GLYPHS[verdict.icon]}</span>'
        f'<span>{verdict.strength} Password</span>{message}'
    )


def current_policy():
    return GenerationPolicy(
        length=int(document.querySelector("#lengthSlider").value),
        uppercase=document.querySelector("#optUppercase").checked,
        lowercase=document.querySelector("#optLowercase").checked,
        digits=document.querySelector("#optDigits").checked,
        special=document.querySelector("#optSpecial").checked,
    )


async def play_reveal(password):
    # A newer generation bumps the token, which stops this loop.
    _state["reveal"] += 1
    token = _state["reveal"]
    out = document.querySelector("#generatedPassword")
    out.textContent = ""
    for prefix in reveal(password):
        if token != _state["reveal"]:
            return
        out.textContent = prefix
        await asyncio.sleep(REVEAL_DELAY)


# ── Event handlers ──

@when("input", "#lengthSlider")
def on_length(event):
    value = event.target.value
    document.querySelector("#lengthValue").textContent = value
    document.querySelector("#lengthChars").textContent = f"{value} characters"


@when("click", "#generateBtn")
async def on_generate(event):
    password = generate_password(current_policy())
    _state["password"] = password
    document.querySelector("#copyBtn").disabled = not password
    render_verdict(document.querySelector("#genVerdict"), password)
    await play_reveal(password)


@when("input", "#checkerInput")
def on_check(event):
    render_verdict(document.querySelector("#checkVerdict"), event.target.value)


@when("click", "#copyBtn")
async def on_copy(event):
    btn = document.querySelector("#copyBtn")
    try:
        await navigator.clipboard.writeText(_state["password"])
    except Exception:
        return
    btn.textContent = "Copied"
    await asyncio.sleep(COPY_NOTICE_SECONDS)
    btn.textContent = "Copy"


# ── Ready — hide loading overlay ──
document.querySelector("#loading-overlay").style.display = "none"
'''


# ── HTML template ─────────────────────────────────────────────────────────
# Uses __PYSCRIPT_VERSION__ and __PYSCRIPT_CODE__ as placeholders
# (no f-strings or .format to avoid escaping CSS braces).

HTML_TEMPLATE = r'''<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Password Gen</title>
    <link rel="stylesheet" href="https://pyscript.net/releases/__PYSCRIPT_VERSION__/core.css">
    <script type="module" src="https://pyscript.net/releases/__PYSCRIPT_VERSION__/core.js"></script>
    <style>
        * { box-sizing: border-box; margin: 0; padding: 0; }

        body {
            min-height: 100vh;
            background: #000;
            color: #fff;
            font-family: -apple-system, 'Segoe UI', sans-serif;
            padding: 2rem 1rem;
        }

        #loading-overlay {
            position: fixed;
            inset: 0;
            z-index: 9999;
            background: #000;
            display: flex;
            align-items: center;
            justify-content: center;
            color: #9ca3af;
            letter-spacing: 3px;
            text-transform: uppercase;
            font-size: 0.75rem;
        }

        main { max-width: 48rem; margin: 0 auto; }
        header { text-align: center; margin-bottom: 3rem; }
        header h1 { font-size: 3.5rem; font-weight: 700; }
        header p { color: #9ca3af; margin-top: 0.75rem; }

        .row { display: flex; justify-content: space-between; color: #d1d5db; }
        .row small { color: #9ca3af; }
        input[type="range"] { width: 100%; margin: 0.75rem 0 2rem; accent-color: #6b7280; }

        .options {
            display: grid;
            grid-template-columns: 1fr 1fr;
            gap: 1.5rem;
            margin-bottom: 2rem;
            color: #d1d5db;
        }
        .options label { display: flex; align-items: center; gap: 0.75rem; cursor: pointer; }
        .options input { width: 1.25rem; height: 1.25rem; }

        .output {
            position: relative;
            min-height: 60px;
            padding: 1rem 6rem 1rem 1rem;
            background: #111827;
            border: 1px solid #1f2937;
            border-radius: 0.5rem;
            font-family: monospace;
            font-size: 1.1rem;
            word-break: break-all;
        }
        #copyBtn {
            position: absolute;
            right: 0.5rem;
            top: 50%;
            transform: translateY(-50%);
            background: none;
            border: none;
            color: #9ca3af;
            cursor: pointer;
        }
        #copyBtn:disabled { opacity: 0.5; cursor: not-allowed; }

        .verdict { display: flex; align-items: center; gap: 0.5rem; color: #d1d5db; margin: 1rem 0; min-height: 1.5rem; }
        .verdict .message { color: #9ca3af; margin-left: 0.5rem; }

        button.primary {
            width: 100%;
            padding: 1rem 1.5rem;
            background: #1f2937;
            color: #fff;
            border: 1px solid #374151;
            border-radius: 0.5rem;
            font-size: 1rem;
            cursor: pointer;
        }
        button.primary:hover { background: #374151; }

        h2 { font-size: 1.5rem; margin: 3rem 0 1rem; }
        #checkerInput {
            width: 100%;
            padding: 1rem;
            background: #111827;
            color: #fff;
            border: 1px solid #1f2937;
            border-radius: 0.5rem;
            font-size: 1rem;
        }

        footer { margin-top: 3rem; padding-top: 2rem; border-top: 1px solid #1f2937; }
        footer p { color: #ef4444; font-weight: 700; font-size: 0.875rem; }

        py-script, script[type="py"] { display: none; }
    </style>
</head>
<body>

    <div id="loading-overlay">Initializing</div>

    <main>
        <header>
            <h1>Password Gen</h1>
            <p>Secure Password Generation Tool</p>
        </header>

        <div class="row">
            <label for="lengthSlider">Length: <span id="lengthValue">12</span></label>
            <small id="lengthChars">12 characters</small>
        </div>
        <input type="range" id="lengthSlider" min="8" max="32" value="12">

        <div class="options">
            <label><input type="checkbox" id="optUppercase" checked> Uppercase (ABC)</label>
            <label><input type="checkbox" id="optLowercase" checked> Lowercase (abc)</label>
            <label><input type="checkbox" id="optDigits" checked> Numbers (123)</label>
            <label><input type="checkbox" id="optSpecial" checked> Special (#$&amp;)</label>
        </div>

        <div class="output">
            <span id="generatedPassword"></span>
            <button id="copyBtn" disabled>Copy</button>
        </div>
        <div class="verdict" id="genVerdict"></div>

        <button id="generateBtn" class="primary">Generate Password</button>

        <h2>Password Checker</h2>
        <input type="text" id="checkerInput" spellcheck="false" autocomplete="off"
               placeholder="Enter a password to check its strength">
        <div class="verdict" id="checkVerdict"></div>

        <footer>
            <p>
                Make your passwords strong! Don't jump on every link, crack file,
                etc. you see. Doing so inadvertently puts your system and personal
                data at risk. Take your security seriously!
            </p>
        </footer>
    </main>

    <!-- Python logic via PyScript -->
    <script type="py">
__PYSCRIPT_CODE__
    </script>

</body>
</html>
'''


# ── Build ──────────────────────────────────────────────────────────────────


def build_code() -> str:
    """Return the Python source that runs inside the page."""
    core = CORE.read_text(encoding="utf-8")
    source = REVEAL.read_text(encoding="utf-8")
    tree = ast.parse(source)

    reveal_parts = [
        _extract(source, tree, "REVEAL_DELAY"),
        _extract(source, tree, "COPY_NOTICE_SECONDS"),
        _extract(source, tree, "reveal"),
    ]

    return (
        _PY_IMPORTS
        + "\n# ── Core logic (passgen/__init__.py) ──\n\n"
        + core + "\n\n"
        + "# ── Reveal helpers (extracted from passgen/reveal.py) ──\n\n"
        + "\n\n".join(reveal_parts) + "\n"
        + _PY_BROWSER
    )


def build(out: Path = OUT) -> Path:
    html = (
        HTML_TEMPLATE
        .replace("__PYSCRIPT_VERSION__", PYSCRIPT_VERSION)
        .replace("__PYSCRIPT_CODE__", build_code())
    )

    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(html, encoding="utf-8")
    print(f"Built {out}  ({len(html):,} bytes)")
    return out


if __name__ == "__main__":
    build()
