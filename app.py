"""PassGen -- Streamlit web interface."""

import streamlit as st

from passgen import (
    DEFAULT_LENGTH,
    MAX_LENGTH,
    MIN_LENGTH,
    GenerationPolicy,
    analyze_password,
    generate_password,
)
from passgen.reveal import animate

# ── Lucide icons (from lucide.dev) ────────────────────────────────────────

_LUCIDE = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="{s}" height="{s}" '
    'viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" '
    'stroke-linecap="round" stroke-linejoin="round">{paths}</svg>'
)

ICON_KEY_ROUND = _LUCIDE.format(s=40, paths=(
    '<path d="M2.586 17.414A2 2 0 0 0 2 18.828V21a1 1 0 0 0 1 1h3'
    'a1 1 0 0 0 1-1v-1a1 1 0 0 1 1-1h1a1 1 0 0 0 1-1v-1'
    'a1 1 0 0 1 1-1h.172a2 2 0 0 0 1.414-.586l.814-.814'
    'a6.5 6.5 0 1 0-4-4z"/>'
    '<circle cx="16.5" cy="7.5" r=".5" fill="currentColor"/>'
))

# Keyed by StrengthVerdict.icon
VERDICT_ICONS = {
    "lock": _LUCIDE.format(s=20, paths=(
        '<rect width="18" height="11" x="3" y="11" rx="2" ry="2"/>'
        '<path d="M7 11V7a5 5 0 0 1 10 0v4"/>'
    )),
    "alert-triangle": _LUCIDE.format(s=20, paths=(
        '<path d="m21.73 18-8-14a2 2 0 0 0-3.48 0l-8 14'
        'A2 2 0 0 0 4 21h16a2 2 0 0 0 1.73-3"/>'
        '<path d="M12 9v4"/><path d="M12 17h.01"/>'
    )),
    "x-circle": _LUCIDE.format(s=20, paths=(
        '<circle cx="12" cy="12" r="10"/>'
        '<path d="m15 9-6 6"/><path d="m9 9 6 6"/>'
    )),
    "shield-check": _LUCIDE.format(s=20, paths=(
        '<path d="M20 13c0 5-3.5 7.5-7.66 8.95a1 1 0 0 1-.67-.01'
        'C7.5 20.5 4 18 4 13V6a1 1 0 0 1 1-1c2 0 4.5-1.2 6.24-2.72'
        'a1.17 1.17 0 0 1 1.52 0C14.51 3.81 17 5 19 5a1 1 0 0 1 1 1z"/>'
        '<path d="m9 12 2 2 4-4"/>'
    )),
}


def show_verdict(password: str) -> None:
    verdict = analyze_password(password)
    message = (
        f" &nbsp;<span style='color:gray'>{verdict.message}</span>"
        if verdict.message else ""
    )
    st.markdown(
        f'<p style="display:flex;align-items:center;gap:8px">'
        f'<span style="color:{verdict.color}">{VERDICT_ICONS[verdict.icon]}</span>'
        f"{verdict.strength} Password{message}</p>",
        unsafe_allow_html=True,
    )


# ── Page config ───────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Password Gen",
    page_icon="\U0001f511",
    layout="centered",
)

# ── Custom CSS ────────────────────────────────────────────────────────────

st.markdown("""<style>
/* Always show copy-to-clipboard button on code blocks */
[data-testid="stCode"] button,
[data-testid="stCodeBlock"] button,
.stCode button,
.stCodeBlock button {
    opacity: 1 !important;
    visibility: visible !important;
    transition: none !important;
}
</style>""", unsafe_allow_html=True)

# ── Header ────────────────────────────────────────────────────────────────

st.markdown(
    f'<h1 style="display:flex;align-items:center;gap:12px">'
    f'{ICON_KEY_ROUND} Password Gen</h1>',
    unsafe_allow_html=True,
)
st.caption("Secure Password Generation Tool")

# ── Generator ─────────────────────────────────────────────────────────────

length = st.slider("Length", MIN_LENGTH, MAX_LENGTH, DEFAULT_LENGTH)
col1, col2 = st.columns(2)
with col1:
    use_upper = st.checkbox("Uppercase (ABC)", value=True)
    use_digits = st.checkbox("Numbers (123)", value=True)
with col2:
    use_lower = st.checkbox("Lowercase (abc)", value=True)
    use_special = st.checkbox("Special (#$&)", value=True)

output = st.empty()
verdict_area = st.container()

if st.button("Generate Password", type="primary"):
    policy = GenerationPolicy(
        length=length,
        uppercase=use_upper,
        lowercase=use_lower,
        digits=use_digits,
        special=use_special,
    )
    st.session_state["password"] = generate_password(policy)
    # Each rerun replaces the placeholder, which ends a running reveal.
    animate(st.session_state["password"], lambda p: output.code(p, language=None))

password = st.session_state.get("password", "")
if password:
    output.code(password, language=None)
    with verdict_area:
        show_verdict(password)
elif "password" in st.session_state:
    output.warning("Enable at least one character class.")

# ── Checker ───────────────────────────────────────────────────────────────

st.subheader("Password Checker")
custom = st.text_input(
    "Password",
    placeholder="Enter a password to check its strength",
    autocomplete="off",
    label_visibility="collapsed",
)
if custom:
    show_verdict(custom)

st.divider()
st.markdown(
    "<p style='color:#ef4444;font-weight:bold'>"
    "Make your passwords strong! Don't jump on every link, crack file, etc. "
    "you see. Doing so inadvertently puts your system and personal data at "
    "risk. Take your security seriously!</p>",
    unsafe_allow_html=True,
)
