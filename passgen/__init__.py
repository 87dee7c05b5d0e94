"""PassGen -- password generation and strength analysis.

Core functions for building a character pool from a generation policy,
drawing random passwords from it, and rating how strong a password is.
This module only depends on the standard library so it can be embedded
as-is in the browser build (see ``build_docs.py``).
"""

import logging
import re
import secrets
import string
from dataclasses import dataclass
from typing import Callable

logger = logging.getLogger(__name__)


# ── Configuration ──────────────────────────────────────────────────────────

DEFAULT_LENGTH = 12
MIN_LENGTH = 8
MAX_LENGTH = 32

UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
DIGITS = string.digits
SPECIAL = "!@#$%^&*()_+-=[]{}|;:,.<>?"


# ── Password generation ────────────────────────────────────────────────────


@dataclass(frozen=True)
class GenerationPolicy:
    """Length and enabled character classes for one generation call.

    The UI keeps *length* within ``MIN_LENGTH``..``MAX_LENGTH``; the
    generator itself accepts any value.
    """

    length: int = DEFAULT_LENGTH
    uppercase: bool = True
    lowercase: bool = True
    digits: bool = True
    special: bool = True


def character_pool(policy: GenerationPolicy) -> str:
    """Return the enabled alphabets concatenated as upper, lower, digits, special."""
    pool = ""
    if policy.uppercase:
        pool += UPPERCASE
    if policy.lowercase:
        pool += LOWERCASE
    if policy.digits:
        pool += DIGITS
    if policy.special:
        pool += SPECIAL
    return pool


_system_random = secrets.SystemRandom()


def generate_password(policy: GenerationPolicy | None = None, *, rng=None) -> str:
    """Generate a random password according to *policy*.

    Each character is drawn independently and uniformly from the pool, so
    an enabled class is not guaranteed to show up in the result.  Returns
    an empty string when no character class is enabled.

    *rng* is any object with a ``choice`` method (``random.Random(seed)``
    for reproducible output).  Defaults to :class:`secrets.SystemRandom`.
    """
    if policy is None:
        policy = GenerationPolicy()
    if rng is None:
        rng = _system_random

    pool = character_pool(policy)
    if not pool:
        logger.debug("No character class enabled, nothing to generate")
        return ""

    logger.debug(
        "Generating %d characters from a pool of %d", max(policy.length, 0), len(pool),
    )
    return "".join(rng.choice(pool) for _ in range(policy.length))


# ── Strength analysis ──────────────────────────────────────────────────────

_COMMON_PATTERNS = ["123", "abc", "password", "qwerty", "admin"]
_SEQUENTIAL_RUNS = [DIGITS[i : i + 3] for i in range(len(DIGITS) - 2)]

_UPPER_RE = re.compile(r"[A-Z]")
_LOWER_RE = re.compile(r"[a-z]")
_NUMBER_RE = re.compile(r"\d", re.ASCII)
# Same as SPECIAL minus the pipe
_SPECIAL_RE = re.compile(r"[!@#$%^&*()_+\-=\[\]{};:,.<>?]")
_COMMON_RE = re.compile("|".join(_COMMON_PATTERNS), re.IGNORECASE | re.ASCII)
_REPEAT_RE = re.compile(r"(.)\1{2,}")
_SEQUENTIAL_RE = re.compile("|".join(_SEQUENTIAL_RUNS))


@dataclass(frozen=True)
class PasswordFeatures:
    has_upper: bool
    has_lower: bool
    has_number: bool
    has_special: bool
    length: int
    has_common_pattern: bool
    has_repeating_chars: bool
    has_sequential: bool

    @property
    def base_score(self) -> int:
        """One point per character class, plus one each for 12+ and 16+ chars."""
        score = sum([self.has_upper, self.has_lower, self.has_number, self.has_special])
        if self.length >= 12:
            score += 1
        if self.length >= 16:
            score += 1
        return score


def inspect_password(password: str) -> PasswordFeatures:
    """Compute the feature flags the strength rules look at."""
    return PasswordFeatures(
        has_upper=bool(_UPPER_RE.search(password)),
        has_lower=bool(_LOWER_RE.search(password)),
        has_number=bool(_NUMBER_RE.search(password)),
        has_special=bool(_SPECIAL_RE.search(password)),
        length=len(password),
        has_common_pattern=bool(_COMMON_RE.search(password)),
        has_repeating_chars=bool(_REPEAT_RE.search(password)),
        has_sequential=bool(_SEQUENTIAL_RE.search(password)),
    )


@dataclass(frozen=True)
class _Rule:
    name: str
    applies: Callable[[PasswordFeatures, int], bool]
    penalty: int
    message: str


# Evaluated top to bottom; the first match sets the message and penalty.
_RULES = [
    _Rule(
        "common-pattern",
        lambda f, score: f.has_common_pattern,
        2,
        'Ah yes, "password123". Pure genius. Try harder.',
    ),
    _Rule(
        "sequential",
        lambda f, score: f.has_sequential,
        1,
        "123? What's next, \"abc\"? Get creative!",
    ),
    _Rule(
        "repeating",
        lambda f, score: f.has_repeating_chars,
        1,
        "Repeating chars? Your keyboard has other keys, you know.",
    ),
    _Rule(
        "too-short",
        lambda f, score: f.length < MIN_LENGTH,
        0,
        "A password shorter than a tweet? Seriously?",
    ),
    _Rule(
        "no-variety",
        lambda f, score: not f.has_special and not f.has_number,
        0,
        "Spice it up! This isn't your grandma's cookbook password.",
    ),
    _Rule(
        "strong",
        lambda f, score: score >= 5,
        0,
        "Look who finally learned how to make a proper password!",
    ),
]


@dataclass(frozen=True)
class StrengthVerdict:
    """Result of :func:`analyze_password`.

    *icon* is a Lucide icon name, *color* a CSS color keyword.
    """

    strength: str
    icon: str
    color: str
    message: str = ""
    score: int = 0


# (max score, label, icon, color); anything above the last bound is Strong.
_CATEGORIES = [
    (1, "Very Weak", "x-circle", "red"),
    (2, "Weak", "alert-triangle", "orange"),
    (4, "Good", "lock", "yellow"),
]
_STRONG = ("Strong", "shield-check", "green")

EMPTY_VERDICT = StrengthVerdict("None", "lock", "gray")


def analyze_password(password: str) -> StrengthVerdict:
    """Rate *password* and pick a feedback message.

    Scoring adds a point per character class and for lengths of 12+ and
    16+, then the first matching rule in ``_RULES`` may subtract a penalty
    (never below zero) and supplies the message.
    """
    if not password:
        return EMPTY_VERDICT

    features = inspect_password(password)
    score = features.base_score
    message = ""

    for rule in _RULES:
        if rule.applies(features, score):
            score = max(0, score - rule.penalty)
            message = rule.message
            logger.debug("Rule %r matched, score now %d", rule.name, score)
            break

    for bound, label, icon, color in _CATEGORIES:
        if score <= bound:
            return StrengthVerdict(label, icon, color, message, score)
    return StrengthVerdict(*_STRONG, message, score)
