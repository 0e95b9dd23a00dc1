from __future__ import annotations

import secrets
import string

LOWER = string.ascii_lowercase
UPPER = string.ascii_uppercase
DIGITS = string.digits
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

MIN_LENGTH = 8
MAX_LENGTH = 64


def generate_password(length: int = 16, use_symbols: bool = True, use_numbers: bool = True) -> str:
    """Generate a random password from letters plus optional digits and symbols."""
    if not MIN_LENGTH <= length <= MAX_LENGTH:
        raise ValueError(f"length must be between {MIN_LENGTH} and {MAX_LENGTH}")
    charset = LOWER + UPPER
    if use_numbers:
        charset += DIGITS
    if use_symbols:
        charset += SYMBOLS
    return "".join(secrets.choice(charset) for _ in range(length))


def estimate_strength(password: str) -> tuple[int, str]:
    """
    Score a password 0-100 from its length and character variety.

    Used when no LLM assessment is available.
    """
    classes = sum(
        1 for group in (LOWER, UPPER, DIGITS, SYMBOLS)
        if any(ch in group for ch in password)
    )
    score = min(60, len(password) * 4) + classes * 10
    score = max(0, min(100, score))

    if score >= 80:
        feedback = "This is a strong password."
    elif score >= 50:
        feedback = "Decent password; a longer one with more character types would be stronger."
    else:
        feedback = "Weak password; use more characters and mix letters, digits and symbols."
    return score, feedback
