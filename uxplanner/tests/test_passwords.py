import pytest

from uxplanner.auth.passwords import DIGITS, SYMBOLS, estimate_strength, generate_password


def test_generate_password_length():
    assert len(generate_password(24)) == 24


def test_generate_password_letters_only():
    password = generate_password(64, use_symbols=False, use_numbers=False)
    assert password.isalpha()


def test_generate_password_excludes_symbols():
    password = generate_password(64, use_symbols=False)
    assert not any(ch in SYMBOLS for ch in password)


@pytest.mark.parametrize("length", [7, 65])
def test_generate_password_rejects_bad_length(length):
    with pytest.raises(ValueError):
        generate_password(length)


def test_estimate_strength_orders_passwords():
    weak, _ = estimate_strength("abc")
    strong, feedback = estimate_strength("xQ7!vR2#mK9@pL4$")
    assert weak < 50
    assert strong >= 80
    assert feedback == "This is a strong password."


def test_estimate_strength_counts_digits():
    letters, _ = estimate_strength("abcdefgh")
    mixed, _ = estimate_strength("abcdefg" + DIGITS[0])
    assert mixed > letters
