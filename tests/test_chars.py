import string

import pytest

from cstrkit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    is_space,
    to_lower,
    to_upper,
)


def test_is_alpha_matches_ascii_letters():
    for code in range(256):
        assert is_alpha(code) == (chr(code) in string.ascii_letters)


def test_is_digit_matches_ascii_digits():
    for code in range(256):
        assert is_digit(code) == (chr(code) in string.digits)


def test_is_alnum_is_union_of_alpha_and_digit():
    for code in range(256):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_print_range():
    printable = [chr(c) for c in range(256) if is_print(c)]
    assert printable[0] == " "
    assert printable[-1] == "~"
    assert len(printable) == ord("~") - ord(" ") + 1


def test_is_ascii_boundaries():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)


def test_integers_are_reduced_to_a_byte():
    assert is_digit(ord("5") + 256)
    assert is_alpha(ord("q") - 256)


def test_is_space_set():
    spaces = {chr(c) for c in range(256) if is_space(c)}
    assert spaces == set(" \t\n\v\f\r")


def test_string_arguments():
    assert is_alpha("x")
    assert not is_alpha("1")
    assert is_digit("7")
    assert not is_print("\n")


def test_non_single_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        is_digit("")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_alpha(1.5)


def test_case_conversion_over_letters():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert to_upper(lower) == upper
        assert to_lower(upper) == lower


def test_case_conversion_round_trip_on_ints():
    for ch in string.ascii_letters:
        assert to_lower(to_upper(ord(ch))) == ord(ch.lower())


def test_non_letters_pass_through():
    for ch in string.digits + string.punctuation + " ":
        assert to_upper(ch) == ch
        assert to_lower(ch) == ch


def test_conversion_keeps_argument_type():
    assert to_upper(ord("m")) == ord("M")
    assert to_lower("Q") == "q"