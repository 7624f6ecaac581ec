import pytest

from solongmaze.chars import (
    atoi,
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    itoa,
    tolower,
    toupper,
)


def test_isalpha_letters_and_not_digits():
    assert isalpha("a")
    assert isalpha("Z")
    assert not isalpha("5")
    assert not isalpha("@")


def test_isdigit_only_ascii_digits():
    assert isdigit("0")
    assert isdigit("9")
    assert not isdigit("a")
    assert not isdigit("\u0663")


def test_isalnum_is_union_of_alpha_and_digit():
    for code in range(256):
        assert isalnum(code) == (isalpha(code) or isdigit(code))


def test_isascii_range():
    assert isascii(0)
    assert isascii(127)
    assert not isascii(128)
    assert not isascii(-1)


def test_isprint_range():
    assert isprint(" ")
    assert isprint("~")
    assert not isprint("\n")
    assert not isprint(127)


def test_accepts_text_and_codes_alike():
    for code in range(128):
        assert isalpha(code) == isalpha(chr(code))
        assert isprint(code) == isprint(chr(code))


def test_multi_character_text_is_rejected():
    with pytest.raises(ValueError):
        isalpha("ab")


def test_toupper_and_tolower():
    assert toupper("a") == "A"
    assert tolower("Z") == "z"
    assert toupper("1") == "1"
    assert tolower(ord("A")) == ord("a")


def test_case_round_trip():
    for code in range(ord("a"), ord("z") + 1):
        assert tolower(toupper(code)) == code


def test_atoi_parses_leading_number():
    assert atoi("  \t-42abc") == -42
    assert atoi("+17") == 17
    assert atoi("123") == 123


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("--5") == 0


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_atoi_round_trip():
    for number in (0, 7, -7, 2147483647, -2147483648, 1000):
        assert atoi(itoa(number)) == number


def test_itoa_rejects_non_integers():
    with pytest.raises(TypeError):
        itoa(1.5)