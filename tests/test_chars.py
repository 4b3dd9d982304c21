import pytest

from pushswap.chars import (
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

ASCII = [chr(code) for code in range(128)]


@pytest.mark.parametrize("char", ["a", "z", "A", "Z", "m", "Q"])
def test_isalpha_letters(char):
    assert isalpha(char) is True


@pytest.mark.parametrize("char", ["0", "@", "[", "`", "{", " ", "é"])
def test_isalpha_non_letters(char):
    assert isalpha(char) is False


def test_isalpha_accepts_codes():
    assert isalpha(65) is True
    assert isalpha(64) is False


def test_isdigit_range():
    assert [c for c in ASCII if isdigit(c)] == list("0123456789")


def test_isalnum_is_alpha_or_digit():
    for char in ASCII:
        assert isalnum(char) == (isalpha(char) or isdigit(char))


def test_isascii_bounds():
    assert isascii(0) is True
    assert isascii(127) is True
    assert isascii(128) is False
    assert isascii(-1) is False


def test_isprint_bounds():
    assert isprint(31) is False
    assert isprint(32) is True
    assert isprint(126) is True
    assert isprint(127) is False


def test_case_mapping_letters():
    assert tolower("A") == "a"
    assert toupper("z") == "Z"


def test_case_mapping_codes_keep_type():
    assert tolower(ord("A")) == ord("a")
    assert toupper(ord("a")) == ord("A")


@pytest.mark.parametrize("char", ["0", "@", "[", " ", "{"])
def test_case_mapping_leaves_others(char):
    assert tolower(char) == char
    assert toupper(char) == char


def test_case_mapping_round_trip():
    for char in ASCII:
        if isalpha(char):
            assert tolower(toupper(char)) == char.lower()
            assert toupper(tolower(char)) == char.upper()


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        isalpha("ab")
    with pytest.raises(ValueError):
        tolower("")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("   +987", 987),
        ("   0", 0),
        ("  \t  \n   5678  ", 5678),
        ("-2147483648", -2147483648),
        ("2147483647", 2147483647),
    ],
)
def test_atoi_values(text, expected):
    assert atoi(text) == expected


def test_atoi_double_sign_reads_nothing():
    assert atoi("   --1234") == 0


def test_atoi_stops_at_non_digit():
    assert atoi("12abc34") == 12


def test_atoi_result_stays_in_32_bits():
    assert -(2**31) <= atoi("99999999999999") <= 2**31 - 1


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648, 1000, -1000])
def test_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_values():
    assert itoa(0) == "0"
    assert itoa(-2147483648) == "-2147483648"


@pytest.mark.parametrize("n", [2**31, -(2**31) - 1])
def test_itoa_out_of_range(n):
    with pytest.raises(ValueError):
        itoa(n)