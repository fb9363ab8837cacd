import pytest

from wirefdf.numbers import NumberError, atoi, itoa, strict_atoi


@pytest.mark.parametrize("n", [0, 7, -7, 1234, 2147483647, -2147483648])
def test_atoi_reads_leading_number_and_ignores_trash(n):
    assert atoi(f" \t\n{n}xyz") == n


def test_atoi_without_digits_is_zero():
    assert atoi("") == 0
    assert atoi("abc") == atoi("")


def test_atoi_single_sign_only():
    assert atoi("+-5") == atoi("")


@pytest.mark.parametrize("n", [0, 42, -42, 2147483647, -2147483648])
def test_strict_round_trip(n):
    assert strict_atoi(itoa(n)) == n


def test_strict_allows_leading_whitespace():
    assert strict_atoi("  \t-15") == -15


def test_strict_whitespace_only_is_zero():
    assert strict_atoi("   ") == 0


@pytest.mark.parametrize(
    "text",
    ["", "12a", "-", "+", "+-1", "2147483648", "-2147483649", "1 ", "99999999999999999999999"],
)
def test_strict_rejects(text):
    with pytest.raises(NumberError):
        strict_atoi(text)


def test_number_error_is_value_error():
    with pytest.raises(ValueError):
        strict_atoi("x")


@pytest.mark.parametrize("text", ["-2147483648", "1031797530", "1234"])
def test_itoa_pinned_values(text):
    assert itoa(int(text)) == text


def test_itoa_round_trips_through_atoi():
    for n in range(-1000, 1000, 37):
        assert atoi(itoa(n)) == n