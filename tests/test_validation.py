import pytest

from philosophers.validation import check_params, parse_int


def test_valid_arguments_are_accepted():
    assert check_params(["5", "800", "200", "200"]) is True


def test_optional_meal_count_is_accepted():
    assert check_params(["5", "800", "200", "200", "7"]) is True


def test_no_arguments_are_accepted():
    assert check_params([]) is True


def test_leading_zeros_are_accepted():
    assert check_params(["00", "007"]) is True


@pytest.mark.parametrize(
    "args",
    [
        ["5", "", "200", "200"],
        ["0", "800", "200", "200"],
        ["5", "800", "0", "200"],
        ["-5", "800", "200", "200"],
        ["+5", "800", "200", "200"],
        [" 5", "800", "200", "200"],
        ["5", "8o0", "200", "200"],
        ["5", "800", "200", "2.5"],
        ["5", "800", "200", "200", "abc"],
    ],
)
def test_invalid_arguments_are_rejected(args):
    assert check_params(args) is False


def test_unicode_digits_are_rejected():
    assert check_params(["\u0665", "800", "200", "200"]) is False


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("800", 800),
        ("+8", 8),
        ("-17", -17),
        ("  -17abc", -17),
        ("\t\n\v\f\r 3", 3),
        ("007", 7),
        ("12 34", 12),
    ],
)
def test_parse_int_reads_leading_number(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "--5", "+-5", "- 5", "   "])
def test_parse_int_without_digits_is_zero(text):
    assert parse_int(text) == 0


def test_parse_int_largest_value_round_trips():
    assert parse_int("2147483647") == 2147483647
    assert parse_int("-2147483648") == -2147483648


def test_parse_int_wraps_past_32_bits():
    assert parse_int("2147483648") == -2147483648


def test_parse_int_agrees_with_str_of_int():
    for value in (1, 9, 10, 99, 12345, 2000000000):
        assert parse_int(str(value)) == value
        assert parse_int(f"-{value}") == -value