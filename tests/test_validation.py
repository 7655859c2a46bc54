import pytest

from pushswap.validation import (
    InputError,
    check_int,
    is_charset,
    is_empty,
    is_int,
    is_list,
    parse_arguments,
    validate_arguments,
)


def test_is_empty():
    assert is_empty("")
    assert is_empty("    ")
    assert not is_empty("  1 ")


def test_is_charset():
    assert is_charset("1 -2 +3")
    assert not is_charset("1 a")
    assert not is_charset("1\t2")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2147483647", True),
        ("2147483648", False),
        ("-2147483648", True),
        ("-2147483649", False),
        ("+2147483647", True),
        ("+2147483648", False),
        ("42", True),
        ("-42", True),
        ("4a", False),
        ("--4", False),
        ("4-", False),
    ],
)
def test_is_int(text, expected):
    assert is_int(text) is expected


def test_is_int_too_many_digits():
    assert not is_int("21474836470")
    assert not is_int("-214748364800")


def test_is_int_stops_at_end_character():
    assert is_int("2147483647 99999999999", " ")
    assert not is_int("2147483648 1", " ")


def test_check_int_direct():
    assert check_int("2147483647", 10)
    assert not check_int("2147483648", 10)
    assert not check_int("99999999999", 11)
    assert check_int("-2147483648", 11)


def test_is_list_accepts_spaced_numbers():
    assert is_list("3 2 1")
    assert is_list(" -5 +6 ")


def test_is_list_needs_a_space():
    assert not is_list("42")


def test_is_list_rejects_bad_token():
    assert not is_list("1 2a 3")
    assert not is_list("1 2147483648")


def test_validate_single_list_argument():
    args = ["3 2 10 11 12"]
    validate_arguments(args)
    assert parse_arguments(args) == [3, 2, 10, 11, 12]


def test_validate_many_arguments():
    args = ["3", "-2", "+10"]
    validate_arguments(args)
    assert parse_arguments(args) == [3, -2, 10]


@pytest.mark.parametrize(
    "args",
    [
        ["   "],
        [""],
        ["1 a 2"],
        ["1 2147483648"],
        ["1", "two"],
        ["1", "2147483648"],
        ["1", "2 3"],
    ],
)
def test_validate_rejects(args):
    with pytest.raises(InputError):
        validate_arguments(args)


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        validate_arguments(["x"])


def test_parse_single_number():
    assert parse_arguments(["7"]) == [7]


def test_parse_limits():
    assert parse_arguments(["2147483647", "-2147483648"]) == [2147483647, -2147483648]


def test_parse_rejects_duplicates_in_list():
    with pytest.raises(InputError):
        parse_arguments(["1 2 1"])


def test_parse_rejects_duplicate_arguments():
    with pytest.raises(InputError):
        parse_arguments(["5", "6", "5"])


def test_parse_preserves_order():
    values = parse_arguments(["9 1 5"])
    assert values == [9, 1, 5]
    assert len(set(values)) == len(values)