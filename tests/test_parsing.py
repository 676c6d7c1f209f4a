import pytest

from pushswap.parsing import (
    InputError,
    check_int_range,
    is_valid_token,
    parse_arguments,
    parse_long,
)


@pytest.mark.parametrize("token", ["42", "-7", "+13", "0", "", "2147483647"])
def test_valid_tokens(token):
    assert is_valid_token(token) is True


@pytest.mark.parametrize("token", ["1a", "+", "-", "--1", "-+1", "5-", "1+2", " 5", "1 2", "\t3"])
def test_invalid_tokens(token):
    assert is_valid_token(token) is False


def test_parse_long_signs_and_whitespace():
    assert parse_long("  -42") == -42
    assert parse_long("+17") == 17
    assert parse_long("\t\n99") == 99


def test_parse_long_stops_at_non_digit():
    assert parse_long("123abc") == 123
    assert parse_long("abc") == 0


def test_parse_long_is_not_bounded():
    assert parse_long("2147483648") == 2147483648


def test_check_int_range_limits():
    assert check_int_range(2147483647) == 2147483647
    assert check_int_range(-2147483648) == -2147483648


@pytest.mark.parametrize("number", [2147483648, -2147483649])
def test_check_int_range_rejects(number):
    with pytest.raises(InputError):
        check_int_range(number)


def test_no_arguments():
    assert parse_arguments([]) == []


def test_single_argument_is_split_on_spaces():
    assert parse_arguments(["3 -1  2 "]) == [3, -1, 2]


def test_multiple_arguments():
    assert parse_arguments(["3", "-1", "+2"]) == [3, -1, 2]


def test_empty_argument_among_many_reads_as_zero():
    assert parse_arguments(["", "5"]) == [0, 5]


@pytest.mark.parametrize("args", [[""], ["   "]])
def test_single_argument_without_numbers_fails(args):
    with pytest.raises(InputError):
        parse_arguments(args)


@pytest.mark.parametrize(
    "args",
    [
        ["1 2 1"],
        ["4", "4"],
        ["1 x 2"],
        ["2147483648"],
        ["1", "-2147483649"],
        ["1 2", "3"],
        ["1", "2a"],
    ],
)
def test_bad_arguments_fail(args):
    with pytest.raises(InputError):
        parse_arguments(args)


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_arguments(["7 7"])


def test_parsed_numbers_are_distinct():
    numbers = parse_arguments(["10 -20 30 -40 50"])
    assert len(set(numbers)) == len(numbers) == 5