import pytest

from philosophers.config import (
    BAD_AMOUNT,
    BAD_MEALS,
    BAD_TIME_TO_DIE,
    BAD_TIME_TO_EAT,
    BAD_TIME_TO_SLEEP,
    INT_MAX,
    NOT_NUMERIC,
    TOO_BIG,
    USAGE,
    InputError,
    Settings,
    parse_number,
    parse_settings,
)


def test_parse_number_plain_digits():
    assert parse_number("410") == 410


def test_parse_number_leading_minus_gives_zero():
    assert parse_number("-5") == 0


def test_parse_number_empty_gives_zero():
    assert parse_number("") == 0


def test_parse_number_keeps_large_values():
    assert parse_number("2147483648") > INT_MAX


def test_parse_settings_four_arguments():
    settings = parse_settings(["5", "800", "200", "200"])
    assert settings == Settings(5, 800, 200, 200, None)


def test_parse_settings_with_meals():
    settings = parse_settings(["4", "410", "200", "200", "7"])
    assert settings.meals == 7
    assert settings.amount == 4


@pytest.mark.parametrize("args", [[], ["1", "2", "3"], ["1", "2", "3", "4", "5", "6"]])
def test_wrong_argument_count(args):
    with pytest.raises(InputError) as info:
        parse_settings(args)
    assert str(info.value) == USAGE


@pytest.mark.parametrize(
    "args",
    [
        ["5", "", "200", "200"],
        ["5", "80a", "200", "200"],
        ["5", "800", "2-0", "200"],
        ["+5", "800", "200", "200"],
    ],
)
def test_non_numeric_input(args):
    with pytest.raises(InputError) as info:
        parse_settings(args)
    assert str(info.value) == NOT_NUMERIC


@pytest.mark.parametrize(
    "args, message",
    [
        (["0", "800", "200", "200"], BAD_AMOUNT),
        (["1001", "800", "200", "200"], BAD_AMOUNT),
        (["-5", "800", "200", "200"], BAD_AMOUNT),
        (["5", "0", "200", "200"], BAD_TIME_TO_DIE),
        (["5", "800", "-1", "200"], BAD_TIME_TO_EAT),
        (["5", "800", "200", "0"], BAD_TIME_TO_SLEEP),
        (["5", "800", "200", "200", "0"], BAD_MEALS),
    ],
)
def test_out_of_range_values(args, message):
    with pytest.raises(InputError) as info:
        parse_settings(args)
    assert str(info.value) == message


def test_amount_upper_bound_accepted():
    assert parse_settings(["1000", "800", "200", "200"]).amount == 1000


def test_overflow_reported():
    with pytest.raises(InputError) as info:
        parse_settings(["5", "99999999999", "200", "200"])
    assert str(info.value) == TOO_BIG


def test_overflow_reported_after_range_checks():
    with pytest.raises(InputError) as info:
        parse_settings(["99999999999", "0", "200", "200"])
    assert str(info.value) == BAD_TIME_TO_DIE


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_settings(["x", "1", "1", "1"])