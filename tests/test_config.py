import pytest

from philosim.config import USAGE, Config, ConfigError, parse_args


def test_parse_without_meal_limit():
    config = parse_args(["5", "800", "200", "300"])
    assert config == Config(5, 800, 200, 300, None)
    assert config.number_of_meals is None


def test_parse_with_meal_limit():
    config = parse_args(["4", "410", "200", "200", "7"])
    assert config.number_philos == 4
    assert config.time_to_die == 410
    assert config.number_of_meals == 7


def test_minimum_values_accepted():
    config = parse_args(["1", "60", "60", "60", "0"])
    assert config == Config(1, 60, 60, 60, 0)


def test_maximum_philosophers_accepted():
    assert parse_args(["200", "800", "200", "200"]).number_philos == 200


@pytest.mark.parametrize("argv", [[], ["5", "800", "200"], ["1", "2", "3", "4", "5", "6"]])
def test_wrong_argument_count_gives_usage(argv):
    with pytest.raises(ConfigError) as info:
        parse_args(argv)
    assert str(info.value) == USAGE


@pytest.mark.parametrize(
    "argv, message",
    [
        (["x", "800", "200", "200"], "Error: Invalid Input for number_of_philosophers"),
        (["5", "+800", "200", "200"], "Error: Invalid Input for time_to_die"),
        (["5", "800", "2o0", "200"], "Error: Invalid Input for time_to_eat"),
        (["5", "800", "200", "1.5"], "Error: Invalid Input for time_to_sleep"),
        (["5", "800", "200", "200", "many"], "Error: Invalid Input for number_of_meals"),
        (["5", "800", "200", "200", "-1"], "Error: number_of_meals must be > 0"),
        (["5", "800", "200", "200", "-2"], "Error: number_of_meals must be >= 0"),
        (["0", "800", "200", "200"], "Error: number_of_philos must be between 0 and 200"),
        (["201", "800", "200", "200"], "Error: number_of_philos must be between 0 and 200"),
        (["5", "59", "200", "200"], "Error: time_to_die must be >= 60"),
        (["5", "800", "59", "200"], "Error: time_to_eat must be >= 60"),
        (["5", "800", "200", "59"], "Error: time_to_sleep must be >= 60"),
    ],
)
def test_errors(argv, message):
    with pytest.raises(ConfigError) as info:
        parse_args(argv)
    assert str(info.value) == message


def test_input_errors_reported_in_argument_order():
    with pytest.raises(ConfigError) as info:
        parse_args(["5", "bad", "bad", "bad"])
    assert str(info.value) == "Error: Invalid Input for time_to_die"


def test_empty_argument_parses_as_zero_then_fails_limits():
    with pytest.raises(ConfigError) as info:
        parse_args(["", "800", "200", "200"])
    assert "number_of_philos" in str(info.value)


def test_config_rejects_negative_meals_directly():
    with pytest.raises(ConfigError):
        Config(3, 800, 200, 200, -5)


def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        parse_args(["5"])