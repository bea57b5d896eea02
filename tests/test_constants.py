"""Testes de tetris_stack/constants.py e tetris_stack/pieces.py"""

import pytest

from tetris_stack.constants import QUEUE_CAPACITY, Settings, load_settings
from tetris_stack.pieces import DEFAULT_KINDS, GREY, KIND_COLORS, kind_color, parse_kinds


def test_defaults_with_empty_environment() -> None:
    settings = load_settings({})
    assert settings == Settings()
    assert settings.capacity == QUEUE_CAPACITY == 5
    assert settings.kinds == DEFAULT_KINDS
    assert settings.seed is None
    assert settings.log_level == "WARNING"


def test_values_from_environment() -> None:
    settings = load_settings({
        "TETRIS_STACK_CAPACITY": "3",
        "TETRIS_STACK_KINDS": "szj",
        "TETRIS_STACK_SEED": "42",
        "TETRIS_STACK_LOG_LEVEL": "debug",
    })
    assert settings == Settings(capacity=3, kinds=("S", "Z", "J"), seed=42, log_level="DEBUG")


def test_blank_values_fall_back_to_defaults() -> None:
    settings = load_settings({"TETRIS_STACK_CAPACITY": " ", "TETRIS_STACK_SEED": ""})
    assert settings.capacity == 5
    assert settings.seed is None


@pytest.mark.parametrize(
    "env",
    [
        {"TETRIS_STACK_CAPACITY": "cinco"},
        {"TETRIS_STACK_CAPACITY": "0"},
        {"TETRIS_STACK_SEED": "1.5"},
        {"TETRIS_STACK_KINDS": "IIO"},
    ],
)
def test_invalid_environment_is_rejected(env: dict) -> None:
    with pytest.raises(RuntimeError):
        load_settings(env)


@pytest.mark.parametrize("raw", ["IOTL", "i,o,t,l", "I O T L"])
def test_parse_kinds_formats(raw: str) -> None:
    assert parse_kinds(raw) == ("I", "O", "T", "L")


@pytest.mark.parametrize("raw", ["", " , ", "TT"])
def test_parse_kinds_rejects(raw: str) -> None:
    with pytest.raises(ValueError):
        parse_kinds(raw)


def test_kind_color() -> None:
    assert kind_color("I") == KIND_COLORS["I"]
    assert kind_color("X") == GREY
