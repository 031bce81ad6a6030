"""
Configuration tests.

Validates ParseConfig defaults, validation and environment overrides.
"""

import dataclasses

import pytest

from tagjson import ParseConfig


def test_defaults() -> None:
    config = ParseConfig()

    assert config.max_depth == 256
    assert config.int_bits == 64
    assert config.strict is False
    assert config.int_min == -(2**63)
    assert config.int_max == 2**63 - 1


def test_int_range_follows_width() -> None:
    config = ParseConfig(int_bits=8)

    assert (config.int_min, config.int_max) == (-128, 127)


@pytest.mark.parametrize(
    "kwargs,error",
    [
        ({"max_depth": 0}, ValueError),
        ({"max_depth": "3"}, TypeError),
        ({"max_depth": True}, TypeError),
        ({"int_bits": 4}, ValueError),
        ({"int_bits": 64.0}, TypeError),
        ({"strict": "yes"}, TypeError),
    ],
)
def test_validation(kwargs: dict[str, object], error: type) -> None:
    with pytest.raises(error):
        ParseConfig(**kwargs)  # type: ignore[arg-type]


def test_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        ParseConfig().max_depth = 5  # type: ignore[misc]


def test_from_env() -> None:
    """
    Validates TAGJSON_* variables populate the configuration.
    """
    config = ParseConfig.from_env(
        {
            "TAGJSON_MAX_DEPTH": " 10 ",
            "TAGJSON_INT_BITS": "32",
            "TAGJSON_STRICT": "Yes",
        }
    )

    assert config == ParseConfig(max_depth=10, int_bits=32, strict=True)


def test_from_env_overrides_win() -> None:
    config = ParseConfig.from_env(
        {"TAGJSON_MAX_DEPTH": "10", "TAGJSON_STRICT": "0"}, max_depth=5
    )

    assert config.max_depth == 5
    assert config.strict is False


def test_from_env_empty() -> None:
    assert ParseConfig.from_env({}) == ParseConfig()


def test_from_env_reads_process_environment(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("TAGJSON_MAX_DEPTH", "7")

    assert ParseConfig.from_env().max_depth == 7


@pytest.mark.parametrize(
    "environ",
    [
        {"TAGJSON_MAX_DEPTH": "deep"},
        {"TAGJSON_INT_BITS": ""},
        {"TAGJSON_STRICT": "maybe"},
        {"TAGJSON_MAX_DEPTH": "-1"},
    ],
)
def test_from_env_rejects_malformed(environ: dict[str, str]) -> None:
    with pytest.raises(ValueError):
        ParseConfig.from_env(environ)
