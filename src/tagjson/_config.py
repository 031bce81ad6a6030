"""Immutable parser configuration with environment overrides."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

DEFAULT_MAX_DEPTH = 256
DEFAULT_INT_BITS = 64
_MIN_INT_BITS = 8

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off", ""})


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures parsing behavior with immutable settings.

    ``max_depth`` bounds container nesting, ``int_bits`` is the signed width
    an integer literal must fit to become an ``Int``, and ``strict`` rejects
    raw control characters inside strings.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    int_bits: int = DEFAULT_INT_BITS
    strict: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.strict, bool):
            raise TypeError("strict must be a boolean")
        if isinstance(self.max_depth, bool) or not isinstance(
            self.max_depth, int
        ):
            raise TypeError("max_depth must be an integer")
        if self.max_depth < 1:
            raise ValueError("max_depth must be positive")
        if isinstance(self.int_bits, bool) or not isinstance(
            self.int_bits, int
        ):
            raise TypeError("int_bits must be an integer")
        if self.int_bits < _MIN_INT_BITS:
            raise ValueError(f"int_bits must be at least {_MIN_INT_BITS}")

    @property
    def int_min(self) -> int:
        return -(1 << (self.int_bits - 1))

    @property
    def int_max(self) -> int:
        return (1 << (self.int_bits - 1)) - 1

    @classmethod
    def from_env(
        cls, environ: Mapping[str, str] | None = None, **overrides: Any
    ) -> "ParseConfig":
        """
        Builds a configuration from ``TAGJSON_*`` environment variables.

        Explicit keyword overrides take precedence over the environment.
        """
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}

        if "TAGJSON_MAX_DEPTH" in env:
            values["max_depth"] = _env_int(env, "TAGJSON_MAX_DEPTH")
        if "TAGJSON_INT_BITS" in env:
            values["int_bits"] = _env_int(env, "TAGJSON_INT_BITS")
        if "TAGJSON_STRICT" in env:
            values["strict"] = _env_bool(env, "TAGJSON_STRICT")

        values.update(overrides)
        return cls(**values)


def _env_int(env: Mapping[str, str], name: str) -> int:
    raw = env[name].strip()
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


def _env_bool(env: Mapping[str, str], name: str) -> bool:
    raw = env[name].strip().lower()
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {env[name]!r}")
