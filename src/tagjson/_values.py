"""
Tagged value tree produced by the parser.

Each JSON construct maps to exactly one immutable variant class. The class
itself is the tag, so a payload can only be reached through the variant that
owns it; ``match`` statements and ``isinstance`` checks are the intended way
to inspect a value.
"""

from collections.abc import Iterator
from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from typing import Any
from typing import ClassVar

# Native Python mirror of a value tree
PyValue = (
    None | bool | int | float | str | list["PyValue"] | dict[str, "PyValue"]
)


class ValueType(Enum):
    """Tags of the value variants."""

    NULL = "null"
    BOOL = "bool"
    INT = "int"
    DOUBLE = "double"
    STRING = "string"
    LIST = "list"
    DICT = "dict"


@dataclass(frozen=True, slots=True)
class Null:
    """Absence of a value."""

    tag: ClassVar[ValueType] = ValueType.NULL

    def to_python(self) -> None:
        return None


@dataclass(frozen=True, slots=True)
class Bool:
    value: bool

    tag: ClassVar[ValueType] = ValueType.BOOL

    def to_python(self) -> bool:
        return self.value


@dataclass(frozen=True, slots=True)
class Int:
    """Signed integer within the parser's configured width."""

    value: int

    tag: ClassVar[ValueType] = ValueType.INT

    def to_python(self) -> int:
        return self.value


@dataclass(frozen=True, slots=True)
class Double:
    value: float

    tag: ClassVar[ValueType] = ValueType.DOUBLE

    def to_python(self) -> float:
        return self.value


@dataclass(frozen=True, slots=True)
class String:
    """Decoded string payload, escapes already resolved."""

    value: str

    tag: ClassVar[ValueType] = ValueType.STRING

    def to_python(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class List:
    """
    Ordered sequence of values.

    Items are held in a tuple so the container cannot be mutated once built.
    """

    items: tuple["Value", ...] = ()

    tag: ClassVar[ValueType] = ValueType.LIST

    def __post_init__(self) -> None:
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator["Value"]:
        return iter(self.items)

    def __getitem__(self, index: int) -> "Value":
        return self.items[index]

    def to_python(self) -> list[PyValue]:
        return [item.to_python() for item in self.items]


@dataclass(frozen=True, slots=True)
class Dict:
    """
    Mapping from decoded string keys to values.

    Iteration follows insertion order of each key's first occurrence; a
    repeated key keeps its original position and takes the last value.
    Equality ignores order.
    """

    entries: dict[str, "Value"] = field(default_factory=dict, hash=False)

    tag: ClassVar[ValueType] = ValueType.DICT

    def __post_init__(self) -> None:
        # Private copy so callers cannot mutate the tree through their dict
        object.__setattr__(self, "entries", dict(self.entries))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __getitem__(self, key: str) -> "Value":
        return self.entries[key]

    def get(self, key: str, default: "Value | None" = None) -> "Value | None":
        return self.entries.get(key, default)

    def keys(self) -> Iterator[str]:
        return iter(self.entries.keys())

    def values(self) -> Iterator["Value"]:
        return iter(self.entries.values())

    def items(self) -> Iterator[tuple[str, "Value"]]:
        return iter(self.entries.items())

    def to_python(self) -> dict[str, PyValue]:
        return {key: value.to_python() for key, value in self.entries.items()}


type Value = Null | Bool | Int | Double | String | List | Dict

VALUE_TYPES: tuple[type, ...] = (Null, Bool, Int, Double, String, List, Dict)


def is_value(obj: object) -> bool:
    """Returns True if ``obj`` is an instance of one of the variants."""
    return isinstance(obj, VALUE_TYPES)


def from_python(obj: Any) -> Value:  # noqa: PLR0911
    """
    Builds a value tree from native Python objects.

    ``bool`` is checked before ``int`` since it is an ``int`` subclass.
    Tuples become lists; mappings must have string keys.
    """
    if is_value(obj):
        return obj  # type: ignore[no-any-return]
    if obj is None:
        return Null()
    if isinstance(obj, bool):
        return Bool(obj)
    if isinstance(obj, int):
        return Int(obj)
    if isinstance(obj, float):
        return Double(obj)
    if isinstance(obj, str):
        return String(obj)
    if isinstance(obj, list | tuple):
        return List(tuple(from_python(item) for item in obj))
    if isinstance(obj, Mapping):
        entries: dict[str, Value] = {}
        for key, value in obj.items():
            if not isinstance(key, str):
                msg = f"keys must be str, not {type(key).__name__}"
                raise TypeError(msg)
            entries[key] = from_python(value)
        return Dict(entries)

    msg = f"Object of type {type(obj).__name__} has no value representation"
    raise TypeError(msg)
