"""AST node types produced by the reader and consumed by the printer."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Union

from .errors import MissingHashMapValue, UnsupportedHashMapKeyType


@dataclass(frozen=True)
class Nil:
    pass


@dataclass(frozen=True)
class Boolean:
    value: bool


@dataclass(frozen=True)
class Number:
    value: float


@dataclass(frozen=True)
class Symbol:
    value: str


@dataclass(frozen=True)
class Keyword:
    value: str


@dataclass(frozen=True)
class String:
    value: str


@dataclass(frozen=True)
class List:
    items: tuple["AST", ...] = ()


@dataclass(frozen=True)
class Vector:
    items: tuple["AST", ...] = ()


@dataclass(frozen=True)
class HashMap:
    entries: Mapping["HashMapKey", "AST"] = field(default_factory=dict)

    def __post_init__(self):
        # entries are copied behind a read-only view
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def __hash__(self):
        return hash(frozenset(self.entries.items()))


AST = Union[Nil, Boolean, Number, Symbol, Keyword, String, List, Vector, HashMap]

# Only keywords and strings may key a hash-map.
HashMapKey = Union[Keyword, String]


class Container(Enum):
    LIST = ("(", ")")
    VECTOR = ("[", "]")
    HASHMAP = ("{", "}")

    @property
    def opener(self) -> str:
        return self.value[0]

    @property
    def closer(self) -> str:
        return self.value[1]

    @classmethod
    def for_opener(cls, token: str) -> "Container | None":
        for kind in cls:
            if kind.opener == token:
                return kind
        return None


def to_hashmap_key(ast: AST) -> HashMapKey:
    """Narrow an AST node to a hash-map key.

    Raises UnsupportedHashMapKeyType for anything but a Keyword or String.
    """
    if isinstance(ast, (Keyword, String)):
        return ast
    raise UnsupportedHashMapKeyType()


def from_hashmap_key(key: HashMapKey) -> AST:
    return key


def nil() -> Nil:
    return Nil()


def boolean(value: bool) -> Boolean:
    return Boolean(bool(value))


def number(value: float) -> Number:
    return Number(float(value))


def symbol(value: str) -> Symbol:
    return Symbol(value)


def keyword(value: str) -> Keyword:
    return Keyword(value)


def string(value: str) -> String:
    return String(value)


def list_(items: Iterable[AST] = ()) -> List:
    return List(tuple(items))


def vector(items: Iterable[AST] = ()) -> Vector:
    return Vector(tuple(items))


def hashmap(entries: Mapping[HashMapKey, AST] | None = None) -> HashMap:
    return HashMap({to_hashmap_key(k): v for k, v in (entries or {}).items()})


def hashmap_from_pairs(forms: Iterable[AST]) -> HashMap:
    """Build a HashMap from a flat key, value, key, value... sequence.

    Later duplicate keys overwrite earlier ones.
    """
    entries: dict[HashMapKey, AST] = {}
    it = iter(forms)
    for key in it:
        try:
            value = next(it)
        except StopIteration:
            raise MissingHashMapValue() from None
        entries[to_hashmap_key(key)] = value
    return HashMap(entries)
