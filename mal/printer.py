"""Serialize an AST back to canonical mal text."""

import math

from .types import (
    AST,
    Boolean,
    HashMap,
    Keyword,
    List,
    Nil,
    Number,
    String,
    Symbol,
    Vector,
    from_hashmap_key,
)

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\t": "\\t",
}


def escape(text: str) -> str:
    return "".join(_ESCAPES.get(ch, ch) for ch in text)


def pr_str(ast: AST, print_readably: bool = True) -> str:
    """Render ast as text.

    With print_readably, strings are quoted and escaped so that reading the
    output gives back the same string; otherwise they are emitted raw.
    """
    if isinstance(ast, List):
        return "(" + _join(ast.items, print_readably) + ")"
    if isinstance(ast, Vector):
        return "[" + _join(ast.items, print_readably) + "]"
    if isinstance(ast, HashMap):
        pairs = [
            f"{pr_str(from_hashmap_key(k), print_readably)} {pr_str(v, print_readably)}"
            for k, v in ast.entries.items()
        ]
        return "{" + " ".join(pairs) + "}"
    if isinstance(ast, Keyword):
        return ":" + ast.value
    if isinstance(ast, Symbol):
        return ast.value
    if isinstance(ast, String):
        if print_readably:
            return '"' + escape(ast.value) + '"'
        return ast.value
    if isinstance(ast, Boolean):
        return "true" if ast.value else "false"
    if isinstance(ast, Number):
        return _number(ast.value)
    if isinstance(ast, Nil):
        return "nil"
    raise TypeError(f"not an AST node: {ast!r}")


def _join(items, print_readably: bool) -> str:
    return " ".join(pr_str(item, print_readably) for item in items)


def _number(value: float) -> str:
    # integral values print without a fractional part: 1.0 -> "1"
    if value.is_integer():
        if value == 0 and math.copysign(1.0, value) < 0:
            return "-0"
        return str(int(value))
    return repr(value)
