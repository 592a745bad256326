"""Tokenizer and recursive-descent reader for mal S-expressions."""

import logging
from typing import Iterator

from .errors import (
    EmptyInput,
    MissingAtom,
    UnbalancedCollection,
    UnbalancedString,
)
from .types import (
    AST,
    Container,
    Keyword,
    List,
    Number,
    String,
    Symbol,
    Vector,
    hashmap_from_pairs,
)

log = logging.getLogger(__name__)

SPECIAL_CHARS = "[]{}()'`~^@"
MISC_DELIMITERS = ",;\"[]{}()'`"

# prefix token -> symbol its form is wrapped with
READER_MACROS = {
    "'": "quote",
    "`": "quasiquote",
    "~": "unquote",
    "~@": "splice-unquote",
    "@": "deref",
}

STRING_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "n": "\n",
    "t": "\t",
}


def _is_separator(ch: str) -> bool:
    return ch == "," or ch.isspace()


def tokenize(src: str) -> Iterator[str]:
    """Yield the tokens of src in order. Never fails.

    Whitespace and commas separate tokens; a `;` discards the rest of the input.
    """
    pos = 0
    end = len(src)
    while pos < end:
        ch = src[pos]
        if _is_separator(ch):
            pos += 1
        elif ch == "~" and src.startswith("~@", pos):
            yield "~@"
            pos += 2
        elif ch in SPECIAL_CHARS:
            yield ch
            pos += 1
        elif ch == '"':
            start = pos
            pos += 1
            while pos < end:
                if src[pos] == "\\":
                    pos += 2
                    continue
                pos += 1
                if src[pos - 1] == '"':
                    break
            yield src[start:min(pos, end)]
        elif ch == ";":
            return
        else:
            start = pos
            while pos < end and not (_is_separator(src[pos]) or src[pos] in MISC_DELIMITERS):
                pos += 1
            yield src[start:pos]


class Reader:
    """One-token-lookahead cursor over a token list, local to one read."""

    __slots__ = ("tokens", "pos")

    def __init__(self, tokens: list[str]):
        self.tokens = tokens
        self.pos = 0

    def peek(self) -> str | None:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def next(self) -> str | None:
        tok = self.peek()
        if tok is not None:
            self.pos += 1
        return tok


def read(src: str) -> AST:
    """Read the first form in src into an AST.

    Tokens after the first form are ignored.
    """
    tokens = list(tokenize(src))
    log.debug("tokenize(%r) => %r", src, tokens)
    if not tokens:
        raise EmptyInput()
    ast = read_form(Reader(tokens))
    log.debug("read(%r) => %r", src, ast)
    return ast


def read_form(reader: Reader) -> AST:
    tok = reader.peek()

    kind = Container.for_opener(tok) if tok is not None else None
    if kind is not None:
        reader.next()
        return read_container(reader, kind)

    if tok in READER_MACROS:
        reader.next()
        return List((Symbol(READER_MACROS[tok]), read_form(reader)))

    if tok == "^":
        reader.next()
        meta = read_form(reader)
        target = read_form(reader)
        return List((Symbol("with-meta"), target, meta))

    return read_atom(reader)


def read_container(reader: Reader, kind: Container) -> AST:
    forms: list[AST] = []
    while True:
        tok = reader.peek()
        if tok is None:
            raise UnbalancedCollection()
        if tok == kind.closer:
            reader.next()
            break
        forms.append(read_form(reader))

    if kind is Container.LIST:
        return List(tuple(forms))
    if kind is Container.VECTOR:
        return Vector(tuple(forms))
    return hashmap_from_pairs(forms)


def _parse_number(tok: str) -> float | None:
    # float() also takes digit separators and non-ASCII digits
    if "_" in tok or not tok.isascii():
        return None
    try:
        return float(tok)
    except ValueError:
        return None


def read_atom(reader: Reader) -> AST:
    tok = reader.next()
    if tok is None:
        raise MissingAtom()

    num = _parse_number(tok)
    if num is not None:
        return Number(num)
    if tok.startswith('"'):
        return String(read_string(tok))
    if tok.startswith(":"):
        return Keyword(tok[1:])
    # nil/true/false stay symbols; evaluation decides what they mean
    return Symbol(tok)


def read_string(tok: str) -> str:
    """Decode a raw string token, surrounding quotes included."""
    out: list[str] = []
    chars = iter(tok[1:])
    for ch in chars:
        if ch == '"':
            return "".join(out)
        if ch == "\\":
            esc = next(chars, None)
            if esc is None:
                break
            out.append(STRING_ESCAPES.get(esc, esc))
        else:
            out.append(ch)
    raise UnbalancedString()
