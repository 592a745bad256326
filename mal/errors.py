"""Reader error taxonomy. Every kind is recoverable."""


class ReadError(SyntaxError):
    message = "read error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class EmptyInput(ReadError):
    """No tokens to read; the REPL treats this as a no-op."""

    message = "empty input"


class InvalidEscape(ReadError):
    # Never raised: unknown escapes decode to the escaped character.
    message = "invalid escape"


class MissingAtom(ReadError):
    message = "missing atom"


class MissingHashMapValue(ReadError):
    message = "missing hash-map value"


class UnbalancedCollection(ReadError):
    message = "unbalanced collection"


class UnbalancedString(ReadError):
    message = "unbalanced string"


class UnsupportedHashMapKeyType(ReadError):
    message = "unsupported hash-map key type"
