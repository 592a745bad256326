from .reader import read, tokenize
from .printer import pr_str
from .repl import rep
from .errors import ReadError

__all__ = ["read", "tokenize", "pr_str", "rep", "ReadError"]
