from .errors import InvalidArgumentError
from .escape import escape
from .parser import CONTENT_KEY, parse
from .post import Post, dumps, loads
from .splitter import SplitResult, split
from .stringify import stringify

__all__ = [
    "CONTENT_KEY",
    "InvalidArgumentError",
    "Post",
    "SplitResult",
    "dumps",
    "escape",
    "loads",
    "parse",
    "split",
    "stringify",
]
