import re
from typing import Final, NamedTuple

from . import log
from .errors import InvalidArgumentError

PREFIX_SEPARATOR_RE: Final = re.compile(r"^(-{3,}|;{3,})")
FRONT_MATTER_RE: Final = re.compile(
    r"^(-{3,}|;{3,})\r?\n(.+?)\r?\n\1\r?\n?(.*)",
    re.DOTALL,
)
FRONT_MATTER_NEW_RE: Final = re.compile(
    r"^(.+?)\r?\n(-{3,}|;{3,})\r?\n?(.*)",
    re.DOTALL,
)


class SplitResult(NamedTuple):
    data: str | None
    content: str
    separator: str | None = None
    prefix_separator: bool = False


def split(s: str) -> SplitResult:
    if not isinstance(s, str):
        raise InvalidArgumentError("str", s, str)

    if m := FRONT_MATTER_RE.match(s):
        return SplitResult(
            data=m.group(2),
            content=m.group(3) or "",
            separator=m.group(1),
            prefix_separator=True,
        )

    # an opening fence without its closing counterpart must not be
    # reinterpreted as the trailing-fence form
    if PREFIX_SEPARATOR_RE.match(s):
        log.D("leading separator without a matching closing one, no front matter")
        return SplitResult(None, s)

    if m := FRONT_MATTER_NEW_RE.match(s):
        return SplitResult(
            data=m.group(1),
            content=m.group(3) or "",
            separator=m.group(2),
            prefix_separator=False,
        )

    return SplitResult(None, s)
