import re
from typing import Final

from .errors import InvalidArgumentError

# a line break followed by tab indentation
RE_TAB_INDENT: Final = re.compile(r"\r?\n(\t+)")


def _tabs_to_spaces(m: re.Match[str]) -> str:
    return "\n" + "  " * len(m.group(1))


# PyYAML rejects tabs used as indentation, while hand-written front matter
# commonly has them; every leading tab becomes two spaces.
def escape(s: str) -> str:
    if not isinstance(s, str):
        raise InvalidArgumentError("str", s, str)

    return RE_TAB_INDENT.sub(_tabs_to_spaces, s)
