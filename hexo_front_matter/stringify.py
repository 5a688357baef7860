from typing import Any, Mapping

from rich.markup import escape as escape_markup

from . import log
from .encoder import encode_json, encode_yaml
from .errors import InvalidArgumentError
from .parser import CONTENT_KEY
from .splitter import PREFIX_SEPARATOR_RE


def _resolve_separator(separator: str | None, mode: str | None) -> str:
    if not separator:
        return ";;;" if mode == "json" else "---"

    m = PREFIX_SEPARATOR_RE.match(separator)
    if m is None or m.group(1) != separator:
        log.W(
            f"separator [yellow]{escape_markup(repr(separator))}[/yellow] is not "
            "a run of 3 or more '-' or ';', the output cannot be split back "
            "into front matter"
        )
    return separator


def stringify(
    data: Mapping[str, Any],
    content: str | None = None,
    *,
    mode: str | None = None,
    prefix_separator: bool = False,
    separator: str | None = None,
    **dump_options: Any,
) -> str:
    """Serialize ``data`` and a body back into a front matter document.

    The body is ``content`` when given, otherwise the ``_content`` entry of
    ``data``. ``data`` itself is left untouched. ``mode="json"`` selects the
    JSON-like grammar, anything else YAML. Remaining keyword arguments are
    passed to :func:`yaml.dump`.
    """

    if not isinstance(data, Mapping):
        raise InvalidArgumentError("obj", data, "a mapping")

    if content is None:
        content = data.get(CONTENT_KEY)
    if content is None:
        content = ""
    if not isinstance(content, str):
        raise InvalidArgumentError("content", content, str)
    metadata = {k: v for k, v in data.items() if k != CONTENT_KEY}

    if not metadata:
        return content

    sep = _resolve_separator(separator, mode)
    result = f"{sep}\n" if prefix_separator else ""

    if mode == "json":
        result += encode_json(metadata)
    else:
        result += encode_yaml(metadata, **dump_options)

    return f"{result}{sep}\n{content}"
