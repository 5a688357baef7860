import json
from typing import Any

from rich.markup import escape as escape_markup
import yaml

from . import log
from .escape import escape

MetadataMap = dict[str, Any]

# Each decoder returns the decoded mapping, or None when the block does not
# hold usable front matter. Malformed metadata is common enough in content
# trees that it is not treated as an error.


def decode_json(raw: str) -> MetadataMap | None:
    try:
        return json.loads(f"{{{raw}}}")
    except json.JSONDecodeError as e:
        log.D(f"front matter is not valid JSON: {escape_markup(str(e))}")
        return None


def decode_yaml(raw: str, loader: type[Any] = yaml.SafeLoader) -> MetadataMap | None:
    # the timestamp constructor raises a bare ValueError for impossible dates
    try:
        result = yaml.load(escape(raw), Loader=loader)
    except (yaml.YAMLError, ValueError) as e:
        log.D(f"front matter is not valid YAML: {escape_markup(str(e))}")
        return None

    if not isinstance(result, dict):
        log.D(f"front matter YAML decoded to {type(result).__name__}, not a mapping")
        return None
    return result


def decode_metadata(
    raw: str,
    separator: str,
    loader: type[Any] = yaml.SafeLoader,
) -> MetadataMap | None:
    if separator.startswith(";"):
        return decode_json(raw)
    return decode_yaml(raw, loader)
