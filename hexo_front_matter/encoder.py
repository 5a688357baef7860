import datetime
import json
import re
from typing import Any, Final, Mapping

import yaml

from .dates import format_date

RE_JSON_INDENT: Final = re.compile(r"\r?\n {2}")
RE_JSON_BRACES: Final = re.compile(r"\A\{\r?\n|\}\Z")

DEFAULT_DUMP_OPTIONS: Final[Mapping[str, Any]] = {
    "Dumper": yaml.SafeDumper,
    "sort_keys": False,
    "allow_unicode": True,
    "default_flow_style": False,
}


def _json_default(o: object) -> object:
    if isinstance(o, (datetime.date, datetime.time)):
        return o.isoformat()
    raise TypeError(f"Object of type {type(o).__name__} is not JSON serializable")


def encode_json(data: Mapping[str, Any]) -> str:
    s = json.dumps(data, indent=2, ensure_ascii=False, default=_json_default)
    # members only, one indentation level less and no enclosing braces
    s = RE_JSON_INDENT.sub("\n", s)
    return RE_JSON_BRACES.sub("", s)


def encode_yaml(data: Mapping[str, Any], **dump_options: Any) -> str:
    plain: dict[str, Any] = {}
    date_keys: list[str] = []
    null_keys: list[str] = []

    for k, v in data.items():
        if v is None:
            null_keys.append(k)
        elif isinstance(v, datetime.date):
            date_keys.append(k)
        else:
            plain[k] = v

    result = ""
    if plain:
        result = yaml.dump(plain, **{**DEFAULT_DUMP_OPTIONS, **dump_options})

    # dates and nulls always come last, whatever their original position
    for k in date_keys:
        result += f"{k}: {format_date(data[k])}\n"
    for k in null_keys:
        result += f"{k}:\n"

    return result
