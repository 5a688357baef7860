from typing import Any, Final

import yaml

from .dates import normalize_dates
from .decoder import MetadataMap, decode_metadata
from .errors import InvalidArgumentError
from .splitter import split

CONTENT_KEY: Final = "_content"


def parse(s: str, *, loader: type[Any] = yaml.SafeLoader) -> MetadataMap:
    if not isinstance(s, str):
        raise InvalidArgumentError("str", s, str)

    sr = split(s)
    if not sr.data or sr.separator is None:
        return {CONTENT_KEY: s}

    data = decode_metadata(sr.data, sr.separator, loader)
    if data is None:
        return {CONTENT_KEY: s}

    normalize_dates(data)
    data[CONTENT_KEY] = sr.content
    return data
