"""Date handling for decoded and to-be-encoded front matter values.

The decoder is expected to return timestamps that carry no UTC offset as
naive :class:`datetime.datetime` objects holding the wall-clock value that
was written in the document. PyYAML's ``SafeLoader`` and ``FullLoader``
behave this way. A loader that instead returns such timestamps as aware
UTC datetimes, or converts them to the local zone, breaks the round-trip
between :func:`normalize_dates` and :func:`format_date`.
"""

import datetime
from typing import MutableMapping


def normalize_date(
    value: datetime.datetime | datetime.date,
) -> datetime.datetime | datetime.date:
    if isinstance(value, datetime.datetime) and value.tzinfo is not None:
        # keep the wall-clock of the instant as seen from UTC
        return value.astimezone(datetime.timezone.utc).replace(tzinfo=None)
    return value


def normalize_dates(data: MutableMapping[str, object]) -> None:
    for k, v in list(data.items()):
        if isinstance(v, datetime.date):
            data[k] = normalize_date(v)


def format_date(value: datetime.datetime | datetime.date) -> str:
    """Render ``value`` as ``YYYY-MM-DD HH:MM:SS`` in local time."""

    if not isinstance(value, datetime.datetime):
        value = datetime.datetime.combine(value, datetime.time())
    elif value.tzinfo is not None:
        value = value.astimezone()

    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d} "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
