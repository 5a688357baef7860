import datetime

from hexo_front_matter.dates import format_date, normalize_date, normalize_dates


def test_normalize_date() -> None:
    naive = datetime.datetime(2014, 1, 2, 3, 4, 5)
    assert normalize_date(naive) == naive

    d = datetime.date(2014, 1, 2)
    assert normalize_date(d) == d

    tz = datetime.timezone(datetime.timedelta(hours=8))
    aware = datetime.datetime(2014, 1, 2, 3, 4, 5, tzinfo=tz)
    result = normalize_date(aware)
    assert isinstance(result, datetime.datetime)
    assert result.tzinfo is None
    assert result == datetime.datetime(2014, 1, 1, 19, 4, 5)


def test_normalize_dates() -> None:
    tz = datetime.timezone(datetime.timedelta(hours=-2))
    data: dict[str, object] = {
        "title": "foo",
        "date": datetime.datetime(2014, 1, 2, 23, 0, 0, tzinfo=tz),
        "updated": datetime.date(2014, 1, 3),
        "tags": [datetime.date(2014, 1, 4)],
    }
    normalize_dates(data)
    assert data == {
        "title": "foo",
        "date": datetime.datetime(2014, 1, 3, 1, 0, 0),
        "updated": datetime.date(2014, 1, 3),
        # only top level values are touched
        "tags": [datetime.date(2014, 1, 4)],
    }


def test_format_date() -> None:
    assert format_date(datetime.datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02 03:04:05"
    assert format_date(datetime.datetime(999, 12, 31, 23, 59, 0)) == "0999-12-31 23:59:00"
    assert format_date(datetime.date(2024, 1, 2)) == "2024-01-02 00:00:00"

    # microseconds are dropped
    assert format_date(datetime.datetime(2024, 1, 2, 3, 4, 5, 999999)) == (
        "2024-01-02 03:04:05"
    )


def test_format_date_aware_is_local() -> None:
    aware = datetime.datetime(2024, 6, 1, 12, 0, 0, tzinfo=datetime.timezone.utc)
    expected = aware.astimezone().strftime("%Y-%m-%d %H:%M:%S")
    assert format_date(aware) == expected
