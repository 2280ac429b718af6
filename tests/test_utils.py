import pytest

from hertz_admin.utils import parse_bool, to_snake_case, today_start


def test_parse_bool():
    assert parse_bool(None) is None
    assert parse_bool('true') is True
    assert parse_bool('FALSE') is False
    assert parse_bool('1') is True
    assert parse_bool(False) is False
    with pytest.raises(ValueError):
        parse_bool('maybe')


def test_to_snake_case():
    assert to_snake_case('imageUrl') == 'image_url'
    assert to_snake_case('image_url') == 'image_url'
    assert to_snake_case('title') == 'title'


def test_today_start_is_midnight():
    day = today_start()
    assert (day.hour, day.minute, day.second, day.microsecond) == (0, 0, 0, 0)
