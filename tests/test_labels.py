import pytest

from padelpairing.exceptions import InvalidConfigurationException
from padelpairing.utils.labels import (
    minute_range_label,
    parse_start_time,
    period_label,
    time_range_label,
)


def test_minute_ranges():
    assert minute_range_label(0) == "1-20 minutes"
    assert minute_range_label(1) == "21-40 minutes"
    assert minute_range_label(2, 15) == "31-45 minutes"


def test_clock_ranges():
    assert time_range_label(0, "18:00") == "18:00 - 18:20"
    assert time_range_label(1, "18:00") == "18:20 - 18:40"
    assert time_range_label(0, "6pm", 30) == "18:00 - 18:30"


def test_clock_range_crosses_midnight():
    assert time_range_label(1, "23:30", 20) == "23:50 - 00:10"


def test_period_label_prefers_clock_time():
    assert period_label(3, 20, "19:00") == "20:00 - 20:20"
    assert period_label(3, 20) == "61-80 minutes"


def test_invalid_start_time():
    with pytest.raises(InvalidConfigurationException):
        parse_start_time("teatime")
