import pytest

from careprice.config import parse_log_level


@pytest.mark.parametrize("value,expected", [
    ("debug", "DEBUG"),
    (" warning ", "WARNING"),
    ("ERROR", "ERROR"),
    ("verbose", "INFO"),
    ("", "INFO"),
])
def test_parse_log_level(value, expected):
    assert parse_log_level(value) == expected
