import pytest
from careprice.models import Distance
from careprice.services.distance import classify_distance, distance_label


@pytest.mark.parametrize("hospital_zip,expected", [
    ("10002", Distance.CLOSE),
    ("10001", Distance.CLOSE),
    ("10099", Distance.CLOSE),
    ("10200", Distance.MEDIUM),
    ("10999", Distance.MEDIUM),
    ("20000", Distance.FAR),
    ("01001", Distance.FAR),
])
def test_classify_distance_from_10001(hospital_zip, expected):
    assert classify_distance("10001", hospital_zip) == expected


def test_classification_is_symmetric():
    assert classify_distance("27710", "27514") == classify_distance("27514", "27710") == Distance.MEDIUM


def test_distance_serializes_as_plain_string():
    assert Distance.CLOSE.value == "close"
    assert Distance("far") is Distance.FAR


def test_distance_labels():
    assert distance_label(Distance.CLOSE) == "< 5 miles"
    assert distance_label(Distance.MEDIUM) == "5-15 miles"
    assert distance_label("far") == "15+ miles"
