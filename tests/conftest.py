import pytest

from tirthatlas.core import connectivity
from tirthatlas.core.record_store import ImageMapping, RecordStore
from tirthatlas.models import AttributeRow, ImageRef


def row(place, key, value, translated_key=None, translated_value=None, state=None):
    return AttributeRow(
        place_name=place,
        key=key,
        value=value,
        translated_key=translated_key,
        translated_value=translated_value,
        state_name=state,
    )


def url(ref):
    return ImageRef(ref=ref, kind="url")


@pytest.fixture
def rows():
    return [
        row("Sonagiri", "Tirth", "सोनागिर"),
        row("Sonagiri", "Rajya", "मध्य प्रदेश", "State", "Madhya Pradesh"),
        row("Sonagiri", "Mulnayak", "चंद्रप्रभु", "Main Deity", "Chandraprabhu"),
        row("Shikharji", "State", "Jharkhand"),
        row("Sonagiri", "Latitude", "25.718"),
        row("Sonagiri", "Longitude", "78.386"),
        row("Bawangaja", "Rajya", "मध्य प्रदेश", "State", "Madhya Pradesh"),
        row("Bawangaja", "Mulnayak", "आदिनाथ", "Main Deity", "Adinath"),
        row("Shikharji", "Mulnayak", "पार्श्वनाथ", "Main Deity", "Parshvanath"),
        row("Kundalpur", "Mulnayak", "बड़े बाबा", "Main Deity", "Bade Baba", state="Madhya Pradesh"),
    ]


@pytest.fixture
def image_mapping():
    return ImageMapping(
        {
            "Madhya Pradesh": {
                "Sonagiri": [url("s1.jpg"), url("s2.jpg")],
                "Bawangaja": [],
            },
            "Jharkhand": {"Shikharji": [url("k1.jpg")]},
        },
        covers={"Madhya Pradesh": url("mp.jpg")},
    )


@pytest.fixture
def records():
    return [
        {
            "name": "Palitana",
            "state": "Gujarat",
            "location": {"latitude": 21.4825, "longitude": 71.8231},
            "Main Deity": "Adinath",
            "Timings": {"Opens": "05:00", "id": 7},
            "Facilities": ["Dharamshala", {"name": "Bhojanshala", "Meals": "Lunch"}],
        }
    ]


@pytest.fixture
def store(rows, image_mapping, records):
    return RecordStore(rows, image_mapping, records)


@pytest.fixture(autouse=True)
def _reset_connectivity():
    connectivity.set_connected(True)
    yield
    connectivity.set_connected(True)
