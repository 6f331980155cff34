import pytest

from conftest import row
from tirthatlas.core.errors import PlaceNotFound
from tirthatlas.core.field_projector import (
    FieldProjector,
    coordinates_from_rows,
    project_record,
    project_rows,
)
from tirthatlas.core.record_store import RecordStore
from tirthatlas.models import Coordinates, FieldList, FieldRecord, Scalar


def test_identity_keys_are_dropped():
    store = RecordStore(
        [
            row("Siddhakshetra", "Tirth", "Siddhakshetra"),
            row("Siddhakshetra", "Naam", "Siddhakshetra"),
            row("Siddhakshetra", "Deity", "Adinath"),
        ]
    )
    assert FieldProjector(store).project("Siddhakshetra") == {"Deity": "Adinath"}


def test_first_row_wins_for_repeated_display_key():
    fields = project_rows(
        [
            row("P", "Mulnayak", "a", "Main Deity", "Parshvanath"),
            row("P", "Bhagwan", "b", "Main Deity", "Lord Parshvanath"),
            row("P", "Main Deity", "Someone else"),
        ]
    )
    assert fields == {"Main Deity": "Parshvanath"}


def test_translation_precedence_and_order():
    fields = project_rows(
        [
            row("P", "Pata", "दतिया", "Address", None),
            row("P", "Samay", "सुबह", None, "Morning"),
            row("P", "Dharamshala", "हाँ", "Lodging", "Yes"),
        ]
    )
    assert list(fields.items()) == [
        ("Address", "दतिया"),
        ("Samay", "Morning"),
        ("Lodging", "Yes"),
    ]


def test_excluded_raw_key_is_dropped_even_when_translated():
    fields = project_rows(
        [
            row("P", "Rajya", "मध्य प्रदेश", "Region", "Madhya Pradesh"),
            row("P", "Formatted Text", "x"),
            row("P", "Original Value", "y"),
            row("P", "Latitude", "25.7"),
        ]
    )
    assert fields == {}


def test_unknown_place_raises(store):
    with pytest.raises(PlaceNotFound):
        FieldProjector(store).project("Nowhere")


def test_projection_is_deterministic(store):
    projector = FieldProjector(store)
    assert projector.project("Sonagiri") == projector.project("Sonagiri")
    assert projector.project("Sonagiri") == {"Main Deity": "Chandraprabhu"}


def test_coordinates_from_rows():
    assert coordinates_from_rows(
        [row("P", "latitude", "25.5"), row("P", "Lng", "78.25")]
    ) == Coordinates(25.5, 78.25)
    assert coordinates_from_rows([row("P", "Latitude", "abc"), row("P", "Longitude", "78")]) is None
    assert coordinates_from_rows([row("P", "Latitude", "95"), row("P", "Longitude", "78")]) is None


def test_project_record_excludes_identity_keys_at_every_depth():
    projected = project_record(
        {
            "id": 1,
            "name": "Palitana",
            "image": "x.jpg",
            "location": {"latitude": 1, "longitude": 2},
            "Deity": "Adinath",
            "Timings": {"Opens": "05:00", "ID": 3},
            "Facilities": ["Dharamshala", {"name": "Bhojanshala", "Meals": "Lunch"}],
            "Notes": None,
        }
    )
    assert projected == FieldRecord(
        {
            "Deity": Scalar("Adinath"),
            "Timings": FieldRecord({"Opens": Scalar("05:00")}),
            "Facilities": FieldList(
                [Scalar("Dharamshala"), FieldRecord({"Meals": Scalar("Lunch")})]
            ),
        }
    )


def test_project_detail_uses_structured_record(store):
    fields, coordinates = FieldProjector(store).project_detail("Palitana")
    assert list(fields) == ["Main Deity", "Timings", "Facilities"]
    assert fields["Timings"] == FieldRecord({"Opens": Scalar("05:00")})
    assert coordinates == Coordinates(21.4825, 71.8231)


def test_project_detail_wraps_flat_fields(store):
    fields, coordinates = FieldProjector(store).project_detail("Sonagiri")
    assert fields == {"Main Deity": Scalar("Chandraprabhu")}
    assert coordinates == Coordinates(25.718, 78.386)
