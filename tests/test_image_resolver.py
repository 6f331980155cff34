import pytest

from conftest import url
from tirthatlas.core.image_resolver import ImageResolver, remove_failed


def test_resolve_keeps_order(image_mapping):
    assert ImageResolver(image_mapping).resolve("Madhya Pradesh", "Sonagiri") == [
        url("s1.jpg"),
        url("s2.jpg"),
    ]


@pytest.mark.parametrize(
    "state_name, place_name",
    [
        ("Atlantis", "Sonagiri"),
        ("Madhya Pradesh", "Nowhere"),
        ("Madhya Pradesh", "Bawangaja"),
        (None, "Sonagiri"),
    ],
)
def test_misses_resolve_to_empty(image_mapping, state_name, place_name):
    assert ImageResolver(image_mapping).resolve(state_name, place_name) == []


def test_resolve_returns_a_copy(image_mapping):
    resolver = ImageResolver(image_mapping)
    resolver.resolve("Madhya Pradesh", "Sonagiri").clear()
    assert len(resolver.resolve("Madhya Pradesh", "Sonagiri")) == 2


def test_first_image_and_cover(image_mapping):
    resolver = ImageResolver(image_mapping)
    assert resolver.first_image("Madhya Pradesh", "Sonagiri") == url("s1.jpg")
    assert resolver.first_image("Madhya Pradesh", "Bawangaja") is None
    assert resolver.cover("Madhya Pradesh") == url("mp.jpg")
    assert resolver.cover("Jharkhand") is None


def test_remove_failed_drops_one_slot():
    images = ["img0", "img1", "img2"]
    assert remove_failed(images, 1) == ["img0", "img2"]
    assert images == ["img0", "img1", "img2"]


def test_remove_only_image_gives_empty_list():
    assert remove_failed(["img0"], 0) == []


@pytest.mark.parametrize("index", [-1, 3])
def test_remove_failed_rejects_bad_index(index):
    with pytest.raises(IndexError):
        remove_failed(["a", "b", "c"], index)
