import dataclasses

import pytest

from ecfmp.flight_information_region import FlightInformationRegion


@pytest.fixture
def london():
    return FlightInformationRegion(1, "EGTT", "London")


def test_it_has_an_id(london):
    assert london.id == 1


def test_it_has_an_identifier(london):
    assert london.identifier == "EGTT"


def test_it_has_a_name(london):
    assert london.name == "London"


def test_keyword_construction_matches_positional(london):
    other = FlightInformationRegion(id=1, identifier="EGTT", name="London")
    assert other == london


def test_regions_with_different_values_differ(london):
    scottish = FlightInformationRegion(2, "EGPX", "Scottish")
    assert not (scottish == london)
    assert scottish.identifier == "EGPX"


def test_it_is_immutable(london):
    with pytest.raises(dataclasses.FrozenInstanceError):
        london.name = "Amsterdam"
    assert london.name == "London"


def test_equal_regions_hash_equally(london):
    copy = FlightInformationRegion(1, "EGTT", "London")
    assert {london, copy} == {london}


def test_replace_creates_new_region(london):
    renamed = dataclasses.replace(london, name="London 2")
    assert renamed.name == "London 2"
    assert renamed.id == london.id
    assert london.name == "London"