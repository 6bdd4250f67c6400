"""Unit tests for the 3-D sampling primitives."""

from __future__ import annotations

from ticket_airdrop.geometry import (
    MAX_DISTANCE_SQ,
    Point3,
    Segment3,
    distance_sq,
    sample_along,
    sample_segment,
    sampling_quantity,
)

ORIGIN = Point3(0, 0, 0)
FAR_CORNER = Point3(999, 999, 999)


def test_point_value_concatenates_coordinates() -> None:
    assert Point3(1, 2, 3).value == 3_002_001
    assert Point3(999, 999, 999).value == 999_999_999
    assert Point3(0, 0, 0).value == 0


def test_point_value_truncates_coordinates() -> None:
    assert Point3(1.9, 2.2, 3.999).value == 3_002_001


def test_distance_sq() -> None:
    assert distance_sq(ORIGIN, Point3(1, 2, 3)) == 14
    assert Segment3(ORIGIN, FAR_CORNER).distance_sq() == MAX_DISTANCE_SQ


def test_sample_along_interpolates_each_coordinate() -> None:
    segment = Segment3(ORIGIN, Point3(10, 20, 30))
    points = sample_along(segment, 2, 0.5)
    assert points == [Point3(5.0, 10.0, 15.0), Point3(10.0, 20.0, 30.0)]
    assert [p.value for p in points] == [15_010_005, 30_020_010]


def test_sample_along_zero_count_is_empty() -> None:
    assert sample_along(Segment3(ORIGIN, FAR_CORNER), 0, 0.1) == []


def test_sampling_quantity_scales_with_squared_length() -> None:
    diagonal = Segment3(ORIGIN, FAR_CORNER)
    assert sampling_quantity(diagonal) == 999
    assert sampling_quantity(diagonal, 333) == 333
    assert sampling_quantity(Segment3(ORIGIN, Point3(1, 0, 0))) == 0
    shorter = Segment3(ORIGIN, Point3(500, 500, 500))
    assert 0 < sampling_quantity(shorter) < sampling_quantity(diagonal)


def test_sample_segment_covers_segment_in_order() -> None:
    draws = sample_segment(Segment3(ORIGIN, FAR_CORNER))
    assert len(draws) == 999
    assert draws == sorted(draws)
    assert all(0 <= value <= 999_999_999 for value in draws)
    assert draws[-1] in (998_998_998, 999_999_999)


def test_sample_segment_of_point_is_empty() -> None:
    assert sample_segment(Segment3(FAR_CORNER, FAR_CORNER)) == []
