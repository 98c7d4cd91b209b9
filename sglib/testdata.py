"""Generators of integer lists used to exercise the sorting algorithms."""

from __future__ import annotations

from enum import Enum, auto

from sglib.rng import range_int


class DataType(Enum):
    """Shape of the generated data."""

    ASC_SORTED = auto()
    DESC_SORTED = auto()
    DISORDER = auto()


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")


def create_asc_sorted(size: int) -> list[int]:
    """Return [0, 1, ..., size - 1]."""
    _check_size(size)
    return list(range(size))


def create_desc_sorted(size: int) -> list[int]:
    """Return [size, size - 1, ..., 1]."""
    _check_size(size)
    return list(range(size, 0, -1))


def create_disorder(size: int) -> list[int]:
    """Return size random integers, each in [0, size]."""
    _check_size(size)
    return [range_int(0, size) for _ in range(size)]


def create(data_type: DataType, size: int = 1000) -> list[int]:
    """Return a list of the requested shape and size."""
    if data_type is DataType.ASC_SORTED:
        return create_asc_sorted(size)
    if data_type is DataType.DESC_SORTED:
        return create_desc_sorted(size)
    return create_disorder(size)