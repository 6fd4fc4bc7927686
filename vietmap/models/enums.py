"""Enumerations shared by request and response models."""

from __future__ import annotations

from enum import Enum


class SearchDisplayType(int, Enum):
    """Address format returned by the v4 search endpoints."""

    NEW_FORMAT = 1
    OLD_FORMAT = 2
    AS_INPUT_FORMAT = 4
    BOTH_NEW_OLD = 5
    BOTH_OLD_NEW = 6


class ReverseDisplayType(int, Enum):
    """Address format returned by the v4 reverse endpoint."""

    NEW_FORMAT = 1
    OLD_FORMAT = 2
    TWO_OBJECTS = 4
    BOTH_NEW_OLD = 5
    BOTH_OLD_NEW = 6


class MigrateType(int, Enum):
    """Direction of an address migration."""

    OLD_TO_NEW = 1
    NEW_TO_OLD = 2


class Layer(str, Enum):
    """Result layer filter for v4 search."""

    ADDRESS = "ADDRESS"
    POI = "POI"
    STREET = "STREET"
    CITY = "CITY"
    DIST = "DIST"
    WARD = "WARD"
    VILLAGE = "VILLAGE"


class Vehicle(str, Enum):
    CAR = "car"
    BIKE = "bike"
    FOOT = "foot"
    MOTORCYCLE = "motorcycle"
