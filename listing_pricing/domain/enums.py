"""Domain enumerations."""

import enum


class RateUnit(str, enum.Enum):
    """Unit a listing's ``deliveryPricePerKm`` is expressed in."""

    MINOR = "minor"  # cents per km, as stored on listings
    MAJOR = "major"  # dollars per km
