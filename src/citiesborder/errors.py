__all__ = [
    "CitiesBorderError",
    "MalformedEventStreamError",
    "StoreFormatError",
]


class CitiesBorderError(Exception):
    pass


class MalformedEventStreamError(CitiesBorderError):
    """An element event arrived outside of the element it belongs to."""


class StoreFormatError(CitiesBorderError):
    """The border store does not follow the ``{name}:count`` record layout."""
