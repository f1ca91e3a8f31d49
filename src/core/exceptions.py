"""
Custom exceptions used across layers.

NOTE: running out of room (or out of pieces) is not an exception. The data structures report that with a status value,
these are reserved for requests that make no sense (bad index, unknown action, nonsensical settings).
"""


class TetrisStackError(Exception):
    """Top level exception for anything raised by this application."""


class PieceIndexError(TetrisStackError):
    """Asked for a position in a container that holds no piece."""


class InvalidActionError(TetrisStackError):
    """Action code unknown, or not offered in the active game mode."""


class ConfigurationError(TetrisStackError):
    """Capacities / batch size / logging settings that cannot be used."""
