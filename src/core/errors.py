# core/errors.py
"""Exceptions raised by the intersection core."""


class IntersectionError(Exception):
    """Base exception for all intersection-core errors."""


class ConfigurationError(IntersectionError, ValueError):
    """Raised when a primitive is built with an unusable transform.

    A zero scale component (or any other singular composition) leaves the
    model transform without an inverse, so rays could never be mapped into
    object space.
    """
