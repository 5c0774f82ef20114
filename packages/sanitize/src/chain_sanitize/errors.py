from __future__ import annotations


class DecodedValueError(ValueError):
    """Raised when a decoded value node is constructed from malformed input."""


class SerializationError(TypeError):
    """Raised when sanitized output still holds a value JSON cannot represent.

    Only passthrough values reach this: opaque shapes and subtrees cut off by
    the depth guard.
    """
