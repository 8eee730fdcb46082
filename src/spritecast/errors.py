"""SpriteCast error hierarchy.

All custom exceptions inherit from SpriteCastError, enabling callers
to catch the base class for blanket error handling or specific
subclasses for targeted recovery.  Only the decode and canvas
boundaries can fail during a conversion; every grid stage is total.
"""


class SpriteCastError(Exception):
    """Base exception for all SpriteCast errors."""


class DecodeError(SpriteCastError):
    """Raised when the input payload cannot be interpreted as an image."""


class CanvasError(SpriteCastError):
    """Raised when the fixed-size working canvas cannot be produced."""


class ConfigError(SpriteCastError):
    """Raised when configuration loading or validation fails."""


class RenderError(SpriteCastError):
    """Raised when grid rendering or export fails (bad scale, bad grid)."""
