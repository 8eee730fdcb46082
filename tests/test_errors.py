"""Tests for spritecast.errors — error hierarchy."""

from __future__ import annotations

import pytest

from spritecast.errors import (
    CanvasError,
    ConfigError,
    DecodeError,
    RenderError,
    SpriteCastError,
)


class TestErrorHierarchy:
    """Verify the SpriteCast error inheritance tree."""

    def test_spritecast_error_is_base(self) -> None:
        """SpriteCastError is a subclass of Exception."""
        assert issubclass(SpriteCastError, Exception)

    def test_all_errors_inherit_from_base(self) -> None:
        """All custom errors inherit from SpriteCastError."""
        for cls in (DecodeError, CanvasError, ConfigError, RenderError):
            assert issubclass(cls, SpriteCastError), f"{cls.__name__} missing base"

    def test_boundary_errors_are_distinct(self) -> None:
        """DecodeError and CanvasError are unrelated siblings."""
        assert not issubclass(DecodeError, CanvasError)
        assert not issubclass(CanvasError, DecodeError)

    def test_catch_by_base(self) -> None:
        """A subclass can be caught through the base class."""
        with pytest.raises(SpriteCastError, match="bad pixels"):
            raise DecodeError("bad pixels")

    def test_message_preserved(self) -> None:
        """The error message survives str()."""
        err = CanvasError("Canvas context failed")
        assert str(err) == "Canvas context failed"
