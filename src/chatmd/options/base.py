"""Base classes for serializer options.

This module defines the foundation shared by all chatmd option classes:
immutable dataclasses that are changed by creating updated copies.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from chatmd.constants import DEFAULT_MAX_NESTING_DEPTH


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)

    def _with(self, name: str, value: Any) -> Self:
        # Unchanged values keep the same instance
        if getattr(self, name) is value:
            return self
        return self.create_updated(**{name: value})


@dataclass(frozen=True)
class BaseSerializerOptions(CloneFrozenMixin):
    """Base class for serializer options.

    Parameters
    ----------
    max_depth : int, default 64
        Maximum nesting depth walked before NestingDepthError is raised

    """

    max_depth: int = field(
        default=DEFAULT_MAX_NESTING_DEPTH,
        metadata={
            "help": "Maximum nesting depth of the input before the call fails",
            "type": int,
            "importance": "security",
        },
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.max_depth <= 0:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")

    def with_max_depth(self, max_depth: int) -> Self:
        """Return options with a different nesting depth limit."""
        return self._with("max_depth", max_depth)
