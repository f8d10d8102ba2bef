"""User-adjustable rendering settings.

These only change how results are drawn. They never touch the network or
its outputs.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass, replace

from mnist_visualizer.ui.constants import MAX_CONNECTIONS_LIMIT


@dataclass(frozen=True)
class VisualizationSettings:
    max_connections: int = 8
    weak_threshold: float = 0.0
    line_thickness: float = 1.0
    brush_size: int = 2

    def __post_init__(self) -> None:
        for field in ("max_connections", "brush_size"):
            value = getattr(self, field)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise ValueError(f"{field} must be an integer, got {value!r}")
        if not 1 <= self.max_connections <= MAX_CONNECTIONS_LIMIT:
            raise ValueError(
                f"max_connections must be between 1 and {MAX_CONNECTIONS_LIMIT}, "
                f"got {self.max_connections}"
            )
        if not 0.0 <= self.weak_threshold <= 1.0:
            raise ValueError(f"weak_threshold must be between 0 and 1, got {self.weak_threshold}")
        if not 0.5 <= self.line_thickness <= 5.0:
            raise ValueError(f"line_thickness must be between 0.5 and 5, got {self.line_thickness}")
        if not 1 <= self.brush_size <= 5:
            raise ValueError(f"brush_size must be between 1 and 5, got {self.brush_size}")

    def with_updates(self, **changes: object) -> VisualizationSettings:
        """Return a validated copy with some fields replaced."""
        return replace(self, **changes)
