"""
Point Primitive
Value type shared by the gaussian domain, percentage space and view space.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Point:
    """
    A 2D point with an optional label.

    The unit system (gaussian domain, percentage space or view space) is not
    stored; callers track which space a point belongs to. A point carrying a
    `tooltip` represents one plotted genotype.
    """
    x: float
    y: float
    tooltip: Optional[str] = None

    def with_tooltip(self, tooltip: Optional[str]) -> Point:
        return replace(self, tooltip=tooltip)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y], dtype=np.float64)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"x": self.x, "y": self.y}
        if self.tooltip is not None:
            data["tooltip"] = self.tooltip
        return data

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> Point:
        return Point(x=float(data["x"]), y=float(data["y"]), tooltip=data.get("tooltip"))
