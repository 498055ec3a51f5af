"""Typed constants with engineering metadata.

Device constants are documented with their unit and where the number came
from, so a calibration run can be traced back to its inputs.

Usage:
    from touchcal.constants import DEFAULT_DPI

    scale_px = DEFAULT_DPI * scale_mm
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PhysicalConstant:
    """Typed constant with engineering metadata.

    Attributes:
        value: Numerical value of the constant
        unit: Unit string (e.g., "px/mm", "mm")
        source: Citation or reference for the value
        notes: Additional documentation

    Example:
        >>> DPI = PhysicalConstant(value=16.61, unit="px/mm", source="panel datasheet")
        >>> DPI * 2.0
        33.22
    """

    value: float
    unit: str
    source: str
    notes: str = ""

    def __float__(self) -> float:
        """Allow direct use in calculations."""
        return float(self.value)

    def __mul__(self, other: float | int | PhysicalConstant) -> float:
        if isinstance(other, PhysicalConstant):
            return self.value * other.value
        return self.value * other

    def __rmul__(self, other: float | int) -> float:
        return other * self.value

    def __repr__(self) -> str:
        return f"PhysicalConstant({self.value} {self.unit})"
