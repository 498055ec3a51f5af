"""
Interpretations of the digitizer's reported touch size.

A reporting style maps a raw measurement into a space where physical size is
expected to be linear in the reported value. The line fit is run once per
style and the style with the smallest residual is the one the device uses.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterable

from touchcal.errors import NegativeReportedValueError
from touchcal.logging import get_logger
from touchcal.measurement import Measurement

log = get_logger(__name__)


class ReportingStyleType(Enum):
    """Closed set of supported reporting styles."""

    DIAMETER = "diameter"
    AREA = "area"


class ReportingStyle(ABC):
    """
    Base interface for reporting styles.

    Implementations must return a new Measurement and leave the input
    untouched.
    """

    style_type: ReportingStyleType

    @property
    def name(self) -> str:
        """Label used in results and output."""
        return self.style_type.value

    @abstractmethod
    def apply(self, measurement: Measurement) -> Measurement:
        """
        Map a raw measurement into this style's linear space.

        Parameters
        ----------
        measurement : Measurement
            Raw calibration sample

        Returns
        -------
        Measurement
            Transformed sample with the same physical size
        """

    def apply_all(self, samples: Iterable[Measurement]) -> list[Measurement]:
        """Apply to every sample, preserving order."""
        return [self.apply(m) for m in samples]

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name}>"


class DiameterReporting(ReportingStyle):
    """The reported size is proportional to the contact diameter."""

    style_type = ReportingStyleType.DIAMETER

    def apply(self, measurement: Measurement) -> Measurement:
        return measurement


class AreaReporting(ReportingStyle):
    """The reported size is proportional to the contact area.

    Taking the square root turns an area into a length, so the same linear fit
    can test this hypothesis.
    """

    style_type = ReportingStyleType.AREA

    def apply(self, measurement: Measurement) -> Measurement:
        if measurement.reported < 0:
            raise NegativeReportedValueError(measurement)
        return Measurement(measurement.physical, math.sqrt(measurement.reported))


DEFAULT_STYLES: tuple[ReportingStyle, ...] = (
    DiameterReporting(),
    AreaReporting(),
)

_STYLES_BY_TYPE: dict[ReportingStyleType, type[ReportingStyle]] = {
    ReportingStyleType.DIAMETER: DiameterReporting,
    ReportingStyleType.AREA: AreaReporting,
}


def get_style(style: str | ReportingStyleType) -> ReportingStyle:
    """Return a style instance by name or type."""
    try:
        style_type = ReportingStyleType(style)
    except ValueError:
        valid = ", ".join(t.value for t in ReportingStyleType)
        raise ValueError(f"Unknown reporting style {style!r}; expected one of: {valid}") from None
    log.debug(f"Resolved reporting style: {style_type.value}")
    return _STYLES_BY_TYPE[style_type]()
