"""Frame time step."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Timestep:
    """Time elapsed between two frames, in seconds."""

    seconds: float = 0.0

    def __float__(self) -> float:
        return float(self.seconds)

    @property
    def milliseconds(self) -> float:
        """The step in milliseconds."""
        return self.seconds * 1000.0