from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Region:
    """Axis-aligned rectangle in frame coordinates."""
    x: int
    y: int
    w: int
    h: int

    def as_xyxy(self) -> Tuple[int, int, int, int]:
        return (self.x, self.y, self.x + self.w, self.y + self.h)


class BaseDetector:
    """
    All detectors take a BGR frame and output:
    - regions: list of Region, recomputed per frame, never tracked
    """
    def detect(self, frame):
        raise NotImplementedError
