import numpy as np
import pytest

from detectors.base_detector import Region

HEIGHT, WIDTH = 480, 640


class FakeCapture:
    """Stands in for cv2.VideoCapture, replaying a list of BGR frames."""
    def __init__(self, frames, opened=True):
        self.frames = list(frames)
        self.opened = opened
        self.released = False
        self.reads = 0

    def isOpened(self):
        return self.opened and not self.released

    def read(self, image=None):
        if self.released or not self.frames:
            return False, None
        self.reads += 1
        return True, self.frames.pop(0).copy()

    def release(self):
        self.released = True


class StubFaceDetector:
    """Stands in for HaarFaceDetector with a fixed answer."""
    def __init__(self, rects=()):
        self.regions = [Region(*r) for r in rects]
        self.calls = 0
        self.closed = False

    def detect(self, frame):
        self.calls += 1
        return list(self.regions)

    def close(self):
        self.closed = True


def gray_frame(value=60, height=HEIGHT, width=WIDTH):
    return np.full((height, width, 3), value, dtype=np.uint8)


def noise_frame(seed=0, height=HEIGHT, width=WIDTH):
    rng = np.random.default_rng(seed)
    return rng.integers(0, 256, size=(height, width, 3), dtype=np.uint8)


def with_block(frame, x=200, y=150, size=100, value=255):
    out = frame.copy()
    out[y:y + size, x:x + size] = value
    return out


@pytest.fixture
def make_pipeline():
    from pipeline.frame_pipeline import FramePipeline

    def _make(frames, faces=()):
        return FramePipeline(FakeCapture(frames), StubFaceDetector(faces))

    return _make
