import logging
import os

import cv2

from config import CASCADE_PATH
from pipeline.errors import ModelLoadError
from .base_detector import BaseDetector, Region

logger = logging.getLogger(__name__)


class HaarFaceDetector(BaseDetector):
    def __init__(self, cascade_path=CASCADE_PATH):
        if not os.path.isfile(cascade_path):
            raise ModelLoadError(f"Cascade file not found: {cascade_path}")

        try:
            self.classifier = cv2.CascadeClassifier(cascade_path)
        except (cv2.error, SystemError) as e:
            # the binding surfaces XML parse failures as SystemError
            raise ModelLoadError(f"Could not parse cascade {cascade_path}: {e}") from e
        if self.classifier.empty():
            raise ModelLoadError(f"Could not load cascade from {cascade_path}")
        logger.info("Loaded face cascade %s", cascade_path)

    def detect(self, frame):
        if frame.ndim == 2:
            gray = frame
        else:
            gray = cv2.cvtColor(frame, cv2.COLOR_BGR2GRAY)
        found = self.classifier.detectMultiScale(gray)
        return [Region(int(x), int(y), int(w), int(h)) for (x, y, w, h) in found]

    def close(self):
        self.classifier = None
