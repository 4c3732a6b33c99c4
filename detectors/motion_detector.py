import cv2

from config import (
    DILATE_KERNEL_SIZE,
    MIN_MOTION_AREA,
    MOTION_THRESHOLD,
)
from .base_detector import BaseDetector, Region


def is_significant(contour, min_area=MIN_MOTION_AREA):
    """True when the contour encloses at least min_area pixels."""
    return cv2.contourArea(contour) >= min_area


def motion_regions(contours, min_area=MIN_MOTION_AREA):
    """Bounding boxes of every contour large enough to count as motion."""
    regions = []
    for contour in contours:
        if not is_significant(contour, min_area):
            continue
        x, y, w, h = cv2.boundingRect(contour)
        regions.append(Region(x, y, w, h))
    return regions


class MotionDetector(BaseDetector):
    """
    MOG2 background subtraction followed by threshold, dilate and an
    external contour search.

    The foreground and threshold masks are kept between calls and handed
    back to OpenCV as dst buffers, so they are allocated on the first frame
    and overwritten afterwards.
    """
    def __init__(self, threshold=MOTION_THRESHOLD, min_area=MIN_MOTION_AREA):
        self.threshold = threshold
        self.min_area = min_area
        self.mog2 = cv2.createBackgroundSubtractorMOG2()
        self.kernel = cv2.getStructuringElement(cv2.MORPH_RECT, DILATE_KERNEL_SIZE)
        self.fg_mask = None
        self.thresh_mask = None

    def foreground(self, frame):
        """Update the background model and return the dilated motion mask."""
        self.fg_mask = self.mog2.apply(frame, self.fg_mask)
        _, self.thresh_mask = cv2.threshold(
            self.fg_mask, self.threshold, 255, cv2.THRESH_BINARY,
            self.thresh_mask,
        )
        cv2.dilate(self.thresh_mask, self.kernel, dst=self.thresh_mask)
        return self.thresh_mask

    def detect(self, frame):
        mask = self.foreground(frame)
        contours, _ = cv2.findContours(mask, cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_SIMPLE)
        return motion_regions(contours, self.min_area)

    def close(self):
        self.mog2 = None
        self.kernel = None
        self.fg_mask = None
        self.thresh_mask = None
