# pipeline/frame_pipeline.py
from __future__ import annotations

import logging

import cv2

from anonymisers.blur import BlurAnonymiser
from config import (
    CASCADE_PATH,
    DETECTED_COLOR,
    MOTION_COLOR,
    MOTION_STROKE,
    READY_COLOR,
    STATUS_FONT_SCALE,
    STATUS_MOTION,
    STATUS_ORIGIN,
    STATUS_READY,
    STATUS_THICKNESS,
)
from detectors.haar_detector import HaarFaceDetector
from detectors.motion_detector import MotionDetector
from pipeline.errors import (
    ConversionError,
    DeviceOpenError,
    EmptyFrameError,
    ProcessingError,
    ReadError,
)

logger = logging.getLogger(__name__)


def resolve_source(device_id: str):
    """Convert numeric camera index strings to ints for VideoCapture."""
    if device_id.isdigit():
        return int(device_id)
    return device_id


class FramePipeline:
    """
    Per-tick capture -> face detection -> motion detection -> annotate -> blur.

    Owns the capture handle, both detectors and the working frame buffer.
    Use FramePipeline.open() inside a with-block so the device is released
    on every exit path.
    """

    def __init__(self, capture, face_detector, motion_detector=None, anonymiser=None):
        self.capture = capture
        self.face_detector = face_detector
        self.motion_detector = motion_detector or MotionDetector()
        self.anonymiser = anonymiser or BlurAnonymiser()
        self.frame = None
        self.status = STATUS_READY
        self.color = READY_COLOR

    @classmethod
    def open(cls, device_id: str, cascade_path: str = CASCADE_PATH) -> FramePipeline:
        source = resolve_source(device_id)
        capture = cv2.VideoCapture(source)
        if not capture.isOpened():
            capture.release()
            raise DeviceOpenError(f"Error opening video capture device: {device_id}")

        try:
            face_detector = HaarFaceDetector(cascade_path)
        except Exception:
            capture.release()
            raise

        return cls(capture, face_detector)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        if self.capture is not None:
            self.capture.release()
        if self.face_detector is not None:
            self.face_detector.close()
        if self.motion_detector is not None:
            self.motion_detector.close()
        self.capture = None
        self.face_detector = None
        self.motion_detector = None
        self.frame = None

    def read(self):
        if self.capture is None:
            raise ReadError("Cannot read from device: pipeline is closed")

        ok, frame = self.capture.read(self.frame)
        if not ok:
            raise ReadError("Cannot read from device")
        if frame is None or frame.size == 0:
            raise EmptyFrameError("Empty frame")
        self.frame = frame
        return frame

    def process_frame(self):
        """Process one tick and return a fresh RGBA image."""
        frame = self.read()
        try:
            self.annotate(frame)
        except cv2.error as e:
            raise ProcessingError(f"Failed to process frame: {e}") from e

        code = cv2.COLOR_GRAY2RGBA if frame.ndim == 2 else cv2.COLOR_BGR2RGBA
        try:
            return cv2.cvtColor(frame, code)
        except cv2.error as e:
            raise ConversionError(f"Failed to convert frame to RGBA: {e}") from e

    def annotate(self, frame):
        faces = self.face_detector.detect(frame)

        self.status = STATUS_READY
        self.color = READY_COLOR

        for region in self.motion_detector.detect(frame):
            self.status = STATUS_MOTION
            self.color = DETECTED_COLOR
            x1, y1, x2, y2 = region.as_xyxy()
            cv2.rectangle(frame, (x1, y1), (x2, y2), MOTION_COLOR, MOTION_STROKE)

        cv2.putText(frame, self.status, STATUS_ORIGIN, cv2.FONT_HERSHEY_PLAIN,
                    STATUS_FONT_SCALE, self.color, STATUS_THICKNESS)

        self.anonymiser.apply(frame, faces)
