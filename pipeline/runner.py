import logging

import cv2
import numpy as np

from config import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    OVERLAY_COLOR,
    WINDOW_TITLE,
)
from metrics.perf import FpsMeter
from pipeline.errors import MotionDetectorError

logger = logging.getLogger(__name__)

QUIT_KEYS = (ord("q"), 27)


class DisplayLoop:
    """
    Drives a FramePipeline once per tick and shows the result in an OpenCV window.

    update() pulls a frame into the texture, draw() renders texture + overlay.
    The texture is sized from the first frame and never resized.
    """
    def __init__(self, pipeline, title=WINDOW_TITLE, fps_meter=None):
        self.pipeline = pipeline
        self.title = title
        self.fps_meter = fps_meter or FpsMeter()
        self.texture = None
        self.width = 0
        self.height = 0
        self.window_open = False

    def layout(self):
        if self.width > 0 and self.height > 0:
            return self.width, self.height
        return DEFAULT_WIDTH, DEFAULT_HEIGHT

    def update(self):
        try:
            img = self.pipeline.process_frame()
        except MotionDetectorError as e:
            logger.warning("Error processing frame: %s", e)
            return

        if self.texture is None:
            self.height, self.width = img.shape[:2]
            self.texture = np.zeros((self.height, self.width, 4), dtype=np.uint8)
            logger.info("Texture sized to %dx%d", self.width, self.height)
            if self.window_open:
                cv2.resizeWindow(self.title, self.width, self.height)

        if img.shape[:2] != self.texture.shape[:2]:
            img = cv2.resize(img, (self.width, self.height))
        np.copyto(self.texture, img)

    def draw(self):
        width, height = self.layout()
        if self.texture is not None:
            screen = cv2.cvtColor(self.texture, cv2.COLOR_RGBA2BGR)
        else:
            screen = np.zeros((height, width, 3), dtype=np.uint8)

        status_text = f"FPS: {self.fps_meter.fps():.1f} | Status: {self.pipeline.status}"
        cv2.putText(screen, status_text, (10, height - 10),
                    cv2.FONT_HERSHEY_PLAIN, 1.0, OVERLAY_COLOR, 1)
        return screen

    def window_closed(self):
        return cv2.getWindowProperty(self.title, cv2.WND_PROP_VISIBLE) < 1

    def run(self):
        cv2.namedWindow(self.title, cv2.WINDOW_NORMAL)
        cv2.resizeWindow(self.title, *self.layout())
        self.window_open = True

        try:
            while True:
                self.fps_meter.tick()
                self.update()
                cv2.imshow(self.title, self.draw())

                if (cv2.waitKey(1) & 0xFF) in QUIT_KEYS or self.window_closed():
                    break
        finally:
            self.window_open = False
            cv2.destroyWindow(self.title)
            logger.info("Redraw intervals: %s", self.fps_meter.summary())
