import cv2

from config import BLUR_KERNEL_SIZE, FACE_COLOR, FACE_STROKE
from .base_anon import BaseAnonymiser


class BlurAnonymiser(BaseAnonymiser):
    def __init__(self, kernel_size=BLUR_KERNEL_SIZE, color=FACE_COLOR, stroke=FACE_STROKE):
        self.kernel_size = kernel_size
        self.color = color
        self.stroke = stroke

    def apply(self, frame, faces):
        for f in faces:
            x1, y1, x2, y2 = f.as_xyxy()
            cv2.rectangle(frame, (x1, y1), (x2, y2), self.color, self.stroke)
            roi = frame[y1:y2, x1:x2]
            if roi.size > 0:
                frame[y1:y2, x1:x2] = cv2.GaussianBlur(roi, self.kernel_size, 0)
        return frame
