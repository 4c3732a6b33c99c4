# config.py
# Colors are BGR, as drawn onto OpenCV frames.

DEFAULT_DEVICE = "0"
CASCADE_PATH = "data/haarcascade_frontalface_default.xml"

# ---- Motion ----
MOTION_THRESHOLD = 25
DILATE_KERNEL_SIZE = (3, 3)
# tuned for 640x480, recalibrate for other resolutions
MIN_MOTION_AREA = 3000
MOTION_COLOR = (255, 0, 0)
MOTION_STROKE = 2

# ---- Faces ----
FACE_COLOR = (0, 0, 255)
FACE_STROKE = 3
BLUR_KERNEL_SIZE = (75, 75)

# ---- Status ----
STATUS_READY = "Ready"
STATUS_MOTION = "Motion detected"
READY_COLOR = (0, 255, 0)
DETECTED_COLOR = (0, 0, 255)
STATUS_ORIGIN = (10, 30)
STATUS_FONT_SCALE = 1.5
STATUS_THICKNESS = 2

# ---- Display ----
WINDOW_TITLE = "MT"
DEFAULT_WIDTH = 640
DEFAULT_HEIGHT = 480
OVERLAY_COLOR = (255, 255, 255)
FPS_WINDOW = 60
