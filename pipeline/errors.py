class MotionDetectorError(RuntimeError):
    """Base class for every failure raised by the frame pipeline."""


# ---- Startup (fatal) ----
class DeviceOpenError(MotionDetectorError):
    pass


class ModelLoadError(MotionDetectorError):
    pass


# ---- Per tick (recoverable) ----
class ReadError(MotionDetectorError):
    pass


class EmptyFrameError(MotionDetectorError):
    pass


class ConversionError(MotionDetectorError):
    pass


class ProcessingError(MotionDetectorError):
    pass
