import argparse
import logging
import sys

from config import DEFAULT_DEVICE
from pipeline.errors import DeviceOpenError, ModelLoadError
from pipeline.frame_pipeline import FramePipeline
from pipeline.runner import DisplayLoop

logger = logging.getLogger("motion_anon")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Webcam motion detection with face blurring."
    )
    parser.add_argument(
        "device",
        nargs="?",
        default=DEFAULT_DEVICE,
        help="Camera index (e.g. 0) or path to a video file. Defaults to the first camera.",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    args = parse_args(argv)

    try:
        pipeline = FramePipeline.open(args.device)
    except (DeviceOpenError, ModelLoadError) as e:
        logger.error("%s", e)
        return 1

    with pipeline:
        logger.info("Start reading device: %s", args.device)
        DisplayLoop(pipeline).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
