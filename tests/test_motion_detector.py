import numpy as np

from config import MIN_MOTION_AREA
from conftest import gray_frame, with_block
from detectors.motion_detector import MotionDetector, is_significant, motion_regions


def strip_contour(length):
    # 1-pixel tall strip whose enclosed area equals `length`
    return np.array([[[0, 0]], [[0, 1]], [[length, 1]], [[length, 0]]], dtype=np.int32)


def test_area_just_below_minimum_is_ignored():
    assert not is_significant(strip_contour(MIN_MOTION_AREA - 1))
    assert motion_regions([strip_contour(2999)]) == []


def test_area_at_minimum_counts_as_motion():
    assert is_significant(strip_contour(MIN_MOTION_AREA))
    regions = motion_regions([strip_contour(3000)])
    assert len(regions) == 1
    assert regions[0].x == 0 and regions[0].y == 0


def test_every_large_contour_gets_its_own_region():
    small = strip_contour(10)
    big = np.array([[[10, 10]], [[10, 70]], [[70, 70]], [[70, 10]]], dtype=np.int32)
    other = np.array([[[200, 200]], [[200, 260]], [[260, 260]], [[260, 200]]], dtype=np.int32)
    regions = motion_regions([small, big, other])
    assert len(regions) == 2
    assert {r.as_xyxy() for r in regions} == {(10, 10, 71, 71), (200, 200, 261, 261)}


def test_static_scene_has_no_motion():
    detector = MotionDetector()
    background = gray_frame()
    for _ in range(30):
        regions = detector.detect(background)
    assert regions == []


def test_new_block_is_detected_after_warmup():
    detector = MotionDetector()
    background = gray_frame()
    for _ in range(30):
        detector.detect(background)

    regions = detector.detect(with_block(background, x=200, y=150, size=100))
    assert len(regions) == 1
    x1, y1, x2, y2 = regions[0].as_xyxy()
    assert x1 <= 200 and y1 <= 150
    assert x2 >= 300 and y2 >= 250


def test_scratch_masks_are_reused_between_frames():
    detector = MotionDetector()
    background = gray_frame()
    detector.detect(background)
    fg_mask, thresh_mask = detector.fg_mask, detector.thresh_mask
    detector.detect(background)
    assert detector.fg_mask is fg_mask
    assert detector.thresh_mask is thresh_mask
    assert thresh_mask.shape == background.shape[:2]
