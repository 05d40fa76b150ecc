from __future__ import annotations

import numpy as np

from argus.motion.bg_subtractor import BGSubtractor, find_motion_regions
from conftest import FakeModel, blank_mask, mask_with_block


def test_contour_area_equal_to_min_area_is_not_motion() -> None:
    # an 11x11 filled block has a contour area of 10 * 10
    mask = mask_with_block(20, 20, 11)

    boxes, _ = find_motion_regions(mask, min_area=100)
    assert boxes == []

    boxes, areas = find_motion_regions(mask, min_area=99)
    assert len(boxes) == 1
    assert areas == [100.0]


def test_nested_contours_are_ignored() -> None:
    mask = mask_with_block(10, 10, 60)
    mask[30:50, 30:50] = 0
    mask[35:45, 35:45] = 255

    boxes, _ = find_motion_regions(mask, min_area=0)
    assert boxes == [(10, 10, 60, 60)]


def test_compute_drops_low_intensity_foreground() -> None:
    faint = blank_mask()
    faint[20:80, 20:80] = 20
    sub = BGSubtractor(model_factory=lambda: FakeModel([faint]))

    res = sub.compute(np.zeros((120, 160, 3), dtype=np.uint8), min_area=10)

    assert not res.motion
    assert int(np.count_nonzero(res.fgmask)) == 0


def test_compute_dilation_merges_nearby_fragments() -> None:
    mask = blank_mask()
    mask[40:51, 10:21] = 255
    mask[40:51, 22:33] = 255
    sub = BGSubtractor(model_factory=lambda: FakeModel([mask]))

    res = sub.compute(np.zeros((120, 160, 3), dtype=np.uint8), min_area=10)

    assert res.motion
    assert len(res.boxes) == 1


def test_compute_updates_model_on_every_frame() -> None:
    model = FakeModel([blank_mask(), blank_mask(), mask_with_block(5, 5, 40)])
    sub = BGSubtractor(model_factory=lambda: model)
    frame = np.zeros((120, 160, 3), dtype=np.uint8)

    results = [sub.compute(frame, min_area=100) for _ in range(3)]

    assert model.applied == 3
    assert [r.motion for r in results] == [False, False, True]


def test_default_model_is_mog2() -> None:
    sub = BGSubtractor()
    frame = np.zeros((120, 160, 3), dtype=np.uint8)

    res = sub.compute(frame, min_area=float(frame.shape[0] * frame.shape[1]))

    assert res.fgmask.shape == (120, 160)
    assert not res.motion
