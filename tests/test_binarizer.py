import numpy as np
import pytest

from centroid_finder.errors import InvalidArgumentError, NullReferenceError
from centroid_finder.imaging import DistanceImageBinarizer, EuclideanColorDistance

from conftest import blank_frame, paint


@pytest.fixture
def binarizer():
    return DistanceImageBinarizer(EuclideanColorDistance())


def test_default_metric_is_euclidean():
    assert isinstance(DistanceImageBinarizer().metric, EuclideanColorDistance)


def test_exact_target_pixel_is_foreground(binarizer):
    mask = binarizer.to_binary_mask([[0xFF0000]], 0xFF0000, 1)
    assert mask.shape == (1, 1)
    assert mask[0, 0] == 1


def test_far_pixel_is_background(binarizer):
    mask = binarizer.to_binary_mask([[0x000000]], 0xFFFFFF, 10)
    assert mask[0, 0] == 0


def test_distance_equal_to_threshold_is_background(binarizer):
    # 0x0000FF is exactly 255 away from black
    mask = binarizer.to_binary_mask([[0x0000FF]], 0x000000, 255)
    assert mask[0, 0] == 0
    mask = binarizer.to_binary_mask([[0x0000FF]], 0x000000, 256)
    assert mask[0, 0] == 1


def test_zero_threshold_matches_nothing(binarizer):
    mask = binarizer.to_binary_mask([[0x123456]], 0x123456, 0)
    assert mask[0, 0] == 0


def test_rectangular_frame_indices(binarizer):
    # width 2, height 3, pixel (x=1, y=2) is the target
    frame = np.zeros((3, 2, 3), dtype=np.uint8)
    frame[2, 1] = (0, 255, 0)
    mask = binarizer.to_binary_mask(frame, 0x00FF00, 2)
    assert mask.shape == (3, 2)
    assert mask[2, 1] == 1
    assert mask.sum() == 1


def test_rgba_frame_drops_alpha(binarizer):
    frame = np.zeros((1, 2, 4), dtype=np.uint8)
    frame[0, 0] = (255, 0, 0, 0)
    frame[0, 1] = (255, 0, 0, 255)
    np.testing.assert_array_equal(binarizer.to_binary_mask(frame, 0xFF0000, 1), [[1, 1]])


def test_mask_has_frame_dimensions(binarizer):
    frame = paint(blank_frame(width=7, height=4), (1, 3), (2, 5))
    mask = binarizer.to_binary_mask(frame, 0xFF0000, 50)
    assert mask.shape == (4, 7)
    assert mask.dtype == np.uint8
    assert mask.sum() == 6


def test_frame_is_not_modified(binarizer):
    frame = paint(blank_frame(), (0, 2), (0, 2))
    before = frame.copy()
    binarizer.to_binary_mask(frame, 0xFF0000, 50)
    np.testing.assert_array_equal(frame, before)


def test_none_frame_raises(binarizer):
    with pytest.raises(NullReferenceError):
        binarizer.to_binary_mask(None, 0x000000, 10)


def test_none_row_raises(binarizer):
    with pytest.raises(NullReferenceError):
        binarizer.to_binary_mask([[0x000000], None], 0x000000, 10)


@pytest.mark.parametrize('frame', [[], [[]], np.zeros((0, 3, 3), dtype=np.uint8)])
def test_empty_frame_raises(binarizer, frame):
    with pytest.raises(InvalidArgumentError):
        binarizer.to_binary_mask(frame, 0x000000, 10)


@pytest.mark.parametrize('frame', [
    [[0, 0], [0]],
    [0xFF0000, 0],
    [[[255, 0, 0], [0, 0]]],
], ids=['short-row', 'flat-list', 'uneven-pixels'])
def test_jagged_frame_raises(binarizer, frame):
    with pytest.raises(InvalidArgumentError):
        binarizer.to_binary_mask(frame, 0xFF0000, 10)


def test_unsupported_shape_raises(binarizer):
    with pytest.raises(InvalidArgumentError):
        binarizer.to_binary_mask(np.zeros((2, 2, 2), dtype=np.uint8), 0x000000, 10)


def test_to_frame_colors(binarizer):
    image = binarizer.to_frame([[1, 0], [0, 1], [1, 1]])
    assert image.shape == (3, 2, 3)
    assert image.dtype == np.uint8
    assert tuple(image[0, 0]) == (255, 255, 255)
    assert tuple(image[0, 1]) == (0, 0, 0)
    assert tuple(image[2, 1]) == (255, 255, 255)


def test_to_frame_then_binarize_white(binarizer):
    mask = np.array([[0, 1, 1], [1, 0, 0]], dtype=np.uint8)
    again = binarizer.to_binary_mask(binarizer.to_frame(mask), 0xFFFFFF, 1)
    np.testing.assert_array_equal(again, mask)


def test_to_frame_none_raises(binarizer):
    with pytest.raises(NullReferenceError):
        binarizer.to_frame(None)
    with pytest.raises(NullReferenceError):
        binarizer.to_frame([None])


def test_to_frame_empty_raises(binarizer):
    with pytest.raises(InvalidArgumentError):
        binarizer.to_frame([])


def test_to_frame_jagged_raises(binarizer):
    with pytest.raises(InvalidArgumentError):
        binarizer.to_frame([[1, 0, 1], [1, 0]])


def test_to_frame_non_binary_raises(binarizer):
    with pytest.raises(InvalidArgumentError):
        binarizer.to_frame([[-1, 0, 2]])
