import numpy as np
import pytest
from tikzpicture.core.geometry import (
    Circle,
    CurveToDataElement,
    CurveToElement,
    LineToElement,
    MoveToElement,
    Path,
    Polyline,
    Rect,
)


@pytest.fixture
def empty_path():
    return Path()


@pytest.fixture
def sample_path():
    path = Path()
    path.move_to(0, 0)
    path.line_to(10, 10)
    path.cubic_to(12, 10, 14, 8, 15, 5)
    return path


def test_initialization(empty_path):
    assert len(empty_path) == 0
    assert empty_path.is_empty()
    assert empty_path.subpath_count() == 0


def test_add_elements(empty_path):
    empty_path.move_to(5, 5)
    assert len(empty_path) == 1
    assert isinstance(empty_path.elements[0], MoveToElement)

    empty_path.line_to(10, 10)
    assert isinstance(empty_path.elements[1], LineToElement)

    empty_path.add(LineToElement(1, 2))
    assert empty_path.elements[-1].end == (1.0, 2.0)


def test_cubic_to_appends_three_elements(empty_path):
    empty_path.move_to(0, 0)
    empty_path.cubic_to(1, 2, 3, 4, 5, 6)
    assert empty_path.elements[1:] == [
        CurveToElement(1, 2),
        CurveToDataElement(3, 4),
        CurveToDataElement(5, 6),
    ]


def test_element_coordinates_are_floats():
    element = LineToElement(1, 2)
    assert element.end == (1.0, 2.0)
    assert isinstance(element.x, float)
    assert element.y == 2.0


def test_element_equality_depends_on_kind():
    assert LineToElement(1, 1) == LineToElement(1, 1)
    assert LineToElement(1, 1) != MoveToElement(1, 1)
    assert len({LineToElement(1, 1), LineToElement(1, 1)}) == 1


def test_element_to_dict():
    data = CurveToElement(1, 2).to_dict()
    assert data == {"type": "CurveToElement", "end": (1.0, 2.0)}


def test_clear(sample_path):
    sample_path.clear()
    assert sample_path.is_empty()


def test_copy_is_independent(sample_path):
    copied = sample_path.copy()
    assert copied.elements == sample_path.elements
    copied.line_to(99, 99)
    assert len(copied) == len(sample_path) + 1


def test_subpath_count(sample_path):
    assert sample_path.subpath_count() == 1
    sample_path.move_to(20, 20)
    sample_path.line_to(30, 20)
    assert sample_path.subpath_count() == 2
    assert sample_path.element_count() == 7


def test_bounding_rect_includes_control_points(sample_path):
    rect = sample_path.bounding_rect()
    assert rect == Rect(0.0, 0.0, 15.0, 10.0)


def test_bounding_rect_of_empty_path(empty_path):
    assert empty_path.bounding_rect() is None


def test_from_points():
    path = Path.from_points([(0, 0), (1, 0), (1, 1)], closed=True)
    assert path.elements == [
        MoveToElement(0, 0),
        LineToElement(1, 0),
        LineToElement(1, 1),
        LineToElement(0, 0),
    ]


def test_from_points_accepts_numpy():
    path = Path.from_points(np.array([[0.5, 1.5], [2.0, 3.0]]))
    assert path.elements == [MoveToElement(0.5, 1.5), LineToElement(2, 3)]


def test_from_points_empty():
    assert Path.from_points([]).is_empty()


def test_from_rect():
    path = Path.from_rect(Rect(0, 0, 2, 1))
    assert path.subpath_count() == 1
    assert [e.end for e in path] == [
        (0, 0),
        (2, 0),
        (2, 1),
        (0, 1),
        (0, 0),
    ]
    assert Path.from_rect(Rect(0, 0, 0, 1)).is_empty()


def test_path_to_dict(sample_path):
    data = sample_path.to_dict()
    assert len(data["elements"]) == 5
    assert data["elements"][0]["type"] == "MoveToElement"


class TestRect:
    def test_dimensions(self):
        rect = Rect(1, 2, 4, 6)
        assert rect.width == 3
        assert rect.height == 4
        assert rect.top_left == (1, 2)
        assert rect.bottom_right == (4, 6)
        assert not rect.is_empty()

    @pytest.mark.parametrize(
        "rect",
        [
            Rect(1, 0, 1, 5),
            Rect(0, 3, 5, 3),
            Rect(0, 0, 0, 0),
            Rect(5, 0, 1, 5),
        ],
    )
    def test_degenerate_rect_is_empty(self, rect):
        assert rect.is_empty()

    def test_from_corners_normalizes(self):
        rect = Rect.from_corners((4, 6), (1, 2))
        assert rect == Rect(1, 2, 4, 6)

    def test_from_size(self):
        assert Rect.from_size(1, 1, 2, 3) == Rect(1, 1, 3, 4)


class TestPolyline:
    def test_points(self):
        polyline = Polyline([(0, 0), (1, 2)], closed=True)
        assert len(polyline) == 2
        assert list(polyline) == [(0.0, 0.0), (1.0, 2.0)]
        assert polyline.closed

    def test_empty(self):
        assert len(Polyline([])) == 0

    def test_rejects_malformed_points(self):
        with pytest.raises(ValueError):
            Polyline([(0, 0, 0), (1, 1, 1)])


def test_circle():
    circle = Circle((1, 2), 3.5)
    assert circle.center == (1, 2)
    assert circle.radius == 3.5
