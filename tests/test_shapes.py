from drillbook.shapes import PaintCost, Rectangle, Shape


def test_paint_cost_per_unit():
    assert PaintCost().paint_cost(1) == 70
    assert PaintCost().paint_cost(0) == 0


def test_rectangle_area_and_cost():
    rect = Rectangle(7, 5)
    assert rect.area() == 35
    assert rect.paint_cost(rect.area()) == 2450


def test_area_is_symmetric():
    assert Rectangle(3, 11).area() == Rectangle(11, 3).area()


def test_zero_side_gives_zero_area():
    assert Rectangle(0, 9).area() == 0


def test_dimensions_can_change():
    rect = Rectangle()
    assert rect.area() == 0
    rect.width = 4
    rect.height = 1
    assert rect.area() == rect.width
    assert isinstance(rect, Shape) and rect.paint_cost(rect.area()) == 4 * 70