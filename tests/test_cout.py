import numpy as np

from dreamnet.cout import format_tensor


def test_named_tensor():
    assert format_tensor(np.array([1.0, 2.0]), "x") == "x(2): 1 2 \n"


def test_unnamed_has_no_header_or_newline():
    text = format_tensor([0.5, 1.5])
    assert text == "0.5 1.5 "


def test_cut_off_appends_range():
    text = format_tensor([3.0, 1.0, 4.0, 1.0, 5.0], limit=2)
    assert text.startswith("3 1 ")
    assert text.endswith("... (1,5)")


def test_shape_in_header():
    text = format_tensor(np.zeros((2, 3)), "m", limit=6)
    assert text.startswith("m(2 3): ")
    assert text.count("0 ") == 6