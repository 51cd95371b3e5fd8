import pytest

from xlsheet.sheetview import (
    DefaultGridColor,
    RightToLeft,
    ShowFormulas,
    ShowGridLines,
    ShowRowColHeaders,
    TopLeftCell,
    ZoomScale,
    get_sheet_view_options,
    set_sheet_view_options,
)
from xlsheet.workbook import SheetNotExistError, Workbook

SHEET = "Sheet1"


def test_defaults():
    wb = Workbook()
    result = get_sheet_view_options(
        wb,
        SHEET,
        0,
        DefaultGridColor,
        RightToLeft,
        ShowFormulas,
        ShowGridLines,
        ShowRowColHeaders,
        ZoomScale,
        TopLeftCell,
    )
    assert result == (
        DefaultGridColor(True),
        RightToLeft(False),
        ShowFormulas(False),
        ShowGridLines(True),
        ShowRowColHeaders(True),
        ZoomScale(0),
        TopLeftCell(""),
    )


def test_change_top_left_cell_and_grid_lines():
    wb = Workbook()
    set_sheet_view_options(wb, SHEET, 0, TopLeftCell("B2"))
    (top_left,) = get_sheet_view_options(wb, SHEET, 0, TopLeftCell)
    set_sheet_view_options(wb, SHEET, 0, ShowGridLines(False))
    (grid,) = get_sheet_view_options(wb, SHEET, 0, ShowGridLines)
    assert grid.value is False
    assert top_left.value == "B2"


def test_set_all_options():
    wb = Workbook()
    set_sheet_view_options(
        wb,
        SHEET,
        0,
        DefaultGridColor(False),
        RightToLeft(False),
        ShowFormulas(True),
        ShowGridLines(True),
        ShowRowColHeaders(True),
        ZoomScale(80),
        TopLeftCell("C3"),
    )
    result = get_sheet_view_options(
        wb, SHEET, 0, DefaultGridColor, ShowFormulas, ZoomScale, TopLeftCell
    )
    assert result == (
        DefaultGridColor(False),
        ShowFormulas(True),
        ZoomScale(80),
        TopLeftCell("C3"),
    )


def test_zoom_scale_out_of_range_is_ignored():
    wb = Workbook()
    set_sheet_view_options(wb, SHEET, 0, ZoomScale(80))
    set_sheet_view_options(wb, SHEET, 0, ZoomScale(500))
    assert get_sheet_view_options(wb, SHEET, 0, ZoomScale) == (ZoomScale(80),)
    set_sheet_view_options(wb, SHEET, 0, ZoomScale(123))
    assert get_sheet_view_options(wb, SHEET, 0, ZoomScale) == (ZoomScale(123),)


@pytest.mark.parametrize("zoom", [10, 400])
def test_zoom_scale_bounds_accepted(zoom):
    wb = Workbook()
    set_sheet_view_options(wb, SHEET, 0, ZoomScale(zoom))
    assert get_sheet_view_options(wb, SHEET, -1, ZoomScale)[0].value == zoom


def test_instance_accepted_as_getter():
    wb = Workbook()
    set_sheet_view_options(wb, SHEET, -1, RightToLeft(True))
    assert get_sheet_view_options(wb, SHEET, 0, RightToLeft(False)) == (RightToLeft(True),)


def test_valid_indexes_without_options():
    wb = Workbook()
    assert get_sheet_view_options(wb, SHEET, 0) == ()
    assert get_sheet_view_options(wb, SHEET, -1) == ()
    set_sheet_view_options(wb, SHEET, 0)
    set_sheet_view_options(wb, SHEET, -1)
    assert wb.worksheet(SHEET).sheet_views[0].zoom_scale == 0.0


@pytest.mark.parametrize("index", [1, -2])
def test_get_out_of_range(index):
    wb = Workbook()
    with pytest.raises(IndexError, match=f"view index {index} out of range"):
        get_sheet_view_options(wb, SHEET, index)


@pytest.mark.parametrize("index", [1, -2])
def test_set_out_of_range(index):
    wb = Workbook()
    with pytest.raises(IndexError, match=f"view index {index} out of range"):
        set_sheet_view_options(wb, SHEET, index)


def test_missing_sheet():
    wb = Workbook()
    with pytest.raises(SheetNotExistError, match="sheet SheetN is not exist"):
        get_sheet_view_options(wb, "SheetN", 0, ZoomScale)


def test_non_option_rejected():
    wb = Workbook()
    with pytest.raises(TypeError):
        get_sheet_view_options(wb, SHEET, 0, int)
    with pytest.raises(TypeError):
        set_sheet_view_options(wb, SHEET, 0, 5)