import pytest

from xlsheet.pagelayout import (
    ORIENTATION_LANDSCAPE,
    ORIENTATION_PORTRAIT,
    PageLayoutOrientation,
    PageLayoutPaperSize,
    get_page_layout,
    set_page_layout,
)
from xlsheet.workbook import SheetNotExistError, Workbook

SHEET = "Sheet1"


def test_defaults():
    wb = Workbook()
    orientation, paper_size = get_page_layout(
        wb, SHEET, PageLayoutOrientation, PageLayoutPaperSize
    )
    assert orientation == PageLayoutOrientation("portrait")
    assert paper_size == PageLayoutPaperSize(1)


def test_set_page_layout_example():
    wb = Workbook()
    set_page_layout(wb, SHEET, PageLayoutOrientation(ORIENTATION_LANDSCAPE))
    set_page_layout(wb, SHEET, PageLayoutPaperSize(10))
    assert get_page_layout(wb, SHEET, PageLayoutOrientation, PageLayoutPaperSize) == (
        PageLayoutOrientation("landscape"),
        PageLayoutPaperSize(10),
    )


@pytest.mark.parametrize(
    "container, non_default",
    [
        (PageLayoutOrientation, PageLayoutOrientation(ORIENTATION_LANDSCAPE)),
        (PageLayoutPaperSize, PageLayoutPaperSize(10)),
    ],
)
def test_page_layout_option_round_trip(container, non_default):
    wb = Workbook()
    (default,) = get_page_layout(wb, SHEET, container)
    (val1,) = get_page_layout(wb, SHEET, container)
    assert val1 == default

    set_page_layout(wb, SHEET, val1)
    (val1,) = get_page_layout(wb, SHEET, container)
    assert val1 == default

    set_page_layout(wb, SHEET, non_default)
    (val1,) = get_page_layout(wb, SHEET, container)
    (val2,) = get_page_layout(wb, SHEET, container)
    assert val1 == val2
    assert val1 != default
    assert val1 == non_default

    set_page_layout(wb, SHEET, default)
    (val1,) = get_page_layout(wb, SHEET, container)
    assert val1 == default


def test_get_accepts_instances_as_containers():
    wb = Workbook()
    set_page_layout(wb, SHEET, PageLayoutPaperSize(9))
    (size,) = get_page_layout(wb, SHEET, PageLayoutPaperSize(0))
    assert size.value == 9


def test_set_page_layout_missing_sheet():
    wb = Workbook()
    with pytest.raises(SheetNotExistError) as info:
        set_page_layout(wb, "SheetN")
    assert str(info.value) == "sheet SheetN is not exist"


def test_get_page_layout_missing_sheet():
    wb = Workbook()
    with pytest.raises(SheetNotExistError) as info:
        get_page_layout(wb, "SheetN")
    assert str(info.value) == "sheet SheetN is not exist"


def test_set_creates_page_setup():
    wb = Workbook()
    assert wb.worksheet(SHEET).page_setup is None
    set_page_layout(wb, SHEET)
    setup = wb.worksheet(SHEET).page_setup
    assert setup.orientation == ""
    assert setup.paper_size == 0


def test_zero_paper_size_reads_as_default():
    wb = Workbook()
    set_page_layout(wb, SHEET, PageLayoutPaperSize(0))
    assert get_page_layout(wb, SHEET, PageLayoutPaperSize) == (PageLayoutPaperSize(1),)


def test_empty_orientation_reads_as_portrait():
    wb = Workbook()
    set_page_layout(wb, SHEET, PageLayoutOrientation(""))
    (orientation,) = get_page_layout(wb, SHEET, PageLayoutOrientation)
    assert orientation.value == ORIENTATION_PORTRAIT


def test_set_rejects_non_option():
    wb = Workbook()
    with pytest.raises(TypeError):
        set_page_layout(wb, SHEET, "landscape")


def test_get_rejects_non_option():
    wb = Workbook()
    with pytest.raises(TypeError):
        get_page_layout(wb, SHEET, int)


def test_copy_sheet_drops_page_setup():
    wb = Workbook()
    index = wb.new_sheet("Sheet2")
    set_page_layout(wb, SHEET, PageLayoutPaperSize(10))
    wb.copy_sheet(1, index)
    assert get_page_layout(wb, "Sheet2", PageLayoutPaperSize) == (PageLayoutPaperSize(1),)
    assert get_page_layout(wb, SHEET, PageLayoutPaperSize) == (PageLayoutPaperSize(10),)