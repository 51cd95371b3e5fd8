# xlsheet

An in-memory model of a spreadsheet workbook. It keeps track of worksheets
(names, indexes, order, visibility, the active tab), cell values, sheet
views, sheet properties, page layout, panes, headers and footers, and sheet
protection, with the same defaults and limits a spreadsheet application uses.

## Installation

```
pip install xlsheet
```

## Worksheets

```python
from xlsheet.workbook import Workbook

wb = Workbook()                      # starts with "Sheet1"
index = wb.new_sheet("Sheet2")       # returns the new sheet's index
wb.copy_sheet(1, index)              # copies Sheet1's contents over Sheet2
wb.set_sheet_name("Sheet2", "Data")
wb.set_active_sheet(index)

print(wb.get_sheet_map())            # {1: 'Sheet1', 2: 'Data'}
print(wb.get_sheet_index("Data"))    # 2
print(wb.get_sheet_name(2))          # 'Data'
print(wb.get_active_sheet_index())   # 2

wb.set_cell_value("Sheet1", "B3", "100")
print(wb.get_cell_value("Sheet1", "B3"))                 # '100'
print(wb.search_sheet("Sheet1", "100"))                  # ['B3']
print(wb.search_sheet("Sheet1", "[0-9]", True))          # ['B3']
```

- `new_sheet` with a name that already exists adds nothing and returns the
  current sheet count.
- `delete_sheet` never removes the last remaining sheet.
- `set_sheet_visible(name, False)` leaves the active sheet and the last
  visible sheet visible; `get_sheet_visible` reports the state.
- `copy_sheet` raises `ValueError("invalid worksheet index")` for indexes
  below 1, equal indexes or indexes with no sheet. The copy drops drawings,
  table parts and page setup.
- Cell values are stored as text; `True`/`False` become `TRUE`/`FALSE`, and
  an empty value clears the cell. `search_sheet` walks cells row by row,
  left to right.
- `worksheet(name)` returns the `Worksheet` object holding a sheet's views,
  properties, page setup, header/footer, protection and cells.

Sheet names are cleaned the way a spreadsheet application does it: the
characters `: \ / ? * [ ]` are removed and the name is cut to 31 characters
(`trim_sheet_name`). Cell references are converted with
`cell_name_to_coordinates("AB12")` → `(28, 12)` and
`coordinates_to_cell_name(28, 12)` → `"AB12"`; invalid references raise
`ValueError`.

Asking for a sheet that does not exist raises `SheetNotExistError` (a
`LookupError`), whose message reads `sheet SheetN is not exist`.

## Sheet view options

```python
from xlsheet.sheetview import (
    ShowGridLines, ZoomScale, TopLeftCell,
    set_sheet_view_options, get_sheet_view_options,
)

set_sheet_view_options(wb, "Sheet1", 0, ShowGridLines(False), ZoomScale(80), TopLeftCell("C3"))
grid, zoom = get_sheet_view_options(wb, "Sheet1", -1, ShowGridLines, ZoomScale)
print(grid.value, zoom.value)        # False 80.0
```

Options: `DefaultGridColor`, `RightToLeft`, `ShowFormulas`, `ShowGridLines`,
`ShowRowColHeaders`, `ZoomScale`, `TopLeftCell`. Reading takes option
classes (or instances) and returns one option instance per argument. The
view index may be negative, counting back from the last view; an index out
of range raises `IndexError`. Zoom values outside 10–400 are ignored.
Defaults read back as: grid colour, grid lines and headers on; right to
left and formulas off; zoom `0`; top left cell `""`.

## Sheet properties

```python
from xlsheet.sheetpr import CodeName, FitToPage, set_sheet_pr_options, get_sheet_pr_options

set_sheet_pr_options(wb, "Sheet1", CodeName("code"), FitToPage(True))
code, fit = get_sheet_pr_options(wb, "Sheet1", CodeName, FitToPage)
```

Options: `CodeName`, `EnableFormatConditionsCalculation`, `Published`,
`FitToPage`, `AutoPageBreaks`, `OutlineSummaryBelow`. Defaults: code name
`""`, conditional formatting calculation, published and outline summary
below `True`, fit to page and automatic page breaks `False`.

## Page layout

```python
from xlsheet.pagelayout import (
    PageLayoutOrientation, PageLayoutPaperSize, set_page_layout, get_page_layout,
)

set_page_layout(wb, "Sheet1", PageLayoutOrientation("landscape"), PageLayoutPaperSize(9))
orientation, paper = get_page_layout(wb, "Sheet1", PageLayoutOrientation, PageLayoutPaperSize)
```

Defaults are portrait orientation and paper size 1 (Letter).

## Panes, headers, footers and protection

```python
from xlsheet.features import set_panes, set_header_footer, protect_sheet, unprotect_sheet
from xlsheet.workbook import HeaderFooter, SheetProtection

set_panes(wb, "Sheet1", '{"freeze":true,"x_split":1,"top_left_cell":"B1","active_pane":"topRight",'
                        '"panes":[{"sqref":"K16","active_cell":"K16","pane":"topRight"}]}')
set_header_footer(wb, "Sheet1", HeaderFooter(odd_header="&R&P", odd_footer="&C&F"))

password = "password"
protect_sheet(wb, "Sheet1", SheetProtection(password=password, scenarios=False))
unprotect_sheet(wb, "Sheet1")
```

- `set_panes` applies to the last view of the sheet. A setting that neither
  freezes nor splits removes the pane; text that is not a JSON object is
  treated as empty. `parse_panes` returns the parsed `(pane, selections)`.
- `set_header_footer` with `None` removes headers and footers. The odd,
  even and first-page footer fields and the odd and even header fields must
  be shorter than 255 bytes of UTF-8, otherwise `ValueError` is raised.
- `protect_sheet` with `None` allows editing objects and scenarios and
  selecting locked cells. A password is stored as its legacy spreadsheet
  hash in hex (`sheet_password_hash`).

## What this package does not do

Everything lives in memory: there is no reading or writing of `.xlsx`
files, no formula evaluation, no cell styles, charts, pictures or shapes,
and no command-line tool.

## Running the tests

```
pip install "xlsheet[test]"
pytest
```