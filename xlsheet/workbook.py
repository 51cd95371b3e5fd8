"""In-memory workbook model: sheets, their order, visibility and cell values."""

from __future__ import annotations

import copy
import re
from dataclasses import dataclass, field
from typing import Iterator

MAX_SHEET_NAME_LENGTH = 31
MAX_COLUMNS = 16384
WORKSHEET_CONTENT_TYPE = (
    "application/vnd.openxmlformats-officedocument.spreadsheetml.worksheet+xml"
)
WORKSHEET_RELATIONSHIP_TYPE = (
    "http://schemas.openxmlformats.org/officeDocument/2006/relationships/worksheet"
)

_INVALID_SHEET_CHARS = frozenset(':\\/?*[]')
_CELL_RE = re.compile(r"^([A-Za-z]+)([0-9]+)$")
_SHEET_TARGET_RE = re.compile(r"worksheets/sheet(.*?)(?:\.xml)?$")


class SheetNotExistError(LookupError):
    """Raised when a worksheet name does not refer to any sheet."""

    def __init__(self, name: str) -> None:
        super().__init__(f"sheet {name} is not exist")
        self.name = name

    def __str__(self) -> str:
        return self.args[0]


@dataclass
class Pane:
    """Frozen or split pane settings of a sheet view."""

    active_pane: str = ""
    top_left_cell: str = ""
    x_split: float = 0.0
    y_split: float = 0.0
    state: str = ""


@dataclass
class Selection:
    """A selected range inside a pane."""

    active_cell: str = ""
    pane: str = ""
    sqref: str = ""


@dataclass
class SheetView:
    """One view of a worksheet; ``None`` means the attribute is not set."""

    workbook_view_id: int = 0
    tab_selected: bool = False
    top_left_cell: str = ""
    default_grid_color: bool | None = None
    right_to_left: bool = False
    show_formulas: bool = False
    show_grid_lines: bool | None = None
    show_row_col_headers: bool | None = None
    zoom_scale: float = 0.0
    pane: Pane | None = None
    selections: list[Selection] = field(default_factory=list)


@dataclass
class SheetProperties:
    """Worksheet properties; ``None`` means the attribute is not set."""

    code_name: str = ""
    enable_format_conditions_calculation: bool | None = None
    published: bool | None = None
    has_page_setup_properties: bool = False
    fit_to_page: bool = False
    auto_page_breaks: bool = False
    outline_summary_below: bool | None = None


@dataclass
class PageSetup:
    """Page layout of a worksheet; empty values mean the Excel default."""

    orientation: str = ""
    paper_size: int = 0


@dataclass
class HeaderFooter:
    """Headers and footers printed on each page."""

    align_with_margins: bool = False
    different_first: bool = False
    different_odd_even: bool = False
    scale_with_doc: bool = False
    odd_header: str = ""
    odd_footer: str = ""
    even_header: str = ""
    even_footer: str = ""
    first_footer: str = ""
    first_header: str = ""


@dataclass
class SheetProtection:
    """Protection settings stored on a worksheet."""

    password: str = ""
    auto_filter: bool = False
    delete_columns: bool = False
    delete_rows: bool = False
    format_cells: bool = False
    format_columns: bool = False
    format_rows: bool = False
    insert_columns: bool = False
    insert_hyperlinks: bool = False
    insert_rows: bool = False
    objects: bool = False
    pivot_tables: bool = False
    scenarios: bool = False
    select_locked_cells: bool = False
    select_unlocked_cells: bool = False
    sheet: bool = True
    sort: bool = False


@dataclass
class Worksheet:
    """The contents and settings of one worksheet."""

    dimension: str = "A1"
    sheet_views: list[SheetView] = field(default_factory=list)
    sheet_pr: SheetProperties | None = None
    page_setup: PageSetup | None = None
    header_footer: HeaderFooter | None = None
    sheet_protection: SheetProtection | None = None
    drawing: str | None = None
    table_parts: list[str] = field(default_factory=list)
    cells: dict[tuple[int, int], str] = field(default_factory=dict)

    def iter_cells(self) -> Iterator[tuple[int, int, str]]:
        """Yield ``(col, row, value)`` row by row, left to right."""
        for (col, row), value in sorted(self.cells.items(), key=lambda kv: (kv[0][1], kv[0][0])):
            yield col, row, value


@dataclass
class _SheetEntry:
    name: str
    sheet_id: int
    rel_id: str
    state: str = ""


def trim_sheet_name(name: str) -> str:
    """Drop the characters ``:\\/?*[]`` and cut the name to 31 characters."""
    if len(name) > MAX_SHEET_NAME_LENGTH or any(c in _INVALID_SHEET_CHARS for c in name):
        name = "".join(c for c in name if c not in _INVALID_SHEET_CHARS)[:MAX_SHEET_NAME_LENGTH]
    return name


def cell_name_to_coordinates(cell: str) -> tuple[int, int]:
    """Convert a cell name such as ``"B3"`` to 1-based ``(col, row)``."""
    match = _CELL_RE.match(cell)
    if not match or int(match.group(2)) < 1:
        raise ValueError(
            f'cannot convert cell "{cell}" to coordinates: invalid cell name "{cell}"'
        )
    letters, digits = match.groups()
    col = 0
    for ch in letters.upper():
        col = col * 26 + ord(ch) - ord("A") + 1
    if col > MAX_COLUMNS:
        raise ValueError(
            f'cannot convert cell "{cell}" to coordinates: column number exceeds maximum limit'
        )
    return col, int(digits)


def coordinates_to_cell_name(col: int, row: int) -> str:
    """Convert 1-based ``(col, row)`` to a cell name such as ``"B3"``."""
    if col < 1 or row < 1:
        raise ValueError(f"invalid cell coordinates [{col}, {row}]")
    if col > MAX_COLUMNS:
        raise ValueError(f"invalid cell coordinates [{col}, {row}]: column number exceeds maximum limit")
    letters = []
    while col:
        col, rem = divmod(col - 1, 26)
        letters.append(chr(ord("A") + rem))
    return "".join(reversed(letters)) + str(row)


def _sheet_number(target: str) -> int:
    match = _SHEET_TARGET_RE.fullmatch(target)
    if not match:
        return 0
    try:
        return int(match.group(1))
    except ValueError:
        return 0


def _format_value(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    return str(value)


class Workbook:
    """A workbook holding worksheets, created with one sheet named ``Sheet1``."""

    def __init__(self) -> None:
        self.sheet_count = 0
        self.active_tab = 0
        self._entries: list[_SheetEntry] = []
        self._relationships: dict[str, tuple[str, str]] = {}
        self._content_overrides: list[tuple[str, str]] = []
        self._sheet_paths: dict[str, str] = {}
        self._sheets: dict[str, Worksheet] = {}
        self.new_sheet("Sheet1")
        self.set_active_sheet(1)

    # -- sheet registry -------------------------------------------------

    def new_sheet(self, name: str) -> int:
        """Add a sheet and return its index; an existing name returns the sheet count."""
        if self.get_sheet_index(name) != 0:
            return self.sheet_count
        self.delete_sheet(name)
        self.sheet_count += 1
        sheet_id = max((e.sheet_id for e in self._entries), default=0) + 1
        self._content_overrides.append(
            (f"/xl/worksheets/sheet{sheet_id}.xml", WORKSHEET_CONTENT_TYPE)
        )
        path = f"xl/worksheets/sheet{sheet_id}.xml"
        self._sheet_paths[trim_sheet_name(name)] = path
        self._sheets[path] = Worksheet(sheet_views=[SheetView(workbook_view_id=0)])
        rel_num = 1 + max(
            (int(rid[3:]) for rid in self._relationships if rid[3:].isdigit()), default=0
        )
        rel_id = f"rId{rel_num}"
        self._relationships[rel_id] = (f"worksheets/sheet{sheet_id}.xml", WORKSHEET_RELATIONSHIP_TYPE)
        self._entries.append(_SheetEntry(trim_sheet_name(name), sheet_id, rel_id))
        return sheet_id

    def delete_sheet(self, name: str) -> None:
        """Remove a sheet by name; the last remaining sheet is never removed."""
        trimmed = trim_sheet_name(name)
        for entry in self._entries:
            if entry.name == trimmed and len(self._entries) > 1:
                self._entries.remove(entry)
                target = self._relationships.pop(entry.rel_id, ("", ""))[0]
                self._content_overrides = [
                    o for o in self._content_overrides if o[0] != "/xl/" + target
                ]
                self._sheet_paths.pop(trimmed, None)
                self._sheets.pop(f"xl/worksheets/sheet{entry.sheet_id}.xml", None)
                self.sheet_count -= 1
                break
        self.set_active_sheet(len(self.get_sheet_map()))

    def worksheet(self, name: str) -> Worksheet:
        """Return the worksheet with the given name."""
        path = self._sheet_paths.get(trim_sheet_name(name))
        if path is None or path not in self._sheets:
            raise SheetNotExistError(name)
        return self._sheets[path]

    def set_sheet_name(self, old_name: str, new_name: str) -> None:
        """Rename a sheet; formulas referring to it are left untouched."""
        old_name = trim_sheet_name(old_name)
        new_name = trim_sheet_name(new_name)
        for entry in self._entries:
            if entry.name == old_name:
                entry.name = new_name
                if old_name in self._sheet_paths:
                    self._sheet_paths[new_name] = self._sheet_paths.pop(old_name)

    def get_sheet_name(self, index: int) -> str:
        """Return the name of the sheet with the given index, or ``""``."""
        for rel_id, (target, _) in self._relationships.items():
            if _sheet_number(target) == index:
                for entry in self._entries:
                    if entry.rel_id == rel_id:
                        return entry.name
        return ""

    def get_sheet_index(self, name: str) -> int:
        """Return the index of the named sheet, or 0 when there is none."""
        for entry in self._entries:
            if entry.name == name and entry.rel_id in self._relationships:
                return _sheet_number(self._relationships[entry.rel_id][0])
        return 0

    def get_sheet_map(self) -> dict[int, str]:
        """Return a mapping of sheet index to sheet name in workbook order."""
        result: dict[int, str] = {}
        for entry in self._entries:
            rel = self._relationships.get(entry.rel_id)
            if rel and "worksheets/sheet" in rel[0]:
                result[_sheet_number(rel[0])] = entry.name
        return result

    # -- active sheet and visibility ------------------------------------

    def set_active_sheet(self, index: int) -> None:
        """Make the sheet with the given index the active, selected tab."""
        index = max(index, 1)
        for position, entry in enumerate(self._entries):
            if entry.sheet_id == index:
                self.active_tab = position
        for idx, name in self.get_sheet_map().items():
            sheet = self.worksheet(name)
            if sheet.sheet_views:
                sheet.sheet_views[0].tab_selected = False
            if idx == index:
                if sheet.sheet_views:
                    sheet.sheet_views[0].tab_selected = True
                else:
                    sheet.sheet_views.append(SheetView(tab_selected=True))

    def get_active_sheet_index(self) -> int:
        """Return the index of the selected sheet, or 0 when none is selected."""
        for idx, name in self.get_sheet_map().items():
            if any(view.tab_selected for view in self.worksheet(name).sheet_views):
                return idx
        return 0

    def copy_sheet(self, source: int, target: int) -> None:
        """Copy the contents of sheet ``source`` over sheet ``target``."""
        if (
            source < 1
            or target < 1
            or source == target
            or not self.get_sheet_name(source)
            or not self.get_sheet_name(target)
        ):
            raise ValueError("invalid worksheet index")
        duplicate = copy.deepcopy(self.worksheet(self.get_sheet_name(source)))
        if duplicate.sheet_views:
            duplicate.sheet_views[0].tab_selected = False
        duplicate.drawing = None
        duplicate.table_parts = []
        duplicate.page_setup = None
        self._sheets[f"xl/worksheets/sheet{target}.xml"] = duplicate

    def set_sheet_visible(self, name: str, visible: bool) -> None:
        """Show or hide a sheet; the active sheet and the last visible one stay visible."""
        name = trim_sheet_name(name)
        if visible:
            for entry in self._entries:
                if entry.name == name:
                    entry.state = ""
            return
        shown = sum(1 for entry in self._entries if entry.state != "hidden")
        for entry in self._entries:
            sheet = self.worksheet(entry.name)
            selected = bool(sheet.sheet_views) and sheet.sheet_views[0].tab_selected
            if entry.name == name and shown > 1 and not selected:
                entry.state = "hidden"

    def get_sheet_visible(self, name: str) -> bool:
        """Return whether the named sheet is visible."""
        name = trim_sheet_name(name)
        return any(e.name == name and e.state in ("", "visible") for e in self._entries)

    # -- cells ----------------------------------------------------------

    def set_cell_value(self, sheet: str, cell: str, value: object) -> None:
        """Store a value in a cell; an empty value clears the cell."""
        worksheet = self.worksheet(sheet)
        coords = cell_name_to_coordinates(cell)
        text = _format_value(value)
        if text:
            worksheet.cells[coords] = text
        else:
            worksheet.cells.pop(coords, None)

    def get_cell_value(self, sheet: str, cell: str) -> str:
        """Return the text stored in a cell, or ``""``."""
        worksheet = self.worksheet(sheet)
        return worksheet.cells.get(cell_name_to_coordinates(cell), "")

    def search_sheet(self, sheet: str, value: str, regex: bool = False) -> list[str]:
        """Return the names of cells equal to ``value`` or matching it as a pattern."""
        worksheet = self.worksheet(sheet)
        pattern = re.compile(value) if regex else None
        found = []
        for col, row, text in worksheet.iter_cells():
            if pattern is not None:
                if not pattern.search(text):
                    continue
            elif text != value:
                continue
            found.append(coordinates_to_cell_name(col, row))
        return found