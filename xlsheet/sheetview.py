"""Options of a worksheet view: grid lines, zoom, direction and the like."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .workbook import SheetView, Workbook


def _default_true(value: bool | None) -> bool:
    return True if value is None else value


class _SheetViewOption(ABC):
    """A setting of a sheet view that can be written and read back."""

    value: object

    @abstractmethod
    def _apply(self, view: SheetView) -> None:
        """Write this option into a view."""

    @classmethod
    @abstractmethod
    def _read(cls, view: SheetView) -> _SheetViewOption:
        """Read this option from a view."""


@dataclass(frozen=True)
class DefaultGridColor(_SheetViewOption):
    """Whether the default grid line colour is used (Excel default: true)."""

    value: bool

    def _apply(self, view: SheetView) -> None:
        view.default_grid_color = bool(self.value)

    @classmethod
    def _read(cls, view: SheetView) -> DefaultGridColor:
        return cls(_default_true(view.default_grid_color))


@dataclass(frozen=True)
class RightToLeft(_SheetViewOption):
    """Whether the sheet is shown right to left (Excel default: false)."""

    value: bool

    def _apply(self, view: SheetView) -> None:
        view.right_to_left = bool(self.value)

    @classmethod
    def _read(cls, view: SheetView) -> RightToLeft:
        return cls(view.right_to_left)


@dataclass(frozen=True)
class ShowFormulas(_SheetViewOption):
    """Whether cells show formulas instead of results (Excel default: false)."""

    value: bool

    def _apply(self, view: SheetView) -> None:
        view.show_formulas = bool(self.value)

    @classmethod
    def _read(cls, view: SheetView) -> ShowFormulas:
        return cls(view.show_formulas)


@dataclass(frozen=True)
class ShowGridLines(_SheetViewOption):
    """Whether grid lines are shown (Excel default: true)."""

    value: bool

    def _apply(self, view: SheetView) -> None:
        view.show_grid_lines = bool(self.value)

    @classmethod
    def _read(cls, view: SheetView) -> ShowGridLines:
        return cls(_default_true(view.show_grid_lines))


@dataclass(frozen=True)
class ShowRowColHeaders(_SheetViewOption):
    """Whether row and column headers are shown (Excel default: true)."""

    value: bool

    def _apply(self, view: SheetView) -> None:
        view.show_row_col_headers = bool(self.value)

    @classmethod
    def _read(cls, view: SheetView) -> ShowRowColHeaders:
        return cls(_default_true(view.show_row_col_headers))


@dataclass(frozen=True)
class ZoomScale(_SheetViewOption):
    """Zoom percentage; values outside 10 to 400 are ignored when set."""

    value: float

    def _apply(self, view: SheetView) -> None:
        if 10 <= self.value <= 400:
            view.zoom_scale = float(self.value)

    @classmethod
    def _read(cls, view: SheetView) -> ZoomScale:
        return cls(view.zoom_scale)


@dataclass(frozen=True)
class TopLeftCell(_SheetViewOption):
    """The cell shown in the top left corner of the view."""

    value: str

    def _apply(self, view: SheetView) -> None:
        view.top_left_cell = str(self.value)

    @classmethod
    def _read(cls, view: SheetView) -> TopLeftCell:
        return cls(view.top_left_cell)


def _get_sheet_view(workbook: Workbook, name: str, view_index: int) -> SheetView:
    views = workbook.worksheet(name).sheet_views
    count = len(views)
    if view_index < 0:
        if view_index < -count:
            raise IndexError(f"view index {view_index} out of range")
        view_index += count
    elif view_index >= count:
        raise IndexError(f"view index {view_index} out of range")
    return views[view_index]


def _option_class(option: object) -> type[_SheetViewOption]:
    if isinstance(option, type) and issubclass(option, _SheetViewOption):
        return option
    if isinstance(option, _SheetViewOption):
        return type(option)
    raise TypeError(f"not a sheet view option: {option!r}")


def set_sheet_view_options(workbook: Workbook, name: str, view_index: int, *args: _SheetViewOption) -> None:
    """Apply options to a view; a negative ``view_index`` counts from the end."""
    view = _get_sheet_view(workbook, name, view_index)
    for option in args:
        if not isinstance(option, _SheetViewOption):
            raise TypeError(f"not a sheet view option: {option!r}")
        option._apply(view)


def get_sheet_view_options(workbook: Workbook, name: str, view_index: int, *args: object) -> tuple:
    """Read the given option classes from a view, returning one option per argument."""
    view = _get_sheet_view(workbook, name, view_index)
    return tuple(_option_class(option)._read(view) for option in args)