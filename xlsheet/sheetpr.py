"""Worksheet properties such as code name, publishing and page fitting."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .workbook import SheetProperties, Workbook


def _default_true(value: bool | None) -> bool:
    return True if value is None else value


class _SheetPrOption(ABC):
    """A worksheet property that can be written and read back."""

    value: object

    @abstractmethod
    def _apply(self, pr: SheetProperties) -> None:
        """Write this option into the properties."""

    @classmethod
    @abstractmethod
    def _read(cls, pr: SheetProperties | None) -> _SheetPrOption:
        """Read this option from the properties, which may be absent."""


@dataclass(frozen=True)
class CodeName(_SheetPrOption):
    """A stable name of the sheet."""

    value: str

    def _apply(self, pr: SheetProperties) -> None:
        pr.code_name = str(self.value)

    @classmethod
    def _read(cls, pr: SheetProperties | None) -> CodeName:
        return cls("" if pr is None else pr.code_name)


@dataclass(frozen=True)
class EnableFormatConditionsCalculation(_SheetPrOption):
    """Whether conditional formatting is evaluated (Excel default: true)."""

    value: bool

    def _apply(self, pr: SheetProperties) -> None:
        pr.enable_format_conditions_calculation = bool(self.value)

    @classmethod
    def _read(cls, pr: SheetProperties | None) -> EnableFormatConditionsCalculation:
        if pr is None:
            return cls(True)
        return cls(_default_true(pr.enable_format_conditions_calculation))


@dataclass(frozen=True)
class Published(_SheetPrOption):
    """Whether the worksheet is published (Excel default: true)."""

    value: bool

    def _apply(self, pr: SheetProperties) -> None:
        pr.published = bool(self.value)

    @classmethod
    def _read(cls, pr: SheetProperties | None) -> Published:
        if pr is None:
            return cls(True)
        return cls(_default_true(pr.published))


@dataclass(frozen=True)
class FitToPage(_SheetPrOption):
    """Whether printing fits the sheet to the page (Excel default: false)."""

    value: bool

    def _apply(self, pr: SheetProperties) -> None:
        if not pr.has_page_setup_properties:
            if not self.value:
                return
            pr.has_page_setup_properties = True
        pr.fit_to_page = bool(self.value)

    @classmethod
    def _read(cls, pr: SheetProperties | None) -> FitToPage:
        if pr is None or not pr.has_page_setup_properties:
            return cls(False)
        return cls(pr.fit_to_page)


@dataclass(frozen=True)
class AutoPageBreaks(_SheetPrOption):
    """Whether automatic page breaks are shown (Excel default: false)."""

    value: bool

    def _apply(self, pr: SheetProperties) -> None:
        if not pr.has_page_setup_properties:
            if not self.value:
                return
            pr.has_page_setup_properties = True
        pr.auto_page_breaks = bool(self.value)

    @classmethod
    def _read(cls, pr: SheetProperties | None) -> AutoPageBreaks:
        if pr is None or not pr.has_page_setup_properties:
            return cls(False)
        return cls(pr.auto_page_breaks)


@dataclass(frozen=True)
class OutlineSummaryBelow(_SheetPrOption):
    """Whether outline summary rows sit below the detail (Excel default: true)."""

    value: bool

    def _apply(self, pr: SheetProperties) -> None:
        pr.outline_summary_below = bool(self.value)

    @classmethod
    def _read(cls, pr: SheetProperties | None) -> OutlineSummaryBelow:
        if pr is None:
            return cls(True)
        return cls(_default_true(pr.outline_summary_below))


def _option_class(option: object) -> type[_SheetPrOption]:
    if isinstance(option, type) and issubclass(option, _SheetPrOption):
        return option
    if isinstance(option, _SheetPrOption):
        return type(option)
    raise TypeError(f"not a sheet property option: {option!r}")


def set_sheet_pr_options(workbook: Workbook, name: str, *args: _SheetPrOption) -> None:
    """Apply property options to the named worksheet."""
    sheet = workbook.worksheet(name)
    for option in args:
        if not isinstance(option, _SheetPrOption):
            raise TypeError(f"not a sheet property option: {option!r}")
    if sheet.sheet_pr is None:
        sheet.sheet_pr = SheetProperties()
    for option in args:
        option._apply(sheet.sheet_pr)


def get_sheet_pr_options(workbook: Workbook, name: str, *args: object) -> tuple:
    """Read the given option classes from a worksheet, one option per argument."""
    pr = workbook.worksheet(name).sheet_pr
    return tuple(_option_class(option)._read(pr) for option in args)