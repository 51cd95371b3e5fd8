"""Page layout of a worksheet: orientation and paper size."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .workbook import PageSetup, Workbook

ORIENTATION_PORTRAIT = "portrait"
ORIENTATION_LANDSCAPE = "landscape"
DEFAULT_PAPER_SIZE = 1


class _PageLayoutOption(ABC):
    """A page layout setting that can be written and read back."""

    value: object

    @abstractmethod
    def _apply(self, setup: PageSetup) -> None:
        """Write this option into the page setup."""

    @classmethod
    @abstractmethod
    def _read(cls, setup: PageSetup | None) -> _PageLayoutOption:
        """Read this option from the page setup, which may be absent."""


@dataclass(frozen=True)
class PageLayoutOrientation(_PageLayoutOption):
    """Page orientation, ``"portrait"`` or ``"landscape"`` (Excel default: portrait)."""

    value: str

    def _apply(self, setup: PageSetup) -> None:
        setup.orientation = str(self.value)

    @classmethod
    def _read(cls, setup: PageSetup | None) -> PageLayoutOrientation:
        if setup is None or not setup.orientation:
            return cls(ORIENTATION_PORTRAIT)
        return cls(setup.orientation)


@dataclass(frozen=True)
class PageLayoutPaperSize(_PageLayoutOption):
    """Paper size by its index number (Excel default: 1, letter paper)."""

    value: int

    def _apply(self, setup: PageSetup) -> None:
        setup.paper_size = int(self.value)

    @classmethod
    def _read(cls, setup: PageSetup | None) -> PageLayoutPaperSize:
        if setup is None or setup.paper_size == 0:
            return cls(DEFAULT_PAPER_SIZE)
        return cls(setup.paper_size)


def _option_class(option: object) -> type[_PageLayoutOption]:
    if isinstance(option, type) and issubclass(option, _PageLayoutOption):
        return option
    if isinstance(option, _PageLayoutOption):
        return type(option)
    raise TypeError(f"not a page layout option: {option!r}")


def set_page_layout(workbook: Workbook, sheet: str, *args: _PageLayoutOption) -> None:
    """Apply page layout options to the named worksheet."""
    worksheet = workbook.worksheet(sheet)
    for option in args:
        if not isinstance(option, _PageLayoutOption):
            raise TypeError(f"not a page layout option: {option!r}")
    if worksheet.page_setup is None:
        worksheet.page_setup = PageSetup()
    for option in args:
        option._apply(worksheet.page_setup)


def get_page_layout(workbook: Workbook, sheet: str, *args: object) -> tuple:
    """Read the given option classes from a worksheet, one option per argument."""
    setup = workbook.worksheet(sheet).page_setup
    return tuple(_option_class(option)._read(setup) for option in args)