"""Freeze and split panes, headers and footers, and sheet protection."""

from __future__ import annotations

import dataclasses
import json
from typing import Any

from .workbook import HeaderFooter, Pane, Selection, SheetProtection, Workbook

MAX_HEADER_FOOTER_LENGTH = 255

# Header and footer fields whose length is checked, with the names used in errors.
_CHECKED_HEADER_FOOTER_FIELDS = (
    ("odd_header", "OddHeader"),
    ("odd_footer", "OddFooter"),
    ("even_header", "EvenHeader"),
    ("even_footer", "EvenFooter"),
    ("first_footer", "FirstFooter"),
)


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _as_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return int(value)


def parse_panes(panes: str) -> tuple[Pane | None, list[Selection]]:
    """Parse a JSON panes setting into the pane to store and its selections.

    The pane is ``None`` when the setting neither freezes nor splits.
    Raises ``ValueError`` when the text is not a JSON object.
    """
    settings = json.loads(panes)
    if not isinstance(settings, dict):
        raise ValueError("panes settings must be a JSON object")
    freeze = settings.get("freeze") is True
    split = settings.get("split") is True
    pane: Pane | None = None
    if freeze or split:
        pane = Pane(
            active_pane=_as_str(settings.get("active_pane")),
            top_left_cell=_as_str(settings.get("top_left_cell")),
            x_split=float(_as_int(settings.get("x_split"))),
            y_split=float(_as_int(settings.get("y_split"))),
            state="frozen" if freeze else "",
        )
    entries = settings.get("panes") or []
    if not isinstance(entries, list):
        raise ValueError("panes must be a JSON array")
    selections = [
        Selection(
            active_cell=_as_str(entry.get("active_cell")),
            pane=_as_str(entry.get("pane")),
            sqref=_as_str(entry.get("sqref")),
        )
        for entry in entries
        if isinstance(entry, dict)
    ]
    return pane, selections


def set_panes(workbook: Workbook, sheet: str, panes: str) -> None:
    """Create or remove freeze and split panes on the last view of a sheet.

    Settings that cannot be parsed are treated as empty, which removes the
    pane and clears the selections.
    """
    try:
        pane, selections = parse_panes(panes)
    except ValueError:
        pane, selections = None, []
    worksheet = workbook.worksheet(sheet)
    if not worksheet.sheet_views:
        raise ValueError(f"sheet {sheet} has no sheet view")
    view = worksheet.sheet_views[-1]
    view.pane = pane
    view.selections = selections


def set_header_footer(workbook: Workbook, sheet: str, settings: HeaderFooter | None) -> None:
    """Set the headers and footers of a sheet; ``None`` removes them."""
    worksheet = workbook.worksheet(sheet)
    if settings is None:
        worksheet.header_footer = None
        return
    for attr, label in _CHECKED_HEADER_FOOTER_FIELDS:
        if len(getattr(settings, attr).encode("utf-8")) >= MAX_HEADER_FOOTER_LENGTH:
            raise ValueError(f"field {label} must be less than 255 characters")
    worksheet.header_footer = dataclasses.replace(settings)


def sheet_password_hash(password: str) -> str:
    """Return the legacy Excel hash of a sheet protection password, in hex."""
    result = 0
    for position, char in enumerate(password, 1):
        value = ord(char) << position
        rotated = value >> 15
        value &= 0x7FFF
        result ^= value | rotated
    result ^= len(password)
    result ^= 0xCE4B
    return format(result, "X")


def protect_sheet(workbook: Workbook, sheet: str, settings: SheetProtection | None) -> None:
    """Protect a sheet; a plain-text password in ``settings`` is stored hashed.

    Without settings, editing objects and scenarios and selecting locked
    cells stay allowed.
    """
    worksheet = workbook.worksheet(sheet)
    if settings is None:
        settings = SheetProtection(objects=True, scenarios=True, select_locked_cells=True)
    protection = dataclasses.replace(settings, sheet=True, password="")
    if settings.password:
        protection.password = sheet_password_hash(settings.password)
    worksheet.sheet_protection = protection


def unprotect_sheet(workbook: Workbook, sheet: str) -> None:
    """Remove the protection of a sheet."""
    workbook.worksheet(sheet).sheet_protection = None