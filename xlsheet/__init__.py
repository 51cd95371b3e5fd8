"""In-memory spreadsheet workbook model with sheet, view, property, layout and protection settings."""

__version__ = "0.1.0"
__all__ = ["workbook", "sheetview", "sheetpr", "pagelayout", "features"]