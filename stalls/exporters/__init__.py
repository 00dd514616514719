"""Export modules for receipts and the stall directory."""

from .excel_exporter import export_to_excel, stalls_to_frame
from .receipt_exporter import export_receipt, generate_receipt_html, receipt_filename

__all__ = [
    "export_to_excel",
    "stalls_to_frame",
    "export_receipt",
    "generate_receipt_html",
    "receipt_filename",
]
