from datetime import date

from services.qr_code import encode_submission, make_qr_png, to_data_url
from stalls.exporters import generate_receipt_html, receipt_filename, stalls_to_frame
from stalls.exporters.excel_exporter import COLUMNS

SUBMITTED = {
    "id": 12,
    "stallId": "stall-12",
    "name": "Stall 4",
    "vendor": "Maria <Santos>",
    "contact": "09171234567",
    "type": "Fish",
    "monthlyRent": 1500.0,
    "last_payment": "2024-05-15",
    "next_due": "2024-06-15",
}


def test_encode_submission_is_compact_json():
    text = encode_submission({"id": 1, "vendor": "Ñora"})
    assert text == '{"id":1,"vendor":"Ñora"}'


def test_qr_png():
    png = make_qr_png(SUBMITTED)
    assert png.startswith(b"\x89PNG")
    assert to_data_url(png).startswith("data:image/png;base64,")


def test_receipt_html():
    html = generate_receipt_html(SUBMITTED, "data:image/png;base64,AAAA", issued=date(2024, 5, 15))
    assert "SIBULAN MARKET PAY" in html
    assert "Stall Registration Receipt" in html
    assert "Maria &lt;Santos&gt;" in html
    assert "₱1,500.00" in html
    assert "2024-06-15" in html
    assert "data:image/png;base64,AAAA" in html
    assert "window.print" not in html


def test_receipt_html_without_due_or_qr():
    html = generate_receipt_html(dict(SUBMITTED, next_due=None), None, auto_print=True)
    assert "N/A" in html
    assert "<img" not in html
    assert "window.print" in html


def test_receipt_filename():
    assert receipt_filename(SUBMITTED) == "stall-receipt-maria_santos.html"


def test_stalls_to_frame():
    stalls = [
        {"id": "stall-1", "name": "Stall 1", "vendor": "A", "type": "Fish", "monthlyRent": 100,
         "nextDue": "2024-06-01", "occupied": True},
        {"id": "stall-2", "name": "Stall 2", "vendor": "", "type": "Meat", "occupied": False},
    ]
    df = stalls_to_frame(stalls, today=date(2024, 6, 10))
    assert list(df.columns) == COLUMNS
    assert list(df["Status"]) == ["overdue", "vacant"]
    assert list(df["Monthly Rent"]) == [100.0, 0.0]


def test_stalls_to_frame_empty():
    assert list(stalls_to_frame([]).columns) == COLUMNS
