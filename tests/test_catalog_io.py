import io
from datetime import datetime

import pytest
from openpyxl import Workbook, load_workbook

from assistant import handle_request
from input_readers import excel as excel_reader
from input_readers import read_catalog
from writers import catalog_filename, catalog_headers, catalog_to_xlsx_bytes, write_catalog_xlsx


def _make_xlsx(path, rows):
    wb = Workbook()
    ws = wb.active
    for row in rows:
        ws.append(row)
    wb.save(path)
    return path


def test_read_xlsx_skips_empty_rows_and_cells(tmp_path):
    path = _make_xlsx(
        tmp_path / "catalog.xlsx",
        [
            ["Product Name", "Price", "Color"],
            ["Blue Shirt", 500, None],
            [None, None, None],
            ["Red Shirt", 450.0, "Red"],
        ],
    )
    rows = read_catalog(path)
    assert rows == [
        {"Product Name": "Blue Shirt", "Price": 500},
        {"Product Name": "Red Shirt", "Price": 450, "Color": "Red"},
    ]


def test_read_upload_object_uses_filename(tmp_path):
    path = _make_xlsx(tmp_path / "c.xlsx", [["SKU"], ["AC-1"]])
    upload = io.BytesIO(path.read_bytes())
    assert read_catalog(upload, filename="catalog.xlsx") == [{"SKU": "AC-1"}]


def test_read_csv(tmp_path):
    path = tmp_path / "catalog.csv"
    path.write_text("name,price,size\nShirt,500,\nKurta,799.5,M\n", encoding="utf-8")
    assert read_catalog(path) == [
        {"name": "Shirt", "price": 500},
        {"name": "Kurta", "price": 799.5, "size": "M"},
    ]


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_catalog(tmp_path / "absent.xlsx")


def test_unsupported_and_corrupt_files(tmp_path):
    with pytest.raises(ValueError):
        read_catalog(tmp_path / "notes.txt")

    bad = tmp_path / "bad.xlsx"
    bad.write_bytes(b"not a workbook")
    with pytest.raises(ValueError):
        read_catalog(bad)


def test_headers_are_union_in_first_seen_order():
    rows = [{"name": "a", "price": 1}, {"name": "b", "AMAZON_Brand": "X"}]
    assert catalog_headers(rows) == ["name", "price", "AMAZON_Brand"]


def test_written_workbook_has_catalog_sheet(tmp_path):
    rows = [{"name": "a", "price": 1}, {"name": "b", "AMAZON_Brand": "X"}]
    out = write_catalog_xlsx(tmp_path / "out" / "catalog.xlsx", rows)

    wb = load_workbook(out)
    ws = wb["Catalog"]
    assert [c.value for c in ws[1]] == ["name", "price", "AMAZON_Brand"]
    assert [c.value for c in ws[3]] == ["b", None, "X"]
    assert read_catalog(io.BytesIO(catalog_to_xlsx_bytes(rows)), filename="x.xlsx") == rows


def test_catalog_filename():
    name = catalog_filename()
    assert name.startswith("catalog_") and name.endswith(".xlsx")


def test_date_cells_come_back_as_iso_strings(tmp_path):
    path = _make_xlsx(tmp_path / "dated.xlsx", [["name", "launched"], ["Shirt", datetime(2024, 5, 1)]])
    assert read_catalog(path) == [{"name": "Shirt", "launched": "2024-05-01T00:00:00"}]


def test_file_size_limit(tmp_path, monkeypatch):
    path = tmp_path / "catalog.csv"
    path.write_text("name\nShirt\n", encoding="utf-8")
    monkeypatch.setattr(excel_reader, "MAX_FILE_SIZE_MB", 0)
    with pytest.raises(ValueError, match="MB"):
        read_catalog(path)


def test_row_limit(tmp_path, monkeypatch):
    monkeypatch.setattr(excel_reader, "MAX_SHEET_ROWS", 1)

    xlsx = _make_xlsx(tmp_path / "rows.xlsx", [["name"], ["a"], ["b"]])
    with pytest.raises(ValueError, match="rows"):
        read_catalog(xlsx)

    csv = tmp_path / "rows.csv"
    csv.write_text("name\na\nb\n", encoding="utf-8")
    with pytest.raises(ValueError, match="rows"):
        read_catalog(csv)


def test_column_limit(tmp_path, monkeypatch):
    monkeypatch.setattr(excel_reader, "MAX_SHEET_COLS", 1)

    xlsx = _make_xlsx(tmp_path / "cols.xlsx", [["name", "price"], ["a", 1]])
    with pytest.raises(ValueError, match="columns"):
        read_catalog(xlsx)

    csv = tmp_path / "cols.csv"
    csv.write_text("name,price\na,1\n", encoding="utf-8")
    with pytest.raises(ValueError, match="columns"):
        read_catalog(csv)


def test_control_characters_are_dropped_on_export():
    result = handle_request(
        {"message": "add product", "catalogData": [], "rawData": "Product Name: Blue\x07Shirt\nPrice: 500"}
    )
    data = catalog_to_xlsx_bytes(result.updated_catalog)

    rows = read_catalog(io.BytesIO(data), filename="catalog.xlsx")
    assert rows[0]["name"] == "BlueShirt"
    assert rows[0]["AMAZON_Product_Name"] == "BlueShirt"


def test_control_characters_in_headers_are_dropped():
    data = catalog_to_xlsx_bytes([{"na\x01me": "Shirt"}])
    assert read_catalog(io.BytesIO(data), filename="c.xlsx") == [{"name": "Shirt"}]


def test_formula_like_text_is_written_as_text(tmp_path):
    rows = [{"name": '=HYPERLINK("http://example.com","click")', "price": 500}]
    out = write_catalog_xlsx(tmp_path / "catalog.xlsx", rows)

    ws = load_workbook(out)["Catalog"]
    assert ws["A2"].data_type == "s"
    assert ws["A2"].value == rows[0]["name"]
    assert ws["B2"].value == 500
    assert read_catalog(out) == rows
