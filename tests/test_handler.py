from assistant import build_catalog_row, find_missing_fields, handle_request, respond
from assistant.responses import APOLOGY, NO_CATALOG
from domain import MISSING_SENTINEL
from extraction import extract

RAW = "Product Name: Blue Shirt\nBrand: Acme\nPrice: 500\nColor: Blue"


def test_catalog_request_appends_a_new_row_without_touching_input():
    existing = [{"name": "Old"}]
    result = handle_request({"message": "create a listing for amazon", "catalogData": existing, "rawData": RAW})

    assert result.status == 200
    assert existing == [{"name": "Old"}]
    assert len(result.updated_catalog) == 2
    assert result.updated_catalog[0] == {"name": "Old"}

    row = result.updated_catalog[1]
    assert row["name"] == "Blue Shirt"
    assert row["AMAZON_MRP"] == "600.00"
    assert row["AMAZON_Category"] == MISSING_SENTINEL
    assert not any(k.startswith("FLIPKART_") for k in row)
    assert "Blue Shirt" in result.response
    assert "Price: ₹500" in result.response
    assert "- AMAZON: 9 required fields filled" in result.response


def test_catalog_request_without_platforms_fills_all_four():
    result = respond("add this product", [], RAW)
    row = result.updated_catalog[0]
    for prefix in ("AMAZON_", "FLIPKART_", "MEESHO_", "MYNTRA_"):
        assert any(k.startswith(prefix) for k in row)


def test_catalog_request_without_raw_text_is_guidance():
    result = respond("Help me prepare product listings", [], "")
    assert result.updated_catalog is None
    assert result.response.startswith("To create product listings, please:")
    assert "amazon, flipkart, meesho, myntra" in result.response


def test_analyze_my_catalog_with_empty_catalog():
    result = handle_request({"message": "analyze my catalog", "catalogData": [], "rawData": ""})
    assert result.status == 200
    assert result.response == NO_CATALOG
    assert result.updated_catalog is None
    assert "updatedCatalog" not in result.to_payload()


def test_analyze_reports_missing_fields_of_first_row_only():
    row = build_catalog_row(extract(RAW), ["amazon"])
    catalog = [row, {"name": "ignored"}]
    result = respond("check amazon", catalog, "")

    assert result.updated_catalog is None
    # no category or description in RAW; key features derive from description
    assert "Found 3 missing required fields" in result.response
    assert "amazon: Category\namazon: Description\namazon: Key Features" in result.response


def test_analyze_without_platform_checks_all_and_caps_report():
    result = respond("check my data", [{"name": "x"}], "")
    total = sum(1 for line in result.response.splitlines() if ": " in line and not line.startswith("Analysis"))
    assert "Found 35 missing required fields" in result.response
    assert total == 10


def test_analyze_complete_row():
    row = {"AMAZON_" + k: "v" for k in ("Product_Name", "Brand", "Category", "Price", "MRP", "SKU",
                                          "Description", "Key_Features", "Images")}
    result = respond("check amazon", [row], "")
    assert result.response.startswith("Great! Your catalog looks complete for amazon.")


def test_find_missing_fields_treats_sentinel_and_empty_as_missing():
    row = {"MEESHO_Product_Name": MISSING_SENTINEL, "MEESHO_Category": ""}
    missing = find_missing_fields(row, ["meesho"])
    assert missing[:2] == ["meesho: Product Name", "meesho: Category"]
    assert len(missing) == 7


def test_task_message_returns_template():
    existing = [{"name": "Old"}]
    result = handle_request({"message": "what tasks do I have", "catalogData": existing, "rawData": RAW})
    assert result.response.startswith("Task Management:")
    assert result.updated_catalog is None


def test_requirements_help_lists_platform_fields():
    result = respond("help with flipkart requirement", [], "")
    assert result.response.startswith("FLIPKART Listing Requirements:")
    assert "6. Product ID" in result.response


def test_general_and_capabilities():
    assert respond("hello there", [], "").response.startswith("Hello! I'm")
    assert "E-commerce Catalog Management" in respond("help", [], "").response


def test_malformed_payloads_get_apology_and_error_status():
    for payload in (
        None,
        "not a dict",
        {"catalogData": []},
        {"message": "catalog", "rawData": 42},
        {"message": "catalog", "catalogData": "rows"},
        {"message": "catalog", "catalogData": [{"k": ["nested"]}]},
    ):
        result = handle_request(payload)
        assert result.status == 500
        assert result.response == APOLOGY
        assert result.updated_catalog is None


def test_listing_requirements_show_platform_rules():
    # "listing" is a catalog keyword; the question is still about requirements
    result = respond("show flipkart listing requirements", [], "")
    assert result.response.startswith("FLIPKART Listing Requirements:")
    assert result.updated_catalog is None

    default = respond("Show me Amazon listing requirements", [{"name": "x"}], "")
    assert default.response.startswith("AMAZON Listing Requirements:")
    assert default.updated_catalog is None
