import pytest

from orderhub.app.services.product_csv import (
    ProductCsvError,
    parse_price_cents,
    parse_product_csv,
)

LEVELS = ["Retail", "Wholesale"]


def test_parses_rows_with_price_columns():
    csv_text = "name,currency,Retail,Wholesale\nApple,USD,12.34,9.90\nBanana,usd,7.5,\n"

    rows = parse_product_csv(csv_text, LEVELS)

    assert [row.name for row in rows] == ["Apple", "Banana"]
    assert rows[0].prices == {"Retail": 1234, "Wholesale": 990}
    assert rows[1].currency == "USD"
    assert rows[1].prices == {"Retail": 750}


def test_headers_are_case_insensitive_and_title_is_accepted():
    csv_text = "TITLE,Currency,SKU,Description,wholesale\n  Big   Box ,eur, BX-1 ,Sturdy box,3\n"

    rows = parse_product_csv(csv_text, LEVELS)

    assert rows[0].name == "Big Box"
    assert rows[0].sku == "BX-1"
    assert rows[0].description == "Sturdy box"
    assert rows[0].prices == {"Wholesale": 300}


def test_unknown_columns_and_blank_rows_are_ignored():
    csv_text = "name,currency,colour\nApple,USD,red\n,,\n"

    rows = parse_product_csv(csv_text, LEVELS)

    assert len(rows) == 1
    assert rows[0].prices == {}


def test_missing_currency_header_is_rejected():
    with pytest.raises(ProductCsvError):
        parse_product_csv("name,sku\nApple,APL-1\n", LEVELS)


def test_missing_currency_value_reports_row():
    with pytest.raises(ProductCsvError) as exc_info:
        parse_product_csv("name,currency\nApple,USD\nPear,\n", LEVELS)

    assert exc_info.value.row == 3


def test_upload_without_rows_is_rejected():
    with pytest.raises(ProductCsvError):
        parse_product_csv("name,currency\n", LEVELS)


@pytest.mark.parametrize("raw, cents", [("12.50", 1250), ("0", 0), ("7", 700), ("0.05", 5)])
def test_price_to_cents(raw, cents):
    assert parse_price_cents(raw) == cents


@pytest.mark.parametrize("raw", ["-1", "abc", "1.005", "NaN"])
def test_bad_prices_are_rejected(raw):
    with pytest.raises(ValueError):
        parse_price_cents(raw)
