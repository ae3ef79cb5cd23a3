import pytest

from orderhub.domain.validation import (
    normalize_currency,
    normalize_email,
    sanitize_inline_text,
    sanitize_multiline_text,
    sanitize_optional_text,
    sanitize_sku,
)


def test_inline_text_collapses_whitespace_and_drops_control_chars():
    assert sanitize_inline_text("  Premium \t  Widget\x07 ") == "Premium Widget"


def test_multiline_text_keeps_single_blank_line():
    raw = "\n\n First line \n\n\n  second   line \n\n"

    assert sanitize_multiline_text(raw) == "First line\n\nsecond line"


def test_optional_text_turns_blank_into_none():
    assert sanitize_optional_text("   ") is None
    assert sanitize_optional_text(None) is None
    assert sanitize_optional_text(" note ") == "note"


def test_sku_is_trimmed_but_keeps_inner_spaces():
    assert sanitize_sku("  AB 12 ") == "AB 12"
    assert sanitize_sku("   ") is None


@pytest.mark.parametrize("raw, expected", [("usd", "USD"), (" eur ", "EUR"), ("Gbp", "GBP")])
def test_currency_is_uppercased(raw, expected):
    assert normalize_currency(raw) == expected


@pytest.mark.parametrize("raw", ["", "US", "USDD", "U$D", "12A", "ÉUR"])
def test_invalid_currency_is_rejected(raw):
    with pytest.raises(ValueError):
        normalize_currency(raw)


def test_email_is_lowercased():
    assert normalize_email("  Buyer@Acme.Example.COM ") == "buyer@acme.example.com"


@pytest.mark.parametrize("raw", ["not-an-email", "buyer@acme", "two@@acme.example.com", ""])
def test_invalid_email_is_rejected(raw):
    with pytest.raises(ValueError, match="Invalid email address"):
        normalize_email(raw)
