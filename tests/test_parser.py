from catalog.models import Product, ProductParseError
from catalog.parser import parse_csv

import pytest


def test_single_row_matches_trimmed_cells():
    text = "Category, Name ,Price,ImageURL\n furniture , Teak Chair ,NT$ 100, chair.png \n"
    products = parse_csv(text)
    assert len(products) == 1
    p = products[0]
    assert p.category == "furniture"
    assert p.name == "Teak Chair"
    assert p.price == "NT$ 100"
    assert p.image_url == "chair.png"


def test_row_without_category_is_dropped():
    text = "Category,Name,Price,ImageURL\n,Nameless,1,a.png\nchair,Stool,2,b.png\n"
    products = parse_csv(text)
    assert [p.name for p in products] == ["Stool"]


def test_blank_and_whitespace_lines_ignored():
    text = "Category,Name,Price,ImageURL\n\n   \nchair,Stool,2,b.png\n\n\t\n"
    assert len(parse_csv(text)) == 1


def test_short_row_leaves_missing_fields_none():
    products = parse_csv("Category,Name,Price,ImageURL\nvintage,Vase\n")
    assert len(products) == 1
    assert products[0].name == "Vase"
    assert products[0].price is None
    assert products[0].image_url is None


def test_extra_columns_kept_and_crlf_handled():
    text = "Category,Name,Price,ImageURL,Note\r\nchair,Stool,2,b.png,oak\r\n"
    products = parse_csv(text)
    assert products[0].extra == {"Note": "oak"}
    assert products[0].image_url == "b.png"


def test_naive_split_does_not_honour_quotes():
    products = parse_csv('Category,Name,Price,ImageURL\nchair,"Stool, oak",2,b.png\n')
    assert products[0].name == '"Stool'
    assert products[0].price == 'oak"'


@pytest.mark.parametrize("text", [None, "", "\n\n", "Category,Name,Price,ImageURL\n"])
def test_empty_inputs_yield_no_products(text):
    assert parse_csv(text) == []


def test_product_from_row_requires_category():
    with pytest.raises(ProductParseError):
        Product.from_row({"Category": "", "Name": "x"})
    p = Product.from_row({"Category": "chair", "Name": "x"})
    assert p.to_dict()["Category"] == "chair"


@pytest.mark.parametrize("separator", ["\x85", "\u2028", "\x0c"])
def test_unicode_line_breaks_stay_inside_cell(separator):
    text = f"Category,Name,Price,ImageURL\nchair,Oak{separator}Stool,2,b.png\n"
    products = parse_csv(text)
    assert len(products) == 1
    assert products[0].category == "chair"
    assert products[0].name == f"Oak{separator}Stool"
    assert products[0].image_url == "b.png"


def test_to_dict_keeps_sheet_column_order():
    text = "Name,Note,Category,ImageURL,Price\nStool,oak,chair,b.png,2\n"
    product = parse_csv(text)[0]
    assert list(product.to_dict()) == ["Name", "Note", "Category", "ImageURL", "Price"]
    assert product.to_dict()["Note"] == "oak"
