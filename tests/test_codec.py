import json
from datetime import datetime

import pytest
from pydantic import ValidationError

from openmarket.integrations import codec
from openmarket.integrations.contracts.products import (
    Currency,
    ModificationInformation,
    Product,
    ProductPage,
    SalesInformation,
)
from openmarket.integrations.errors import (
    DecodeError,
    EncodingError,
    InvalidTimestamp,
    MissingField,
    TypeMismatch,
)


def _bytes(document) -> bytes:
    return json.dumps(document).encode("utf-8")


def test_decode_product_page(product_page_wire):
    page = codec.decode(_bytes(product_page_wire), ProductPage)

    assert page.page_no == 1
    assert page.items_per_page == 20
    assert page.total_count == 2
    assert page.has_next is False
    assert [product.name for product in page.pages] == ["pizza", "pasta"]

    first = page.pages[0]
    assert first.id == 522
    assert first.currency is Currency.KRW
    assert first.discounted_price == 3000.0
    assert first.created_at == datetime(2022, 1, 18)
    assert first.issued_at == datetime(2022, 1, 19, 10, 20, 30, 450000)
    assert first.description is None


def test_decode_product_detail_with_images_and_vendor(product_detail_wire):
    product = codec.decode(_bytes(product_detail_wire), Product)

    assert product.description == "cheese pizza"
    assert product.images[0].thumbnail_url.endswith("thumb.png")
    assert product.images[0].succeed is True
    assert product.vendor.name == "pizza-vendor"
    assert product.vendor.created_at == datetime(2022, 1, 10, 9)


def test_decode_ignores_unknown_keys(product_wire):
    product_wire["favorite_topping"] = "pineapple"
    product_wire["nested_unknown"] = {"some_key": [1, 2]}

    product = codec.decode(_bytes(product_wire), Product)

    assert product.name == "pizza"


def test_decoded_product_is_immutable(product_wire):
    product = codec.decode(_bytes(product_wire), Product)

    with pytest.raises(ValidationError):
        product.price = 1.0


def test_missing_required_field(product_wire):
    del product_wire["name"]

    with pytest.raises(MissingField) as exc_info:
        codec.decode(_bytes(product_wire), Product)

    assert exc_info.value.field == ("name",)


def test_missing_field_inside_page_reports_snake_case_path(product_page_wire):
    del product_page_wire["pages"][1]["created_at"]

    with pytest.raises(MissingField) as exc_info:
        codec.decode(_bytes(product_page_wire), ProductPage)

    assert exc_info.value.field == ("pages", 1, "created_at")
    assert exc_info.value.field_name == "pages.1.created_at"


@pytest.mark.parametrize(
    "value",
    [
        "2021-13-40T99:99:99.99",
        "2022-01-18T00:00:00",
        "2022-01-18T00:00:00.000",
        "2022-01-18 00:00:00.00",
        "2022-01-18T00:00:00.00Z",
        "yesterday",
    ],
)
def test_invalid_timestamp(product_wire, value):
    product_wire["created_at"] = value

    with pytest.raises(InvalidTimestamp) as exc_info:
        codec.decode(_bytes(product_wire), Product)

    assert exc_info.value.field == ("created_at",)


@pytest.mark.parametrize(
    "key,value",
    [
        ("price", "cheap"),
        ("id", "abc"),
        ("stock", [1]),
        ("currency", "EUR"),
        ("created_at", 1642464000),
        ("issued_at", None),
    ],
)
def test_type_mismatch(product_wire, key, value):
    product_wire[key] = value

    with pytest.raises(TypeMismatch) as exc_info:
        codec.decode(_bytes(product_wire), Product)

    assert exc_info.value.field == (key,)


def test_body_that_is_not_json_raises_plain_decode_error():
    with pytest.raises(DecodeError) as exc_info:
        codec.decode(b"<html>502 Bad Gateway</html>", Product)

    assert type(exc_info.value) is DecodeError


def test_encode_sales_information_uses_snake_case_and_omits_unset_fields():
    information = SalesInformation(
        name="pizza",
        descriptions="cheese pizza",
        price=25000,
        currency=Currency.KRW,
        secret="password",
    )

    document = json.loads(codec.encode(information))

    assert document == {
        "name": "pizza",
        "descriptions": "cheese pizza",
        "price": 25000.0,
        "currency": "KRW",
        "secret": "password",
    }


def test_encode_sales_information_with_optional_fields():
    information = SalesInformation(
        name="pizza",
        descriptions="cheese pizza",
        price=25000,
        currency=Currency.USD,
        discounted_price=500,
        stock=3,
        secret="password",
    )

    document = json.loads(codec.encode(information))

    assert document["discounted_price"] == 500.0
    assert document["stock"] == 3
    assert "discountedPrice" not in document


def test_encode_modification_is_sparse():
    information = ModificationInformation(secret="password", thumbnail_id=350, stock=0)

    document = json.loads(codec.encode(information))

    assert document == {"secret": "password", "thumbnail_id": 350, "stock": 0}


def test_sales_information_round_trip():
    information = SalesInformation(
        name="피자",
        descriptions="치즈 피자",
        price=25000.5,
        currency=Currency.KRW,
        discounted_price=1000,
        stock=7,
        secret="password",
    )

    assert codec.decode(codec.encode(information), SalesInformation) == information


def test_encode_product_writes_wire_timestamps_and_vendor_key(product_detail_wire):
    product = codec.decode(_bytes(product_detail_wire), Product)

    document = json.loads(codec.encode(product))

    assert document["created_at"] == "2022-01-18T00:00:00.00"
    assert document["issued_at"] == "2022-01-19T10:20:30.45"
    assert document["vendors"]["name"] == "pizza-vendor"
    assert document["images"][0]["thumbnail_url"].endswith("thumb.png")
    assert codec.decode(codec.encode(product), Product) == product


def test_encode_rejects_non_models():
    with pytest.raises(EncodingError):
        codec.encode({"name": "pizza"})


def test_convert_keys_recurses_into_lists():
    converted = codec.convert_keys({"page_no": 1, "pages": [{"created_at": "x"}]}, str.upper)

    assert converted == {"PAGE_NO": 1, "PAGES": [{"CREATED_AT": "x"}]}
