"""Shared fixtures: one valid submission per marketplace form."""
import pytest

CATEGORY_ID = "123e4567-e89b-12d3-a456-426614174000"
SUBCATEGORY_ID = "9b2f6c1e-4d3a-4f5b-8c7d-2e1f0a9b8c7d"
COUNTRY_ID = "0f8fad5b-d9cb-469f-a165-70867728950e"

PRODUCT_DESCRIPTION = "Breathable mesh upper with a grippy outsole. " * 5


@pytest.fixture
def category_record():
    return {
        "name": "Electronics",
        "image": [{"url": "http://x/a.png"}],
        "url": "electronics",
    }


@pytest.fixture
def subcategory_record(category_record):
    return dict(category_record, name="Laptops", url="laptops", categoryId=CATEGORY_ID)


@pytest.fixture
def store_record():
    return {
        "name": "Acme_Outfitters-Store",
        "description": "Outdoor gear and apparel for every season of the year.",
        "email": "owner@acmeshop.com",
        "phone": "+254700000000",
        "logo": [{"url": "https://cdn.acmeshop.com/logo.png"}],
        "cover": [{"url": "https://cdn.acmeshop.com/cover.png"}],
        "url": "acme-outfitters",
    }


@pytest.fixture
def product_record():
    return {
        "name": "Trail Runner",
        "description": PRODUCT_DESCRIPTION,
        "variantName": "Trail Runner Black",
        "images": [
            {"url": "https://cdn.acmeshop.com/p/1.png"},
            {"url": "https://cdn.acmeshop.com/p/2.png"},
            {"url": "https://cdn.acmeshop.com/p/3.png"},
        ],
        "variantImage": [{"url": "https://cdn.acmeshop.com/p/black.png"}],
        "categoryId": CATEGORY_ID,
        "subCategoryId": SUBCATEGORY_ID,
        "brand": "Stride",
        "sku": "TR-001-BLK",
        "weight": 0.8,
        "keywords": ["shoes", "running", "trail", "outdoor", "sport"],
        "colors": [{"color": "Black"}],
        "sizes": [{"size": "M", "quantity": 10, "price": 89.99, "discount": 0}],
        "product_specs": [{"name": "Material", "value": "Mesh"}],
        "variant_specs": [{"name": "Color", "value": "Black"}],
        "questions": [{"question": "Is it waterproof?", "answer": "No, it is water resistant."}],
        "shippingFeeMethod": "ITEM",
    }


@pytest.fixture
def address_record():
    return {
        "countryId": COUNTRY_ID,
        "firstName": "Amina",
        "lastName": "Okafor",
        "phone": "+254700000000",
        "address1": "12 Market Street",
        "state": "Nairobi",
        "city": "Nairobi",
        "zip_code": "00100",
    }
