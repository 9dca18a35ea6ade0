import pytest

from storefront_forms import ErrorCode, validate_category_form, validate_subcategory_form


def test_valid_category_defaults_featured(category_record):
    result = validate_category_form(category_record)

    assert result.ok
    assert result.data == {
        "name": "Electronics",
        "image": [{"url": "http://x/a.png"}],
        "url": "electronics",
        "featured": False,
    }


def test_normalized_category_is_stable(category_record):
    data = validate_category_form(category_record).data

    again = validate_category_form(data)
    assert again.ok
    assert again.data == data


def test_double_hyphen_in_url_is_rejected(category_record):
    category_record["url"] = "electro--nics"
    result = validate_category_form(category_record)

    assert list(result.errors) == ["url"]
    assert result.codes("url") == [ErrorCode.PATTERN_MISMATCH]
    assert result.messages()["url"][0].startswith(
        "Only letters, numbers, hyphen, and underscore are allowed in the category url"
    )


@pytest.mark.parametrize("url", ["home_garden", "home-garden", "HomeGarden2"])
def test_slugs_with_single_separators_are_accepted(category_record, url):
    category_record["url"] = url

    assert validate_category_form(category_record).ok


@pytest.mark.parametrize("url", ["home_-garden", "home garden", "home/garden"])
def test_invalid_slugs_are_rejected(category_record, url):
    category_record["url"] = url

    assert validate_category_form(category_record).codes("url") == [ErrorCode.PATTERN_MISMATCH]


def test_short_name_with_symbol_reports_both_failures(category_record):
    category_record["name"] = "$"
    result = validate_category_form(category_record)

    assert result.messages()["name"] == [
        "Category name must be at least 2 characters long.",
        "Only letters, numbers, and spaces are allowed in the category name.",
    ]


def test_name_allows_apostrophe_and_ampersand(category_record):
    category_record["name"] = "Men's Shoes & Boots"

    assert validate_category_form(category_record).ok


@pytest.mark.parametrize("images", [[], [{"url": "a"}, {"url": "b"}]])
def test_exactly_one_image(category_record, images):
    category_record["image"] = images
    result = validate_category_form(category_record)

    assert result.messages() == {"image": ["Choose a category image."]}
    assert result.codes("image") == [ErrorCode.ARRAY_CARDINALITY_VIOLATION]


def test_image_entries_need_a_url(category_record):
    category_record["image"] = [{"src": "http://x/a.png"}]

    assert validate_category_form(category_record).codes("image") == [ErrorCode.INVALID_TYPE]


def test_featured_must_be_boolean(category_record):
    category_record["featured"] = "yes"

    assert validate_category_form(category_record).codes("featured") == [ErrorCode.INVALID_TYPE]


def test_subcategory_requires_category_id(subcategory_record):
    del subcategory_record["categoryId"]
    result = validate_subcategory_form(subcategory_record)

    assert result.messages() == {"categoryId": ["Category is required."]}


def test_subcategory_category_id_must_be_uuid(subcategory_record):
    subcategory_record["categoryId"] = "electronics"
    result = validate_subcategory_form(subcategory_record)

    assert result.codes("categoryId") == [ErrorCode.INVALID_FORMAT]


def test_valid_subcategory(subcategory_record):
    result = validate_subcategory_form(subcategory_record)

    assert result.ok
    assert result.data["featured"] is False
    assert result.data["categoryId"] == subcategory_record["categoryId"]


def test_subcategory_messages_name_the_subcategory(subcategory_record):
    subcategory_record["image"] = []
    subcategory_record["url"] = "x"
    result = validate_subcategory_form(subcategory_record)

    assert result.messages()["image"] == ["Choose only one subCategory image"]
    assert result.messages()["url"] == ["SubCategory url must be at least 2 characters long."]
