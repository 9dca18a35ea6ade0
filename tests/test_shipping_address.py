import pytest

from storefront_forms import ErrorCode, validate_shipping_address


def test_valid_address_defaults(address_record):
    result = validate_shipping_address(address_record)

    assert result.ok
    assert result.data["default"] is False
    assert "address2" not in result.data


def test_normalized_address_is_stable(address_record):
    data = validate_shipping_address(address_record).data

    assert validate_shipping_address(data).data == data


def test_letters_in_phone(address_record):
    address_record["phone"] = "abc"
    result = validate_shipping_address(address_record)

    assert result.messages() == {"phone": ["Invalid phone number format."]}
    assert result.codes("phone") == [ErrorCode.PATTERN_MISMATCH]


@pytest.mark.parametrize("field", ["firstName", "lastName"])
@pytest.mark.parametrize("value", ["Mary-Jane", "O'Neil", "Ann Marie", "Zoë"])
def test_names_are_letters_only(address_record, field, value):
    address_record[field] = value

    assert validate_shipping_address(address_record).messages() == {
        field: ["No special characters are allowed in name."],
    }


@pytest.mark.parametrize("field,message", [
    ("firstName", "First name must be a valid string."),
    ("phone", "Phone number must be a string."),
    ("countryId", "Country must be a valid string."),
    ("zip_code", "Zip code must be a valid string."),
])
def test_type_messages(address_record, field, message):
    address_record[field] = 12345

    assert validate_shipping_address(address_record).messages() == {field: [message]}


@pytest.mark.parametrize("field,value,message", [
    ("address1", "12 M", "Address line 1 should be at least 5 characters long."),
    ("address2", "x" * 101, "Address line 2 cannot exceed 100 characters."),
    ("state", "N", "State should be at least 2 characters long."),
    ("city", "x" * 51, "City cannot exceed 50 characters."),
    ("zip_code", "12345678901", "Zip code cannot exceed 10 characters."),
])
def test_length_bounds(address_record, field, value, message):
    address_record[field] = value
    result = validate_shipping_address(address_record)

    assert result.messages() == {field: [message]}
    assert result.codes(field) == [ErrorCode.LENGTH_OUT_OF_RANGE]


def test_missing_country(address_record):
    del address_record["countryId"]

    assert validate_shipping_address(address_record).messages() == {"countryId": ["Country is required."]}


def test_default_flag_is_kept(address_record):
    address_record["default"] = True

    assert validate_shipping_address(address_record).data["default"] is True


def test_phone_with_non_ascii_digits(address_record):
    address_record["phone"] = "١٢٣٤"

    assert validate_shipping_address(address_record).codes("phone") == [ErrorCode.PATTERN_MISMATCH]
