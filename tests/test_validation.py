"""Unit tests for listing and interest validators"""
import pytest

from estate_listings.models.property import PropertyStatus, LandSizeUnit
from estate_listings.services.validation import (
    validate_property_draft,
    validate_property_update,
    validate_interest,
    validate_status,
)


class TestPropertyDraftValidation:
    """Tests for seller submission validation"""

    def test_valid_draft_normalizes_to_columns(self, make_draft):
        result = validate_property_draft(make_draft(title="  Riverside plot  "))

        assert result.ok
        assert result.errors == {}
        assert result.data["title"] == "Riverside plot"
        assert result.data["land_size_unit"] == LandSizeUnit.ACRES
        assert result.data["seller_name"] == "Jane Seller"
        assert result.data["seller_email"] == "jane@example.com"
        assert result.data["status"] == PropertyStatus.PENDING

    def test_submitted_status_is_ignored(self, make_draft):
        result = validate_property_draft(make_draft(status="approved"))

        assert result.ok
        assert result.data["status"] == PropertyStatus.PENDING

    def test_unit_defaults_to_sqft(self, make_draft):
        draft = make_draft()
        del draft["land_size_unit"]

        result = validate_property_draft(draft)

        assert result.data["land_size_unit"] == LandSizeUnit.SQFT

    def test_seller_details_default_empty(self, make_draft):
        draft = make_draft()
        del draft["seller"]["details"]

        assert validate_property_draft(draft).data["seller_details"] == ""

    @pytest.mark.parametrize("field_name", ["title", "description", "location"])
    def test_blank_text_fields_rejected(self, make_draft, field_name):
        result = validate_property_draft(make_draft(**{field_name: "   "}))

        assert not result.ok
        assert field_name in result.errors

    @pytest.mark.parametrize("value", [0, -1, None, "big", True, float("nan"), float("inf"), float("-inf")])
    def test_land_size_must_be_positive_number(self, make_draft, value):
        result = validate_property_draft(make_draft(land_size=value))

        assert not result.ok
        assert "land_size" in result.errors

    def test_asking_price_must_be_positive(self, make_draft):
        result = validate_property_draft(make_draft(asking_price=0))

        assert result.errors["asking_price"] == "asking_price must be greater than 0"

    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_asking_price_must_be_finite(self, make_draft, value):
        result = validate_property_draft(make_draft(asking_price=value))

        assert result.errors["asking_price"] == "asking_price must be a finite number"

    def test_update_rejects_infinite_price(self):
        result = validate_property_update({"asking_price": float("inf")})

        assert not result.ok
        assert "asking_price" in result.errors

    def test_unknown_unit_rejected(self, make_draft):
        result = validate_property_draft(make_draft(land_size_unit="furlongs"))

        assert "land_size_unit" in result.errors

    def test_images_required(self, make_draft):
        assert "images" in validate_property_draft(make_draft(images=[])).errors
        assert "images" in validate_property_draft(make_draft(images=["", "x"])).errors

    def test_missing_seller_rejected(self, make_draft):
        draft = make_draft()
        del draft["seller"]

        assert validate_property_draft(draft).errors == {"seller": "Seller contact details are required"}

    def test_seller_contact_fields_required(self, make_draft):
        result = validate_property_draft(make_draft(seller={"name": "", "phone": None, "email": "nope"}))

        assert set(result.errors) == {"seller.name", "seller.phone", "seller.email"}

    def test_all_errors_reported_together(self, make_draft):
        result = validate_property_draft({})

        assert {"title", "description", "location", "land_size", "asking_price", "images", "seller"} <= set(result.errors)


class TestPropertyUpdateValidation:
    """Tests for partial admin edits"""

    def test_only_present_fields_checked(self):
        result = validate_property_update({"asking_price": 1000})

        assert result.ok
        assert result.data == {"asking_price": 1000.0}

    @pytest.mark.parametrize("field_name", ["seller", "buyer_interests", "status", "id", "created_at"])
    def test_protected_fields_refused(self, field_name):
        result = validate_property_update({field_name: "x"})

        assert result.errors[field_name] == "Field cannot be modified"

    def test_unknown_field_refused(self):
        assert validate_property_update({"colour": "blue"}).errors == {"colour": "Unknown field"}

    def test_empty_payload_refused(self):
        assert "_payload" in validate_property_update({}).errors

    def test_invalid_values_refused(self):
        result = validate_property_update({"land_size": -3, "images": []})

        assert set(result.errors) == {"land_size", "images"}

    def test_null_unit_refused(self):
        assert "land_size_unit" in validate_property_update({"land_size_unit": None}).errors

    def test_clearing_video_allowed(self):
        result = validate_property_update({"youtube_video": ""})

        assert result.ok
        assert result.data == {"youtube_video": None}


class TestInterestValidation:
    """Tests for buyer interest validation"""

    def test_message_defaults_to_empty(self):
        result = validate_interest({"name": "Bob", "phone": "0700", "email": "bob@example.com"})

        assert result.ok
        assert result.data["message"] == ""

    @pytest.mark.parametrize("missing", ["name", "phone", "email"])
    def test_contact_fields_required(self, missing):
        payload = {"name": "Bob", "phone": "0700", "email": "bob@example.com"}
        del payload[missing]

        result = validate_interest(payload)

        assert not result.ok
        assert missing in result.errors

    def test_malformed_email_rejected(self):
        result = validate_interest({"name": "Bob", "phone": "0700", "email": "bob-at-example"})

        assert result.errors == {"email": "Invalid email address"}


class TestStatusValidation:
    """Tests for lifecycle status values"""

    @pytest.mark.parametrize("value", ["pending", "approved", "rejected"])
    def test_known_statuses(self, value):
        assert validate_status(value).data["status"] == PropertyStatus(value)

    @pytest.mark.parametrize("value", ["archived", "", None, "APPROVED"])
    def test_other_values_refused(self, value):
        assert not validate_status(value).ok
