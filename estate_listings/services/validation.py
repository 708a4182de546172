"""Input validation for listings and buyer interest

Each validator takes a plain dict (snake_case keys) and returns a
ValidationResult instead of raising, so callers can decide how to surface
field errors before anything reaches the database.
"""
import math
from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Dict, List, Optional

from email_validator import validate_email, EmailNotValidError

from estate_listings.models.property import PropertyStatus, LandSizeUnit


PROTECTED_FIELDS = ("id", "seller", "buyer_interests", "status", "created_at", "updated_at")

# Listing fields an admin may edit after submission
EDITABLE_FIELDS = (
    "title",
    "description",
    "location",
    "land_size",
    "land_size_unit",
    "asking_price",
    "images",
    "youtube_video",
)


@dataclass
class ValidationResult:
    """Outcome of validating one payload"""
    ok: bool
    data: Dict[str, Any] = field(default_factory=dict)
    errors: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def success(cls, data: Dict[str, Any]) -> "ValidationResult":
        return cls(ok=True, data=data)

    @classmethod
    def failure(cls, errors: Dict[str, str]) -> "ValidationResult":
        return cls(ok=False, errors=errors)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _text(value: Any, field_name: str, errors: Dict[str, str], strip: bool = True) -> Optional[str]:
    if _is_blank(value):
        errors[field_name] = f"{field_name} is required"
        return None
    if not isinstance(value, str):
        errors[field_name] = f"{field_name} must be text"
        return None
    return value.strip() if strip else value


def _positive_number(value: Any, field_name: str, errors: Dict[str, str]) -> Optional[float]:
    if value is None:
        errors[field_name] = f"{field_name} is required"
        return None
    # bool is a subclass of int; True is not a land size
    if isinstance(value, bool) or not isinstance(value, Real):
        errors[field_name] = f"{field_name} must be a number"
        return None
    if not math.isfinite(value):
        errors[field_name] = f"{field_name} must be a finite number"
        return None
    if value <= 0:
        errors[field_name] = f"{field_name} must be greater than 0"
        return None
    return float(value)


def _email(value: Any, field_name: str, errors: Dict[str, str]) -> Optional[str]:
    text = _text(value, field_name, errors)
    if text is None:
        return None
    try:
        return validate_email(text, check_deliverability=False).normalized
    except EmailNotValidError:
        errors[field_name] = "Invalid email address"
        return None


def _land_size_unit(value: Any, errors: Dict[str, str]) -> Optional[LandSizeUnit]:
    if value is None:
        return LandSizeUnit.SQFT
    try:
        return LandSizeUnit(value)
    except ValueError:
        allowed = ", ".join(u.value for u in LandSizeUnit)
        errors["land_size_unit"] = f"land_size_unit must be one of: {allowed}"
        return None


def _images(value: Any, errors: Dict[str, str]) -> Optional[List[str]]:
    if not value:
        errors["images"] = "At least one image is required"
        return None
    if not isinstance(value, (list, tuple)) or any(_is_blank(v) or not isinstance(v, str) for v in value):
        errors["images"] = "images must be a list of image URLs"
        return None
    return [v.strip() for v in value]


def _youtube_video(value: Any, errors: Dict[str, str]) -> Optional[str]:
    if _is_blank(value):
        return None
    if not isinstance(value, str):
        errors["youtube_video"] = "youtube_video must be text"
        return None
    return value.strip()


def validate_status(value: Any) -> ValidationResult:
    """Check a lifecycle status value"""
    try:
        return ValidationResult.success({"status": PropertyStatus(value)})
    except ValueError:
        allowed = ", ".join(s.value for s in PropertyStatus)
        return ValidationResult.failure({"status": f"status must be one of: {allowed}"})


def validate_property_draft(payload: Dict[str, Any]) -> ValidationResult:
    """Validate a seller submission.

    Any status in the payload is ignored: new listings always start pending.
    """
    errors: Dict[str, str] = {}
    data: Dict[str, Any] = {
        "title": _text(payload.get("title"), "title", errors),
        "description": _text(payload.get("description"), "description", errors, strip=False),
        "location": _text(payload.get("location"), "location", errors),
        "land_size": _positive_number(payload.get("land_size"), "land_size", errors),
        "land_size_unit": _land_size_unit(payload.get("land_size_unit"), errors),
        "asking_price": _positive_number(payload.get("asking_price"), "asking_price", errors),
        "images": _images(payload.get("images"), errors),
        "youtube_video": _youtube_video(payload.get("youtube_video"), errors),
        "status": PropertyStatus.PENDING,
    }

    seller = payload.get("seller")
    if not isinstance(seller, dict):
        errors["seller"] = "Seller contact details are required"
    else:
        data["seller_name"] = _text(seller.get("name"), "seller.name", errors)
        data["seller_phone"] = _text(seller.get("phone"), "seller.phone", errors)
        data["seller_email"] = _email(seller.get("email"), "seller.email", errors)
        details = seller.get("details")
        data["seller_details"] = details.strip() if isinstance(details, str) else ""

    if errors:
        return ValidationResult.failure(errors)
    return ValidationResult.success(data)


def validate_property_update(payload: Dict[str, Any]) -> ValidationResult:
    """Validate a partial admin edit. Only the fields present are checked."""
    if not payload:
        return ValidationResult.failure({"_payload": "No fields to update"})

    errors: Dict[str, str] = {}
    data: Dict[str, Any] = {}

    for name in payload:
        if name in PROTECTED_FIELDS:
            errors[name] = "Field cannot be modified"
        elif name not in EDITABLE_FIELDS:
            errors[name] = "Unknown field"

    checks = {
        "title": lambda v: _text(v, "title", errors),
        "description": lambda v: _text(v, "description", errors, strip=False),
        "location": lambda v: _text(v, "location", errors),
        "land_size": lambda v: _positive_number(v, "land_size", errors),
        "land_size_unit": lambda v: _land_size_unit(v, errors) if v is not None else None,
        "asking_price": lambda v: _positive_number(v, "asking_price", errors),
        "images": lambda v: _images(v, errors),
        "youtube_video": lambda v: _youtube_video(v, errors),
    }
    for name, check in checks.items():
        if name in payload:
            data[name] = check(payload[name])

    if "land_size_unit" in data and data["land_size_unit"] is None and "land_size_unit" not in errors:
        errors["land_size_unit"] = "land_size_unit cannot be empty"

    if errors:
        return ValidationResult.failure(errors)
    return ValidationResult.success(data)


def validate_interest(payload: Dict[str, Any]) -> ValidationResult:
    """Validate a buyer interest submission. Message is optional."""
    errors: Dict[str, str] = {}
    data = {
        "name": _text(payload.get("name"), "name", errors),
        "phone": _text(payload.get("phone"), "phone", errors),
        "email": _email(payload.get("email"), "email", errors),
    }
    message = payload.get("message")
    data["message"] = message if isinstance(message, str) else ""

    if errors:
        return ValidationResult.failure(errors)
    return ValidationResult.success(data)
