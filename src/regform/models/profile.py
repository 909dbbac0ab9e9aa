"""
Nested profile blocks carried by a registration payload.

These objects are not rendered as single form fields; the registration
UI edits them through grouped inputs (location, contact, pricing) and
the aggregate schema validates them as nested objects. Keys follow the
camelCase used by the payload.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic_core import PydanticCustomError

from regform.rules import MinText, NonNegative, OneOf, StrictText, UrlText

GENDERS = ("male", "female", "other", "prefer_not_to_say")
PRICING_MODELS = ("hourly", "daily", "fixed", "custom")


class _PayloadModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Location(_PayloadModel):
    country: StrictText | None = None
    state: StrictText | None = None
    city: StrictText | None = None
    zip_code: StrictText | None = Field(default=None, alias="zipCode")


class SocialMedia(_PayloadModel):
    facebook: StrictText | None = None
    instagram: StrictText | None = None
    twitter: StrictText | None = None
    linkedin: StrictText | None = None


class ContactDetails(_PayloadModel):
    """Public business contact block for vendors and planners."""

    phone: MinText(1, "Phone number is required")
    website: UrlText("Invalid website URL") | None = None
    social_media: SocialMedia | None = Field(default=None, alias="socialMedia")

    @model_validator(mode="before")
    @classmethod
    def _blank_website(cls, data):
        # The UI seeds website with "", which means "not provided"
        if isinstance(data, dict) and data.get("website") == "":
            data = {**data, "website": None}
        return data


class Document(_PayloadModel):
    """An uploaded verification document (storage is external)."""

    type: StrictText
    url: UrlText("Invalid document URL")
    file_name: StrictText = Field(alias="fileName")
    file_size: NonNegative("File size cannot be negative") = Field(alias="fileSize")
    mime_type: StrictText = Field(alias="mimeType")


class VendorPricing(_PayloadModel):
    """
    Vendor pricing block.

    The pricing select submits only the model ("hourly"); the full
    profile submits the whole object. Both shapes are accepted, and the
    object shape must carry a base price.
    """

    currency: StrictText = "USD"
    base_price: NonNegative("Base price cannot be negative") | None = Field(
        default=None, alias="basePrice"
    )
    pricing_model: OneOf(PRICING_MODELS, "Invalid pricing model") = Field(alias="pricingModel")

    @model_validator(mode="before")
    @classmethod
    def _check_shape(cls, data):
        if isinstance(data, str):
            return {"pricingModel": data}
        if isinstance(data, dict) and data.get("basePrice", data.get("base_price")) is None:
            raise PydanticCustomError("missing", "Base price is required")
        return data


class PlannerPricing(_PayloadModel):
    currency: StrictText = "USD"
    consultation_fee: NonNegative("Consultation fee cannot be negative") = Field(
        alias="consultationFee"
    )
    package_pricing: OneOf(PRICING_MODELS, "Invalid package pricing") = Field(
        alias="packagePricing"
    )
