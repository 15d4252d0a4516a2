from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RewardRecord(BaseModel):
    """
    Normalized reward listing, the unit of deduplication and of final output.

    Frozen, so instances hash and compare over their five field values:
    a record is its own dedup key, whichever page or slug produced it.
    Field declaration order is the output key order.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Trimmed award title")
    price: int = Field(..., description="Price in loyalty points, unconverted")
    description: str = Field("", description="Trimmed short description or subtitle")
    stock: int = Field(-1, description="Remaining quantity; -1 when unknown")
    partner: str = Field("", description="Location/property/partner/outlet fulfilling the reward")


# ---------------------------------------------------------------------------
# Upstream wire schema
#
# Owned by the rewards API. Keys are PascalCase; anything we do not model is
# ignored. Absent keys and JSON null decode to the zero value of the field;
# scalars are strict, so a wrong-typed value fails the whole page.
# ---------------------------------------------------------------------------


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


def _none_to_empty_str(v):
    return "" if v is None else v


def _none_to_zero(v):
    return 0 if v is None else v


def _none_to_empty_list(v):
    return [] if v is None else v


class Award(_WireModel):
    """One raw reward entry inside a lane."""

    award_id: int = Field(0, alias="AwardID", strict=True)
    offer_id: int = Field(0, alias="OfferID", strict=True)
    type_id: int = Field(0, alias="TypeID", strict=True)
    partner_id: int = Field(0, alias="PartnerId", strict=True)
    property_id: int = Field(0, alias="PropertyId", strict=True)

    title: str = Field("", alias="Title", strict=True)
    price: int = Field(0, alias="Price", strict=True)
    quantity: int = Field(0, alias="Quantity", strict=True)

    short_description: str = Field("", alias="ShortDescription", strict=True)
    sub_title: str = Field("", alias="SubTitle", strict=True)
    snipe_text: str = Field("", alias="SnipeText", strict=True)
    image_url: str = Field("", alias="ImageURL", strict=True)
    expire_time: str = Field("", alias="ExpireTime", strict=True)

    location_name: str = Field("", alias="LocationName", strict=True)
    property_name: str = Field("", alias="PropertyName", strict=True)
    partner_name: str = Field("", alias="PartnerName", strict=True)
    outlet_name: str = Field("", alias="OutletName", strict=True)

    featured: bool = Field(False, alias="Featured", strict=True)
    is_give_away: bool = Field(False, alias="IsGiveAway", strict=True)
    is_premium: bool = Field(False, alias="IsPremium", strict=True)

    @field_validator(
        "title",
        "short_description",
        "sub_title",
        "snipe_text",
        "image_url",
        "expire_time",
        "location_name",
        "property_name",
        "partner_name",
        "outlet_name",
        mode="before",
    )
    @classmethod
    def validate_text_fields(cls, v):
        return _none_to_empty_str(v)

    @field_validator(
        "award_id",
        "offer_id",
        "type_id",
        "partner_id",
        "property_id",
        "price",
        "quantity",
        mode="before",
    )
    @classmethod
    def validate_int_fields(cls, v):
        return _none_to_zero(v)

    @field_validator("featured", "is_give_away", "is_premium", mode="before")
    @classmethod
    def validate_flags(cls, v):
        return False if v is None else v


class LaneMeta(_WireModel):
    order: int = Field(0, alias="Order", strict=True)
    type: str = Field("", alias="Type", strict=True)
    featured: bool = Field(False, alias="Featured", strict=True)
    title: str = Field("", alias="Title", strict=True)
    occupied_slots: int = Field(0, alias="OccupiedSlots", strict=True)
    available_slots: int = Field(0, alias="AvailableSlots", strict=True)
    description: Any = Field(None, alias="Description")
    image_url: Any = Field(None, alias="ImageURL")
    id: Any = Field(None, alias="_id")

    @field_validator("type", "title", mode="before")
    @classmethod
    def validate_text_fields(cls, v):
        return _none_to_empty_str(v)

    @field_validator("order", "occupied_slots", "available_slots", mode="before")
    @classmethod
    def validate_int_fields(cls, v):
        return _none_to_zero(v)

    @field_validator("featured", mode="before")
    @classmethod
    def validate_featured(cls, v):
        return False if v is None else v


class Lane(_WireModel):
    """A grouping of awards within one page response."""

    meta: LaneMeta = Field(default_factory=LaneMeta, alias="Meta")
    awards: List[Award] = Field(default_factory=list, alias="Awards")
    sections: Any = Field(None, alias="Sections")

    @field_validator("meta", mode="before")
    @classmethod
    def validate_meta(cls, v):
        return {} if v is None else v

    @field_validator("awards", mode="before")
    @classmethod
    def validate_awards(cls, v):
        return _none_to_empty_list(v)


class PageMeta(_WireModel):
    order: int = Field(0, alias="Order", strict=True)
    title: str = Field("", alias="Title", strict=True)
    sub_title: str = Field("", alias="SubTitle", strict=True)
    description: str = Field("", alias="Description", strict=True)
    hero_image_url: str = Field("", alias="HeroImageURL", strict=True)
    logo_image_url: str = Field("", alias="LogoImageURL", strict=True)
    cell_image_url: str = Field("", alias="CellImageURL", strict=True)

    @field_validator(
        "title",
        "sub_title",
        "description",
        "hero_image_url",
        "logo_image_url",
        "cell_image_url",
        mode="before",
    )
    @classmethod
    def validate_text_fields(cls, v):
        return _none_to_empty_str(v)

    @field_validator("order", mode="before")
    @classmethod
    def validate_order(cls, v):
        return _none_to_zero(v)


class PageWrapper(_WireModel):
    """Full JSON body of one ``{slug}/{page}`` response."""

    meta: PageMeta = Field(default_factory=PageMeta, alias="Meta")
    lanes: List[Lane] = Field(default_factory=list, alias="Lanes")
    message: Any = Field(None, alias="Message")
    error_message: Any = Field(None, alias="ErrorMessage")

    @field_validator("meta", mode="before")
    @classmethod
    def validate_meta(cls, v):
        return {} if v is None else v

    @field_validator("lanes", mode="before")
    @classmethod
    def validate_lanes(cls, v):
        return _none_to_empty_list(v)
