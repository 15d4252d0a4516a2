from __future__ import annotations

from typing import Set

from .schema import Award, Lane, PageWrapper, RewardRecord


def _first_non_empty(*values: str) -> str:
    for value in values:
        if value != "":
            return value
    return ""


def normalize_award(award: Award) -> RewardRecord:
    """
    Map one raw award to a RewardRecord.

    Precedence:
      partner      LocationName > PropertyName > PartnerName > OutletName
      description  ShortDescription > SubTitle (chosen value is trimmed)

    Quantity below zero becomes the -1 "unknown" sentinel; 0 stays 0.
    Price passes through untouched.
    """
    partner = _first_non_empty(
        award.location_name,
        award.property_name,
        award.partner_name,
        award.outlet_name,
    )
    description = _first_non_empty(award.short_description, award.sub_title)
    stock = award.quantity if award.quantity >= 0 else -1

    return RewardRecord(
        name=award.title.strip(),
        price=award.price,
        description=description.strip(),
        stock=stock,
        partner=partner,
    )


def normalize_lane(lane: Lane) -> Set[RewardRecord]:
    return {normalize_award(award) for award in lane.awards}


def normalize_page(page: PageWrapper) -> Set[RewardRecord]:
    """Union of the normalized awards across every lane of a page."""
    records: Set[RewardRecord] = set()
    for lane in page.lanes:
        records |= normalize_lane(lane)
    return records
