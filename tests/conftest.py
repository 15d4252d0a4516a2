"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List

import pytest

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests with no network access")


class FakeResponse:
    def __init__(self, status_code=200, json_data=None, json_raises=False):
        self.status_code = status_code
        self._json_data = json_data
        self._json_raises = json_raises

    def json(self):
        if self._json_raises:
            raise ValueError("Invalid JSON")
        return self._json_data


def make_award(**overrides: Any) -> Dict[str, Any]:
    """Raw award as the rewards API emits it, with the usual noise fields."""
    award: Dict[str, Any] = {
        "AwardID": 9001,
        "OfferID": 42,
        "TypeID": 3,
        "PartnerId": 7,
        "PropertyId": 11,
        "Title": "Spa Day",
        "Price": 100,
        "Quantity": 2,
        "ShortDescription": "",
        "SubTitle": "",
        "SubTitle2": None,
        "SnipeText": "",
        "ImageURL": "https://img.example.com/spa.png",
        "Featured": False,
        "LocationName": "",
        "PropertyName": "",
        "PartnerName": "",
        "OutletName": "",
        "RequiredInfo": {"Address": False, "Email": True},
        "PriceOverride": None,
        "IsGiveAway": False,
        "IsPremium": False,
    }
    award.update(overrides)
    return award


def make_page(*lanes: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Page body with one lane per positional list of awards."""
    return {
        "Meta": {"Order": 1, "Title": "Category", "SubTitle": None},
        "Lanes": [
            {
                "Meta": {"Order": i, "Type": "Standard", "Title": f"Lane {i}", "_id": None},
                "Awards": awards,
                "Sections": None,
            }
            for i, awards in enumerate(lanes)
        ],
        "Message": None,
        "ErrorMessage": None,
    }


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def award_factory():
    return make_award


@pytest.fixture
def page_factory():
    return make_page
