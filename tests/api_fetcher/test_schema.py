import pytest
from pydantic import ValidationError

from reward_catalog.api_fetcher.schema import Award, PageWrapper, RewardRecord


@pytest.mark.unit
def test_reward_record_is_hashable_value_type():
    a = RewardRecord(name="Spa Day", price=100, description="", stock=2, partner="Hotel X")
    b = RewardRecord(name="Spa Day", price=100, description="", stock=2, partner="Hotel X")
    c = RewardRecord(name="Spa Day", price=100, description="", stock=1, partner="Hotel X")

    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert {a, b, c} == {a, c}


@pytest.mark.unit
def test_reward_record_is_immutable():
    record = RewardRecord(name="Spa Day", price=100, description="", stock=2, partner="")
    with pytest.raises(ValidationError):
        record.price = 5


@pytest.mark.unit
def test_reward_record_dump_key_order():
    record = RewardRecord(name="n", price=1, description="d", stock=0, partner="p")
    assert list(record.model_dump().keys()) == ["name", "price", "description", "stock", "partner"]


@pytest.mark.unit
def test_award_nulls_decode_to_zero_values():
    award = Award.model_validate(
        {"Title": None, "Price": None, "Quantity": None, "LocationName": None, "Featured": None}
    )
    assert award.title == ""
    assert award.price == 0
    assert award.quantity == 0
    assert award.location_name == ""
    assert award.featured is False


@pytest.mark.unit
def test_award_ignores_unknown_keys(award_factory):
    award = Award.model_validate(award_factory(SomethingNew={"x": 1}))
    assert award.title == "Spa Day"
    assert not hasattr(award, "SomethingNew")


@pytest.mark.unit
def test_award_rejects_non_integer_price():
    with pytest.raises(ValidationError):
        Award.model_validate({"Title": "x", "Price": "100"})


@pytest.mark.unit
def test_award_rejects_non_string_title():
    with pytest.raises(ValidationError):
        Award.model_validate({"Title": 12, "Price": 100})


@pytest.mark.unit
def test_page_wrapper_parses_lanes(award_factory, page_factory):
    page = PageWrapper.model_validate(page_factory([award_factory()], []))
    assert page.meta.title == "Category"
    assert page.meta.sub_title == ""
    assert len(page.lanes) == 2
    assert page.lanes[0].meta.type == "Standard"
    assert page.lanes[0].awards[0].title == "Spa Day"
    assert page.lanes[1].awards == []


@pytest.mark.unit
def test_page_wrapper_defaults_when_keys_missing():
    page = PageWrapper.model_validate({})
    assert page.lanes == []
    assert page.meta.order == 0


@pytest.mark.unit
def test_page_wrapper_rejects_non_object_body():
    with pytest.raises(ValidationError):
        PageWrapper.model_validate([{"Lanes": []}])


@pytest.mark.unit
@pytest.mark.parametrize(
    "field, value",
    [("Featured", "yes"), ("IsPremium", 1), ("AwardID", "9001"), ("Quantity", 2.0)],
)
def test_award_rejects_wrong_typed_scalars(award_factory, field, value):
    with pytest.raises(ValidationError):
        Award.model_validate(award_factory(**{field: value}))


@pytest.mark.unit
@pytest.mark.parametrize(
    "meta",
    [{"Order": "3"}, {"Featured": "true"}, {"OccupiedSlots": "1"}, {"Title": 5}],
)
def test_lane_meta_rejects_wrong_typed_scalars(award_factory, page_factory, meta):
    body = page_factory([award_factory()])
    body["Lanes"][0]["Meta"].update(meta)
    with pytest.raises(ValidationError):
        PageWrapper.model_validate(body)


@pytest.mark.unit
def test_page_meta_rejects_string_order(page_factory):
    body = page_factory([])
    body["Meta"]["Order"] = "1"
    with pytest.raises(ValidationError):
        PageWrapper.model_validate(body)
