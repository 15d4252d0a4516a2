import pytest

from reward_catalog.pipeline.config import CrawlConfig, CrawlConfigError, parse_slugs

ENV_VARS = [
    "MYVIP_REWARDS_BASE_URL",
    "MYVIP_REWARDS_SLUGS",
    "MYVIP_REWARDS_MAX_PAGE",
    "MYVIP_REWARDS_CONCURRENCY",
    "MYVIP_REWARDS_TIMEOUT_SEC",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.mark.unit
def test_defaults_from_empty_env(clean_env):
    config = CrawlConfig.from_env()
    assert config.base_url == "https://loyalty-award-api.myvip.co/api/proxy/rewards/section/"
    assert config.slugs == ("category",)
    assert config.max_page == 50
    assert config.concurrency == 4
    assert config.timeout_sec == 15.0
    assert config.page_count == 51


@pytest.mark.unit
def test_env_overrides(clean_env):
    clean_env.setenv("MYVIP_REWARDS_BASE_URL", "https://api.example.com/section")
    clean_env.setenv("MYVIP_REWARDS_SLUGS", " category, destination ,")
    clean_env.setenv("MYVIP_REWARDS_MAX_PAGE", "10")
    clean_env.setenv("MYVIP_REWARDS_CONCURRENCY", "8")
    clean_env.setenv("MYVIP_REWARDS_TIMEOUT_SEC", "2.5")

    config = CrawlConfig.from_env()
    assert config.base_url == "https://api.example.com/section"
    assert config.slugs == ("category", "destination")
    assert config.max_page == 10
    assert config.concurrency == 8
    assert config.timeout_sec == 2.5
    assert config.page_count == 22


@pytest.mark.unit
@pytest.mark.parametrize(
    "name, value",
    [
        ("MYVIP_REWARDS_MAX_PAGE", "fifty"),
        ("MYVIP_REWARDS_CONCURRENCY", "1.5"),
        ("MYVIP_REWARDS_TIMEOUT_SEC", "soon"),
    ],
)
def test_non_numeric_env_raises(clean_env, name, value):
    clean_env.setenv(name, value)
    with pytest.raises(CrawlConfigError) as e:
        CrawlConfig.from_env()
    assert name in str(e.value)


@pytest.mark.unit
@pytest.mark.parametrize(
    "kwargs",
    [
        {"base_url": "not-a-url"},
        {"slugs": ()},
        {"slugs": ("category", "")},
        {"max_page": -1},
        {"concurrency": 0},
        {"timeout_sec": 0},
        {"timeout_sec": float("nan")},
    ],
)
def test_invalid_values_rejected(kwargs):
    with pytest.raises(CrawlConfigError):
        CrawlConfig(**kwargs)


@pytest.mark.unit
def test_max_page_zero_is_one_page():
    assert CrawlConfig(max_page=0).page_count == 1


@pytest.mark.unit
def test_with_overrides_skips_none_and_revalidates():
    base = CrawlConfig()
    assert base.with_overrides(max_page=None) is base

    changed = base.with_overrides(max_page=5, concurrency=None)
    assert changed.max_page == 5
    assert changed.concurrency == base.concurrency

    with pytest.raises(CrawlConfigError):
        base.with_overrides(concurrency=0)


@pytest.mark.unit
def test_parse_slugs():
    assert parse_slugs("a,b , c") == ("a", "b", "c")
    assert parse_slugs(" , ") == ()


@pytest.mark.unit
def test_nan_timeout_env_rejected(clean_env):
    clean_env.setenv("MYVIP_REWARDS_TIMEOUT_SEC", "nan")
    with pytest.raises(CrawlConfigError):
        CrawlConfig.from_env()
