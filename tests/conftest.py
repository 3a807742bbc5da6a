# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from AniStream.Core import AniStreamConfig, ProxyPool, ResilientFetcher
import httpx, pytest


@pytest.fixture
def config() -> AniStreamConfig:
    return AniStreamConfig(
        max_attempts  = 3,
        allow_direct  = True,
        domains       = ["https://mirror-a.test", "https://mirror-b.test"],
        megacloud_url = "https://megacloud.test",
    )


@pytest.fixture
def make_fetcher(config):
    """handler(request) -> httpx.Response alan MockTransport'lu fetcher üretir."""
    def _make(handler, cfg: AniStreamConfig | None = None, pool: ProxyPool | None = None) -> ResilientFetcher:
        return ResilientFetcher(cfg or config, pool, transport=httpx.MockTransport(handler))

    return _make
