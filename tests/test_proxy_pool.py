# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from AniStream.Core import NetworkError, Proxy, ProxyPool
import asyncio, httpx, pytest

FEEDS = {
    "/http.txt"   : "1.1.1.1:80\n\n  2.2.2.2:8080  \n",
    "/socks4.txt" : "3.3.3.3:1080\n",
    "/socks5.txt" : "socks5://4.4.4.4:1080\r\n\r\n",
}


def feed_client(feeds: dict[str, str], status: dict[str, int] | None = None) -> httpx.AsyncClient:
    def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.path
        return httpx.Response((status or {}).get(path, 200), text=feeds.get(path, ""))

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def test_parse_feed_skips_blank_lines():
    proxies = ProxyPool.parse_feed("a:1\n\n   \n b:2 \n")
    assert [p.address for p in proxies] == ["a:1", "b:2"]


def test_proxy_url_scheme():
    assert Proxy(address="1.2.3.4:80").url            == "http://1.2.3.4:80"
    assert Proxy(address="socks5://1.2.3.4:1080").url == "socks5://1.2.3.4:1080"


def test_pick_on_empty_pool():
    assert ProxyPool().pick() is None
    assert len(ProxyPool()) == 0


def test_pick_returns_member():
    havuz = ProxyPool([Proxy(address="a:1"), Proxy(address="b:2")])
    for _ in range(20):
        assert havuz.pick() in havuz.proxies


def test_load_concatenates_feeds_in_order():
    urls   = ["https://feeds.test/http.txt", "https://feeds.test/socks4.txt", "https://feeds.test/socks5.txt"]
    havuz  = asyncio.run(ProxyPool.load(urls, client=feed_client(FEEDS)))

    assert [p.address for p in havuz.proxies] == [
        "1.1.1.1:80",
        "2.2.2.2:8080",
        "3.3.3.3:1080",
        "socks5://4.4.4.4:1080",
    ]


def test_load_propagates_feed_failure():
    urls   = ["https://feeds.test/http.txt", "https://feeds.test/socks4.txt", "https://feeds.test/socks5.txt"]
    client = feed_client(FEEDS, status={"/socks4.txt": 500})

    with pytest.raises(NetworkError):
        asyncio.run(ProxyPool.load(urls, client=client))


def test_failed_feed_waits_for_sibling_requests():
    urls       = ["https://feeds.test/http.txt", "https://feeds.test/socks4.txt", "https://feeds.test/socks5.txt"]
    tamamlanan = []

    async def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/socks4.txt":
            return httpx.Response(500)

        await asyncio.sleep(0.2)
        tamamlanan.append(request.url.path)
        return httpx.Response(200, text=FEEDS[request.url.path])

    async def calistir():
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        with pytest.raises(NetworkError, match="socks4"):
            await ProxyPool.load(urls, client=client)

        # load() döndüğünde yavaş feed'ler de sonuçlanmış olmalı
        assert sorted(tamamlanan) == ["/http.txt", "/socks5.txt"]

    asyncio.run(calistir())
