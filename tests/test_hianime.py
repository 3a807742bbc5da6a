# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from AniStream.Core import CipherBased, DirectLink, EpisodeType, NoMatchingServer, Source, UnknownError
from AniStream.Plugins.HiAnime import HiAnime
from .fixtures      import SERVERS_HTML, STREAMTAPE_HTML
import asyncio, httpx, pytest

LINKS = {
    "101" : "https://megacloud.tv/embed-2/e-1/VIDX?k=1",
    "103" : "https://streamtape.com/e/abc",
}


def site_handler(cagrilar: list):
    def handler(request: httpx.Request) -> httpx.Response:
        cagrilar.append(str(request.url))
        host, path = request.url.host, request.url.path

        # İlk ayna tamamen kapalı
        if host == "mirror-a.test":
            return httpx.Response(503)

        if host == "mirror-b.test" and path == "/ajax/v2/episode/servers":
            assert request.url.params["episodeId"] == "2142"
            return httpx.Response(200, json={"status": True, "html": SERVERS_HTML})

        if host == "mirror-b.test" and path == "/ajax/v2/episode/sources":
            return httpx.Response(200, json={"type": "iframe", "link": LINKS.get(request.url.params["id"], "")})

        if host == "streamtape.com":
            return httpx.Response(200, text=STREAMTAPE_HTML)

        if host == "megacloud.test" and path == "/embed-2/ajax/e-1/getSources":
            return httpx.Response(200, json={
                "encrypted" : False,
                "sources"   : [{"file": "https://x/master.m3u8", "type": "hls"}],
                "tracks"    : [],
            })

        return httpx.Response(404)

    return handler


def test_episode_id():
    assert HiAnime.episode_id("one-piece-100?ep=2142") == "2142"
    assert HiAnime.episode_id("2142") == "2142"


def test_get_servers_falls_back_across_mirrors(config, make_fetcher):
    cagrilar = []
    hianime  = HiAnime(config, make_fetcher(site_handler(cagrilar)))

    servers = asyncio.run(hianime.get_servers("one-piece-100?ep=2142"))

    assert servers.episode_no == 12
    assert len(servers.sub) == 3
    assert [url.split("/")[2] for url in cagrilar] == ["mirror-a.test", "mirror-b.test"]


def test_streamtape_source(config, make_fetcher):
    hianime = HiAnime(config, make_fetcher(site_handler([])))

    sonuc = asyncio.run(hianime.get_episode_source("one-piece-100?ep=2142", "sub", "StreamTape"))

    assert isinstance(sonuc, DirectLink)
    assert sonuc.url.startswith("https://streamtape.com/get_video?id=abc")


def test_default_server_uses_megacloud(config, make_fetcher):
    hianime = HiAnime(config, make_fetcher(site_handler([])))

    sonuc = asyncio.run(hianime.get_episode_source("2142", EpisodeType.SUB))

    assert isinstance(sonuc, CipherBased)
    assert sonuc.manifest.sources == [Source(url="https://x/master.m3u8", src_type="hls")]


def test_unknown_server(config, make_fetcher):
    hianime = HiAnime(config, make_fetcher(site_handler([])))

    with pytest.raises(NoMatchingServer) as hata:
        asyncio.run(hianime.get_episode_source("2142", "raw"))

    assert hata.value.requested == "vidstreaming"


def test_empty_link_on_every_mirror(config, make_fetcher):
    hianime = HiAnime(config, make_fetcher(site_handler([])))

    # megacloud sunucusunun (data-id 102) bağlantısı boş
    with pytest.raises(UnknownError):
        asyncio.run(hianime.get_episode_source("2142", "sub", "megacloud"))


def test_create_survives_feed_failure(config, monkeypatch):
    from AniStream.Core import NetworkError, ProxyPool

    async def bozuk_load(feed_urls, client=None):
        raise NetworkError("feed alınamadı")

    monkeypatch.setattr(ProxyPool, "load", staticmethod(bozuk_load))

    hianime = asyncio.run(HiAnime.create(config))

    assert len(hianime.fetcher.proxy_pool) == 0
    assert hianime.ex_manager.for_family("megacloud").fetcher is hianime.fetcher
