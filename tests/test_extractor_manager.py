# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from AniStream.Core import ExtractorManager, ServerFamily
import httpx, pytest


def test_every_family_has_an_extractor(make_fetcher):
    manager = ExtractorManager(make_fetcher(lambda request: httpx.Response(200)))

    assert manager.for_family(ServerFamily.MEGACLOUD).name  == "MegaCloud"
    assert manager.for_family(ServerFamily.STREAMTAPE).name == "StreamTape"
    assert manager.for_family("streamtape").family is ServerFamily.STREAMTAPE


def test_find_extractor_by_domain(make_fetcher):
    manager = ExtractorManager(make_fetcher(lambda request: httpx.Response(200)))

    assert manager.find_extractor("https://megacloud.tv/embed-2/e-1/abc?k=1").name == "MegaCloud"
    assert manager.find_extractor("https://www.streamtape.com/e/abc").name         == "StreamTape"
    assert manager.find_extractor("https://unknown.test/e/abc") is None


def test_missing_family_is_rejected(make_fetcher, monkeypatch):
    from AniStream.Extractors.MegaCloud import MegaCloud

    monkeypatch.setattr(ExtractorManager, "extractor_classes", staticmethod(lambda: [MegaCloud]))

    with pytest.raises(TypeError, match="streamtape"):
        ExtractorManager(make_fetcher(lambda request: httpx.Response(200)))


def test_duplicate_family_is_rejected(make_fetcher, monkeypatch):
    from AniStream.Extractors.MegaCloud  import MegaCloud
    from AniStream.Extractors.StreamTape import StreamTape

    monkeypatch.setattr(ExtractorManager, "extractor_classes", staticmethod(lambda: [MegaCloud, StreamTape, MegaCloud]))

    with pytest.raises(TypeError, match="megacloud"):
        ExtractorManager(make_fetcher(lambda request: httpx.Response(200)))
