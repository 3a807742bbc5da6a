# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from AniStream.CLI  import konsol
from AniStream.Core import (
    AniStreamConfig, AniStreamError, ProxyPool, ResilientFetcher, MultiDomainResolver, ExtractorManager,
    ServerCatalog, ServerList, EpisodeType, NoMatchingServer, CipherBased, DirectLink,
)

class HiAnime:
    """
    Bölüm → sunucu listesi → embed bağlantısı → extractor zinciri.

    Kullanım:
        hianime = await HiAnime.create(AniStreamConfig.from_env())
        sonuc   = await hianime.get_episode_source("one-piece-100?ep=2142", "sub", "vidstreaming")
    """

    name = "HiAnime"

    def __init__(self, config: AniStreamConfig, fetcher: ResilientFetcher, ex_manager: ExtractorManager | None = None):
        self.config     = config
        self.fetcher    = fetcher
        self.resolver   = MultiDomainResolver(config.domains, fetcher)
        self.ex_manager = ex_manager or ExtractorManager(fetcher)

    @classmethod
    async def create(cls, config: AniStreamConfig) -> "HiAnime":
        """Proxy havuzunu yükler; feed'ler alınamazsa boş havuzla devam eder."""
        try:
            havuz = await ProxyPool.load(config.feed_urls)
        except AniStreamError as hata:
            konsol.log(f"[red][!] {cls.name} » Proxy'ler yüklenemedi, boş havuz kullanılacak: {hata}")
            havuz = ProxyPool()

        return cls(config, ResilientFetcher(config, havuz))

    @staticmethod
    def episode_id(value: str) -> str:
        """`anime-slug?ep=1234` veya `1234` → `1234`"""
        return value.split("ep=")[-1]

    async def get_servers(self, episode_id: str) -> ServerList:
        ep_id = self.episode_id(episode_id)
        html  = await self.resolver.resolve(
            path  = lambda domain: f"{domain}/ajax/v2/episode/servers?episodeId={ep_id}",
            fetch = lambda url: self.fetcher.fetch_json_field(url, "html"),
        )

        return ServerCatalog.parse(html)

    async def get_episode_source(
        self,
        episode_id   : str,
        episode_type : EpisodeType | str = EpisodeType.SUB,
        server       : str | None = None,
    ) -> CipherBased | DirectLink:
        episode_type = episode_type if isinstance(episode_type, EpisodeType) else EpisodeType.from_str(episode_type)

        sunucular = (await self.get_servers(episode_id)).for_type(episode_type)
        secilen   = ServerCatalog.select(sunucular, server, self.config.default_server)
        if not secilen:
            raise NoMatchingServer(server or self.config.default_server, [s.name for s in sunucular])

        link = await self.resolver.resolve(
            path  = lambda domain: f"{domain}/ajax/v2/episode/sources?id={secilen.data_id}",
            fetch = lambda url: self.fetcher.fetch_json_field(url, "link"),
        )

        konsol.log(f"[~] {self.name} » {secilen.name} ({secilen.family.value}) » {link}")
        return await self.ex_manager.extract(link, secilen.family)
