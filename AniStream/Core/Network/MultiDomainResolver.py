# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from __future__ import annotations
from collections.abc   import Awaitable, Callable, Sequence
from ...CLI            import konsol
from ..Exceptions      import AniStreamError, UnknownError
from .ResilientFetcher import ResilientFetcher


class MultiDomainResolver:
    """
    Aynı yolu ayna domain'lerde sırayla dener, ilk boş olmayan gövdeyi döndürür.

    Kullanım:
        resolver = MultiDomainResolver(config.domains, fetcher)
        html     = await resolver.resolve(lambda domain: f"{domain}/ajax/v2/episode/servers?episodeId=1")
    """

    def __init__(self, domains: Sequence[str], fetcher: ResilientFetcher):
        self.domains = [domain.rstrip("/") for domain in domains]
        self.fetcher = fetcher

    async def resolve(
        self,
        path  : str | Callable[[str], str],
        fetch : Callable[[str], Awaitable[str]] | None = None,
    ) -> str:
        """
        Args:
            path  : domain'e eklenecek yol veya domain alıp tam URL üreten fonksiyon
            fetch : URL alıp gövde döndüren coroutine (varsayılan: fetcher.fetch_text)

        Raises:
            UnknownError: tüm domain'ler başarısızsa, hatalar virgülle birleştirilmiş olarak
        """
        fetch   = fetch or self.fetcher.fetch_text
        hatalar = []

        for domain in self.domains:
            url = path(domain) if callable(path) else f"{domain}{path}"

            try:
                govde = await fetch(url)
            except AniStreamError as hata:
                konsol.log(f"[yellow][!] {domain} » {hata}")
                hatalar.append(f"{domain}: {hata}")
                continue

            if govde:
                return govde

            konsol.log(f"[yellow][?] {domain} » boş yanıt")
            hatalar.append(f"{domain}: boş yanıt")

        raise UnknownError(", ".join(hatalar) or "Domain listesi boş")
