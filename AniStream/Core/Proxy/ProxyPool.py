# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from __future__ import annotations
from collections.abc import Sequence
from httpx           import AsyncClient, HTTPError
from ...CLI          import konsol
from ..Exceptions    import NetworkError
from .ProxyModels    import Proxy
import asyncio, random


class ProxyPool:
    """
    HTTP, SOCKS4 ve SOCKS5 feed'lerinden toplanan düz proxy listesi.

    Kullanım:
        havuz = await ProxyPool.load(config.feed_urls)
        proxy = havuz.pick()
    """

    def __init__(self, proxies: Sequence[Proxy] | None = None):
        self._proxies = tuple(proxies or ())

    def __len__(self) -> int:
        return len(self._proxies)

    def __repr__(self) -> str:
        return f"ProxyPool({len(self._proxies)} proxy)"

    @property
    def proxies(self) -> tuple[Proxy, ...]:
        return self._proxies

    def pick(self) -> Proxy | None:
        """Rastgele bir proxy döndürür; havuz boşsa None."""
        return random.choice(self._proxies) if self._proxies else None

    @staticmethod
    def parse_feed(text: str) -> list[Proxy]:
        """Satır başına bir adres; boş satırlar atlanır."""
        return [Proxy(address=satir.strip()) for satir in text.splitlines() if satir.strip()]

    @classmethod
    async def load(cls, feed_urls: Sequence[str], client: AsyncClient | None = None) -> ProxyPool:
        """
        Tüm feed'leri çekip tek bir havuzda birleştirir.

        Herhangi bir feed alınamazsa NetworkError fırlatılır; kısmi havuz üretilmez.
        """
        own_client = client is None
        client     = client or AsyncClient(timeout=10, follow_redirects=True)

        async def feed_al(url: str) -> list[Proxy]:
            try:
                istek = await client.get(url)
                istek.raise_for_status()
            except HTTPError as hata:
                konsol.log(f"[red][!] Proxy listesi alınamadı » {url} » {type(hata).__name__}")
                raise NetworkError(f"Proxy listesi alınamadı: {url} ({hata})") from hata

            return cls.parse_feed(istek.text)

        # Tüm istekler sonuçlanmadan client kapatılmaz
        try:
            listeler = await asyncio.gather(*(feed_al(url) for url in feed_urls), return_exceptions=True)
        finally:
            if own_client:
                await client.aclose()

        if hata := next((sonuc for sonuc in listeler if isinstance(sonuc, BaseException)), None):
            raise hata

        havuz = cls([proxy for liste in listeler for proxy in liste])
        konsol.log(f"[green][+] Proxy havuzu yüklendi » {len(havuz)} adres")
        return havuz
