# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

"""
Rastgele proxy + sınırlı tekrar deneme ile tek mantıksal GET isteği.

- Her denemede havuzdan yeni bir proxy seçilir ve sabit timeout'lu yeni bir client kurulur.
- Taşıma hatası veya 2xx dışı yanıt bir deneme sayılır; beklemeden tekrar denenir.
- gzip / deflate / br gövdeleri httpx decoder'ları ile açılır, metin UTF-8 olarak çözülür.
"""

from __future__ import annotations
from httpx               import AsyncBaseTransport, AsyncClient, HTTPError, InvalidURL, Response
from ...CLI              import konsol
from ..Config            import AniStreamConfig
from ..Exceptions        import FailedToFetchAfterRetries, NetworkError, NoProxiesAvailable, ParseError
from ..Proxy.ProxyPool   import ProxyPool
from ..Proxy.ProxyModels import Proxy
import json


class ResilientFetcher:
    def __init__(
        self,
        config     : AniStreamConfig,
        proxy_pool : ProxyPool | None = None,
        transport  : AsyncBaseTransport | None = None,
    ):
        self.config     = config
        self.proxy_pool = proxy_pool if proxy_pool is not None else ProxyPool()
        # Test / özel taşıma katmanı verilirse proxy mount'ları kurulmaz
        self.transport  = transport

    @property
    def max_attempts(self) -> int:
        return self.config.max_attempts

    def _client(self, proxy: Proxy | None) -> AsyncClient:
        if self.transport is not None:
            return AsyncClient(transport=self.transport, timeout=self.config.timeout, follow_redirects=True)

        return AsyncClient(
            proxy            = proxy.url if proxy else None,
            timeout          = self.config.timeout,
            follow_redirects = True,
        )

    def _headers(self, headers: dict[str, str] | None) -> dict[str, str]:
        return {**self.config.headers(), **(headers or {})}

    @staticmethod
    def body_text(response: Response) -> str:
        """Açılmış gövdeyi UTF-8 metne çevirir; tanınmayan Content-Encoding ham kabul edilir."""
        return response.content.decode("utf-8", errors="replace")

    async def fetch_text(self, url: str, headers: dict[str, str] | None = None) -> str:
        """
        `max_attempts` kez dener, ilk 2xx yanıtın metnini döndürür.

        Raises:
            NoProxiesAvailable        : havuz boş ve doğrudan bağlantı kapalı
            FailedToFetchAfterRetries : tüm denemeler başarısız
        """
        hatalar = []

        for _ in range(self.max_attempts):
            proxy = self.proxy_pool.pick()
            if proxy is None and not self.config.allow_direct:
                raise NoProxiesAvailable()

            etiket = str(proxy) if proxy else "direct"

            try:
                async with self._client(proxy) as client:
                    istek = await client.get(url, headers=self._headers(headers))
            except (HTTPError, InvalidURL, ValueError) as hata:
                # ValueError: httpx'in desteklemediği proxy şeması
                hatalar.append(f"{etiket}: {type(hata).__name__}")
                continue

            if istek.is_success:
                return self.body_text(istek)

            hatalar.append(f"{etiket}: HTTP {istek.status_code}")

        konsol.log(f"[red][!] {url} » {self.max_attempts} denemede alınamadı")
        raise FailedToFetchAfterRetries(url, self.max_attempts, hatalar)

    async def fetch_json_field(self, url: str, field: str, headers: dict[str, str] | None = None) -> str:
        """
        Aynı origin AJAX uç noktaları için proxysiz tek istek.

        JSON gövdesinden `field` alanını string olarak döndürür; alan yoksa "".
        """
        headers = {"X-Requested-With": "XMLHttpRequest", **(headers or {})}

        try:
            async with self._client(None) as client:
                istek = await client.get(url, headers=self._headers(headers))
                istek.raise_for_status()
        except HTTPError as hata:
            raise NetworkError(f"{url} » {type(hata).__name__}: {hata}") from hata

        try:
            veri = json.loads(self.body_text(istek))
        except json.JSONDecodeError as hata:
            raise ParseError(f"{url} » JSON ayrıştırılamadı: {hata}") from hata

        if not isinstance(veri, dict):
            raise ParseError(f"{url} » JSON nesnesi bekleniyordu, {type(veri).__name__} geldi")

        deger = veri.get(field)
        if deger is None:
            return ""

        # Sayı, bool ve iç içe yapılar JSON metni olarak döner
        return deger if isinstance(deger, str) else json.dumps(deger, ensure_ascii=False)
