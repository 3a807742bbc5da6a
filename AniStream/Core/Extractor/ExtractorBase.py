# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from __future__ import annotations
from abc                       import ABC, abstractmethod
from urllib.parse              import urlparse
from ..Config                  import AniStreamConfig
from ..Network.ResilientFetcher import ResilientFetcher
from ..Server.ServerModels     import ServerFamily
from .ExtractorModels          import CipherBased, DirectLink


class ExtractorBase(ABC):
    name              = "Extractor"
    main_url          = "https://example.com"
    supported_domains : list[str] = []
    family            : ServerFamily

    def __init__(self, fetcher: ResilientFetcher, config: AniStreamConfig | None = None):
        self.fetcher = fetcher
        self.config  = config or fetcher.config

    def can_handle_url(self, url: str) -> bool:
        host = urlparse(url).netloc.lower()
        return any(host == domain or host.endswith(f".{domain}") for domain in self.supported_domains)

    @staticmethod
    def get_base_url(url: str) -> str:
        parsed = urlparse(url)
        return f"{parsed.scheme}://{parsed.netloc}"

    @abstractmethod
    async def extract(self, url: str, referer: str | None = None) -> CipherBased | DirectLink:
        """Embed URL'sinden oynatılabilir kaynakları çıkarır."""
        pass
