# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from __future__ import annotations
from ..Network.ResilientFetcher import ResilientFetcher
from ..Server.ServerModels     import ServerFamily
from .ExtractorBase            import ExtractorBase
from .ExtractorModels          import CipherBased, DirectLink
import inspect


class ExtractorManager:
    """
    Sunucu ailesi → extractor eşlemesi. Yeni bir aile, ServerFamily'ye bir üye
    ve `Extractors/` altına o aileyi bildiren bir ExtractorBase alt sınıfı eklenerek tanıtılır.
    """

    def __init__(self, fetcher: ResilientFetcher):
        self.fetcher    = fetcher
        self.extractors : dict[ServerFamily, ExtractorBase] = {}

        for sinif in self.extractor_classes():
            if sinif.family in self.extractors:
                raise TypeError(f"{sinif.family.value} ailesi için birden fazla extractor: {sinif.__name__}")

            self.extractors[sinif.family] = sinif(fetcher)

        eksik = set(ServerFamily) - set(self.extractors)
        if eksik:
            raise TypeError(f"Extractor tanımlanmamış aile(ler): {', '.join(sorted(f.value for f in eksik))}")

    @staticmethod
    def extractor_classes() -> list[type[ExtractorBase]]:
        # Extractors, Core'u import ettiği için burada yüklenir
        from ...Extractors import MegaCloud, StreamTape

        return [sinif for sinif in ExtractorBase.__subclasses__() if not inspect.isabstract(sinif)]

    def for_family(self, family: ServerFamily) -> ExtractorBase:
        return self.extractors[ServerFamily(family)]

    def find_extractor(self, url: str) -> ExtractorBase | None:
        return next((ex for ex in self.extractors.values() if ex.can_handle_url(url)), None)

    async def extract(self, url: str, family: ServerFamily, referer: str | None = None) -> CipherBased | DirectLink:
        return await self.for_family(family).extract(url, referer=referer)
