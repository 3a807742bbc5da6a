# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from __future__ import annotations
from pydantic   import BaseModel, ConfigDict


class Proxy(BaseModel):
    """Feed'den okunan tek bir proxy adresi (`host:port` veya `scheme://host:port`)."""
    model_config = ConfigDict(frozen=True)

    address : str

    @property
    def url(self) -> str:
        """httpx'e verilecek proxy URL'si. Şemasız adresler HTTP proxy kabul edilir."""
        return self.address if "://" in self.address else f"http://{self.address}"

    def __str__(self) -> str:
        return self.address
