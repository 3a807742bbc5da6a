# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

"""
Başlangıçta bir kez oluşturulan, değiştirilemez yapılandırma.

Ortam değişkenleri yalnızca `AniStreamConfig.from_env` içinde okunur;
çekirdek bileşenler yapılandırmayı constructor üzerinden alır.
"""

from __future__ import annotations
from collections.abc import Mapping
from pydantic        import BaseModel, ConfigDict, Field, ValidationError, field_validator
from .Exceptions     import ParseError
import os


# Ortam değişkeni -> alan adı
_ENV_KEYS = {
    "MAX_RETRIES_ATTEMPTS"    : "max_attempts",
    "HTTP_URL"                : "http_feed",
    "SOCK4_URL"               : "socks4_feed",
    "SOCK5_URL"               : "socks5_feed",
    "HIANIME_DOMAINS"         : "domains",
    "ALLOW_DIRECT_CONNECTION" : "allow_direct",
    "MEGACLOUD_URL"           : "megacloud_url",
    "DEFAULT_SERVER"          : "default_server",
}


class AniStreamConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_attempts    : int   = Field(default=50, ge=1)
    timeout         : float = Field(default=5.0, gt=0)

    user_agent      : str = "Mozilla/5.0 (Macintosh; Intel Mac OS X 15.7; rv:135.0) Gecko/20100101 Firefox/135.0"
    accept          : str = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"
    accept_encoding : str = "gzip, deflate, br"

    http_feed       : str = "https://raw.githubusercontent.com/TheSpeedX/PROXY-List/master/http.txt"
    socks4_feed     : str = "https://raw.githubusercontent.com/TheSpeedX/PROXY-List/master/socks4.txt"
    socks5_feed     : str = "https://raw.githubusercontent.com/TheSpeedX/PROXY-List/master/socks5.txt"
    allow_direct    : bool = False

    domains         : list[str] = Field(default_factory=lambda: ["https://aniwatchtv.to"])
    megacloud_url   : str = "https://megacloud.tv"
    default_server  : str = "vidstreaming"

    @field_validator("domains", mode="before")
    @classmethod
    def split_domains(cls, value):
        if isinstance(value, str):
            value = value.split(",")
        return [d.strip().rstrip("/") for d in value if d and d.strip()]

    @field_validator("megacloud_url")
    @classmethod
    def strip_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("default_server")
    @classmethod
    def lower_server(cls, value: str) -> str:
        return value.strip().lower()

    @property
    def feed_urls(self) -> list[str]:
        """HTTP, SOCKS4, SOCKS5 sırasıyla proxy listeleri."""
        return [self.http_feed, self.socks4_feed, self.socks5_feed]

    def headers(self) -> dict[str, str]:
        return {
            "User-Agent"      : self.user_agent,
            "Accept"          : self.accept,
            "Accept-Encoding" : self.accept_encoding,
        }

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AniStreamConfig:
        """Ortam değişkenlerinden yapılandırma üretir. Boş değerler varsayılana düşer."""
        environ = os.environ if environ is None else environ

        values = {
            field: environ[key].strip()
                for key, field in _ENV_KEYS.items()
                    if environ.get(key, "").strip()
        }

        try:
            return cls(**values)
        except ValidationError as hata:
            raise ParseError(f"Geçersiz yapılandırma: {hata}") from hata
