# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

"""
AniStream hata sınıfları.

Ağ hataları ResilientFetcher içinde yerel olarak tekrar denenir;
parse / decrypt / eşleşme hataları doğrudan çağırana iletilir.
"""

from __future__ import annotations


class AniStreamError(Exception):
    """Tüm AniStream hatalarının atası."""


class NoProxiesAvailable(AniStreamError):
    def __init__(self, message: str = "Proxy havuzu boş, doğrudan bağlantıya izin verilmiyor."):
        super().__init__(message)


class FailedToFetchAfterRetries(AniStreamError):
    """`max_attempts` deneme tükendi; her denemenin hatası mesajda virgülle birleştirilir."""

    def __init__(self, url: str, attempts: int, errors: list[str] | None = None):
        self.url      = url
        self.attempts = attempts
        self.errors   = list(errors or [])

        message = f"{url} » {attempts} denemede alınamadı"
        if self.errors:
            message = f"{message}: {', '.join(self.errors)}"

        super().__init__(message)


class NetworkError(AniStreamError):
    """httpx taşıma hatası sarmalayıcısı."""


class ParseError(AniStreamError, ValueError):
    """Tam sayı / JSON / model ayrıştırma hatası."""


class ObfuscationStale(AniStreamError):
    def __init__(self, message: str = "Script içinde değişken bulunamadı, extractor güncel değil."):
        super().__init__(message)


class DecryptionFailed(AniStreamError):
    """Padding, base64 veya UTF-8 çözme hatası."""


class NoMatchingServer(AniStreamError):
    def __init__(self, requested: str, available: list[str] | None = None):
        self.requested = requested
        self.available = list(available or [])
        super().__init__(f"'{requested}' sunucusu bulunamadı. Mevcut: {', '.join(self.available) or '-'}")


class UnknownError(AniStreamError):
    """Sınıflandırılmamış hatalar (ör. tüm domain'lerin birleşik hatası)."""
