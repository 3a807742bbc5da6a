# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from __future__ import annotations
from collections.abc         import Iterable
from pydantic                import BaseModel, ConfigDict
from .ObfuscationKeyExtractor import OffsetPair


class ReconstructedSecret(BaseModel):
    model_config = ConfigDict(frozen=True)

    secret               : str
    remaining_ciphertext : str


class SecretReconstructor:
    @staticmethod
    def split(encrypted: str, pairs: Iterable[OffsetPair | tuple[int, int]]) -> ReconstructedSecret:
        """
        Şifreli metinden gizli anahtarı ayıklar.

        Her çift için `cursor + offset` konumundan `length` karakter okunur (her zaman
        orijinal metin üzerinden), ardından `cursor += length`. Kalan metin, okunan
        konumlar çıkarılmış orijinal metindir. Sınır dışı konumlar sessizce atlanır.
        """
        secret   = []
        consumed = [False] * len(encrypted)
        cursor   = 0

        for offset, length in pairs:
            start = cursor + offset
            for index in range(start, min(start + length, len(encrypted))):
                secret.append(encrypted[index])
                consumed[index] = True

            cursor += length

        remaining = "".join(char for char, used in zip(encrypted, consumed) if not used)

        return ReconstructedSecret(secret="".join(secret), remaining_ciphertext=remaining)
