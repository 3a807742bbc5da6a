# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from AniStream.CLI  import konsol
from AniStream.Core import (
    ExtractorBase, CipherBased, Source, ServerFamily,
    SourceManifestParser, ObfuscationKeyExtractor, SecretReconstructor, CipherEngine,
    DecryptionFailed, ObfuscationStale,
)
import time

class MegaCloud(ExtractorBase):
    name     = "MegaCloud"
    main_url = "https://megacloud.tv"
    family   = ServerFamily.MEGACLOUD

    supported_domains = [
        "megacloud.tv",
        "megacloud.blog",
        "rapid-cloud.co",
    ]

    sources_path = "/embed-2/ajax/e-1/getSources?id="
    script_path  = "/js/player/a/prod/e1-player.min.js?v="

    @property
    def host(self) -> str:
        return self.config.megacloud_url or self.main_url

    @staticmethod
    def video_id(url: str) -> str:
        return url.split("?")[0].rstrip("/").split("/")[-1]

    @staticmethod
    def decrypt_with_script(encrypted: str, script: str) -> list[Source]:
        """Script'ten offset'leri çıkarıp şifreli `sources` alanını çözer."""
        pairs    = ObfuscationKeyExtractor.extract(script)
        parcalar = SecretReconstructor.split(encrypted, pairs)
        if not parcalar.secret:
            raise DecryptionFailed("Offset'ler şifreli metnin dışında kaldı, anahtar boş")

        plaintext = CipherEngine.decrypt_salted(parcalar.remaining_ciphertext, parcalar.secret)
        return SourceManifestParser.parse_decrypted(plaintext)

    async def decrypt_sources(self, encrypted: str) -> list[Source]:
        # Script her denemede taze alınır; cache-buster milisaniye zaman damgası
        script = await self.fetcher.fetch_text(f"{self.host}{self.script_path}{int(time.time() * 1000)}")

        try:
            return self.decrypt_with_script(encrypted, script)
        except ObfuscationStale:
            konsol.log(f"[red][!] {self.name} » Player script'i değişmiş, değişkenler bulunamadı.")
            raise

    async def extract(self, url: str, referer: str = None) -> CipherBased:
        headers = {"Referer": referer or f"{self.get_base_url(url)}/", "X-Requested-With": "XMLHttpRequest"}

        yanit = await self.fetcher.fetch_text(f"{self.host}{self.sources_path}{self.video_id(url)}", headers=headers)
        veri  = SourceManifestParser.load(yanit)

        if SourceManifestParser.is_encrypted(veri):
            sources  = await self.decrypt_sources(SourceManifestParser.encrypted_blob(veri))
            manifest = SourceManifestParser.build(veri, sources=sources)
        else:
            manifest = SourceManifestParser.parse_plain(veri)

        return CipherBased(manifest=manifest)
