# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

"""
getSources JSON yanıtını tipli modellere çevirir.

`encrypted` false ise `sources` zaten dizi; true ise `sources` şifreli bir string'dir
ve çözüldükten sonra `parse_decrypted` ile ayrıştırılır.
"""

from __future__ import annotations
from pydantic         import TypeAdapter, ValidationError
from ..Exceptions     import ParseError
from .ExtractorModels import Source, SourceManifest
import json

_SOURCES = TypeAdapter(list[Source])


class SourceManifestParser:
    @staticmethod
    def load(text: str) -> dict:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as hata:
            raise ParseError(f"Manifest JSON ayrıştırılamadı: {hata}") from hata

        if not isinstance(data, dict):
            raise ParseError(f"Manifest JSON nesnesi bekleniyordu, {type(data).__name__} geldi")

        return data

    @staticmethod
    def is_encrypted(data: dict) -> bool:
        return bool(data.get("encrypted", False))

    @staticmethod
    def encrypted_blob(data: dict) -> str:
        blob = data.get("sources")
        if not isinstance(blob, str) or not blob:
            raise ParseError("Şifreli manifestte `sources` string değil")
        return blob

    @staticmethod
    def build(data: dict, sources: list[Source] | None = None) -> SourceManifest:
        """`sources` verilirse JSON'daki alan yerine kullanılır."""
        if "tracks" not in data:
            raise ParseError("Manifestte `tracks` alanı yok")

        payload = {
            "intro"   : data.get("intro"),
            "outro"   : data.get("outro"),
            "tracks"  : data["tracks"],
            "sources" : data.get("sources") if sources is None else sources,
        }

        try:
            return SourceManifest.model_validate(payload)
        except ValidationError as hata:
            raise ParseError(f"Manifest doğrulanamadı: {hata}") from hata

    @classmethod
    def parse_plain(cls, data: dict | str) -> SourceManifest:
        if isinstance(data, str):
            data = cls.load(data)
        return cls.build(data)

    @staticmethod
    def parse_decrypted(plaintext: str) -> list[Source]:
        """Çözülmüş metin `[{file, type}, ...]` biçiminde JSON dizisidir."""
        try:
            return _SOURCES.validate_json(plaintext)
        except ValidationError as hata:
            raise ParseError(f"Çözülmüş kaynaklar ayrıştırılamadı: {hata}") from hata
