# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from __future__ import annotations
from typing                import Annotated, Literal, Union
from pydantic              import BaseModel, ConfigDict, Field, field_validator
from ..Server.ServerModels import ServerFamily


# ========================
# MANIFEST MODELLERİ
# ========================

class IntroOutro(BaseModel):
    """Atlanabilir aralık (saniye)."""
    model_config = ConfigDict(frozen=True)

    start : int = 0
    end   : int = 0


class Track(BaseModel):
    """Altyazı / thumbnail izi."""
    model_config = ConfigDict(frozen=True)

    file    : str
    kind    : str
    label   : str | None  = None
    default : bool | None = None


class Source(BaseModel):
    """Oynatılabilir kaynak. JSON'daki `file` / `type` alanları `url` / `src_type` olarak taşınır."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    url      : str = Field(alias="file")
    src_type : str = Field(alias="type")


class SourceManifest(BaseModel):
    model_config = ConfigDict(frozen=True)

    intro   : IntroOutro = IntroOutro()
    outro   : IntroOutro = IntroOutro()
    tracks  : list[Track]
    sources : list[Source]

    @field_validator("intro", "outro", mode="before")
    @classmethod
    def default_range(cls, value):
        return IntroOutro() if value is None else value


# ========================
# EXTRACTION SONUÇLARI
# ========================

class CipherBased(BaseModel):
    """MegaCloud ailesi: çözülmüş manifest."""
    model_config = ConfigDict(frozen=True)

    family   : Literal[ServerFamily.MEGACLOUD] = ServerFamily.MEGACLOUD
    manifest : SourceManifest


class DirectLink(BaseModel):
    """StreamTape ailesi: HTML'den birleştirilen doğrudan bağlantı."""
    model_config = ConfigDict(frozen=True)

    family  : Literal[ServerFamily.STREAMTAPE] = ServerFamily.STREAMTAPE
    url     : str
    is_m3u8 : bool


ExtractionResult = Annotated[Union[CipherBased, DirectLink], Field(discriminator="family")]
