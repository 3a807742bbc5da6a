# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from __future__ import annotations
from enum       import Enum
from pydantic   import BaseModel, ConfigDict, field_validator


class ServerFamily(str, Enum):
    """Hangi extraction pipeline'ının çalışacağını belirleyen kapalı küme."""
    MEGACLOUD  = "megacloud"
    STREAMTAPE = "streamtape"

    @classmethod
    def from_server_id(cls, server_id: int) -> ServerFamily:
        # data-server-id 3 StreamTape, diğerleri MegaCloud türevi (vidstreaming, vidcloud, megacloud)
        return cls.STREAMTAPE if server_id == 3 else cls.MEGACLOUD


class EpisodeType(str, Enum):
    SUB = "sub"
    DUB = "dub"
    RAW = "raw"

    @classmethod
    def from_str(cls, value: str | None) -> EpisodeType:
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.SUB


class ServerDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    name      : str
    server_id : int
    data_id   : int

    @field_validator("name", mode="before")
    @classmethod
    def lower_name(cls, value):
        return str(value).strip().lower()

    @property
    def family(self) -> ServerFamily:
        return ServerFamily.from_server_id(self.server_id)


class ServerList(BaseModel):
    """Bir bölümün ses izine göre gruplanmış sunucuları."""
    episode_no : int = 0
    sub        : list[ServerDescriptor] = []
    dub        : list[ServerDescriptor] = []
    raw        : list[ServerDescriptor] = []

    def for_type(self, episode_type: EpisodeType) -> list[ServerDescriptor]:
        return getattr(self, episode_type.value)
