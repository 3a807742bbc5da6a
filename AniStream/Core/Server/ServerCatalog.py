# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from __future__ import annotations
from ...CLI          import konsol
from ..Helpers       import HTMLHelper, NodeHelper
from .ServerModels   import ServerDescriptor, ServerList

SERVER_SELECTORS = {
    "sub" : ".ps_-block.ps_-block-sub.servers-sub .ps__-list .server-item",
    "dub" : ".ps_-block.ps_-block-sub.servers-dub .ps__-list .server-item",
    "raw" : ".ps_-block.ps_-block-sub.servers-raw .ps__-list .server-item",
}
EPISODE_NO_SELECTOR = ".server-notice strong"


class ServerCatalog:
    @staticmethod
    def _descriptor(item: NodeHelper) -> ServerDescriptor | None:
        name      = item.select_text("a")
        data_id   = (item.attrs.get("data-id") or "").strip()
        server_id = (item.attrs.get("data-server-id") or "").strip()

        if not (data_id.isdigit() and server_id.isdigit()):
            konsol.log(f"[yellow][?] Sunucu atlandı (id okunamadı) » {name or '-'}")
            return None

        return ServerDescriptor(name=name, server_id=int(server_id), data_id=int(data_id))

    @classmethod
    def parse(cls, html: str) -> ServerList:
        """Sunucu listesi HTML'ini sub / dub / raw gruplarına ayırır."""
        secici = HTMLHelper(html)

        gruplar = {
            tur: [d for item in secici.select(selector) if (d := cls._descriptor(item))]
                for tur, selector in SERVER_SELECTORS.items()
        }

        # "Episode 12" gibi, son kelime bölüm numarası
        bildirim   = secici.select_text(EPISODE_NO_SELECTOR).split()
        episode_no = int(bildirim[-1]) if bildirim and bildirim[-1].isdigit() else 0

        return ServerList(episode_no=episode_no, **gruplar)

    @staticmethod
    def select(
        servers        : list[ServerDescriptor],
        requested_name : str | None,
        default_name   : str = "vidstreaming",
    ) -> ServerDescriptor | None:
        """İlk ad eşleşmesini döndürür; ad verilmezse `default_name` aranır."""
        aranan = (requested_name or default_name).strip().lower()
        return next((server for server in servers if server.name == aranan), None)
