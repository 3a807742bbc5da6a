# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from __future__ import annotations

from selectolax.lexbor import LexborHTMLParser, LexborNode
import html as _html
import re


class NodeHelper:
    """
    selectolax LexborNode sarmalayıcısı; sunucu listesi gibi tekrar eden bloklarda element seviyesinde seçim.

    Kullanım:
        for item in secici.select(".server-item"):
            name    = item.select_text("a")
            data_id = item.attrs.get("data-id")
    """

    __slots__ = ("_node",)

    def __init__(self, node: LexborNode):
        self._node = node

    def __bool__(self):
        return self._node is not None

    def __repr__(self):
        return f"NodeHelper(<{self._node.tag}>)" if self._node else "NodeHelper(None)"

    @property
    def attrs(self) -> dict:
        return self._node.attrs

    def text(self, *args, **kwargs) -> str:
        return self._node.text(*args, **kwargs)

    def select_text(self, selector: str | None = None) -> str:
        """CSS selector ile child element bul ve text içeriğini döndür."""
        el = self._node.css_first(selector) if selector else self._node
        if not el:
            return ""
        val = el.text(strip=True)
        return _html.unescape(val) if val else ""


class HTMLHelper:
    """
    Selectolax + regex ile HTML / inline script ayıklama yardımcısı.
    """

    def __init__(self, html: str):
        self.html   = html
        self.parser = LexborHTMLParser(html)

    # ========================
    # SELECTOR (CSS) İŞLEMLERİ
    # ========================

    def select(self, selector: str) -> list[NodeHelper]:
        """CSS selector ile tüm eşleşen elementleri döndür."""
        return [NodeHelper(n) for n in self.parser.css(selector)]

    def select_text(self, selector: str) -> str:
        """CSS selector ile ilk elementi bul ve text içeriğini döndür."""
        el = self.parser.css_first(selector)
        if not el:
            return ""
        val = el.text(strip=True)
        return _html.unescape(val) if val else ""

    # ========================
    # REGEX İŞLEMLERİ
    # ========================

    def regex_first(self, pattern: str, group: int | None = 1, flags: int = 0) -> str | tuple | None:
        """Regex ile ham HTML'de ara, istenen grubu döndür (group=None ise tüm gruplar tuple olarak)."""
        match = re.search(pattern, self.html, flags=flags)
        if not match:
            return None

        if group is None:
            return match.groups()

        return match.group(group)
