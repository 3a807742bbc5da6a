# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

"""
Obfuscate edilmiş player script'inden (offset, uzunluk) çiftlerini çıkarır.

Script içinde şu yapı aranır:
    case 0x1f: a = Xy, b = Zq;      → çift (Xy, Zq)
    ...,Xy=0x4,Zq=0xa,...           → Xy = 0x4, Zq = 0xa

Obfuscation şekil değiştirdiğinde yalnızca buradaki regex'ler güncellenir.
"""

from __future__ import annotations
from typing       import NamedTuple
from ..Exceptions import ObfuscationStale
import re

CASE_REGEX     = r"case\s*0x[0-9a-fA-F]+:\s*[\w$]+\s*=\s*([\w$]+)\s*,\s*[\w$]+\s*=\s*([\w$]+);"
VARIABLE_REGEX = r",{name}=((?:0[xX])?[0-9a-fA-F]+)"
IGNORE_MARKER  = "partKey"


class OffsetPair(NamedTuple):
    offset : int
    length : int


class ObfuscationKeyExtractor:
    @staticmethod
    def resolve_variable(name: str, script: str) -> int | None:
        """`,name=<hex>` atamasının ilk eşleşmesini 16'lık tabanda çözer."""
        match = re.search(VARIABLE_REGEX.format(name=re.escape(name)), script)
        if not match:
            return None

        value = match.group(1)
        if value[:2].lower() == "0x":
            value = value[2:]

        try:
            return int(value, 16)
        except ValueError:
            return None

    @classmethod
    def find_pairs(cls, script: str) -> list[OffsetPair]:
        """Kaynaktaki sırayla çiftler; çözülemeyen veya partKey içeren case'ler atlanır."""
        pairs = []

        for match in re.finditer(CASE_REGEX, script):
            if IGNORE_MARKER in match.group(0):
                continue

            offset = cls.resolve_variable(match.group(1), script)
            length = cls.resolve_variable(match.group(2), script)
            if offset is None or length is None:
                continue

            pairs.append(OffsetPair(offset, length))

        return pairs

    @classmethod
    def extract(cls, script: str) -> list[OffsetPair]:
        """
        Raises:
            ObfuscationStale: script'te hiç çift bulunamadıysa
        """
        if pairs := cls.find_pairs(script):
            return pairs

        raise ObfuscationStale()
