# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

"""
Core/Helpers: HTML ve inline script ayıklama yardımcıları.
"""

from .HTMLHelper import HTMLHelper, NodeHelper
