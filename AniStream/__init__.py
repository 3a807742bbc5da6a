# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

"""
AniStream: proxy rotasyonlu fetch katmanı ve MegaCloud / StreamTape kaynak çözücü.
"""
