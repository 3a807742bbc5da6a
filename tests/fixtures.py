# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

"""Testlerde paylaşılan HTML / JS parçaları."""

SERVERS_HTML = """
<div class="player-servers">
  <div class="server-notice"><strong>Episode 12</strong></div>
  <div class="ps_-block ps_-block-sub servers-sub">
    <div class="ps__-list">
      <div class="item server-item" data-type="sub" data-id="101" data-server-id="4"><a class="btn">VidStreaming</a></div>
      <div class="item server-item" data-type="sub" data-id="102" data-server-id="1"><a class="btn">MegaCloud</a></div>
      <div class="item server-item" data-type="sub" data-id="103" data-server-id="3"><a class="btn">StreamTape</a></div>
    </div>
  </div>
  <div class="ps_-block ps_-block-sub servers-dub">
    <div class="ps__-list">
      <div class="item server-item" data-type="dub" data-id="201" data-server-id="4"><a class="btn"> Vidstreaming </a></div>
      <div class="item server-item" data-type="dub" data-id="" data-server-id="1"><a class="btn">Broken</a></div>
    </div>
  </div>
</div>
"""

PLAYER_SCRIPT = (
    "var W=function(q){switch(q){"
    "case 0x0: x = Ab, y = Cd; break;"
    "case 0x1a: x=Ef,y=Gh;break;"
    "case 0x2: partKey = Ij, y = Kl; break;"
    "}};"
    "var z=0x0,Ab=0x3,Cd=0x4,Ef=0x5,Gh=0x6,Ij=0x1,Kl=0x2;"
)

# PLAYER_SCRIPT çiftleri: (3, 4), (5, 6) → 10 karakterlik anahtar
PLAYER_PAIRS = [(3, 4), (5, 6)]
PASSWORD     = "Q7xLm2Pa9k"

STREAMTAPE_HTML = """
<html><body>
<div id="robotlink">/streamtape.com/get_video?id=abc</div>
<script>
document.getElementById('robotlink').innerHTML = '//streamtape.com/get_video?id=abc'+ ('xcd&expires=1700000000&token=t0k').substring(2).substring(1);
</script>
</body></html>
"""


def embed_secret(ciphertext: str, secret: str, pairs: list[tuple[int, int]]) -> str:
    """Anahtarı, SecretReconstructor'ın okuyacağı konumlara yerleştirir."""
    konumlar, cursor = [], 0
    for offset, length in pairs:
        konumlar.extend(range(cursor + offset, cursor + offset + length))
        cursor += length

    cikti  = [None] * (len(ciphertext) + len(secret))
    for konum, karakter in zip(konumlar, secret):
        cikti[konum] = karakter

    kalan = iter(ciphertext)
    return "".join(karakter if karakter is not None else next(kalan) for karakter in cikti)
