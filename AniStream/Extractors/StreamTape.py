# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from AniStream.Core import ExtractorBase, DirectLink, HTMLHelper, ServerFamily, UnknownError

# robotlink innerHTML pattern:
# getElementById('robotlink').innerHTML = '//streamtape.com/get'+ ('xcd_video?id=...&token=...').substring(2).substring(1)
ROBOTLINK_REGEX = r"robotlink'\)\.innerHTML\s*=\s*'([^']*)'\s*\+\s*\('([^']*)'"
INNERHTML_REGEX = r"innerHTML\s*=\s*'([^']*)'\s*\+\s*\('([^']*)'"

class StreamTape(ExtractorBase):
    name              = "StreamTape"
    main_url          = "https://streamtape.com"
    family            = ServerFamily.STREAMTAPE
    supported_domains = ["streamtape.com", "streamtape.to", "streamtape.net", "strtape.cloud", "strcloud.in"]

    @staticmethod
    def parse(html: str) -> DirectLink:
        sel   = HTMLHelper(html)
        match = sel.regex_first(ROBOTLINK_REGEX, group=None) or sel.regex_first(INNERHTML_REGEX, group=None)
        if not match:
            raise UnknownError("StreamTape: robotlink pattern bulunamadı.")

        base_part, token_part = match

        # JavaScript'in .substring(2).substring(1) → Python [3:]
        video_url = f"https:{base_part}{token_part[3:]}"

        return DirectLink(url=video_url, is_m3u8=".m3u8" in video_url)

    async def extract(self, url: str, referer: str = None) -> DirectLink:
        html = await self.fetcher.fetch_text(url, headers={"Referer": referer or self.main_url})
        return self.parse(html)
