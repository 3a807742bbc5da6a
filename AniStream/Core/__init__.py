# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from .Config     import AniStreamConfig
from .Exceptions import (
    AniStreamError,
    NoProxiesAvailable,
    FailedToFetchAfterRetries,
    NetworkError,
    ParseError,
    ObfuscationStale,
    DecryptionFailed,
    NoMatchingServer,
    UnknownError,
)

from .Proxy.ProxyModels import Proxy
from .Proxy.ProxyPool   import ProxyPool

from .Network.ResilientFetcher    import ResilientFetcher
from .Network.MultiDomainResolver import MultiDomainResolver

from .Server.ServerModels  import ServerFamily, EpisodeType, ServerDescriptor, ServerList
from .Server.ServerCatalog import ServerCatalog

from .Cipher.ObfuscationKeyExtractor import ObfuscationKeyExtractor, OffsetPair
from .Cipher.SecretReconstructor     import SecretReconstructor, ReconstructedSecret
from .Cipher.CipherEngine            import CipherEngine, CipherMaterial

from .Extractor.ExtractorModels      import IntroOutro, Track, Source, SourceManifest, CipherBased, DirectLink, ExtractionResult
from .Extractor.SourceManifestParser import SourceManifestParser
from .Extractor.ExtractorBase        import ExtractorBase
from .Extractor.ExtractorManager     import ExtractorManager

from .Helpers import HTMLHelper
