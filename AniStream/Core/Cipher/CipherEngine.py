# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

"""
OpenSSL `Salted__` uyumlu anahtar türetme ve AES-256-CBC.

Blob yapısı (base64 çözülmüş):
    [0:8]   "Salted__" işareti (doğrulanmaz)
    [8:16]  salt
    [16:]   şifreli veri
"""

from __future__ import annotations
from Crypto.Cipher   import AES
from Crypto.Util     import Padding
from pydantic        import BaseModel, ConfigDict
from ..Exceptions    import DecryptionFailed
import base64, binascii, hashlib

SALTED_MARKER = b"Salted__"


class CipherMaterial(BaseModel):
    model_config = ConfigDict(frozen=True)

    key : bytes
    iv  : bytes


class CipherEngine:
    @staticmethod
    def derive_key_iv(password: bytes, salted_blob: bytes) -> CipherMaterial:
        """D0 = MD5(p||s), Dn = MD5(Dn-1||p||s); key = D0||D1, iv = D2."""
        salt = salted_blob[8:16]
        if len(salt) != 8:
            raise DecryptionFailed(f"Salt okunamadı, blob {len(salted_blob)} byte")

        password = password + salt
        digest   = b""
        hashes   = []
        for _ in range(3):
            digest = hashlib.md5(digest + password).digest()
            hashes.append(digest)

        return CipherMaterial(key=hashes[0] + hashes[1], iv=hashes[2])

    @staticmethod
    def decrypt_cbc(key: bytes, iv: bytes, ciphertext: bytes) -> bytes:
        try:
            cipher = AES.new(key, AES.MODE_CBC, iv)
            return Padding.unpad(cipher.decrypt(ciphertext), AES.block_size)
        except ValueError as hata:
            raise DecryptionFailed(f"AES çözme başarısız: {hata}") from hata

    @staticmethod
    def encrypt_cbc(key: bytes, iv: bytes, plaintext: bytes) -> bytes:
        cipher = AES.new(key, AES.MODE_CBC, iv)
        return cipher.encrypt(Padding.pad(plaintext, AES.block_size))

    @classmethod
    def decrypt_salted(cls, encoded: str, password: str) -> str:
        """Base64 `Salted__` blob'unu parola ile çözüp UTF-8 metin döndürür."""
        try:
            blob = base64.b64decode(encoded, validate=True)
        except (binascii.Error, ValueError) as hata:
            raise DecryptionFailed(f"Base64 çözülemedi: {hata}") from hata

        material  = cls.derive_key_iv(password.encode("utf-8"), blob)
        plaintext = cls.decrypt_cbc(material.key, material.iv, blob[16:])

        try:
            return plaintext.decode("utf-8")
        except UnicodeDecodeError as hata:
            raise DecryptionFailed(f"UTF-8 çözülemedi: {hata}") from hata

    @classmethod
    def encrypt_salted(cls, plaintext: str, password: str, salt: bytes) -> str:
        """decrypt_salted'ın tersi; test fixture'ları üretmek için."""
        blob     = SALTED_MARKER + salt
        material = cls.derive_key_iv(password.encode("utf-8"), blob)
        return base64.b64encode(blob + cls.encrypt_cbc(material.key, material.iv, plaintext.encode("utf-8"))).decode()
