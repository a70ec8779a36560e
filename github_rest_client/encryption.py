"""Sealing secret values for the Actions and Codespaces secrets APIs."""

from base64 import b64decode, b64encode

from nacl.public import PublicKey as SodiumPublicKey
from nacl.public import SealedBox

from .actions_secrets import EncryptedSecret, PublicKey


def encrypt_secret(public_key: PublicKey, name: str, value: str | bytes) -> EncryptedSecret:
    """Encrypt value with the owner's public key using a libsodium sealed box.

    public_key is the result of one of the get_*_public_key methods.
    """
    if not public_key.key or not public_key.key_id:
        raise ValueError("public key must carry both key and key_id")
    if isinstance(value, str):
        value = value.encode()
    box = SealedBox(SodiumPublicKey(b64decode(public_key.key)))
    encrypted = box.encrypt(value)
    return EncryptedSecret(
        name=name,
        key_id=public_key.key_id,
        encrypted_value=b64encode(encrypted).decode(),
    )
