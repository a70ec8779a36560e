from base64 import b64decode, b64encode

import pytest
from nacl.public import PrivateKey, SealedBox

from .actions_secrets import PublicKey
from .encryption import encrypt_secret


@pytest.fixture
def private_key() -> PrivateKey:
    return PrivateKey.generate()


@pytest.fixture
def public_key(private_key: PrivateKey) -> PublicKey:
    return PublicKey(key_id="568250167242549743", key=b64encode(bytes(private_key.public_key)).decode())


def describe_encrypt_secret():
    def it_seals_the_value_for_the_key_owner(private_key: PrivateKey, public_key: PublicKey):
        secret = encrypt_secret(public_key, "TOKEN", "s3cr3t")

        opened = SealedBox(private_key).decrypt(b64decode(secret.encrypted_value))
        assert opened == b"s3cr3t"
        assert secret.name == "TOKEN"
        assert secret.key_id == "568250167242549743"

    def it_accepts_bytes(private_key: PrivateKey, public_key: PublicKey):
        secret = encrypt_secret(public_key, "BIN", b"\x00\x01")

        assert SealedBox(private_key).decrypt(b64decode(secret.encrypted_value)) == b"\x00\x01"

    def it_produces_a_fresh_ciphertext_each_time(public_key: PublicKey):
        first = encrypt_secret(public_key, "A", "same")
        second = encrypt_secret(public_key, "A", "same")

        assert first.encrypted_value != second.encrypted_value

    @pytest.mark.parametrize("key", [PublicKey(key_id="1"), PublicKey(key="abc")])
    def it_requires_a_complete_public_key(key: PublicKey):
        with pytest.raises(ValueError, match="key and key_id"):
            encrypt_secret(key, "A", "v")
