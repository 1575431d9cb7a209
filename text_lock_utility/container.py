"""Encrypted container encoding and decoding.

A container is the salt used for key derivation followed directly by the
XChaCha20-Poly1305 ciphertext:

    offset 0..31   salt
    offset 32..55  nonce
    offset 56..EOF encrypted data and the 16 byte authentication tag

There is no header, version tag or length prefix.
"""

import secrets

import nacl.bindings
import nacl.exceptions

import text_lock_utility.exceptions
import text_lock_utility.kdf
import text_lock_utility.types

NONCE_LENGTH: int = nacl.bindings.crypto_aead_xchacha20poly1305_ietf_NPUBBYTES
TAG_LENGTH: int = nacl.bindings.crypto_aead_xchacha20poly1305_ietf_ABYTES


def seal(key: bytes, plaintext: bytes) -> bytes:
    """Encrypt and authenticate plaintext, returning nonce || ciphertext."""
    try:
        nonce = secrets.token_bytes(NONCE_LENGTH)
    except OSError as e:
        raise text_lock_utility.exceptions.RandomSourceUnavailable from e

    return nonce + nacl.bindings.crypto_aead_xchacha20poly1305_ietf_encrypt(
        plaintext,
        None,
        nonce,
        key,
    )


def open_sealed(key: bytes, blob: bytes) -> bytes:
    """Verify and decrypt a blob produced by seal."""
    # Too short and wrong tag have to look the same to the caller
    if len(blob) < NONCE_LENGTH + TAG_LENGTH:
        raise text_lock_utility.exceptions.AuthenticationFailed

    try:
        return nacl.bindings.crypto_aead_xchacha20poly1305_ietf_decrypt(
            blob[NONCE_LENGTH:],
            None,
            blob[:NONCE_LENGTH],
            key,
        )
    except nacl.exceptions.CryptoError as e:
        raise text_lock_utility.exceptions.AuthenticationFailed from e


def split_container(container: bytes) -> text_lock_utility.types.TLContainerParts:
    """Split a container into its salt and ciphertext."""
    if len(container) < text_lock_utility.types.SALT_LENGTH:
        raise text_lock_utility.exceptions.MalformedContainer(
            f"Container is {len(container)} bytes, at least "
            f"{text_lock_utility.types.SALT_LENGTH} are needed for the salt."
        )

    return text_lock_utility.types.TLContainerParts(
        salt=container[: text_lock_utility.types.SALT_LENGTH],
        ciphertext=container[text_lock_utility.types.SALT_LENGTH :],
    )


def encrypt_to_container(plaintext: bytes, password: bytes) -> bytes:
    """Encrypt plaintext under a fresh salt and return the container bytes."""
    salt = text_lock_utility.kdf.generate_salt()
    key = text_lock_utility.kdf.derive_key(password, salt)
    return salt + seal(key, plaintext)


def decrypt_from_container(container: bytes, password: bytes) -> str:
    """Decrypt container bytes and return the recovered text.

    Raises MalformedContainer before any key derivation if the container
    can't hold a salt, AuthenticationFailed if the password is wrong or the
    data was modified, and InvalidEncoding if the plaintext isn't UTF-8.
    """
    parts = split_container(container)
    key = text_lock_utility.kdf.derive_key(password, parts.salt)
    plaintext = open_sealed(key, parts.ciphertext)

    try:
        return plaintext.decode("utf-8")
    except UnicodeDecodeError as e:
        raise text_lock_utility.exceptions.InvalidEncoding from e
