"""CLI utility for encrypting and decrypting text files with a password.

The password is stretched with Argon2i into a key for XChaCha20-Poly1305,
and the result is stored as a single container file holding the salt
followed by the ciphertext.
"""

__name__ = "text_lock_utility"
__version__ = "0.1.0"
__author__ = "Text Lock Developers"
__license__ = "MIT License"
