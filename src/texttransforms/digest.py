"""SHA-256 digests of text."""

__docformat__ = 'google'

__all__ = [
    'digest_hex'
]

import hashlib

def digest_hex(text: str) -> str:
    """
    Hash the UTF-8 encoding of a string with SHA-256.

    Args:
        text: Input string, may be empty

    Returns:
        64 lowercase hexadecimal characters, most significant nibble first

    Example:
        >>> digest_hex('Hello, CryptoKit!')
        '746e0151b9f045826c327b7a465b02e5fdf15d060eca2dcdd74827778aa1355b'
    """
    return hashlib.sha256(text.encode('utf-8')).hexdigest()
