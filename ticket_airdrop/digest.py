"""
Signature digestion: witness signature -> decimal digit stream
"""

import hashlib
import logging
from typing import Literal

from .errors import ConfigError

logger = logging.getLogger(__name__)

HashMode = Literal['none', 'sha256', 'sha512']

HASH_MODES = ('none', 'sha256', 'sha512')


def hash_signature(signature: str, mode: HashMode = 'none') -> str:
    """
    Optionally replace a signature by the hex digest of its bytes.

    Args:
        signature: Raw witness signature
        mode: 'none', 'sha256' or 'sha512'

    Returns:
        The signature itself, or its lowercase hex digest

    Raises:
        ConfigError: If the mode is not supported
    """
    if mode not in HASH_MODES:
        raise ConfigError(f"Unsupported hash mode: {mode}")
    if mode == 'none':
        return signature
    return hashlib.new(mode, signature.encode('utf-8')).hexdigest()


def digitize(signature: str, mode: HashMode = 'none') -> str:
    """
    Map a (possibly hashed) signature onto a stream of decimal digits.

    Digits pass through unchanged; every other character is replaced by the
    decimal string of its code point.

    Args:
        signature: Raw witness signature
        mode: Hash mode applied before mapping

    Returns:
        Digit stream, never shorter than the hashed input

    Example:
        >>> digitize("a1b")
        '97198'
    """
    source = hash_signature(signature, mode)
    stream = ''.join(c if '0' <= c <= '9' else str(ord(c)) for c in source)
    logger.debug("Digitized %d characters into %d digits (hash=%s)",
                 len(source), len(stream), mode)
    return stream
