#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdplain/utils/encoding.py
"""Character encoding detection and handling utilities.

Markdown sources arrive as paths, raw bytes or streams. This module decodes
them to text with chardet-based detection and a list of fallback encodings.
"""

from __future__ import annotations

import logging
from typing import IO

import chardet

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_ENCODINGS = ("utf-8", "utf-8-sig", "latin-1")


def detect_encoding(
    data: bytes,
    sample_size: int = 8192,
    confidence_threshold: float = 0.7,
) -> str | None:
    """Detect character encoding of binary data using chardet.

    Parameters
    ----------
    data : bytes
        Binary data to analyze
    sample_size : int, default 8192
        Number of bytes to sample for detection (uses first N bytes)
    confidence_threshold : float, default 0.7
        Minimum confidence level (0.0-1.0) required to trust detection

    Returns
    -------
    str | None
        Detected encoding name, or None if detection fails or confidence
        is below threshold

    """
    result = chardet.detect(data[:sample_size])

    encoding = result.get("encoding") if result else None
    if not encoding:
        logger.debug("chardet: No encoding detected")
        return None

    confidence = result.get("confidence") or 0.0
    logger.debug(f"chardet detected encoding: {encoding} (confidence: {confidence:.2f})")

    if confidence < confidence_threshold:
        logger.debug(f"chardet confidence {confidence:.2f} below threshold {confidence_threshold}")
        return None
    return encoding


def read_text_with_encoding_detection(
    data: bytes,
    fallback_encodings: list[str] | tuple[str, ...] | None = None,
    use_chardet: bool = True,
) -> str:
    """Read binary data as text with automatic encoding detection.

    Attempts to decode binary data using multiple strategies:
    1. chardet-based detection (if enabled)
    2. Fallback encodings in order
    3. Final fallback with error replacement

    Parameters
    ----------
    data : bytes
        Binary data to decode
    fallback_encodings : sequence of str or None, default None
        Encodings to try in order. If None, uses utf-8, utf-8-sig, latin-1.
    use_chardet : bool, default True
        Whether to attempt chardet-based detection first

    Returns
    -------
    str
        Decoded text content

    Examples
    --------
    >>> read_text_with_encoding_detection(b"Hello, world!")
    'Hello, world!'

    """
    if fallback_encodings is None:
        fallback_encodings = DEFAULT_FALLBACK_ENCODINGS

    if use_chardet and data:
        detected_encoding = detect_encoding(data)
        if detected_encoding:
            try:
                return data.decode(detected_encoding)
            except (UnicodeDecodeError, LookupError) as e:
                logger.debug(f"Failed to decode with chardet-detected encoding {detected_encoding}: {e}")

    for encoding in fallback_encodings:
        try:
            return data.decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            logger.debug(f"Failed to decode with {encoding}: {e}")

    logger.warning("All encoding attempts failed, using utf-8 with error replacement")
    return data.decode("utf-8", errors="replace")


def normalize_stream_to_text(stream: IO[bytes] | IO[str]) -> str:
    """Read content from a file-like object and normalize to text.

    Binary streams are decoded with encoding detection; text streams are
    returned as-is.

    Parameters
    ----------
    stream : IO[bytes] or IO[str]
        File-like object to read from

    Returns
    -------
    str
        Decoded text content from the stream

    Raises
    ------
    TypeError
        If stream.read() returns something other than bytes or str

    """
    content = stream.read()

    if isinstance(content, bytes):
        return read_text_with_encoding_detection(content)
    if isinstance(content, str):
        return content
    raise TypeError(f"Stream read() returned unexpected type {type(content).__name__}. Expected bytes or str.")
