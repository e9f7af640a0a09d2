"""
Signature mapping: пути в дереве Штерна-Броко как произведения матриц.
"""

from stern_brocot.core.signature.mapper import (
    DEFAULT_ALPHABET,
    STEP_MATRICES,
    SignatureAlphabet,
    SignatureFormatError,
    Step,
    map_signature,
    normalize_signature,
    parse_signature,
    signature_of,
)

__all__ = [
    # Config
    "DEFAULT_ALPHABET",
    "SignatureAlphabet",
    # Types
    "Step",
    "STEP_MATRICES",
    # Exceptions
    "SignatureFormatError",
    # Functions
    "map_signature",
    "normalize_signature",
    "parse_signature",
    "signature_of",
]
