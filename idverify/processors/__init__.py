"""Text processing stages of identity extraction and verification.

Importing this package registers every document profile strategy:
- Bosnian national ID card
- Generic fallback
"""

from idverify.processors import bosnian_extractor, generic_extractor  # noqa: F401 (registration)
from idverify.processors.document_classifier import classify
from idverify.processors.field_extractors import get_extractor, registered_profiles

__all__ = [
    "classify",
    "get_extractor",
    "registered_profiles",
]
