"""Shared OCR text samples."""

import pytest

from idverify.models.dto import ClaimedIdentity, DocumentProfile, ExtractedIdentity


BOSNIAN_CARD_TEXT = """BOSNA I HERCEGOVINA
LIČNA KARTA / ЛИЧНА КАРТА
PREZIME/SURNAME
HODŽIĆ
IME/GIVEN NAME
EDHEM
DATUM ROĐENJA/DATE OF BIRTH
01.02.1990.
SERIJSKI BROJ
2A141A80K
"""


@pytest.fixture
def bosnian_card_text() -> str:
    return BOSNIAN_CARD_TEXT


@pytest.fixture
def bosnian_lines() -> list[str]:
    return [line.strip() for line in BOSNIAN_CARD_TEXT.splitlines()]


@pytest.fixture
def signature_only_text() -> str:
    return "BOSNA I HERCEGOVINA\nPOTPIS/SIGNATURE\nHODŽIĆ EDHEM\nSERIJSKI BROJ\n2A141A80K\n"


@pytest.fixture
def generic_text() -> str:
    return "Welcome to the office\nJohn Smith\n12345\n"


@pytest.fixture
def extracted_identity() -> ExtractedIdentity:
    return ExtractedIdentity(
        id_number="2A141A80K",
        first_name="Edhem",
        last_name="Hodžić",
        full_name="Edhem Hodžić",
        document_country="BA",
        document_profile=DocumentProfile.BOSNIAN_NATIONAL_ID,
        confidence=0.9,
    )


@pytest.fixture
def claim() -> ClaimedIdentity:
    return ClaimedIdentity(first_name="Edhem", last_name="Hodzic", id_number="2a141a80k")
