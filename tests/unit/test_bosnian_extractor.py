"""Unit tests for the Bosnian national ID card profile."""

import pytest

from idverify.models.dto import DocumentProfile, ExtractionOptions
from idverify.processors.bosnian_extractor import (
    BosnianIdExtractor,
    is_valid_bosnian_id,
    normalize_bosnian_id,
)
from idverify.processors.candidate_scanner import split_lines


def _extract(text, options=None):
    return BosnianIdExtractor(options).extract(split_lines(text))


class TestBosnianCard:
    """Tests for a complete card."""

    def test_all_fields(self, bosnian_card_text):
        """Test every field is read with its label weight."""
        identity = _extract(bosnian_card_text)

        assert identity.first_name == "Edhem"
        assert identity.last_name == "Hodžić"
        assert identity.full_name == "Edhem Hodžić"
        assert identity.id_number == "2A141A80K"
        assert identity.date_of_birth == "01.02.1990"
        assert identity.document_country == "BA"
        assert identity.document_profile == DocumentProfile.BOSNIAN_NATIONAL_ID
        assert identity.field_confidences == {
            "first_name": 0.9,
            "last_name": 0.9,
            "id_number": 0.98,
            "date_of_birth": 0.9,
        }
        assert identity.confidence == pytest.approx(0.92)

    def test_values_on_label_line(self):
        """Test values printed after the label on the same line."""
        identity = _extract("PREZIME/SURNAME: HODŽIĆ\nIME/GIVEN NAME: EDHEM")
        assert identity.last_name == "Hodžić"
        assert identity.first_name == "Edhem"

    def test_cyrillic_card(self):
        """Test Cyrillic labels and values."""
        identity = _extract("ПРЕЗИМЕ\nХОЏИЋ\nИМЕ\nЕДХЕМ")
        assert identity.last_name == "Хоџић"
        assert identity.first_name == "Едхем"

    def test_bilingual_value_and_specimen(self):
        """Test only the Latin half is kept and watermarks are removed."""
        identity = _extract("PREZIME/SURNAME\nHODŽIĆ / ХОЏИЋ\nIME/GIVEN NAME\nEDHEM SPECIMEN")
        assert identity.last_name == "Hodžić"
        assert identity.first_name == "Edhem"

    def test_watermark_on_label_line(self):
        """Test a watermark after a same-line value does not hide the label."""
        identity = _extract("BOSNA I HERCEGOVINA\nIME: EDHEM SPECIMEN")
        assert identity.first_name == "Edhem"
        assert identity.field_confidences["first_name"] == 0.9

    def test_value_below_printed_label_line(self):
        """Test a label-only line between label and value is passed over."""
        identity = _extract("BOSNA I HERCEGOVINA\nPREZIME\nSPOL/SEX\nHODŽIĆ")
        assert identity.last_name == "Hodžić"
        assert identity.first_name is None

    def test_id_like_line_is_not_a_name(self):
        """Test a mostly-digit line below a name label is rejected."""
        identity = _extract("IME\n2A141A80K")
        assert identity.first_name is None
        assert identity.full_name is None


class TestBosnianIdNumber:
    """Tests for serial number extraction."""

    def test_label_pattern(self):
        """Test a labelled serial number scores at least 0.9."""
        identity = _extract("SERIJSKI BROJ\n2A141A80K")
        assert identity.id_number == "2A141A80K"
        assert identity.field_confidences["id_number"] >= 0.9
        assert identity.first_name is None and identity.full_name is None

    def test_embedded_spaces(self):
        """Test spaces inside the serial number are removed."""
        assert _extract("SERIJSKI BROJ\n2A 141A 80K").id_number == "2A141A80K"

    def test_whole_line_acceptance(self):
        """Test a short label-adjacent line is accepted when no pattern matches."""
        identity = _extract("SERIJSKI BROJ\n2A-141 A80K")
        assert identity.id_number == "2A141A80K"
        assert identity.field_confidences["id_number"] == 0.8

    def test_glued_to_label(self):
        """Test a value glued to the label is still read."""
        assert _extract("SERIJSKI BROJ2A141A80K").id_number == "2A141A80K"

    def test_blind_scan(self):
        """Test an unlabelled serial number is found by the blind scan."""
        identity = _extract("BOSNA I HERCEGOVINA\nNEKI TEKST\n2A141A80K")
        assert identity.id_number == "2A141A80K"
        assert identity.field_confidences["id_number"] == 0.9

    def test_label_override(self):
        """Test caller-supplied labels replace the defaults."""
        text = "PREZIME/SURNAME\nHODŽIĆ\nDOC ID\n2A141A80K"
        default = _extract(text)
        overridden = _extract(text, ExtractionOptions(id_number_labels=["DOC ID"]))
        assert default.field_confidences["id_number"] == 0.9
        assert overridden.field_confidences["id_number"] == 0.98

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("2A141A80K", True),
            ("1B22C3D", True),
            ("2A1A1K", False),
            ("1234567", False),
            ("ABCDEFG", False),
            ("2a141a80k", False),
            ("12A141A80K", False),
            ("2A141A80K1", False),
        ],
    )
    def test_validity(self, value, expected):
        """Test the serial number validity predicate."""
        assert is_valid_bosnian_id(value) is expected

    def test_normalize(self):
        """Test separators are removed and letters upper-cased."""
        assert normalize_bosnian_id("2a-141 a80k") == "2A141A80K"


class TestSignatureHeuristic:
    """Tests for the signature line fallback."""

    def test_both_names_from_signature(self, signature_only_text):
        """Test "LastName FirstName" below the signature label."""
        identity = _extract(signature_only_text)
        assert identity.first_name == "Edhem"
        assert identity.last_name == "Hodžić"
        assert identity.full_name == "Edhem Hodžić"
        assert identity.field_confidences["first_name"] == 0.8
        assert identity.field_confidences["last_name"] == 0.8

    def test_fills_only_missing_name(self):
        """Test a labelled name is kept and only the missing one is filled."""
        identity = _extract("PREZIME/SURNAME\nHODŽIĆ\nPOTPIS\nHODŽIĆ EDHEM")
        assert identity.field_confidences["last_name"] == 0.9
        assert identity.field_confidences["first_name"] == 0.8
        assert identity.first_name == "Edhem"

    def test_single_word_signature_ignored(self):
        """Test a one-word signature cannot be split."""
        identity = _extract("POTPIS\nHODŽIĆ")
        assert identity.first_name is None
        assert identity.last_name is None


class TestOptions:
    """Tests for extraction flags."""

    def test_skip_names(self, bosnian_card_text):
        """Test names are not extracted when disabled."""
        identity = _extract(bosnian_card_text, ExtractionOptions(extract_name=False))
        assert identity.first_name is None
        assert identity.id_number == "2A141A80K"

    def test_skip_id_and_birth_date(self, bosnian_card_text):
        """Test ID and birth date are not extracted when disabled."""
        options = ExtractionOptions(extract_id_number=False, extract_date_of_birth=False)
        identity = _extract(bosnian_card_text, options)
        assert identity.id_number is None
        assert identity.date_of_birth is None
        assert identity.full_name == "Edhem Hodžić"
