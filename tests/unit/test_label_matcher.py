"""Unit tests for label detection."""

from idverify.core.const import BOSNIAN_FIRST_NAME_LABELS, BOSNIAN_LAST_NAME_LABELS
from idverify.models.dto import LabelHit, LabelSet, Script
from idverify.processors.label_matcher import find_label, is_standard_label, value_regions

FIRST_NAME = LabelSet.from_config(BOSNIAN_FIRST_NAME_LABELS)
LAST_NAME = LabelSet.from_config(BOSNIAN_LAST_NAME_LABELS)


class TestFindLabel:
    """Tests for find_label."""

    def test_rightmost_label_wins(self):
        """Test the label ending furthest right is reported."""
        hit = find_label("IME/GIVEN NAME", FIRST_NAME)
        assert hit.label == "GIVEN NAME"
        assert hit.offset_after_label == len("IME/GIVEN NAME")
        assert hit.remainder == ""

    def test_stray_prefix_and_separator(self):
        """Test unanchored matching and separator stripping."""
        hit = find_label("|PREZIME/SURNAME: HODŽIĆ", LAST_NAME)
        assert hit.label == "SURNAME"
        assert hit.remainder == "HODŽIĆ"

    def test_case_insensitive(self):
        """Test labels match regardless of case."""
        hit = find_label("prezime hodžić", LAST_NAME)
        assert hit.label == "PREZIME"
        assert hit.remainder == "hodžić"

    def test_cyrillic_label(self):
        """Test Cyrillic labels are matched."""
        hit = find_label("ПРЕЗИМЕ ХОЏИЋ", LAST_NAME)
        assert hit.label == "ПРЕЗИМЕ"
        assert hit.remainder == "ХОЏИЋ"

    def test_no_label(self):
        """Test lines without labels return None."""
        assert find_label("EDHEM", LAST_NAME) is None
        assert find_label("", LAST_NAME) is None

    def test_inside_word_hit_skipped(self):
        """Test a hit inside a longer word does not hide an earlier label."""
        hit = find_label("IME: EDHEM SPECIMEN", FIRST_NAME, skip_inside_word=True)
        assert hit.label == "IME"
        assert hit.offset_after_label == 3
        assert hit.remainder == "EDHEM SPECIMEN"

    def test_inside_word_hit_kept_by_default(self):
        """Test hits inside words are reported unless asked otherwise."""
        assert find_label("SPECIMEN", FIRST_NAME).label == "IME"
        assert find_label("SPECIMEN", FIRST_NAME, skip_inside_word=True) is None


class TestLabelSet:
    """Tests for LabelSet construction."""

    def test_from_strings_detects_script(self):
        """Test plain strings are grouped by script."""
        label_set = LabelSet.from_strings(["DOC ID", "БРОЈ", "  "])
        assert label_set.for_script(Script.LATIN) == ("DOC ID",)
        assert label_set.for_script(Script.CYRILLIC) == ("БРОЈ",)
        assert set(label_set.all()) == {"DOC ID", "БРОЈ"}


class TestStandardLabel:
    """Tests for is_standard_label."""

    def test_bilingual_label_line(self):
        """Test a bilingual printed label is recognised."""
        assert is_standard_label("PREZIME/SURNAME")
        assert is_standard_label("ПРЕЗИМЕ")

    def test_value_is_not_label(self):
        """Test values and empty lines are not labels."""
        assert not is_standard_label("HODŽIĆ")
        assert not is_standard_label("PREZIME HODŽIĆ")
        assert not is_standard_label("")


class TestValueRegions:
    """Tests for value_regions."""

    def test_same_line_first(self):
        """Test the remainder is yielded before following lines."""
        hit = LabelHit(label="IME", offset_after_label=3, remainder="EDHEM")
        regions = list(value_regions(["IME EDHEM", "ALIJA"], 0, hit, 2))
        assert regions == [(0, "EDHEM"), (1, "ALIJA")]

    def test_skips_blank_line(self):
        """Test one blank line between label and value is tolerated."""
        hit = LabelHit(label="IME", offset_after_label=3)
        assert list(value_regions(["IME", "", "EDHEM"], 0, hit, 2)) == [(2, "EDHEM")]

    def test_skips_printed_label_line(self):
        """Test a printed label line is skipped and the next line still read."""
        hit = LabelHit(label="PREZIME", offset_after_label=7)
        regions = list(value_regions(["PREZIME", "SPOL/SEX", "HODŽIĆ"], 0, hit, 2))
        assert regions == [(2, "HODŽIĆ")]

    def test_skipped_label_counts_towards_lookahead(self):
        """Test a skipped label line does not extend the lookahead."""
        hit = LabelHit(label="PREZIME", offset_after_label=7)
        regions = list(value_regions(["PREZIME", "SPOL/SEX", "", "HODŽIĆ"], 0, hit, 2))
        assert regions == []

    def test_lookahead_limit(self):
        """Test lines past the lookahead are ignored."""
        hit = LabelHit(label="IME", offset_after_label=3)
        regions = list(value_regions(["IME", "A", "B", "C"], 0, hit, 2))
        assert regions == [(1, "A"), (2, "B")]
