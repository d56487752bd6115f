from typing import Pattern
import re

# Serbian/Bosnian Cyrillic to Latin mapping (Gaj's Latin alphabet)
CYRILLIC_TO_LATIN_MAPPING: dict[str, str] = {
    "а": "a",
    "б": "b",
    "в": "v",
    "г": "g",
    "д": "d",
    "ђ": "đ",
    "е": "e",
    "ж": "ž",
    "з": "z",
    "и": "i",
    "ј": "j",
    "к": "k",
    "л": "l",
    "љ": "lj",
    "м": "m",
    "н": "n",
    "њ": "nj",
    "о": "o",
    "п": "p",
    "р": "r",
    "с": "s",
    "т": "t",
    "ћ": "ć",
    "у": "u",
    "ф": "f",
    "х": "h",
    "ц": "c",
    "ч": "č",
    "џ": "dž",
    "ш": "š",
    "А": "A",
    "Б": "B",
    "В": "V",
    "Г": "G",
    "Д": "D",
    "Ђ": "Đ",
    "Е": "E",
    "Ж": "Ž",
    "З": "Z",
    "И": "I",
    "Ј": "J",
    "К": "K",
    "Л": "L",
    "Љ": "Lj",
    "М": "M",
    "Н": "N",
    "Њ": "Nj",
    "О": "O",
    "П": "P",
    "Р": "R",
    "С": "S",
    "Т": "T",
    "Ћ": "Ć",
    "У": "U",
    "Ф": "F",
    "Х": "H",
    "Ц": "C",
    "Ч": "Č",
    "Џ": "Dž",
    "Ш": "Š",
}


# Latin to Cyrillic mapping; digraph keys must win over their first letter
LATIN_TO_CYRILLIC_MAPPING: dict[str, str] = {
    "LJ": "Љ",
    "NJ": "Њ",
    "DŽ": "Џ",
    "Lj": "Љ",
    "Nj": "Њ",
    "Dž": "Џ",
    "lj": "љ",
    "nj": "њ",
    "dž": "џ",
    **{latin: cyr for cyr, latin in CYRILLIC_TO_LATIN_MAPPING.items() if len(latin) == 1},
}


# Latin letters with diacritics that NFD does not fully reduce
DIACRITIC_FOLDING: dict[str, str] = {
    "đ": "d",
    "ć": "c",
    "č": "c",
    "š": "s",
    "ž": "z",
}


# =============================================================================
# Bosnia and Herzegovina national identity card
# =============================================================================

BOSNIAN_COUNTRY_CODE = "BA"

BOSNIAN_COUNTRY_MARKERS: tuple[str, ...] = (
    "BOSNA I HERCEGOVINA",
    "BOSNIA AND HERZEGOVINA",
    "БОСНА И ХЕРЦЕГОВИНА",
)

# Labels printed only on Bosnian/Serbian-language cards; identify the layout
# when OCR missed the country name
BOSNIAN_LAYOUT_MARKERS: tuple[str, ...] = (
    "PREZIME",
    "ПРЕЗИМЕ",
    "SERIJSKI BROJ",
    "СЕРИЈСКИ БРОЈ",
    "LIČNA KARTA",
    "ЛИЧНА КАРТА",
    "OSOBNA ISKAZNICA",
)

BOSNIAN_FIRST_NAME_LABELS: dict[str, tuple[str, ...]] = {
    "latin": ("IME", "GIVEN NAME", "GIVEN NAMES"),
    "cyrillic": ("ИМЕ",),
}

BOSNIAN_LAST_NAME_LABELS: dict[str, tuple[str, ...]] = {
    "latin": ("PREZIME", "SURNAME"),
    "cyrillic": ("ПРЕЗИМЕ",),
}

# A first-name label hit on a line carrying one of these is really a surname label
BOSNIAN_FIRST_NAME_LABEL_CONFLICTS: tuple[str, ...] = ("PREZIME", "SURNAME", "ПРЕЗИМЕ")

BOSNIAN_ID_LABELS: dict[str, tuple[str, ...]] = {
    "latin": (
        "SERIJSKI BROJ",
        "SERIAL NUMBER",
        "BROJ DOKUMENTA",
        "DOCUMENT NUMBER",
    ),
    "cyrillic": ("СЕРИЈСКИ БРОЈ", "БРОЈ ДОКУМЕНТА"),
}

BOSNIAN_SIGNATURE_LABELS: dict[str, tuple[str, ...]] = {
    "latin": ("POTPIS", "SIGNATURE"),
    "cyrillic": ("ПОТПИС",),
}

# Labels printed on every card; a line equal to one of these is never a value
BOSNIAN_STANDARD_LABELS: tuple[str, ...] = (
    "BOSNA I HERCEGOVINA",
    "LIČNA KARTA",
    "OSOBNA ISKAZNICA",
    "IDENTITY CARD",
    "PREZIME",
    "IME",
    "SPOL",
    "DATUM ROĐENJA",
    "DATE OF BIRTH",
    "DRŽAVLJANSTVO",
    "CITIZENSHIP",
    "POTPIS",
    "SIGNATURE",
    "VAŽI DO",
    "VRIJEDI DO",
    "VALID UNTIL",
    "SERIJSKI BROJ",
    "SERIAL NUMBER",
    "SURNAME",
    "GIVEN NAME",
    "GIVEN NAMES",
    "SEX",
    "БОСНА И ХЕРЦЕГОВИНА",
    "ЛИЧНА КАРТА",
    "ПРЕЗИМЕ",
    "ИМЕ",
    "ПОЛ",
    "ДАТУМ РОЂЕЊА",
    "ДРЖАВЉАНСТВО",
    "ПОТПИС",
    "ВАЖИ ДО",
    "СЕРИЈСКИ БРОЈ",
)

# Whole-word noise tokens that disqualify a line from holding a name
BOSNIAN_NAME_NOISE: tuple[str, ...] = (
    "BOSNA",
    "HERCEGOVINA",
    "HERZEGOVINA",
    "IDENTITY",
    "CARD",
    "ID",
    "LIČNA",
    "KARTA",
    "OSOBNA",
    "ISKAZNICA",
    "REPUBLIC",
    "REPUBLIKA",
    "PREZIME",
    "IME",
    "SURNAME",
    "GIVEN NAME",
    "NAME",
    "POTPIS",
    "SIGNATURE",
    "CITIZENSHIP",
    "DRŽAVLJANSTVO",
    "DATE",
    "BIRTH",
    "DATUM",
    "ROĐENJA",
    "ROĐEN",
    "MJESTO",
    "PLACE",
    "SPOL",
    "SEX",
    "POL",
    "EXPIRY",
    "VRIJEDI",
    "VAŽI",
    "NUMBER",
    "BROJ",
)

# Tokens that may never appear inside an ID number candidate
BOSNIAN_ID_BANNED_WORDS: tuple[str, ...] = (
    "ISKAZNICA",
    "OSOBNA",
    "KARTA",
    "LICNA",
    "LIČNA",
    "IDENTITY",
    "CARD",
    "NUMBER",
    "BROJ",
    "IME",
    "NAME",
    "SURNAME",
    "PREZIME",
)

# Lines carrying these are skipped by the blind ID scan
BOSNIAN_ID_LINE_NOISE: tuple[str, ...] = (
    "IDENTITY",
    "CARD",
    "NUMBER",
    "BROJ",
    "IME",
    "NAME",
    "SURNAME",
    "PREZIME",
)

# Serial number shapes such as 2A141A80K, tolerant of OCR spacing/dashes
BOSNIAN_ID_PATTERNS: tuple[Pattern[str], ...] = (
    re.compile(r"\d[A-Z]\d{3}[A-Z]\d{2}[A-Z]"),
    re.compile(r"\d\s?[A-Z]\s?\d{1,3}\s?[A-Z]\s?\d{1,2}\s?[A-Z]"),
    re.compile(r"\d-?[A-Z]-?\d{1,3}-?[A-Z]-?\d{1,2}-?[A-Z]"),
    re.compile(r"[0-9][A-Z][0-9]{1,3}[A-Z][0-9]{1,2}[A-Z]"),
)

BOSNIAN_ID_SHAPE: Pattern[str] = re.compile(r"\d[A-Z]\d{1,3}[A-Z]\d{1,2}[A-Z]")


# =============================================================================
# Generic (profile-agnostic) identity document
# =============================================================================

GENERIC_NAME_LABELS: dict[str, tuple[str, ...]] = {
    "latin": ("FULL NAME", "NAME", "IME/NAME", "IME:"),
    "cyrillic": ("ИМЕ:", "ФИО"),
}

GENERIC_ID_LABELS: dict[str, tuple[str, ...]] = {
    "latin": (
        "ID NO",
        "ID NUMBER",
        "IDENTIFICATION",
        "DOCUMENT NO",
        "DOCUMENT NUMBER",
        "CARD NO",
        "NUMBER",
        "NO.",
        "SERIJSKI BROJ",
        "SERIAL NUMBER",
    ),
    "cyrillic": ("СЕРИЈСКИ БРОЈ", "НОМЕР"),
}

GENERIC_NAME_NOISE: tuple[str, ...] = (
    "IDENTITY",
    "CARD",
    "ID",
    "REPUBLIC",
    "REPUBLIKA",
    "PASSPORT",
    "DRIVER",
    "LICENCE",
    "LICENSE",
    "NATIONAL",
    "DOCUMENT",
    "NAME",
    "FULL NAME",
    "SIGNATURE",
    "DATE",
    "BIRTH",
    "NUMBER",
)

GENERIC_ID_PATTERN: Pattern[str] = re.compile(r"[A-Z0-9]{6,}")


# =============================================================================
# Shared fields
# =============================================================================

DATE_OF_BIRTH_LABELS: dict[str, tuple[str, ...]] = {
    "latin": (
        "DATE OF BIRTH",
        "BIRTH",
        "BORN",
        "DOB",
        "DATUM ROĐENJA",
        "DATUM RODENJA",
        "DATUM RODJENJA",
    ),
    "cyrillic": ("ДАТУМ РОЂЕЊА",),
}

DATE_OF_BIRTH_PATTERNS: tuple[Pattern[str], ...] = (
    re.compile(r"\d{1,2}[./-]\d{1,2}[./-]\d{2,4}"),
    re.compile(r"\d{1,2}\s+[A-Za-z]+\.?\s+\d{2,4}"),
)

# Watermark printed across sample cards
SPECIMEN_MARKERS: tuple[str, ...] = ("SPECIMEN", "УЗОРАК", "UZORAK")
