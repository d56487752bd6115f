# =============================================================================
# Extraction Configuration
# =============================================================================

LABEL_LOOKAHEAD_LINES = 2  # OCR often puts the value 1-2 lines below its label
ID_LINE_MAX_LENGTH = 15  # Longest label-adjacent line accepted as a bare ID
GENERIC_ID_MIN_LENGTH = 6
BOSNIAN_ID_MIN_LENGTH = 7
BOSNIAN_ID_MAX_LENGTH = 12
NAME_MIN_LETTERS = 2

# Heuristic "Capitalized Word Capitalized Word" name line
HEURISTIC_NAME_MIN_WORDS = 2
HEURISTIC_NAME_MAX_WORDS = 4


# =============================================================================
# Confidence Weights (heuristic reliability of each extraction method)
# =============================================================================

BOSNIAN_CONFIDENCE: dict[str, dict[str, float]] = {
    "id_number": {
        "label_pattern": 0.98,  # label-adjacent + shape match
        "blind_pattern": 0.9,
        "label_line": 0.8,
    },
    "first_name": {
        "label_line": 0.9,
        "heuristic": 0.8,  # signature line
    },
    "last_name": {
        "label_line": 0.9,
        "heuristic": 0.8,
    },
    "date_of_birth": {
        "label_pattern": 0.9,
    },
}

GENERIC_CONFIDENCE: dict[str, dict[str, float]] = {
    "id_number": {
        "label_pattern": 0.9,
        "label_line": 0.8,
        "blind_pattern": 0.4,
    },
    "full_name": {
        "label_line": 0.9,
        "label_line_below": 0.7,  # value found on a line after the label
        "heuristic": 0.5,
    },
    "date_of_birth": {
        "label_pattern": 0.9,
    },
}


# =============================================================================
# Verification
# =============================================================================

DEFAULT_NAME_FUZZY_THRESHOLD = 85  # rapidfuzz ratio, 0-100
