"""Constraint table — every length bound, enumeration and pattern of the me3 protocol.

This is the single source of truth for the protocol's limits. Validators
read from here; nothing below is mutated at runtime.
"""

import re

# ──────────────────────────────────────────────────────────────────────
# PROTOCOL
# ──────────────────────────────────────────────────────────────────────

ME3_VERSION = "0.1"
ME3_FILENAME = "me.json"


# ──────────────────────────────────────────────────────────────────────
# LENGTH BOUNDS (characters)
# ──────────────────────────────────────────────────────────────────────

MAX_NAME_LENGTH = 100
MAX_BIO_LENGTH = 500
MAX_HANDLE_LENGTH = 30
MAX_LOCATION_LENGTH = 100
MAX_BUTTON_TEXT_LENGTH = 30
MAX_FOOTER_TEXT_LENGTH = 200
MAX_FOOTER_LINK_TEXT_LENGTH = 60
MAX_INTENT_TITLE_LENGTH = 100
MAX_INTENT_DESCRIPTION_LENGTH = 300


# ──────────────────────────────────────────────────────────────────────
# CARDINALITY
# ──────────────────────────────────────────────────────────────────────

MAX_BUTTONS = 3


# ──────────────────────────────────────────────────────────────────────
# ENUMERATIONS (declaration order is the order used in messages)
# ──────────────────────────────────────────────────────────────────────

VALID_BUTTON_STYLES: tuple[str, ...] = ("primary", "secondary", "outline")

VALID_FREQUENCIES: tuple[str, ...] = ("daily", "weekly", "monthly", "irregular")

VALID_CURRENCIES: tuple[str, ...] = ("USD", "GBP", "EUR")

VALID_DAYS: tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)


# ──────────────────────────────────────────────────────────────────────
# PRICING
# ──────────────────────────────────────────────────────────────────────

# Bookers can never pay less than this; minimumAmount must equal it exactly.
MINIMUM_AMOUNT = 5


# ──────────────────────────────────────────────────────────────────────
# PATTERNS
# ──────────────────────────────────────────────────────────────────────

# Whole-string match
HANDLE_PATTERN = re.compile(r"[a-z0-9_-]+", re.IGNORECASE | re.ASCII)

# Prefix match: scheme plus at least one character
URL_PATTERN = re.compile(r"https?://.+", re.IGNORECASE)

# Whole-string match, e.g. "09:00-17:30"
TIME_WINDOW_PATTERN = re.compile(r"[0-9]{2}:[0-9]{2}-[0-9]{2}:[0-9]{2}")


def describe_constraints() -> dict:
    """Export the table as plain JSON-compatible data (for agents and the API)."""
    return {
        "version": ME3_VERSION,
        "filename": ME3_FILENAME,
        "limits": {
            "name": MAX_NAME_LENGTH,
            "bio": MAX_BIO_LENGTH,
            "handle": MAX_HANDLE_LENGTH,
            "location": MAX_LOCATION_LENGTH,
            "buttons": MAX_BUTTONS,
            "buttonText": MAX_BUTTON_TEXT_LENGTH,
            "footerText": MAX_FOOTER_TEXT_LENGTH,
            "footerLinkText": MAX_FOOTER_LINK_TEXT_LENGTH,
            "intentTitle": MAX_INTENT_TITLE_LENGTH,
            "intentDescription": MAX_INTENT_DESCRIPTION_LENGTH,
            "minimumAmount": MINIMUM_AMOUNT,
        },
        "enums": {
            "buttonStyle": list(VALID_BUTTON_STYLES),
            "frequency": list(VALID_FREQUENCIES),
            "currency": list(VALID_CURRENCIES),
            "day": list(VALID_DAYS),
        },
        "patterns": {
            "handle": HANDLE_PATTERN.pattern,
            "url": URL_PATTERN.pattern,
            "timeWindow": TIME_WINDOW_PATTERN.pattern,
        },
    }
