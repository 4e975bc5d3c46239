"""
#WHERE
    Imported by settings.py, the parser and the configuration module:
    single source of truth for defaults and the mini-language delimiters.

#WHAT
    Centralised constants used across 3+ modules.  Edit here, not in
    individual module files.

#INPUT / #OUTPUT
    Pure constants: no I/O.
"""

# ── Configuration defaults ───────────────────────────────────────────────

DEFAULT_ORDER: int = 99            # sort key for configs without a usable order
DEFAULT_USE_SHADOW_ENTITY: bool = True

# ── Vocabulary mini-language ─────────────────────────────────────────────

PLURAL_DELIMITER: str  = "*"       # following run holds plurals
SYNONYM_DELIMITER: str = "/"       # following run holds alternative nouns
SECTION_DELIMITERS: str = PLURAL_DELIMITER + SYNONYM_DELIMITER

PLACEHOLDER_TOKEN: str = "-"       # consumes a slot, adds no word
QUOTE: str = '"'                   # literal adjective
WEAK_OPEN: str  = "("
WEAK_CLOSE: str = ")"
POSSESSIVE_SUFFIX: str = "'s"
ABBREVIATION_MARK: str = "."

# ── Entity integration ───────────────────────────────────────────────────

HOST_ATTRIBUTE: str = "vocab_host"  # attribute under which entities hold their VocabHost
