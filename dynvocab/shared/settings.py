"""
#WHERE
    Passed to VocabParser, VocabConfig and VocabHost; each falls back to
    VocabSettings() when none is given.

#WHAT
    Library-wide defaults for parsing and configuration behaviour.

#INPUT / #OUTPUT
    Plain dataclass: no I/O.
"""

from __future__ import annotations

from dataclasses import dataclass

from .constants import DEFAULT_ORDER, DEFAULT_USE_SHADOW_ENTITY


@dataclass
class VocabSettings:
    default_order: int = DEFAULT_ORDER                  # order for configs with none / non-numeric
    use_shadow_entity: bool = DEFAULT_USE_SHADOW_ENTITY  # default for new VocabConfig instances
    lowercase: bool = True                              # fold parsed words to lower case
    abbreviations: bool = True                          # "st." also yields "st"


DEFAULT_SETTINGS = VocabSettings()


def resolve_settings(settings: VocabSettings | None) -> VocabSettings:
    return settings if settings is not None else DEFAULT_SETTINGS
