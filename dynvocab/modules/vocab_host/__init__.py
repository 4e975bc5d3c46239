"""
#WHERE
    Imported by game code and tests.

#WHAT
    Vocabulary Host: per-entity attachment/activation of VocabConfigs with
    reconciled word removal, and start-of-day declaration processing.

#INPUT
    Entities, VocabConfig instances.

#OUTPUT
    Dictionary state that matches the set of active configurations.
"""

from .host import VocabHost, host_of
from .registry import VocabRegistry

__all__ = ["VocabHost", "VocabRegistry", "host_of"]
