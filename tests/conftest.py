import sys
import os

import pytest

# Ensure the project root is on the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dynvocab.shared.dictionary import CommandDictionary
from dynvocab.modules.vocab_config import VocabConfig
from dynvocab.modules.vocab_host import VocabHost


class Thing:
    """Minimal game object holding a VocabHost component."""

    def __init__(self, name, vocab_words=None, registrar=None):
        self.name = name
        self.vocab_host = VocabHost(self, vocab_words, registrar=registrar)

    def __repr__(self):
        return f"Thing({self.name!r})"


@pytest.fixture
def registrar():
    """Fresh dictionary per test: keeps the process-wide cmd_dict untouched."""
    return CommandDictionary()


@pytest.fixture
def make_thing(registrar):
    def _make(name="thing", vocab_words=None):
        return Thing(name, vocab_words, registrar=registrar)
    return _make


@pytest.fixture
def make_config(registrar):
    def _make(vocab_words=None, **kwargs):
        kwargs.setdefault("registrar", registrar)
        kwargs.setdefault("use_shadow_entity", False)
        return VocabConfig(vocab_words, **kwargs)
    return _make
