from .configuration import VocabConfig, normalize_order
from .shadow import ShadowEntity, ShadowEntityFactory, make_shadow_entity

__all__ = [
    "VocabConfig", "normalize_order",
    "ShadowEntity", "ShadowEntityFactory", "make_shadow_entity",
]
