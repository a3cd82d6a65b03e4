from .base import GrainComposition
from .registry import get_composition, register_composition, list_compositions

__all__ = ["GrainComposition", "get_composition", "register_composition", "list_compositions"]
