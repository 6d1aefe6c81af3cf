"""
Adaptateurs d'indexation pour SceneVault.

- InMemoryEntityIndex: Index par type d'entite, en memoire
"""

from src.adapters.indexing.memory_index import InMemoryEntityIndex

__all__ = ["InMemoryEntityIndex"]
