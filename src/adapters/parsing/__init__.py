"""
Adaptateurs de parsing pour SceneVault.

Ce package contient les implementations concretes des ports de lecture de fichiers:
- MediaInfoProbe: Valide les fichiers video importes avec pymediainfo
"""

from src.adapters.parsing.mediainfo_extractor import MediaInfoProbe

__all__ = ["MediaInfoProbe"]
