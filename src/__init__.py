"""
SceneVault - Catalogue personnel de scenes video.

Ce package importe des fichiers video sous forme de scenes et les relie
aux entites deja connues du catalogue (acteurs, labels, studios, films)
en retrouvant leurs noms dans le chemin du fichier.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, objets valeur, exceptions)
- services/ : Couche application (import, matching, liaison, catalogue)
- adapters/ : Couche infrastructure (CLI, index, sonde video)
- infrastructure/ : Persistance SQLModel
"""
