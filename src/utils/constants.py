"""
Constantes globales pour SceneVault.

Ce module contient les constantes utilisees dans l'application:
- Extensions video reconnues a l'import
- Patterns a ignorer lors du scan d'une bibliotheque
"""

# Extensions video reconnues
VIDEO_EXTENSIONS = frozenset({
    ".mkv",
    ".mp4",
    ".m4v",
    ".avi",
    ".mov",
    ".wmv",
    ".flv",
    ".webm",
    ".mpg",
    ".mpeg",
    ".ts",
    ".3gp",
    ".ogv",
})

# Patterns a ignorer (sample, trailers)
IGNORED_PATTERNS = frozenset({
    "sample",
    "trailer",
    "preview",
})
