"""
Adaptateur CLI (Typer + Rich) de SceneVault.
"""
