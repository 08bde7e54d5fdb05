"""Connectors por canal — identidade e URLs de borda.

Estrutura:
- bluesky/: IDs de portal/usuário/mensagem e URLs web de posts
"""

__all__: list[str] = []
