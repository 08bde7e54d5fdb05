"""Settings específicas de Bluesky.

Configurações do canal Bluesky (log de chat via chat.bsky.convo.getLog).
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from functools import lru_cache

BLUESKY_WEB_URL: str = "https://bsky.app"

_DID_PREFIX_RE = re.compile(r"^did:[a-z]+:")


@dataclass(frozen=True)
class BlueskySettings:
    """Configurações do canal Bluesky.

    Attributes:
        user_did: DID do login local (marca mensagens próprias)
        web_url: URL base do app web, usada nos links de posts citados
        embed_html: Gera corpo HTML alternativo para posts citados
    """

    user_did: str = ""
    web_url: str = BLUESKY_WEB_URL
    embed_html: bool = True

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Bluesky."""
        errors: list[str] = []
        if self.user_did and not _DID_PREFIX_RE.match(self.user_did):
            errors.append(f"BLUESKY_USER_DID inválido: {self.user_did}")
        if not self.web_url.startswith(("http://", "https://")):
            errors.append("BLUESKY_WEB_URL deve ser http(s)")
        return errors


def _load_from_env() -> BlueskySettings:
    """Carrega BlueskySettings de variáveis de ambiente."""
    return BlueskySettings(
        user_did=os.getenv("BLUESKY_USER_DID", ""),
        web_url=os.getenv("BLUESKY_WEB_URL", BLUESKY_WEB_URL),
        embed_html=os.getenv("BLUESKY_EMBED_HTML", "true").lower() in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_bluesky_settings() -> BlueskySettings:
    """Retorna instância cacheada de BlueskySettings."""
    return _load_from_env()
