"""Identificadores determinísticos para o conector Bluesky.

IDs de portal, usuário e mensagem derivam apenas de dados remotos, de forma
que a mesma entrada de log sempre produz as mesmas chaves (dedupe no delivery).
"""

from __future__ import annotations

import re

from app.protocols.models import PortalKey

_AT_URI_RE = re.compile(
    r"^at://(?P<repo>[^/?#]+)"
    r"(?:/(?P<collection>[^/?#]+)"
    r"(?:/(?P<rkey>[^/?#]+))?)?$",
    flags=re.IGNORECASE,
)

_POST_COLLECTION = "app.bsky.feed.post"


def make_portal_id(convo_id: str) -> str:
    """ID do portal é o próprio convoId."""
    return convo_id


def make_portal_key(convo_id: str, receiver: str | None = None) -> PortalKey:
    """Chave do portal para a conversa."""
    return PortalKey(id=make_portal_id(convo_id), receiver=receiver)


def make_user_id(did: str) -> str:
    """ID de usuário é o DID."""
    return did


def make_message_id(portal_id: str, remote_message_id: str) -> str:
    """ID composto `(portal, mensagem remota)`, estável entre chamadas.

    Args:
        portal_id: ID do portal (ver make_portal_id)
        remote_message_id: ID da mensagem no log remoto

    Returns:
        Identificador determinístico usado para deduplicação
    """
    return f"{portal_id}.{remote_message_id}"


def post_web_url(uri: str, web_url: str, handle: str | None = None) -> str | None:
    """Converte AT-URI de post em URL do app web.

    Retorna None para URIs que não apontam para um post.
    """
    match = _AT_URI_RE.match(uri.strip())
    if not match or match.group("collection") != _POST_COLLECTION:
        return None
    rkey = match.group("rkey")
    if not rkey:
        return None
    actor = handle or match.group("repo")
    return f"{web_url.rstrip('/')}/profile/{actor}/post/{rkey}"
