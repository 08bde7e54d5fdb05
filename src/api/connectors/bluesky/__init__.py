"""Conector Bluesky — identificadores estáveis de portal/mensagem."""

from .ids import (
    make_message_id,
    make_portal_id,
    make_portal_key,
    make_user_id,
    post_web_url,
)

__all__ = [
    "make_message_id",
    "make_portal_id",
    "make_portal_key",
    "make_user_id",
    "post_web_url",
]
