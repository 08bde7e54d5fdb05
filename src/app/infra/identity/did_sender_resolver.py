"""Resolução de remetente por DID (sem IO).

Valida a sintaxe do DID e marca mensagens enviadas pelo próprio login.
"""

from __future__ import annotations

import re

from api.connectors.bluesky.ids import make_user_id
from app.protocols.models import EventSender
from utils.errors import InvalidDidError

_DID_RE = re.compile(r"^did:[a-z]+:[a-zA-Z0-9._:%-]*[a-zA-Z0-9._-]$")
_DID_MAX_LENGTH = 2048


def parse_did(value: str) -> str:
    """Valida sintaxe de DID.

    Raises:
        InvalidDidError: Se o valor não é um DID válido.
    """
    if len(value) > _DID_MAX_LENGTH:
        raise InvalidDidError("DID is too long")
    if not _DID_RE.match(value):
        raise InvalidDidError(f"invalid DID syntax: {value!r}")
    return value


class DidSenderResolver:
    """Implementa SenderResolverProtocol a partir do DID do login atual."""

    def __init__(self, user_did: str = "") -> None:
        """Inicializa resolver.

        Args:
            user_did: DID do login local; vazio desativa `is_from_me`.
        """
        self._user_did = user_did

    async def resolve(self, raw_sender_id: str) -> EventSender:
        did = parse_did(raw_sender_id)
        is_from_me = bool(self._user_did) and did == self._user_did
        return EventSender(
            sender=make_user_id(did),
            is_from_me=is_from_me,
            sender_login=self._user_did if is_from_me else None,
        )
