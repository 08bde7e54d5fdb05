"""Extrator de entradas do log de chat Bluesky.

Responsabilidades:
- Converter entradas brutas (JSON de chat.bsky.convo.getLog) na união LogEntry
- Tipos não tratados viram OtherLogEntry (compatibilidade futura)

Não faz validação de negócio - apenas extração estrutural.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from utils.errors import LogEntryParseError

from .models import (
    LOG_CREATE_MESSAGE,
    LogCreateMessage,
    LogEntry,
    OtherLogEntry,
    wire_type,
)

logger = logging.getLogger(__name__)


def parse_log_entry(raw: dict[str, Any]) -> LogEntry:
    """Converte uma entrada bruta do log em LogEntry tipada.

    Raises:
        LogEntryParseError: Se a entrada `logCreateMessage` estiver malformada.
    """
    if not isinstance(raw, dict):
        raise LogEntryParseError(f"log entry must be an object, got {type(raw).__name__}")
    kind = wire_type(raw)
    if kind != LOG_CREATE_MESSAGE:
        return OtherLogEntry(
            kind=kind or "unknown",
            rev=str(raw.get("rev") or ""),
            convo_id=str(raw.get("convoId") or ""),
        )
    try:
        return LogCreateMessage.model_validate(raw)
    except ValidationError as exc:
        raise LogEntryParseError(
            f"malformed {LOG_CREATE_MESSAGE}: {exc.error_count()} validation error(s)"
        ) from exc


def extract_log_entries(payload: dict[str, Any]) -> list[dict[str, Any]]:
    """Extrai as entradas brutas de uma página de getLog, na ordem recebida."""
    logs = payload.get("logs") or []
    if not isinstance(logs, list):
        logger.warning("log_page_without_list", extra={"logs_type": type(logs).__name__})
        return []
    return [entry for entry in logs if isinstance(entry, dict)]
