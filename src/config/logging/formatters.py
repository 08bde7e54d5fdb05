"""Formatters de logging estruturado.

Logs JSON com campos obrigatórios; campos de `extra` (ex: chat_id, rev,
message_id, sender_id) são anexados ao objeto JSON.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado (ordem de saída)
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

# Mapeamento de nomes de campos para formato padrão
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-10-16 10:30:00,123",
            "level": "WARNING",
            "logger": "app.coordinators.bluesky.handler",
            "message": "embed_record_unhandled",
            "correlation_id": "3kxyz:3lrev",
            "service": "bluesky_bridge",
            "record_type": "app.bsky.graph.defs#listView"
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
