"""Normalizer Bluesky — log de chat para mensagens normalizadas.

Responsabilidades:
- Extrair entradas do log (chat.bsky.convo.getLog) para a união LogEntry
- Extrair sender/timestamp/id da view de mensagem
- Converter conteúdo (texto + record embutido) em partes ordenadas

Tipos suportados: messageView, deletedMessageView; embeds viewRecord.
"""

from .converter import (
    DELETED_MESSAGE_NOTICE,
    UNSUPPORTED_MESSAGE_NOTICE,
    MessageConverter,
)
from .details import (
    MessageDetailExtractor,
    MessageDetails,
    parse_atproto_datetime,
    to_stream_order,
)
from .embeds import RECORD_VALUE_PLACEHOLDER, EmbedResolver, decode_record_value
from .extractor import extract_log_entries, parse_log_entry

__all__ = [
    "DELETED_MESSAGE_NOTICE",
    "RECORD_VALUE_PLACEHOLDER",
    "UNSUPPORTED_MESSAGE_NOTICE",
    "EmbedResolver",
    "MessageConverter",
    "MessageDetailExtractor",
    "MessageDetails",
    "decode_record_value",
    "extract_log_entries",
    "parse_atproto_datetime",
    "parse_log_entry",
    "to_stream_order",
]
