"""Normalizers por canal — conversão de payloads externos para modelos internos.

Estrutura:
- bluesky/: log de chat (chat.bsky.convo.getLog) → mensagens normalizadas
"""

from .bluesky import MessageConverter, MessageDetailExtractor, parse_log_entry

__all__ = [
    "MessageConverter",
    "MessageDetailExtractor",
    "parse_log_entry",
]
