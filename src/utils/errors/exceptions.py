"""Exceções de domínio para falhas de normalização inbound Bluesky.

Falhas de extração derrubam o evento (sem retry); falhas de embed apenas
omitem a parte do embed. Nenhuma exceção carrega corpo de mensagem (PII).
"""

from __future__ import annotations


class ExtractionError(ValueError):
    """Falha ao extrair sender/timestamp/id de uma view de mensagem."""


class SenderResolutionError(ExtractionError):
    """Colaborador de resolução de sender falhou."""


class TimestampParseError(ExtractionError):
    """Timestamp fora do formato datetime estrito do AT Protocol."""


class EmbedResolutionError(ValueError):
    """Embed não pôde ser convertido em parte de conteúdo."""


class UnhandledRecordKindError(EmbedResolutionError):
    """Tipo de record embutido ainda não suportado."""

    def __init__(self, record_type: str) -> None:
        super().__init__(f"unhandled record type: {record_type}")
        self.record_type = record_type


class InvalidDidError(ValueError):
    """Identificador não é um DID sintaticamente válido."""


class LogEntryParseError(ValueError):
    """Entrada bruta do log não corresponde ao formato esperado."""
