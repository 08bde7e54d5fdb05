"""Resolução de identidade de remetentes."""

from .did_sender_resolver import DidSenderResolver, parse_did

__all__ = ["DidSenderResolver", "parse_did"]
