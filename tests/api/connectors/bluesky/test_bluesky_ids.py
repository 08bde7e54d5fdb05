"""Testes dos identificadores do conector Bluesky."""

from __future__ import annotations

from api.connectors.bluesky.ids import (
    make_message_id,
    make_portal_id,
    make_portal_key,
    make_user_id,
    post_web_url,
)
from app.protocols.models import PortalKey


def test_message_id_is_deterministic() -> None:
    """Mesmo par (conversa, mensagem) gera sempre o mesmo ID."""
    first = make_message_id(make_portal_id("convo1"), "msg1")
    second = make_message_id(make_portal_id("convo1"), "msg1")

    assert first == second == "convo1.msg1"


def test_message_id_differs_per_conversation() -> None:
    assert make_message_id("convo1", "msg1") != make_message_id("convo2", "msg1")


def test_portal_key() -> None:
    assert make_portal_key("convo1") == PortalKey(id="convo1")
    assert make_portal_key("convo1", "did:plc:me").receiver == "did:plc:me"


def test_user_id_is_did() -> None:
    assert make_user_id("did:plc:abc") == "did:plc:abc"


def test_post_web_url_prefers_handle() -> None:
    uri = "at://did:plc:abc/app.bsky.feed.post/3lfb7tow4642l"

    assert post_web_url(uri, "https://bsky.app", "alice.bsky.social") == (
        "https://bsky.app/profile/alice.bsky.social/post/3lfb7tow4642l"
    )
    assert post_web_url(uri, "https://bsky.app/") == (
        "https://bsky.app/profile/did:plc:abc/post/3lfb7tow4642l"
    )


def test_post_web_url_rejects_non_post_uris() -> None:
    assert post_web_url("at://did:plc:abc/app.bsky.graph.list/1", "https://bsky.app") is None
    assert post_web_url("at://did:plc:abc", "https://bsky.app") is None
    assert post_web_url("https://example.com", "https://bsky.app") is None
