"""Payloads brutos de chat.bsky.convo.getLog usados nos testes."""

from __future__ import annotations

from typing import Any

CONVO_ID = "3ksrqt7eebs2b"
SENDER_DID = "did:plc:abc"
SENT_AT = "2024-01-01T00:00:00.000Z"


def quoted_post_record(text: str | None = "all my kids are on bsky btw!!") -> dict[str, Any]:
    return {
        "$type": "app.bsky.embed.record#viewRecord",
        "uri": "at://did:plc:5nq3pybl4nnoxfp3ovjy2lh7/app.bsky.feed.post/3lfb7tow4642l",
        "cid": "bafyreib2",
        "author": {
            "did": "did:plc:5nq3pybl4nnoxfp3ovjy2lh7",
            "handle": "freya.bsky.social",
            "displayName": "Freya Holmér",
        },
        "value": {
            "$type": "app.bsky.feed.post",
            "text": text,
            "createdAt": "2025-01-08T22:33:27.859Z",
        },
        "likeCount": 1037,
        "indexedAt": "2025-01-08T22:33:27.859Z",
    }


def message_view(
    *,
    text: str = "hello",
    embed: dict[str, Any] | None = None,
    message_id: str = "msg1",
    sender_did: str = SENDER_DID,
    sent_at: str = SENT_AT,
) -> dict[str, Any]:
    view: dict[str, Any] = {
        "$type": "chat.bsky.convo.defs#messageView",
        "id": message_id,
        "rev": "3lrev1",
        "text": text,
        "sender": {"did": sender_did},
        "sentAt": sent_at,
    }
    if embed is not None:
        view["embed"] = embed
    return view


def deleted_message_view(message_id: str = "msg2") -> dict[str, Any]:
    return {
        "$type": "chat.bsky.convo.defs#deletedMessageView",
        "id": message_id,
        "rev": "3lrev2",
        "sender": {"did": SENDER_DID},
        "sentAt": SENT_AT,
    }


def create_message_entry(message: dict[str, Any], rev: str = "3lrev1") -> dict[str, Any]:
    return {
        "$type": "chat.bsky.convo.defs#logCreateMessage",
        "rev": rev,
        "convoId": CONVO_ID,
        "message": message,
    }
