from __future__ import annotations

import secrets
from typing import MutableMapping, Optional

from ..core.constants import MAX_PENDING_FORM_TOKENS

_SESSION_KEY = "form_tokens"


def issue_form_token(store: MutableMapping) -> str:
    """Hand out a one-shot token for a rendered form.

    Tokens live in the (signed) Flask session; only the most recent few are kept.
    """

    token = secrets.token_urlsafe(16)
    pending = list(store.get(_SESSION_KEY, []))
    pending.append(token)
    store[_SESSION_KEY] = pending[-MAX_PENDING_FORM_TOKENS:]
    return token


def consume_form_token(store: MutableMapping, token: Optional[str]) -> bool:
    """True exactly once per issued token; replays and unknown tokens give False."""

    pending = list(store.get(_SESSION_KEY, []))
    if not token or token not in pending:
        return False
    pending.remove(token)
    store[_SESSION_KEY] = pending
    return True
