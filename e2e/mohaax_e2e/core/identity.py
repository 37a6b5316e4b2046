from __future__ import annotations

import time
import uuid


def unique_execution_id() -> str:
    """
    "<epoch seconds>_<first 8 hex of a uuid4>", so generated usernames/emails
    never collide with an earlier run against the shared backend.
    """
    return f"{int(time.time())}_{uuid.uuid4().hex[:8]}"


def long_suffix() -> str:
    return uuid.uuid4().hex
