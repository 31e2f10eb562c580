from __future__ import annotations

import base64
import uuid


def new_vertex_id() -> str:
    """Return a fresh vertex identifier.

    A random UUID4 is encoded as URL-safe Base64 with the two padding
    characters stripped, giving a 22-character ASCII string. Identifiers are
    never derived from vertex payloads and are not reused within a process.

    Returns:
        A 22-character identifier string.
    """
    return base64.urlsafe_b64encode(uuid.uuid4().bytes)[:-2].decode("ascii")
