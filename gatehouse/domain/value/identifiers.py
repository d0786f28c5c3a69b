"""Strongly typed identifiers for gatehouse records.

Record store documents are keyed by opaque strings. User records share their
key with the identity provider's uid, so every identifier is a string rather
than a UUID.
"""

from typing import NewType

UserId = NewType("UserId", str)
OrgId = NewType("OrgId", str)
InviteId = NewType("InviteId", str)
