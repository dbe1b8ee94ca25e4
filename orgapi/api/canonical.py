"""Redirects for organisations requested through a non-canonical uuid."""

import logging
import re
from typing import Optional

logger = logging.getLogger(__name__)

VALID_UUID = re.compile(
    r"([0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12})$"
)


def canonical_uuid(canonical_id: str) -> Optional[str]:
    """The uuid that closes a canonical identifier, if any."""
    match = VALID_UUID.search(canonical_id)
    return match.group(1) if match else None


def canonical_redirect_path(request_uri: str, requested_uuid: str, canonical_id: str) -> Optional[str]:
    """
    Where to permanently redirect a request made against an alias uuid.

    Returns None when the requested uuid already is the canonical one, or when
    the canonical identifier carries no uuid to redirect to.
    """
    if requested_uuid in canonical_id:
        return None

    uuid = canonical_uuid(canonical_id)
    if uuid is None:
        logger.warning("Canonical id %s for alias %s holds no uuid, not redirecting", canonical_id, requested_uuid)
        return None
    return request_uri.replace(requested_uuid, uuid, 1)
