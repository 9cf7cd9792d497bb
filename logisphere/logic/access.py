"""
Credential check behind the department login dialog.

This is a demo stub: one hardcoded username/password pair compared as plain
strings. It does not protect anything and must not be reused as real
authentication.
"""

from __future__ import annotations

import logging

from logisphere.config import DEMO_PASSWORD, DEMO_USERNAME

logger = logging.getLogger(__name__)


def check_credentials(
    username: str,
    password: str,
    expected_username: str = DEMO_USERNAME,
    expected_password: str = DEMO_PASSWORD,
) -> bool:
    """Return ``True`` when ``username``/``password`` match the demo pair exactly."""
    if username == expected_username and password == expected_password:
        logger.info("Credentials accepted for user %s", username)
        return True

    logger.warning("Credentials rejected for user %s", username)
    return False
