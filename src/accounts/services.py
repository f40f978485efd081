"""Account-related helper services."""
from __future__ import annotations

import logging

from accounts.models import User

logger = logging.getLogger("hr360")


def authorize(user, required_role: str) -> bool:
    """Return True when ``user`` is an active, authenticated holder of ``required_role``.

    ``staff`` is the baseline role: every active account satisfies it.
    """
    if user is None or not getattr(user, "is_authenticated", False):
        return False
    if not getattr(user, "is_active", False):
        return False
    if required_role == User.Role.STAFF:
        return True
    return getattr(user, "role", None) == required_role


def register_user(*, email: str, password: str, name: str, position: str) -> User:
    """Self-service sign-up; accounts created this way are always ``staff``."""
    user = User.objects.create_user(
        email=email,
        password=password,
        name=name.strip(),
        position=position,
        role=User.Role.STAFF,
    )
    logger.info("User registered: %s (%s)", user.pk, user.email)
    return user


def update_profile(user: User, *, name: str | None = None, position: str | None = None) -> User:
    """Update the self-editable profile fields; ``None`` leaves a field as is."""
    changed = []
    if name:
        user.name = name.strip()
        changed.append("name")
    if position:
        user.position = position
        changed.append("position")
    if changed:
        user.save(update_fields=changed)
        logger.info("Profile updated: %s fields=%s", user.pk, ",".join(changed))
    return user
