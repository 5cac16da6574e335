# forum/core/permissions.py
"""
Authorization checks for mutating actions.

The actor is always a User resolved server-side from a session token
(see forum.api.deps.get_current_user), or None for anonymous requests.
"""
from forum.core.errors import Forbidden, Unauthenticated


def can_mutate(actor, owner_id: int) -> bool:
    """True iff the actor owns the resource or is an admin. Anonymous actors never may."""
    if actor is None:
        return False
    return actor.id == owner_id or bool(actor.is_admin)


def is_admin_action(actor) -> bool:
    return actor is not None and bool(actor.is_admin)


def ensure_can_mutate(actor, owner_id: int) -> None:
    """
    Raise when the actor may not mutate a resource owned by `owner_id`.

    Raises:
        Unauthenticated (401): No actor
        Forbidden (403): Actor is neither the owner nor an admin
    """
    if actor is None:
        raise Unauthenticated()
    if not can_mutate(actor, owner_id):
        raise Forbidden("Only the author or an admin can do this")
