# users/permissions.py
"""
Capability checks for signed-in users.

Each helper answers a yes/no question about one user and one
organisation and has no side effects.  Anonymous users get ``False``
from every helper; views decide separately what an anonymous visitor
should see.
"""


def _profile(user):
    if not user or not getattr(user, "is_authenticated", False):
        return None
    # RelatedObjectDoesNotExist is an AttributeError
    return getattr(user, "profile", None)


def _administers(user, organisation) -> bool:
    profile = _profile(user)
    if profile is None or organisation is None:
        return False
    return profile.organisation_id is not None and profile.organisation_id == organisation.pk


def is_admin(user) -> bool:
    """Site admins may create and delete any organisation."""
    return bool(user and getattr(user, "is_authenticated", False) and user.is_staff)


def can_edit(user, organisation) -> bool:
    if organisation is None:
        return False
    return is_admin(user) or _administers(user, organisation)


def can_delete(user, organisation) -> bool:
    return is_admin(user) and organisation is not None


def is_pending_admin(user, organisation) -> bool:
    profile = _profile(user)
    if profile is None or organisation is None:
        return False
    return profile.pending_organisation_id == organisation.pk


def can_request_org_admin(user, organisation) -> bool:
    if _profile(user) is None or organisation is None or is_admin(user):
        return False
    return not _administers(user, organisation) and not is_pending_admin(user, organisation)


def can_create_volunteer_ops(user, organisation) -> bool:
    return _administers(user, organisation)
