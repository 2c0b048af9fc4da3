# organisations/policy.py
"""
Who may do what to an organisation.

`decide()` is a pure lookup over `RULES`: given an action, the current
user and (for per-organisation actions) the organisation, it returns a
`Decision` saying whether to go ahead and, if not, where to send the
user and whether to tell them why.
"""
from collections import namedtuple
from enum import Enum

from users.permissions import can_edit, can_request_org_admin, is_admin

PERMISSION_DENIED = "You don't have permission"


class Action(str, Enum):
    INDEX = "index"
    SEARCH = "search"
    SHOW = "show"
    NEW = "new"
    EDIT = "edit"
    CREATE = "create"
    UPDATE = "update"
    DESTROY = "destroy"
    GRAB = "grab"


class Decision(Enum):
    # (redirect target, flash PERMISSION_DENIED?)
    ALLOW = (None, False)
    SIGN_IN = ("sign_in", False)
    DENY_TO_INDEX = ("index", True)
    DENY_TO_ITEM = ("item", False)
    DENY_TO_ITEM_WITH_NOTICE = ("item", True)

    def __init__(self, redirect_to, notice):
        self.redirect_to = redirect_to
        self.notice = notice

    @property
    def allowed(self) -> bool:
        return self is Decision.ALLOW


Rule = namedtuple("Rule", ["sign_in_required", "capability", "denied"])


def _admin_only(user, organisation):
    return is_admin(user)


RULES = {
    Action.INDEX: Rule(False, None, None),
    Action.SEARCH: Rule(False, None, None),
    Action.SHOW: Rule(False, None, None),
    Action.NEW: Rule(True, None, None),
    Action.CREATE: Rule(True, _admin_only, Decision.DENY_TO_INDEX),
    Action.EDIT: Rule(True, can_edit, Decision.DENY_TO_ITEM),
    Action.UPDATE: Rule(True, can_edit, Decision.DENY_TO_ITEM_WITH_NOTICE),
    Action.DESTROY: Rule(True, _admin_only, Decision.DENY_TO_ITEM),
    Action.GRAB: Rule(True, can_request_org_admin, Decision.DENY_TO_ITEM_WITH_NOTICE),
}


def decide(action, user, organisation=None) -> Decision:
    rule = RULES[Action(action)]
    if not rule.sign_in_required:
        return Decision.ALLOW
    if not user or not getattr(user, "is_authenticated", False):
        return Decision.SIGN_IN
    if rule.capability is None or rule.capability(user, organisation):
        return Decision.ALLOW
    return rule.denied
