import logging

from rest_framework.permissions import BasePermission

from shop_api.exceptions import AuthenticationRequired, InsufficientRole

logger = logging.getLogger(__name__)


class HasRole(BasePermission):
    """
    Role gate: the caller must be authenticated and satisfy
    ``required_role`` through ``User.has_role``. Fails closed.
    """
    required_role = "admin"

    def has_permission(self, request, view):
        user = request.user

        if not user or not user.is_authenticated:
            logger.warning(
                "Unauthenticated access attempt ip=%s method=%s path=%s",
                request.META.get("REMOTE_ADDR"), request.method, request.get_full_path(),
            )
            raise AuthenticationRequired()

        has_role = getattr(user, "has_role", None)
        if not callable(has_role) or not has_role(self.required_role):
            logger.warning(
                "Unauthorized role access attempt user_id=%s attempted_role=%s ip=%s",
                user.pk, self.required_role, request.META.get("REMOTE_ADDR"),
            )
            current_role = getattr(user, "role", None)
            raise InsufficientRole(self.required_role, [current_role] if current_role else [])

        return True


def role_required(role="admin"):
    """Build a ``HasRole`` permission class bound to ``role``."""
    return type(f"Has{role.title()}Role", (HasRole,), {"required_role": role})


IsAdminRole = role_required("admin")
