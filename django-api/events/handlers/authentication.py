"""DRF authentication and permission classes backed by the AuthGate.

Authentication and permission checks run in APIView.initial(), before the
handler method, so a rejected request never reaches a store.
"""

from django.apps import apps
from django.conf import settings
from rest_framework.authentication import BaseAuthentication, get_authorization_header
from rest_framework.permissions import SAFE_METHODS, BasePermission

from events.domain import AdminIdentity
from events.domain.errors import UnauthenticatedError
from events.services import AuthGate

AJAX_HEADER = "X-Requested-With"


def get_auth_gate() -> AuthGate:
    return apps.get_app_config("events").auth_gate


def get_request_token(request) -> str | None:
    """Return the admin token from the session cookie or a Bearer header.

    On unsafe methods the cookie only counts when the request also carries
    an X-Requested-With header, which a cross-site form cannot send.
    """
    token = request.COOKIES.get(settings.RSVP_TOKEN_COOKIE)
    if token and (request.method in SAFE_METHODS or request.headers.get(AJAX_HEADER)):
        return token
    parts = get_authorization_header(request).split()
    if len(parts) == 2 and parts[0].lower() == b"bearer":
        return parts[1].decode("latin-1")
    return None


class AdminTokenAuthentication(BaseAuthentication):
    """Resolve request.user to an AdminIdentity when a valid token is present.

    Absent tokens leave the request anonymous; present but invalid tokens
    raise InvalidTokenError.
    """

    def authenticate(self, request):
        token = get_request_token(request)
        if token is None:
            return None
        identity = get_auth_gate().verify(token)
        return identity, token

    def authenticate_header(self, request) -> str:
        return "Bearer"


class IsAdmin(BasePermission):
    def has_permission(self, request, view) -> bool:
        if not isinstance(request.user, AdminIdentity):
            raise UnauthenticatedError()
        return True
