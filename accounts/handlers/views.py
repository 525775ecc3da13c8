"""HTTP handlers for authentication and admin user management."""

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.handlers.serializers import (
    LoginSerializer,
    OrganizerSerializer,
    ProfileUpdateSerializer,
    RegisterSerializer,
    UserSerializer,
)
from accounts.services.account_service import AccountService
from accounts.stores.django_store import DjangoUserStore
from common.pagination import PageRequest
from common.permissions import IsAdmin, actor_from_request
from common.responses import page_response, success_response


def get_account_service() -> AccountService:
    return AccountService(DjangoUserStore())


class RegisterView(APIView):
    """Handler for POST /api/auth/register"""

    def post(self, request: Request) -> Response:
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user, token = get_account_service().register(**serializer.validated_data)
        return success_response(
            {"user": UserSerializer(user).data, "token": token},
            message="User registered",
            status=status.HTTP_201_CREATED,
        )


class LoginView(APIView):
    """Handler for POST /api/auth/login"""

    def post(self, request: Request) -> Response:
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user, token = get_account_service().login(**serializer.validated_data)
        return success_response({"user": UserSerializer(user).data, "token": token})


class LogoutView(APIView):
    """Handler for POST /api/auth/logout"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request) -> Response:
        get_account_service().logout(actor_from_request(request))
        return success_response(message="Successfully logged out")


class MeView(APIView):
    """Handler for GET /api/auth/me"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        user = get_account_service().get_user(str(request.user.id))
        return success_response(UserSerializer(user).data)


class ProfileView(APIView):
    """Handler for PUT /api/users/profile"""

    permission_classes = [IsAuthenticated]

    def put(self, request: Request) -> Response:
        serializer = ProfileUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = get_account_service().update_profile(actor_from_request(request), **serializer.validated_data)
        return success_response(UserSerializer(user).data)


class UserDetailView(APIView):
    """Handler for GET /api/users/{user_id}"""

    def get(self, request: Request, user_id: str) -> Response:
        user = get_account_service().get_user(user_id)
        return success_response(UserSerializer(user).data)


class AdminUserListView(APIView):
    """Handler for GET /api/admin/users"""

    permission_classes = [IsAdmin]

    def get(self, request: Request) -> Response:
        page = get_account_service().list_users(PageRequest.from_query(request.query_params))
        return page_response(page, UserSerializer(page.items, many=True).data)


class AdminUserDetailView(APIView):
    """Handler for DELETE /api/admin/users/{user_id}"""

    permission_classes = [IsAdmin]

    def delete(self, request: Request, user_id: str) -> Response:
        get_account_service().delete_user(actor_from_request(request), user_id)
        return success_response(message="User deleted")


class AdminOrganizerListView(APIView):
    """Handler for GET /api/admin/organizers"""

    permission_classes = [IsAdmin]

    def get(self, request: Request) -> Response:
        page = get_account_service().list_organizers(PageRequest.from_query(request.query_params))
        return page_response(page, OrganizerSerializer(page.items, many=True).data)
