from accounts.handlers.views import (
    AdminOrganizerListView,
    AdminUserDetailView,
    AdminUserListView,
    LoginView,
    LogoutView,
    MeView,
    ProfileView,
    RegisterView,
    UserDetailView,
)

__all__ = [
    "RegisterView",
    "LoginView",
    "LogoutView",
    "MeView",
    "ProfileView",
    "UserDetailView",
    "AdminUserListView",
    "AdminUserDetailView",
    "AdminOrganizerListView",
]
