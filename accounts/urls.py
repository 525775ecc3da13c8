from django.urls import path

from accounts.handlers import (
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

urlpatterns = [
    path("auth/register", RegisterView.as_view(), name="auth-register"),
    path("auth/login", LoginView.as_view(), name="auth-login"),
    path("auth/logout", LogoutView.as_view(), name="auth-logout"),
    path("auth/me", MeView.as_view(), name="auth-me"),
    path("users/profile", ProfileView.as_view(), name="user-profile"),
    path("users/<str:user_id>", UserDetailView.as_view(), name="user-detail"),
    path("admin/users", AdminUserListView.as_view(), name="admin-user-list"),
    path("admin/users/<str:user_id>", AdminUserDetailView.as_view(), name="admin-user-detail"),
    path("admin/organizers", AdminOrganizerListView.as_view(), name="admin-organizer-list"),
]
