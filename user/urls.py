from django.urls import path
from .views import RegisterView, LoginView, MeView, LogoutView, RefreshTokenView

urlpatterns = [
    path("user/register", RegisterView.as_view(), name="user-register"),
    path("user/login", LoginView.as_view(), name="user-login"),
    path("user/me", MeView.as_view(), name="user-me"),
    path("user/logout", LogoutView.as_view(), name="user-logout"),
    path("user/refresh-token", RefreshTokenView.as_view(), name="user-refresh-token"),
]
