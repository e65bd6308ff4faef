from django.urls import re_path

from .views import UserRegistrationView, AuthView

app_name = 'users'

urlpatterns = [
    # User Registration
    re_path(r'^users/?$', UserRegistrationView.as_view(), name='register'),

    # Login (POST) and current user (GET)
    re_path(r'^auth/?$', AuthView.as_view(), name='auth'),
]
