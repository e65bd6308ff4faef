# connect_project/urls.py
"""
URL configuration for connect_project project.
"""
from django.contrib import admin
from django.urls import path, include

from apps.core.views import LandingView

urlpatterns = [
    path('', LandingView.as_view(), name='landing'),
    path('admin/', admin.site.urls),
    # App-level API URLs. Trailing slashes are optional on every API route.
    path('api/', include('apps.users.urls')),
    path('api/', include('apps.profiles.urls')),
]
