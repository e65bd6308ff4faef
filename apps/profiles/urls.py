from django.urls import re_path

from .views import (
    MyProfileView,
    ProfileView,
    ProfileByUserView,
    ExperienceView,
    EducationView,
    GitHubReposView,
)

app_name = 'profiles'

# Mounted under "api/"
urlpatterns = [
    # List (GET), create/update own (POST), delete own account (DELETE)
    re_path(r'^profile/?$', ProfileView.as_view(), name='profile'),

    re_path(r'^profile/me/?$', MyProfileView.as_view(), name='me'),
    re_path(r'^profile/user/(?P<user_id>[^/]+)/?$', ProfileByUserView.as_view(), name='by-user'),

    # Nested lists
    re_path(r'^profile/experience/?$', ExperienceView.as_view(), name='experience'),
    re_path(r'^profile/experience/(?P<entry_id>[^/]+)/?$', ExperienceView.as_view(), name='experience-detail'),
    re_path(r'^profile/education/?$', EducationView.as_view(), name='education'),
    re_path(r'^profile/education/(?P<entry_id>[^/]+)/?$', EducationView.as_view(), name='education-detail'),

    # GitHub repositories
    re_path(r'^profile/github/(?P<username>[^/]+)/?$', GitHubReposView.as_view(), name='github'),
]
