from django.contrib.auth import get_user_model
from django.utils.translation import gettext_lazy as _

from rest_framework import generics, permissions, status
from rest_framework.exceptions import NotFound
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.models import parse_uuid
from .models import Profile
from .serializers import ProfileSerializer, ExperienceSerializer, EducationSerializer
from .services.accounts import delete_account
from .services.github_client import GitHubClient, GitHubLookupError

User = get_user_model()

NO_PROFILE_MESSAGE = _("There is no profile for this user")


def profile_queryset():
    return Profile.objects.select_related('user').prefetch_related('experience', 'education')


def get_own_profile_or_404(request):
    profile = profile_queryset().filter(user_id=request.user.pk).first()
    if profile is None:
        raise NotFound(NO_PROFILE_MESSAGE)
    return profile


class MyProfileView(generics.RetrieveAPIView):
    """
    GET /api/profile/me: the caller's own profile.
    """
    serializer_class = ProfileSerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_object(self):
        return get_own_profile_or_404(self.request)


class ProfileView(generics.ListAPIView):
    """
    GET /api/profile: every profile (public, filterable by status/location/githubusername).
    POST /api/profile: create or update the caller's profile.
    DELETE /api/profile: delete the caller's posts, profile and account.
    """
    serializer_class = ProfileSerializer
    filterset_fields = ['status', 'location', 'githubusername']

    def get_permissions(self):
        if self.request.method in permissions.SAFE_METHODS:
            return [permissions.AllowAny()]
        return [permissions.IsAuthenticated()]

    def get_queryset(self):
        return profile_queryset().order_by('-created_at')

    def post(self, request, *args, **kwargs):
        if not User.objects.filter(pk=request.user.pk).exists():
            raise NotFound(_("User not found"))

        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        profile = serializer.save(user_id=request.user.pk)
        return Response(self.get_serializer(profile_queryset().get(pk=profile.pk)).data, status=status.HTTP_200_OK)

    def delete(self, request, *args, **kwargs):
        delete_account(request.user.pk)
        return Response({"msg": _("User removed")}, status=status.HTTP_200_OK)


class ProfileByUserView(generics.RetrieveAPIView):
    """
    GET /api/profile/user/<user_id>: public read of any user's profile.
    """
    serializer_class = ProfileSerializer
    permission_classes = [permissions.AllowAny]
    authentication_classes = []

    def get_object(self):
        user_id = parse_uuid(self.kwargs.get('user_id'))
        profile = profile_queryset().filter(user_id=user_id).first() if user_id else None
        if profile is None:
            raise NotFound(_("Profile not found"))
        return profile


class ProfileEntryView(generics.GenericAPIView):
    """
    Base view for the ordered lists nested in a profile.
    PUT adds an entry to the front of the list; DELETE with an entry id removes it.
    """
    permission_classes = [permissions.IsAuthenticated]
    related_name = None
    missing_entry_message = None

    def put(self, request, *args, **kwargs):
        if kwargs.get('entry_id') is not None:
            return self.http_method_not_allowed(request, *args, **kwargs)

        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        profile = get_own_profile_or_404(request)
        serializer.save(profile=profile)
        return Response(ProfileSerializer(profile_queryset().get(pk=profile.pk)).data, status=status.HTTP_200_OK)

    def delete(self, request, *args, **kwargs):
        entry_id = kwargs.get('entry_id')
        if entry_id is None:
            return self.http_method_not_allowed(request, *args, **kwargs)

        profile = get_own_profile_or_404(request)
        entry_uuid = parse_uuid(entry_id)
        deleted = 0
        if entry_uuid is not None:
            deleted, _deleted_by_model = getattr(profile, self.related_name).filter(pk=entry_uuid).delete()
        if not deleted:
            raise NotFound(self.missing_entry_message)
        return Response(ProfileSerializer(profile_queryset().get(pk=profile.pk)).data, status=status.HTTP_200_OK)


class ExperienceView(ProfileEntryView):
    """
    PUT /api/profile/experience, DELETE /api/profile/experience/<exp_id>
    """
    serializer_class = ExperienceSerializer
    related_name = 'experience'
    missing_entry_message = _("Experience not found")


class EducationView(ProfileEntryView):
    """
    PUT /api/profile/education, DELETE /api/profile/education/<edu_id>
    """
    serializer_class = EducationSerializer
    related_name = 'education'
    missing_entry_message = _("Education not found")


class GitHubReposView(APIView):
    """
    GET /api/profile/github/<username>: proxy to the user's latest GitHub repositories.
    """
    permission_classes = [permissions.AllowAny]
    authentication_classes = []

    def get(self, request, username, *args, **kwargs):
        client = GitHubClient.from_settings()
        try:
            repos = client.fetch_repos(username)
        except GitHubLookupError:
            raise NotFound(_("No Github profile found"))
        return Response(repos)
