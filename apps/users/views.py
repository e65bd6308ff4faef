from rest_framework import generics, permissions, status
from rest_framework.exceptions import NotFound
from rest_framework.response import Response
from django.utils.translation import gettext_lazy as _
from django.contrib.auth import get_user_model

from .authentication import issue_token
from .serializers import (
    UserSerializer,
    UserRegistrationSerializer,
    UserLoginSerializer,
)

User = get_user_model()


class UserRegistrationView(generics.CreateAPIView):
    """
    POST /api/users: register a new account and return a token for it.
    """
    queryset = User.objects.all()
    serializer_class = UserRegistrationSerializer
    permission_classes = [permissions.AllowAny] # Anyone can register
    authentication_classes = []

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        return Response({"token": issue_token(user)}, status=status.HTTP_201_CREATED)


class AuthView(generics.GenericAPIView):
    """
    GET /api/auth: the authenticated caller's user record.
    POST /api/auth: exchange email and password for a token.
    """
    serializer_class = UserLoginSerializer

    def get_permissions(self):
        if self.request.method == 'GET':
            return [permissions.IsAuthenticated()]
        return [permissions.AllowAny()]

    def get(self, request, *args, **kwargs):
        # The token may outlive its account, so the lookup can come back empty
        user = User.objects.filter(pk=request.user.pk).first()
        if user is None:
            raise NotFound(_("User not found"))
        return Response(UserSerializer(user).data)

    def post(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return Response({"token": issue_token(serializer.validated_data['user'])}, status=status.HTTP_200_OK)
