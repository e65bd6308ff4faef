import uuid
import hashlib
from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.db import models
from django.utils.translation import gettext_lazy as _
from django.utils import timezone
from django.conf import settings


def gravatar_url(email):
    """
    Builds the gravatar avatar URL for an email address
    (200px, PG rated, "mystery person" fallback).
    """
    digest = hashlib.md5(email.strip().lower().encode('utf-8')).hexdigest()
    return f"{settings.GRAVATAR_URL}{digest}?s=200&r=pg&d=mm"


# Custom User Manager
class UserManager(BaseUserManager):
    """
    Custom user model manager where email is the unique identifier
    for authentication instead of usernames.
    """
    use_in_migrations = True

    def create_user(self, email, password=None, **extra_fields):
        """
        Create and save a User with the given email and password.
        """
        if not email:
            raise ValueError(_('The Email must be set'))
        email = self.normalize_email(email)
        extra_fields.setdefault('avatar', gravatar_url(email))

        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        """
        Create and save a SuperUser with the given email and password.
        """
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('is_active', True)

        if extra_fields.get('is_staff') is not True:
            raise ValueError(_('Superuser must have is_staff=True.'))
        if extra_fields.get('is_superuser') is not True:
            raise ValueError(_('Superuser must have is_superuser=True.'))

        return self.create_user(email, password, **extra_fields)

    def get_by_email(self, email):
        """Case-insensitive lookup; returns None when no account uses `email`."""
        return self.filter(email__iexact=(email or '').strip()).first()


class User(AbstractBaseUser, PermissionsMixin):
    """
    Account record: email is the login identifier, the password is stored hashed.
    Owns at most one Profile and any number of Posts.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, verbose_name=_('ID'))
    email = models.EmailField(
        _('email address'),
        unique=True,
        help_text=_("Required. Will be used for login."),
    )
    name = models.CharField(_("Name"), max_length=255)
    avatar = models.URLField(_("Avatar URL"), max_length=1024, blank=True)

    is_active = models.BooleanField(_('active'), default=True)
    is_staff = models.BooleanField(_('staff status'), default=False)
    date_joined = models.DateTimeField(_('date joined'), default=timezone.now)

    USERNAME_FIELD = 'email'
    EMAIL_FIELD = 'email'
    REQUIRED_FIELDS = ['name']

    objects = UserManager()

    class Meta:
        verbose_name = _('User')
        verbose_name_plural = _('Users')
        ordering = ['-date_joined', 'email']

    def save(self, *args, **kwargs):
        # Accounts created outside the manager still get an avatar
        if not self.avatar and self.email:
            self.avatar = gravatar_url(self.email)
        super().save(*args, **kwargs)

    def __str__(self):
        return self.email
