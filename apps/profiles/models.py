from django.db import models
from django.conf import settings
from django.utils.translation import gettext_lazy as _

from apps.core.models import BaseModel

SOCIAL_NETWORKS = ('youtube', 'twitter', 'facebook', 'linkedin', 'instagram')


class Profile(BaseModel): # Inherits UUID id, created_at, updated_at from BaseModel
    """
    Career, education and social information for one User.
    """
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='profile',
        verbose_name=_('User')
    )
    company = models.CharField(_("Company"), max_length=255, blank=True)
    website = models.URLField(_("Website"), max_length=500, blank=True)
    location = models.CharField(_("Location"), max_length=255, blank=True)
    status = models.CharField(_("Status"), max_length=255, help_text=_("e.g., Student, Developer, Instructor"))
    skills = models.JSONField(_("Skills"), default=list, blank=True)
    bio = models.TextField(_("Bio"), blank=True)
    githubusername = models.CharField(_("GitHub Username"), max_length=100, blank=True)
    social = models.JSONField(
        _("Social Links"), default=dict, blank=True,
        help_text=_("Any of: youtube, twitter, facebook, linkedin, instagram")
    )

    class Meta:
        verbose_name = _('Profile')
        verbose_name_plural = _('Profiles')
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.user.email}'s Profile"


class ProfileEntry(BaseModel):
    """
    Base for the lists nested in a profile. `position` counts up per profile,
    so entries added later sort first even when their timestamps are equal.
    """
    position = models.PositiveIntegerField(_("Position"), default=0, editable=False)

    class Meta:
        abstract = True
        ordering = ['-position', '-created_at']

    def save(self, *args, **kwargs):
        if self._state.adding and not self.position:
            last = type(self).objects.filter(profile_id=self.profile_id).aggregate(
                models.Max('position')
            )['position__max']
            self.position = (last or 0) + 1
        super().save(*args, **kwargs)


class Experience(ProfileEntry):
    profile = models.ForeignKey(Profile, on_delete=models.CASCADE, related_name='experience')
    title = models.CharField(_("Title"), max_length=255)
    company = models.CharField(_("Company"), max_length=255)
    location = models.CharField(_("Location"), max_length=255, blank=True)
    from_date = models.DateField(_("From"))
    to_date = models.DateField(_("To"), null=True, blank=True)
    current = models.BooleanField(_("Current"), default=False)
    description = models.TextField(_("Description"), blank=True)

    class Meta:
        verbose_name = _('Experience')
        verbose_name_plural = _('Experience')
        ordering = ['-position', '-created_at'] # Most recently added first

    def __str__(self):
        return f"{self.title} at {self.company}"


class Education(ProfileEntry):
    profile = models.ForeignKey(Profile, on_delete=models.CASCADE, related_name='education')
    school = models.CharField(_("School"), max_length=255)
    degree = models.CharField(_("Degree"), max_length=255)
    fieldofstudy = models.CharField(_("Field of Study"), max_length=255)
    from_date = models.DateField(_("From"))
    to_date = models.DateField(_("To"), null=True, blank=True)
    current = models.BooleanField(_("Current"), default=False)
    description = models.TextField(_("Description"), blank=True)

    class Meta:
        verbose_name = _('Education')
        verbose_name_plural = _('Education')
        ordering = ['-position', '-created_at'] # Most recently added first

    def __str__(self):
        return f"{self.degree} in {self.fieldofstudy}, {self.school}"
