import uuid
from django.db import models
from django.utils.translation import gettext_lazy as _


class BaseModel(models.Model):
    """
    An abstract base class model that provides self-updating
    `created_at` and `updated_at` fields, and a UUID primary key.
    """
    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        verbose_name=_('ID')
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        editable=False,
        verbose_name=_('Created At'),
        help_text=_('The date and time this object was first created.')
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        editable=False,
        verbose_name=_('Last Updated At'),
        help_text=_('The date and time this object was last updated.')
    )

    class Meta:
        abstract = True
        ordering = ['-created_at'] # Newest first for models inheriting this

    def __str__(self):
        return f"{self.__class__.__name__} object ({self.pk})"


def parse_uuid(value):
    """Returns `value` as a UUID, or None when it is not a well-formed one."""
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        return None
