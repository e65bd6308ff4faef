from django.db import models
from django.conf import settings
from django.utils.translation import gettext_lazy as _

from apps.core.models import BaseModel


class AuthorSnapshotMixin(models.Model):
    """
    Keeps a copy of the author's name and avatar on the row, taken when it is
    first saved, so listings render without joining the user table.
    """
    name = models.CharField(_("Author Name"), max_length=255, blank=True)
    avatar = models.URLField(_("Author Avatar"), max_length=1024, blank=True)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs):
        if not self.name:
            self.name = self.user.name
        if not self.avatar:
            self.avatar = self.user.avatar
        super().save(*args, **kwargs)


class Post(AuthorSnapshotMixin, BaseModel):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='posts',
        verbose_name=_('Author')
    )
    text = models.TextField(_("Text"))
    likes = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        related_name='liked_posts',
        blank=True,
        verbose_name=_('Liked By')
    )

    class Meta:
        verbose_name = _('Post')
        verbose_name_plural = _('Posts')
        ordering = ['-created_at']

    def __str__(self):
        return f"Post by {self.name or self.user_id}: {self.text[:50]}"

    @property
    def like_count(self):
        return self.likes.count()

    def is_liked_by(self, user):
        return self.likes.filter(pk=user.pk).exists()


class PostComment(AuthorSnapshotMixin, BaseModel):
    post = models.ForeignKey(Post, on_delete=models.CASCADE, related_name='comments')
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='post_comments',
        verbose_name=_('Author')
    )
    text = models.TextField(_("Text"))

    class Meta:
        verbose_name = _('Post Comment')
        verbose_name_plural = _('Post Comments')
        ordering = ['-created_at'] # Newest comment first

    def __str__(self):
        return f"Comment by {self.name or self.user_id} on {self.post_id}"
