from logging import getLogger

from django.contrib.auth import get_user_model
from django.db import transaction

from apps.posts.models import Post
from ..models import Profile

logger = getLogger(__name__)

User = get_user_model()


def delete_account(user_id):
    """
    Removes a user's posts, then their profile, then the user record.
    The three deletes share one transaction, so a failure leaves nothing half-removed.
    """
    with transaction.atomic():
        posts_deleted, _ = Post.objects.filter(user_id=user_id).delete()
        profiles_deleted, _ = Profile.objects.filter(user_id=user_id).delete()
        users_deleted, _ = User.objects.filter(pk=user_id).delete()

    logger.info(f"Deleted account {user_id} ({posts_deleted} post rows, {profiles_deleted} profile rows, {users_deleted} user rows)")
