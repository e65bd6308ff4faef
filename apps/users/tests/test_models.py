import hashlib

from django.test import TestCase
from django.contrib.auth import get_user_model

from ..models import gravatar_url

User = get_user_model()


class UserModelTests(TestCase):

    def test_create_user_successful(self):
        """Test creating a new user is successful with an email, name and password."""
        user = User.objects.create_user(email="testuser@example.com", password="secret123", name="Test User")

        self.assertEqual(user.email, "testuser@example.com")
        self.assertEqual(user.name, "Test User")
        self.assertTrue(user.check_password("secret123"))
        self.assertNotEqual(user.password, "secret123") # Stored hashed
        self.assertFalse(user.is_staff)
        self.assertFalse(user.is_superuser)
        self.assertTrue(user.is_active)

    def test_create_user_email_is_username_field(self):
        self.assertEqual(User.USERNAME_FIELD, 'email')
        self.assertIn('name', User.REQUIRED_FIELDS)

    def test_create_user_without_email_fails(self):
        with self.assertRaises(ValueError):
            User.objects.create_user(email="", password="secret123", name="No Email")

    def test_create_superuser_successful(self):
        admin_user = User.objects.create_superuser(email="super@example.com", password="superpassword", name="Admin")
        self.assertTrue(admin_user.is_staff)
        self.assertTrue(admin_user.is_superuser)
        self.assertTrue(admin_user.is_active)

    def test_user_gets_gravatar_avatar(self):
        """Test new accounts get a gravatar avatar derived from their email."""
        user = User.objects.create_user(email="Avatar@Example.com", password="secret123", name="Avatar")
        digest = hashlib.md5("avatar@example.com".encode('utf-8')).hexdigest()
        self.assertEqual(user.avatar, f"https://www.gravatar.com/avatar/{digest}?s=200&r=pg&d=mm")

    def test_gravatar_url_ignores_case_and_whitespace(self):
        self.assertEqual(gravatar_url(" Someone@Example.COM "), gravatar_url("someone@example.com"))

    def test_save_fills_missing_avatar(self):
        user = User(email="direct@example.com", name="Direct")
        user.set_password("secret123")
        user.save()
        self.assertEqual(user.avatar, gravatar_url("direct@example.com"))

    def test_explicit_avatar_is_kept(self):
        user = User.objects.create_user(
            email="custom@example.com", password="secret123", name="Custom",
            avatar="https://cdn.example.com/me.png",
        )
        self.assertEqual(user.avatar, "https://cdn.example.com/me.png")

    def test_get_by_email_is_case_insensitive(self):
        user = User.objects.create_user(email="lookup@example.com", password="secret123", name="Lookup")
        self.assertEqual(User.objects.get_by_email("LOOKUP@example.com"), user)
        self.assertIsNone(User.objects.get_by_email("missing@example.com"))

    def test_user_str_representation(self):
        user = User.objects.create_user(email="teststr@example.com", password="secret123", name="Str")
        self.assertEqual(str(user), "teststr@example.com")
