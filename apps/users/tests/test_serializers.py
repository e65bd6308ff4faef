from django.test import TestCase
from django.contrib.auth import get_user_model

from ..serializers import (
    UserRegistrationSerializer,
    UserLoginSerializer,
    UserSerializer,
)

User = get_user_model()


class UserRegistrationSerializerTests(TestCase):

    def setUp(self):
        self.valid_data = {
            "name": "Test User Register",
            "email": "testregister@example.com",
            "password": "secret123",
        }

    def test_registration_serializer_valid_data(self):
        serializer = UserRegistrationSerializer(data=self.valid_data)
        self.assertTrue(serializer.is_valid(), serializer.errors)
        user = serializer.save()
        self.assertIsInstance(user, User)
        self.assertEqual(user.email, self.valid_data["email"])
        self.assertEqual(user.name, self.valid_data["name"])
        self.assertTrue(user.check_password(self.valid_data["password"]))
        self.assertTrue(user.avatar.startswith("https://www.gravatar.com/avatar/"))

    def test_registration_serializer_email_already_exists(self):
        User.objects.create_user(email=self.valid_data["email"], password="otherpass", name="Existing")
        serializer = UserRegistrationSerializer(data=self.valid_data)
        self.assertFalse(serializer.is_valid())
        self.assertEqual(str(serializer.errors["non_field_errors"][0]), "User already exists")

    def test_registration_serializer_short_password(self):
        data = {**self.valid_data, "password": "12345"}
        serializer = UserRegistrationSerializer(data=data)
        self.assertFalse(serializer.is_valid())
        self.assertIn("password", serializer.errors)

    def test_registration_serializer_missing_fields(self):
        serializer = UserRegistrationSerializer(data={"email": "not-an-email"})
        self.assertFalse(serializer.is_valid())
        self.assertEqual(str(serializer.errors["name"][0]), "Name is required")
        self.assertEqual(str(serializer.errors["email"][0]), "Please include a valid email")
        self.assertEqual(str(serializer.errors["password"][0]), "Please enter a password with 6 or more characters")


class UserLoginSerializerTests(TestCase):

    def setUp(self):
        self.user = User.objects.create_user(email="login@example.com", password="secret123", name="Login User")

    def test_login_serializer_valid_credentials(self):
        serializer = UserLoginSerializer(data={"email": "login@example.com", "password": "secret123"})
        self.assertTrue(serializer.is_valid(), serializer.errors)
        self.assertEqual(serializer.validated_data["user"], self.user)

    def test_login_serializer_wrong_password_and_unknown_email_look_the_same(self):
        wrong_password = UserLoginSerializer(data={"email": "login@example.com", "password": "wrongpass"})
        unknown_email = UserLoginSerializer(data={"email": "nobody@example.com", "password": "secret123"})
        self.assertFalse(wrong_password.is_valid())
        self.assertFalse(unknown_email.is_valid())
        self.assertEqual(wrong_password.errors, unknown_email.errors)
        self.assertEqual(str(wrong_password.errors["non_field_errors"][0]), "Invalid credentials")

    def test_login_serializer_inactive_user(self):
        self.user.is_active = False
        self.user.save()
        serializer = UserLoginSerializer(data={"email": "login@example.com", "password": "secret123"})
        self.assertFalse(serializer.is_valid())


class UserSerializerTests(TestCase):

    def test_user_serializer_omits_password(self):
        user = User.objects.create_user(email="public@example.com", password="secret123", name="Public")
        data = UserSerializer(user).data
        self.assertEqual(set(data.keys()), {"id", "name", "email", "avatar", "date"})
        self.assertEqual(data["id"], str(user.id))
