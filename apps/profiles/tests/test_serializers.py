from datetime import date

from django.test import TestCase
from django.contrib.auth import get_user_model

from ..models import Profile, Experience
from ..serializers import ProfileSerializer, ExperienceSerializer, EducationSerializer

User = get_user_model()


class ProfileSerializerTests(TestCase):

    def setUp(self):
        self.user = User.objects.create_user(email="serial@example.com", password="secret123", name="Serial")

    def test_valid_payload_is_normalised(self):
        serializer = ProfileSerializer(data={
            "status": "Developer",
            "skills": "Python, Django , ",
            "website": "www.example.com",
            "twitter": "https://twitter.com/serial",
            "youtube": "",
        })
        self.assertTrue(serializer.is_valid(), serializer.errors)
        data = serializer.validated_data
        self.assertEqual(data["skills"], ["Python", "Django"])
        self.assertEqual(data["website"], "https://example.com")
        self.assertEqual(data["social"], {"twitter": "https://twitter.com/serial"})
        self.assertNotIn("twitter", data)

    def test_required_fields(self):
        serializer = ProfileSerializer(data={})
        self.assertFalse(serializer.is_valid())
        self.assertEqual(str(serializer.errors["status"][0]), "Status is required")
        self.assertEqual(str(serializer.errors["skills"][0]), "Skills is required")

    def test_blank_skills_rejected(self):
        serializer = ProfileSerializer(data={"status": "Student", "skills": " , "})
        self.assertFalse(serializer.is_valid())
        self.assertEqual(str(serializer.errors["skills"][0]), "Skills is required")

    def test_invalid_website_rejected(self):
        serializer = ProfileSerializer(data={"status": "Student", "skills": "Go", "website": "http://"})
        self.assertFalse(serializer.is_valid())
        self.assertEqual(str(serializer.errors["website"][0]), "Please include a valid website URL")

    def test_website_too_long_after_normalising(self):
        # Within the limit as sent, over it once "https://" is added
        website = "a.com/" + "p" * 494
        serializer = ProfileSerializer(data={"status": "Student", "skills": "Go", "website": website})
        self.assertFalse(serializer.is_valid())
        self.assertEqual(
            str(serializer.errors["website"][0]), "Website URL must be at most 500 characters."
        )

    def test_non_string_skills_rejected(self):
        serializer = ProfileSerializer(data={"status": "Student", "skills": ["Go", {"x": 1}, None]})
        self.assertFalse(serializer.is_valid())
        self.assertEqual(
            str(serializer.errors["skills"][0]), "Skills must be a list or a comma-separated string."
        )

    def test_save_creates_then_updates(self):
        first = ProfileSerializer(data={"status": "Student", "skills": "Go", "company": "UCSB"})
        first.is_valid(raise_exception=True)
        profile = first.save(user_id=self.user.pk)

        second = ProfileSerializer(data={"status": "Developer", "skills": ["Rust"]})
        second.is_valid(raise_exception=True)
        updated = second.save(user_id=self.user.pk)

        self.assertEqual(profile.pk, updated.pk)
        self.assertEqual(Profile.objects.count(), 1)
        updated.refresh_from_db()
        self.assertEqual(updated.status, "Developer")
        self.assertEqual(updated.skills, ["Rust"])
        self.assertEqual(updated.company, "UCSB") # Not supplied on the second call

    def test_representation_embeds_user(self):
        profile = Profile.objects.create(user=self.user, status="Student", skills=["Go"])
        data = ProfileSerializer(profile).data
        self.assertEqual(data["user"]["name"], "Serial")
        self.assertEqual(data["skills"], ["Go"])
        self.assertEqual(data["experience"], [])
        self.assertNotIn("twitter", data)


class ProfileEntrySerializerTests(TestCase):

    def test_experience_uses_from_and_to_keys(self):
        serializer = ExperienceSerializer(data={"title": "Eng", "company": "X", "from": "2020-01-01", "to": None})
        self.assertTrue(serializer.is_valid(), serializer.errors)
        self.assertEqual(serializer.validated_data["from_date"], date(2020, 1, 1))
        self.assertIsNone(serializer.validated_data["to_date"])

    def test_experience_required_messages(self):
        serializer = ExperienceSerializer(data={})
        self.assertFalse(serializer.is_valid())
        self.assertEqual(str(serializer.errors["title"][0]), "Title is required")
        self.assertEqual(str(serializer.errors["company"][0]), "Company is required")
        self.assertEqual(str(serializer.errors["from"][0]), "From date is required")

    def test_blank_dates_and_flag_from_forms(self):
        serializer = ExperienceSerializer(data={"title": "Eng", "company": "X", "from": "2020-01-01", "to": "", "current": ""})
        self.assertTrue(serializer.is_valid(), serializer.errors)
        self.assertIsNone(serializer.validated_data["to_date"])
        self.assertFalse(serializer.validated_data["current"])

    def test_blank_from_date_is_missing(self):
        serializer = ExperienceSerializer(data={"title": "Eng", "company": "X", "from": ""})
        self.assertFalse(serializer.is_valid())
        self.assertEqual(str(serializer.errors["from"][0]), "From date is required")

    def test_education_required_messages(self):
        serializer = EducationSerializer(data={"school": "UCSB"})
        self.assertFalse(serializer.is_valid())
        self.assertEqual(str(serializer.errors["degree"][0]), "Degree is required")
        self.assertEqual(str(serializer.errors["fieldofstudy"][0]), "Field of study is required")
        self.assertIn("from", serializer.errors)

    def test_experience_representation(self):
        user = User.objects.create_user(email="entry@example.com", password="secret123", name="Entry")
        profile = Profile.objects.create(user=user, status="Student", skills=["Go"])
        entry = Experience.objects.create(profile=profile, title="Eng", company="X", from_date=date(2020, 1, 1))
        data = ExperienceSerializer(entry).data
        self.assertEqual(data["from"], "2020-01-01")
        self.assertIsNone(data["to"])
        self.assertFalse(data["current"])
