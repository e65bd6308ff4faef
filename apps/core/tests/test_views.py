from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse

User = get_user_model()


class LandingViewTests(TestCase):

    def setUp(self):
        self.url = reverse('landing')

    def test_anonymous_visitor_sees_landing_page(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, 'landing.html')
        self.assertContains(response, 'href="/register"')
        self.assertContains(response, 'href="/login"')

    def test_signed_in_visitor_is_sent_to_dashboard(self):
        user = User.objects.create_user(email="landing@example.com", password="secret123", name="Landing")
        self.client.force_login(user)
        response = self.client.get(self.url)
        self.assertRedirects(response, '/dashboard', fetch_redirect_response=False)
