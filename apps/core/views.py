from django.conf import settings
from django.shortcuts import redirect
from django.views.generic import TemplateView


class LandingView(TemplateView):
    """
    Public landing page. Signed-in visitors skip the marketing content
    and go straight to their dashboard.
    """
    template_name = 'landing.html'

    def get(self, request, *args, **kwargs):
        if request.user.is_authenticated:
            return redirect(settings.LOGIN_REDIRECT_URL)
        return super().get(request, *args, **kwargs)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['site_name'] = settings.SITE_NAME
        return context
