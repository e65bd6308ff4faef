from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from .models import Profile, Experience, Education


# --- Inlines for the ordered lists nested in a profile ---

class ExperienceInline(admin.StackedInline):
    model = Experience
    extra = 0
    fields = ('title', 'company', 'location', ('from_date', 'to_date', 'current'), 'description')


class EducationInline(admin.StackedInline):
    model = Education
    extra = 0
    fields = ('school', 'degree', 'fieldofstudy', ('from_date', 'to_date', 'current'), 'description')


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    """
    Admin configuration for profiles, with experience and education inline.
    """
    list_display = ('user', 'status', 'company', 'location', 'githubusername', 'created_at')
    list_filter = ('status',)
    search_fields = ('user__email', 'user__name', 'company', 'location', 'githubusername')
    readonly_fields = ('id', 'created_at', 'updated_at')
    raw_id_fields = ('user',)
    inlines = [ExperienceInline, EducationInline]

    fieldsets = (
        (None, {'fields': ('id', 'user', 'status')}),
        (_('Career'), {'fields': ('company', 'website', 'location', 'skills', 'bio', 'githubusername')}),
        (_('Social'), {'fields': ('social',)}),
        (_('Timestamps'), {'fields': ('created_at', 'updated_at'), 'classes': ('collapse',)}),
    )
