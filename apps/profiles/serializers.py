from rest_framework import serializers
from rest_framework.fields import empty
from django.utils.translation import gettext_lazy as _

from apps.users.serializers import UserSummarySerializer
from .models import Profile, Experience, Education, SOCIAL_NETWORKS
from .normalizers import normalize_skills, normalize_website


def _required(message):
    return {'error_messages': {'required': message, 'blank': message, 'null': message}}


class SkillsField(serializers.Field):
    """
    Skills arrive either as a list or as one comma-delimited string;
    both are stored as a list of trimmed, non-empty strings.
    """
    default_error_messages = {
        'invalid': _("Skills must be a list or a comma-separated string."),
    }

    def to_internal_value(self, data):
        try:
            return normalize_skills(data)
        except TypeError:
            self.fail('invalid')

    def to_representation(self, value):
        return list(value or [])


class BlankAsNullDateField(serializers.DateField):
    """Form clients send an empty string for a date they leave out."""

    def run_validation(self, data=empty):
        if isinstance(data, str) and not data.strip():
            data = None
        return super().run_validation(data)


class BlankAsFalseBooleanField(serializers.BooleanField):
    def run_validation(self, data=empty):
        if isinstance(data, str) and not data.strip():
            data = False
        return super().run_validation(data)


class DateRangeFieldsMixin:
    """
    Exposes the model's from_date/to_date as "from"/"to" in the JSON body;
    `from` is a reserved word so the fields cannot be declared on the class.
    """
    from_required_message = _("From date is required")

    def get_fields(self):
        fields = super().get_fields()
        fields['from'] = BlankAsNullDateField(
            source='from_date',
            error_messages={
                'required': self.from_required_message,
                'null': self.from_required_message,
                'invalid': _("From date must be a valid date (YYYY-MM-DD)."),
            },
        )
        fields['to'] = BlankAsNullDateField(source='to_date', required=False, allow_null=True)
        fields['current'] = BlankAsFalseBooleanField(required=False)
        return fields


class ExperienceSerializer(DateRangeFieldsMixin, serializers.ModelSerializer):
    class Meta:
        model = Experience
        fields = ['id', 'title', 'company', 'location', 'current', 'description']
        read_only_fields = ['id']
        extra_kwargs = {
            'title': _required(_("Title is required")),
            'company': _required(_("Company is required")),
        }


class EducationSerializer(DateRangeFieldsMixin, serializers.ModelSerializer):
    class Meta:
        model = Education
        fields = ['id', 'school', 'degree', 'fieldofstudy', 'current', 'description']
        read_only_fields = ['id']
        extra_kwargs = {
            'school': _required(_("School is required")),
            'degree': _required(_("Degree is required")),
            'fieldofstudy': _required(_("Field of study is required")),
        }


class ProfileSerializer(serializers.ModelSerializer):
    """
    Profile with its owner, experience and education embedded.

    On write, social links are given as top-level keys (youtube, twitter, ...)
    and replace the stored `social` record as a whole.
    """
    user = UserSummarySerializer(read_only=True)
    website = serializers.CharField(required=False, allow_blank=True, max_length=500)
    skills = SkillsField(error_messages={'required': _("Skills is required"), 'null': _("Skills is required")})
    social = serializers.JSONField(read_only=True)
    experience = ExperienceSerializer(many=True, read_only=True)
    education = EducationSerializer(many=True, read_only=True)
    date = serializers.DateTimeField(source='created_at', read_only=True)

    youtube = serializers.CharField(write_only=True, required=False, allow_blank=True)
    twitter = serializers.CharField(write_only=True, required=False, allow_blank=True)
    facebook = serializers.CharField(write_only=True, required=False, allow_blank=True)
    linkedin = serializers.CharField(write_only=True, required=False, allow_blank=True)
    instagram = serializers.CharField(write_only=True, required=False, allow_blank=True)

    class Meta:
        model = Profile
        fields = [
            'id', 'user', 'company', 'website', 'location', 'status', 'skills',
            'bio', 'githubusername', 'social', 'experience', 'education',
            'date', 'updated_at',
            'youtube', 'twitter', 'facebook', 'linkedin', 'instagram',
        ]
        read_only_fields = ('id', 'user', 'social', 'experience', 'education', 'date', 'updated_at')
        extra_kwargs = {
            'status': _required(_("Status is required")),
        }

    def validate_website(self, value):
        try:
            website = normalize_website(value)
        except ValueError:
            raise serializers.ValidationError(_("Please include a valid website URL"))

        # Normalising can lengthen the value, so the column limit is checked afterwards
        max_length = Profile._meta.get_field('website').max_length
        if len(website) > max_length:
            raise serializers.ValidationError(
                _("Website URL must be at most %(max_length)d characters.") % {'max_length': max_length}
            )
        return website

    def validate_skills(self, value):
        if not value:
            raise serializers.ValidationError(_("Skills is required"))
        return value

    def validate(self, attrs):
        social = {}
        for network in SOCIAL_NETWORKS:
            link = attrs.pop(network, '')
            if link:
                social[network] = link
        attrs['social'] = social
        attrs.setdefault('website', '')
        return attrs

    def create(self, validated_data):
        """
        Create-or-update keyed on the owning user (passed to save() as `user_id`).
        """
        user_id = validated_data.pop('user_id')
        profile, _created = Profile.objects.update_or_create(user_id=user_id, defaults=validated_data)
        return profile
