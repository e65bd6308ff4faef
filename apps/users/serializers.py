from rest_framework import serializers
from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from django.utils.translation import gettext_lazy as _

User = get_user_model()

INVALID_CREDENTIALS_MESSAGE = _("Invalid credentials")


class UserSummarySerializer(serializers.ModelSerializer):
    """
    Minimal user representation embedded in profiles and posts.
    """
    class Meta:
        model = User
        fields = ['id', 'name', 'avatar']
        read_only_fields = fields


class UserSerializer(serializers.ModelSerializer):
    """
    Public user record (everything except the password hash).
    """
    date = serializers.DateTimeField(source='date_joined', read_only=True)

    class Meta:
        model = User
        fields = ['id', 'name', 'email', 'avatar', 'date']
        read_only_fields = fields


class UserRegistrationSerializer(serializers.ModelSerializer):
    """
    Serializer for user registration. Handles password hashing and the
    duplicate-email check.
    """
    password = serializers.CharField(
        write_only=True, required=True, validators=[validate_password],
        style={'input_type': 'password'},
        error_messages={
            'required': _("Please enter a password with 6 or more characters"),
            'blank': _("Please enter a password with 6 or more characters"),
        },
    )

    class Meta:
        model = User
        fields = ('name', 'email', 'password')
        extra_kwargs = {
            'name': {'error_messages': {'required': _("Name is required"), 'blank': _("Name is required")}},
            'email': {
                'validators': [], # Duplicate accounts are rejected in validate() with a generic message
                'error_messages': {
                    'required': _("Please include a valid email"),
                    'blank': _("Please include a valid email"),
                    'invalid': _("Please include a valid email"),
                },
            },
        }

    def validate(self, attrs):
        if User.objects.get_by_email(attrs['email']) is not None:
            raise serializers.ValidationError(_("User already exists"))
        return attrs

    def create(self, validated_data):
        password = validated_data.pop('password')
        return User.objects.create_user(password=password, **validated_data)


class UserLoginSerializer(serializers.Serializer):
    """
    Checks an email/password pair. Unknown email and wrong password fail
    with the same message so callers cannot tell which one was wrong.
    """
    email = serializers.EmailField(error_messages={
        'required': _("Please include a valid email"),
        'blank': _("Please include a valid email"),
        'invalid': _("Please include a valid email"),
    })
    password = serializers.CharField(
        style={'input_type': 'password'}, trim_whitespace=False,
        error_messages={'required': _("Password is required"), 'blank': _("Password is required")},
    )

    def validate(self, attrs):
        user = User.objects.get_by_email(attrs['email'])
        if user is None or not user.is_active or not user.check_password(attrs['password']):
            raise serializers.ValidationError(INVALID_CREDENTIALS_MESSAGE, code='authorization')
        attrs['user'] = user
        return attrs
