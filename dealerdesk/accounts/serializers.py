from django.contrib.auth import get_user_model
from rest_framework import serializers

from dealerdesk.accounts.models import StaffProfile

User = get_user_model()

PROFILE_FIELDS = (
    'role', 'phone', 'profile_image',
    'facebook_id', 'instagram_id', 'twitter_id', 'linkedin_id',
)


class UserSerializer(serializers.ModelSerializer):
    """
    Auth user flattened together with its StaffProfile.
    Profile fields are written back to the profile on update.
    """
    role = serializers.ChoiceField(source='profile.role', choices=StaffProfile.Role.choices, required=False)
    phone = serializers.CharField(source='profile.phone', required=False, allow_blank=True)
    profile_image = serializers.CharField(source='profile.profile_image', required=False, allow_blank=True)
    facebook_id = serializers.CharField(source='profile.facebook_id', required=False, allow_blank=True)
    instagram_id = serializers.CharField(source='profile.instagram_id', required=False, allow_blank=True)
    twitter_id = serializers.CharField(source='profile.twitter_id', required=False, allow_blank=True)
    linkedin_id = serializers.CharField(source='profile.linkedin_id', required=False, allow_blank=True)

    class Meta:
        model = User
        fields = ('id', 'username', 'email', 'first_name', 'last_name', 'date_joined') + PROFILE_FIELDS
        read_only_fields = ('id', 'username', 'date_joined')

    def update(self, instance, validated_data):
        profile_data = validated_data.pop('profile', {})
        instance = super().update(instance, validated_data)
        if profile_data:
            profile, _ = StaffProfile.objects.get_or_create(user=instance)
            for attr, value in profile_data.items():
                setattr(profile, attr, value)
            profile.save()
        return instance


class RegisterSerializer(serializers.ModelSerializer):
    """New staff account. Everyone starts with the default role."""
    password = serializers.CharField(write_only=True, min_length=8, style={'input_type': 'password'})

    class Meta:
        model = User
        fields = ('id', 'username', 'password', 'email', 'first_name', 'last_name')
        extra_kwargs = {'email': {'required': True}}

    def create(self, validated_data):
        return User.objects.create_user(**validated_data)


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField(style={'input_type': 'password'})
