# user/serializers.py
from django.contrib.auth import password_validation
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers

from .models import User


class RegisterSerializer(serializers.ModelSerializer):
    password = serializers.CharField(write_only=True)
    password_confirmation = serializers.CharField(write_only=True)

    class Meta:
        model = User
        fields = ["name", "email", "password", "password_confirmation"]
        extra_kwargs = {
            "name": {"max_length": 255},
            "email": {"max_length": 255, "validators": []},
        }

    def validate_email(self, value):
        if User.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError("The email has already been taken.")
        return value.lower()

    def validate(self, attrs):
        if attrs["password"] != attrs["password_confirmation"]:
            raise serializers.ValidationError(
                {"password": ["The password field confirmation does not match."]}
            )

        candidate = User(email=attrs.get("email"), name=attrs.get("name"))
        try:
            password_validation.validate_password(attrs["password"], user=candidate)
        except DjangoValidationError as exc:
            raise serializers.ValidationError({"password": list(exc.messages)})

        return attrs

    def create(self, validated_data):
        validated_data.pop("password_confirmation")
        return User.objects.create_user(
            email=validated_data["email"],
            name=validated_data["name"],
            password=validated_data["password"],
        )


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField()

    def validate_email(self, value):
        # stored addresses are lowercased by UserManager.create_user
        return value.lower()


class UserSerializer(serializers.ModelSerializer):
    # password and email_verification_token are never exposed
    class Meta:
        model = User
        fields = [
            "id",
            "name",
            "email",
            "role",
            "date_joined",
        ]
        read_only_fields = fields
