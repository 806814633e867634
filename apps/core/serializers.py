# apps/core/serializers.py

from django.contrib.auth import get_user_model
from rest_framework import serializers

from apps.core.authorization import is_admin

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    is_admin = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            "id",
            "username",
            "name",
            "role",
            "is_admin",
        ]

    def get_is_admin(self, obj) -> bool:
        return is_admin(obj)
