from rest_framework import serializers

from .models import Category, Organisation


class CategorySerializer(serializers.ModelSerializer):
    class Meta:
        model = Category
        fields = ["id", "name", "charity_commission_id", "charity_commission_name"]


class OrganisationSerializer(serializers.ModelSerializer):
    categories = serializers.PrimaryKeyRelatedField(many=True, read_only=True)

    class Meta:
        model = Organisation
        fields = [
            "id",
            "name",
            "description",
            "address",
            "postcode",
            "email",
            "website",
            "telephone",
            "donation_info",
            "latitude",
            "longitude",
            "categories",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def to_representation(self, instance):
        data = super().to_representation(instance)
        # Respect the organisation's own publishing choices
        if not instance.publish_address:
            data["address"] = ""
            data["postcode"] = ""
        if not instance.publish_phone:
            data["telephone"] = ""
        if not instance.publish_email:
            data["email"] = ""
        return data
