from django.db import transaction
from rest_framework import serializers

from heroes.exceptions import InvalidPositionError
from heroes.models import (
    Author,
    BlogPost,
    BoardMember,
    ContentSection,
    HeroSlide,
    ImpactStat,
    ImpactTimelineItem,
    Page,
    Partner,
    Program,
    SiteSetting,
    TeamMember,
    Testimonial,
)
from heroes.ordering import End, Position
from heroes.users.models import AdminUser
from heroes.users.permissions import ALL, PERMISSION_KEYS, normalize_permissions

SEO_FIELDS = ["meta_title", "meta_description", "meta_keywords", "og_image"]


class PositionField(serializers.CharField):
    """
    Accepts a position string (``start``, ``end``, ``after_<id>`` or
    ``before_<id>``) and returns a :class:`~heroes.ordering.Position`.
    """

    def to_internal_value(self, data):
        value = super().to_internal_value(data)
        try:
            return Position.parse(value)
        except InvalidPositionError as e:
            raise serializers.ValidationError(str(e))

    def to_representation(self, value):
        return str(value)


class OrderableSerializer(serializers.ModelSerializer):
    """
    Base serializer for manually ordered models.

    A write-only ``placement`` places the item relative to its siblings and
    takes precedence over an explicit ``sort_order``. New items given neither
    are placed at the end.
    """

    placement = PositionField(write_only=True, required=False)
    sort_order = serializers.IntegerField(required=False)

    def create(self, validated_data):
        position = validated_data.pop("placement", None)
        if position is None and "sort_order" not in validated_data:
            position = End()

        with transaction.atomic():
            instance = self.Meta.model(**validated_data)
            if position is not None:
                instance.sort_order = instance.compute_sort_order(position)
            instance.save()
        return instance

    def update(self, instance, validated_data):
        position = validated_data.pop("placement", None)

        with transaction.atomic():
            for attr, value in validated_data.items():
                setattr(instance, attr, value)
            # Scope fields are already updated, so a change of page places the
            # item among the new page's sections
            if position is not None:
                instance.sort_order = instance.compute_sort_order(position)
            instance.save()
        return instance


class ProgramSerializer(serializers.ModelSerializer):
    gallery_images = serializers.ListField(
        child=serializers.URLField(max_length=500), required=False
    )

    class Meta:
        model = Program
        fields = [
            "id",
            "title",
            "slug",
            "description",
            "content",
            "featured_image",
            "gallery_images",
            "category",
            "published",
            *SEO_FIELDS,
            "created_at",
            "updated_at",
        ]


class AuthorSerializer(serializers.ModelSerializer):
    class Meta:
        model = Author
        fields = ["id", "name", "email", "bio", "image", "created_at", "updated_at"]


class BlogPostSerializer(serializers.ModelSerializer):
    gallery_images = serializers.ListField(
        child=serializers.URLField(max_length=500), required=False
    )
    author_name = serializers.CharField(
        source="author.name", read_only=True, default=None
    )

    class Meta:
        model = BlogPost
        fields = [
            "id",
            "title",
            "slug",
            "excerpt",
            "content",
            "featured_image",
            "gallery_images",
            "author",
            "author_name",
            "published",
            *SEO_FIELDS,
            "created_at",
            "updated_at",
        ]


class TestimonialSerializer(serializers.ModelSerializer):
    class Meta:
        model = Testimonial
        fields = ["id", "name", "content", "image", "location", "featured", "created_at"]


class PageSerializer(serializers.ModelSerializer):
    class Meta:
        model = Page
        fields = [
            "id",
            "title",
            "slug",
            "content",
            "published",
            *SEO_FIELDS,
            "created_at",
            "updated_at",
        ]


class ImpactStatSerializer(OrderableSerializer):
    class Meta:
        model = ImpactStat
        fields = [
            "id",
            "title",
            "value",
            "description",
            "icon",
            "sort_order",
            "placement",
            "created_at",
        ]


class BoardMemberSerializer(OrderableSerializer):
    class Meta:
        model = BoardMember
        fields = [
            "id",
            "name",
            "position",
            "bio",
            "image",
            "sort_order",
            "placement",
            "created_at",
        ]


class TeamMemberSerializer(OrderableSerializer):
    class Meta:
        model = TeamMember
        fields = [
            "id",
            "name",
            "position",
            "bio",
            "image_url",
            "email",
            "linkedin_url",
            "active",
            "sort_order",
            "placement",
            "created_at",
            "updated_at",
        ]


class HeroSlideSerializer(OrderableSerializer):
    class Meta:
        model = HeroSlide
        fields = [
            "id",
            "title",
            "subtitle",
            "image_url",
            "button_text",
            "button_link",
            "button_text_2",
            "button_link_2",
            "active",
            "sort_order",
            "placement",
            "created_at",
            "updated_at",
        ]


class PartnerSerializer(OrderableSerializer):
    class Meta:
        model = Partner
        fields = [
            "id",
            "name",
            "logo_url",
            "website_url",
            "active",
            "sort_order",
            "placement",
            "created_at",
            "updated_at",
        ]


class ImpactTimelineItemSerializer(OrderableSerializer):
    class Meta:
        model = ImpactTimelineItem
        fields = [
            "id",
            "year",
            "title",
            "description",
            "active",
            "sort_order",
            "placement",
            "created_at",
            "updated_at",
        ]


class ContentSectionSerializer(OrderableSerializer):
    class Meta:
        model = ContentSection
        fields = [
            "id",
            "section_key",
            "page_key",
            "title",
            "subtitle",
            "content",
            "image_url",
            "button_text",
            "button_link",
            "active",
            "sort_order",
            "placement",
            "created_at",
            "updated_at",
        ]


class SiteSettingSerializer(serializers.ModelSerializer):
    class Meta:
        model = SiteSetting
        fields = ["setting_key", "setting_value", "category", "description", "updated_at"]
        read_only_fields = ["setting_key", "category", "description", "updated_at"]


class SiteSettingUpdateSerializer(serializers.Serializer):
    setting_key = serializers.CharField(max_length=100)
    setting_value = serializers.CharField(allow_blank=True, allow_null=True)


class AdminUserSerializer(serializers.ModelSerializer):
    password = serializers.CharField(
        write_only=True, required=False, allow_blank=True, trim_whitespace=False
    )
    permissions = serializers.ListField(
        child=serializers.ChoiceField(choices=[ALL] + PERMISSION_KEYS), required=False
    )

    class Meta:
        model = AdminUser
        fields = [
            "id",
            "email",
            "password",
            "role",
            "permissions",
            "is_active",
            "created_at",
            "updated_at",
        ]
        # Duplicate addresses are reported by the view as a conflict
        extra_kwargs = {"email": {"validators": []}}

    def validate_email(self, value):
        return value.lower()

    def validate(self, attrs):
        if self.instance is None and not attrs.get("password"):
            raise serializers.ValidationError({"password": "This field is required."})
        return attrs

    def create(self, validated_data):
        return AdminUser.objects.create_user(**validated_data)

    def update(self, instance, validated_data):
        password = validated_data.pop("password", "")
        role = validated_data.get("role", instance.role)
        permissions = validated_data.pop("permissions", instance.permissions)

        for attr, value in validated_data.items():
            setattr(instance, attr, value)
        instance.permissions = normalize_permissions(role, permissions)
        if password:
            instance.set_password(password)
        instance.save()
        return instance
