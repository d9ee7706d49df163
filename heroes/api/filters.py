import django_filters
from django.utils.translation import gettext_lazy as _

from heroes.models import (
    BlogPost,
    ContentSection,
    HeroSlide,
    ImpactTimelineItem,
    Partner,
    Program,
    SiteSetting,
    TeamMember,
    Testimonial,
)


class ProgramFilterSet(django_filters.FilterSet):
    search = django_filters.CharFilter(
        label=_("Search"), field_name="title", lookup_expr="icontains"
    )

    class Meta:
        model = Program
        fields = ["category", "published"]


class BlogPostFilterSet(django_filters.FilterSet):
    search = django_filters.CharFilter(
        label=_("Search"), field_name="title", lookup_expr="icontains"
    )

    class Meta:
        model = BlogPost
        fields = ["published", "author"]


class TestimonialFilterSet(django_filters.FilterSet):
    class Meta:
        model = Testimonial
        fields = ["featured"]


class ActiveFilterSet(django_filters.FilterSet):
    class Meta:
        fields = ["active"]


class HeroSlideFilterSet(ActiveFilterSet):
    class Meta(ActiveFilterSet.Meta):
        model = HeroSlide


class PartnerFilterSet(ActiveFilterSet):
    class Meta(ActiveFilterSet.Meta):
        model = Partner


class TeamMemberFilterSet(ActiveFilterSet):
    class Meta(ActiveFilterSet.Meta):
        model = TeamMember


class ImpactTimelineItemFilterSet(ActiveFilterSet):
    class Meta(ActiveFilterSet.Meta):
        model = ImpactTimelineItem


class ContentSectionFilterSet(django_filters.FilterSet):
    class Meta:
        model = ContentSection
        fields = ["page_key", "active"]


class SiteSettingFilterSet(django_filters.FilterSet):
    class Meta:
        model = SiteSetting
        fields = ["category"]
