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
    TeamMember,
    Testimonial,
)

from . import filters, serializers
from .views import BaseAdminAPIViewSet, OrderableAPIViewSet


class ProgramsAPIViewSet(BaseAdminAPIViewSet):
    model = Program
    permission = "programs"
    serializer_class = serializers.ProgramSerializer
    filterset_class = filters.ProgramFilterSet
    default_ordering = ["-created_at", "-id"]


class BlogPostsAPIViewSet(BaseAdminAPIViewSet):
    model = BlogPost
    permission = "blog_posts"
    serializer_class = serializers.BlogPostSerializer
    filterset_class = filters.BlogPostFilterSet
    default_ordering = ["-created_at", "-id"]

    def get_queryset(self):
        return super().get_queryset().select_related("author")


class AuthorsAPIViewSet(BaseAdminAPIViewSet):
    model = Author
    permission = "authors"
    serializer_class = serializers.AuthorSerializer
    default_ordering = ["name", "id"]


class TestimonialsAPIViewSet(BaseAdminAPIViewSet):
    model = Testimonial
    permission = "testimonials"
    serializer_class = serializers.TestimonialSerializer
    filterset_class = filters.TestimonialFilterSet
    default_ordering = ["-created_at", "-id"]


class PagesAPIViewSet(BaseAdminAPIViewSet):
    model = Page
    permission = "pages"
    serializer_class = serializers.PageSerializer
    default_ordering = ["title", "id"]


class ImpactStatsAPIViewSet(OrderableAPIViewSet):
    model = ImpactStat
    permission = "impact_stats"
    serializer_class = serializers.ImpactStatSerializer


class BoardMembersAPIViewSet(OrderableAPIViewSet):
    model = BoardMember
    permission = "board_members"
    serializer_class = serializers.BoardMemberSerializer


class TeamMembersAPIViewSet(OrderableAPIViewSet):
    model = TeamMember
    permission = "team_members"
    serializer_class = serializers.TeamMemberSerializer
    filterset_class = filters.TeamMemberFilterSet


class HeroSlidesAPIViewSet(OrderableAPIViewSet):
    model = HeroSlide
    permission = "hero_slides"
    serializer_class = serializers.HeroSlideSerializer
    filterset_class = filters.HeroSlideFilterSet


class PartnersAPIViewSet(OrderableAPIViewSet):
    model = Partner
    permission = "partners"
    serializer_class = serializers.PartnerSerializer
    filterset_class = filters.PartnerFilterSet


class ImpactTimelineAPIViewSet(OrderableAPIViewSet):
    model = ImpactTimelineItem
    permission = "timeline"
    serializer_class = serializers.ImpactTimelineItemSerializer
    filterset_class = filters.ImpactTimelineItemFilterSet


class ContentSectionsAPIViewSet(OrderableAPIViewSet):
    model = ContentSection
    permission = "content_sections"
    serializer_class = serializers.ContentSectionSerializer
    filterset_class = filters.ContentSectionFilterSet
    default_ordering = ["page_key", "sort_order", "id"]
