from django.core.exceptions import PermissionDenied

from heroes.api import filters
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
from heroes.users.models import AdminUser

from .forms import AdminUserForm, GalleryModelForm
from .views import generic
from .viewsets import ModelViewSet, OrderableModelViewSet, register_viewset

SEO_FORM_FIELDS = ["meta_title", "meta_description", "meta_keywords", "og_image"]


class ProgramViewSet(ModelViewSet):
    model = Program
    permission = "programs"
    name = "programs"
    base_form_class = GalleryModelForm
    form_fields = [
        "title",
        "slug",
        "category",
        "description",
        "content",
        "featured_image",
        "gallery_images",
        "published",
        *SEO_FORM_FIELDS,
    ]
    list_display = ["title", "category", "published", "created_at"]
    ordering = ["-created_at", "-id"]
    filterset_class = filters.ProgramFilterSet


class BlogPostViewSet(ModelViewSet):
    model = BlogPost
    permission = "blog_posts"
    name = "blog-posts"
    base_form_class = GalleryModelForm
    form_fields = [
        "title",
        "slug",
        "author",
        "excerpt",
        "content",
        "featured_image",
        "gallery_images",
        "published",
        *SEO_FORM_FIELDS,
    ]
    list_display = ["title", "author", "published", "created_at"]
    ordering = ["-created_at", "-id"]
    filterset_class = filters.BlogPostFilterSet


class AuthorViewSet(ModelViewSet):
    model = Author
    permission = "authors"
    name = "authors"
    form_fields = ["name", "email", "bio", "image"]
    list_display = ["name", "email"]


class TestimonialViewSet(ModelViewSet):
    model = Testimonial
    permission = "testimonials"
    name = "testimonials"
    form_fields = ["name", "location", "content", "image", "featured"]
    list_display = ["name", "location", "featured"]
    filterset_class = filters.TestimonialFilterSet


class PageViewSet(ModelViewSet):
    model = Page
    permission = "pages"
    name = "pages"
    form_fields = ["title", "slug", "content", "published", *SEO_FORM_FIELDS]
    list_display = ["title", "slug", "published"]
    ordering = ["title"]


class ImpactStatViewSet(OrderableModelViewSet):
    model = ImpactStat
    permission = "impact_stats"
    name = "impact-stats"
    form_fields = ["title", "value", "description", "icon"]
    list_display = ["title", "value", "sort_order"]


class BoardMemberViewSet(OrderableModelViewSet):
    model = BoardMember
    permission = "board_members"
    name = "board-members"
    form_fields = ["name", "position", "bio", "image"]
    list_display = ["name", "position", "sort_order"]


class TeamMemberViewSet(OrderableModelViewSet):
    model = TeamMember
    permission = "team_members"
    name = "team-members"
    form_fields = [
        "name",
        "position",
        "bio",
        "image_url",
        "email",
        "linkedin_url",
        "active",
    ]
    list_display = ["name", "position", "active", "sort_order"]
    filterset_class = filters.TeamMemberFilterSet


class HeroSlideViewSet(OrderableModelViewSet):
    model = HeroSlide
    permission = "hero_slides"
    name = "hero-slides"
    form_fields = [
        "title",
        "subtitle",
        "image_url",
        "button_text",
        "button_link",
        "button_text_2",
        "button_link_2",
        "active",
    ]
    list_display = ["title", "active", "sort_order"]
    filterset_class = filters.HeroSlideFilterSet


class PartnerViewSet(OrderableModelViewSet):
    model = Partner
    permission = "partners"
    name = "partners"
    form_fields = ["name", "logo_url", "website_url", "active"]
    list_display = ["name", "active", "sort_order"]
    filterset_class = filters.PartnerFilterSet


class ImpactTimelineItemViewSet(OrderableModelViewSet):
    model = ImpactTimelineItem
    permission = "timeline"
    name = "impact-timeline"
    form_fields = ["year", "title", "description", "active"]
    list_display = ["year", "title", "active", "sort_order"]
    filterset_class = filters.ImpactTimelineItemFilterSet


class ContentSectionViewSet(OrderableModelViewSet):
    model = ContentSection
    permission = "content_sections"
    name = "content-sections"
    form_fields = [
        "page_key",
        "title",
        "section_key",
        "subtitle",
        "content",
        "image_url",
        "button_text",
        "button_link",
        "active",
    ]
    list_display = ["title", "page_key", "active", "sort_order"]
    ordering = ["page_key", "sort_order", "id"]
    filterset_class = filters.ContentSectionFilterSet


class AdminUserDeleteView(generic.DeleteView):
    def check_can_delete(self):
        if self.object.pk == self.request.user.pk:
            raise PermissionDenied


class AdminUserViewSet(ModelViewSet):
    model = AdminUser
    permission = "user_management"
    name = "users"
    form_class = AdminUserForm
    delete_view_class = AdminUserDeleteView
    list_display = ["email", "role", "is_active", "created_at"]
    ordering = ["-created_at", "-id"]


program_viewset = register_viewset(ProgramViewSet())
blog_post_viewset = register_viewset(BlogPostViewSet())
author_viewset = register_viewset(AuthorViewSet())
testimonial_viewset = register_viewset(TestimonialViewSet())
page_viewset = register_viewset(PageViewSet())
impact_stat_viewset = register_viewset(ImpactStatViewSet())
board_member_viewset = register_viewset(BoardMemberViewSet())
team_member_viewset = register_viewset(TeamMemberViewSet())
hero_slide_viewset = register_viewset(HeroSlideViewSet())
partner_viewset = register_viewset(PartnerViewSet())
impact_timeline_viewset = register_viewset(ImpactTimelineItemViewSet())
content_section_viewset = register_viewset(ContentSectionViewSet())
admin_user_viewset = register_viewset(AdminUserViewSet())
