from django.conf import settings
from django.core.paginator import Paginator
from django.shortcuts import get_object_or_404, render

from heroes.models import (
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


def get_sections(page_key):
    return ContentSection.objects.active().filter(page_key=page_key)


def get_page(slug):
    """
    Returns the editable copy for a static page, or None if it has not been
    written or is unpublished.
    """
    return Page.objects.published().filter(slug=slug).first()


def home(request):
    return render(
        request,
        "heroessite/home.html",
        {
            "hero_slides": HeroSlide.objects.active(),
            "impact_stats": ImpactStat.objects.all(),
            "testimonials": Testimonial.objects.filter(featured=True),
            "partners": Partner.objects.active(),
            "programs": Program.objects.published()[:6],
            "sections": get_sections("home"),
        },
    )


def about(request):
    return render(
        request,
        "heroessite/about.html",
        {
            "page": get_page("about"),
            "sections": get_sections("about"),
            "timeline": ImpactTimelineItem.objects.active(),
            "board_members": BoardMember.objects.all(),
        },
    )


def program_index(request):
    programs = Program.objects.published()

    category = request.GET.get("category")
    valid_categories = dict(Program.CATEGORY_CHOICES)
    if category in valid_categories:
        programs = programs.filter(category=category)
    else:
        category = None

    return render(
        request,
        "heroessite/program_index.html",
        {
            "programs": programs,
            "categories": Program.CATEGORY_CHOICES,
            "current_category": category,
            "sections": get_sections("programs"),
        },
    )


def program_detail(request, slug):
    program = get_object_or_404(Program.objects.published(), slug=slug)
    return render(request, "heroessite/program_detail.html", {"program": program})


def blog_index(request):
    posts = BlogPost.objects.published().select_related("author")
    paginator = Paginator(posts, getattr(settings, "HEROES_BLOG_PAGE_SIZE", 9))
    page_obj = paginator.get_page(request.GET.get("page"))

    return render(
        request,
        "heroessite/blog_index.html",
        {"posts": page_obj, "page_obj": page_obj, "paginator": paginator},
    )


def blog_detail(request, slug):
    post = get_object_or_404(
        BlogPost.objects.published().select_related("author"), slug=slug
    )
    related_posts = BlogPost.objects.published().exclude(pk=post.pk)[:3]
    return render(
        request,
        "heroessite/blog_detail.html",
        {"post": post, "related_posts": related_posts},
    )


def board(request):
    return render(
        request, "heroessite/board.html", {"board_members": BoardMember.objects.all()}
    )


def team(request):
    return render(
        request, "heroessite/team.html", {"team_members": TeamMember.objects.active()}
    )


def impact(request):
    return render(
        request,
        "heroessite/impact.html",
        {
            "impact_stats": ImpactStat.objects.all(),
            "timeline": ImpactTimelineItem.objects.active(),
            "testimonials": Testimonial.objects.all()[:6],
        },
    )


def donate(request):
    payment_details = SiteSetting.objects.filter(category="payment").as_dict()
    return render(
        request,
        "heroessite/donate.html",
        {
            "page": get_page("donate"),
            "sections": get_sections("donate"),
            "payment_details": payment_details,
        },
    )


def volunteer(request):
    return render(
        request,
        "heroessite/volunteer.html",
        {"page": get_page("volunteer"), "sections": get_sections("volunteer")},
    )


def contact(request):
    return render(
        request,
        "heroessite/contact.html",
        {"page": get_page("contact"), "sections": get_sections("contact")},
    )


def page_not_found(request, exception=None):
    return render(request, "404.html", status=404)
