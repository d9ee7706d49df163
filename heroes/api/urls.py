from .auth import AuthAPIViewSet
from .endpoints import (
    AuthorsAPIViewSet,
    BlogPostsAPIViewSet,
    BoardMembersAPIViewSet,
    ContentSectionsAPIViewSet,
    HeroSlidesAPIViewSet,
    ImpactStatsAPIViewSet,
    ImpactTimelineAPIViewSet,
    PagesAPIViewSet,
    PartnersAPIViewSet,
    ProgramsAPIViewSet,
    TeamMembersAPIViewSet,
    TestimonialsAPIViewSet,
)
from .router import HeroesAPIRouter
from .site_settings import SiteSettingsAPIViewSet
from .uploads import ImageUploadAPIViewSet
from .users import UsersAPIViewSet

admin_api = HeroesAPIRouter("heroesapi")

admin_api.register_endpoint("auth", AuthAPIViewSet)
admin_api.register_endpoint("programs", ProgramsAPIViewSet)
admin_api.register_endpoint("blog-posts", BlogPostsAPIViewSet)
admin_api.register_endpoint("authors", AuthorsAPIViewSet)
admin_api.register_endpoint("testimonials", TestimonialsAPIViewSet)
admin_api.register_endpoint("impact-stats", ImpactStatsAPIViewSet)
admin_api.register_endpoint("board-members", BoardMembersAPIViewSet)
admin_api.register_endpoint("team-members", TeamMembersAPIViewSet)
admin_api.register_endpoint("hero-slides", HeroSlidesAPIViewSet)
admin_api.register_endpoint("partners", PartnersAPIViewSet)
admin_api.register_endpoint("impact-timeline", ImpactTimelineAPIViewSet)
admin_api.register_endpoint("content-sections", ContentSectionsAPIViewSet)
admin_api.register_endpoint("pages", PagesAPIViewSet)
admin_api.register_endpoint("site-settings", SiteSettingsAPIViewSet)
admin_api.register_endpoint("users", UsersAPIViewSet)
admin_api.register_endpoint("images", ImageUploadAPIViewSet)

