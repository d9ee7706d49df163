from .content import (  # noqa: F401
    Author,
    BlogPost,
    Page,
    Program,
    PublishedQuerySet,
    SeoFields,
    SluggedContent,
    Testimonial,
)
from .homepage import (  # noqa: F401
    ActiveQuerySet,
    ContentSection,
    HeroSlide,
    ImpactStat,
    ImpactTimelineItem,
    Partner,
)
from .orderable import Orderable  # noqa: F401
from .people import BoardMember, TeamMember  # noqa: F401
from .site_settings import KNOWN_SETTINGS, SiteSetting  # noqa: F401
