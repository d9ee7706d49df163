from django.utils.translation import gettext_lazy as _

#: Grants every permission
ALL = "all"

#: (key, label, description) for each area of the dashboard that can be
#: granted to an admin user
AVAILABLE_PERMISSIONS = [
    ("programs", _("Programs"), _("Manage programs and initiatives")),
    ("impact_stats", _("Impact stats"), _("Manage impact statistics")),
    ("testimonials", _("Testimonials"), _("Manage testimonials")),
    ("blog_posts", _("Blog posts"), _("Manage blog posts and articles")),
    ("authors", _("Authors"), _("Manage blog post authors")),
    ("board_members", _("Board members"), _("Manage board member profiles")),
    ("team_members", _("Team members"), _("Manage team member profiles")),
    ("content_sections", _("Content sections"), _("Manage page content sections")),
    ("pages", _("Pages"), _("Manage static pages")),
    ("hero_slides", _("Hero slides"), _("Manage homepage hero slides")),
    ("partners", _("Partners"), _("Manage partner organizations")),
    ("timeline", _("Timeline"), _("Manage impact timeline")),
    ("site_settings", _("Site settings"), _("Manage site configuration and settings")),
    ("user_management", _("User management"), _("Manage admin users and permissions")),
]

PERMISSION_KEYS = [key for key, label, description in AVAILABLE_PERMISSIONS]


def get_permission_choices():
    return [(key, label) for key, label, description in AVAILABLE_PERMISSIONS]


def normalize_permissions(role, permissions):
    """
    Return the permissions list to store for a user: super admins always get
    the wildcard, everyone else gets the known keys they were given (without
    the wildcard), de-duplicated and in a stable order.
    """
    if role == "super_admin":
        return [ALL]
    permissions = set(permissions or [])
    return [key for key in PERMISSION_KEYS if key in permissions]
