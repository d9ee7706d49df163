import django.db.models.deletion
from django.db import migrations, models


def id_field():
    return (
        "id",
        models.BigAutoField(
            auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
        ),
    )


def sort_order_field():
    return ("sort_order", models.IntegerField(db_index=True, default=0))


def seo_fields():
    return [
        ("meta_title", models.CharField(blank=True, max_length=255, verbose_name="meta title")),
        ("meta_description", models.TextField(blank=True, verbose_name="meta description")),
        (
            "meta_keywords",
            models.CharField(blank=True, max_length=255, verbose_name="meta keywords"),
        ),
        (
            "og_image",
            models.URLField(blank=True, max_length=500, verbose_name="social sharing image"),
        ),
    ]


def slugged_content_fields(published_default=False):
    return [
        ("title", models.CharField(max_length=255, verbose_name="title")),
        (
            "slug",
            models.SlugField(
                blank=True,
                help_text="Generated from the title when left blank",
                max_length=255,
                unique=True,
                verbose_name="slug",
            ),
        ),
        ("content", models.TextField(blank=True, verbose_name="content")),
        (
            "published",
            models.BooleanField(default=published_default, verbose_name="published"),
        ),
        ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
        ("updated_at", models.DateTimeField(auto_now=True, verbose_name="updated at")),
    ]


def timestamps():
    return [
        ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
        ("updated_at", models.DateTimeField(auto_now=True, verbose_name="updated at")),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Author",
            fields=[
                id_field(),
                ("name", models.CharField(max_length=255, verbose_name="name")),
                ("email", models.EmailField(blank=True, max_length=254, verbose_name="email")),
                ("bio", models.TextField(blank=True, verbose_name="bio")),
                ("image", models.URLField(blank=True, max_length=500, verbose_name="image")),
            ]
            + timestamps(),
            options={
                "verbose_name": "author",
                "verbose_name_plural": "authors",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="Program",
            fields=[id_field()]
            + seo_fields()
            + slugged_content_fields()
            + [
                ("description", models.TextField(blank=True, verbose_name="description")),
                (
                    "featured_image",
                    models.URLField(blank=True, max_length=500, verbose_name="featured image"),
                ),
                (
                    "gallery_images",
                    models.JSONField(blank=True, default=list, verbose_name="gallery images"),
                ),
                (
                    "category",
                    models.CharField(
                        choices=[
                            ("education", "Education"),
                            ("health", "Health"),
                            ("empowerment", "Empowerment"),
                            ("community", "Community"),
                        ],
                        default="education",
                        max_length=20,
                        verbose_name="category",
                    ),
                ),
            ],
            options={
                "verbose_name": "program",
                "verbose_name_plural": "programs",
                "ordering": ["-created_at"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="BlogPost",
            fields=[id_field()]
            + seo_fields()
            + slugged_content_fields()
            + [
                ("excerpt", models.TextField(blank=True, verbose_name="excerpt")),
                (
                    "featured_image",
                    models.URLField(blank=True, max_length=500, verbose_name="featured image"),
                ),
                (
                    "gallery_images",
                    models.JSONField(blank=True, default=list, verbose_name="gallery images"),
                ),
                (
                    "author",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="posts",
                        to="heroes.author",
                        verbose_name="author",
                    ),
                ),
            ],
            options={
                "verbose_name": "blog post",
                "verbose_name_plural": "blog posts",
                "ordering": ["-created_at"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="Page",
            fields=[id_field()] + seo_fields() + slugged_content_fields(True),
            options={
                "verbose_name": "page",
                "verbose_name_plural": "pages",
                "ordering": ["-created_at"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="Testimonial",
            fields=[
                id_field(),
                ("name", models.CharField(max_length=255, verbose_name="name")),
                ("content", models.TextField(verbose_name="content")),
                ("image", models.URLField(blank=True, max_length=500, verbose_name="image")),
                ("location", models.CharField(blank=True, max_length=255, verbose_name="location")),
                ("featured", models.BooleanField(default=False, verbose_name="featured")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
            ],
            options={
                "verbose_name": "testimonial",
                "verbose_name_plural": "testimonials",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="ImpactStat",
            fields=[
                id_field(),
                sort_order_field(),
                ("title", models.CharField(max_length=255, verbose_name="title")),
                (
                    "value",
                    models.CharField(help_text="e.g. 2,500+", max_length=50, verbose_name="value"),
                ),
                ("description", models.TextField(blank=True, verbose_name="description")),
                (
                    "icon",
                    models.CharField(
                        choices=[
                            ("trending-up", "Trending up"),
                            ("users", "Users"),
                            ("heart", "Heart"),
                            ("book-open", "Book"),
                            ("home", "Home"),
                            ("star", "Star"),
                            ("target", "Target"),
                            ("award", "Award"),
                            ("map-pin", "Map pin"),
                        ],
                        default="users",
                        max_length=20,
                        verbose_name="icon",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
            ],
            options={
                "verbose_name": "impact statistic",
                "verbose_name_plural": "impact statistics",
                "ordering": ["sort_order", "id"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="HeroSlide",
            fields=[
                id_field(),
                sort_order_field(),
                ("title", models.CharField(max_length=255, verbose_name="title")),
                ("subtitle", models.TextField(blank=True, verbose_name="subtitle")),
                ("image_url", models.URLField(max_length=500, verbose_name="image")),
                (
                    "button_text",
                    models.CharField(blank=True, max_length=100, verbose_name="button text"),
                ),
                (
                    "button_link",
                    models.CharField(blank=True, max_length=500, verbose_name="button link"),
                ),
                (
                    "button_text_2",
                    models.CharField(
                        blank=True, max_length=100, verbose_name="second button text"
                    ),
                ),
                (
                    "button_link_2",
                    models.CharField(
                        blank=True, max_length=500, verbose_name="second button link"
                    ),
                ),
                ("active", models.BooleanField(default=True, verbose_name="active")),
            ]
            + timestamps(),
            options={
                "verbose_name": "hero slide",
                "verbose_name_plural": "hero slides",
                "ordering": ["sort_order", "id"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="Partner",
            fields=[
                id_field(),
                sort_order_field(),
                ("name", models.CharField(max_length=255, verbose_name="name")),
                ("logo_url", models.URLField(max_length=500, verbose_name="logo")),
                (
                    "website_url",
                    models.URLField(blank=True, max_length=500, verbose_name="website"),
                ),
                ("active", models.BooleanField(default=True, verbose_name="active")),
            ]
            + timestamps(),
            options={
                "verbose_name": "partner",
                "verbose_name_plural": "partners",
                "ordering": ["sort_order", "id"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="ImpactTimelineItem",
            fields=[
                id_field(),
                sort_order_field(),
                ("year", models.PositiveSmallIntegerField(verbose_name="year")),
                ("title", models.CharField(max_length=255, verbose_name="title")),
                ("description", models.TextField(verbose_name="description")),
                ("active", models.BooleanField(default=True, verbose_name="active")),
            ]
            + timestamps(),
            options={
                "verbose_name": "timeline item",
                "verbose_name_plural": "timeline items",
                "ordering": ["sort_order", "id"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="ContentSection",
            fields=[
                id_field(),
                sort_order_field(),
                (
                    "section_key",
                    models.CharField(
                        blank=True,
                        help_text="Generated from the page and title when left blank",
                        max_length=255,
                        unique=True,
                        verbose_name="section key",
                    ),
                ),
                (
                    "page_key",
                    models.CharField(
                        choices=[
                            ("home", "Homepage"),
                            ("about", "About page"),
                            ("programs", "Programs page"),
                            ("volunteer", "Volunteer page"),
                            ("donate", "Donate page"),
                            ("contact", "Contact page"),
                            ("global", "Global (all pages)"),
                        ],
                        default="home",
                        max_length=20,
                        verbose_name="page",
                    ),
                ),
                ("title", models.CharField(max_length=255, verbose_name="title")),
                ("subtitle", models.TextField(blank=True, verbose_name="subtitle")),
                ("content", models.TextField(blank=True, verbose_name="content")),
                ("image_url", models.URLField(blank=True, max_length=500, verbose_name="image")),
                (
                    "button_text",
                    models.CharField(blank=True, max_length=100, verbose_name="button text"),
                ),
                (
                    "button_link",
                    models.CharField(blank=True, max_length=500, verbose_name="button link"),
                ),
                ("active", models.BooleanField(default=True, verbose_name="active")),
            ]
            + timestamps(),
            options={
                "verbose_name": "content section",
                "verbose_name_plural": "content sections",
                "ordering": ["sort_order", "id"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="BoardMember",
            fields=[
                id_field(),
                sort_order_field(),
                ("name", models.CharField(max_length=255, verbose_name="name")),
                ("position", models.CharField(blank=True, max_length=255, verbose_name="position")),
                ("bio", models.TextField(blank=True, verbose_name="bio")),
                ("image", models.URLField(blank=True, max_length=500, verbose_name="image")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
            ],
            options={
                "verbose_name": "board member",
                "verbose_name_plural": "board members",
                "ordering": ["sort_order", "id"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="TeamMember",
            fields=[
                id_field(),
                sort_order_field(),
                ("name", models.CharField(max_length=255, verbose_name="name")),
                ("position", models.CharField(blank=True, max_length=255, verbose_name="position")),
                ("bio", models.TextField(blank=True, verbose_name="bio")),
                ("image_url", models.URLField(blank=True, max_length=500, verbose_name="image")),
                ("email", models.EmailField(blank=True, max_length=254, verbose_name="email")),
                (
                    "linkedin_url",
                    models.URLField(blank=True, max_length=500, verbose_name="LinkedIn profile"),
                ),
                ("active", models.BooleanField(default=True, verbose_name="active")),
            ]
            + timestamps(),
            options={
                "verbose_name": "team member",
                "verbose_name_plural": "team members",
                "ordering": ["sort_order", "id"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="SiteSetting",
            fields=[
                id_field(),
                ("setting_key", models.CharField(max_length=100, unique=True, verbose_name="key")),
                ("setting_value", models.TextField(blank=True, verbose_name="value")),
                (
                    "category",
                    models.CharField(
                        choices=[
                            ("contact", "Contact information"),
                            ("social", "Social media"),
                            ("payment", "Payment details"),
                            ("links", "Action links"),
                            ("general", "General"),
                        ],
                        default="general",
                        max_length=20,
                        verbose_name="category",
                    ),
                ),
                (
                    "description",
                    models.CharField(blank=True, max_length=255, verbose_name="description"),
                ),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="updated at")),
            ],
            options={
                "verbose_name": "site setting",
                "verbose_name_plural": "site settings",
                "ordering": ["category", "setting_key"],
            },
        ),
    ]
