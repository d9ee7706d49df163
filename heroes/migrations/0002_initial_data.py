from django.db import migrations

# (key, category, description); values are left blank for editors to fill in
INITIAL_SETTINGS = [
    ("contact_email", "contact", "Contact email"),
    ("contact_phone", "contact", "Contact phone"),
    ("contact_address", "contact", "Address"),
    ("site_description", "general", "Site description"),
    ("facebook_url", "social", "Facebook"),
    ("twitter_url", "social", "Twitter / X"),
    ("instagram_url", "social", "Instagram"),
    ("linkedin_url", "social", "LinkedIn"),
    ("youtube_url", "social", "YouTube"),
    ("bank_name", "payment", "Bank name"),
    ("account_number", "payment", "Account number"),
    ("account_name", "payment", "Account name"),
    ("donate_button_url", "links", "Donate button link"),
    ("volunteer_button_url", "links", "Volunteer button link"),
]

INITIAL_PAGES = [
    ("About us", "about"),
    ("Donate", "donate"),
    ("Volunteer", "volunteer"),
    ("Contact", "contact"),
]


def initial_data(apps, schema_editor):
    SiteSetting = apps.get_model("heroes.SiteSetting")
    Page = apps.get_model("heroes.Page")

    for key, category, description in INITIAL_SETTINGS:
        SiteSetting.objects.get_or_create(
            setting_key=key,
            defaults={"category": category, "description": description},
        )

    for title, slug in INITIAL_PAGES:
        Page.objects.get_or_create(
            slug=slug, defaults={"title": title, "published": True}
        )


def remove_initial_data(apps, schema_editor):
    SiteSetting = apps.get_model("heroes.SiteSetting")
    Page = apps.get_model("heroes.Page")

    SiteSetting.objects.filter(
        setting_key__in=[key for key, category, description in INITIAL_SETTINGS],
        setting_value="",
    ).delete()
    Page.objects.filter(
        slug__in=[slug for title, slug in INITIAL_PAGES], content=""
    ).delete()


class Migration(migrations.Migration):

    dependencies = [
        ("heroes", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(initial_data, remove_initial_data),
    ]
