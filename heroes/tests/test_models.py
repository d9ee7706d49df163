from django.test import TestCase

from heroes.models import (
    BlogPost,
    ContentSection,
    HeroSlide,
    Page,
    Program,
    SiteSetting,
)


class TestSluggedContent(TestCase):
    def test_slug_generated_from_title(self):
        program = Program.objects.create(title="Girls' Education Fund")
        self.assertEqual(program.slug, "girls-education-fund")

    def test_slug_transliterated(self):
        post = BlogPost.objects.create(title="Ça va très bien")
        self.assertEqual(post.slug, "ca-va-tres-bien")

    def test_explicit_slug_kept(self):
        program = Program.objects.create(title="Clean Water", slug="water")
        self.assertEqual(program.slug, "water")

    def test_slug_made_unique(self):
        Program.objects.create(title="Clean Water")
        Program.objects.create(title="Clean Water Fund")

        second = Program.objects.create(title="Clean Water")
        third = Program.objects.create(title="Clean Water")

        self.assertEqual(second.slug, "clean-water-2")
        self.assertEqual(third.slug, "clean-water-3")

    def test_slug_unique_against_initial_pages(self):
        page = Page.objects.create(title="Donate")
        self.assertEqual(page.slug, "donate-2")

    def test_slug_for_title_without_letters(self):
        first = BlogPost.objects.create(title="???")
        second = BlogPost.objects.create(title="!!!")

        self.assertEqual(first.slug, "blogpost")
        self.assertEqual(second.slug, "blogpost-2")

    def test_published_queryset(self):
        Program.objects.create(title="Live", published=True)
        Program.objects.create(title="Draft")

        self.assertEqual(
            list(Program.objects.published().values_list("title", flat=True)),
            ["Live"],
        )

    def test_meta_title_fallback(self):
        program = Program(title="Clean Water")
        self.assertEqual(program.get_meta_title(), "Clean Water")
        program.meta_title = "Water for everyone"
        self.assertEqual(program.get_meta_title(), "Water for everyone")

    def test_absolute_urls(self):
        program = Program.objects.create(title="Clean Water")
        post = BlogPost.objects.create(title="Hello world")
        self.assertEqual(program.get_absolute_url(), "/programs/clean-water/")
        self.assertEqual(post.get_absolute_url(), "/blog/hello-world/")

    def test_initial_pages(self):
        self.assertEqual(
            sorted(Page.objects.published().values_list("slug", flat=True)),
            ["about", "contact", "donate", "volunteer"],
        )


class TestActiveQuerySet(TestCase):
    def test_active(self):
        HeroSlide.objects.create(title="On", image_url="https://example.com/a.jpg")
        HeroSlide.objects.create(
            title="Off", image_url="https://example.com/b.jpg", active=False
        )
        self.assertEqual(
            list(HeroSlide.objects.active().values_list("title", flat=True)), ["On"]
        )

    def test_section_key_made_unique(self):
        ContentSection.objects.create(page_key="home", title="Intro")
        section = ContentSection.objects.create(page_key="home", title="Intro")
        self.assertEqual(section.section_key, "home_intro_2")

    def test_explicit_section_key_kept(self):
        section = ContentSection.objects.create(
            page_key="home", title="Intro", section_key="hero_intro"
        )
        self.assertEqual(section.section_key, "hero_intro")


class TestSiteSetting(TestCase):
    def test_initial_settings(self):
        self.assertEqual(SiteSetting.objects.count(), 14)
        self.assertEqual(
            SiteSetting.objects.get(setting_key="bank_name").category, "payment"
        )

    def test_as_dict(self):
        SiteSetting.objects.filter(setting_key="contact_email").update(
            setting_value="hello@example.com"
        )
        values = SiteSetting.objects.as_dict()

        self.assertEqual(values["contact_email"], "hello@example.com")
        self.assertEqual(values["contact_phone"], "")

    def test_update_many(self):
        SiteSetting.update_many(
            {"contact_phone": "+123", "newsletter_url": "https://example.com"}
        )

        self.assertEqual(
            SiteSetting.objects.get(setting_key="contact_phone").setting_value, "+123"
        )
        created = SiteSetting.objects.get(setting_key="newsletter_url")
        self.assertEqual(created.category, "general")
        self.assertEqual(created.setting_value, "https://example.com")

    def test_update_many_with_none(self):
        SiteSetting.update_many({"contact_phone": None})
        self.assertEqual(
            SiteSetting.objects.get(setting_key="contact_phone").setting_value, ""
        )
