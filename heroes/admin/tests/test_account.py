from django.test import TestCase
from django.urls import reverse

from heroes.test.utils import HeroesTestUtils


class TestAdminAccess(HeroesTestUtils, TestCase):
    def test_anonymous_is_sent_to_login(self):
        response = self.client.get(reverse("programs:index"))

        self.assertRedirects(
            response,
            reverse("heroesadmin_login") + "?next=" + reverse("programs:index"),
        )

    def test_anonymous_ajax_request_is_rejected(self):
        response = self.client.get(
            reverse("heroesadmin_home"), HTTP_X_REQUESTED_WITH="XMLHttpRequest"
        )
        self.assertEqual(response.status_code, 403)

    def test_login_page(self):
        response = self.client.get(reverse("heroesadmin_login"))

        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, "heroesadmin/login.html")
        soup = self.get_soup(response.content)
        self.assertIsNotNone(soup.select_one('form input[name="password"]'))

    def test_login(self):
        self.create_user("editor", permissions=["programs"])

        response = self.client.post(
            reverse("heroesadmin_login"),
            {"username": "Editor@example.com", "password": "password"},
        )

        self.assertRedirects(response, reverse("heroesadmin_home"))
        self.assertEqual(self.client.get(reverse("heroesadmin_home")).status_code, 200)

    def test_login_redirects_to_next(self):
        self.create_user("editor", permissions=["programs"])

        response = self.client.post(
            reverse("heroesadmin_login"),
            {
                "username": "editor@example.com",
                "password": "password",
                "next": reverse("programs:index"),
            },
        )

        self.assertRedirects(response, reverse("programs:index"))

    def test_login_failure(self):
        self.create_user("editor")

        response = self.client.post(
            reverse("heroesadmin_login"),
            {"username": "editor@example.com", "password": "wrong"},
        )

        self.assertEqual(response.status_code, 200)
        soup = self.get_soup(response.content)
        self.assertIsNotNone(soup.select_one(".error-message"))

    def test_logged_in_user_skips_login_page(self):
        self.login()
        response = self.client.get(reverse("heroesadmin_login"))
        self.assertRedirects(response, reverse("heroesadmin_home"))

    def test_inactive_user_is_turned_away(self):
        user = self.create_user("editor")
        self.login(user)
        user.is_active = False
        user.save()

        response = self.client.get(reverse("heroesadmin_home"))

        self.assertEqual(response.status_code, 302)
        self.assertTrue(response.url.startswith(reverse("heroesadmin_login")))

    def test_logout(self):
        self.login()

        response = self.client.post(reverse("heroesadmin_logout"))

        self.assertRedirects(response, reverse("heroesadmin_login"))
        response = self.client.get(reverse("heroesadmin_home"))
        self.assertEqual(response.status_code, 302)


class TestDashboardHome(HeroesTestUtils, TestCase):
    def get_section_keys(self):
        response = self.client.get(reverse("heroesadmin_home"))
        self.assertEqual(response.status_code, 200)
        return [section["key"] for section in response.context["sections"]]

    def test_super_admin_sees_every_section(self):
        self.login()

        keys = self.get_section_keys()

        self.assertIn("programs", keys)
        self.assertIn("site_settings", keys)
        self.assertIn("user_management", keys)
        self.assertEqual(len(keys), 14)

    def test_editor_sees_granted_sections(self):
        self.login(self.create_user("editor", permissions=["partners", "site_settings"]))

        self.assertEqual(self.get_section_keys(), ["partners", "site_settings"])

    def test_section_links(self):
        self.login(self.create_user("editor", permissions=["content_sections"]))

        response = self.client.get(reverse("heroesadmin_home"))

        soup = self.get_soup(response.content)
        link = soup.select_one(".dashboard-section--content_sections a")
        self.assertEqual(link["href"], reverse("content-sections:index"))

    def test_no_sections(self):
        self.login(self.create_user("editor"))
        self.assertEqual(self.get_section_keys(), [])
