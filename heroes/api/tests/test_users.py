from django.urls import reverse

from heroes.users.models import AdminUser

from .test_endpoints import AdminAPITestCase


class TestUsersAPI(AdminAPITestCase):
    def setUp(self):
        self.user = self.login()
        self.editor = self.create_user("editor", permissions=["programs"])

    def test_listing_hides_passwords(self):
        content = self.get_content(self.get_response("heroesapi:users:listing"))

        self.assertEqual(content["meta"]["total_count"], 2)
        for item in content["items"]:
            self.assertNotIn("password", item)

    def test_create(self):
        response = self.send_json(
            "post",
            "heroesapi:users:listing",
            {
                "email": "New@Example.com",
                "password": "secret123",
                "role": "editor",
                "permissions": ["partners", "programs", "partners"],
            },
        )

        self.assertEqual(response.status_code, 201)
        user = AdminUser.objects.get(email="new@example.com")
        self.assertTrue(user.check_password("secret123"))
        self.assertEqual(user.permissions, ["programs", "partners"])

    def test_create_with_list_body(self):
        response = self.send_json(
            "post",
            "heroesapi:users:listing",
            [{"email": "new@example.com", "password": "secret123"}],
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            self.get_content(response), {"message": "Expected a JSON object"}
        )
        self.assertFalse(AdminUser.objects.filter(email="new@example.com").exists())

    def test_update_with_list_body(self):
        response = self.send_json(
            "put", "heroesapi:users:detail", ["editor@example.com"], self.editor.pk
        )
        self.assertEqual(response.status_code, 400)

    def test_create_super_admin_gets_wildcard(self):
        self.send_json(
            "post",
            "heroesapi:users:listing",
            {"email": "boss@example.com", "password": "secret123", "role": "super_admin"},
        )
        self.assertEqual(
            AdminUser.objects.get(email="boss@example.com").permissions, ["all"]
        )

    def test_create_requires_password(self):
        response = self.send_json(
            "post", "heroesapi:users:listing", {"email": "new@example.com"}
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            self.get_content(response), {"message": "Email and password are required"}
        )

    def test_create_duplicate_email(self):
        response = self.send_json(
            "post",
            "heroesapi:users:listing",
            {"email": "EDITOR@example.com", "password": "secret123"},
        )

        self.assertEqual(response.status_code, 409)
        self.assertEqual(AdminUser.objects.filter(email="editor@example.com").count(), 1)

    def test_create_unknown_permission(self):
        response = self.send_json(
            "post",
            "heroesapi:users:listing",
            {"email": "new@example.com", "password": "secret123", "permissions": ["fly"]},
        )
        self.assertEqual(response.status_code, 400)

    def test_update_keeps_password_when_blank(self):
        response = self.send_json(
            "patch",
            "heroesapi:users:detail",
            {"password": "", "permissions": ["team_members"]},
            self.editor.pk,
        )

        self.assertEqual(response.status_code, 200)
        self.editor.refresh_from_db()
        self.assertTrue(self.editor.check_password("password"))
        self.assertEqual(self.editor.permissions, ["team_members"])

    def test_update_password(self):
        self.send_json(
            "patch", "heroesapi:users:detail", {"password": "changed"}, self.editor.pk
        )
        self.editor.refresh_from_db()
        self.assertTrue(self.editor.check_password("changed"))

    def test_update_email_conflict(self):
        response = self.send_json(
            "patch",
            "heroesapi:users:detail",
            {"email": "test@email.com"},
            self.editor.pk,
        )
        self.assertEqual(response.status_code, 409)

    def test_update_own_email(self):
        response = self.send_json(
            "patch",
            "heroesapi:users:detail",
            {"email": "editor@example.com", "role": "admin"},
            self.editor.pk,
        )
        self.assertEqual(response.status_code, 200)

    def test_delete(self):
        response = self.client.delete(
            reverse("heroesapi:users:detail", args=(self.editor.pk,))
        )

        self.assertEqual(response.status_code, 200)
        self.assertFalse(AdminUser.objects.filter(pk=self.editor.pk).exists())

    def test_cannot_delete_self(self):
        response = self.client.delete(
            reverse("heroesapi:users:detail", args=(self.user.pk,))
        )

        self.assertEqual(response.status_code, 400)
        self.assertTrue(AdminUser.objects.filter(pk=self.user.pk).exists())

    def test_requires_user_management_permission(self):
        self.login(self.editor)
        response = self.get_response("heroesapi:users:listing")
        self.assertEqual(response.status_code, 403)
