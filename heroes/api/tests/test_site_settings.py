from heroes.models import SiteSetting

from .test_endpoints import AdminAPITestCase


class TestSiteSettingsAPI(AdminAPITestCase):
    def setUp(self):
        self.login()

    def test_listing(self):
        response = self.get_response("heroesapi:site-settings:listing")

        self.assertEqual(response.status_code, 200)
        content = self.get_content(response)
        self.assertEqual(content["meta"]["total_count"], 14)
        self.assertEqual(len(content["items"]), 14)

    def test_listing_by_category(self):
        content = self.get_content(
            self.get_response("heroesapi:site-settings:listing", category="payment")
        )
        self.assertEqual(
            sorted(item["setting_key"] for item in content["items"]),
            ["account_name", "account_number", "bank_name"],
        )

    def test_detail(self):
        response = self.get_response("heroesapi:site-settings:detail", "bank_name")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.get_content(response)["category"], "payment")

    def test_detail_not_found(self):
        response = self.get_response("heroesapi:site-settings:detail", "nothing")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(
            self.get_content(response), {"message": "Setting 'nothing' not found"}
        )

    def test_update(self):
        response = self.send_json(
            "put",
            "heroesapi:site-settings:detail",
            {"setting_value": "+234 800"},
            "contact_phone",
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            SiteSetting.objects.get(setting_key="contact_phone").setting_value,
            "+234 800",
        )

    def test_update_requires_value(self):
        response = self.send_json(
            "put", "heroesapi:site-settings:detail", {}, "contact_phone"
        )
        self.assertEqual(response.status_code, 400)

    def test_update_with_list_body(self):
        response = self.send_json(
            "put", "heroesapi:site-settings:detail", ["setting_value"], "contact_phone"
        )
        self.assertEqual(response.status_code, 400)

    def test_bulk_update(self):
        response = self.send_json(
            "post",
            "heroesapi:site-settings:listing",
            [
                {"setting_key": "bank_name", "setting_value": "First Bank"},
                {"setting_key": "account_name", "setting_value": None},
                {"setting_key": "tiktok_url", "setting_value": "https://tiktok.com/@x"},
            ],
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.get_content(response), {"success": True, "updated": 3})
        values = SiteSetting.objects.as_dict()
        self.assertEqual(values["bank_name"], "First Bank")
        self.assertEqual(values["account_name"], "")
        self.assertEqual(values["tiktok_url"], "https://tiktok.com/@x")

    def test_bulk_update_expects_list(self):
        response = self.send_json(
            "post",
            "heroesapi:site-settings:listing",
            {"setting_key": "bank_name", "setting_value": "First Bank"},
        )
        self.assertEqual(response.status_code, 400)

    def test_requires_permission(self):
        self.login(self.create_user("editor", permissions=["programs"]))
        response = self.get_response("heroesapi:site-settings:listing")
        self.assertEqual(response.status_code, 403)
