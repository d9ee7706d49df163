from heroes.models import ContentSection, ImpactStat, Partner

from .test_endpoints import AdminAPITestCase


class TestOrderableCreate(AdminAPITestCase):
    def setUp(self):
        self.login()
        self.first = ImpactStat.objects.create(title="Children", value="100", sort_order=10)
        self.second = ImpactStat.objects.create(title="Schools", value="12", sort_order=20)
        self.third = ImpactStat.objects.create(title="Villages", value="4", sort_order=30)

    def create(self, **data):
        data.setdefault("title", "Wells")
        data.setdefault("value", "8")
        return self.send_json("post", "heroesapi:impact-stats:listing", data)

    def test_listing_in_display_order(self):
        self.first.move_to("end")

        content = self.get_content(self.get_response("heroesapi:impact-stats:listing"))

        self.assertEqual(
            [item["title"] for item in content["items"]],
            ["Schools", "Villages", "Children"],
        )
        self.assertNotIn("placement", content["items"][0])

    def test_create_at_end_by_default(self):
        response = self.create()

        self.assertEqual(response.status_code, 201)
        self.assertEqual(self.get_content(response)["sort_order"], 31)

    def test_create_with_explicit_sort_order(self):
        response = self.create(sort_order=3)
        self.assertEqual(self.get_content(response)["sort_order"], 3)

    def test_create_after(self):
        response = self.create(placement="after_%d" % self.second.pk)

        self.assertEqual(response.status_code, 201)
        self.assertEqual(ImpactStat.objects.get(title="Wells").sort_order, 25)
        # siblings are left alone
        self.assertEqual(
            list(
                ImpactStat.objects.exclude(title="Wells").values_list(
                    "sort_order", flat=True
                )
            ),
            [10, 20, 30],
        )

    def test_create_before(self):
        self.create(placement="before_%d" % self.second.pk)
        self.assertEqual(ImpactStat.objects.get(title="Wells").sort_order, 15)

    def test_create_at_start(self):
        self.create(placement="start")
        self.assertEqual(ImpactStat.objects.get(title="Wells").sort_order, 9)

    def test_placement_wins_over_sort_order(self):
        self.create(placement="end", sort_order=2)
        self.assertEqual(ImpactStat.objects.get(title="Wells").sort_order, 31)

    def test_invalid_placement(self):
        response = self.create(placement="middle")

        self.assertEqual(response.status_code, 400)
        self.assertIn("placement", self.get_content(response)["errors"])
        self.assertFalse(ImpactStat.objects.filter(title="Wells").exists())

    def test_missing_anchor(self):
        response = self.create(placement="after_9999")

        self.assertEqual(response.status_code, 409)
        self.assertEqual(
            self.get_content(response)["message"],
            "No sibling with id 9999 to position against",
        )
        self.assertFalse(ImpactStat.objects.filter(title="Wells").exists())

    def test_update_with_placement(self):
        response = self.send_json(
            "patch",
            "heroesapi:impact-stats:detail",
            {"placement": "before_%d" % self.first.pk},
            self.third.pk,
        )

        self.assertEqual(response.status_code, 200)
        self.third.refresh_from_db()
        self.assertEqual(self.third.sort_order, 9)

    def test_update_without_placement_keeps_sort_order(self):
        self.send_json(
            "patch", "heroesapi:impact-stats:detail", {"value": "5"}, self.third.pk
        )

        self.third.refresh_from_db()
        self.assertEqual(self.third.value, "5")
        self.assertEqual(self.third.sort_order, 30)

    def test_update_cannot_anchor_to_itself(self):
        response = self.send_json(
            "patch",
            "heroesapi:impact-stats:detail",
            {"placement": "after_%d" % self.third.pk},
            self.third.pk,
        )
        self.assertEqual(response.status_code, 409)


class TestOrderableMove(AdminAPITestCase):
    def setUp(self):
        self.login()
        self.acme = Partner.objects.create(
            name="Acme", logo_url="https://example.com/acme.png", sort_order=10
        )
        self.globex = Partner.objects.create(
            name="Globex", logo_url="https://example.com/globex.png", sort_order=20
        )
        self.initech = Partner.objects.create(
            name="Initech", logo_url="https://example.com/initech.png", sort_order=21
        )

    def move(self, instance, placement):
        return self.send_json(
            "post",
            "heroesapi:partners:move",
            {"placement": placement},
            instance.pk,
        )

    def test_move(self):
        response = self.move(self.initech, "before_%d" % self.globex.pk)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.get_content(response)["sort_order"], 15)
        self.assertEqual(
            list(Partner.objects.values_list("name", flat=True)),
            ["Acme", "Initech", "Globex"],
        )

    def test_move_with_list_body(self):
        response = self.send_json(
            "post",
            "heroesapi:partners:move",
            ["after_%d" % self.globex.pk],
            self.acme.pk,
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            self.get_content(response), {"message": "Expected a JSON object"}
        )
        self.acme.refresh_from_db()
        self.assertEqual(self.acme.sort_order, 10)

    def test_move_into_exhausted_gap(self):
        response = self.move(self.acme, "after_%d" % self.globex.pk)

        self.assertEqual(response.status_code, 200)
        # the gap between 20 and 21 is used up, so the new key collides
        self.assertEqual(self.get_content(response)["sort_order"], 21)

    def test_move_missing_placement(self):
        response = self.send_json("post", "heroesapi:partners:move", {}, self.acme.pk)

        self.assertEqual(response.status_code, 400)
        self.assertEqual(self.get_content(response), {"message": "placement is required"})

    def test_move_invalid_placement(self):
        response = self.move(self.acme, "sideways")
        self.assertEqual(response.status_code, 400)

    def test_move_missing_anchor(self):
        response = self.move(self.acme, "after_9999")

        self.assertEqual(response.status_code, 409)
        self.acme.refresh_from_db()
        self.assertEqual(self.acme.sort_order, 10)

    def test_move_not_found(self):
        response = self.send_json(
            "post", "heroesapi:partners:move", {"placement": "end"}, 9999
        )
        self.assertEqual(response.status_code, 404)

    def test_move_requires_permission(self):
        self.login(self.create_user("editor", permissions=["impact_stats"]))

        response = self.move(self.acme, "end")

        self.assertEqual(response.status_code, 403)

    def test_positions(self):
        response = self.get_response(
            "heroesapi:partners:positions", exclude=self.globex.pk
        )

        self.assertEqual(response.status_code, 200)
        content = self.get_content(response)
        self.assertEqual(
            content["items"],
            [
                {"id": self.acme.pk, "sort_order": 10, "label": "Acme"},
                {"id": self.initech.pk, "sort_order": 21, "label": "Initech"},
            ],
        )
        self.assertEqual(
            [choice["value"] for choice in content["choices"]],
            [
                "start",
                "after_%d" % self.acme.pk,
                "before_%d" % self.initech.pk,
                "after_%d" % self.initech.pk,
                "end",
            ],
        )
        self.assertEqual(content["choices"][0]["label"], "Place at the beginning")

    def test_positions_invalid_exclude(self):
        response = self.get_response("heroesapi:partners:positions", exclude="abc")
        self.assertEqual(response.status_code, 400)


class TestContentSectionOrdering(AdminAPITestCase):
    def setUp(self):
        self.login()
        self.home_intro = ContentSection.objects.create(
            page_key="home", title="Intro", sort_order=10
        )
        self.about_story = ContentSection.objects.create(
            page_key="about", title="Story", sort_order=10
        )

    def test_create_is_placed_within_page(self):
        response = self.send_json(
            "post",
            "heroesapi:content-sections:listing",
            {"page_key": "about", "title": "Team", "placement": "end"},
        )

        self.assertEqual(response.status_code, 201)
        content = self.get_content(response)
        self.assertEqual(content["sort_order"], 11)
        self.assertEqual(content["section_key"], "about_team")

    def test_create_with_existing_title(self):
        response = self.send_json(
            "post",
            "heroesapi:content-sections:listing",
            {"page_key": "home", "title": "Intro"},
        )

        self.assertEqual(response.status_code, 201)
        self.assertEqual(self.get_content(response)["section_key"], "home_intro_2")

    def test_anchor_on_other_page(self):
        response = self.send_json(
            "post",
            "heroesapi:content-sections:listing",
            {
                "page_key": "about",
                "title": "Team",
                "placement": "after_%d" % self.home_intro.pk,
            },
        )
        self.assertEqual(response.status_code, 409)

    def test_change_page_with_placement(self):
        response = self.send_json(
            "patch",
            "heroesapi:content-sections:detail",
            {"page_key": "home", "placement": "before_%d" % self.home_intro.pk},
            self.about_story.pk,
        )

        self.assertEqual(response.status_code, 200)
        self.about_story.refresh_from_db()
        self.assertEqual(self.about_story.page_key, "home")
        self.assertEqual(self.about_story.sort_order, 9)

    def test_positions_require_page(self):
        response = self.get_response("heroesapi:content-sections:positions")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(self.get_content(response), {"message": "page_key is required"})

    def test_positions_for_page(self):
        content = self.get_content(
            self.get_response("heroesapi:content-sections:positions", page_key="home")
        )
        self.assertEqual([item["id"] for item in content["items"]], [self.home_intro.pk])

    def test_filter_by_page(self):
        content = self.get_content(
            self.get_response("heroesapi:content-sections:listing", page_key="about")
        )
        self.assertEqual([item["id"] for item in content["items"]], [self.about_story.pk])
