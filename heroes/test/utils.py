from bs4 import BeautifulSoup
from django.contrib.auth import get_user_model


class HeroesTestUtils:
    @staticmethod
    def get_soup(markup):
        # Use an empty string_containers argument so that <script>, <style>, and
        # <template> tags do not have their text ignored.
        return BeautifulSoup(markup, "html.parser", string_containers={})

    @staticmethod
    def create_test_user():
        return get_user_model().objects.create_superuser(
            email="test@email.com", password="password"
        )

    @staticmethod
    def create_user(username, email=None, password="password", **kwargs):
        kwargs["email"] = email or "%s@example.com" % username
        kwargs["password"] = password
        return get_user_model().objects.create_user(**kwargs)

    def login(self, user=None, email=None, password="password"):
        if email is None:
            if user is None:
                user = self.create_test_user()
            email = user.email

        self.assertTrue(self.client.login(email=email, password=password))

        return user
