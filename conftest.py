import django

from heroes.test import environment


def pytest_addoption(parser):
    environment.add_arguments(parser.addoption)


def pytest_configure(config):
    environment.prepare(
        deprecation=config.getoption("deprecation"),
        postgres=config.getoption("postgres"),
        show_logs=config.getoption("show_logs"),
    )
    django.setup()

    # The test client sends Accept-Language based on the active language
    from django.utils import translation

    translation.activate("en")


def pytest_unconfigure(config):
    environment.cleanup()
