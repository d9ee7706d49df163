from setuptools import find_packages, setup

from heroes import __version__

install_requires = [
    "Django>=4.2,<6.0",
    "djangorestframework>=3.15.1,<4.0",
    "django-filter>=23.3,<26",
    "requests>=2.11.1,<3.0",
    "anyascii>=0.1.5",
]

testing_extras = [
    # Required for running the tests
    "beautifulsoup4>=4.8,<5",
    "freezegun>=0.3.8",
    "pytest>=7.0",
    "pytest-django>=4.5",
]

setup(
    name="heroes-foundation",
    version=__version__,
    description="Website, dashboard and admin API for the Heroes Foundation",
    packages=find_packages(exclude=["*.tests", "*.tests.*"]),
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=install_requires,
    extras_require={"testing": testing_extras},
)
