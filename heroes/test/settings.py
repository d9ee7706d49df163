import os

DEBUG = False
HEROES_ROOT = os.path.dirname(os.path.dirname(__file__))
STATIC_ROOT = os.path.join(HEROES_ROOT, "tests", "test-static")
STATIC_URL = "/static/"

TIME_ZONE = "Asia/Tokyo"

DATABASES = {
    "default": {
        "ENGINE": os.environ.get("DATABASE_ENGINE", "django.db.backends.sqlite3"),
        "NAME": os.environ.get("DATABASE_NAME", ":memory:"),
        "USER": os.environ.get("DATABASE_USER", ""),
        "PASSWORD": os.environ.get("DATABASE_PASSWORD", ""),
        "HOST": os.environ.get("DATABASE_HOST", ""),
        "PORT": os.environ.get("DATABASE_PORT", ""),
        "TEST": {"NAME": os.environ.get("DATABASE_NAME", "")},
    }
}

# Set regular database name when a non-SQLite db is used
if DATABASES["default"]["ENGINE"] != "django.db.backends.sqlite3":
    DATABASES["default"]["NAME"] = os.environ.get("DATABASE_NAME", "heroes")

SECRET_KEY = "not needed"

ROOT_URLCONF = "heroes.urls"

USE_TZ = True
LANGUAGE_CODE = "en"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
                "heroes.context_processors.site_settings",
            ],
            "debug": True,  # required in order to catch template errors
        },
    },
]

MIDDLEWARE = (
    "django.middleware.common.CommonMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
)

INSTALLED_APPS = [
    "heroes",
    "heroes.users",
    "heroes.admin",
    "heroes.site",
    "rest_framework",
    "django_filters",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
]

AUTH_USER_MODEL = "heroesusers.AdminUser"
LOGIN_URL = "heroesadmin_login"

PASSWORD_HASHERS = (
    "django.contrib.auth.hashers.MD5PasswordHasher",  # don't use the intentionally slow default password hasher
)

ALLOWED_HOSTS = ["localhost", "testserver"]

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "null": {"class": "logging.NullHandler"},
        "console": {"class": "logging.StreamHandler"},
    },
    "loggers": {
        "heroes": {
            "handlers": ["console" if os.environ.get("HEROES_TEST_LOGS") else "null"],
            "level": "DEBUG",
            "propagate": False,
        },
    },
}

HEROES_SITE_NAME = "Test Site"

HEROES_CLOUDINARY = {
    "CLOUD_NAME": "test-cloud",
    "UPLOAD_PRESET": "test-preset",
}

HEROES_API_LIMIT_MAX = 20
HEROES_BLOG_PAGE_SIZE = 2
HEROES_SORT_ORDER_STEP = 10
