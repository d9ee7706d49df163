import logging
import re
from urllib.parse import urlsplit

import requests
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from heroes import __version__

from .exceptions import ImageUploadError

logger = logging.getLogger("heroes.images")

TRANSFORMATION_RE = re.compile(r"^[a-z]{1,2}_[^,/]+(,[a-z]{1,2}_[^,/]+)*$")
VERSION_RE = re.compile(r"^v\d+$")

RESPONSIVE_WIDTHS = {
    "mobile": 480,
    "tablet": 768,
    "desktop": 1200,
    "large": 1920,
}


class CloudinaryBackend:
    """
    Builds delivery URLs for, and uploads images to, a Cloudinary account.

    Uploads are unsigned, so the account needs an unsigned upload preset;
    no API secret is ever handled by the site.
    """

    DELIVERY_HOST = "res.cloudinary.com"
    UPLOAD_ENDPOINT = "https://api.cloudinary.com/v1_1/{cloud_name}/image/upload"
    TIMEOUT = 30

    def __init__(self, params=None):
        if params is None:
            params = getattr(settings, "HEROES_CLOUDINARY", {})
        params = dict(params)
        self.cloud_name = params.pop("CLOUD_NAME", "") or ""
        self.upload_preset = params.pop("UPLOAD_PRESET", "") or ""
        self.default_folder = params.pop("FOLDER", None)

    @property
    def is_configured(self):
        return bool(self.cloud_name)

    def is_cloudinary_url(self, url):
        return urlsplit(url).netloc == self.DELIVERY_HOST

    def get_optimized_url(
        self,
        public_id,
        width=None,
        height=None,
        quality="auto",
        format="auto",
        crop="fill",
        gravity="center",
        blur=None,
        sharpen=False,
    ):
        """
        Return a delivery URL for ``public_id`` with the given transformations.

        ``public_id`` may also be a full URL; URLs hosted elsewhere are
        returned unchanged, as is everything when no cloud name is configured.
        """
        if not public_id:
            return public_id

        if not self.is_configured:
            logger.warning(
                "Cloudinary cloud name not configured, serving '%s' as-is", public_id
            )
            return public_id

        if "://" in public_id and not self.is_cloudinary_url(public_id):
            return public_id

        transformations = []

        if width or height:
            dimensions = []
            if width:
                dimensions.append("w_%d" % width)
            if height:
                dimensions.append("h_%d" % height)
            dimensions.append("c_%s" % crop)
            transformations.append(",".join(dimensions))

        transformations.append("q_%s" % quality)
        transformations.append("f_%s" % format)

        if crop == "fill" and gravity:
            transformations.append("g_%s" % gravity)

        if blur:
            transformations.append("e_blur:%d" % blur)
        if sharpen:
            transformations.append("e_sharpen")

        return "https://{host}/{cloud}/image/upload/{transformations}/{public_id}".format(
            host=self.DELIVERY_HOST,
            cloud=self.cloud_name,
            transformations=",".join(transformations),
            public_id=self.get_public_id(public_id),
        )

    def get_public_id(self, value):
        """
        Extract the public id from a Cloudinary delivery URL; other values are
        assumed to be public ids already.
        """
        if not self.is_cloudinary_url(value):
            return value

        path = urlsplit(value).path
        _, _, rest = path.partition("/image/upload/")
        segments = rest.split("/")

        # Drop any transformation and version segments that precede the id
        while len(segments) > 1 and (
            TRANSFORMATION_RE.match(segments[0]) or VERSION_RE.match(segments[0])
        ):
            segments = segments[1:]
        return "/".join(segments)

    def get_responsive_urls(self, public_id, **options):
        return {
            name: self.get_optimized_url(public_id, **dict(options, width=width))
            for name, width in RESPONSIVE_WIDTHS.items()
        }

    def get_thumbnail(self, public_id, size=150):
        return self.get_optimized_url(
            public_id, width=size, height=size, crop="fill", gravity="face"
        )

    def upload(self, file, folder=None):
        """
        Upload ``file`` (a file-like object with a ``name``) and return a dict
        with its ``public_id``, ``url`` and ``secure_url``.
        """
        if not self.is_configured or not self.upload_preset:
            raise ImproperlyConfigured(
                "The setting 'HEROES_CLOUDINARY' requires both 'CLOUD_NAME' and "
                "'UPLOAD_PRESET' to be specified for uploads."
            )

        data = {"upload_preset": self.upload_preset}
        folder = folder or self.default_folder
        if folder:
            data["folder"] = folder

        try:
            response = requests.post(
                self.UPLOAD_ENDPOINT.format(cloud_name=self.cloud_name),
                data=data,
                files={"file": (getattr(file, "name", "upload"), file)},
                headers={"User-Agent": "heroes-foundation/" + __version__},
                timeout=self.TIMEOUT,
            )
            response.raise_for_status()
        except requests.HTTPError as e:
            logger.error(
                "Couldn't upload '%s' to Cloudinary. HTTPError: %d %s",
                getattr(file, "name", "upload"),
                e.response.status_code,
                e.response.text,
            )
            raise ImageUploadError("The image service rejected the upload") from e
        except requests.RequestException as e:
            logger.error(
                "Couldn't upload '%s' to Cloudinary. RequestException: %s",
                getattr(file, "name", "upload"),
                e,
            )
            raise ImageUploadError("The image service could not be reached") from e
        try:
            result = response.json()
        except ValueError as e:
            logger.error("Couldn't upload to Cloudinary. Unexpected JSON parse error.")
            raise ImageUploadError(
                "The image service returned an invalid response"
            ) from e

        logger.info("Uploaded image '%s' to Cloudinary", result.get("public_id"))

        return {
            "public_id": result["public_id"],
            "url": result.get("url", ""),
            "secure_url": result.get("secure_url", ""),
            "width": result.get("width"),
            "height": result.get("height"),
        }


def get_image_backend():
    return CloudinaryBackend()
