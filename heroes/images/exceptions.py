class ImageUploadError(Exception):
    """
    Raised when the image CDN rejects an upload or cannot be reached.
    """

    pass
