# major.minor.patch
VERSION = (1, 2, 0)

__version__ = ".".join(str(part) for part in VERSION)
