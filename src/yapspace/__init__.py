# -*- coding: utf-8 -*-
import logging

try:  # Python >= 3.8
    from importlib.metadata import PackageNotFoundError, version
except ModuleNotFoundError:  # pragma: no cover - for Python < 3.8
    from importlib_metadata import PackageNotFoundError, version

try:
    __version__ = version("yapspace")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "unknown"

# library code only emits records; applications configure handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())
