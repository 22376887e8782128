from __future__ import annotations

import logging
from importlib.metadata import version

__version__ = version("lcoview")

logger = logging.getLogger("lcoview")

__all__ = ["__version__", "logger"]
