"""Static content catalogue."""

from .checklist import CHECKLIST, QUICK_REFERENCE, SAFETY_TIPS
from .errors import ERRORS, GENERAL_TIPS
from .installation import INSTALLATION
from .pages import GUIDE_SLUGS, PAGE_SLUGS, PAGES, get_page
from .terminal import TERMINAL

__all__ = [
    "CHECKLIST",
    "ERRORS",
    "GENERAL_TIPS",
    "GUIDE_SLUGS",
    "INSTALLATION",
    "PAGES",
    "PAGE_SLUGS",
    "QUICK_REFERENCE",
    "SAFETY_TIPS",
    "TERMINAL",
    "get_page",
]
