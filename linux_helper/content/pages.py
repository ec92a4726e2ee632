"""
linux_helper/content/pages.py
Canonical page registry.
"""

from typing import Final

from linux_helper.engine.page import PageExtra, PageSpec
from linux_helper.exceptions.config import UnknownPageError
from linux_helper.models.disclosure import DisclosurePolicy

from .checklist import CHECKLIST, QUICK_REFERENCE, SAFETY_TIPS
from .errors import ERRORS, GENERAL_TIPS
from .installation import INSTALLATION
from .terminal import TERMINAL

HOME: Final[str] = "home"
INSTALLATION_PAGE: Final[str] = "installation"
TERMINAL_PAGE: Final[str] = "terminal"
ERRORS_PAGE: Final[str] = "errors"
TROUBLESHOOTING_PAGE: Final[str] = "troubleshooting"

PAGES: Final[dict[str, PageSpec]] = {
    HOME: PageSpec(
        slug=HOME,
        title="Linux Helper",
        blurb="Practical guides for installing, using and fixing Linux systems.",
    ),
    INSTALLATION_PAGE: PageSpec(
        slug=INSTALLATION_PAGE,
        title="Linux Installation Guide",
        blurb="Step-by-step instructions for installing Linux and essential developer tools.",
        store=INSTALLATION,
        policy=DisclosurePolicy.SINGLE_OPEN,
        open_first=True,
        searchable=True,
        noun="section",
    ),
    TERMINAL_PAGE: PageSpec(
        slug=TERMINAL_PAGE,
        title="Terminal & Shell Basics",
        blurb="Shells, navigation, files, permissions, pipelines and shell safety.",
        store=TERMINAL,
        policy=DisclosurePolicy.SINGLE_OPEN,
        open_first=True,
        searchable=True,
        noun="section",
    ),
    ERRORS_PAGE: PageSpec(
        slug=ERRORS_PAGE,
        title="Common Linux Errors Reference",
        blurb="Searchable lookup for common Linux errors with explanations and solutions.",
        store=ERRORS,
        policy=DisclosurePolicy.SINGLE_OPEN,
        open_first=True,
        searchable=True,
        noun="error",
        extras=(PageExtra("General Troubleshooting Tips", GENERAL_TIPS),),
    ),
    TROUBLESHOOTING_PAGE: PageSpec(
        slug=TROUBLESHOOTING_PAGE,
        title="Troubleshooting Checklist",
        blurb="Safe, structured steps to diagnose and resolve Linux problems without "
        "destructive commands.",
        store=CHECKLIST,
        policy=DisclosurePolicy.INDEPENDENT_TOGGLE,
        noun="step",
        extras=(
            PageExtra(
                "Quick Reference: Common Issue Patterns", QUICK_REFERENCE, numbered=True
            ),
            PageExtra("Safety Tips", SAFETY_TIPS),
        ),
    ),
}

PAGE_SLUGS: Final[tuple[str, ...]] = tuple(PAGES)

# Pages reachable from the home screen, in reading order.
GUIDE_SLUGS: Final[tuple[str, ...]] = (
    INSTALLATION_PAGE,
    TERMINAL_PAGE,
    ERRORS_PAGE,
    TROUBLESHOOTING_PAGE,
)


def get_page(slug: str) -> PageSpec:
    """Return the page for ``slug`` or raise UnknownPageError."""
    try:
        return PAGES[slug]
    except KeyError as e:
        raise UnknownPageError(slug) from e
