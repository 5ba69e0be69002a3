"""Common literal values used across folio_pages.

These constants keep route paths, thresholds, and client hook names
centralized so templates, builders, the client script, and tests share the
same values. Intended for internal use within the folio_pages package.

Examples
--------
>>> from folio_pages import _constants
>>> _constants.BLOG_PATH
'/blog'
>>> _constants.SECTION_VISIBILITY_THRESHOLD
0.35
"""

ROOT_PATH = "/"
BLOG_PATH = "/blog"

SECTION_VISIBILITY_THRESHOLD = 0.35
NAV_SCROLL_THRESHOLD_PX = 20

THEME_DARK_CLASS = "dark"
THEME_ATTRIBUTE = "data-theme"

CLIENT_CONFIG_ELEMENT_ID = "folio-config"
STATIC_DIRNAME = "static"
