"""Common literal values used across site_export.

These constants keep the document shell, the generated scripts, and the
Python helpers reading the same numbers, so the live preview and the static
export cannot drift apart. Intended for internal use within the site_export
package.

Examples
--------
>>> from site_export import _constants
>>> _constants.CART_STORAGE_KEY.format(site_id="abc")
'cart_abc'
>>> _constants.MS_PER_DAY // _constants.MS_PER_HOUR
24
"""

DEFAULT_PRIMARY_COLOR = "#27491F"
DEFAULT_SECONDARY_COLOR = "#F0CAE1"

INTER_FONT_URL = (
    "https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700&display=swap"
)
MATERIAL_ICONS_URL = "https://fonts.googleapis.com/icon?family=Material+Icons"

SECTION_SHADOW = "0 4px 6px -1px rgba(0, 0, 0, 0.1), 0 2px 4px -1px rgba(0, 0, 0, 0.06)"
ANIMATIONS = ("fadeIn", "slideUp", "slideDown", "slideLeft", "slideRight")

# Millisecond units shared by countdown scripts and ``split_remaining``.
MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR
URGENT_THRESHOLD_MS = MS_PER_HOUR
DEFAULT_COUNTDOWN_DAYS = 30

# Viewport breakpoints (px) used by carousels and the navbar.
MOBILE_BREAKPOINT = 640
TABLET_BREAKPOINT = 1024
GRID_COLLAPSE_BREAKPOINT = 768

CART_STORAGE_KEY = "cart_{site_id}"
FAVORITES_STORAGE_KEY = "favorites_{site_id}"
BADGE_OVERFLOW_LIMIT = 9

SITE_BASE_TEMPLATE = "/site/{site_id}"
