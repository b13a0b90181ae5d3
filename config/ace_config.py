"""Configuration constants for the Ace Hardware store locator

The store locator serves one JSON document per store, addressed by a
zero-padded five digit store number. The same padding is used for the
store's landing page on the retailer site, which stands in for stores
that do not publish their own website.
"""

from pathlib import Path

# Base host (overridable through Settings / ACE_HOST)
DEFAULT_HOST = "www.acehardware.com"

# Store data endpoint; storeID is zero-padded to 5 digits
REQUEST_URL_TEMPLATE = (
    "http://{host}/storeLocServ?heavy=true&token=ACE&operation=storeData&storeID={store_number:05d}"
)

# Landing page used when a store has no storeInfoURL
LANDING_PAGE_URL_TEMPLATE = "http://{host}/mystore/index.jsp?store={store_number:05d}"

# Default mapping configuration shipped next to this module
DEFAULT_MAPPINGS_PATH = Path(__file__).parent / "ace_mappings.yaml"

# Weekday suffixes used by the hours object, in calendar order
# Format: (suffix, full name) -> openingTime<suffix> / closingTime<suffix>
WEEKDAYS = [
    ("Mon", "Monday"),
    ("Tue", "Tuesday"),
    ("Wed", "Wednesday"),
    ("Thu", "Thursday"),
    ("Fri", "Friday"),
    ("Sat", "Saturday"),
    ("Sun", "Sunday"),
]

OPENING_TIME_PREFIX = "openingTime"
CLOSING_TIME_PREFIX = "closingTime"

# Feature list fields per category: (standard field, custom field)
FEATURE_FIELDS = {
    "departments": ("departments", "customDepartments"),
    "services": ("standardServices", "customServices"),
    "brands": ("specialtyBrands", "customSpecialtyBrand"),
}

# Description attribute carried by every feature object
FEATURE_DESCRIPTION_FIELD = "featureLongDesc"

# Address lines are address1, address2, ...
ADDRESS_FIELD_PREFIX = "address"


def build_request_url(store_number: int, host: str = DEFAULT_HOST) -> str:
    """Build the store locator URL for a store.

    Args:
        store_number: Positive store number (e.g., 5784).
        host: Store locator host.

    Returns:
        Full request URL, e.g. ...&storeID=05784
    """
    return REQUEST_URL_TEMPLATE.format(host=host, store_number=store_number)


def build_landing_page_url(store_number: int, host: str = DEFAULT_HOST) -> str:
    """Build the retailer-hosted landing page URL for a store.

    Args:
        store_number: Positive store number (e.g., 5784).
        host: Retailer site host.

    Returns:
        Full landing page URL, e.g. ...index.jsp?store=05784
    """
    return LANDING_PAGE_URL_TEMPLATE.format(host=host, store_number=store_number)
