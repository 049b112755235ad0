"""
Fixed offer constants.

Per-type behaviour that is not part of the mapping table lives here as
plain lookup tables: display names, required actions and currency lists.
"""

# =============================================================================
# SCHEMA.ORG
# =============================================================================

SCHEMA_CONTEXT = "https://schema.org"

# Offer URLs: {base_url}/products/{slug}
PRODUCT_PATH = "products"

# =============================================================================
# CURRENCIES
# =============================================================================

# Accepted on any monetary transaction
SUPPORTED_CURRENCIES = ("USD", "EUR", "GBP", "CAD", "AUD", "XMR", "BTC", "ETH")

# Required on cryptocurrency transactions
CRYPTO_CURRENCIES = ("XMR", "BTC", "ETH")

# =============================================================================
# NON-MONETARY ACTIONS
# =============================================================================

# Hint attached to non-monetary offers; anything not listed gets DEFAULT_ACTION
REQUIRED_ACTIONS = {
    "inquiry": "contact",
    "repository": "view-source",
    "documentation": "read-docs",
    "contribute-to-consume": "contribute",
}

DEFAULT_ACTION = "visit"

# =============================================================================
# DISPLAY NAMES
# =============================================================================

# Shown as the ActivityPub attachment name; unknown types show the raw type
TRANSACTION_DISPLAY_NAMES = {
    "inquiry": "Contact",
    "ebay": "eBay",
    "etsy": "Etsy",
    "amazon": "Amazon",
    "snail-mail": "Mail Order",
    "monero": "Monero",
    "stripe": "Credit Card",
    "polar": "Polar Subscription",
    "talar": "GNU Taler",
    "repository": "Source Code",
    "documentation": "Documentation",
    "booking": "Book Appointment",
    "liberapay": "Liberapay",
    "kofi": "Ko-fi",
    "contribute-to-consume": "Contribute to Access",
}
