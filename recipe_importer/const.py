"""Constants for the recipe importer."""

# Configuration keys (environment variables)
CONF_TIMEOUT = "RECIPE_IMPORT_TIMEOUT"
CONF_MAX_RETRIES = "RECIPE_IMPORT_MAX_RETRIES"
CONF_BACKOFF = "RECIPE_IMPORT_BACKOFF"
CONF_MAX_RESPONSE_SIZE = "RECIPE_IMPORT_MAX_RESPONSE_SIZE"
CONF_USER_AGENT = "RECIPE_IMPORT_USER_AGENT"
CONF_REQUIRE_INGREDIENTS = "RECIPE_IMPORT_REQUIRE_INGREDIENTS"
CONF_REQUIRE_INSTRUCTIONS = "RECIPE_IMPORT_REQUIRE_INSTRUCTIONS"

# Default values
DEFAULT_TIMEOUT = 10
DEFAULT_MAX_RETRIES = 3
DEFAULT_BACKOFF = 1.0
DEFAULT_MAX_RESPONSE_SIZE = 5 * 1024 * 1024
DEFAULT_MAX_REDIRECTS = 10
DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; KidChef Recipe Bot/1.0)"
DEFAULT_ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"
DEFAULT_SERVINGS = 4

# Extraction methods
METHOD_JSONLD = "json-ld"
METHOD_MICRODATA = "microdata"
METHOD_SELECTORS = "selectors"

# Event names passed to event callbacks
EVENT_PHASE_CHANGED = "phase_changed"
EVENT_METHOD_DETECTED = "method_detected"
EVENT_RETRY = "retry"

# Error codes
ERROR_INVALID_URL = "INVALID_URL"
ERROR_NO_RECIPE_FOUND = "NO_RECIPE_FOUND"
ERROR_MISSING_INGREDIENTS = "MISSING_INGREDIENTS"
ERROR_MISSING_INSTRUCTIONS = "MISSING_INSTRUCTIONS"
ERROR_PAGE_NOT_FOUND = "PAGE_NOT_FOUND"
ERROR_TIMEOUT = "TIMEOUT"
ERROR_NETWORK = "NETWORK_ERROR"
ERROR_CANCELLED = "CANCELLED"
ERROR_CONFIG = "CONFIG_ERROR"

# User-facing suggestions keyed by error code
ERROR_SUGGESTIONS = {
    ERROR_INVALID_URL: "Check the link and make sure it starts with http:// or https://",
    ERROR_NO_RECIPE_FOUND: "Try a different recipe page or enter the recipe manually",
    ERROR_MISSING_INGREDIENTS: "Enter the ingredients manually or try a different recipe page",
    ERROR_MISSING_INSTRUCTIONS: "Enter the steps manually or try a different recipe page",
    ERROR_PAGE_NOT_FOUND: "The page may have moved. Check the link or try a different recipe page",
    ERROR_TIMEOUT: "The website took too long to respond. Please try again",
    ERROR_NETWORK: "Check your connection and the link, then try again",
    ERROR_CANCELLED: "The import was cancelled",
}

# Service data keys
DATA_URL = "url"
DATA_TIMEOUT = "timeout"
DATA_RECIPE = "recipe"
DATA_ERROR = "error"
DATA_EXTRACTION_METHOD = "extractionMethod"
