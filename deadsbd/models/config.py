"""
Pydantic model for application configuration.
Provides validation for the archive endpoints and download settings.
"""

from pydantic import BaseModel, ConfigDict, field_validator

ARCHIVE_BASE = "https://archive.org"

# Soundboard-only collection listing, oldest first.
LISTING_URL_TEMPLATE = (
    ARCHIVE_BASE
    + "/details/GratefulDead?and[]=subject%3A%22Soundboard%22&sort=date&page={page}"
)

# Soundboard-only search, most downloaded first.
SEARCH_URL_TEMPLATE = (
    ARCHIVE_BASE
    + "/details/GratefulDead?and[]=subject%3A%22Soundboard%22&sort=-downloads"
    "&query={query}"
)

# Number of listing pages in the soundboard collection.
DEFAULT_PAGE_COUNT = 174

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:121.0) Gecko/20100101 Firefox/121.0"
)


class ArchiveConfig(BaseModel):
    """A validated configuration model for the application."""

    model_config = ConfigDict(validate_assignment=True, str_strip_whitespace=True)

    # Archive endpoints
    base_url: str = ARCHIVE_BASE
    listing_url_template: str = LISTING_URL_TEMPLATE
    search_url_template: str = SEARCH_URL_TEMPLATE
    page_count: int = DEFAULT_PAGE_COUNT

    # Download settings
    media_extension: str = "ogg"
    output_dir: str = "."

    # HTTP settings
    request_timeout: float = 60.0
    connect_timeout: float = 15.0
    user_agent: str = DEFAULT_USER_AGENT

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Ensures the base URL is absolute and has no trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Base URL must start with http:// or https://: {v}")
        return v.rstrip("/")

    @field_validator("listing_url_template")
    @classmethod
    def validate_listing_template(cls, v: str) -> str:
        if "{page}" not in v:
            raise ValueError("Listing URL template must contain {page}.")
        return v

    @field_validator("search_url_template")
    @classmethod
    def validate_search_template(cls, v: str) -> str:
        if "{query}" not in v:
            raise ValueError("Search URL template must contain {query}.")
        return v

    @field_validator("page_count")
    @classmethod
    def validate_page_count(cls, v: int) -> int:
        """Ensures a reasonable number of listing pages."""
        if v < 1 or v > 1000:
            raise ValueError("Page count must be between 1 and 1000.")
        return v

    @field_validator("media_extension")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        """Normalizes the audio extension to its bare form ('ogg', not '.ogg')."""
        v = v.lstrip(".")
        if not v:
            raise ValueError("Media extension cannot be empty.")
        return v.lower()

    @field_validator("output_dir")
    @classmethod
    def validate_output_dir(cls, v: str) -> str:
        if not v:
            raise ValueError("Output directory cannot be empty.")
        return v

    @field_validator("request_timeout", "connect_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Timeouts must be positive.")
        return v

    @classmethod
    def get_ini_keys(cls) -> set[str]:
        """Returns a set of all keys that are expected in the INI file."""
        return set(cls.model_fields)
