import re
from typing import Callable, Optional

MAX_SLUG_LENGTH = 120
# Width of the slug columns
SLUG_COLUMN_LENGTH = 255
# Room kept for the "-N" uniqueness suffix
SUFFIX_ROOM = 6


def slugify(text: str) -> str:
    """
    Generate a URL-safe slug from free text.

    Args:
        text: Display text (e.g., "Primary Button & Icon")

    Returns:
        Slug (e.g., "primary-button-icon"), or an empty string when the text
        has no alphanumeric characters
    """
    if not text:
        return ""

    # Convert to lowercase
    slug = text.strip().lower()

    # Replace spaces and special characters with hyphens
    slug = re.sub(r"[^a-z0-9]+", "-", slug)

    # Remove leading/trailing hyphens
    slug = slug.strip("-")

    return slug[:MAX_SLUG_LENGTH]


def generate_unique_slug(
    base: str,
    exists: Callable[[str], bool],
    fallback: str = "doc",
    prefix: Optional[str] = None,
    max_length: int = SLUG_COLUMN_LENGTH,
) -> str:
    """
    Generate a slug that is not taken yet.

    Args:
        base: Text to derive the slug from
        exists: Callback telling whether a slug is already in use
        fallback: Slug used when ``base`` yields nothing
        prefix: Optional parent slug, joined with "/" (variants live under
            their parent, e.g. "buttons/primary")
        max_length: Column width the result must fit, suffix included

    Returns:
        ``slug``, ``slug-2``, ``slug-3``... whichever is free first
    """
    slug = slugify(base) or fallback
    if prefix:
        slug = f"{prefix}/{slug}"

    # A long parent slug leaves little room: trim the joined slug, not just the tail
    slug = slug[: max_length - SUFFIX_ROOM].rstrip("-/") or fallback

    candidate = slug
    counter = 2
    while exists(candidate):
        candidate = f"{slug}-{counter}"
        counter += 1

    return candidate
