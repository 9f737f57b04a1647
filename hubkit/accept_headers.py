"""Media types sent in the Accept header for preview API features."""

# Repository invitations were served under this preview when the
# invitations endpoints were introduced.
INVITATIONS_API_PREVIEW = "application/vnd.github.swamp-thing-preview+json"

DEFAULT_MEDIA_TYPE = "application/vnd.github+json"

__all__ = [
    "INVITATIONS_API_PREVIEW",
    "DEFAULT_MEDIA_TYPE",
]
