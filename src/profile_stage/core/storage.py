"""Storage bucket configuration for avatars and post media."""
from __future__ import annotations

from typing import Literal

from profile_stage.core.settings import Settings, settings

__all__ = [
    "PLACEHOLDER_BUCKETS",
    "StorageConfigurationError",
    "get_bucket_or_throw",
    "normalize_bucket",
    "storage_buckets",
]

BucketKind = Literal["avatars", "media"]

# Values shipped in sample env files; treated as unset.
PLACEHOLDER_BUCKETS = frozenset({"your_bucket_id", "your_avatar_bucket", "your_media_bucket"})


class StorageConfigurationError(RuntimeError):
    """Raised when a storage bucket is requested but not configured."""


def normalize_bucket(value: str | None, fallback: str) -> str:
    """Return ``value`` unless it is empty or a placeholder, else ``fallback``."""
    if not value or value in PLACEHOLDER_BUCKETS:
        return fallback
    return value


def storage_buckets(config: Settings | None = None) -> dict[str, str]:
    """Resolve the configured bucket names keyed by storage kind."""
    config = config or settings
    return {
        "avatars": normalize_bucket(config.avatar_bucket, "avatars"),
        "media": normalize_bucket(config.media_bucket, "media"),
    }


def get_bucket_or_throw(kind: BucketKind | str, config: Settings | None = None) -> str:
    """Return the bucket name for ``kind``.

    Raises:
        StorageConfigurationError: If ``kind`` has no configured bucket.
    """
    bucket = storage_buckets(config).get(kind)
    if not bucket:
        raise StorageConfigurationError(f"Storage bucket for {kind} is not configured")
    return bucket
