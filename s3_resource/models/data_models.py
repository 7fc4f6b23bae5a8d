"""
Core data models for the S3 file resource.
"""
import os
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Union

from ..exceptions import LocatorError


class DesiredState(str, Enum):
    """Target condition a reconciliation pass converges toward."""
    PRESENT = 'present'
    ABSENT = 'absent'
    LATEST = 'latest'


class ReconcileAction(str, Enum):
    """Outcome of a single reconciliation pass."""
    CREATED = 'created'
    UPDATED = 'updated'
    UNCHANGED = 'unchanged'
    REMOVED = 'removed'
    NOOP = 'noop'


@dataclass(frozen=True)
class ResourceSpec:
    """Declared parameters of one local file backed by one S3 object."""
    path: str
    source: str
    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = None
    region: Optional[str] = None
    endpoint: Optional[str] = None
    ssl_verify_peer: Optional[bool] = None
    force_path_style: Optional[bool] = None
    ensure: Union[DesiredState, str] = DesiredState.PRESENT

    def __post_init__(self):
        if not os.path.isabs(self.path):
            raise ValueError(f"Path not absolute: {self.path}")
        # Frozen dataclass, so coerce through object.__setattr__
        object.__setattr__(self, 'ensure', DesiredState(self.ensure))


@dataclass(frozen=True)
class ObjectLocation:
    """Bucket and key of a single object."""
    bucket: str
    key: str

    @classmethod
    def parse(cls, source: str) -> 'ObjectLocation':
        """
        Split a "/bucket/key/with/slashes" source into bucket and key.

        Args:
            source: Source string, the leading separator is optional

        Returns:
            ObjectLocation with the first segment as bucket

        Raises:
            LocatorError: If no bucket or no key remains after splitting
        """
        parts = source.rstrip().split('/')
        if parts and parts[0] == '':
            parts.pop(0)

        if not parts or not parts[0]:
            raise LocatorError(source, "missing bucket name")

        bucket = parts[0]
        key = '/'.join(parts[1:])
        if not key:
            raise LocatorError(source, "missing object key")

        return cls(bucket=bucket, key=key)

    def __str__(self) -> str:
        return f"s3://{self.bucket}/{self.key}"


@dataclass
class ObjectMetadata:
    """Metadata returned by a HEAD request on an object."""
    etag: str
    size: Optional[int] = None
    last_modified: Optional[datetime] = None
