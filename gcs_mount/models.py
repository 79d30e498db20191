from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

GCS_SCHEME = "gs://"
DEFAULT_REFRESH_SECONDS = 60
DEFAULT_IMPLICIT_DIRS = True


class MountMode(str, Enum):
    """Permission mode of a mounted bucket."""

    READ_ONLY = "r"
    READ_WRITE = "rw"


class CacheType(str, Enum):
    """
    Where the driver buffers downloaded file data.

    Availability depends on the driver: GCSDokan supports all three,
    gcsfuse only supports a disk cache.
    """

    NONE = "none"
    MEMORY = "memory"
    DISK = "disk"


class MountRequest(BaseModel):
    """
    Abstract mount request, translated into driver arguments per platform.

    The remote is a bucket name optionally followed by a path inside the
    bucket. A leading ``gs://`` is stripped on construction.
    """

    remote: str = Field(..., description="Bucket or bucket/sub/path to mount")

    mountpoint: str = Field(..., description="Local directory (or drive) to mount at")

    mode: MountMode = Field(
        default=MountMode.READ_ONLY, description="Read-only or read-write mount"
    )

    cache_type: Optional[CacheType] = Field(
        default=None,
        description="Cache policy; the platform default is used when unset",
    )

    cache_arg: Optional[str] = Field(
        default=None,
        description="Memory limit in MB for memory cache, directory for disk cache",
    )

    billing: Optional[str] = Field(default=None, description="Billing project ID")

    refresh: Optional[int] = Field(
        default=None,
        ge=0,
        description="Metadata refresh interval in seconds; configured default when unset",
    )

    implicit_dirs: Optional[bool] = Field(
        default=None,
        description="Infer directories from object names (gcsfuse only); configured default when unset",
    )

    key_file: Optional[str] = Field(
        default=None, description="Service account credentials file"
    )

    additional_args: List[str] = Field(
        default_factory=list,
        description="Extra arguments passed verbatim to the driver",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "remote": "gs://genomics-public-data/clinvar",
                "mountpoint": "/tmp/clinvar",
                "mode": "r",
                "cache_type": "disk",
                "refresh": 60,
            }
        }
    )

    @field_validator("remote")
    @classmethod
    def strip_scheme(cls, value: str) -> str:
        if value.startswith(GCS_SCHEME):
            value = value[len(GCS_SCHEME):]
        if not value.strip("/"):
            raise ValueError("remote must name a bucket")
        return value

    @property
    def bucket(self) -> str:
        return self.remote.split("/", 1)[0]

    @property
    def path_in_bucket(self) -> str:
        """Path after the bucket, empty when the whole bucket is mounted."""
        parts = self.remote.split("/", 1)
        return parts[1].strip("/") if len(parts) > 1 else ""


class MountRecord(BaseModel):
    """One active mount as reported by the platform listing command."""

    remote: str = Field(..., description="Bucket (and path where the driver reports it)")

    mountpoint: str = Field(..., description="Local mountpoint")


@dataclass
class MountTable:
    """
    Ordered table of active mounts.

    Rows keep the order of the listing command's output. The column schema
    is fixed, so an empty table still reports both columns.
    """

    columns: ClassVar[Tuple[str, str]] = ("remote", "mountpoint")

    records: List[MountRecord] = field(default_factory=list)

    def __iter__(self) -> Iterator[MountRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def __getitem__(self, index: int) -> MountRecord:
        return self.records[index]

    @property
    def remotes(self) -> List[str]:
        return [record.remote for record in self.records]

    @property
    def mountpoints(self) -> List[str]:
        return [record.mountpoint for record in self.records]

    def to_rows(self) -> List[Tuple[str, str]]:
        return [(record.remote, record.mountpoint) for record in self.records]

    def to_dicts(self) -> List[dict]:
        return [record.model_dump() for record in self.records]
