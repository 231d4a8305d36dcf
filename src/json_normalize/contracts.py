"""Public result models for json_normalize."""

from pydantic import BaseModel, ConfigDict


class Fingerprint(BaseModel):
    """Canonical form of a value together with its digest."""
    model_config = ConfigDict(frozen=True)

    algorithm: str  # "md5" | "sha256" | "sha512" | any fixed-length hashlib algorithm
    canonical: str
    digest: str  # lowercase hex
