"""Pydantic models for secrets output.

Values are hidden unless explicitly requested; a short hash is always reported
so two builds can be compared without printing secrets.
"""

import hashlib
from typing import Dict, List, Optional

from pydantic import BaseModel


class SecretInfo(BaseModel):
    """A single resolved value in task output."""
    name: str
    value: Optional[str] = None  # Optional when show=False
    hash: Optional[str] = None

    @classmethod
    def create(cls, name: str, secret_value: str, show: bool = False) -> 'SecretInfo':
        """Factory method to create SecretInfo with proper hash calculation."""
        secret_hash = hashlib.sha256(secret_value.encode()).hexdigest()[:16]

        return cls(
            name=name,
            value=secret_value if show else None,
            hash=secret_hash
        )


class SecretsResponse(BaseModel):
    """Response of the secrets tasks."""
    project: Optional[str] = None
    platform: str
    configuration: str
    secrets: List[SecretInfo] = []

    @classmethod
    def from_mapping(cls, values: Dict[str, str], show: bool = False, **kwargs) -> 'SecretsResponse':
        return cls(
            secrets=[SecretInfo.create(name, values[name], show=show) for name in sorted(values)],
            **kwargs
        )
