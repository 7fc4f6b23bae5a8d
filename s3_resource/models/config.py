"""
Client configuration and its validation schema.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional


BASE_SCHEMA = {
    'access_key_id': str,
    'secret_access_key': str,
    'region': str,
}

ENDPOINT_SCHEMA = {
    'endpoint': str,
    'ssl_verify_peer': bool,
    'force_path_style': bool,
}


@dataclass(frozen=True)
class ClientConfig:
    """Validated configuration for one S3 client."""
    access_key_id: str
    secret_access_key: str
    region: str
    endpoint: Optional[str] = None
    ssl_verify_peer: Optional[bool] = None
    force_path_style: Optional[bool] = None

    @property
    def is_compatible_mode(self) -> bool:
        """True when talking to a non-AWS, S3-compatible endpoint."""
        return bool(self.endpoint)

    @classmethod
    def from_candidate(cls, candidate: Mapping[str, Any]) -> 'ClientConfig':
        """Create ClientConfig from a candidate mapping that passed validation."""
        return cls(
            access_key_id=candidate['access_key_id'],
            secret_access_key=candidate['secret_access_key'],
            region=candidate['region'],
            endpoint=candidate.get('endpoint'),
            ssl_verify_peer=candidate.get('ssl_verify_peer'),
            force_path_style=candidate.get('force_path_style'),
        )


def build_candidate(values: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Pick the configuration keys out of a parameter mapping.

    The endpoint group is only carried over when an endpoint is set.
    """
    candidate = {name: values.get(name) for name in BASE_SCHEMA}
    if values.get('endpoint'):
        for name in ENDPOINT_SCHEMA:
            candidate[name] = values.get(name)
    return candidate


def schema_for(candidate: Mapping[str, Any]) -> Dict[str, type]:
    """Return the schema a candidate must satisfy."""
    schema = dict(BASE_SCHEMA)
    if candidate.get('endpoint'):
        schema.update(ENDPOINT_SCHEMA)
    return schema


def validate_config(candidate: Mapping[str, Any]) -> List[str]:
    """
    Validate a candidate configuration.

    Args:
        candidate: Mapping built by build_candidate

    Returns:
        List of field-level errors, empty when the candidate is valid
    """
    errors = []
    for name, expected in schema_for(candidate).items():
        value = candidate.get(name)
        if value is None:
            errors.append(f"{name}: missing")
        elif expected is bool:
            if not isinstance(value, bool):
                errors.append(f"{name}: expected boolean")
        elif not isinstance(value, str):
            errors.append(f"{name}: expected string")
        elif not value.strip():
            errors.append(f"{name}: empty")
    return errors
