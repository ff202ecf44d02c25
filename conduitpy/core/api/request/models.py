"""
Request descriptor model.

Contains the value object a builder hands to the dispatcher.
"""
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class RequestDescriptor:
    """
    Snapshot of one not-yet-sent HTTP request.

    Attributes:
        method: HTTP method, upper-cased
        url: Fully composed absolute URL
        headers: Header mapping attached to the request
        body: Opaque payload forwarded as JSON (None for no body)
    """
    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Any = None

    @property
    def has_body(self) -> bool:
        return self.body is not None

    def to_dict(self) -> dict:
        """
        Convert to dictionary for printing or serialization.

        Returns:
            Dictionary representation
        """
        return {
            'method': self.method,
            'url': self.url,
            'headers': dict(self.headers),
            'body': self.body,
        }
