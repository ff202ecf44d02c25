"""
API configuration module.

Holds the default origin requests fall back to and the settings the
dispatcher hands to whatever transport is bound to a builder.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, Tuple

DEFAULT_ORIGIN = 'https://conduit-api.bondaracademy.com'


@dataclass
class TimeoutConfig:
    """
    Timeout configuration.

    Passed through to the transport on every dispatch.
    """
    total: float = 30.0  # Total request timeout (aiohttp only)
    connect: float = 10.0  # Connection timeout
    read: float = 30.0  # Socket read timeout

    def to_requests_timeout(self) -> Tuple[float, float]:
        """Convert to a requests (connect, read) timeout tuple."""
        return (self.connect, self.read)

    def to_aiohttp_timeout(self):
        """Convert to aiohttp ClientTimeout."""
        import aiohttp
        return aiohttp.ClientTimeout(
            total=self.total,
            connect=self.connect,
            sock_read=self.read
        )


@dataclass
class APIConfig:
    """
    Complete API configuration.

    The builder only reads ``default_origin``; the remaining settings
    belong to the transport side (fixtures and dispatcher).
    """
    # Origin used when no base URL is set on a builder
    default_origin: str = DEFAULT_ORIGIN

    # User agent for transports created by the test fixtures
    user_agent: str = 'conduitpy/1.0.0'

    timeout: TimeoutConfig = field(default_factory=TimeoutConfig)

    # Session-level headers for transports created by the test fixtures
    default_headers: Dict[str, str] = field(default_factory=dict)

    # Logging
    log_level: int = logging.INFO

    @classmethod
    def default(cls) -> 'APIConfig':
        """Create default configuration."""
        return cls()

    @classmethod
    def with_origin(cls, origin: str, **kwargs) -> 'APIConfig':
        """Create configuration with a different default origin."""
        return cls(default_origin=origin, **kwargs)

    def get_session_headers(self) -> Dict[str, str]:
        """Get headers for a freshly created transport session."""
        return {
            'User-Agent': self.user_agent,
            **self.default_headers
        }
