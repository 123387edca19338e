"""
Configuration for the transcript retrieval subsystem.
Every value has a working default and can be overridden via environment variables.
"""

import os
from pathlib import Path
from typing import Dict, Any, List
from dataclasses import dataclass, field
from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path('.env')
if env_path.exists():
    load_dotenv(dotenv_path=env_path)

# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = field(default_factory=lambda: os.getenv('LOG_LEVEL', 'INFO'))
    format: str = field(default_factory=lambda: os.getenv('LOG_FORMAT', '%(log_color)s%(asctime)s [%(name)s] %(levelname)s: %(message)s'))
    date_format: str = field(default_factory=lambda: os.getenv('LOG_DATE_FORMAT', '%Y-%m-%d %H:%M:%S'))

# =============================================================================
# NETWORK CONFIGURATION
# =============================================================================

@dataclass
class NetworkConfig:
    """HTTP retry, timeout and connection pool settings."""
    # Retry policy
    max_attempts: int = field(default_factory=lambda: int(os.getenv('HTTP_MAX_ATTEMPTS', '3')))
    retry_delay: float = field(default_factory=lambda: float(os.getenv('HTTP_RETRY_DELAY', '2.0')))

    # Per-request timeout
    request_timeout: int = field(default_factory=lambda: int(os.getenv('HTTP_REQUEST_TIMEOUT', '30')))

    # Connection pool shared by every concurrent fetch
    max_connections: int = field(default_factory=lambda: int(os.getenv('HTTP_MAX_CONNECTIONS', '100')))
    max_connections_per_host: int = field(default_factory=lambda: int(os.getenv('HTTP_MAX_CONNECTIONS_PER_HOST', '10')))
    keepalive_timeout: int = field(default_factory=lambda: int(os.getenv('HTTP_KEEPALIVE_TIMEOUT', '90')))

    accept_language: str = field(default_factory=lambda: os.getenv('HTTP_ACCEPT_LANGUAGE', 'en-US'))

# =============================================================================
# YOUTUBE ENDPOINTS
# =============================================================================

@dataclass
class YouTubeConfig:
    """Endpoints and client identity used against the internal player API."""
    watch_url: str = field(default_factory=lambda: os.getenv('YOUTUBE_WATCH_URL', 'https://www.youtube.com/watch?v={video_id}'))
    innertube_url: str = field(default_factory=lambda: os.getenv('YOUTUBE_INNERTUBE_URL', 'https://www.youtube.com/youtubei/v1/player?key={api_key}'))
    consent_cookie_domain: str = field(default_factory=lambda: os.getenv('YOUTUBE_CONSENT_DOMAIN', '.youtube.com'))

    # The ANDROID client still returns caption tracks without a signed-in session
    client_name: str = field(default_factory=lambda: os.getenv('INNERTUBE_CLIENT_NAME', 'ANDROID'))
    client_version: str = field(default_factory=lambda: os.getenv('INNERTUBE_CLIENT_VERSION', '20.10.38'))

    @property
    def innertube_context(self) -> Dict[str, Any]:
        """Client identity payload sent with every player request."""
        return {
            "client": {
                "clientName": self.client_name,
                "clientVersion": self.client_version,
            }
        }

# =============================================================================
# TRANSCRIPT CONFIGURATION
# =============================================================================

@dataclass
class TranscriptConfig:
    """Retrieval call defaults."""
    timeout: float = field(default_factory=lambda: float(os.getenv('TRANSCRIPT_TIMEOUT', '30')))
    default_formatter: str = field(default_factory=lambda: os.getenv('TRANSCRIPT_FORMATTER', 'json'))
    pretty_print: bool = field(default_factory=lambda: os.getenv('TRANSCRIPT_PRETTY_PRINT', 'true').lower() == 'true')
    formatting_tags: List[str] = field(default_factory=lambda: _parse_list_env('TRANSCRIPT_FORMATTING_TAGS', [
        'strong', 'em', 'b', 'i', 'mark', 'small', 'del', 'ins', 'sub', 'sup'
    ]))

# =============================================================================
# MAIN CONFIGURATION CLASS
# =============================================================================

@dataclass
class Config:
    """Main configuration class that aggregates all configuration sections."""
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    network: NetworkConfig = field(default_factory=NetworkConfig)
    youtube: YouTubeConfig = field(default_factory=YouTubeConfig)
    transcript: TranscriptConfig = field(default_factory=TranscriptConfig)

# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================

def _parse_list_env(env_var: str, default: List[str]) -> List[str]:
    """Parse a comma-separated environment variable into a list."""
    value = os.getenv(env_var)
    if value:
        return [item.strip() for item in value.split(',') if item.strip()]
    return default

# =============================================================================
# GLOBAL CONFIGURATION INSTANCE
# =============================================================================

config = Config()
