"""
Configuration management for the LDBSV service details client.

Centralizes all configuration with type-safe defaults and validation.
"""

from typing import List, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class AppConfig(BaseSettings):
    """Application configuration with environment variable support."""

    testing: bool = Field(
        default=False,
        description="Enable testing mode"
    )

    # National Rail OpenLDBSVWS Configuration
    ldb_token: Optional[str] = Field(
        default=None,
        description="National Rail OpenLDBSVWS access token"
    )
    ldbsv_wsdl: str = Field(
        default="https://lite.realtime.nationalrail.co.uk/OpenLDBSVWS/wsdl.aspx?ver=2021-11-01",
        description="OpenLDBSVWS WSDL URL"
    )
    request_timeout: float = Field(
        default=5.0,
        gt=0,
        description="Timeout in seconds for SOAP requests"
    )

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )
    log_file: str = Field(
        default="logs/ldbsv.log",
        description="Log file path"
    )
    log_max_bytes: int = Field(
        default=10485760,  # 10MB
        description="Maximum log file size in bytes"
    )
    log_backup_count: int = Field(
        default=10,
        description="Number of backup log files to keep"
    )

    @field_validator('testing', mode='before')
    @classmethod
    def parse_bool(cls, v):
        """Parse boolean values from environment strings."""
        if isinstance(v, str):
            return v.lower() in ('true', '1', 'yes', 'on')
        return v

    @field_validator('log_level', mode='before')
    @classmethod
    def normalize_log_level(cls, v):
        """Accept log levels in any case."""
        if isinstance(v, str):
            v = v.upper()
            if v not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
                raise ValueError(f"Unknown log level: {v}")
        return v

    def validate_required_keys(self) -> List[str]:
        """
        Validate that required API keys are present.

        Returns:
            List of missing required keys (empty if all present)
        """
        missing = []

        if not self.ldb_token:
            missing.append("LDB_TOKEN")

        return missing

    class Config:
        """Pydantic configuration."""
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # Ignore extra environment variables


# Global configuration instance
config = AppConfig()


def get_config() -> AppConfig:
    """Get the global configuration instance."""
    return config
