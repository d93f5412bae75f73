#!/usr/bin/env python3
"""
Configuration Management for autaxy

Handles environment-based configuration with secure defaults and validation.
Supports multiple environments (development, test, production); business identity
fields used on generated statements are read from the environment as well.
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass(frozen=True)
class BusinessSettings:
    """
    Company identity printed on statements.

    Owned by the rendering side; the report parser never reads it.
    """

    company_name: str = ""
    street: str = ""
    zip_city: str = ""
    country: str = "Germany"
    vat_id: str = ""
    apple_vendor_id: str = ""
    contact_email: str = ""

    def is_complete(self) -> bool:
        """Check that the minimum address block is present."""
        return bool(self.company_name and self.street and self.zip_city)


@dataclass
class AppleConfig:
    """Apple report processing configuration."""

    reports_dir: Path
    encoding: str = "utf-8-sig"


@dataclass
class Config:
    """
    Main configuration class for autaxy.

    Loads configuration from environment variables with secure defaults
    and validation for each environment type.
    """

    environment: Environment

    # Core directories
    data_dir: Path
    output_dir: Path

    # Component configurations
    apple: AppleConfig
    business: BusinessSettings

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("AUTAXY_ENV", "development"))

        # Base directories
        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_autaxy"
            base_dir = Path(os.getenv("AUTAXY_DATA_DIR", str(default_test_dir)))
        else:
            base_dir = Path(os.getenv("AUTAXY_DATA_DIR", "./data")).expanduser().resolve()

        data_dir = base_dir
        output_dir = data_dir / "output"

        apple = AppleConfig(
            reports_dir=data_dir / "apple" / "reports",
            encoding=os.getenv("REPORT_ENCODING", "utf-8-sig"),
        )

        # Ensure directories exist
        for directory in [data_dir, output_dir, apple.reports_dir]:
            directory.mkdir(parents=True, exist_ok=True)

        business = BusinessSettings(
            company_name=os.getenv("BUSINESS_COMPANY_NAME", ""),
            street=os.getenv("BUSINESS_STREET", ""),
            zip_city=os.getenv("BUSINESS_ZIP_CITY", ""),
            country=os.getenv("BUSINESS_COUNTRY", "Germany"),
            vat_id=os.getenv("BUSINESS_VAT_ID", ""),
            apple_vendor_id=os.getenv("APPLE_VENDOR_ID", ""),
            contact_email=os.getenv("BUSINESS_CONTACT_EMAIL", ""),
        )

        return cls(
            environment=env,
            data_dir=data_dir,
            output_dir=output_dir,
            apple=apple,
            business=business,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        # Check required directories
        for name, path in [
            ("data_dir", self.data_dir),
            ("output_dir", self.output_dir),
            ("apple.reports_dir", self.apple.reports_dir),
        ]:
            if not path.exists():
                errors.append(f"{name} does not exist: {path}")

        if not isinstance(logging.getLevelName(self.log_level), int):
            errors.append(f"Unknown LOG_LEVEL: {self.log_level}")

        try:
            "".encode(self.apple.encoding)
        except LookupError:
            errors.append(f"Unknown REPORT_ENCODING: {self.apple.encoding}")

        # Statements issued in production need an address block
        if self.environment == Environment.PRODUCTION and not self.business.is_complete():
            errors.append("BUSINESS_COMPANY_NAME, BUSINESS_STREET and BUSINESS_ZIP_CITY are required in production")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        # Configure format based on environment
        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

        if self.debug:
            logging.getLogger("autaxy").setLevel(logging.DEBUG)

    def get_sensitive_fields(self) -> list:
        """Get list of field names that contain sensitive data."""
        return [
            "business.vat_id",
            "business.contact_email",
        ]

    def to_dict(self, include_sensitive: bool = False) -> dict[str, Any]:
        """Convert configuration to dictionary, optionally excluding sensitive data."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if hasattr(field_value, "__dataclass_fields__"):
                # Nested dataclass
                nested_dict: dict[str, Any] = {}
                for nested_name in field_value.__dataclass_fields__:
                    nested_value = getattr(field_value, nested_name)
                    full_field_name = f"{field_name}.{nested_name}"

                    if not include_sensitive and full_field_name in self.get_sensitive_fields():
                        nested_dict[nested_name] = "***REDACTED***"
                    elif isinstance(nested_value, Path):
                        nested_dict[nested_name] = str(nested_value)
                    else:
                        nested_dict[nested_name] = nested_value

                result[field_name] = nested_dict
            elif isinstance(field_value, Path):
                result[field_name] = str(field_value)
            elif isinstance(field_value, Enum):
                result[field_name] = field_value.value
            else:
                result[field_name] = field_value

        return result


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_environment()

        # Validate configuration
        errors = _config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        # Setup logging
        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()
