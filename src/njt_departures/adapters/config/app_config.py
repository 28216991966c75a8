"""12-factor configuration adapter using environment variables and TOML config."""

import tempfile
from pathlib import Path
from typing import Any

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # type: ignore[no-redef]  # Fallback for older Python

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from njt_departures.domain.models import DEFAULT_MAX_RANKED_TRAINS, QueryOptions

# TOML table -> fields it may override
TOML_SECTIONS: dict[str, tuple[str, ...]] = {
    "resolver": ("verbose", "use_alternate_source", "max_ranked_trains", "debug_log_file"),
    "source": (
        "live_base_url",
        "alternate_base_url",
        "request_timeout_seconds",
        "min_request_delay_seconds",
    ),
    "cache": ("cache_dir", "cache_ttl_seconds"),
    "mail": (
        "mail_from",
        "mail_to",
        "mail_subject",
        "smtp_host",
        "smtp_port",
        "smtp_username",
        "smtp_password",
        "smtp_use_tls",
    ),
}


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    # Query behaviour
    verbose: bool = Field(default=False, description="Log raw rows and decoded records")
    debug_log_file: str = Field(
        default=str(Path(tempfile.gettempdir()) / "departures-debug.log"),
        description="File receiving the debug log when verbose is enabled",
    )
    use_alternate_source: bool = Field(
        default=False, description="Fetch documents from the local debug server"
    )
    max_ranked_trains: int = Field(
        default=DEFAULT_MAX_RANKED_TRAINS,
        description="Number of upcoming trains resolved with previous-stop status",
    )

    # Schedule source
    live_base_url: str = Field(
        default="http://dv.njtransit.com/mobile", description="DepartureVision mobile pages"
    )
    alternate_base_url: str = Field(
        default="http://127.0.0.1:8000", description="Local debug server serving saved pages"
    )
    request_timeout_seconds: float = Field(default=10, description="HTTP request timeout")
    min_request_delay_seconds: float = Field(
        default=0.5, description="Minimum delay between live requests to the same host"
    )

    # Local document cache
    cache_dir: str = Field(
        default=tempfile.gettempdir(), description="Directory holding fetched documents"
    )
    cache_ttl_seconds: float = Field(
        default=60, description="Age after which a cached document is fetched again"
    )

    # E-mail notification
    mail_from: str | None = Field(default=None, description="Sender address")
    mail_to: str | None = Field(default=None, description="Recipient address")
    mail_subject: str = Field(default="train to Hoboken", description="Subject line")
    smtp_host: str = Field(default="localhost", description="SMTP server host")
    smtp_port: int = Field(default=587, description="SMTP server port")
    smtp_username: str | None = Field(default=None, description="SMTP login user")
    smtp_password: str | None = Field(default=None, description="SMTP login password")
    smtp_use_tls: bool = Field(default=True, description="Upgrade the SMTP connection with STARTTLS")

    # Optional TOML file overriding the values above
    config_file: str | None = Field(
        default=None, description="Path to TOML configuration file"
    )

    @field_validator("max_ranked_trains")
    @classmethod
    def validate_max_ranked_trains(cls, v: int) -> int:
        """Validate that at least one train is resolved."""
        if v < 1:
            raise ValueError("max_ranked_trains must be at least 1")
        return v

    @field_validator("cache_ttl_seconds", "request_timeout_seconds", "min_request_delay_seconds")
    @classmethod
    def validate_non_negative(cls, v: float) -> float:
        """Validate that durations are not negative."""
        if v < 0:
            raise ValueError("durations must not be negative")
        return v

    def load_toml_overrides(self) -> dict[str, Any]:
        """Load the TOML file and apply the settings it contains.

        Returns:
            The parsed TOML data, empty when no config file is set.
        """
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        for section, fields in TOML_SECTIONS.items():
            values = toml_data.get(section, {})
            if not isinstance(values, dict):
                raise ValueError(f"TOML config '{section}' must be a table")
            for name in fields:
                if name in values:
                    setattr(self, name, values[name])

        return toml_data

    def query_options(self) -> QueryOptions:
        """Return the options object handed to the decoders and the resolver."""
        return QueryOptions(
            verbose=self.verbose,
            use_alternate_source=self.use_alternate_source,
            max_ranked_trains=self.max_ranked_trains,
        )
