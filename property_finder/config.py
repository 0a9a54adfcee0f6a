"""Configuration management for property-finder."""

from dataclasses import dataclass, field
from pathlib import Path

from property_finder.exceptions import ConfigurationError


@dataclass
class CatalogConfig:
    """Where the property catalog comes from."""

    path: Path | None = None
    sample_size: int = 25
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.sample_size < 0:
            raise ConfigurationError(f"sample_size must be >= 0, got {self.sample_size}")


@dataclass
class SearchConfig:
    """Result rendering configuration."""

    display_limit: int = 5
    divider_width: int = 50

    def __post_init__(self) -> None:
        if self.display_limit < 1:
            raise ConfigurationError(f"display_limit must be >= 1, got {self.display_limit}")
        if self.divider_width < 0:
            raise ConfigurationError(f"divider_width must be >= 0, got {self.divider_width}")


@dataclass
class PropertyFinderConfig:
    """Main configuration for property-finder."""

    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "PropertyFinderConfig":
        """Create config from environment variables."""
        import os

        catalog_path = os.getenv("PROPERTY_CATALOG_PATH")
        seed = os.getenv("SEED")

        catalog = CatalogConfig(
            path=Path(catalog_path) if catalog_path else None,
            sample_size=_int_env("SAMPLE_SIZE", os.getenv("SAMPLE_SIZE", "25")),
            seed=_int_env("SEED", seed) if seed else None,
        )

        search = SearchConfig(
            display_limit=_int_env("DISPLAY_LIMIT", os.getenv("DISPLAY_LIMIT", "5")),
        )

        return cls(
            catalog=catalog,
            search=search,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )


def _int_env(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from exc
