"""Configuration management for customer-prototype."""

from dataclasses import dataclass, field
from pathlib import Path

from customer_prototype.exceptions import ConfigurationError


@dataclass
class OutputConfig:
    """Output configuration."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class GeneratorConfig:
    """Prototype generator configuration."""

    locale: str = "en_US"
    vip_ratio: float = 0.2  # share of generated prototypes that are VIP


@dataclass
class AppConfig:
    """Main configuration for customer-prototype."""

    output: OutputConfig = field(default_factory=OutputConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create config from environment variables."""
        import os

        output = OutputConfig(
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        vip_ratio = _parse_env(os.getenv("VIP_RATIO", "0.2"), float, "VIP_RATIO")
        if not 0.0 <= vip_ratio <= 1.0:
            raise ConfigurationError(f"VIP_RATIO must be between 0 and 1, got {vip_ratio}")

        generator = GeneratorConfig(
            locale=os.getenv("FAKER_LOCALE", "en_US"),
            vip_ratio=vip_ratio,
        )

        seed_str = os.getenv("SEED")

        return cls(
            output=output,
            generator=generator,
            seed=_parse_env(seed_str, int, "SEED") if seed_str else None,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )


def _parse_env(raw: str, convert: type, name: str):
    try:
        return convert(raw)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid value for {name}: {raw!r}") from exc
