"""Configuration loader and provider resolution for the README generator.

Loads settings from configs/config.yaml, applies environment overrides
(AI_PROVIDER, API_KEY, AI_MODEL) and resolves the explicit provider
settings handed to the generation pipeline.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "configs" / "config.yaml"

# Known chat providers. The model is used when AI_MODEL is not set.
PROVIDERS: dict[str, dict[str, str]] = {
    "groq": {
        "base_uri": "https://api.groq.com/",
        "chat_endpoint": "openai/v1/chat/completions",
        "model": "llama3-8b-8192",
    },
    "openai": {
        "base_uri": "https://api.openai.com/v1/",
        "chat_endpoint": "chat/completions",
        "model": "gpt-4",
    },
    "anthropic": {
        "base_uri": "https://api.anthropic.com",
        "chat_endpoint": "",
        "model": "claude-3-5-haiku-latest",
    },
}


class ConfigurationError(ValueError):
    """Raised when provider settings are missing or unsupported."""


@dataclass
class APIConfig:
    """Configuration for the chat provider.

    ``api_key`` is never read from the YAML file, only from the
    environment.
    """

    provider: str = ""
    model: Optional[str] = None
    api_key: str = ""
    timeout: float = 60.0


@dataclass
class OutputConfig:
    """Configuration for README write-out."""

    filename: str = "README.md"


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = None


@dataclass
class AppConfig:
    """Top-level application configuration."""

    api: APIConfig = field(default_factory=APIConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


@dataclass(frozen=True)
class ProviderConfig:
    """Validated provider settings passed to the transports.

    Attributes:
        provider: Provider key from PROVIDERS.
        base_uri: Base URL of the provider API.
        chat_endpoint: Chat completion path relative to ``base_uri``.
        api_key: Bearer token for the provider.
        model: Model name sent with every request.
        timeout: HTTP timeout in seconds.
    """

    provider: str
    base_uri: str
    chat_endpoint: str
    api_key: str
    model: str
    timeout: float = 60.0

    @property
    def url(self) -> str:
        """Full chat completion URL."""
        return self.base_uri.rstrip("/") + "/" + self.chat_endpoint.lstrip("/")


def _env(name: str) -> Optional[str]:
    value = os.getenv(name, "").strip()
    return value or None


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """Load application configuration from a YAML file.

    Reads the YAML config file and constructs a typed AppConfig. Missing
    values fall back to defaults. AI_PROVIDER and AI_MODEL override the
    file; API_KEY is only ever read from the environment.

    Args:
        config_path: Path to the YAML config file. If None, uses the
            default path at configs/config.yaml.

    Returns:
        A fully populated AppConfig instance.

    Raises:
        yaml.YAMLError: If the config file contains invalid YAML.
    """
    path = Path(config_path) if config_path else _DEFAULT_CONFIG_PATH

    raw: dict = {}
    if path.exists():
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
        logger.debug("Loaded configuration from %s", path)
    else:
        logger.debug("Config file not found at %s, using defaults", path)

    api_data = raw.get("api") or {}
    api_config = APIConfig(
        provider=_env("AI_PROVIDER") or api_data.get("provider") or "",
        model=_env("AI_MODEL") or api_data.get("model"),
        api_key=_env("API_KEY") or "",
        timeout=float(api_data.get("timeout", 60.0)),
    )

    output_data = raw.get("output") or {}
    output_config = OutputConfig(
        filename=output_data.get("filename", "README.md"),
    )

    logging_data = raw.get("logging") or {}
    logging_config = LoggingConfig(
        level=logging_data.get("level", "INFO"),
        format=logging_data.get(
            "format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        ),
        file=logging_data.get("file"),
    )

    return AppConfig(api=api_config, output=output_config, logging=logging_config)


def default_model(api: APIConfig) -> str:
    """The configured model, else the provider's own default, else ""."""
    if api.model:
        return api.model
    settings = PROVIDERS.get((api.provider or "").strip().lower(), {})
    return settings.get("model", "")


def resolve_provider(api: APIConfig) -> ProviderConfig:
    """Validate API settings and resolve them against the provider table.

    Args:
        api: API settings, typically from load_config().

    Returns:
        A ProviderConfig ready for a transport.

    Raises:
        ConfigurationError: If the provider or key is missing, or the
            provider is not supported.
    """
    provider = (api.provider or "").strip().lower()
    if not provider or not api.api_key:
        raise ConfigurationError(
            "Missing AI_PROVIDER or API_KEY. Set them in the environment, e.g.\n"
            "AI_PROVIDER=groq\nAPI_KEY=..."
        )

    settings = PROVIDERS.get(provider)
    if settings is None:
        raise ConfigurationError(
            f"Unsupported AI provider: {provider}. "
            f"Supported providers: {', '.join(PROVIDERS)}"
        )

    model = default_model(api)
    logger.info("Using provider %s with model %s", provider, model)
    return ProviderConfig(
        provider=provider,
        base_uri=settings["base_uri"],
        chat_endpoint=settings["chat_endpoint"],
        api_key=api.api_key,
        model=model,
        timeout=api.timeout,
    )
