"""Configuration management using pydantic-settings."""

import tomllib
from enum import Enum
from pathlib import Path
from typing import Self

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .security.length import MAX_CHARS
from .security.quality import PLACEHOLDER_LIMIT, PROFANITY_LIMIT
from .security.upload import ALLOWED_EXTENSIONS, MAX_FILE_SIZE_MB

DEFAULT_OUTPUT = "~/Documents/Resumes"
CONFIG_PATH = Path("~/.config/resumegate/config.toml").expanduser()


class LLMProvider(str, Enum):
    """Available LLM providers."""

    OLLAMA = "ollama"
    CLAUDE_API = "claude-api"
    OPENROUTER = "openrouter"


class LLMConfig(BaseSettings):
    """LLM provider configuration."""

    provider: LLMProvider = LLMProvider.OLLAMA
    model: str = "llama3.1:8b"
    ollama_url: str = "http://localhost:11434"
    openrouter_url: str = "https://openrouter.ai/api/v1"
    temperature: float = 0.3
    max_tokens: int = 4000


class GateConfig(BaseSettings):
    """Rejection gate thresholds."""

    max_chars: int = MAX_CHARS
    profanity_limit: int = PROFANITY_LIMIT
    placeholder_limit: int = PLACEHOLDER_LIMIT


class UploadConfig(BaseSettings):
    max_file_size_mb: int = MAX_FILE_SIZE_MB
    allowed_extensions: list[str] = list(ALLOWED_EXTENSIONS)

    @field_validator("allowed_extensions")
    @classmethod
    def normalize_extensions(cls, v: list[str]) -> list[str]:
        return [ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in v]


class PathsConfig(BaseSettings):
    output: Path = Path(DEFAULT_OUTPUT).expanduser()

    @field_validator("output", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        return Path(v).expanduser()

    @property
    def quarantine(self) -> Path:
        return self.output / ".quarantine"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="RESUMEGATE_")

    paths: PathsConfig = PathsConfig()
    gate: GateConfig = GateConfig()
    upload: UploadConfig = UploadConfig()
    llm: LLMConfig = LLMConfig()

    @model_validator(mode="after")
    def ensure_dirs(self) -> Self:
        self.paths.output.mkdir(parents=True, exist_ok=True)
        self.paths.quarantine.mkdir(parents=True, exist_ok=True)
        return self


def load_settings(config_path: Path | None = None) -> Settings:
    """Load settings from TOML file, falling back to defaults."""
    path = config_path or CONFIG_PATH

    if path.exists():
        with open(path, "rb") as f:
            data = tomllib.load(f)

        paths = PathsConfig(**data.get("paths", {}))
        gate = GateConfig(**data.get("gate", {}))
        upload = UploadConfig(**data.get("upload", {}))
        llm = LLMConfig(**data.get("llm", {}))
        return Settings(paths=paths, gate=gate, upload=upload, llm=llm)

    return Settings()
