"""Defines the client settings."""

import functools
import os
import warnings
from dataclasses import dataclass, field
from pathlib import Path

from omegaconf import OmegaConf

# This is the public web endpoint for the Cloud189 web API.
DEFAULT_WEB_URL = "https://cloud.189.cn"

SETTINGS_FILE_NAME = "settings.yaml"


def get_path() -> Path:
    if "CLOUDPAN_CONFIG_DIR" in os.environ:
        return Path(os.environ["CLOUDPAN_CONFIG_DIR"]).expanduser().resolve()
    return Path("~/.cloudpan/").expanduser().resolve()


@dataclass
class WebSettings:
    web_url: str = field(default=DEFAULT_WEB_URL)
    timeout_seconds: float = field(default=30.0)


def validate(settings: "Settings") -> None:
    if not settings.web.web_url.startswith(("http://", "https://")):
        raise ValueError(f"web.web_url must be an http(s) URL, got {settings.web.web_url!r}")
    if settings.web.timeout_seconds <= 0:
        raise ValueError(f"web.timeout_seconds must be positive, got {settings.web.timeout_seconds}")


@dataclass
class Settings:
    web: WebSettings = field(default_factory=WebSettings)

    def save(self) -> None:
        (dir_path := get_path()).mkdir(parents=True, exist_ok=True)
        with open(dir_path / SETTINGS_FILE_NAME, "w") as f:
            OmegaConf.save(config=self, f=f)

    @functools.lru_cache
    @staticmethod
    def load() -> "Settings":
        config = OmegaConf.structured(Settings)
        if not (dir_path := get_path()).exists():
            warnings.warn(f"Settings directory does not exist: {dir_path}. Creating it now.")
            dir_path.mkdir(parents=True)
            OmegaConf.save(config, dir_path / SETTINGS_FILE_NAME)
        else:
            try:
                with open(dir_path / SETTINGS_FILE_NAME, "r") as f:
                    raw_settings = OmegaConf.load(f)
                merged = OmegaConf.merge(config, raw_settings)
                validate(merged)
                config = merged
            except Exception as e:
                warnings.warn(f"Failed to load settings: {e}")
        return config
