"""Configuration loaded from .cmsmap.toml and env vars.

Loading order: defaults → TOML file → env vars.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from cmsmap.cms.cache import DEFAULT_CACHE_LIFETIME, MemoryCacheStore

if TYPE_CHECKING:
    from cmsmap.cms.api import ApiContentRepository, ContentApi
    from cmsmap.content_model.model import ContentModel

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".cmsmap.toml"
CONFIG_SEARCH_PATHS = [
    Path("."),
]
GLOBAL_CONFIG_PATH = Path.home() / ".config" / "cmsmap" / "config.toml"


class ContentModelSectionConfig(BaseModel):
    """[content_model] section."""

    path: str = ""

    @property
    def is_configured(self) -> bool:
        return bool(self.path)


class CacheSectionConfig(BaseModel):
    """[cache] section."""

    enabled: bool = True
    lifetime: int = Field(default=DEFAULT_CACHE_LIFETIME, ge=0)


class CmsConfig(BaseModel):
    """Top-level configuration model."""

    content_model: ContentModelSectionConfig = Field(default_factory=ContentModelSectionConfig)
    cache: CacheSectionConfig = Field(default_factory=CacheSectionConfig)

    def create_repository(
        self, api: ContentApi, content_model: ContentModel | None = None
    ) -> ApiContentRepository:
        """Build an API-backed repository from the configured sections.

        The content model is loaded from ``content_model.path`` unless one is
        passed. A memory cache with the configured lifetime is attached only
        when ``cache.enabled`` is set.
        """
        from cmsmap.cms.api import ApiContentRepository
        from cmsmap.content_model.loader import load_content_model

        if content_model is None and self.content_model.is_configured:
            content_model = load_content_model(Path(self.content_model.path))

        return ApiContentRepository(
            api,
            content_model,
            cache=MemoryCacheStore() if self.cache.enabled else None,
            cache_lifetime=self.cache.lifetime,
        )


def load_config(path: str | Path | None = None) -> CmsConfig:
    """Load configuration from a TOML file.

    Search order:
    1. Explicit path (if provided)
    2. .cmsmap.toml in CWD
    3. ~/.config/cmsmap/config.toml

    Then overlay environment variables.
    """
    data: dict[str, object] = {}

    if path is not None:
        toml_path = Path(path)
        if toml_path.exists():
            data = _load_toml(toml_path)
        else:
            logger.warning("Config file not found: %s", toml_path)
    else:
        for search_dir in CONFIG_SEARCH_PATHS:
            candidate = search_dir / CONFIG_FILENAME
            if candidate.exists():
                data = _load_toml(candidate)
                logger.info("Loaded config from %s", candidate)
                break
        if not data and GLOBAL_CONFIG_PATH.exists():
            data = _load_toml(GLOBAL_CONFIG_PATH)
            logger.info("Loaded config from %s", GLOBAL_CONFIG_PATH)

    config = CmsConfig.model_validate(data) if data else CmsConfig()

    return _apply_env_vars(config)


def _load_toml(path: Path) -> dict[str, object]:
    """Load a TOML file and return the data dict."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (tomllib.TOMLDecodeError, OSError) as exc:
        logger.warning("Failed to parse %s: %s", path, exc)
        return {}


def _apply_env_vars(config: CmsConfig) -> CmsConfig:
    """Apply environment variable overrides to config."""
    data = config.model_dump()

    env_mapping: dict[str, tuple[str, str]] = {
        "CMSMAP_CONTENT_MODEL": ("content_model", "path"),
    }
    for env_var, (section, field) in env_mapping.items():
        value = os.environ.get(env_var)
        if value is not None:
            data[section][field] = value

    enabled_raw = os.environ.get("CMSMAP_CACHE_ENABLED")
    if enabled_raw is not None:
        data["cache"]["enabled"] = enabled_raw.lower() in ("true", "1", "yes")
    lifetime_raw = os.environ.get("CMSMAP_CACHE_LIFETIME")
    if lifetime_raw is not None:
        data["cache"]["lifetime"] = int(lifetime_raw)

    return CmsConfig.model_validate(data)
