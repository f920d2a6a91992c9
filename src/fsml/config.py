"""Configuration management for FSML.

Supports TOML configuration format with auto-discovery.
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from pathlib import Path

from fsml.core.paths import DEFAULT_INDEX_FILENAMES, is_index_file

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "fsml.toml"
DEFAULT_ROOT_MANIFEST = "mrmd.md"


@dataclass(frozen=True)
class NavConfig:
    """Navigation tree conventions.

    Index filenames are matched case-insensitively. The root manifest is
    excluded from navigation only when it sits at the project root.
    """

    index_filenames: frozenset[str] = DEFAULT_INDEX_FILENAMES
    root_manifest: str = DEFAULT_ROOT_MANIFEST

    def is_index_file(self, filename: str) -> bool:
        """Check whether filename is one of the recognized index files."""
        return is_index_file(filename, self.index_filenames)


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class Config:
    """Application configuration."""

    navigation: NavConfig = field(default_factory=NavConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for fsml.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            logger.debug("No fsml.toml found, using defaults")
            return cls()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents.

        Returns:
            Path to config file or None if not found
        """
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _load_from_file(cls, path: Path) -> Config:
        """Load configuration from a specific file.

        Raises:
            ValueError: If configuration is invalid
        """
        logger.debug(f"Loading configuration from {path}")
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

        navigation = cls._parse_navigation(data.get("navigation"))
        server = cls._parse_server(data.get("server"))

        return cls(navigation=navigation, server=server, config_path=path)

    @classmethod
    def _parse_navigation(cls, data: object) -> NavConfig:
        """Parse navigation configuration section.

        Args:
            data: Raw navigation section data

        Returns:
            NavConfig instance
        """
        if data is None:
            return NavConfig()

        if not isinstance(data, dict):
            raise ValueError("navigation section must be a dictionary")

        index_filenames_raw = data.get("index_filenames")
        index_filenames = DEFAULT_INDEX_FILENAMES
        if index_filenames_raw is not None:
            if not isinstance(index_filenames_raw, list):
                raise ValueError("navigation.index_filenames must be a list")
            for item in index_filenames_raw:
                if not isinstance(item, str):
                    raise ValueError("navigation.index_filenames items must be strings")
            index_filenames = frozenset(index_filenames_raw)

        root_manifest = data.get("root_manifest", DEFAULT_ROOT_MANIFEST)
        if not isinstance(root_manifest, str):
            raise ValueError("navigation.root_manifest must be a string")

        return NavConfig(index_filenames=index_filenames, root_manifest=root_manifest)

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        """Parse server configuration section."""
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        index_filenames: Iterable[str] | None = None,
        root_manifest: str | None = None,
    ) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            index_filenames: Override navigation.index_filenames
            root_manifest: Override navigation.root_manifest

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        navigation = self.navigation
        if index_filenames is not None:
            navigation = replace(navigation, index_filenames=frozenset(index_filenames))
        if root_manifest is not None:
            navigation = replace(navigation, root_manifest=root_manifest)

        return replace(self, server=server, navigation=navigation)
