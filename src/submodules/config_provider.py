"""Read access to a repository's git config text."""

from pathlib import Path
from typing import Protocol, runtime_checkable


GIT_DIR_NAME = ".git"
CONFIG_FILE_NAME = "config"


def config_path_for(repo_root: str) -> Path:
    """Return the expected config file location for a repository root.

    Args:
        repo_root: Absolute or relative repository root path.

    Returns:
        Path to ``<repo_root>/.git/config``.
    """
    return Path(repo_root) / GIT_DIR_NAME / CONFIG_FILE_NAME


@runtime_checkable
class ConfigTextProvider(Protocol):
    """Protocol for reading git config text.

    Implementations are read fresh on every call; classification never
    caches config content.
    """

    def read_config(self, repo_root: str) -> str | None:
        """Read the config text for a repository.

        Args:
            repo_root: Repository root path.

        Returns:
            Full config text, or None if the config file does not exist.

        Raises:
            OSError: If the file exists but cannot be read.
        """
        ...


class FileConfigProvider:
    """Reads ``<repo_root>/.git/config`` from the filesystem."""

    def __init__(self, encoding: str = "utf-8") -> None:
        """Initialize the provider.

        Args:
            encoding: Text encoding of the config file.
        """
        self._encoding = encoding

    def read_config(self, repo_root: str) -> str | None:
        """Read the config file, or return None if it does not exist."""
        path = config_path_for(repo_root)
        if not path.is_file():
            return None
        return path.read_text(encoding=self._encoding, errors="replace")


class InMemoryConfigProvider:
    """Serves config text from a mapping of repository root to content.

    A value may be an ``OSError`` instance, which is raised on read.
    """

    def __init__(self, configs: dict[str, str | OSError] | None = None) -> None:
        """Initialize the provider.

        Args:
            configs: Map of repository root to config text or error.
        """
        self._configs: dict[str, str | OSError] = dict(configs or {})

    def set_config(self, repo_root: str, content: str | OSError) -> None:
        """Replace the config content for a repository root."""
        self._configs[repo_root] = content

    def read_config(self, repo_root: str) -> str | None:
        """Return stored config text, raise a stored error, or None."""
        content = self._configs.get(repo_root)
        if isinstance(content, OSError):
            raise content
        return content
