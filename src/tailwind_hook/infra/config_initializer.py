"""Infrastructure: ``tailwind.config.js`` bootstrap.

Writes the embedded default configuration into the project root when no
configuration file exists yet.  An existing file is never read, merged
or rewritten.

Rules
-----
* Exactly one conditional filesystem write per call.
* The create is exclusive (``"xb"``); a file that appears between the
  existence check and the write is left untouched.
* Every ``OSError`` is re-raised as :class:`ConfigInitError`.
* A write that fails after the create removes the partial file, so a
  truncated config is never mistaken for an existing one.
"""

from __future__ import annotations

from importlib import resources
from pathlib import Path

from tailwind_hook.exceptions import ConfigInitError
from tailwind_hook.log import get_logger

logger = get_logger(__name__)

CONFIG_FILENAME = "tailwind.config.js"
TEMPLATE_NAME = "default-config.js"


def load_default_config() -> bytes:
    """Return the bytes of the packaged default configuration."""
    template = resources.files("tailwind_hook") / "templates" / TEMPLATE_NAME
    return template.read_bytes()


def config_path(project_root: Path | str) -> Path:
    """Return the location of the CLI configuration file."""
    return Path(project_root) / CONFIG_FILENAME


def ensure_config(project_root: Path | str) -> bool:
    """Create ``tailwind.config.js`` under *project_root* if it is absent.

    Returns
    -------
    bool
        ``True`` when the default configuration was written, ``False``
        when a configuration file already existed.

    Raises
    ------
    ConfigInitError
        When the file cannot be created or written.
    """
    path = config_path(project_root)
    if path.exists():
        return False

    logger.info(
        "Initializing Tailwind to search all Rust files in 'src' "
        "and all HTML files in 'static'."
    )
    try:
        default_config = load_default_config()
        fh = path.open("xb")
    except FileExistsError:
        logger.warning(
            "%s already exists at %s (possibly a dangling symlink); "
            "leaving it untouched.",
            CONFIG_FILENAME,
            path,
        )
        return False
    except OSError as exc:
        raise ConfigInitError(
            f"Failed to create {CONFIG_FILENAME} at {path}: {exc}",
            hint="Check that the project root exists and is writable.",
        ) from exc

    try:
        with fh:
            fh.write(default_config)
    except OSError as exc:
        # Only the file this call created is removed.
        path.unlink(missing_ok=True)
        raise ConfigInitError(
            f"Failed to write {CONFIG_FILENAME} at {path}: {exc}",
            hint="Check free disk space and permissions on the project root.",
        ) from exc
    return True


class FileConfigInitializer:
    """Concrete :class:`~tailwind_hook.core.protocols.ConfigInitializer`."""

    def __init__(self, project_root: Path | str) -> None:
        self.project_root: Path = Path(project_root)

    def ensure(self) -> bool:
        return ensure_config(self.project_root)
