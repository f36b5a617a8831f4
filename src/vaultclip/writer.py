"""Write clippings to the vault filesystem."""

from pathlib import Path
from typing import Optional

from .exceptions import PersistenceError
from .utils import sanitize_filename


def clipping_dir(vault_path: Path, folder: Optional[str] = None) -> Path:
    """Resolve the target directory; the sub-folder is relative to the vault."""
    if folder and folder.strip():
        target = vault_path / folder.strip().strip("/\\")
        if not target.resolve().is_relative_to(vault_path.resolve()):
            raise PersistenceError(f"Folder {folder!r} is outside the vault")
        return target
    return vault_path


def write_clipping(
    content: str,
    title: str,
    vault_path: Path,
    folder: Optional[str] = None,
) -> Path:
    """Write a clipping as ``<sanitized title>.md`` and return its path.

    An existing file with the same name is overwritten in place.
    """
    output_dir = clipping_dir(vault_path, folder)
    filename = (sanitize_filename(title) or "untitled") + ".md"
    filepath = output_dir / filename

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        filepath.write_text(content, encoding="utf-8")
    except OSError as e:
        raise PersistenceError(f"Failed to write {filepath}: {e}") from e

    return filepath
