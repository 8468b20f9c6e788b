"""
Base Adapter Interface for hyperkb

Adapters turn documents into atoms and (where it makes sense) atoms back
into documents. The store stays format-agnostic; formats live here.

Every adapter must:
1. Parse its native format
2. Build Nodes and Links with the right types and truth values
3. Return the atoms (or insert them directly into an AtomSpace)
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional
from pathlib import Path
import json
import logging

import yaml

from hyperkb.core import Atom, AtomSpace, ValidationError


_log = logging.getLogger(__name__)


class AdapterError(ValidationError):
    """Raised when a document cannot be turned into atoms."""
    pass


class BaseAdapter(ABC):
    """
    Abstract base class for all hyperkb adapters.

    Subclasses implement parse(); inserting into a space is shared.
    """

    # Override in subclass
    FORMAT_NAME: str = "base"

    def __init__(self, space: Optional[AtomSpace] = None):
        # an empty AtomSpace is falsy, so no `space or AtomSpace()`
        self.space = space if space is not None else AtomSpace()

    @abstractmethod
    def parse(self, source: Any) -> List[Atom]:
        """
        Parse source data into atoms.

        Args:
            source: Format-specific input (file path, dict, string, etc.)

        Returns:
            Atoms ordered so that every Link comes after its children
        """
        pass

    def parse_to_space(self, source: Any) -> AtomSpace:
        """Parse source and insert every atom into the space."""
        atoms = self.parse(source)
        for atom in atoms:
            self.space.insert(atom)
        _log.debug("%s adapter inserted %d atoms", self.FORMAT_NAME, len(atoms))
        return self.space

    def parse_many(self, sources: List[Any]) -> List[Atom]:
        """Parse multiple sources."""
        all_atoms = []
        for source in sources:
            all_atoms.extend(self.parse(source))
        return all_atoms


class FileAdapter(BaseAdapter):
    """Base adapter for file-based sources."""

    SUPPORTED_EXTENSIONS: List[str] = []

    def parse_file(self, path: Path) -> List[Atom]:
        """Parse a file by path."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        return self.parse(path)

    def parse_directory(self, directory: Path, recursive: bool = False) -> List[Atom]:
        """Parse all supported files in a directory, skipping bad ones."""
        all_atoms = []

        pattern = "**/*" if recursive else "*"
        for ext in self.SUPPORTED_EXTENSIONS:
            for path in sorted(Path(directory).glob(f"{pattern}{ext}")):
                try:
                    all_atoms.extend(self.parse_file(path))
                except (ValidationError, OSError) as e:
                    _log.warning("Failed to parse %s: %s", path, e)

        return all_atoms


class DocumentAdapter(FileAdapter):
    """Base adapter for JSON and YAML documents."""

    SUPPORTED_EXTENSIONS = [".json", ".yaml", ".yml"]

    def _read(self, path: Path) -> Any:
        text = path.read_text()
        try:
            if path.suffix.lower() == ".json":
                return json.loads(text)
            return yaml.safe_load(text)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise AdapterError(f"Cannot parse {path}: {e}") from e

    def load_document(self, source: Any) -> Any:
        """Load a document from a dict/list, a file path, or a JSON/YAML string."""
        if isinstance(source, (dict, list)):
            return source

        if isinstance(source, Path):
            if not source.exists():
                raise FileNotFoundError(f"File not found: {source}")
            return self._read(source)

        if isinstance(source, str):
            # Try as file path first (single line, not an inline document)
            if "\n" not in source and not source.lstrip().startswith(("{", "[")):
                path = Path(source)
                if path.exists():
                    return self._read(path)
            # YAML is a superset of JSON, so this covers both
            try:
                return yaml.safe_load(source)
            except yaml.YAMLError as e:
                raise AdapterError(f"Cannot parse document: {e}") from e

        raise AdapterError(f"Cannot load a document from {type(source).__name__}")
