"""
Range Registry - named range management.

The registry stores and resolves named ranges, enabling:
- Range definitions from YAML text or files
- Programmatic registration
- Named producer functions for `generate`
- Reference resolution between definitions
- Built-in ranges
"""

import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

from rangekit.ranges.core import Range, RangeError
from rangekit.ranges.parser import RangeParser, parse_range_text

logger = logging.getLogger(__name__)

Producer = Callable[[Range, int], Any]


class RangeNotFoundError(RangeError):
    """Raised when a range is not found in the registry."""
    pass


class ProducerNotFoundError(RangeError):
    """Raised when a producer is not found in the registry."""
    pass


def fibonacci(rng, counter: int) -> int:
    """Fibonacci numbers: 0, 1, 1, 2, 3, 5, ..."""
    if counter < 2:
        return counter
    values = rng.values
    return values[-1] + values[-2]


def squares(rng, counter: int) -> int:
    """Square numbers: 0, 1, 4, 9, ..."""
    return counter * counter


class RangeRegistry:
    """
    Registry for named ranges.

    Ranges are mutable cursors, so the registry keeps definitions rather
    than built ranges: every get() parses a fresh, independent range.

    Example:
        registry = RangeRegistry()
        registry.load_string('''
        countdown:
          range: [10, 0, -1]
        ''')

        rng = registry.get("countdown")
        list(rng)  # [10, 9, ..., 1]
    """

    def __init__(self):
        self._definitions: Dict[str, Dict[str, Any]] = {}
        self._metadata: Dict[str, Dict[str, Any]] = {}
        self._producers: Dict[str, Producer] = {}

        self._register_builtins()

    def _register_builtins(self):
        """Register built-in producers and ranges."""
        self.register_producer("fibonacci", fibonacci)
        self.register_producer("squares", squares)

        builtins = {
            "naturals": {"range": 0, "description": "0, 1, 2, ... (unbounded)"},
            "evens": {"range": {"start": 0, "step": 2}, "description": "0, 2, 4, ... (unbounded)"},
            "odds": {"range": {"start": 1, "step": 2}, "description": "1, 3, 5, ... (unbounded)"},
            "fibonacci": {"generate": "fibonacci", "description": "Fibonacci numbers (unbounded)"},
            "squares": {"generate": "squares", "description": "Square numbers (unbounded)"},
        }
        for name, definition in builtins.items():
            self.register(name, definition, metadata={"builtin": True})

    def register(
        self,
        name: str,
        definition: Dict[str, Any],
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Register a range definition by name (parsed on each access).

        Args:
            name: Range name (unique identifier)
            definition: Raw definition dictionary
            metadata: Optional metadata (builtin flag, etc.)
        """
        if not isinstance(definition, dict):
            raise RangeError(f"Definition of '{name}' must be a mapping, got {type(definition).__name__}")

        self._definitions[name] = definition
        self._metadata[name] = dict(metadata or {})
        if "description" in definition:
            self._metadata[name]["description"] = definition["description"]

    def register_producer(self, name: str, producer: Producer) -> None:
        """Register a producer usable as `generate: name`."""
        if not callable(producer):
            raise RangeError(f"Producer '{name}' must be callable")
        self._producers[name] = producer

    def definition(self, name: str) -> Dict[str, Any]:
        """Raw definition of a named range."""
        if name not in self._definitions:
            raise RangeNotFoundError(f"Range not found: {name}")
        return self._definitions[name]

    def producer(self, name: str) -> Producer:
        """Producer function registered under name."""
        if name not in self._producers:
            raise ProducerNotFoundError(f"Producer not found: {name}")
        return self._producers[name]

    def get(self, name: str) -> Range:
        """
        Build a fresh range from a named definition.

        Raises:
            RangeNotFoundError: If the range is not registered
            RangeParseError: If the definition is invalid
        """
        return RangeParser(self).parse(self.definition(name))

    def has(self, name: str) -> bool:
        """Check if a range exists in the registry."""
        return name in self._definitions

    def list(self, include_builtin: bool = True) -> List[str]:
        """List registered range names, sorted."""
        names = set(self._definitions)
        if not include_builtin:
            names = {n for n in names if not self._metadata.get(n, {}).get("builtin")}
        return sorted(names)

    def get_metadata(self, name: str) -> Dict[str, Any]:
        """Get metadata for a range."""
        return self._metadata.get(name, {})

    def load_string(self, text: str) -> int:
        """
        Load range definitions from YAML text.

        Returns:
            Number of ranges loaded
        """
        data = parse_range_text(text)
        count = 0

        for name, definition in data.items():
            if isinstance(definition, dict):
                self.register(str(name), definition)
                count += 1
            else:
                logger.warning(f"Skipping range '{name}': definition is not a mapping")

        logger.debug(f"Loaded {count} range definitions")
        return count

    def load_file(self, path: Union[str, Path]) -> int:
        """
        Load range definitions from a YAML file.

        Returns:
            Number of ranges loaded
        """
        path = Path(path)
        if not path.exists():
            raise RangeError(f"Ranges file not found: {path}")
        return self.load_string(path.read_text())

    def info(self) -> Dict[str, Any]:
        """
        Get registry information.

        Returns:
            Dictionary with registry stats and range list
        """
        ranges_info = []
        for name in self.list():
            meta = self._metadata.get(name, {})
            ranges_info.append({
                "name": name,
                "description": meta.get("description", ""),
                "builtin": meta.get("builtin", False),
            })

        return {
            "total_ranges": len(ranges_info),
            "builtin_ranges": sum(1 for r in ranges_info if r["builtin"]),
            "custom_ranges": sum(1 for r in ranges_info if not r["builtin"]),
            "producers": sorted(self._producers),
            "ranges": ranges_info,
        }

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "RangeRegistry":
        """Create a registry and load ranges from a YAML file."""
        registry = cls()
        registry.load_file(path)
        return registry

    def __contains__(self, name: str) -> bool:
        return self.has(name)

    def __iter__(self):
        return iter(self.list())

    def __len__(self) -> int:
        return len(self.list())
