"""
Parser for declarative range definitions.

Turns plain mappings (typically loaded from YAML) into Range objects.
A definition has exactly one source key and optional modifier keys.

Example YAML:

    evens:
      description: Even numbers
      range: {start: 0, step: 2}

    first_letters:
      take: 7
      cycle:
        over: [a, b, c]

    pairs:
      zip:
        - ref: naturals
        - over: [x, y, z]

Sources:  over, range, ref, generate, concat, zip, cycle, reverse
Modifiers (applied in this order): stride, take
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional

import yaml

from rangekit.ranges import builders
from rangekit.ranges.core import Range, RangeError

if TYPE_CHECKING:
    from rangekit.ranges.registry import RangeRegistry

logger = logging.getLogger(__name__)

SOURCE_KEYS = ("over", "range", "ref", "generate", "concat", "zip", "cycle", "reverse")
MODIFIER_KEYS = ("stride", "take")
METADATA_KEYS = ("description",)


class RangeParseError(RangeError):
    """Error parsing a range definition."""
    pass


def parse_range_text(text: str) -> Dict[str, Any]:
    """
    Parse YAML text containing named range definitions.

    Returns:
        Dictionary mapping names to raw definitions
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise RangeParseError(f"Invalid YAML: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RangeParseError(f"Range definitions must be a mapping, got {type(data).__name__}")
    return data


def parse_range(definition: Any, registry: Optional["RangeRegistry"] = None) -> Range:
    """
    Parse a single range definition into a Range.

    Args:
        definition: Mapping, or YAML text of a mapping
        registry: Optional registry for resolving `ref` and `generate` names
    """
    if isinstance(definition, str):
        try:
            definition = yaml.safe_load(definition)
        except yaml.YAMLError as e:
            raise RangeParseError(f"Invalid YAML: {e}") from e
    return RangeParser(registry).parse(definition)


class RangeParser:
    """
    Parser for range definitions.

    Names in `ref` and `generate` are resolved through the registry, so a
    parser without one accepts only self-contained definitions.
    """

    def __init__(self, registry: Optional["RangeRegistry"] = None):
        self.registry = registry
        self._resolving: List[str] = []

    def parse(self, definition: Any) -> Range:
        """Parse a definition into a Range."""
        if not isinstance(definition, dict):
            raise RangeParseError(f"Range definition must be a mapping, got {type(definition).__name__}")

        unknown = set(definition) - set(SOURCE_KEYS) - set(MODIFIER_KEYS) - set(METADATA_KEYS)
        if unknown:
            raise RangeParseError(f"Unknown keys in range definition: {sorted(unknown)}")

        sources = [key for key in SOURCE_KEYS if key in definition]
        if len(sources) != 1:
            raise RangeParseError(
                f"Range definition needs exactly one of {', '.join(SOURCE_KEYS)}; got {sources or 'none'}"
            )

        key = sources[0]
        rng = getattr(self, f"_parse_{key}")(definition[key])

        try:
            if "stride" in definition:
                rng = builders.stride(rng, definition["stride"])
            if "take" in definition:
                rng = builders.take(rng, definition["take"])
        except (RangeError, ValueError) as e:
            raise RangeParseError(f"Invalid modifier in {definition}: {e}") from e

        return rng

    def _parse_over(self, items: Any) -> Range:
        if not isinstance(items, list):
            raise RangeParseError(f"'over' needs a list, got {type(items).__name__}")
        return builders.over(items)

    def _parse_range(self, spec: Any) -> Range:
        if isinstance(spec, int) and not isinstance(spec, bool):
            args = {"start": spec}
        elif isinstance(spec, list):
            if not 1 <= len(spec) <= 3:
                raise RangeParseError(f"'range' list needs 1 to 3 items, got {spec}")
            args = dict(zip(("start", "end", "step"), spec))
        elif isinstance(spec, dict):
            args = spec
        else:
            raise RangeParseError(f"Invalid range definition: {spec!r}")

        unknown = set(args) - {"start", "end", "step"}
        if unknown:
            raise RangeParseError(f"Unknown keys in range: {sorted(unknown)}")

        try:
            return builders.range(args.get("start", 0), args.get("end"), args.get("step", 1))
        except (RangeError, ValueError) as e:
            raise RangeParseError(f"Invalid range {spec!r}: {e}") from e

    def _parse_ref(self, name: Any) -> Range:
        if self.registry is None:
            raise RangeParseError(f"Cannot resolve range reference '{name}': no registry")
        if name in self._resolving:
            chain = " -> ".join(self._resolving + [name])
            raise RangeParseError(f"Circular range reference: {chain}")

        definition = self.registry.definition(name)
        self._resolving.append(name)
        try:
            return self.parse(definition)
        finally:
            self._resolving.pop()

    def _parse_generate(self, name: Any) -> Range:
        if self.registry is None:
            raise RangeParseError(f"Cannot resolve producer '{name}': no registry")
        return builders.generate(self.registry.producer(name))

    def _parse_children(self, key: str, definitions: Any) -> List[Range]:
        if not isinstance(definitions, list):
            raise RangeParseError(f"'{key}' needs a list of definitions, got {type(definitions).__name__}")
        return [self.parse(child) for child in definitions]

    def _parse_concat(self, definitions: Any) -> Range:
        return builders.concat(*self._parse_children("concat", definitions))

    def _parse_zip(self, definitions: Any) -> Range:
        return builders.zip(*self._parse_children("zip", definitions))

    def _parse_cycle(self, definition: Any) -> Range:
        inner = self.parse(definition)
        try:
            return builders.cycle(inner)
        except RangeError as e:
            raise RangeParseError(f"Cannot cycle {inner!r}: {e}") from e

    def _parse_reverse(self, definition: Any) -> Range:
        inner = self.parse(definition)
        try:
            return builders.reverse(inner)
        except RangeError as e:
            raise RangeParseError(f"Cannot reverse {inner!r}: {e}") from e
