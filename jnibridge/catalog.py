"""JSON function-pair catalog parser"""

import json
from dataclasses import dataclass, field

from .errors import CatalogError
from .types import ConversionRule, FunctionPair, FunctionSignature, TypeDescriptor


@dataclass
class Catalog:
    """Parsed catalog: extra type descriptors and the ordered pairs"""
    types: list[TypeDescriptor] = field(default_factory=list)
    pairs: list[FunctionPair] = field(default_factory=list)


class CatalogParser:
    """Parses a catalog document"""

    def __init__(self, content: str):
        try:
            self.document = json.loads(content)
        except json.JSONDecodeError as exc:
            raise CatalogError(f"invalid JSON: {exc}") from exc
        if not isinstance(self.document, dict):
            raise CatalogError("catalog root must be an object")

    def parse(self) -> Catalog:
        result = Catalog()
        result.types = [self._parse_type(t) for t in self._entries("types")]
        result.pairs = [self._parse_pair(f) for f in self._entries("functions")]
        return result

    def _entries(self, key: str) -> list:
        entries = self.document.get(key, [])
        if not isinstance(entries, list) or not all(isinstance(e, dict) for e in entries):
            raise CatalogError(f"'{key}' must be a list of objects")
        return entries

    def _parse_type(self, entry: dict) -> TypeDescriptor:
        name = self._require(entry, "name", "type")
        where = f"type '{name}'"
        from_native = entry.get("from_native")
        to_native = entry.get("to_native")
        # sentinel value, required
        default = entry.get("default")
        if default is None or isinstance(default, (bool, list, dict)) or str(default) == "":
            raise CatalogError(f"{where}: 'default' must be a string or number")
        return TypeDescriptor(
            name=name,
            native=self._require(entry, "native", where),
            from_native=ConversionRule(self._rule(from_native, where)) if from_native else None,
            to_native=ConversionRule(self._rule(to_native, where)) if to_native else None,
            default=str(default),
        )

    def _parse_pair(self, entry: dict) -> FunctionPair:
        symbol = self._require(entry, "jni_signature", "function")
        return FunctionPair(
            native=self._parse_signature(self._require_object(entry, "native", symbol), symbol),
            actual=self._parse_signature(self._require_object(entry, "actual", symbol), symbol),
            jni_signature=symbol,
        )

    def _parse_signature(self, entry: dict, where: str) -> FunctionSignature:
        params = entry.get("params", [])
        if not isinstance(params, list) or not all(isinstance(p, str) for p in params):
            raise CatalogError(f"{where}: 'params' must be a list of type names")
        return FunctionSignature(
            name=self._require(entry, "name", where),
            parameters=tuple(params),
            return_type=self._require(entry, "returns", where),
        )

    def _rule(self, template, where: str) -> str:
        if not isinstance(template, str):
            raise CatalogError(f"{where}: conversion rules must be strings")
        return template

    def _require_object(self, entry: dict, key: str, where: str) -> dict:
        if not isinstance(entry.get(key), dict):
            raise CatalogError(f"{where}: '{key}' must be an object")
        return entry[key]

    def _require(self, entry: dict, key: str, where: str) -> str:
        """Required non-empty string field"""
        if key not in entry:
            raise CatalogError(f"{where}: missing '{key}'")
        value = entry[key]
        if not isinstance(value, str) or not value:
            raise CatalogError(f"{where}: '{key}' must be a non-empty string")
        return value
