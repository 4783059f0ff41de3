"""
Native Bridge Generator Package

Takes a catalog of function pairs (native entry point + high-level
implementation) and generates one bridge per pair that:
  1. Attaches the calling thread to the runtime
  2. Converts native arguments to high-level values
  3. Calls the implementation and converts the result back
  4. Contains every error, returning a sentinel value instead

Bridges can be emitted as Kotlin/Native JNI source or as Python.
"""

from .types import (
    ConversionRule, TypeDescriptor, FunctionSignature, FunctionPair,
    Parameter, Conversion, ImplCall, LocalBinding, PlatformInit,
    ContainmentScope, GeneratedFunction,
)
from .errors import (
    GenerationError, CatalogError, UnknownTypeError, SignatureMismatchError,
    UnsupportedConversionError, DuplicateSymbolError, BoundaryCallError,
)
from .type_registry import TypeRegistry
from .bridge_generator import BridgeGenerator, local_name
from .catalog import Catalog, CatalogParser
from .emitter import ArtifactEmitter, write_atomic
from .kotlin_emitter import KotlinEmitter
from .python_emitter import PythonEmitter

__all__ = [
    'ConversionRule', 'TypeDescriptor', 'FunctionSignature', 'FunctionPair',
    'Parameter', 'Conversion', 'ImplCall', 'LocalBinding', 'PlatformInit',
    'ContainmentScope', 'GeneratedFunction',
    'GenerationError', 'CatalogError', 'UnknownTypeError', 'SignatureMismatchError',
    'UnsupportedConversionError', 'DuplicateSymbolError', 'BoundaryCallError',
    'TypeRegistry', 'BridgeGenerator', 'local_name',
    'Catalog', 'CatalogParser',
    'ArtifactEmitter', 'write_atomic', 'KotlinEmitter', 'PythonEmitter',
]
