"""Bridge Generator - builds one bridge function per function pair"""

import logging
from typing import Iterable, Optional

from .errors import (
    DuplicateSymbolError,
    SignatureMismatchError,
    UnknownTypeError,
    UnsupportedConversionError,
)
from .type_registry import TypeRegistry
from .types import (
    ContainmentScope,
    Conversion,
    FunctionPair,
    GeneratedFunction,
    ImplCall,
    LocalBinding,
    Parameter,
    PlatformInit,
)

logger = logging.getLogger(__name__)

ENV_PARAM = "env"
CALLER_PARAM = "clazz"
RETURN_VALUE_NAME = "callResult"


def local_name(name: str) -> str:
    """Name of the local holding the converted value of ``name``"""
    return f"local{name[0].upper()}{name[1:]}"


class BridgeGenerator:
    """Turns function pairs into generated bridge functions.

    Pure: nothing is written here, and every pair is validated before any
    function is returned, so a bad catalog never produces partial output.
    """

    def __init__(self, registry: TypeRegistry, env_type: Optional[str] = None,
                 caller_type: Optional[str] = None):
        self.registry = registry
        self.env_type = env_type or registry.env_type
        self.caller_type = caller_type or registry.caller_type

    def generate(self, pairs: Iterable[FunctionPair]) -> list[GeneratedFunction]:
        """Generate bridges for the whole catalog, in catalog order"""
        functions = []
        symbols = set()
        for pair in pairs:
            if pair.jni_signature in symbols:
                raise DuplicateSymbolError(f"symbol '{pair.jni_signature}' is exported twice")
            symbols.add(pair.jni_signature)
            functions.append(self.generate_function(pair))
        logger.info("Generated %d bridge functions", len(functions))
        return functions

    def generate_function(self, pair: FunctionPair) -> GeneratedFunction:
        """Generate a single bridge"""
        self._validate(pair)

        env = Parameter(ENV_PARAM, self.env_type)
        params = [Parameter(f"p{i}", t) for i, t in enumerate(pair.native.parameters)]

        bindings = []
        arguments = []
        for param, actual_type in zip(params, pair.actual.parameters):
            descriptor = self.registry.lookup(actual_type)
            if descriptor.from_native is None:
                arguments.append(param.name)
                continue
            name = local_name(param.name)
            bindings.append(LocalBinding(name, Conversion(descriptor.from_native, env.name, param.name)))
            arguments.append(name)

        bindings.append(LocalBinding(RETURN_VALUE_NAME, ImplCall(pair.actual.name, tuple(arguments))))

        # now convert back if necessary
        return_descriptor = self.registry.lookup(pair.actual.return_type)
        result = RETURN_VALUE_NAME
        if return_descriptor.to_native is not None:
            result = local_name(RETURN_VALUE_NAME)
            bindings.append(LocalBinding(result, Conversion(return_descriptor.to_native, env.name, RETURN_VALUE_NAME)))

        scope = ContainmentScope(default=return_descriptor.default, bindings=tuple(bindings), result=result)
        logger.debug("Bridge %s -> %s", pair.jni_signature, pair.actual.name)
        return GeneratedFunction(
            symbol=pair.jni_signature,
            name=pair.actual.name,
            parameters=(env, Parameter(CALLER_PARAM, self.caller_type), *params),
            return_type=pair.native.return_type,
            body=(PlatformInit(), scope),
        )

    def _validate(self, pair: FunctionPair):
        native, actual = pair.native, pair.actual
        where = f"'{pair.jni_signature}'"

        if len(native.parameters) != len(actual.parameters):
            raise SignatureMismatchError(
                f"{where}: native signature has {len(native.parameters)} parameters, "
                f"actual has {len(actual.parameters)}"
            )

        for type_name in (*actual.parameters, actual.return_type):
            if type_name not in self.registry:
                raise UnknownTypeError(type_name, where)
        for type_name in (*native.parameters, native.return_type):
            if not self.registry.is_native_type(type_name):
                raise UnknownTypeError(type_name, where)

        for i, (native_type, actual_type) in enumerate(zip(native.parameters, actual.parameters)):
            descriptor = self.registry.lookup(actual_type)
            if descriptor.native != native_type:
                raise SignatureMismatchError(
                    f"{where}: parameter {i} is '{native_type}' but '{actual_type}' "
                    f"is passed natively as '{descriptor.native}'"
                )
            if descriptor.from_native is None and descriptor.native != descriptor.name:
                raise UnsupportedConversionError(
                    f"{where}: '{actual_type}' cannot be converted from '{descriptor.native}'"
                )

        descriptor = self.registry.lookup(actual.return_type)
        if descriptor.native != native.return_type:
            raise SignatureMismatchError(
                f"{where}: return type is '{native.return_type}' but '{actual.return_type}' "
                f"is returned natively as '{descriptor.native}'"
            )
        if descriptor.to_native is None and descriptor.native != descriptor.name:
            raise UnsupportedConversionError(
                f"{where}: '{actual.return_type}' cannot be converted to '{descriptor.native}'"
            )
