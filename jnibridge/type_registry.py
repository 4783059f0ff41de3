"""Type registry mapping high-level types to their native representation"""

import logging
from typing import Iterable, Iterator, Optional

from .errors import GenerationError, UnknownTypeError, UnsupportedConversionError
from .types import ConversionRule, TypeDescriptor

logger = logging.getLogger(__name__)


def _descriptor(name: str, native: str, default: str,
                from_native: Optional[str] = None,
                to_native: Optional[str] = None) -> TypeDescriptor:
    return TypeDescriptor(
        name=name,
        native=native,
        from_native=ConversionRule(from_native) if from_native else None,
        to_native=ConversionRule(to_native) if to_native else None,
        default=default,
    )


class TypeRegistry:
    """Maps high-level types to native types, conversion rules and sentinels"""

    # Kotlin/Native JNI bindings (SQLite)
    KOTLIN_TYPES = (
        _descriptor('Int', 'Int', '0'),
        _descriptor('Long', 'Long', '0L'),
        _descriptor('Double', 'Double', '0.0'),
        _descriptor('Unit', 'Unit', 'Unit'),
        _descriptor('Boolean', 'jboolean', 'JNI_FALSE',
                    from_native='{value}.toKBoolean()',
                    to_native='{value}.toJBoolean()'),
        _descriptor('String', 'jstring?', 'null',
                    from_native='checkNotNull({value}.toKString({env}))',
                    to_native='{value}.toJString({env})'),
        _descriptor('ByteArray', 'jbyteArray?', 'null',
                    from_native='{value}?.toKByteArray({env})',
                    to_native='{value}?.toJByteArray({env})'),
        _descriptor('DbRef', 'jlong', '0L',
                    from_native='DbRef.fromJni({value})',
                    to_native='{value}.toJni()'),
        _descriptor('StmtRef', 'jlong', '0L',
                    from_native='StmtRef.fromJni({value})',
                    to_native='{value}.toJni()'),
        _descriptor('ResultCode', 'jint', '-1',
                    from_native='ResultCode({value})',
                    to_native='{value}.value'),
        _descriptor('ColumnType', 'jint', '-1',
                    to_native='{value}.value'),
    )

    # Python bridges (ctypes-style callbacks)
    PYTHON_TYPES = (
        _descriptor('int', 'int', '0'),
        _descriptor('float', 'float', '0.0'),
        _descriptor('None', 'None', 'None'),
        _descriptor('bytes', 'bytes', 'None'),
        _descriptor('bool', 'int', '0',
                    from_native='bool({value})',
                    to_native='int({value})'),
        _descriptor('str', 'bytes', 'None',
                    from_native='{value}.decode("utf-8")',
                    to_native='{value}.encode("utf-8")'),
    )

    def __init__(self, descriptors: Iterable[TypeDescriptor] = (), env_type: str = "JNIEnv",
                 caller_type: str = "jclass"):
        self.env_type = env_type
        self.caller_type = caller_type
        self._types: dict[str, TypeDescriptor] = {}
        for descriptor in descriptors:
            self.register(descriptor)

    @classmethod
    def kotlin_defaults(cls) -> 'TypeRegistry':
        return cls(cls.KOTLIN_TYPES, env_type="CPointer<JNIEnvVar>")

    @classmethod
    def python_defaults(cls) -> 'TypeRegistry':
        return cls(cls.PYTHON_TYPES)

    def register(self, descriptor: TypeDescriptor) -> None:
        """Add or replace a descriptor.

        A descriptor without any conversion rule is a pass-through, which is
        only valid when its native and high-level types are the same. Every
        descriptor needs a default, the value returned when a bridge fails.
        """
        if not descriptor.default:
            raise GenerationError(f"type '{descriptor.name}' has no default value")
        if descriptor.is_pass_through and descriptor.native != descriptor.name:
            raise UnsupportedConversionError(
                f"type '{descriptor.name}' has no conversion rules but its native "
                f"type is '{descriptor.native}'"
            )
        if descriptor.name in self._types:
            logger.debug("Replacing registered type %s", descriptor.name)
        self._types[descriptor.name] = descriptor

    def lookup(self, type_name: str) -> TypeDescriptor:
        try:
            return self._types[type_name]
        except KeyError:
            raise UnknownTypeError(type_name) from None

    def needs_argument_conversion(self, type_name: str) -> bool:
        return self.lookup(type_name).from_native is not None

    def needs_return_conversion(self, type_name: str) -> bool:
        return self.lookup(type_name).to_native is not None

    def is_native_type(self, type_name: str) -> bool:
        """Check if any registered type uses this as its native representation"""
        return any(d.native == type_name for d in self._types.values())

    def __contains__(self, type_name: str) -> bool:
        return type_name in self._types

    def __iter__(self) -> Iterator[TypeDescriptor]:
        return iter(self._types.values())

    def __len__(self) -> int:
        return len(self._types)
