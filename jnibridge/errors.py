"""Errors raised while generating bridges, and by generated bridges"""


class GenerationError(Exception):
    """Base class for errors that abort a generation run"""


class CatalogError(GenerationError):
    """Catalog file is malformed"""


class UnknownTypeError(GenerationError):
    """A signature references a type with no registry entry"""

    def __init__(self, type_name: str, where: str = ""):
        self.type_name = type_name
        self.where = where
        message = f"unknown type '{type_name}'"
        if where:
            message += f" in {where}"
        super().__init__(message)


class SignatureMismatchError(GenerationError):
    """Native and actual signatures of a pair do not line up"""


class UnsupportedConversionError(GenerationError):
    """A type is used in a direction it has no conversion rule for"""


class DuplicateSymbolError(GenerationError):
    """Two pairs export the same native symbol"""


class BoundaryCallError(Exception):
    """Error raised by a high-level implementation inside a bridge.

    Never propagates past the bridge; it is logged and the bridge returns
    the sentinel value for its return type.
    """

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"{type(cause).__name__}: {cause}")
