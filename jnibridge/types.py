"""Data types for bridge generation"""

from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass(frozen=True)
class ConversionRule:
    """Expression template in the target language.

    ``{env}`` is replaced by the environment handle name and ``{value}`` by the
    name being converted. Literal braces must be doubled.
    """
    template: str

    def render(self, env: str, value: str) -> str:
        return self.template.format(env=env, value=value)


@dataclass(frozen=True)
class TypeDescriptor:
    """High-level type and how it crosses the native boundary"""
    name: str
    native: str
    from_native: Optional[ConversionRule] = None
    to_native: Optional[ConversionRule] = None
    default: str = ""

    @property
    def is_pass_through(self) -> bool:
        return self.from_native is None and self.to_native is None


@dataclass(frozen=True)
class FunctionSignature:
    """Function name, ordered parameter types and return type"""
    name: str
    parameters: tuple[str, ...] = ()
    return_type: str = ""


@dataclass(frozen=True)
class FunctionPair:
    """Native entry point paired with its high-level implementation"""
    native: FunctionSignature
    actual: FunctionSignature
    jni_signature: str


# Generated function tree


@dataclass(frozen=True)
class Parameter:
    name: str
    type: str


@dataclass(frozen=True)
class Conversion:
    """Application of a conversion rule to a name"""
    rule: ConversionRule
    env: str
    source: str

    def render(self) -> str:
        return self.rule.render(self.env, self.source)


@dataclass(frozen=True)
class ImplCall:
    """Call of the high-level implementation"""
    function: str
    arguments: tuple[str, ...] = ()


@dataclass(frozen=True)
class LocalBinding:
    name: str
    value: Union[Conversion, ImplCall]


@dataclass(frozen=True)
class PlatformInit:
    """Thread/platform attach, always the first statement"""


@dataclass(frozen=True)
class ContainmentScope:
    """Error boundary evaluating to ``result``, or ``default`` on failure"""
    default: str
    bindings: tuple[LocalBinding, ...] = ()
    result: str = ""


@dataclass(frozen=True)
class GeneratedFunction:
    """One bridge function, ready for serialization"""
    symbol: str
    name: str
    parameters: tuple[Parameter, ...]
    return_type: str
    body: tuple[Union[PlatformInit, ContainmentScope], ...] = field(default_factory=tuple)

    @property
    def env(self) -> Parameter:
        return self.parameters[0]

    @property
    def scope(self) -> ContainmentScope:
        return next(s for s in self.body if isinstance(s, ContainmentScope))
