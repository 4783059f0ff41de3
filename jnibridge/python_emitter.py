"""Python Emitter - generates Python bridge functions"""

from typing import Sequence

from .emitter import GENERATOR_NAME, ArtifactEmitter
from .errors import GenerationError
from .types import (
    ContainmentScope,
    Conversion,
    GeneratedFunction,
    ImplCall,
    LocalBinding,
    PlatformInit,
)

RUNTIME_MODULE = "jnibridge.runtime"
BODY_NAME = "_bridge"

INDENT = "    "


class PythonEmitter(ArtifactEmitter):
    """Renders bridges as a Python module.

    Each bridge is a module-level function named after its exported symbol,
    suitable for registration as a native callback. Type annotations are the
    native type names, kept as strings.
    """

    def __init__(self, receiver: str = "", imports: Sequence[str] = ()):
        self.receiver = receiver
        self.imports = tuple(imports)

    def render(self, functions: Sequence[GeneratedFunction]) -> str:
        for func in functions:
            if not func.symbol.isidentifier():
                raise GenerationError(f"symbol '{func.symbol}' is not a valid Python identifier")

        lines = [
            '"""',
            "AUTO-GENERATED native bridge functions",
            f"DO NOT EDIT - Generated by {GENERATOR_NAME}",
            '"""',
            "# flake8: noqa",
            "# pylint: skip-file",
            "# fmt: off",
            "",
            f"from {RUNTIME_MODULE} import init_platform, run_with_exception_conversion",
        ]
        lines.extend(self.imports)
        lines.append("")

        for func in functions:
            lines.append("")
            lines.extend(self._function(func))

        return "\n".join(lines).rstrip("\n") + "\n"

    def _function(self, func: GeneratedFunction) -> list[str]:
        env = func.env
        params = ", ".join(f'{p.name}: "{p.type}"' for p in func.parameters)
        lines = [f'def {func.symbol}({params}) -> "{func.return_type}":']
        for statement in func.body:
            if isinstance(statement, PlatformInit):
                lines.append(f"{INDENT}init_platform()")
            elif isinstance(statement, ContainmentScope):
                lines.extend(self._scope(env.name, statement))
        lines.append("")
        return lines

    def _scope(self, env: str, scope: ContainmentScope) -> list[str]:
        lines = ["", f"{INDENT}def {BODY_NAME}():"]
        for binding in scope.bindings:
            lines.append(f"{INDENT * 2}{binding.name} = {self._expression(binding)}")
        lines.append(f"{INDENT * 2}return {scope.result}")
        lines.append("")
        lines.append(f"{INDENT}return run_with_exception_conversion({env}, {scope.default}, {BODY_NAME})")
        return lines

    def _expression(self, binding: LocalBinding) -> str:
        value = binding.value
        if isinstance(value, Conversion):
            return value.render()
        if isinstance(value, ImplCall):
            target = f"{self.receiver}.{value.function}" if self.receiver else value.function
            return f"{target}({', '.join(value.arguments)})"
        raise TypeError(f"unsupported binding value: {value!r}")
