"""Kotlin Emitter - generates Kotlin/Native JNI entry points"""

from typing import Sequence

from .emitter import GENERATOR_NAME, ArtifactEmitter
from .types import (
    ContainmentScope,
    Conversion,
    GeneratedFunction,
    ImplCall,
    LocalBinding,
    PlatformInit,
)

DEFAULT_IMPORTS = (
    "kotlinx.cinterop.CPointer",
    "platform.android.JNIEnvVar",
    "platform.android.jboolean",
    "platform.android.jbyteArray",
    "platform.android.jclass",
    "platform.android.jint",
    "platform.android.jlong",
    "platform.android.jstring",
    "kotlin.native.CName",
)

SUPPRESSIONS = ("unused", "UNUSED_PARAMETER", "UnnecessaryVariable")

INDENT = "    "


class KotlinEmitter(ArtifactEmitter):
    """Renders bridges as a single Kotlin/Native source file.

    Every function is exported with ``@CName`` and delegates to
    ``<receiver>.<actual name>`` inside ``runWithJniExceptionConversion``.
    """

    def __init__(self, package: str, receiver: str = "", imports: Sequence[str] = DEFAULT_IMPORTS):
        self.package = package
        self.receiver = receiver
        self.imports = tuple(imports)

    def render(self, functions: Sequence[GeneratedFunction]) -> str:
        suppress = ", ".join(f'"{s}"' for s in SUPPRESSIONS)
        lines = [
            f"// Generated by {GENERATOR_NAME}, do not edit!",
            f"@file:Suppress({suppress})",
            "",
            f"package {self.package}",
            "",
        ]
        if self.imports:
            lines.extend(f"import {name}" for name in self.imports)
            lines.append("")

        for func in functions:
            lines.extend(self._function(func))

        return "\n".join(lines).rstrip("\n") + "\n"

    def _function(self, func: GeneratedFunction) -> list[str]:
        env = func.env
        signature = ", ".join(f"{p.name}: {p.type}" for p in func.parameters)
        lines = [
            f'@CName("{func.symbol}")',
            f"fun {func.name}({signature}): {func.return_type} {{",
        ]
        for statement in func.body:
            if isinstance(statement, PlatformInit):
                lines.append(f"{INDENT}initPlatform()")
            elif isinstance(statement, ContainmentScope):
                lines.extend(self._scope(env.name, statement))
        lines.extend(["}", ""])
        return lines

    def _scope(self, env: str, scope: ContainmentScope) -> list[str]:
        lines = [f"{INDENT}return runWithJniExceptionConversion({env}, {scope.default}) {{"]
        for binding in scope.bindings:
            lines.append(f"{INDENT * 2}val {binding.name} = {self._expression(binding)}")
        lines.append(f"{INDENT * 2}{scope.result}")
        lines.append(f"{INDENT}}}")
        return lines

    def _expression(self, binding: LocalBinding) -> str:
        value = binding.value
        if isinstance(value, Conversion):
            return value.render()
        if isinstance(value, ImplCall):
            target = f"{self.receiver}.{value.function}" if self.receiver else value.function
            return f"{target}({', '.join(value.arguments)})"
        raise TypeError(f"unsupported binding value: {value!r}")
