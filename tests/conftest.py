"""Shared pytest fixtures for jnibridge tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from jnibridge import (
    ConversionRule,
    FunctionPair,
    FunctionSignature,
    TypeDescriptor,
    TypeRegistry,
)

REPO_ROOT = Path(__file__).resolve().parents[1]
SAMPLE_CATALOG = REPO_ROOT / "samples" / "sqlite_catalog.json"


def load_bridges(source: str, **names) -> dict:
    """Execute a generated Python module with ``names`` in scope"""
    namespace = dict(names)
    exec(compile(source, "<bridges>", "exec", dont_inherit=True), namespace)
    return namespace


@pytest.fixture
def sqlite_registry() -> TypeRegistry:
    """DbRef both ways, String in only, StatusCode out only."""
    return TypeRegistry([
        TypeDescriptor(
            name="DbRef",
            native="NativePointer",
            from_native=ConversionRule("DbRef.fromJni({value})"),
            to_native=ConversionRule("{value}.toJni()"),
            default="NativePointer.NULL",
        ),
        TypeDescriptor(
            name="String",
            native="NativeString",
            from_native=ConversionRule("checkNotNull({value}.toKString({env}))"),
            default="null",
        ),
        TypeDescriptor(
            name="StatusCode",
            native="NativeInt",
            to_native=ConversionRule("{value}.toJni()"),
            default="-1",
        ),
    ])


@pytest.fixture
def prepare_stmt_pair() -> FunctionPair:
    return FunctionPair(
        native=FunctionSignature("prepareStmt", ("NativePointer", "NativeString"), "NativeInt"),
        actual=FunctionSignature("prepareStmt", ("DbRef", "String"), "StatusCode"),
        jni_signature="Java_com_birbit_sqlite3_internal_SqliteApi_nativePrepareStmt",
    )


@pytest.fixture
def python_registry() -> TypeRegistry:
    return TypeRegistry.python_defaults()


@pytest.fixture
def bridge_loader():
    return load_bridges


@pytest.fixture
def sample_catalog_path() -> Path:
    return SAMPLE_CATALOG
