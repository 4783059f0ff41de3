#!/usr/bin/env python3
"""
Native Bridge Generator

Reads a function-pair catalog and generates one bridge per pair:
  1. Kotlin/Native JNI entry points (default)
  2. Python bridge functions

Usage:
    python generate_bridges.py catalog.json --output generated/GeneratedJni.kt --package com.example
    python generate_bridges.py catalog.json --target python --output generated/bridges.py --receiver api
"""

import argparse
import logging
import sys
import time
from pathlib import Path

# Add parent directory to path so jnibridge package can be found
sys.path.insert(0, str(Path(__file__).parent.parent))

from jnibridge import (
    BridgeGenerator,
    CatalogParser,
    GenerationError,
    KotlinEmitter,
    PythonEmitter,
    TypeRegistry,
)
from jnibridge.kotlin_emitter import DEFAULT_IMPORTS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate native bridges from a function-pair catalog")
    parser.add_argument("catalog_file", nargs="?", help="Path to catalog JSON file (positional)")
    parser.add_argument("--catalog", help="Path to catalog JSON file (alternative)")
    parser.add_argument("--output", "-o", required=True, help="Generated source file")
    parser.add_argument("--target", choices=["kotlin", "python"], default="kotlin", help="Output language")
    parser.add_argument("--package", default="", help="Kotlin package of the generated file")
    parser.add_argument("--receiver", default="", help="Object or module holding the implementations")
    parser.add_argument("--import", dest="imports", action="append", default=[],
                        help="Extra import (Kotlin: qualified name, Python: import statement)")
    parser.add_argument("--check", action="store_true", help="Fail if the output is stale, write nothing")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def main(argv=None) -> int:
    start_time = time.perf_counter()

    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Support both positional and --catalog argument
    catalog_file = args.catalog_file or args.catalog
    if not catalog_file:
        parser.error("catalog file is required (positional or --catalog)")

    output = Path(args.output)

    if args.target == "kotlin":
        registry = TypeRegistry.kotlin_defaults()
        emitter = KotlinEmitter(
            package=args.package or "generated",
            receiver=args.receiver,
            imports=DEFAULT_IMPORTS + tuple(args.imports),
        )
    else:
        registry = TypeRegistry.python_defaults()
        emitter = PythonEmitter(receiver=args.receiver, imports=args.imports)

    try:
        catalog = CatalogParser(Path(catalog_file).read_text(encoding="utf-8")).parse()
        for descriptor in catalog.types:
            registry.register(descriptor)
        functions = BridgeGenerator(registry).generate(catalog.pairs)
        changed = emitter.emit(functions, output, check=args.check)
    except (GenerationError, OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.check:
        if changed:
            print(f"Stale: {output}", file=sys.stderr)
            return 1
        print(f"Up to date: {output}")
    else:
        print(f"Generated: {output}")

    elapsed = time.perf_counter() - start_time
    print(f"Generation completed in {elapsed*1000:.2f} ms")
    return 0


if __name__ == "__main__":
    sys.exit(main())
