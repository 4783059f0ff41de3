"""Tests for the generate_bridges command line script."""

import importlib.util
import json
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[1] / "bin" / "generate_bridges.py"


@pytest.fixture(scope="module")
def cli():
    spec = importlib.util.spec_from_file_location("generate_bridges", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_generates_kotlin_from_sample(cli, sample_catalog_path, tmp_path, capsys):
    output = tmp_path / "generated" / "GeneratedJni.kt"
    code = cli.main([
        str(sample_catalog_path), "-o", str(output),
        "--package", "com.birbit.sqlite3.internal", "--receiver", "SqliteApi",
    ])

    assert code == 0
    text = output.read_text(encoding="utf-8")
    assert text.count("@CName(") == 9
    assert "package com.birbit.sqlite3.internal" in text
    assert "        val localCallResult = callResult.code" in text
    assert f"Generated: {output}" in capsys.readouterr().out


def test_check_mode(cli, sample_catalog_path, tmp_path):
    output = tmp_path / "GeneratedJni.kt"
    args = ["--catalog", str(sample_catalog_path), "-o", str(output), "--package", "p"]

    assert cli.main(args + ["--check"]) == 1
    assert not output.exists()
    assert cli.main(args) == 0
    assert cli.main(args + ["--check"]) == 0


def test_generates_python_target(cli, tmp_path):
    catalog = tmp_path / "catalog.json"
    catalog.write_text(json.dumps({"functions": [{
        "jni_signature": "Java_Api_nativeAdd",
        "native": {"name": "nativeAdd", "params": ["int", "int"], "returns": "int"},
        "actual": {"name": "add", "params": ["int", "int"], "returns": "int"},
    }]}), encoding="utf-8")
    output = tmp_path / "bridges.py"

    code = cli.main([str(catalog), "--target", "python", "-o", str(output),
                     "--receiver", "api", "--import", "import api"])
    assert code == 0
    text = output.read_text(encoding="utf-8")
    assert "import api" in text.splitlines()
    assert 'def Java_Api_nativeAdd(env: "JNIEnv", clazz: "jclass", p0: "int", p1: "int") -> "int":' in text


def test_unknown_type_writes_nothing(cli, tmp_path, capsys):
    catalog = tmp_path / "catalog.json"
    catalog.write_text(json.dumps({"functions": [{
        "jni_signature": "Java_Api_nativeOpen",
        "native": {"name": "nativeOpen", "params": ["jstring?"], "returns": "jlong"},
        "actual": {"name": "open", "params": ["String"], "returns": "Connection"},
    }]}), encoding="utf-8")
    output = tmp_path / "out" / "GeneratedJni.kt"

    assert cli.main([str(catalog), "-o", str(output)]) == 1
    assert not output.exists()
    assert not output.parent.exists()
    assert "unknown type 'Connection'" in capsys.readouterr().err


def test_missing_catalog_argument(cli, tmp_path):
    with pytest.raises(SystemExit):
        cli.main(["-o", str(tmp_path / "out.kt")])
