from pathlib import Path

import pytest

from progen.cli.arguments import CommandLine
from progen.cli.runner import build_configuration, run_generation, summarize
from progen.core.config import GeneratorConfiguration
from progen.core.errors import (
    ConfigurationError,
    InvalidProjectRoot,
    MissingOutputArgument,
)


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    (tmp_path / "lib").mkdir()
    (tmp_path / "lib" / "lib.h").write_text("\n", encoding="utf-8")
    (tmp_path / "lib" / "lib.c").write_text("\n", encoding="utf-8")
    (tmp_path / "main.cpp").write_text("\n", encoding="utf-8")
    return tmp_path


def test_run_generation_on_temp_tree(tree: Path):
    descriptor = run_generation(str(tree / "demo.pro"))

    assert descriptor.root_directory == tree
    assert descriptor.output_path == tree / "demo.pro"
    assert descriptor.result.headers == [str(tree / "lib" / "lib.h")]
    assert (tree / "demo.pro").read_text(encoding="utf-8").startswith("TEMPLATE = app\n")


def test_run_generation_relative_output(tree: Path, monkeypatch):
    monkeypatch.chdir(tree / "lib")

    descriptor = run_generation("lib.pro")

    assert descriptor.root_directory == tree / "lib"
    assert (tree / "lib" / "lib.pro").exists()


def test_run_generation_is_deterministic(tree: Path):
    output = tree / "demo.pro"

    run_generation(str(output))
    first = output.read_bytes()
    run_generation(str(output))

    assert output.read_bytes() == first


def test_run_generation_requires_output():
    with pytest.raises(MissingOutputArgument):
        run_generation(None)

    with pytest.raises(MissingOutputArgument):
        run_generation("")


def test_run_generation_missing_root(tmp_path: Path):
    with pytest.raises(InvalidProjectRoot):
        run_generation(str(tmp_path / "nope" / "demo.pro"))

    assert not (tmp_path / "nope").exists()


def test_build_configuration_from_switches():
    config = build_configuration(
        CommandLine(output_path="x.pro", verbose=True, strict=True, follow_symlinks=False)
    )

    assert config.log_level == "DEBUG"
    assert config.strict is True
    assert config.follow_symlinks is False


def test_build_configuration_log_level():
    config = build_configuration(CommandLine(output_path="x.pro", log_level="info"))
    assert config.log_level == "INFO"


def test_build_configuration_rejects_unknown_level():
    with pytest.raises(ConfigurationError):
        build_configuration(CommandLine(output_path="x.pro", log_level="loud"))


def test_summarize(tree: Path):
    descriptor = run_generation(str(tree / "demo.pro"), GeneratorConfiguration())
    assert summarize(descriptor).endswith("3 files (1 headers, 2 sources)")


def test_build_configuration_rejects_missing_level():
    with pytest.raises(ConfigurationError):
        build_configuration(CommandLine(output_path="x.pro", log_level=""))

    with pytest.raises(ConfigurationError):
        build_configuration(CommandLine(output_path="x.pro", verbose=True, log_level=""))
