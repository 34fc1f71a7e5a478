"""Tests for compiler argument assembly."""

from pathlib import Path

from thriftgen.core.arguments import build_args, has_generator_flag


class TestBuildArgs:
    """Tests for build_args invariants."""

    def test_defaults(self) -> None:
        """Invariant: --out comes first, followed by the default --gen."""
        assert build_args(Path("src"), []) == ["--out", "src", "--gen", "erl"]

    def test_user_generator_not_duplicated(self) -> None:
        args = build_args(Path("src"), ["--gen", "java"])

        assert args == ["--out", "src", "--gen", "java"]
        assert args.count("--gen") == 1

    def test_user_generator_equals_form(self) -> None:
        assert build_args(Path("src"), ["--gen=py:new_style"]) == [
            "--out",
            "src",
            "--gen=py:new_style",
        ]

    def test_user_options_appended_in_order(self) -> None:
        args = build_args(Path("out"), ["-I", "include", "--strict", "-r"])

        assert args == ["--out", "out", "--gen", "erl", "-I", "include", "--strict", "-r"]

    def test_custom_default_generator(self) -> None:
        assert build_args(Path("gen"), [], generator="py") == ["--out", "gen", "--gen", "py"]

    def test_generator_after_other_options(self) -> None:
        args = build_args(Path("src"), ["-v", "--gen", "erl:legacynames"])

        assert args == ["--out", "src", "-v", "--gen", "erl:legacynames"]

    def test_schema_path_not_included(self) -> None:
        args = build_args(Path("src"), [])
        assert not any(a.endswith(".thrift") for a in args)


class TestHasGeneratorFlag:
    """Tests for has_generator_flag."""

    def test_detects_flag(self) -> None:
        assert has_generator_flag(["--gen", "erl"])
        assert has_generator_flag(["--gen=erl"])

    def test_similar_flags_ignored(self) -> None:
        assert not has_generator_flag(["--generate", "--out", "gen"])
        assert not has_generator_flag([])
