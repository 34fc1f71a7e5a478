"""Argument assembly for thrift compiler invocations."""

from collections.abc import Sequence
from pathlib import Path

from ..constants import DEFAULT_GENERATOR, GEN_FLAG, OUT_FLAG


def has_generator_flag(options: Sequence[str]) -> bool:
    """Return True if options already select a generator."""
    return any(opt == GEN_FLAG or opt.startswith(f"{GEN_FLAG}=") for opt in options)


def build_args(
    output_dir: Path,
    user_options: Sequence[str] = (),
    generator: str = DEFAULT_GENERATOR,
) -> list[str]:
    """Build the argument list shared by every schema compiled in a run.

    ``--out <dir>`` always comes first, followed by ``--gen <generator>``
    unless user_options picks a generator itself, then user_options in order.
    The schema path is appended per invocation.
    """
    args = [OUT_FLAG, str(output_dir)]
    if not has_generator_flag(user_options):
        args.extend([GEN_FLAG, generator])
    args.extend(user_options)
    return args
