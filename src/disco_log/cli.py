from __future__ import annotations

import argparse
import logging
import random
import sys
import threading
from collections.abc import Sequence

from disco_log.core.config import Config
from disco_log.core.models import TRACE_LEVEL, LevelFilter
from disco_log.core.paint import ColorFormat, InlineGradient, MultiLineGradient, Solid
from disco_log.core.sculpt import Json, RecordFormat, Simple
from disco_log.core.themes import theme_by_name
from disco_log.logger import AlreadyInstalledError, install, uninstall

_WORDS = (
    "lorem ipsum dolor sit amet consectetur adipiscing elit sed do eiusmod tempor "
    "incididunt ut labore et dolore magna aliqua ut enim ad minim veniam quis nostrud "
    "exercitation ullamco laboris nisi ut aliquip ex ea commodo consequat"
).split()

# weighted towards info, like a typical service
_LEVEL_WEIGHTS = (
    (TRACE_LEVEL, 1),
    (logging.DEBUG, 1),
    (logging.INFO, 11),
    (logging.WARNING, 1),
    (logging.ERROR, 1),
)


def _parse_level(s: str) -> LevelFilter:
    try:
        return LevelFilter.from_name(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _positive_int(s: str) -> int:
    try:
        value = int(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected an integer, got '{s}'") from e
    if value < 1:
        raise argparse.ArgumentTypeError("must be >= 1")
    return value


def _record_format(name: str) -> RecordFormat:
    return Json() if name == "json" else Simple()


def _color_format(name: str, steps: int) -> ColorFormat | None:
    if name == "solid":
        return Solid()
    if name == "inline":
        return InlineGradient(steps)
    if name == "multi-line":
        return MultiLineGradient(steps)
    return None


def _lipsum(rng: random.Random, n: int) -> str:
    return " ".join(rng.choice(_WORDS) for _ in range(n))


def log_sample_messages(n: int, *, seed: int | None = None, logger_name: str = "disco_log.demo") -> None:
    """Log ``n`` random lorem-ipsum messages at mixed levels."""
    log = logging.getLogger(logger_name)
    rng = random.Random(seed)
    levels = [lvl for lvl, _ in _LEVEL_WEIGHTS]
    weights = [w for _, w in _LEVEL_WEIGHTS]
    for _ in range(n):
        levelno = rng.choices(levels, weights=weights)[0]
        log.log(levelno, "%s", _lipsum(rng, rng.randrange(1, 20)))


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Log sample messages through the disco_log renderer.")
    p.add_argument("--level", type=_parse_level, default=LevelFilter.TRACE, help="off, error, warn, info, debug, trace")
    p.add_argument("--format", dest="record_format", choices=["simple", "json"], default="simple")
    p.add_argument("--color", choices=["none", "solid", "inline", "multi-line"], default="solid")
    p.add_argument("--steps", type=_positive_int, default=20, help="Gradient steps (default: 20)")
    p.add_argument("--theme", choices=["simple", "spectral"], default="spectral")
    p.add_argument("--no-stderr", dest="use_stderr", action="store_false", help="Write warnings/errors to stdout too")
    p.add_argument("--count", type=_positive_int, default=10, help="Messages per thread")
    p.add_argument("--threads", type=_positive_int, default=1, help="Number of logging threads")
    p.add_argument("--seed", type=int, default=None, help="Random seed for reproducible output")
    return p


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    config = Config(
        level=args.level,
        record_format=_record_format(args.record_format),
        color_format=_color_format(args.color, args.steps),
        theme=theme_by_name(args.theme),
        use_stderr=args.use_stderr,
    )
    try:
        install(config)
    except (ValueError, AlreadyInstalledError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    try:
        threads = [
            threading.Thread(
                target=log_sample_messages,
                args=(args.count,),
                kwargs={"seed": None if args.seed is None else args.seed + i},
            )
            for i in range(args.threads)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
    finally:
        uninstall()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
