from __future__ import annotations

import re
import threading
from collections.abc import Callable

import pytest

from disco_log.core.gradient import USIZE_MAX
from disco_log.core.models import Level, Rgb
from disco_log.core.paint import InlineGradient, LogPainter, MultiLineGradient, Solid
from disco_log.core.themes import SimpleTheme, SpectralTheme, Theme

ESCAPE_RE = re.compile(r"\x1b\[38;2;\d+;\d+;\d+m")

PaintFn = Callable[[LogPainter, str, Level], str]


def _rgb_escape(c: Rgb) -> str:
    return f"\x1b[38;2;{c.r};{c.g};{c.b}m"


@pytest.mark.parametrize("theme", [SimpleTheme(), SpectralTheme()], ids=["simple", "spectral"])
@pytest.mark.parametrize(
    "paint",
    [
        lambda p, msg, level: p.paint_solid(msg, level),
        lambda p, msg, level: p.paint_inline_gradient(msg, level, 20),
        lambda p, msg, level: p.paint_multi_line_gradient(msg, level, 20),
    ],
    ids=["solid", "inline", "multi-line"],
)
def test_logs_colored_by_level(theme: Theme, paint: PaintFn) -> None:
    painter = LogPainter(theme, Solid())
    lines = [paint(painter, "foo", level) for level in Level]
    assert len(set(lines)) == len(lines)


@pytest.mark.parametrize("msg", ["foo", "", "नमस्ते"])
def test_paint_without_color_format_returns_original(msg: str) -> None:
    painter = LogPainter(SimpleTheme(), None)
    for level in Level:
        assert painter.paint(msg, level) == msg


def test_paint_functions_handle_empty_msg() -> None:
    painter = LogPainter(SimpleTheme(), Solid())
    assert painter.paint_solid("", Level.WARN) == ""
    assert painter.paint_inline_gradient("", Level.WARN, 10) == ""
    assert painter.paint_multi_line_gradient("", Level.WARN, 10) == ""


def test_solid_paints_whole_line_once() -> None:
    theme = SpectralTheme()
    painter = LogPainter(theme, Solid())
    out = painter.paint("hello world", Level.ERROR)
    assert out == f"{_rgb_escape(theme.solid(Level.ERROR))}hello world\x1b[39m"


@pytest.mark.parametrize("msg", ["0000000000", "नमस्तेनमस्तेनमस्तेनमस्तेनमस्ते"])
def test_inline_gradient_uses_steps_arg(msg: str) -> None:
    painter = LogPainter(SimpleTheme(), InlineGradient(2))
    escapes = ESCAPE_RE.findall(painter.paint(msg, Level.INFO))
    assert len(escapes) >= 8

    # the gradient runs start -> end -> start, so it repeats every 2 * steps
    assert escapes[0] != escapes[1]
    assert escapes[0] == escapes[4]
    assert escapes[1] == escapes[5]
    assert escapes[2] == escapes[6]
    assert escapes[3] == escapes[7]


def test_inline_gradient_colors_graphemes_not_code_points() -> None:
    painter = LogPainter(SimpleTheme(), InlineGradient(20))
    # "e" + combining acute accent is one user-perceived character
    out = painter.paint("éx", Level.INFO)
    assert len(ESCAPE_RE.findall(out)) == 2
    assert "é\x1b[39m" in out


def test_inline_gradient_starts_at_range_start() -> None:
    theme = SimpleTheme()
    painter = LogPainter(theme, InlineGradient(4))
    out = painter.paint("abcde", Level.DEBUG)
    escapes = ESCAPE_RE.findall(out)
    assert escapes[0] == _rgb_escape(theme.range(Level.DEBUG).start)
    assert escapes[4] == _rgb_escape(theme.range(Level.DEBUG).end)


def test_inline_gradient_does_not_touch_line_counters() -> None:
    painter = LogPainter(SimpleTheme(), InlineGradient(2))
    painter.paint("foo", Level.INFO)
    assert painter.lines_logged(Level.INFO) == 0


def test_multi_line_gradient_uses_steps_arg() -> None:
    painter = LogPainter(SimpleTheme(), MultiLineGradient(2))
    lines = [painter.paint("foo", Level.INFO) for _ in range(8)]

    assert lines[0] != lines[1]
    assert lines[2] != lines[3]
    assert lines[0] == lines[4]
    assert lines[1] == lines[5]
    assert lines[2] == lines[6]
    assert lines[3] == lines[7]


def test_multi_line_gradient_first_line_uses_range_start() -> None:
    theme = SpectralTheme()
    painter = LogPainter(theme, MultiLineGradient(10))
    out = painter.paint("foo", Level.WARN)
    assert out.startswith(_rgb_escape(theme.range(Level.WARN).start))


@pytest.mark.parametrize("level", list(Level))
def test_multi_line_gradient_changes_color_within_level(level: Level) -> None:
    painter = LogPainter(SimpleTheme(), MultiLineGradient(20))
    last = ""
    for _ in range(10):
        line = painter.paint("foo", level)
        assert line != last
        last = line


def test_multi_line_gradient_levels_advance_independently() -> None:
    reference = LogPainter(SimpleTheme(), MultiLineGradient(2))
    expected = [reference.paint("foo", Level.INFO) for _ in range(8)]

    painter = LogPainter(SimpleTheme(), MultiLineGradient(2))
    got = []
    for _ in range(8):
        got.append(painter.paint("foo", Level.INFO))
        painter.paint("foo", Level.WARN)
        painter.paint("foo", Level.WARN)

    assert got == expected
    assert painter.lines_logged(Level.INFO) == 8
    assert painter.lines_logged(Level.WARN) == 16
    assert painter.lines_logged(Level.ERROR) == 0


def test_multi_line_gradient_counts_once_per_paint() -> None:
    painter = LogPainter(SimpleTheme(), MultiLineGradient(3))
    for _ in range(5):
        painter.paint("foo", Level.DEBUG)
    assert painter.lines_logged(Level.DEBUG) == 5


def test_solid_does_not_touch_line_counters() -> None:
    painter = LogPainter(SimpleTheme(), Solid())
    for level in Level:
        painter.paint("foo", level)
        assert painter.lines_logged(level) == 0


def test_multi_line_gradient_counter_wraps() -> None:
    painter = LogPainter(SimpleTheme(), MultiLineGradient(2))
    # seed the counter at the u64 limit; painting 2**64 lines is not practical
    painter._lines_logged[Level.INFO] = USIZE_MAX
    painter.paint("foo", Level.INFO)
    assert painter.lines_logged(Level.INFO) == 0


@pytest.mark.parametrize("gradient", [InlineGradient, MultiLineGradient])
@pytest.mark.parametrize("steps", [-3, 2.5, "20", True])
def test_gradient_rejects_invalid_steps(gradient: type, steps: object) -> None:
    with pytest.raises(ValueError, match="gradient steps"):
        gradient(steps)


def test_multi_line_gradient_zero_steps() -> None:
    painter = LogPainter(SimpleTheme(), MultiLineGradient(0))
    lines = [painter.paint("foo", Level.INFO) for _ in range(3)]
    assert lines[0] == lines[2]
    assert lines[0] != lines[1]


def test_multi_line_gradient_concurrent_counts() -> None:
    painter = LogPainter(SpectralTheme(), MultiLineGradient(20))
    levels = list(Level)

    def worker(offset: int) -> None:
        for i in range(1000):
            painter.paint("fixed", levels[(offset + i) % len(levels)])

    threads = [threading.Thread(target=worker, args=(t,)) for t in range(10)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    for level in levels:
        assert painter.lines_logged(level) == 2000
