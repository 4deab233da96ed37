"""Tests for terminal drawing."""

from unittest.mock import MagicMock, patch

import pytest

from logpager.constants import PagerConstants
from logpager.navigation import NavigationIntent
from logpager.paginator import Paginator
from logpager.terminal import TerminalInterface
from logpager.view import Control, build_controls, page_controls


@pytest.fixture
def term():
    term = MagicMock()
    term.width = 80
    term.height = 24
    term.reverse = '[REV]'
    term.dim = '[DIM]'
    term.normal = '[N]'
    term.bold = '[B]'
    term.home = '[HOME]'
    term.clear = '[CLEAR]'
    term.hide_cursor = '[HIDE]'
    term.normal_cursor = '[CURSOR]'
    term.move = lambda y, x: f'[MOVE:{y},{x}]'
    return term


def printed(mock_print):
    return ''.join(str(call.args[0]) for call in mock_print.call_args_list if call.args)


CONTROLS = [
    Control("<< First", NavigationIntent.FIRST, enabled=False),
    Control("Previous", NavigationIntent.PREVIOUS, enabled=False),
    Control("1", NavigationIntent.PAGE, page=0, enabled=False, active=True),
    Control("2", NavigationIntent.PAGE, page=1),
    Control("Next", NavigationIntent.NEXT),
    Control("Last >>", NavigationIntent.LAST),
]


def test_render_controls_styles(term):
    ti = TerminalInterface(term)
    bar = ti.render_controls(CONTROLS, 80)
    assert bar == ("[DIM][<< First][N] [DIM][Previous][N] [REV][1][N] [2] [Next] [Last >>]")


def test_render_controls_below_navigation_width(term):
    ti = TerminalInterface(term)
    # Not even the four navigation controls fit, so the bar is cut from the end
    bar = ti.render_controls(CONTROLS, 25)
    assert bar == "[DIM][<< First][N] [DIM][Previous][N]"
    assert ti.render_controls(CONTROLS, 5) == ""


@pytest.fixture
def deep_view():
    paginator = Paginator(page_size=1)
    paginator.load("x" * 500)
    return paginator.go_to_page(150)


def test_render_controls_keeps_navigation_at_width_80(term, deep_view):
    ti = TerminalInterface(term)
    bar = ti.render_controls(build_controls(deep_view), 80)
    assert bar == ("[<< First] [Previous] [150] [REV][151][N] [152] [153] [154] [155] [156]"
                   " [Next] [Last >>]")


def test_render_controls_keeps_navigation_at_minimum_width(term, deep_view):
    ti = TerminalInterface(term)
    bar = ti.render_controls(build_controls(deep_view), PagerConstants.MIN_TERMINAL_WIDTH)
    assert bar == "[<< First] [Previous] [Next] [Last >>]"


def test_fit_controls_trims_pages_farthest_from_active(term):
    paginator = Paginator(page_size=1)
    paginator.load("x" * 500)
    view = paginator.go_to_last()
    ti = TerminalInterface(term)
    shown = page_controls(ti.fit_controls(build_controls(view), 62))
    # Window is 490..499 with 499 active; the low pages go first
    assert [c.page for c in shown] == [496, 497, 498, 499]
    assert shown[-1].active


def test_fit_controls_keeps_full_bar_when_it_fits(term):
    ti = TerminalInterface(term)
    assert ti.fit_controls(CONTROLS, 80) == CONTROLS


def test_draw_page_writes_lines_bar_and_status(term):
    ti = TerminalInterface(term)
    with patch('builtins.print') as mock_print:
        ti.draw_page(["first line", "second line"], CONTROLS, " status here")
    out = printed(mock_print)
    assert '[MOVE:0,0]first line' in out
    assert '[MOVE:1,0]second line' in out
    assert '[MOVE:22,0][DIM][<< First]' in out
    assert '[MOVE:23,0] status here' in out


def test_draw_page_limits_rows_to_content_area(term):
    term.height = 5
    ti = TerminalInterface(term)
    with patch('builtins.print') as mock_print:
        ti.draw_page([f"line {i}" for i in range(10)], [], "")
    out = printed(mock_print)
    assert 'line 2' in out
    assert 'line 3' not in out


def test_draw_prompt_places_cursor(term):
    ti = TerminalInterface(term)
    with patch('builtins.print') as mock_print:
        ti.draw_prompt(" Go to page: 12")
    out = printed(mock_print)
    assert '[MOVE:23,0] Go to page: 12' in out
    assert '[MOVE:23,15][CURSOR]' in out


def test_draw_help(term):
    ti = TerminalInterface(term)
    with patch('builtins.print') as mock_print:
        ti.draw_help("LOGPAGER HELP", ["", "  g   Go to page"])
    out = printed(mock_print)
    assert '[CLEAR]' in out
    assert '[B]LOGPAGER HELP[N]' in out
    assert 'Go to page' in out
    assert 'Press any key to continue' in out


def test_draw_error_message(term):
    ti = TerminalInterface(term)
    with patch('builtins.print') as mock_print:
        ti.draw_error_message("Terminal too small!", "Current size: 20x10.")
    out = printed(mock_print)
    assert 'Terminal too small!' in out
    assert 'Current size: 20x10.' in out


def test_content_height_reserves_bar_and_status(term):
    ti = TerminalInterface(term)
    assert ti.content_height == 22
    term.height = 1
    assert ti.content_height == 0


def test_get_key_without_input_returns_none(term):
    assert TerminalInterface(term).get_key(timeout=0) is None


def test_cleanup_without_setup_is_safe(term):
    ti = TerminalInterface(term)
    with patch('builtins.print') as mock_print:
        ti.cleanup()
    mock_print.assert_not_called()
