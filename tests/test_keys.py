"""Tests for key predicates."""

import readchar

from table_browser import keys


def test_navigation_keys():
    assert keys.is_down("j")
    assert keys.is_down(readchar.key.DOWN)
    assert keys.is_up("k")
    assert keys.is_up(readchar.key.UP)
    assert not keys.is_up("j")


def test_first_last_keys():
    assert keys.is_first("g")
    assert keys.is_first(readchar.key.HOME)
    assert keys.is_last("G")
    assert keys.is_last(readchar.key.END)
    assert not keys.is_first("G")


def test_exit_keys():
    assert keys.is_exit("q")
    assert keys.is_exit("Q")
    assert keys.is_exit("\x1b")
    assert keys.is_exit(readchar.key.CTRL_C)
    assert not keys.is_exit("s")


def test_action_keys():
    assert keys.is_sort("s")
    assert keys.is_rescan("R")
    assert keys.is_enter("\r")
