from io import StringIO

import pytest
from django.core.management import CommandError, call_command


def _run(*args):
    out = StringIO()
    call_command("show_pager", *args, stdout=out)
    return out.getvalue()


def test_show_pager_middle():
    output = _run("--page", "9", "--total", "20", "--window", "9")
    lines = output.splitlines()
    assert lines[:3] == ["«", "‹", "…"]
    assert "[10]" in lines
    assert "Готово: 15 слотов" in output


def test_show_pager_classes():
    output = _run("--page", "0", "--total", "3", "--classes")
    assert "pager__item pager--current" in output


def test_show_pager_window_from_settings(theme_settings):
    theme_settings(pager_quantity=3)
    output = _run("--page", "10", "--total", "24")
    assert "(окно 3)" in output


def test_show_pager_single_page():
    assert "меньше двух" in _run("--total", "1")


def test_show_pager_invalid():
    with pytest.raises(CommandError):
        _run("--page", "5", "--total", "5")
