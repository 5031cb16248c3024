import io
import sys

import pytest

from recursia.registry import (
    DEFAULT_CONFIG,
    DemoConfig,
    DemoRegistry,
    MenuOption,
    console_main,
)


def _config(**kwargs):
    base = dict(window_title="Title", menu_order=("A.cpp", "B.cpp"))
    base.update(kwargs)
    return DemoConfig(**base)


def test_default_config_orders_menu_and_applies_barrier(capsys):
    seen = []
    registry = DemoRegistry(DEFAULT_CONFIG, lambda files: (seen.append(files), [])[1])
    assert registry.program_title() == "A Visit to Recursia"
    registry.register("CompositeGUI.cpp", 1, "composite", lambda: None)
    registry.register("WordGUI.cpp", 1, "word", lambda: None)
    registry.register("FlagGUI.cpp", 1, "flag", lambda: None)
    registry.register("Private.cpp", 1, "private", lambda: None)
    options = registry.menu_options()
    assert [o.name for o in options] == ["flag", "word", "composite"]
    options[1].callback()
    assert seen == [frozenset({"SpeakingRecursian.cpp"})]


def test_program_title_and_test_order():
    registry = DemoRegistry(_config(test_order=("t1.cpp", "t2.cpp")), None)
    assert registry.program_title() == "Title"
    assert registry.test_order() == ["t1.cpp", "t2.cpp"]


def test_menu_sorted_by_file_then_line():
    registry = DemoRegistry(_config(), None)
    registry.register("dir/B.cpp", 5, "b5", lambda: None)
    registry.register("A.cpp", 20, "a20", lambda: None)
    registry.register("A.cpp", 3, "a3", lambda: None)
    assert [o.name for o in registry.menu_options()] == ["a3", "a20", "b5"]


def test_private_files_hidden():
    registry = DemoRegistry(_config(), None)
    registry.register("Hidden.cpp", 1, "hidden", lambda: None)
    registry.register("A.cpp", 1, "shown", lambda: None)
    assert [o.name for o in registry.menu_options()] == ["shown"]


def test_handler_decorator_registers():
    registry = DemoRegistry(_config(), None)
    calls = []

    @registry.handler("demo", "A.cpp", 7)
    def demo():
        calls.append(1)

    options = registry.menu_options()
    assert options == [MenuOption("demo", demo)]
    options[0].callback()
    assert calls == [1]


def test_barrier_passes(capsys):
    seen = []
    registry = DemoRegistry(
        _config(test_barriers={"B.cpp": {"x.cpp", "y.cpp"}}),
        lambda files: (seen.append(files), [])[1],
    )
    calls = []
    registry.register("B.cpp", 1, "b", lambda: calls.append("b"))
    registry.menu_options()[0].callback()
    assert calls == ["b"]
    assert seen == [frozenset({"x.cpp", "y.cpp"})]
    assert "Running tests in x.cpp and y.cpp..." in capsys.readouterr().out


def test_barrier_fails(capsys, monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("\n"))
    registry = DemoRegistry(
        _config(test_barriers={"B.cpp": {"x.cpp", "y.cpp"}}),
        lambda files: ["y.cpp", "unrelated.cpp"],
    )
    calls = []
    registry.register("B.cpp", 1, "b", lambda: calls.append("b"))
    registry.menu_options()[0].callback()
    assert calls == []
    err = capsys.readouterr().err
    assert 'Tests failed in y.cpp. Select the "Run Tests" option' in err
    assert "Press ENTER to continue." in err


def test_initial_demo():
    registry = DemoRegistry(_config(initial_handler="B.cpp"), None)
    first = lambda: None  # noqa: E731
    registry.register("B.cpp", 9, "late", lambda: None)
    registry.register("B.cpp", 2, "early", first)
    assert registry.initial_demo() is first


def test_initial_demo_missing():
    registry = DemoRegistry(_config(initial_handler="Z.cpp"), None)
    registry.register("A.cpp", 1, "a", lambda: None)
    assert registry.initial_demo() is None


def test_console_main_runs_selection_then_quits():
    registry = DemoRegistry(_config(), None)
    calls = []
    registry.register("A.cpp", 1, "a", lambda: calls.append("a"))
    registry.register("B.cpp", 1, "b", lambda: calls.append("b"))
    out = io.StringIO()
    console_main(registry, None, io.StringIO("\n1\nyes\n2\n"), out)
    assert calls == ["b"]
    text = out.getvalue()
    assert "0 a\n1 b\n2 Quit\n" in text
    assert text.endswith("Exiting...\n")


def test_console_main_answer_no_stops():
    registry = DemoRegistry(_config(), None)
    calls = []
    registry.register("A.cpp", 1, "a", lambda: calls.append("a"))
    out = io.StringIO()
    console_main(registry, None, io.StringIO("\n0\nno\n"), out)
    assert calls == ["a"]
    assert "Exiting..." in out.getvalue()


def test_console_main_initial_demo_without_menu():
    registry = DemoRegistry(_config(), None)
    calls = []
    out = io.StringIO()
    console_main(registry, lambda: calls.append("init"), io.StringIO("\n"), out)
    assert calls == ["init"]
    assert "Would you like to pick again?" not in out.getvalue()


def test_console_main_eof_raises():
    registry = DemoRegistry(_config(), None)
    registry.register("A.cpp", 1, "a", lambda: None)
    with pytest.raises(EOFError):
        console_main(registry, None, io.StringIO("\n"), io.StringIO())