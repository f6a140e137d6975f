from unittest.mock import Mock

from gui.navigation import ROOT_ROUTE, NavManager


def test_push_and_pop():
    nav = NavManager()
    nav.push("note_editor")

    assert nav.current == "note_editor"
    assert nav.depth == 2
    assert nav.pop() == "note_editor"
    assert nav.current == ROOT_ROUTE


def test_pop_on_root_is_noop():
    nav = NavManager()
    listener = Mock()
    nav.add_pop_listener(listener)

    assert nav.pop() is None
    assert nav.routes() == [ROOT_ROUTE]
    listener.assert_not_called()


def test_pop_notifies_listeners():
    nav = NavManager(root="list")
    listener = Mock()
    nav.add_pop_listener(listener)
    nav.push("a")
    nav.push("b")

    nav.pop()
    nav.pop()

    assert [c.args[0] for c in listener.call_args_list] == ["b", "a"]
    assert nav.routes() == ["list"]
