"""Journey tests: a store hands out branches and adopts them as the next state."""

from statebranch import create, equals, freeze, has_changed, is_frozen


class Store:
    """Minimal getState/setState pair adopting branches as new state."""

    def __init__(self, state):
        self._state = state
        self.history = [state]

    def get_state(self):
        return create(self._state)

    def set_state(self, draft):
        if not has_changed(draft):
            return False
        freeze(draft, deep=True)
        self._state = draft
        self.history.append(draft)
        return True


def toggle_todo(state, index):
    state["todos"][index]["done"] = not state["todos"][index]["done"]
    return state


def add_todo(state, title):
    state["todos"].append({"title": title, "done": False})
    return state


def test_reducers_publish_new_state_without_touching_history(nested_state):
    store = Store(nested_state)

    assert store.set_state(toggle_todo(store.get_state(), 0))
    assert store.set_state(add_todo(store.get_state(), "review"))

    first, second, third = store.history
    assert first["todos"][0]["done"] is False
    assert second["todos"][0]["done"] is True
    assert len(second["todos"]) == 1
    assert len(third["todos"]) == 2
    assert third["todos"][1]["title"] == "review"


def test_read_only_reducer_is_not_published(nested_state):
    store = Store(nested_state)
    draft = store.get_state()

    _ = draft["user"]["name"]

    assert store.set_state(draft) is False
    assert store.history == [nested_state]


def test_untouched_subtrees_keep_identity(nested_state):
    store = Store(nested_state)

    store.set_state(toggle_todo(store.get_state(), 0))

    latest = store.history[-1]
    assert equals(latest["user"], nested_state["user"])
    # Only the toggled todo itself was written to
    assert equals(latest["todos"], nested_state["todos"])
    assert not equals(latest["todos"][0], nested_state["todos"][0])


def test_published_state_is_frozen(nested_state):
    store = Store(nested_state)
    draft = toggle_todo(store.get_state(), 0)
    store.set_state(draft)

    draft["count"] = 99
    draft["todos"][0]["done"] = False

    assert is_frozen(draft)
    assert draft["count"] == 1
    assert draft["todos"][0]["done"] is True
