import pytest

from arkanoid.config import ScreenRequestReason
from arkanoid.input import InputKey, InputState, KeyboardEvent
from arkanoid.screens import ScreensCreator, ScreensManager, ScreenState


class Stub(ScreenState):
    def __init__(self, owner, sid, draw_prev=True, update_prev=False, input_prev=False):
        super().__init__(owner)
        self._sid = sid
        self._draw_prev = draw_prev
        self._update_prev = update_prev
        self._input_prev = input_prev
        self.updates = []
        self.keys = []
        self.focus = []

    @property
    def screen_id(self):
        return self._sid

    def init(self):
        self.bind_key(InputKey.SPACE, self.keys.append)

    def update(self, delta_time):
        self.updates.append(delta_time)

    def draw(self, renderer):
        renderer.calls.append(("draw", self._sid))

    @property
    def should_draw_prev_screen(self):
        return self._draw_prev

    @property
    def should_update_prev_states(self):
        return self._update_prev

    @property
    def should_handle_inputs_prev_states(self):
        return self._input_prev

    def on_focus_gained(self):
        self.focus.append("gained")

    def on_focus_lost(self):
        self.focus.append("lost")


class Creator(ScreensCreator):
    def __init__(self, options=None):
        super().__init__(1)
        self.options = options or {}

    @property
    def screens_count(self):
        return 3

    def __call__(self, owner, screen_id):
        if screen_id not in (1, 2, 3):
            return None
        screen = Stub(owner, screen_id, **self.options.get(screen_id, {}))
        screen.init()
        return screen


class RecordingRenderer:
    def __init__(self):
        self.calls = []

    def clear(self, color):
        self.calls.append(("clear", color))

    def present(self):
        self.calls.append(("present",))


def ids(manager):
    return [s.screen_id for s in manager.active_screens]


def test_first_update_creates_default_screen():
    manager = ScreensManager(Creator())
    assert ids(manager) == []
    manager.update(0.5)
    assert ids(manager) == [1]
    assert manager.active_screens[0].updates == [0.5]


def test_transition_pushes_and_pops():
    manager = ScreensManager(Creator())
    manager.update(0.0)
    manager.active_screens[0].request_transition(2)
    manager.update(0.0)
    assert ids(manager) == [2, 1]
    manager.active_screens[0].request_transition(3)
    manager.update(0.0)
    assert ids(manager) == [3, 2, 1]
    manager.active_screens[0].request_transition(1)
    manager.update(0.0)
    assert ids(manager) == [1]


def test_request_from_background_screen_needs_solver():
    manager = ScreensManager(Creator())
    manager.update(0.0)
    bottom = manager.active_screens[0]
    bottom.request_transition(2)
    manager.update(0.0)
    bottom.request_transition(3)
    manager.update(0.0)
    assert ids(manager) == [2, 1]

    seen = []

    def solver(requester, screen_id, reason):
        seen.append((requester.screen_id, screen_id, reason))
        return True

    solved = ScreensManager(Creator(), request_solver=solver)
    solved.update(0.0)
    first = solved.active_screens[0]
    first.request_transition(2)
    solved.update(0.0)
    first.request_transition(3, ScreenRequestReason.FORCE)
    solved.update(0.0)
    assert ids(solved) == [3, 2, 1]
    assert seen == [(1, 3, ScreenRequestReason.FORCE)]


def test_unknown_screen_raises():
    manager = ScreensManager(Creator())
    manager.update(0.0)
    manager.active_screens[0].request_transition(9)
    with pytest.raises(ValueError):
        manager.update(0.0)


def test_key_goes_to_top_screen_only():
    manager = ScreensManager(Creator())
    manager.update(0.0)
    manager.active_screens[0].request_transition(2)
    manager.update(0.0)
    top, bottom = manager.active_screens
    manager.on_key_down(KeyboardEvent(InputState.PRESSED, False, InputKey.SPACE))
    manager.on_key_up(KeyboardEvent(InputState.RELEASED, False, InputKey.SPACE))
    manager.on_key_down(KeyboardEvent(InputState.PRESSED, False, InputKey.A))
    assert top.keys == [InputState.PRESSED, InputState.RELEASED]
    assert bottom.keys == []


def test_key_reaches_previous_screen_when_allowed():
    manager = ScreensManager(Creator({2: {"input_prev": True}}))
    manager.update(0.0)
    manager.active_screens[0].request_transition(2)
    manager.update(0.0)
    manager.on_key_down(KeyboardEvent(InputState.PRESSED, False, InputKey.SPACE))
    assert [s.keys for s in manager.active_screens] == [[InputState.PRESSED]] * 2


def test_update_reaches_previous_screen_when_allowed():
    manager = ScreensManager(Creator({2: {"update_prev": True}, 3: {}}))
    manager.update(1.0)
    manager.active_screens[0].request_transition(2)
    manager.update(2.0)
    assert [s.updates for s in manager.active_screens] == [[2.0], [1.0, 2.0]]


def test_draw_order_and_hidden_screens():
    manager = ScreensManager(Creator({3: {"draw_prev": False}}))
    manager.update(0.0)
    manager.active_screens[0].request_transition(2)
    manager.update(0.0)
    renderer = RecordingRenderer()
    manager.draw(renderer)
    assert renderer.calls == [
        ("clear", manager.background_color),
        ("draw", 1),
        ("draw", 2),
        ("present",),
    ]
    manager.active_screens[0].request_transition(3)
    manager.update(0.0)
    renderer = RecordingRenderer()
    manager.draw(renderer)
    assert [c for c in renderer.calls if c[0] == "draw"] == [("draw", 1), ("draw", 3)]


def test_focus_goes_to_top_screen():
    manager = ScreensManager(Creator())
    manager.on_focus_gained()
    manager.update(0.0)
    manager.on_focus_lost()
    manager.on_focus_gained()
    assert manager.active_screens[0].focus == ["lost", "gained"]


def test_request_to_quit_calls_callback():
    calls = []
    manager = ScreensManager(Creator(), quit_callback=lambda: calls.append("quit"))
    manager.request_to_quit()
    assert calls == ["quit"]


def test_bind_key_twice_raises():
    manager = ScreensManager(Creator())
    manager.update(0.0)
    screen = manager.active_screens[0]
    assert screen.has_bindings() is True
    assert screen.delegate_for(InputKey.ESCAPE) is None
    with pytest.raises(ValueError):
        screen.bind_key(InputKey.SPACE, print)


def test_request_after_owner_is_gone_is_ignored():
    manager = ScreensManager(Creator())
    manager.update(0.0)
    screen = manager.active_screens[0]
    assert screen.owner is manager
    del manager
    screen.request_transition(2)
    assert screen.owner is None
    assert screen.keys == []
    screen.delegate_for(InputKey.SPACE)(InputState.PRESSED)
    assert screen.keys == [InputState.PRESSED]