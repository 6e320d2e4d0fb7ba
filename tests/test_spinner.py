from termgit.spinner import SPINNER_CHARS, Spinner


def test_idle_spinner_is_blank():
    s = Spinner()
    assert s.symbol() == " "


def test_pending_shows_first_frame():
    s = Spinner()
    s.set_state(True)
    assert s.symbol() == SPINNER_CHARS[0]


def test_update_cycles_through_all_frames():
    s = Spinner()
    s.set_state(True)
    seen = []
    for _ in SPINNER_CHARS:
        seen.append(s.symbol())
        s.update()
    assert seen == list(SPINNER_CHARS)
    assert s.symbol() == SPINNER_CHARS[0]


def test_index_stays_in_range():
    s = Spinner()
    for _ in range(3 * len(SPINNER_CHARS) + 1):
        s.update()
        assert 0 <= s.idx < len(SPINNER_CHARS)


def test_set_state_off_hides_frame():
    s = Spinner()
    s.set_state(True)
    s.update()
    s.set_state(False)
    assert s.symbol() == " "