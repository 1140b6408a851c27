from app_utils.storage import STORE_KEY, get_store


def test_get_store_creates_seeded_store_once():
    state = {}
    store = get_store(state)

    assert state[STORE_KEY] is store
    assert [h.id for h in store.habits] == ["morning-water", "stretching"]

    store.add("Read")
    assert get_store(state) is store
    assert len(get_store(state)) == 3


def test_get_store_without_seed():
    state = {}
    assert len(get_store(state, seed=False)) == 0


def test_new_session_starts_over():
    first = get_store({})
    first.reset_all()
    second = get_store({})
    assert second is not first
    assert second.summary().completed == 1
