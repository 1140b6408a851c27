import logging

from features.habits import HabitStore

logger = logging.getLogger(__name__)

STORE_KEY = "habit_store"


def get_store(session_state, seed=True) -> HabitStore:
    """
    Return the habit store for this browser session, creating it on first use.

    `session_state` is st.session_state (any mutable mapping works). Nothing is
    written to disk, so a page reload starts from the seed habits again.
    """
    store = session_state.get(STORE_KEY)
    if store is None:
        store = HabitStore.seeded() if seed else HabitStore()
        session_state[STORE_KEY] = store
        logger.info("Started habit session with %d habit(s)", len(store))
    return store
