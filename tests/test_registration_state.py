from stalls.ui import ADMIN_STATE_KEY, PUBLIC_STATE_KEY, chosen_type, clear_submission, store_submission
from stalls.ui.registration_form import FORM_DEFAULTS, TYPE_PLACEHOLDER


def test_chosen_type():
    assert chosen_type(TYPE_PLACEHOLDER) is None
    assert chosen_type(None) is None
    assert chosen_type("") is None
    assert chosen_type("Fish") == "Fish"


def test_admin_and_public_records_are_kept_apart():
    state = {}
    store_submission(state, ADMIN_STATE_KEY, {"id": 9})
    assert PUBLIC_STATE_KEY not in state
    assert state[ADMIN_STATE_KEY] == {"id": 9}


def test_clearing_admin_record_leaves_public_one():
    state = {"reg_vendor": "Admin typed", "reg_type": "Meat"}
    store_submission(state, PUBLIC_STATE_KEY, {"id": 1})
    store_submission(state, ADMIN_STATE_KEY, {"id": 2})
    state[f"{ADMIN_STATE_KEY}_qr_png"] = b"png"

    clear_submission(state, ADMIN_STATE_KEY)

    assert ADMIN_STATE_KEY not in state
    assert f"{ADMIN_STATE_KEY}_qr_png" not in state
    assert state[PUBLIC_STATE_KEY] == {"id": 1}
    for key, default in FORM_DEFAULTS.items():
        assert state[key] == default
