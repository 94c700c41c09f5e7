from contextlib import nullcontext
from unittest.mock import MagicMock

import pytest

from models.models import DraftLocation, Marker
from ui import marker_form as marker_form_module
from ui.marker_form import FIELD_KEYS, MarkerForm
from utils.constants import Keys


@pytest.fixture
def fake_st(monkeypatch):
    st = MagicMock()
    st.session_state = {
        Keys.MARKER_TITLE.value: "Lighthouse",
        Keys.MARKER_DESCRIPTION.value: "Foggy most mornings.",
        Keys.MARKER_REVIEWER.value: "Jill",
        Keys.MARKER_REVIEW.value: "Worth the hike.",
        Keys.MARKER_PHOTOS.value: [],
    }
    st.text_input.side_effect = lambda label, key, **kwargs: st.session_state[key]
    st.text_area.side_effect = lambda label, key, **kwargs: st.session_state[key]
    st.file_uploader.side_effect = lambda label, key, **kwargs: st.session_state[key]
    save_col, cancel_col = MagicMock(), MagicMock()
    save_col.form_submit_button.return_value = True
    cancel_col.form_submit_button.return_value = False
    st.columns.return_value = (save_col, cancel_col)
    monkeypatch.setattr(marker_form_module, "st", st)
    monkeypatch.setattr(marker_form_module, "net_action", lambda *a, **k: nullcontext())
    return st


DRAFT = DraftLocation(lat=47.5237, lng=-52.6193)


def test_form_is_not_cleared_on_submit(fake_st):
    MarkerForm(MagicMock()).render(DRAFT, on_cancel=MagicMock())

    assert fake_st.form.call_args.kwargs["clear_on_submit"] is False


def test_failed_save_keeps_user_input(fake_st):
    workflow = MagicMock()
    workflow.run.side_effect = RuntimeError("upload failed")

    assert MarkerForm(workflow).render(DRAFT, on_cancel=MagicMock()) is None

    fake_st.error.assert_called_once_with("upload failed")
    assert all(key in fake_st.session_state for key in FIELD_KEYS)


def test_missing_title_keeps_user_input(fake_st):
    fake_st.session_state[Keys.MARKER_TITLE.value] = "   "
    workflow = MagicMock()

    assert MarkerForm(workflow).render(DRAFT, on_cancel=MagicMock()) is None

    workflow.run.assert_not_called()
    assert fake_st.session_state[Keys.MARKER_DESCRIPTION.value] == "Foggy most mornings."


def test_successful_save_clears_fields(fake_st):
    saved = Marker(id="m1", title="Lighthouse", lat=DRAFT.lat, lng=DRAFT.lng)
    workflow = MagicMock()
    workflow.run.return_value = saved

    assert MarkerForm(workflow).render(DRAFT, on_cancel=MagicMock()) is saved

    assert not any(key in fake_st.session_state for key in FIELD_KEYS)
