"""Tests for anki_service module."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from ydict.exceptions import AnkiConnectionError, CardCreationError
from ydict.models import FlashcardNote
from ydict.services.anki_service import AnkiService

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _mock_response(result=None, error=None, status_code=200):
    """Create a mock requests.Response with the given AnkiConnect JSON body."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = {"result": result, "error": error}
    return resp


@pytest.fixture
def note():
    return FlashcardNote(
        deck="test_deck",
        front="hello",
        back="<div>back</div>",
        audio_url="http://dict.youdao.com/dictvoice?audio=hello&type=2",
    )


# ---------------------------------------------------------------------------
# TestBuildNotePayload
# ---------------------------------------------------------------------------


class TestBuildNotePayload:
    """Tests for AnkiService.build_note_payload."""

    def test_full_shape(self, test_config, note):
        payload = AnkiService(test_config).build_note_payload(note)

        assert payload == {
            "action": "addNote",
            "version": 6,
            "params": {
                "note": {
                    "deckName": "test_deck",
                    "modelName": "Basic",
                    "fields": {"Front": "hello", "Back": "<div>back</div>"},
                    "options": {"allowDuplicate": False},
                    "tags": ["from-yd"],
                    "audio": [
                        {
                            "url": "http://dict.youdao.com/dictvoice?audio=hello&type=2",
                            "filename": "hello.mp3",
                            "fields": ["Front"],
                            "skipHash": "",
                        }
                    ],
                }
            },
        }

    def test_allow_duplicate_flag(self, test_config, note):
        note.allow_duplicate = True
        payload = AnkiService(test_config).build_note_payload(note)
        assert payload["params"]["note"]["options"] == {"allowDuplicate": True}

    def test_no_audio_attachment_without_url(self, test_config, note):
        note.audio_url = ""
        payload = AnkiService(test_config).build_note_payload(note)
        assert "audio" not in payload["params"]["note"]

    def test_uses_configured_note_type(self, note):
        from ydict.config import YDictConfig

        service = AnkiService(YDictConfig(anki_note_type="Basic (and reversed card)"))
        payload = service.build_note_payload(note)
        assert payload["params"]["note"]["modelName"] == "Basic (and reversed card)"


# ---------------------------------------------------------------------------
# TestAddNote
# ---------------------------------------------------------------------------


class TestAddNote:
    """Tests for AnkiService.add_note."""

    def test_success_returns_note_id(self, test_config, note):
        service = AnkiService(test_config)

        with patch("requests.post", return_value=_mock_response(result=1496198395707)) as mock_post:
            note_id = service.add_note(note)

        assert note_id == 1496198395707
        kwargs = mock_post.call_args[1]
        assert mock_post.call_args[0][0] == test_config.ankiconnect_url
        assert kwargs["json"]["action"] == "addNote"
        assert kwargs["timeout"] == test_config.anki_timeout

    def test_error_response_raises(self, test_config, note):
        service = AnkiService(test_config)

        with (
            patch(
                "requests.post",
                return_value=_mock_response(error="cannot create note because it is a duplicate"),
            ),
            pytest.raises(CardCreationError, match="duplicate"),
        ):
            service.add_note(note)

    def test_non_200_raises(self, test_config, note):
        service = AnkiService(test_config)

        with (
            patch("requests.post", return_value=_mock_response(status_code=500)),
            pytest.raises(CardCreationError, match="unexpected status code 500"),
        ):
            service.add_note(note)

    def test_unreadable_body_raises(self, test_config, note):
        service = AnkiService(test_config)
        bad_resp = MagicMock()
        bad_resp.status_code = 200
        bad_resp.json.side_effect = ValueError("No JSON")

        with (
            patch("requests.post", return_value=bad_resp),
            pytest.raises(CardCreationError, match="unreadable"),
        ):
            service.add_note(note)

    @pytest.mark.parametrize("body", [None, [], "ok", 6])
    def test_non_object_body_raises(self, test_config, note, body):
        service = AnkiService(test_config)
        resp = MagicMock()
        resp.status_code = 200
        resp.json.return_value = body

        with (
            patch("requests.post", return_value=resp),
            pytest.raises(CardCreationError, match="addNote returned an unreadable body"),
        ):
            service.add_note(note)

    def test_connection_error_raises(self, test_config, note):
        service = AnkiService(test_config)

        with (
            patch("requests.post", side_effect=requests.exceptions.ConnectionError()),
            pytest.raises(AnkiConnectionError, match="Cannot connect"),
        ):
            service.add_note(note)

    def test_timeout_raises_connection_error(self, test_config, note):
        service = AnkiService(test_config)

        with (
            patch("requests.post", side_effect=requests.exceptions.Timeout()),
            pytest.raises(AnkiConnectionError),
        ):
            service.add_note(note)


# ---------------------------------------------------------------------------
# TestConnectionChecks
# ---------------------------------------------------------------------------


class TestConnectionChecks:
    """Tests for check_connection and deck_exists."""

    def test_check_connection_returns_version(self, test_config):
        service = AnkiService(test_config)

        with patch("requests.post", return_value=_mock_response(result=6)) as mock_post:
            assert service.check_connection() == 6

        assert mock_post.call_args[1]["json"] == {"action": "version", "version": 6}

    def test_check_connection_error_response(self, test_config):
        service = AnkiService(test_config)

        with (
            patch("requests.post", return_value=_mock_response(error="boom")),
            pytest.raises(AnkiConnectionError, match="boom"),
        ):
            service.check_connection()

    def test_check_connection_missing_version(self, test_config):
        service = AnkiService(test_config)

        with (
            patch("requests.post", return_value=_mock_response(result=None)),
            pytest.raises(AnkiConnectionError, match="version"),
        ):
            service.check_connection()

    def test_deck_exists(self, test_config):
        service = AnkiService(test_config)

        with patch("requests.post", return_value=_mock_response(result=["Default", "test_deck"])):
            assert service.deck_exists("test_deck") is True

        with patch("requests.post", return_value=_mock_response(result=["Default"])):
            assert service.deck_exists("test_deck") is False

    def test_deck_exists_connection_error(self, test_config):
        service = AnkiService(test_config)

        with (
            patch("requests.post", side_effect=requests.exceptions.ConnectionError()),
            pytest.raises(AnkiConnectionError),
        ):
            service.deck_exists("test_deck")
