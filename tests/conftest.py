"""Pytest configuration and shared fixtures."""

import json

import pytest

from ydict.config import YDictConfig
from ydict.presenters import NullPresenter
from ydict.services import PresentationService


@pytest.fixture
def test_config():
    """Provide a test configuration with a deck configured."""
    return YDictConfig(
        youdao_api_url="http://dict.example.test",
        ankiconnect_url="http://127.0.0.1:8765",
        anki_deck_name="test_deck",
        audio_wait_timeout=0.5,
    )


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


@pytest.fixture
def presentation_service():
    """Provide a presentation service using the packaged template."""
    return PresentationService()


@pytest.fixture
def make_ec_block():
    """Factory fixture for the ``ec`` block of a Youdao payload."""

    def _make(
        ukphone="",
        usphone="",
        ukspeech="",
        usspeech="",
        glosses=(),
        exam_type=None,
    ):
        word = {
            "ukphone": ukphone,
            "usphone": usphone,
            "ukspeech": ukspeech,
            "usspeech": usspeech,
            "trs": [{"tr": [{"l": {"i": [gloss]}}]} for gloss in glosses],
        }
        block = {"word": [word]}
        if exam_type is not None:
            block["exam_type"] = list(exam_type)
        return block

    return _make


@pytest.fixture
def make_definition_entry():
    """Factory fixture for a Collins entry carrying an example sentence."""

    def _make(pos="n.", pos_tips="", tran="translation", eng="English.", chn="中文。"):
        return {
            "tran_entry": [
                {
                    "pos_entry": {"pos": pos, "pos_tips": pos_tips},
                    "tran": tran,
                    "exam_sents": {"sent": [{"eng_sent": eng, "chn_sent": chn}]},
                }
            ]
        }

    return _make


@pytest.fixture
def make_see_also_entry():
    """Factory fixture for a Collins entry that only points at another word."""

    def _make(seeword="hi"):
        return {
            "tran_entry": [
                {
                    "seeAlsos": {"seealso": "->", "seeAlso": [{"seeword": seeword}]},
                }
            ]
        }

    return _make


@pytest.fixture
def make_payload():
    """Factory fixture assembling a raw JSON payload from blocks."""

    def _make(ec=None, collins_entries=None, extra=None):
        data = {}
        if ec is not None:
            data["ec"] = ec
        if collins_entries is not None:
            data["collins"] = {"collins_entries": [{"entries": {"entry": list(collins_entries)}}]}
        if extra:
            data.update(extra)
        return json.dumps(data, ensure_ascii=False).encode("utf-8")

    return _make


@pytest.fixture
def hello_payload(make_payload, make_ec_block, make_definition_entry, make_see_also_entry):
    """Payload for "hello" with phonetics, one gloss, a definition and a cross-reference."""
    return make_payload(
        ec=make_ec_block(
            ukphone="h?'l??",
            usphone="h?'lo?",
            ukspeech="hello&type=1",
            usspeech="hello&type=2",
            glosses=["int. 哈罗；喂"],
            exam_type=["初中", "高中"],
        ),
        collins_entries=[
            make_definition_entry(
                pos="int.",
                pos_tips="",
                tran="你好",
                eng="Hello, John!",
                chn="你好，约翰！",
            ),
            make_see_also_entry("hi"),
        ],
    )
