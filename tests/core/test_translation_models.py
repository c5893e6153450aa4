"""Unit tests for TranslationRequest and TranslationResult."""

import pytest

from translate_app.core import TranslationRequest, TranslationResult


VALID_PAYLOAD = {
    "source-language": "en",
    "source-text": "hello",
    "destination-language": "ru",
    "destination-text": "привет",
}


class TestTranslationRequest:
    """Tests for query parameter construction."""

    def test_query_params_include_source_language(self):
        request = TranslationRequest(source_language="en", destination_language="ru", text="hello")
        assert request.to_query_params() == [("sl", "en"), ("dl", "ru"), ("text", "hello")]

    def test_query_params_omit_missing_source_language(self):
        """A missing source language is left out so the server auto-detects it."""
        request = TranslationRequest(source_language=None, destination_language="ru", text="hello")
        assert request.to_query_params() == [("dl", "ru"), ("text", "hello")]

    def test_request_is_immutable(self):
        request = TranslationRequest(source_language="en", destination_language="ru", text="hello")
        with pytest.raises(AttributeError):
            request.text = "bye"


class TestTranslationResultFromJson:
    """Tests for decoding the response body."""

    def test_decodes_all_fields(self):
        result = TranslationResult.from_json(VALID_PAYLOAD)
        assert result == TranslationResult(
            source_language="en",
            source_text="hello",
            destination_language="ru",
            destination_text="привет",
        )

    def test_extra_keys_are_ignored(self):
        payload = dict(VALID_PAYLOAD, pronunciation={"source-text-phonetic": "həˈləʊ"})
        assert TranslationResult.from_json(payload).destination_text == "привет"

    def test_missing_key_raises(self):
        payload = dict(VALID_PAYLOAD)
        del payload["destination-text"]
        with pytest.raises(ValueError, match="destination-text"):
            TranslationResult.from_json(payload)

    def test_non_string_value_raises(self):
        payload = dict(VALID_PAYLOAD, **{"source-text": 42})
        with pytest.raises(ValueError, match="source-text"):
            TranslationResult.from_json(payload)

    def test_non_object_payload_raises(self):
        with pytest.raises(ValueError):
            TranslationResult.from_json(["en", "hello"])
