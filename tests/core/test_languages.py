"""Unit tests for the language display-name table."""

from translate_app.core import (
    DEFAULT_SOURCE_LANGUAGE,
    DEFAULT_TARGET_LANGUAGE,
    language_display_name,
)


def test_known_codes_have_names():
    assert language_display_name("en") == "Английский"
    assert language_display_name("ru") == "Русский"


def test_unknown_code_is_uppercased():
    assert language_display_name("fr") == "FR"
    assert language_display_name("zh-cn") == "ZH-CN"


def test_defaults_are_english_to_russian():
    assert DEFAULT_SOURCE_LANGUAGE == "en"
    assert DEFAULT_TARGET_LANGUAGE == "ru"
