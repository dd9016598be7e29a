"""Tests for per-language content lookup."""

from dna_blocks.engine.text import Translator, translate, translated_key


DATA = {"header": "A", "header_fr": "B", "tagline": "T", "tagline_de": "", "count": 3}


def test_translated_key_format():
    assert translated_key("header", "fr") == "header_fr"


def test_base_language_reads_plain_key():
    assert translate(DATA, "header", "en") == "A"
    assert translate(DATA, "header", "") == "A"


def test_localized_value_preferred():
    assert translate(DATA, "header", "fr") == "B"


def test_missing_localized_value_falls_back_to_base():
    assert translate(DATA, "header", "de") == "A"


def test_empty_localized_value_counts_as_missing():
    assert translate(DATA, "tagline", "de") == "T"


def test_absent_key_yields_empty_string():
    assert translate(DATA, "footer", "fr") == ""
    assert translate({"header_fr": "B"}, "header", "en") == ""


def test_no_fallback_between_related_locales():
    assert translate({"header": "A", "header_pt": "P"}, "header", "pt-BR") == "A"


def test_non_string_values_are_stringified():
    assert translate(DATA, "count", "en") == "3"


def test_translator_is_callable_and_comparable():
    t = Translator(data=dict(DATA), language="fr")
    assert t("header") == "B"
    assert t == Translator(data=dict(DATA), language="fr")
    assert t != Translator(data=dict(DATA), language="de")


def test_translator_respects_custom_base_language():
    t = Translator(data={"header": "A", "header_en": "E"}, language="en", base_language="uk")
    assert t("header") == "E"


def test_falsy_non_string_values_render_empty():
    data = {"flag": False, "zero": 0, "flag_fr": False, "on": True}
    assert translate(data, "flag", "en") == ""
    assert translate(data, "zero", "en") == ""
    assert translate(data, "on", "en") == ""
    assert translate({"header": "A", "header_fr": 0}, "header", "fr") == "A"
