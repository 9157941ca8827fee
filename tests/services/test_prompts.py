"""Unit tests for the per-language prompt templates."""

import json

import pytest

from pinata.services import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES, VocabularyParser
from pinata.services.fetching.prompts import build_prompt, build_system_instruction


def test_default_language_is_supported():
    assert DEFAULT_LANGUAGE in SUPPORTED_LANGUAGES


@pytest.mark.parametrize("language", SUPPORTED_LANGUAGES)
def test_prompt_names_language_and_wire_format(language):
    prompt = build_prompt(language)

    assert language.capitalize() in prompt
    assert "<vocabulary>" in prompt
    assert "</vocabulary>" in prompt


@pytest.mark.parametrize("language", SUPPORTED_LANGUAGES)
def test_prompt_examples_are_parseable(language):
    """The example lines shown to the model must decode with our own parser."""
    records = VocabularyParser().parse(build_prompt(language))

    assert len(records) == 2
    assert all(record.location is not None for record in records)


def test_language_name_is_normalized():
    assert build_prompt(" Spanish ") == build_prompt("spanish")


def test_unsupported_language_raises():
    with pytest.raises(ValueError, match="Unsupported"):
        build_prompt("klingon")


def test_system_instruction_mentions_language():
    assert "Japanese" in build_system_instruction("japanese")


def test_example_lines_are_json():
    from pinata.services.fetching.prompts import _EXAMPLES

    for lines in _EXAMPLES.values():
        for line in lines:
            assert isinstance(json.loads(line), dict)
