from __future__ import annotations

from src.services.instruction_segmenter import segment


def test_segments_sentences_and_lines():
    assert segment("Shake well. Pour over ice.\nGarnish with lime.") == [
        "Shake well.",
        "Pour over ice.",
        "Garnish with lime.",
    ]


def test_keeps_punctuation_runs():
    assert segment("Stir!! Really? Yes...") == ["Stir!!", "Really?", "Yes..."]


def test_line_without_punctuation():
    assert segment("Build in glass\n\n  Top with soda  ") == ["Build in glass", "Top with soda"]


def test_trailing_fragment_is_kept():
    assert segment("Shake. Strain into glass") == ["Shake.", "Strain into glass"]


def test_empty_input():
    assert segment(None) == []
    assert segment("") == []
    assert segment(" \n \r\n") == []
