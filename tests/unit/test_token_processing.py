"""Unit tests for the Tokenizer."""

import pytest

from sieve.utils.token_processing import Tokenizer, ordered_unique


@pytest.mark.unit
class TestTokenizer:
    def test_stems_and_drops_stopwords(self, tokenizer, stem):
        assert tokenizer.tokenize("The managers and managing") == [
            stem("managers"),
            stem("managing"),
        ]

    def test_inflections_share_a_stem(self, stem):
        assert stem("managing") == stem("managed")

    def test_short_tokens_dropped(self, tokenizer):
        assert tokenizer.tokenize("Go is ok, C# or R") == []

    def test_punctuation_splits_tokens(self):
        tokenizer = Tokenizer(use_stemming=False, use_stopwords=False)
        assert tokenizer.tokenize("Hello, World! node.js") == ["hello", "world", "node"]

    def test_stopword_checked_before_stemming(self):
        tokenizer = Tokenizer(custom_stopwords={"this"})
        assert tokenizer.tokenize("this pipeline") == [tokenizer.stem("pipeline")]

    def test_token_set_keeps_discovery_order(self, tokenizer, stem):
        tokens = tokenizer.token_set("docker python docker")
        assert list(tokens) == [stem("docker"), stem("python")]

    def test_most_common(self, tokenizer, stem):
        text = "python sql python docker docker python"
        assert tokenizer.most_common(text, 2) == [stem("python"), stem("docker")]

    def test_callable(self, tokenizer):
        assert tokenizer("python") == tokenizer.tokenize("python")

    def test_empty_text(self, tokenizer):
        assert tokenizer.tokenize("") == []

    def test_config_dict(self, tokenizer):
        config = tokenizer.get_config_dict()
        assert config["use_stemming"] is True
        assert config["use_stopwords"] is True
        assert config["min_token_length"] == 3
        assert config["stopword_count"] > 0


@pytest.mark.unit
def test_ordered_unique():
    assert list(ordered_unique(["b", "a", "b", "c"])) == ["b", "a", "c"]
