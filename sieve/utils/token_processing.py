"""
Standardized text tokenization utilities.

Provides configurable tokenization with optional normalization steps:
- Minimum token length filtering
- Stemming (NLTK Porter stemmer)
- Stopword removal (NLTK English corpus, or a custom set)

Designed to be domain-agnostic - stopword sets are passed in, not hardcoded.

Usage:
    from sieve.utils.token_processing import Tokenizer

    tokenizer = Tokenizer()
    tokens = tokenizer.tokenize("Managed cloud deployments")  # ['manag', 'cloud', 'deploy']

    # Isolated vocabulary for tests or other domains
    tokenizer = Tokenizer(custom_stopwords={"the", "and"})
"""

import re
from collections import Counter
from typing import Optional

import nltk
from nltk.corpus import stopwords
from nltk.stem import PorterStemmer

# Alphanumeric runs only; punctuation and underscores split tokens
TOKEN_PATTERN = re.compile(r"[a-z0-9]+")


def ordered_unique(tokens: list[str]) -> dict[str, None]:
    """Insertion-ordered set of tokens (dict keys keep discovery order)."""
    return dict.fromkeys(tokens)


class Tokenizer:
    """
    Configurable tokenizer with normalization pipeline.

    Pipeline order:
    1. Lowercase
    2. Tokenization (alphanumeric runs)
    3. Min length filtering (tokens shorter than min_token_length are dropped)
    4. Stemming
    5. Stopword removal (checked against both the surface form and the stem)

    The surface-form check matters because Porter stems of common function
    words are not themselves stopwords ("this" -> "thi", "was" -> "wa").

    The tokenizer is callable, so it can be handed to anything expecting a
    text -> tokens function.
    """

    def __init__(
        self,
        use_stemming: bool = True,
        use_stopwords: bool = True,
        custom_stopwords: Optional[set[str]] = None,
        min_token_length: int = 3,
    ):
        """
        Initialize tokenizer.

        Args:
            use_stemming: Whether to apply Porter stemming
            use_stopwords: Whether to remove stopwords
            custom_stopwords: Custom stopword set (uses NLTK English if None)
            min_token_length: Minimum token length to keep (before stemming)
        """
        self.use_stopwords = use_stopwords
        self.min_token_length = min_token_length

        if use_stopwords:
            self._stopwords = (
                frozenset(custom_stopwords)
                if custom_stopwords is not None
                else self._load_stopwords()
            )
        else:
            self._stopwords = frozenset()

        self._stemmer = PorterStemmer() if use_stemming else None

    def _load_stopwords(self) -> frozenset[str]:
        """Load NLTK English stopwords, downloading if necessary."""
        try:
            return frozenset(stopwords.words("english"))
        except LookupError:
            nltk.download("stopwords", quiet=True)
            return frozenset(stopwords.words("english"))

    def stem(self, token: str) -> str:
        """Stem a single token (identity when stemming is disabled)."""
        return self._stemmer.stem(token) if self._stemmer else token

    def tokenize(self, text: str) -> list[str]:
        """
        Tokenize text with full normalization pipeline.

        Returns:
            List of normalized tokens, in text order, duplicates included
        """
        if not text:
            return []

        tokens = TOKEN_PATTERN.findall(text.lower())

        if self.min_token_length > 0:
            tokens = [t for t in tokens if len(t) >= self.min_token_length]

        result = []
        for token in tokens:
            stemmed = self.stem(token)
            if token in self._stopwords or stemmed in self._stopwords:
                continue
            result.append(stemmed)

        return result

    def token_set(self, text: str) -> dict[str, None]:
        """Unique tokens of text in discovery order."""
        return ordered_unique(self.tokenize(text))

    def most_common(self, text: str, n: int = 10) -> list[str]:
        """
        Most frequent tokens of text.

        Ties keep first-occurrence order (Counter.most_common is stable).
        """
        return [token for token, _ in Counter(self.tokenize(text)).most_common(n)]

    def __call__(self, text: str) -> list[str]:
        return self.tokenize(text)

    def get_config_dict(self) -> dict:
        """Return tokenizer settings as a dictionary."""
        return {
            "use_stemming": self._stemmer is not None,
            "use_stopwords": self.use_stopwords,
            "stopword_count": len(self._stopwords),
            "min_token_length": self.min_token_length,
        }
