"""Shared fixtures for SIEVE tests."""

import pytest
from nltk.stem import PorterStemmer

from sieve.utils.token_processing import Tokenizer

# Small fixed stopword set so tests never need the NLTK corpus download
TEST_STOPWORDS = {"the", "and", "with", "for", "this", "was", "are", "you", "our"}

SAMPLE_CV = """Jane Doe
jane@example.com
+44 20 7946 0958

SUMMARY
Backend engineer with ten years of experience building distributed systems.

SKILLS
Python, Go, PostgreSQL

EXPERIENCE
Senior Engineer | Acme | Jan 2020 - Present
• Led platform team
Engineer | Globex | 2016 - 2019
• Built billing pipeline

EDUCATION
MSc Computer Science, University of Edinburgh, 2015
BSc Mathematics, University of Leeds, 2013
"""


@pytest.fixture
def tokenizer():
    return Tokenizer(custom_stopwords=TEST_STOPWORDS)


@pytest.fixture
def stem():
    return PorterStemmer().stem


@pytest.fixture
def sample_cv():
    return SAMPLE_CV
