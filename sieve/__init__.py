"""
SIEVE - Structured Intake and Evaluation of Vitae Entries

Turns the plain text of a résumé into a structured CV record, scores it against
an optional job description, and derives suggestions for the candidate.

Architecture:
- Intake Context: Text normalization, section location, field extraction, CV parsing
- Scoring Context: Keyword matching, ATS scoring, insights and completeness

Text extraction from PDF/DOCX/images and PDF rendering are handled by external
collaborators. They hand SIEVE plain text and consume the structured records.
"""

__version__ = "0.1.0"
