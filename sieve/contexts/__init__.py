"""
Bounded contexts for SIEVE.

- intake: résumé text to CVRecord
- scoring: keyword matching, ATS scoring, insights and the analysis report
"""
