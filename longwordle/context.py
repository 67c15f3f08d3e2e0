"""
context.py

ScoringContext owns one corpus snapshot and the tables derived from it.

Every table is built on first use and kept for the life of the context, so
ranking many candidate lists against the same corpus pays for the statistics
once. Two contexts never share state, which keeps different corpora apart.
"""

from functools import cached_property

from .codes import all_possible_codes
from .entropy import build_letter_value_table
from .stats import build_occurrence_table


class ScoringContext:
    def __init__(self, corpus):
        self.corpus = tuple(corpus)

    def __len__(self):
        return len(self.corpus)

    def __repr__(self):
        return f"ScoringContext({len(self.corpus)} words)"

    @cached_property
    def occurrence_table(self):
        return build_occurrence_table(self.corpus)

    @cached_property
    def letter_values(self):
        """LetterCode -> information value over the corpus."""
        return build_letter_value_table(self.occurrence_table, len(self.corpus))

    @cached_property
    def code_universe(self):
        """Every letter code some corpus word contains."""
        return frozenset(all_possible_codes(self.occurrence_table))

    def letter_value(self, code) -> float:
        return self.letter_values.get(code, 0.0)
