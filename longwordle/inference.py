"""
inference.py

Works out which letter codes earlier guesses have already settled.

Feedback uses the same digits as the usual Wordle encoding:

    0 = absent   (letter not in the target, or no further copies of it)
    1 = present  (letter in the target, wrong position)
    2 = correct  (letter in the target, right position)

For letter codes, 1 and 2 both mean "one more copy of this letter is in the
target". If a guess has two b's and only one of them comes back non-absent,
then b1 is known to be in the target and b2, b3, ... are known not to be.
If both come back non-absent, b1 and b2 are known and nothing is learned
about b3.
"""

from typing import NamedTuple

from .codes import LetterCode


ABSENT = 0
PRESENT = 1
CORRECT = 2

FEEDBACK_SYMBOLS = (ABSENT, PRESENT, CORRECT)


class ImpliedCodes(NamedTuple):
    include: list[LetterCode]
    exclude: list[LetterCode]


def parse_feedback(text: str) -> list[int]:
    """Parse a feedback string such as "2100012000" into a list of ints."""
    try:
        feedback = [int(ch) for ch in text.strip()]
    except ValueError as exc:
        raise ValueError(f"feedback must be a string of 0/1/2 digits: {text!r}") from exc
    validate_symbols(feedback)
    return feedback


def validate_symbols(feedback) -> None:
    for symbol in feedback:
        if symbol not in FEEDBACK_SYMBOLS:
            raise ValueError(
                f"feedback symbol {symbol!r} is not one of {FEEDBACK_SYMBOLS}"
            )


def implied_codes(guess: str, feedback, universe) -> ImpliedCodes:
    """
    Letter codes proven included or excluded by one guess.

    `universe` is the collection of all letter codes the corpus can contain;
    the exclusion walk for a letter stops at the first code outside it.
    Included codes are always reported, even past the universe, since the
    feedback proves them directly.
    """
    if len(feedback) != len(guess):
        raise ValueError(
            f"feedback has {len(feedback)} symbols but guess {guess!r} "
            f"has {len(guess)} letters"
        )
    validate_symbols(feedback)

    include_counts = {}
    excluded = set()
    for letter, symbol in zip(guess, feedback):
        include_counts.setdefault(letter, 0)
        if symbol == ABSENT:
            excluded.add(letter)
        else:
            include_counts[letter] += 1

    include = []
    exclude = []
    for letter, count in include_counts.items():
        include.extend(LetterCode(letter, n) for n in range(1, count + 1))

        if letter in excluded:
            ordinal = count + 1
            while LetterCode(letter, ordinal) in universe:
                exclude.append(LetterCode(letter, ordinal))
                ordinal += 1

    return ImpliedCodes(include, exclude)


def known_codes(guesses, results, universe) -> set[LetterCode]:
    """Union of included and excluded codes over a whole guess history."""
    if len(guesses) != len(results):
        raise ValueError(
            f"got {len(guesses)} guesses but {len(results)} feedback results"
        )

    known = set()
    for guess, feedback in zip(guesses, results):
        implied = implied_codes(guess, feedback, universe)
        known.update(implied.include)
        known.update(implied.exclude)
    return known
