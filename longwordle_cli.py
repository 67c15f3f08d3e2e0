"""
longwordle_cli.py

Unified CLI for letter-code information rankings.

Modes:
-words 1 (default): top single opening words
-words 2: top two-word openings from a shortlist of the best single words
-words 3: top three-word openings (budgeted, can be very expensive)

Optional:
-after WORD...: rank the next guess after these words.
-results FEEDBACK...: feedback for each -after word (e.g. 2100012000), so only
  information the feedback has not settled is scored.
-pair WORD1 WORD2 / -triple WORD1 WORD2 WORD3: score one specific combination.
-table: dump the raw letter value table.
-force: skip confirmation prompt for -words 3.
"""

import argparse
import logging

from longwordle.context import ScoringContext
from longwordle.inference import parse_feedback
from longwordle.ranking import (
    letter_value_ranking,
    rank_first_two_word_pairs,
    rank_first_words,
    rank_words_after,
    rank_words_after_results,
    score_word,
    score_word_set,
)
from longwordle.trios import (
    DEFAULT_CUTOFF,
    DEFAULT_MAX_TRIALS,
    build_position_values,
    rank_word_trios,
    score_word_trio,
)
from longwordle.util import head
from longwordle.words import DICTIONARY_PATH, load_words


TOP_SINGLE = 20
TOP_PAIRS = 50
TOP_TRIPLES = 50
DEFAULT_POOL = 200


def print_ranking(title, ranking, top):
    print(f"\n{title}:")
    if not ranking:
        print("(nothing scored above zero)")
        return
    for key, score in head(ranking, top).items():
        print(f"{key.replace(',', ' + ')}: {score:.4f}")


def shortlist(context, pool):
    """The `pool` best single words, the search space for pairs and trios."""
    return list(head(rank_first_words(context), pool))


def run_single_word(context, top):
    print_ranking("Top single words", rank_first_words(context), top)


def run_two_words(context, top, pool, progress):
    words = shortlist(context, pool)
    ranking = rank_first_two_word_pairs(context, words, progress=progress)
    print_ranking("Top two-word openings", ranking, top)


def run_three_words(context, top, pool, cutoff, max_trials, progress):
    words = shortlist(context, pool)
    n_words = len(words)
    trios = n_words**3 / 6
    print(f"Search list size: {n_words} words (dictionary: {len(context)})")
    print(f"Calculating trio rankings of ~{trios:,.0f} word trios...")
    if trios > 0:
        print(f"Limited to the first {max_trials:,} trios (~{min(100.0, max_trials / trios * 100):.1f}%)")

    ranking = rank_word_trios(context, words, cutoff, max_trials, progress=progress)
    print_ranking("Top three-word openings", ranking, top)


def run_after(context, after, results, top):
    if results:
        feedback = [parse_feedback(text) for text in results]
        ranking = rank_words_after_results(context, after, feedback)
        title = "Best next words given feedback"
    else:
        ranking = rank_words_after(context, after)
        title = "Best next words after " + ", ".join(after)
    print_ranking(title, ranking, top)


def run_specific(context, words):
    if len(words) == 2:
        score = score_word_set(context, *words)
    else:
        position_values = build_position_values(context.corpus)
        score = score_word_trio(context, position_values, *words)
    singles = [score_word(context, w) for w in words]

    missing = [w for w in words if w not in context.corpus]
    if missing:
        print("Not in dictionary: " + ", ".join(missing))
    parts = ", ".join(f"{s:.4f}" for s in singles)
    print(f"\n{' + '.join(words)}: {score:.4f} ({parts})")


def run_table(context):
    ranking = letter_value_ranking(context)
    print("\nLetter value table:")
    for code, score in ranking.items():
        print(f"{code}: {score:.4f}")


def confirm_three_words(force):
    if force:
        return True

    print("WARNING: -words 3 is expensive and may run for a long time.")
    print("Use -force to skip this confirmation in non-interactive runs.")
    try:
        response = input("Type YES to continue: ").strip()
    except EOFError:
        print("Aborted: no interactive input available. Re-run with -force.")
        return False

    if response != "YES":
        print("Aborted.")
        return False

    return True


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Letter-code information rankings for one-, two-, and three-word openings."
    )
    parser.add_argument(
        "-words",
        type=int,
        choices=(1, 2, 3),
        default=1,
        help="Number of opening words to optimize (default: 1).",
    )
    parser.add_argument(
        "-top",
        type=int,
        default=None,
        help="Number of results to print.",
    )
    parser.add_argument(
        "-dictionary",
        type=str,
        default=str(DICTIONARY_PATH),
        help="Newline-separated word list (default: data/dictionary.txt).",
    )
    parser.add_argument(
        "-pool",
        type=int,
        default=DEFAULT_POOL,
        help="For -words 2/3, search only the N best single words.",
    )
    parser.add_argument(
        "-cutoff",
        type=float,
        default=DEFAULT_CUTOFF,
        help="For -words 3, drop trios below this fraction of the best so far.",
    )
    parser.add_argument(
        "-max-trials",
        type=int,
        default=DEFAULT_MAX_TRIALS,
        help="For -words 3, stop after scoring this many trios.",
    )
    specific_group = parser.add_mutually_exclusive_group()
    specific_group.add_argument(
        "-after",
        nargs="+",
        metavar="WORD",
        help="Rank the next guess after these words; overrides -words.",
    )
    specific_group.add_argument(
        "-pair",
        nargs=2,
        metavar=("WORD1", "WORD2"),
        help="Score one specific pair; overrides -words.",
    )
    specific_group.add_argument(
        "-triple",
        nargs=3,
        metavar=("WORD1", "WORD2", "WORD3"),
        help="Score one specific triple; overrides -words.",
    )
    specific_group.add_argument(
        "-table",
        action="store_true",
        help="Print the letter value table, zero-valued codes included.",
    )
    parser.add_argument(
        "-results",
        nargs="+",
        metavar="FEEDBACK",
        help="Feedback digits for each -after word: 0 absent, 1 present, 2 correct.",
    )
    parser.add_argument(
        "-force",
        action="store_true",
        help="Skip confirmation prompt for expensive -words 3 searches.",
    )
    parser.add_argument(
        "-no-progress",
        action="store_true",
        help="Hide progress bars for pair/trio searches.",
    )
    parser.add_argument(
        "-verbose",
        action="store_true",
        help="Log table builds and search statistics.",
    )
    args = parser.parse_args(argv)
    if args.results is not None and args.after is None:
        parser.error("-results requires -after")
    return args


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        context = ScoringContext(load_words(args.dictionary))

        if args.table:
            run_table(context)
            return

        if args.after is not None:
            after = [w.lower() for w in args.after]
            run_after(context, after, args.results, args.top or TOP_SINGLE)
            return

        if args.pair is not None or args.triple is not None:
            run_specific(context, [w.lower() for w in (args.pair or args.triple)])
            return

        if args.words == 1:
            run_single_word(context, args.top or TOP_SINGLE)
            return

        if args.words == 3:
            if not confirm_three_words(args.force):
                return
            run_three_words(
                context,
                args.top or TOP_TRIPLES,
                args.pool,
                args.cutoff,
                args.max_trials,
                not args.no_progress,
            )
            return

        run_two_words(context, args.top or TOP_PAIRS, args.pool, not args.no_progress)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
