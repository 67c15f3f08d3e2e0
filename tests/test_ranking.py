import unittest

from longwordle.codes import LetterCode, covered_letter_codes, letter_codes
from longwordle.context import ScoringContext
from longwordle.entropy import entropy
from longwordle.ranking import (
    letter_value_ranking,
    rank_first_two_word_pairs,
    rank_first_words,
    rank_words_after,
    rank_words_after_results,
    score_word,
    score_word_set,
)


TWO_LETTER_CORPUS = ["aa", "ab", "ba", "ac", "bc", "cd", "db", "dc", "bd", "cb"]
FIVE_LETTER_CORPUS = ["abbot", "tabby", "boast", "robot", "taboo", "ghost", "crisp"]


def L(text):
    return LetterCode(text[0], int(text[1:]))


def assert_descending(testcase, ranking):
    scores = list(ranking.values())
    testcase.assertEqual(scores, sorted(scores, reverse=True))


class TestScoring(unittest.TestCase):
    def setUp(self) -> None:
        self.context = ScoringContext(TWO_LETTER_CORPUS)

    def test_score_word_sums_code_values(self) -> None:
        self.assertAlmostEqual(score_word(self.context, "aa"), entropy(0.4) + entropy(0.1))
        self.assertAlmostEqual(score_word(self.context, "ab"), entropy(0.4) + entropy(0.6))

    def test_word_set_counts_shared_codes_once(self) -> None:
        expected = entropy(0.4) + entropy(0.1) + entropy(0.6)
        self.assertAlmostEqual(score_word_set(self.context, "aa", "ab"), expected)
        self.assertAlmostEqual(
            score_word_set(self.context, "ab", "ba"), score_word(self.context, "ab")
        )

    def test_word_paired_with_itself(self) -> None:
        for word in TWO_LETTER_CORPUS:
            self.assertAlmostEqual(
                score_word_set(self.context, word, word), score_word(self.context, word)
            )

    def test_unknown_letters_score_zero(self) -> None:
        self.assertEqual(score_word(self.context, "zz"), 0.0)


class TestRankFirstWords(unittest.TestCase):
    def test_fresh_code_beats_second_copy(self) -> None:
        # a2 is rare enough here to be worth less than a fresh b1.
        ranking = rank_first_words(ScoringContext(TWO_LETTER_CORPUS))
        order = list(ranking)
        self.assertLess(order.index("ab"), order.index("aa"))

    def test_sorted_and_positive(self) -> None:
        ranking = rank_first_words(ScoringContext(FIVE_LETTER_CORPUS))
        self.assertEqual(set(ranking), set(FIVE_LETTER_CORPUS))
        assert_descending(self, ranking)
        assert all(score > 0 for score in ranking.values())

    def test_idempotent(self) -> None:
        context = ScoringContext(FIVE_LETTER_CORPUS)
        self.assertEqual(rank_first_words(context), rank_first_words(context))
        self.assertEqual(
            list(rank_first_words(context)),
            list(rank_first_words(ScoringContext(FIVE_LETTER_CORPUS))),
        )

    def test_non_positive_entries(self) -> None:
        context = ScoringContext(["ab", "ab"])
        self.assertEqual(rank_first_words(context), {})
        self.assertEqual(rank_first_words(context, include_non_positive=True), {"ab": 0.0})


class TestRankPairs(unittest.TestCase):
    def test_every_unordered_pair(self) -> None:
        context = ScoringContext(TWO_LETTER_CORPUS)
        ranking = rank_first_two_word_pairs(context, ["aa", "ab", "cd"])
        self.assertEqual(set(ranking), {"aa,ab", "aa,cd", "ab,cd"})
        self.assertAlmostEqual(ranking["aa,ab"], score_word_set(context, "aa", "ab"))
        self.assertAlmostEqual(
            ranking["ab,cd"], score_word(context, "ab") + score_word(context, "cd")
        )
        assert_descending(self, ranking)

    def test_fewer_than_two_words(self) -> None:
        context = ScoringContext(TWO_LETTER_CORPUS)
        self.assertEqual(rank_first_two_word_pairs(context, ["ab"]), {})
        self.assertEqual(rank_first_two_word_pairs(context, []), {})


class TestRankWordsAfter(unittest.TestCase):
    def setUp(self) -> None:
        self.context = ScoringContext(FIVE_LETTER_CORPUS)

    def test_guessed_codes_are_spent(self) -> None:
        spent = set(letter_codes("abbot"))
        self.assertEqual(spent, {L("a1"), L("b1"), L("b2"), L("o1"), L("t1")})

        ranking = rank_words_after(self.context, ["abbot"])
        self.assertNotIn("abbot", ranking)
        for word, score in ranking.items():
            fresh = [c for c in letter_codes(word) if c not in spent]
            self.assertAlmostEqual(score, sum(self.context.letter_value(c) for c in fresh))

        self.assertAlmostEqual(ranking["tabby"], self.context.letter_value(L("y1")))

    def test_words_with_nothing_new_are_dropped(self) -> None:
        ranking = rank_words_after(ScoringContext(TWO_LETTER_CORPUS), ["ab"])
        self.assertNotIn("ab", ranking)
        self.assertNotIn("ba", ranking)
        self.assertIn("cd", ranking)

    def test_candidate_list_can_differ_from_corpus(self) -> None:
        ranking = rank_words_after(self.context, ["abbot"], ["crisp", "ghost", "abbot"])
        self.assertEqual(set(ranking), {"crisp", "ghost"})

    def test_guess_outside_corpus(self) -> None:
        ranking = rank_words_after(self.context, ["zzzzz"])
        self.assertEqual(ranking, rank_first_words(self.context))


class TestRankWordsAfterResults(unittest.TestCase):
    def setUp(self) -> None:
        self.context = ScoringContext(FIVE_LETTER_CORPUS)

    def test_absent_letters_settle_all_their_codes(self) -> None:
        # Only the "a" is in the target: b1, b2, o1, o2 and t1 are all ruled out.
        ranking = rank_words_after_results(self.context, ["abbot"], [[2, 0, 0, 0, 0]])
        known = {L("a1"), L("b1"), L("b2"), L("o1"), L("o2"), L("t1")}

        self.assertNotIn("abbot", ranking)
        self.assertNotIn("taboo", ranking)
        self.assertAlmostEqual(ranking["robot"], self.context.letter_value(L("r1")))
        for word, score in ranking.items():
            fresh = [c for c in letter_codes(word) if c not in known]
            self.assertAlmostEqual(score, sum(self.context.letter_value(c) for c in fresh))

    def test_all_present_matches_blind_ranking(self) -> None:
        with_results = rank_words_after_results(self.context, ["abbot"], [[2, 1, 1, 1, 1]])
        blind = rank_words_after(self.context, ["abbot"])
        self.assertEqual(with_results, blind)
        # o2 is still unknown, so "robot" keeps its value.
        self.assertAlmostEqual(
            with_results["robot"],
            self.context.letter_value(L("r1")) + self.context.letter_value(L("o2")),
        )

    def test_several_guesses_accumulate(self) -> None:
        ranking = rank_words_after_results(
            self.context, ["abbot", "crisp"], [[2, 1, 1, 1, 1], [0, 0, 0, 0, 0]]
        )
        self.assertNotIn("crisp", ranking)
        self.assertAlmostEqual(ranking["robot"], self.context.letter_value(L("o2")))

    def test_mismatched_history(self) -> None:
        with self.assertRaises(ValueError):
            rank_words_after_results(self.context, ["abbot"], [])
        with self.assertRaises(ValueError):
            rank_words_after_results(self.context, ["abbot"], [[2, 0]])


class TestLetterValueRanking(unittest.TestCase):
    def test_keeps_zero_valued_codes(self) -> None:
        ranking = letter_value_ranking(ScoringContext(["ab", "ac"]))
        self.assertEqual(list(ranking), ["b1", "c1", "a1"])
        self.assertEqual(ranking["a1"], 0.0)
        self.assertAlmostEqual(ranking["b1"], 0.5)

    def test_covers_the_code_universe(self) -> None:
        context = ScoringContext(FIVE_LETTER_CORPUS)
        ranking = letter_value_ranking(context)
        self.assertEqual(set(ranking), {str(c) for c in context.code_universe})
        self.assertEqual(
            covered_letter_codes(*FIVE_LETTER_CORPUS), set(context.code_universe)
        )


if __name__ == "__main__":
    unittest.main()
