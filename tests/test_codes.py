import unittest

from longwordle.codes import (
    LetterCode,
    PositionCode,
    all_possible_codes,
    covered_letter_codes,
    covered_position_codes,
    letter_codes,
    position_codes,
)


def L(text):
    return LetterCode(text[0], int(text[1:]))


class TestLetterCodes(unittest.TestCase):
    def test_abbot(self) -> None:
        codes = letter_codes("abbot")
        self.assertEqual([str(c) for c in codes], ["a1", "b1", "b2", "o1", "t1"])

    def test_one_code_per_letter_without_gaps(self) -> None:
        for word in ["mizzenmast", "defensemen", "abcdefghij", "aaaaaaaaaa"]:
            codes = letter_codes(word)
            assert len(codes) == len(word), word
            assert len(set(codes)) == len(codes), word
            for letter in set(word):
                ordinals = sorted(c.ordinal for c in codes if c.letter == letter)
                self.assertEqual(ordinals, list(range(1, word.count(letter) + 1)))

    def test_memoized(self) -> None:
        self.assertIs(letter_codes("quizmaster"), letter_codes("quizmaster"))

    def test_empty_word(self) -> None:
        self.assertEqual(letter_codes(""), ())

    def test_covered_codes_are_a_union(self) -> None:
        self.assertEqual(covered_letter_codes("ab", "ba"), {L("a1"), L("b1")})
        self.assertEqual(
            covered_letter_codes("aab", "abb"),
            {L("a1"), L("a2"), L("b1"), L("b2")},
        )


class TestPositionCodes(unittest.TestCase):
    def test_positions_are_zero_based(self) -> None:
        self.assertEqual(
            position_codes("abb"),
            (PositionCode("a", 0), PositionCode("b", 1), PositionCode("b", 2)),
        )

    def test_union(self) -> None:
        covered = covered_position_codes("ab", "ac", "ab")
        self.assertEqual(
            covered,
            {PositionCode("a", 0), PositionCode("b", 1), PositionCode("c", 1)},
        )

    def test_str(self) -> None:
        self.assertEqual(str(PositionCode("q", 3)), "q@3")


class TestAllPossibleCodes(unittest.TestCase):
    def test_one_code_per_count_entry(self) -> None:
        table = {"a": [3, 1], "b": [], "c": [2]}
        self.assertEqual(all_possible_codes(table), [L("a1"), L("a2"), L("c1")])

    def test_empty_table(self) -> None:
        self.assertEqual(all_possible_codes({}), [])


if __name__ == "__main__":
    unittest.main()
