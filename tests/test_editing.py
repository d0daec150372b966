import unittest
from texttransforms import editing
from texttransforms.charsets import CharacterSet

PANGRAM = 'The quick brown fox jumps over the lazy dog'
SAMPLES = ['', 'a', PANGRAM, 'cafe\u0301 au lait', '🇫🇷🇩🇪 flags', '👩‍👩‍👧 family']

class TestGraphemes(unittest.TestCase):
    def test_combining_marks_stay_together(self):
        self.assertEqual(editing.graphemes('ae\u0301'), ['a', 'e\u0301'])

    def test_flags(self):
        self.assertEqual(len(editing.graphemes('🇫🇷🇩🇪')), 2)

class TestReplace(unittest.TestCase):
    def test_unbounded(self):
        self.assertEqual(editing.replace('john.doe', '.', '', 0), 'johndoe')

    def test_unbounded_substring_is_case_sensitive(self):
        self.assertEqual(editing.replace('Hello hello', 'hello', 'bye'), 'Hello bye')

    def test_unbounded_empty_target(self):
        self.assertEqual(editing.replace('john', '', '-'), 'john')

    def test_bounded(self):
        self.assertEqual(editing.replace('john.doe@gmail.com', '.', '', 1), 'johndoe@gmail.com')

    def test_bounded_is_case_insensitive(self):
        self.assertEqual(editing.replace('A.a.a', 'a', 'x', 2), 'x.x.a')

    def test_bounded_count_larger_than_matches(self):
        self.assertEqual(editing.replace('a.b', '.', '-', 5), 'a-b')

    def test_bounded_compares_whole_characters(self):
        self.assertEqual(editing.replace('e\u0301e', 'e', 'x', 5), 'e\u0301x')

    def test_negative_count(self):
        with self.assertRaises(ValueError):
            editing.replace('Banana', 'a', 'o', -1)

    def test_bounded_multi_character_target_never_matches(self):
        with self.assertLogs('texttransforms.editing', level='WARNING') as logs:
            result = editing.replace('hello', 'll', 'LL', 1)
        self.assertEqual(result, 'hello')
        self.assertIn('never match', logs.output[0])

class TestTruncate(unittest.TestCase):
    def test_with_ellipsis(self):
        self.assertEqual(editing.truncate(PANGRAM, 10, True), 'The quick ...')

    def test_without_ellipsis(self):
        self.assertEqual(editing.truncate(PANGRAM, 10, False), 'The quick ')

    def test_short_text_still_gets_ellipsis(self):
        self.assertEqual(editing.truncate('Hi', 10), 'Hi...')

    def test_default_length(self):
        text = 'x' * 250
        self.assertEqual(editing.truncate(text), 'x' * 200 + '...')

    def test_zero_length(self):
        self.assertEqual(editing.truncate(PANGRAM, 0), '...')

    def test_length(self):
        for text in SAMPLES:
            size = len(editing.graphemes(text))
            for length in (0, 1, 5, 100):
                with_ellipsis = editing.truncate(text, length, True)
                without = editing.truncate(text, length, False)
                self.assertEqual(len(editing.graphemes(with_ellipsis)), min(size, length) + 3)
                self.assertEqual(len(editing.graphemes(without)), min(size, length))

    def test_does_not_split_graphemes(self):
        self.assertEqual(editing.truncate('e\u0301tude', 1, False), 'e\u0301')

    def test_negative_length(self):
        with self.assertRaises(ValueError):
            editing.truncate(PANGRAM, -1)

class TestTrim(unittest.TestCase):
    def test_default_whitespace(self):
        self.assertEqual(editing.trim(' \t John Doe \u00a0'), 'John Doe')

    def test_interior_untouched(self):
        self.assertEqual(editing.trim('  a  b  '), 'a  b')

    def test_newlines_are_not_whitespace(self):
        self.assertEqual(editing.trim('\n a \n'), '\n a \n')
        self.assertEqual(editing.trim('\n a \n', 'whitespace_and_newlines'), 'a')

    def test_custom_set(self):
        self.assertEqual(editing.trim('--kebab-case--', CharacterSet.of('-')), 'kebab-case')

    def test_everything_trimmed(self):
        self.assertEqual(editing.trim('   '), '')

    def test_idempotent(self):
        for characters in ('whitespace', 'punctuation', CharacterSet.of('ab')):
            for text in ['  x  ', '..!x!..', 'abxba', '', 'ab']:
                once = editing.trim(text, characters)
                self.assertEqual(editing.trim(once, characters), once)

    def test_unknown_set(self):
        with self.assertRaises(KeyError):
            editing.trim('x', 'emoji')

class TestReverse(unittest.TestCase):
    def test_reverse(self):
        self.assertEqual(editing.reverse('stressed'), 'desserts')

    def test_keeps_combining_marks(self):
        self.assertEqual(editing.reverse('ae\u0301'), 'e\u0301a')

    def test_keeps_flags(self):
        self.assertEqual(editing.reverse('🇫🇷🇩🇪'), '🇩🇪🇫🇷')

    def test_round_trip(self):
        for text in SAMPLES:
            self.assertEqual(editing.reverse(editing.reverse(text)), text)

    def test_leading_combining_mark_does_not_round_trip(self):
        once = editing.reverse('\u0301a')
        self.assertEqual(once, 'a\u0301')
        self.assertEqual(editing.reverse(once), 'a\u0301')
