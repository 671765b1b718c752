from string_analyzer.services.nl_parser import translate


def test_single_word_palindromes():
    assert translate("single word palindromes").applied() == {"word_count": 1, "is_palindrome": True}


def test_longer_than_is_strict():
    assert translate("strings longer than 10 characters").applied() == {"min_length": 11}


def test_shorter_than_is_strict():
    assert translate("shorter than 5").applied() == {"max_length": 4}


def test_at_least_is_inclusive():
    assert translate("at least 3 characters").applied() == {"min_length": 3}


def test_first_vowel():
    assert translate("first vowel").applied() == {"contains_character": "a"}


def test_query_is_case_and_space_insensitive():
    assert translate("  PALINDROMIC Strings  ").applied() == {"is_palindrome": True}
    assert translate("words that reads same backwards").is_palindrome is True


def test_word_count_priority():
    assert translate("two word strings").word_count == 2
    assert translate("3 word phrases").word_count == 3
    assert translate("single word or two word").word_count == 1


def test_non_numeric_and_non_positive_numbers_are_ignored():
    assert translate("longer than ten").applied() == {}
    assert translate("shorter than 0").applied() == {}
    assert translate("at least -4").applied() == {}
    assert translate("longer than").applied() == {}


def test_number_token_with_trailing_text():
    assert translate("longer than 7chars").min_length == 8


def test_at_least_overrides_longer_than():
    assert translate("longer than 10 and at least 4").min_length == 4


def test_containing_letter():
    assert translate("strings containing the letter z").contains_character == "z"
    assert translate("contain letter q please").contains_character == "q"


def test_containing_character():
    assert translate("containing the character x").contains_character == "x"


def test_containing_requires_single_character_token():
    assert translate("containing the letter zz").contains_character is None
    assert translate("containing zebras").applied() == {}


def test_letter_without_contain_sets_nothing():
    assert translate("letter z").applied() == {}


def test_first_vowel_wins_over_containing():
    filters = translate("containing the letter z and the first vowel")
    assert filters.contains_character == "a"


def test_rules_combine():
    filters = translate("single word palindromic strings longer than 3 containing the letter a")
    assert filters.applied() == {
        "is_palindrome": True,
        "min_length": 4,
        "word_count": 1,
        "contains_character": "a",
    }


def test_unrecognized_query_matches_everything():
    assert translate("show me everything").applied() == {}
    assert translate("").applied() == {}
