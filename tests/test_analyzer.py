import pytest

from textmetric import NOT_AVAILABLE, TextStatistics, analyze, top_words
from textmetric.analyzer import code_units, tokenize


def test_empty_input_returns_zero_stats():
    result = analyze("")
    assert result == TextStatistics.empty()
    assert result.word_count == 0
    assert result.char_count == 0
    assert result.paragraph_count == 0
    assert result.most_frequent_word == NOT_AVAILABLE
    assert result.most_frequent_word_count == 0
    assert result.longest_word == NOT_AVAILABLE


def test_simple_sentence_counts():
    result = analyze("The quick brown fox.")
    assert result.word_count == 4
    assert result.char_count == 20
    assert result.char_count_no_spaces == 17
    assert result.sentence_count == 1
    assert result.paragraph_count == 1


def test_longest_word():
    assert analyze("React is a JavaScript library").longest_word == "JavaScript"


def test_longest_word_tie_keeps_first():
    assert analyze("cat dog emu").longest_word == "cat"


def test_most_frequent_word_is_case_insensitive():
    result = analyze("Buffalo buffalo Buffalo buffalo buffalo buffalo Buffalo buffalo")
    assert result.most_frequent_word == "buffalo"
    assert result.most_frequent_word_count == 8


def test_most_frequent_word_tie_keeps_first_to_reach_count():
    # "a" reaches 2 before "b" does
    assert analyze("b a a b").most_frequent_word == "a"
    assert analyze("one two three").most_frequent_word == "one"


def test_paragraphs_split_on_newlines():
    result = analyze("Paragraph one.\n\nParagraph two.\nParagraph three.")
    assert result.paragraph_count == 3


def test_hyphenated_words_and_numbers():
    result = analyze("Hello-World! This is test 123.")
    assert result.word_count == 5
    assert result.longest_word == "Hello-World"


def test_underscore_is_part_of_word():
    result = analyze("snake_case word")
    assert result.word_count == 2
    assert result.longest_word == "snake_case"


def test_whitespace_only_text():
    result = analyze("  \n\t ")
    assert result.char_count == 5
    assert result.char_count_no_spaces == 0
    assert result.word_count == 0
    assert result.sentence_count == 0
    assert result.paragraph_count == 0
    assert result.most_frequent_word == NOT_AVAILABLE
    assert result.longest_word == NOT_AVAILABLE


def test_punctuation_only_has_characters_but_no_words():
    result = analyze("?!...")
    assert result.word_count == 0
    assert result.char_count == 5
    assert result.sentence_count == 0
    assert result.paragraph_count == 1


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Hello. World! Really?", 3),
        ("No punctuation here", 1),
        ("Wait... what?!", 2),
        ("Pi is 3.14 today.", 1),
        # abbreviations are counted as sentence breaks
        ("Dr. Smith arrived.", 2),
    ],
)
def test_sentence_count(text, expected):
    assert analyze(text).sentence_count == expected


def test_no_spaces_count_removes_all_whitespace():
    assert analyze("a\tb\nc d\r\ne").char_count_no_spaces == 5


def test_most_frequent_count_bounded_by_word_count():
    result = analyze("to be or not to be")
    assert result.most_frequent_word == "to"
    assert result.most_frequent_word_count == 2
    assert result.most_frequent_word_count <= result.word_count


def test_analyze_is_deterministic():
    text = "Same input.\n\nSame output!"
    assert analyze(text) == analyze(text)


def test_tokenize_keeps_original_casing():
    assert tokenize("Co-operate, NOW!") == ["Co-operate", "NOW"]


def test_top_words_orders_by_count_then_first_appearance():
    assert top_words("b a c a b a", limit=2) == [("a", 3), ("b", 2)]
    assert top_words("x y z", limit=5) == [("x", 1), ("y", 1), ("z", 1)]


def test_top_words_rejects_non_positive_limit():
    with pytest.raises(ValueError):
        top_words("text", limit=0)


def test_characters_counted_in_utf16_code_units():
    result = analyze("hi 😀")
    assert result.char_count == 5
    assert result.char_count_no_spaces == 4
    assert result.word_count == 1


def test_accented_letters_are_word_characters():
    result = analyze("café")
    assert result.word_count == 1
    assert result.longest_word == "café"
    assert result.char_count == 4


def test_code_units_counts_astral_characters_twice():
    assert code_units("") == 0
    assert code_units("abc") == 3
    assert code_units("𝐀b") == 3
