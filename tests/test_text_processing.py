from detector_ia.utils.text_processing import (
    count_phrase,
    get_sentences,
    split_keeping_delimiters,
    tokenize_words,
    word_set,
)


class TestSentenceSplitting:
    def test_three_sentences_in_order(self):
        assert get_sentences("Hola. ¿Cómo estás? Bien!") == ["Hola", "¿Cómo estás", "Bien"]

    def test_delimiter_runs_and_blanks_are_dropped(self):
        assert get_sentences("Uno... dos?! ... tres") == ["Uno", "dos", "tres"]

    def test_only_punctuation_yields_nothing(self):
        assert get_sentences("...!!!???") == []

    def test_capturing_split_keeps_delimiters(self):
        assert split_keeping_delimiters("Hola. Adiós!") == ["Hola", ".", " Adiós", "!", ""]


class TestTokens:
    def test_words_are_case_folded_spanish_letters(self):
        assert tokenize_words("Él comió PAN, ¿y tú? 42") == ["él", "comió", "pan", "y", "tú"]

    def test_word_set_includes_digits(self):
        assert word_set("Año 2024, año") == {"año", "2024"}


class TestPhraseCounting:
    def test_substring_scan_is_not_word_anchored(self):
        # Loose matching: 'a fin de' is found inside 'para fin de'
        assert count_phrase("para fin de año", "a fin de") == 1

    def test_word_boundary_scan(self):
        assert count_phrase("dicho y dichoso", "dicho", word_boundary=True) == 1
        assert count_phrase("dicho y dichoso", "dicho") == 2
