from services.tokenizer import split_sentences, tokenize_words


def test_tokenize_words_lowercases_and_strips_edge_punctuation():
    assert tokenize_words("  Hello, World!  It's   \"fine\". ") == ["hello", "world", "it's", "fine"]


def test_tokenize_words_drops_punctuation_only_tokens():
    assert tokenize_words("Well - I think ... so") == ["well", "i", "think", "so"]


def test_tokenize_words_empty_transcript():
    assert tokenize_words("   ") == []


def test_split_sentences_drops_empty_segments():
    sentences = split_sentences("I are happy!! ... I saw a apple?  Yes.")
    assert sentences == ["I are happy", "I saw a apple", "Yes"]


def test_split_sentences_without_terminator():
    assert split_sentences("no punctuation here") == ["no punctuation here"]


def test_tokenize_words_strips_unicode_quotes():
    assert tokenize_words("It was “good” — ¿really?") == ["it", "was", "good", "really"]
