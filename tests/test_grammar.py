from services.grammar import GrammarAnalyzer


def _analyze(*sentences):
    return GrammarAnalyzer().analyze_grammar(list(sentences))


def test_subject_verb_disagreement():
    findings = _analyze("I are happy")
    assert len(findings) == 1
    assert findings[0].error == "Subject-verb disagreement"
    assert findings[0].correction == "I am happy"
    assert findings[0].sentence_index == 0


def test_all_disagreeing_phrases_are_corrected():
    findings = _analyze("You is late and we is early")
    assert findings[0].correction == "you are late and we are early"


def test_article_usage_uses_sentence_position():
    findings = _analyze("Hello there", "I saw a apple")
    assert len(findings) == 1
    assert findings[0].error == "Article usage"
    assert findings[0].correction == "i saw an apple"
    assert findings[0].sentence_index == 1


def test_article_rule_skips_sentences_already_using_an():
    assert _analyze("I ate an egg and a apple") == []


def test_redundant_modifier():
    findings = _analyze("The weather was very unique today")
    assert [f.error for f in findings] == ["Redundant modifier"]
    assert findings[0].correction == "the weather was unique today"


def test_rules_fire_independently_on_one_sentence():
    findings = _analyze("You is a artist and very unique")
    assert [f.error for f in findings] == [
        "Subject-verb disagreement",
        "Article usage",
        "Redundant modifier",
    ]
    assert {f.sentence_index for f in findings} == {0}


def test_phrases_must_be_whole_words():
    assert _analyze("Hi are you there", "They are fine", "Every unique idea counts") == []


def test_no_sentences():
    assert _analyze() == []
