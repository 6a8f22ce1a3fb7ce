from vidmetrics.features.text import (
    NON_VEVO,
    OTHER_MOOD,
    VEVO,
    channel_type,
    classify_mood,
    contains_term,
    tokenize_title,
    word_frequencies,
)


def test_tokenize_title_removes_stop_words():
    tokens = tokenize_title("Official Video - Love Song (Official Video)")
    assert tokens == ["love", "song", "(official", "video)"]


def test_tokenize_title_handles_missing_and_extra_spaces():
    assert tokenize_title(None) == []
    assert tokenize_title("  Hello   World ") == ["hello", "world"]


def test_word_frequencies_orders_ties_by_first_seen():
    titles = ["beta alpha", "alpha gamma", "delta", None]
    assert word_frequencies(titles) == [("alpha", 2), ("beta", 1), ("gamma", 1), ("delta", 1)]


def test_word_frequencies_limit():
    titles = [f"word{i}" for i in range(20)]
    assert len(word_frequencies(titles)) == 15
    assert word_frequencies(titles, limit=3) == [("word0", 1), ("word1", 1), ("word2", 1)]


def test_custom_stop_words():
    assert word_frequencies(["Love the song"], stop_words={"love"}) == [("the", 1), ("song", 1)]


def test_contains_term_is_case_insensitive():
    assert contains_term("My REMIX", "remix")
    assert contains_term("Teaser #1", "trailer", "teaser")
    assert not contains_term("Studio cut", "live")
    assert not contains_term(None, "live")


def test_channel_type():
    assert channel_type("TaylorSwiftVEVO") == VEVO
    assert channel_type("vevo classics") == VEVO
    assert channel_type("Indie Records") == NON_VEVO
    assert channel_type(None) == NON_VEVO


def test_classify_mood_first_match_wins():
    assert classify_mood("A sad love story") == "Romantic"
    assert classify_mood("sad party") == "Sad"
    assert classify_mood("PARTY time") == "Party"
    assert classify_mood("Stay motivated") == "Motivational"
    assert classify_mood("instrumental") == OTHER_MOOD
    assert classify_mood(None) == OTHER_MOOD


def test_classify_mood_custom_priority():
    keywords = (("party", "Party"), ("love", "Romantic"))
    assert classify_mood("love party", keywords) == "Party"
