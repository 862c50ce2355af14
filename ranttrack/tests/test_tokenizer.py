from ranttrack.services.tokenizer import (
    is_negated,
    is_phrase_negated,
    sentence_distance,
    token_index_at,
    token_offsets,
    tokenize,
    window,
)


def test_tokenize_lowercases_and_keeps_boundaries():
    assert tokenize("I'm SO tired, really!") == ["i'm", "so", "tired", "really", "!"]


def test_tokenize_collapses_repeated_punctuation():
    assert tokenize("Wait... what?!") == ["wait", ".", "what", "?"]


def test_tokenize_keeps_decimal_ratings_whole():
    assert tokenize("pain 7.5/10") == ["pain", "7.5/10"]


def test_tokenize_is_total():
    assert tokenize("") == []
    assert tokenize(None) == []
    assert tokenize("🙃 ,,, ;;") == ["🙃"]


def test_negation_within_lookback():
    tokens = tokenize("I am not tired")
    assert is_negated(tokens, tokens.index("tired")) is True
    tokens = tokenize("I don't feel tired")
    assert is_negated(tokens, tokens.index("tired")) is True


def test_negation_stops_at_sentence_boundary():
    tokens = tokenize("Not great today! I am exhausted")
    assert is_negated(tokens, tokens.index("exhausted")) is False


def test_negation_lookback_is_bounded():
    near = ["no"] + ["word"] * 9 + ["tired"]
    far = ["no"] + ["word"] * 10 + ["tired"]
    assert is_negated(near, len(near) - 1) is True
    assert is_negated(far, len(far) - 1) is False


def test_phrase_negation_patterns():
    text = "I have no brain fog"
    assert is_phrase_negated(text, text.index("brain")) is True
    text = "Slept badly. Brain fog all morning"
    assert is_phrase_negated(text, text.index("Brain")) is False
    text = "a complete lack of energy"
    assert is_phrase_negated(text, text.index("energy")) is True


def test_window_clips_to_sentence():
    tokens = ["a", ".", "b", "c", "d", "e"]
    assert window(tokens, 2, 2, 2, stop_at_boundary=True) == [3, 4]
    assert window(tokens, 2, 2, 2) == [0, 1, 3, 4]


def test_offsets_and_sentence_distance():
    assert token_offsets("Pain, pain", ["pain", "pain"]) == [0, 6]
    assert token_offsets("abc", ["zzz"]) == [-1]
    assert sentence_distance("a. b! c", 0, 6) == 2
    assert sentence_distance("a. b! c", 6, 0) == 2


def test_token_index_at():
    text = "I have a slight headache"
    assert token_index_at(text, text.index("headache")) == 4
