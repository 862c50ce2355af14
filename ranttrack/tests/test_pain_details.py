from ranttrack.services.body_locations import category_for_location, find_location
from ranttrack.services.pain_details import extract_pain_details


def test_qualifiers_location_and_severity():
    [mention] = extract_pain_details("severe sharp stabbing pain in my neck")
    assert mention["qualifiers"] == ["sharp", "stabbing"]
    assert mention["location"] == "neck"
    assert mention["severity"] == "severe"
    assert mention["matched_text"] == "severe sharp stabbing pain in my neck"


def test_severity_words_are_not_qualifiers():
    [mention] = extract_pain_details("intense burning pain in my knee")
    assert mention["qualifiers"] == ["burning"]
    assert mention["severity"] == "severe"
    assert extract_pain_details("intense fatigue") == []
    [bare] = extract_pain_details("excruciating ache in my jaw")
    assert bare["qualifiers"] == []
    assert bare["location"] == "jaw"
    assert bare["severity"] == "severe"


def test_qualifier_only_mention():
    [mention] = extract_pain_details("burning pain in my chest")
    assert mention["qualifiers"] == ["burning"]
    assert mention["location"] == "chest"


def test_two_word_location_beats_single_word():
    [mention] = extract_pain_details("sharp pain in my lower back")
    assert mention["location"] == "lower_back"


def test_location_search_stops_at_sentence_end():
    [mention] = extract_pain_details("Sharp. My knee is fine")
    assert mention["qualifiers"] == ["sharp"]
    assert mention["location"] is None


def test_bare_pain_word_is_not_reported():
    assert extract_pain_details("everything hurts") == []
    assert extract_pain_details("my legs feel heavy") == []


def test_location_tables():
    assert find_location("knee") == "knee"
    assert find_location("lower back") == "lower_back"
    assert find_location("elbowish") is None
    assert category_for_location("temple") == "headache"
    assert category_for_location("lower_back") == "back_pain"
    assert category_for_location("knee") == "pain"
    assert category_for_location(None) == "pain"
