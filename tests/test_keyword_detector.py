"""
KeywordDetectorAgent tests

Phrase matching, index building, statistics and index caching for STEM
keyword detection.
"""

import pytest

from agent.keyword_detection import (
    DEFAULT_TOKEN_CONFIDENCE,
    FIELD_CATEGORIES,
    MAX_PHRASE_LENGTH,
    DetectorConfig,
    IndexCache,
    InvalidTokensError,
    KeywordDetectorAgent,
    KeywordDictionary,
    KeywordIndex,
    PhraseMatcher,
    Position,
    Token,
    compute_statistics,
    create_detector,
    get_all_fields,
    get_default_dictionary,
    get_field_keywords,
    has_field,
)


# Small synthetic dictionary for tests
SAMPLE_KEYWORDS = {
    "machine learning": ["neural network", "deep learning", "model", "gradient descent"],
    "topology": ["homology", "fundamental group", "compact"],
    "algebraic topology": ["homology", "fundamental group", "exact sequence"],
    "quantum mechanics": ["Schrodinger equation", "wave function", "energy"],
    "linear algebra": ["vector space", "vector", "space"],
    "greedy": ["alpha beta", "beta gamma", "beta gamma delta"],
}


def make_words(*texts, confidences=None, y=0, width=40, gap=5, height=15):
    """Lay out words left to right on one line"""
    words = []
    x = 0
    for i, text in enumerate(texts):
        word = {"text": text, "x": x, "y": y, "width": width, "height": height}
        if confidences is not None and confidences[i] is not None:
            word["confidence"] = confidences[i]
        words.append(word)
        x += width + gap
    return words


@pytest.fixture
def dictionary():
    return KeywordDictionary(SAMPLE_KEYWORDS)


@pytest.fixture
def detector(dictionary):
    """Detector over the sample dictionary with default configuration"""
    return KeywordDetectorAgent(dictionary=dictionary)


class TestKeywordDetectorAgent:
    """KeywordDetectorAgent test class"""

    def test_scenario_deep_learning_models(self):
        """Default dictionary: 'deep learning' matches, 'models' stays unmatched"""
        words = [
            {"text": "deep", "x": 0, "y": 0, "width": 40, "height": 15},
            {"text": "learning", "x": 45, "y": 0, "width": 60, "height": 15},
            {"text": "models", "x": 110, "y": 0, "width": 50, "height": 15},
        ]

        detected = KeywordDetectorAgent().detect(words)

        assert len(detected) == 1
        assert detected[0].text == "deep learning"
        assert detected[0].field == "machine learning"
        assert detected[0].word_indices == (0, 1)
        assert detected[0].position == Position(x=0, y=0, width=105, height=15)

    def test_longest_match_precedence(self, detector):
        """Two-word phrase wins over its one-word constituents"""
        detected = detector.detect(make_words("vector", "space"))

        assert [kw.text for kw in detected] == ["vector space"]
        assert detected[0].word_indices == (0, 1)

    def test_single_word_mode(self, dictionary):
        """With phrase matching disabled only one-word keywords match"""
        agent = KeywordDetectorAgent(DetectorConfig(multi_word_matching=False), dictionary=dictionary)

        detected = agent.detect(make_words("vector", "space"))

        assert [kw.text for kw in detected] == ["vector", "space"]
        assert [kw.word_indices for kw in detected] == [(0,), (1,)]

    def test_confidence_averaging(self, detector):
        """Phrase confidence is the mean of its words' confidences"""
        detected = detector.detect(make_words("neural", "network", confidences=[0.9, 0.7]))

        assert len(detected) == 1
        assert detected[0].confidence == pytest.approx(0.8)

    def test_missing_confidence_defaults(self, detector):
        """Words without confidence count as 0.9"""
        detected = detector.detect(make_words("homology", "neural", "network", confidences=[None, None, 0.8]))

        homology = [kw for kw in detected if kw.text == "homology"]
        assert homology[0].confidence == pytest.approx(DEFAULT_TOKEN_CONFIDENCE)
        phrase = next(kw for kw in detected if kw.text == "neural network")
        assert phrase.confidence == pytest.approx(0.85)

    def test_threshold_filtering(self, detector):
        """Matches below min_confidence are dropped and not counted"""
        detected = detector.detect(make_words("energy", "compact", confidences=[0.5, 0.95]))

        assert [kw.text for kw in detected] == ["compact"]
        stats = detector.get_statistics(detected)
        assert stats.total == 1

    def test_threshold_is_inclusive(self, dictionary):
        agent = KeywordDetectorAgent(DetectorConfig(min_confidence=0.7), dictionary=dictionary)

        detected = agent.detect(make_words("energy", confidences=[0.7]))

        assert len(detected) == 1

    def test_filtered_phrase_still_consumes_words(self, detector):
        """A phrase below threshold blocks shorter matches on its words"""
        detected = detector.detect(make_words("vector", "space", confidences=[0.6, 0.7]))

        assert detected == []

    def test_bounding_box(self, detector):
        words = [
            {"text": "wave", "x": 10, "y": 0, "width": 20, "height": 5},
            {"text": "function", "x": 35, "y": 0, "width": 15, "height": 5},
        ]

        detected = detector.detect(words)

        assert detected[0].position == Position(x=10, y=0, width=40, height=5)

    def test_bounding_box_spans_lines(self, detector):
        """Box encloses words that sit at different heights"""
        words = [
            {"text": "gradient", "x": 300, "y": 10, "width": 80, "height": 20},
            {"text": "descent", "x": 0, "y": 40, "width": 70, "height": 22},
        ]

        detected = detector.detect(words)

        assert detected[0].position == Position(x=0, y=10, width=380, height=52)

    def test_case_insensitive_by_default(self, detector):
        detected = detector.detect(make_words("Neural", "Network"))

        assert len(detected) == 1
        assert detected[0].text == "neural network"
        assert detected[0].normalized_text == "neural network"

    def test_case_sensitive(self, dictionary):
        agent = KeywordDetectorAgent(DetectorConfig(case_sensitive=True), dictionary=dictionary)

        assert agent.detect(make_words("Neural", "Network")) == []
        detected = agent.detect(make_words("Schrodinger", "equation"))
        assert [kw.text for kw in detected] == ["Schrodinger equation"]
        assert agent.detect(make_words("schrodinger", "equation")) == []

    def test_multi_field_fan_out(self, detector):
        """A keyword under two fields yields one record per field"""
        detected = detector.detect(make_words("homology"))

        assert [kw.field for kw in detected] == ["topology", "algebraic topology"]
        assert detected[0].word_indices == detected[1].word_indices
        assert detected[0].position == detected[1].position

    def test_multi_field_fan_out_default_dictionary(self):
        detected = KeywordDetectorAgent().detect(make_words("homology"))

        assert {kw.field for kw in detected} == {"topology", "algebraic topology", "evolution"}

    def test_non_overlap(self, detector):
        words = make_words("the", "vector", "space", "has", "a", "neural", "network", "model",
                           "and", "homology", "energy")

        detected = detector.detect(words)

        spans = {kw.word_indices for kw in detected}
        seen = set()
        for span in spans:
            assert seen.isdisjoint(span)
            seen.update(span)
        for span in spans:
            assert list(span) == list(range(span[0], span[-1] + 1))

    def test_greedy_prefers_longer_phrase(self, detector):
        """Longer phrase is taken even if shorter ones would cover more words"""
        detected = detector.detect(make_words("alpha", "beta", "gamma", "delta"))

        assert [kw.text for kw in detected] == ["beta gamma delta"]
        assert detected[0].word_indices == (1, 2, 3)

    def test_same_length_prefers_earlier_start(self, detector):
        detected = detector.detect(make_words("alpha", "beta", "gamma"))

        assert [kw.text for kw in detected] == ["alpha beta"]

    def test_max_phrase_length_is_tunable(self, dictionary):
        agent = KeywordDetectorAgent(DetectorConfig(max_phrase_length=2), dictionary=dictionary)

        detected = agent.detect(make_words("alpha", "beta", "gamma", "delta"))

        assert [kw.text for kw in detected] == ["alpha beta"]

    def test_sorted_by_reading_position(self, detector):
        """Results are ordered by y, then x, not by word order"""
        words = [
            {"text": "energy", "x": 0, "y": 50, "width": 50, "height": 15},
            {"text": "homology", "x": 100, "y": 10, "width": 70, "height": 15},
            {"text": "compact", "x": 0, "y": 10, "width": 60, "height": 15},
        ]

        detected = detector.detect(words)

        assert [kw.text for kw in detected] == ["compact", "homology", "homology", "energy"]

    def test_token_objects_accepted(self, detector):
        words = [Token("deep", 0, 0, 40, 15, 0.95), Token("learning", 45, 0, 60, 15, 0.85)]

        detected = detector.detect(words)

        assert detected[0].text == "deep learning"
        assert detected[0].confidence == pytest.approx(0.9)

    def test_idempotent(self, detector):
        words = make_words("neural", "network", "homology", confidences=[0.9, 0.8, 0.95])

        assert detector.detect(words) == detector.detect(words)

    def test_empty_input(self, detector):
        assert detector.detect([]) == []

    @pytest.mark.parametrize("words", [None, "deep learning", 42, {"text": "model"}])
    def test_non_list_input_rejected(self, detector, words):
        with pytest.raises(InvalidTokensError):
            detector.detect(words)

    def test_malformed_word_rejected(self, detector):
        words = make_words("deep", "learning")
        del words[1]["x"]

        with pytest.raises(InvalidTokensError) as exc_info:
            detector.detect(words)

        assert exc_info.value.index == 1

    def test_empty_text_rejected(self, detector):
        with pytest.raises(InvalidTokensError):
            detector.detect([{"text": "", "x": 0, "y": 0, "width": 1, "height": 1}])

    def test_non_numeric_position_rejected(self, detector):
        with pytest.raises(InvalidTokensError):
            detector.detect([{"text": "model", "x": "0", "y": 0, "width": 1, "height": 1}])

    @pytest.mark.parametrize("name,value", [
        ("x", float("nan")),
        ("y", float("inf")),
        ("width", float("inf")),
        ("height", float("-inf")),
        ("confidence", float("nan")),
    ])
    def test_non_finite_number_rejected(self, detector, name, value):
        words = make_words("deep", "learning")
        words[1][name] = value

        with pytest.raises(InvalidTokensError) as exc_info:
            detector.detect(words)

        assert exc_info.value.index == 1

    def test_unknown_field_indexes_nothing(self, dictionary):
        agent = KeywordDetectorAgent(DetectorConfig(target_fields=["astrology"]), dictionary=dictionary)

        assert len(agent.index) == 0
        assert agent.detect(make_words("homology")) == []

    def test_target_fields_restrict_matches(self, dictionary):
        agent = KeywordDetectorAgent(DetectorConfig(target_fields=["Topology"]), dictionary=dictionary)

        detected = agent.detect(make_words("homology", "energy"))

        assert [(kw.text, kw.field) for kw in detected] == [("homology", "topology")]

    def test_set_target_fields_swaps_index(self, detector):
        old_index = detector.index

        detector.set_target_fields(["algebraic topology"])

        assert detector.index is not old_index
        assert "energy" in old_index
        assert "energy" not in detector.index
        detected = detector.detect(make_words("homology", "energy"))
        assert [kw.field for kw in detected] == ["algebraic topology"]

    def test_get_config(self, dictionary):
        agent = KeywordDetectorAgent(dictionary=dictionary)

        config = agent.get_config()

        assert config["target_fields"] == list(SAMPLE_KEYWORDS.keys())
        assert config["min_confidence"] == 0.7
        assert config["case_sensitive"] is False
        assert config["multi_word_matching"] is True
        assert config["max_phrase_length"] == MAX_PHRASE_LENGTH
        # homology and fundamental group are shared by two fields
        assert config["indexed_keywords"] == 17

    def test_create_detector(self, dictionary):
        agent = create_detector(dictionary=dictionary, target_fields=["linear algebra"], min_confidence=0.5)

        assert agent.get_config()["min_confidence"] == 0.5
        assert agent.get_config()["target_fields"] == ["linear algebra"]

    @pytest.mark.asyncio
    async def test_process(self, detector):
        detected = await detector.process(make_words("gradient", "descent"))

        assert [kw.text for kw in detected] == ["gradient descent"]

    def test_to_dict(self, detector):
        detected = detector.detect(make_words("neural", "network"))

        assert detected[0].to_dict() == {
            "text": "neural network",
            "normalizedText": "neural network",
            "field": "machine learning",
            "confidence": pytest.approx(0.9),
            "position": {"x": 0, "y": 0, "width": 85, "height": 15},
            "wordIndices": [0, 1],
        }


class TestKeywordIndex:
    """KeywordIndex test class"""

    def test_buckets_follow_field_order(self, dictionary):
        index = KeywordIndex.build(dictionary, ["algebraic topology", "topology"])

        assert [e.field for e in index.lookup("homology")] == ["algebraic topology", "topology"]

    def test_word_count(self, dictionary):
        index = KeywordIndex.build(dictionary)

        assert index.lookup("beta gamma delta")[0].word_count == 3
        assert index.lookup("model")[0].word_count == 1
        assert index.max_word_count == 3

    def test_lowercases_when_case_insensitive(self, dictionary):
        index = KeywordIndex.build(dictionary, ["quantum mechanics"])

        entries = index.lookup("schrodinger equation")
        assert entries[0].keyword == "Schrodinger equation"
        assert index.lookup("Schrodinger equation") == ()

    def test_case_sensitive_keeps_casing(self, dictionary):
        index = KeywordIndex.build(dictionary, ["quantum mechanics"], case_sensitive=True)

        assert index.lookup("Schrodinger equation")
        assert index.lookup("schrodinger equation") == ()
        assert index.normalize("Wave Function") == "Wave Function"

    def test_colliding_keywords_are_kept(self):
        dictionary = KeywordDictionary({"chemistry": ["pH", "ph"]})

        index = KeywordIndex.build(dictionary)

        assert [e.keyword for e in index.lookup("ph")] == ["pH", "ph"]
        assert len(index) == 1
        assert index.entry_count == 2

    def test_repeated_field_indexed_once(self, dictionary):
        index = KeywordIndex.build(dictionary, ["topology", "topology"])

        assert len(index.lookup("homology")) == 1

    def test_deterministic(self, dictionary):
        first = KeywordIndex.build(dictionary, ["topology", "greedy"])
        second = KeywordIndex.build(dictionary, ["topology", "greedy"])

        for phrase in ("homology", "alpha beta", "beta gamma delta"):
            assert first.lookup(phrase) == second.lookup(phrase)
        assert len(first) == len(second)

    def test_does_not_mutate_dictionary(self, dictionary):
        before = {f: dictionary.keywords(f) for f in dictionary.fields()}

        KeywordIndex.build(dictionary, case_sensitive=True)

        assert {f: dictionary.keywords(f) for f in dictionary.fields()} == before


class TestPhraseMatcher:
    """PhraseMatcher test class"""

    def test_invalid_max_phrase_length(self):
        with pytest.raises(ValueError):
            PhraseMatcher(max_phrase_length=0)

    def test_matches_against_index(self, dictionary):
        index = KeywordIndex.build(dictionary, ["linear algebra"])
        matcher = PhraseMatcher(min_confidence=0.0)

        detected = matcher.match(make_words("vector", "space", "vector"), index)

        assert [(kw.text, kw.word_indices) for kw in detected] == [
            ("vector space", (0, 1)),
            ("vector", (2,)),
        ]

    def test_zero_confidence_is_not_defaulted(self, dictionary):
        index = KeywordIndex.build(dictionary)
        matcher = PhraseMatcher(min_confidence=0.0)

        detected = matcher.match(make_words("energy", confidences=[0.0]), index)

        assert detected[0].confidence == 0.0


class TestStatistics:
    """compute_statistics test class"""

    def test_empty(self):
        stats = compute_statistics([])

        assert stats.to_dict() == {
            "total": 0,
            "byField": {},
            "averageConfidence": 0,
            "uniqueTerms": 0,
        }

    def test_counts(self, detector):
        detected = detector.detect(make_words("homology", "compact", "homology", confidences=[0.9, 0.8, 1.0]))

        stats = compute_statistics(detected)

        assert stats.total == 5
        assert stats.by_field == {"topology": 3, "algebraic topology": 2}
        assert stats.unique_terms == 2
        assert stats.average_confidence == pytest.approx((0.9 * 2 + 0.8 + 1.0 * 2) / 5)


class TestKeywordDictionary:
    """KeywordDictionary test class"""

    def test_field_lookup_is_case_insensitive(self, dictionary):
        assert dictionary.has_field("  Machine Learning ")
        assert dictionary.keywords("MACHINE LEARNING")[0] == "neural network"
        assert dictionary.keywords("astrology") == ()
        assert "topology" in dictionary

    def test_len_and_max_word_count(self, dictionary):
        assert len(dictionary) == 19
        assert dictionary.max_word_count() == 3

    def test_default_dictionary(self):
        dictionary = get_default_dictionary()

        assert len(dictionary.fields()) == 37
        assert len(dictionary) > 1000
        assert dictionary.max_word_count() <= MAX_PHRASE_LENGTH
        assert get_default_dictionary() is dictionary

    def test_default_dictionary_helpers(self):
        assert get_all_fields() == get_default_dictionary().fields()
        assert "gradient descent" in get_field_keywords(" Machine Learning")
        assert get_field_keywords("astrology") == []
        assert has_field("TOPOLOGY")
        assert not has_field("astrology")

    def test_categories_cover_every_field_once(self):
        dictionary = get_default_dictionary()

        categorized = [f for fields in FIELD_CATEGORIES.values() for f in fields]
        assert sorted(categorized) == sorted(dictionary.fields())
        assert set(dictionary.categories()) == {
            "mathematics", "computer science", "physics", "chemistry", "biology", "engineering"
        }


class TestIndexCache:
    """IndexCache test class"""

    def test_hit_returns_same_index(self, dictionary):
        cache = IndexCache(max_size=4)

        first = cache.get_or_build(dictionary, ["topology"])
        second = cache.get_or_build(dictionary, ["Topology"])

        assert first is second
        assert cache.get_stats()["hits"] == 1
        assert cache.get_stats()["misses"] == 1

    def test_case_mode_separates_entries(self, dictionary):
        cache = IndexCache()

        insensitive = cache.get_or_build(dictionary, None, case_sensitive=False)
        sensitive = cache.get_or_build(dictionary, None, case_sensitive=True)

        assert insensitive is not sensitive
        assert len(cache) == 2

    def test_lru_eviction(self, dictionary):
        cache = IndexCache(max_size=2)

        topology = cache.get_or_build(dictionary, ["topology"])
        cache.get_or_build(dictionary, ["greedy"])
        cache.get_or_build(dictionary, ["topology"])
        cache.get_or_build(dictionary, ["linear algebra"])

        assert len(cache) == 2
        assert cache.get_or_build(dictionary, ["topology"]) is topology
        assert cache.get_stats()["misses"] == 3

    def test_different_dictionaries_do_not_share(self, dictionary):
        cache = IndexCache()
        other = KeywordDictionary({"topology": ["manifold"]})

        first = cache.get_or_build(dictionary, ["topology"])
        second = cache.get_or_build(other, ["topology"])

        assert first is not second
        assert "manifold" in second

    def test_detectors_share_cached_index(self, dictionary):
        cache = IndexCache()

        a = KeywordDetectorAgent(DetectorConfig(min_confidence=0.5), dictionary=dictionary, index_cache=cache)
        b = KeywordDetectorAgent(DetectorConfig(min_confidence=0.9), dictionary=dictionary, index_cache=cache)

        assert a.index is b.index

    def test_clear(self, dictionary):
        cache = IndexCache()
        cache.get_or_build(dictionary)

        cache.clear()

        assert len(cache) == 0
        assert cache.get_stats()["hits"] == 0
