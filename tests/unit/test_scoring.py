"""Unit tests for the weight table, score calculator and tier classifier."""

import itertools
import logging

import pytest

from transparency.engines.scoring import (
    TIERS,
    WEIGHTS,
    ScoreCalculator,
    TierClassifier,
    calculate_score,
    classify,
    evaluate,
    max_score,
    weight,
)
from transparency.schemas.disclosure import (
    DisclosureRecord,
    IntensityLevel,
    Selection,
    Stage,
    Tier,
)


class TestWeightTable:
    """Tests for weight lookups."""

    def test_none_is_zero_for_every_stage(self):
        for stage in Stage:
            assert weight(stage, IntensityLevel.NONE) == 0

    def test_configured_weights(self):
        assert weight(Stage.IDEATION, IntensityLevel.LOW) == 8
        assert weight(Stage.RESEARCH, IntensityLevel.LOW) == 12
        assert weight(Stage.TEXT_CREATION, IntensityLevel.HIGH) == 40
        assert weight(Stage.VISUAL_CREATION, IntensityLevel.MEDIUM) == 20

    def test_accepts_wire_strings(self):
        assert weight("textCreation", "medium") == 25

    def test_unknown_pairs_contribute_zero(self):
        """Corrupted lookups degrade to 0 instead of raising."""
        assert weight("audio", "high") == 0
        assert weight(Stage.IDEATION, "extreme") == 0
        assert weight(None, None) == 0

    def test_every_stage_has_every_level(self):
        for stage in Stage:
            assert set(WEIGHTS[stage]) == set(IntensityLevel)

    def test_raw_table_maximum(self):
        """25 + 25 + 40 + 30, above the 0-100 score range."""
        assert max_score() == 120


class TestScoreCalculator:
    """Tests for ScoreCalculator."""

    def test_default_selection_scores_zero(self):
        assert calculate_score(Selection()) == 0

    def test_all_high_is_capped_at_100(self):
        selection = Selection.from_mapping({stage: IntensityLevel.HIGH for stage in Stage})
        assert ScoreCalculator.raw_total(selection) == 120
        assert calculate_score(selection) == 100
        assert evaluate(DisclosureRecord(selection=selection)).tier.label == "High AI Usage"

    def test_every_selection_is_capped_sum_in_range(self):
        """Exhaustive over all 256 selections."""
        for levels in itertools.product(list(IntensityLevel), repeat=len(Stage)):
            selection = Selection.from_mapping(dict(zip(Stage, levels)))
            expected = sum(weight(stage, level) for stage, level in zip(Stage, levels))
            score = calculate_score(selection)
            assert score == min(expected, 100)
            assert 0 <= score <= 100

    def test_breakdown_lists_each_stage(self):
        selection = Selection(ideation=IntensityLevel.LOW, research=IntensityLevel.MEDIUM)
        breakdown = ScoreCalculator.breakdown(selection)
        assert breakdown == {
            Stage.IDEATION: 8,
            Stage.RESEARCH: 20,
            Stage.TEXT_CREATION: 0,
            Stage.VISUAL_CREATION: 0,
        }

    def test_unknown_level_counts_as_none(self):
        selection = Selection.from_mapping({"ideation": "extreme", "research": "low"})
        assert selection.ideation == IntensityLevel.NONE
        assert calculate_score(selection) == 12


class TestTierClassifier:
    """Tests for TierClassifier."""

    def test_default_bands_partition_range(self):
        classifier = TierClassifier()
        assert classifier.find_gaps_and_overlaps() == []
        assert classifier.validate_bands() is True

    def test_exactly_one_band_per_score(self):
        for score in range(0, 101):
            matches = [tier for tier in TIERS if tier.contains(score)]
            assert len(matches) == 1
            assert classify(score) == matches[0]

    @pytest.mark.parametrize(
        "score,label",
        [
            (0, "Minimal AI Usage"),
            (20, "Minimal AI Usage"),
            (21, "Moderate AI Usage"),
            (45, "Moderate AI Usage"),
            (46, "Significant AI Usage"),
            (70, "Significant AI Usage"),
            (71, "High AI Usage"),
            (100, "High AI Usage"),
        ],
    )
    def test_band_edges(self, score, label):
        assert classify(score).label == label

    def test_tier_display_attributes(self):
        tier = classify(92)
        assert tier.color == "#e74c3c"
        assert tier.glyph == "🔴"

    def test_out_of_range_falls_back_to_lowest_tier(self, caplog):
        """A gap is recovered locally and logged as an invariant violation."""
        with caplog.at_level(logging.WARNING):
            assert classify(101) == TIERS[0]
            assert classify(-5) == TIERS[0]
        assert "invariant violation" in caplog.text

    def test_gapped_table_is_detected(self):
        classifier = TierClassifier([
            Tier(min_score=0, max_score=10, label="Low", color="#000", glyph="a"),
            Tier(min_score=12, max_score=100, label="High", color="#fff", glyph="b"),
        ])
        assert classifier.find_gaps_and_overlaps() == [11]
        assert classifier.classify(11).label == "Low"

    def test_empty_table_rejected(self):
        with pytest.raises(ValueError):
            TierClassifier([])


class TestEvaluate:
    """Tests for the combined score + tier step."""

    def test_evaluate_record(self, complete_record):
        result = evaluate(complete_record)
        assert result.score == 43
        assert result.tier.label == "Moderate AI Usage"
        assert result.record == complete_record

    def test_levels_not_required(self):
        result = evaluate(DisclosureRecord(creator_name="A", content_reference="https://a.example"))
        assert result.score == 0
        assert result.tier.label == "Minimal AI Usage"
