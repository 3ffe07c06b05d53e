"""
Unit tests for the college ranker.
"""

import pytest

from smartadmit.domain.scoring.interfaces import (
    CollegeCandidate,
    ScoringStrategy,
    StudentProfile,
)
from smartadmit.domain.scoring.presets import CATEGORY_WEIGHTS, HOLISTIC_WEIGHTS
from smartadmit.domain.scoring.ranker import CollegePredictor, rank


class TestRank:
    
    def test_sorted_by_descending_score(self, cs_student, candidate_colleges):
        ranked = rank(cs_student, candidate_colleges, top_n=len(candidate_colleges))
        scores = [s.score for s in ranked]
        
        assert len(ranked) == len(candidate_colleges)
        assert scores == sorted(scores, reverse=True)
    
    def test_default_top_four(self, cs_student, candidate_colleges):
        assert len(rank(cs_student, candidate_colleges)) == 4
    
    def test_top_n_larger_than_batch(self, cs_student, candidate_colleges):
        assert len(rank(cs_student, candidate_colleges, top_n=50)) == len(candidate_colleges)
    
    def test_top_n_zero(self, cs_student, candidate_colleges):
        assert rank(cs_student, candidate_colleges, top_n=0) == []
    
    def test_empty_batch(self, cs_student):
        assert rank(cs_student, []) == []
    
    def test_ties_keep_input_order(self, cs_student):
        colleges = [CollegeCandidate(name=name) for name in ("Alpha", "Bravo", "Charlie")]
        ranked = rank(cs_student, colleges)
        
        assert len({s.score for s in ranked}) == 1
        assert [s.college.name for s in ranked] == ["Alpha", "Bravo", "Charlie"]
    
    def test_better_match_ranks_above_ties(self, cs_student, matching_college):
        colleges = [
            CollegeCandidate(name="Alpha", avg_sat=1000, avg_gpa=2.8, tuition=90000),
            matching_college,
            CollegeCandidate(name="Bravo", avg_sat=1000, avg_gpa=2.8, tuition=90000),
        ]
        ranked = rank(cs_student, colleges)
        
        assert [s.college.name for s in ranked] == ["Target University", "Alpha", "Bravo"]
    
    def test_scenario_regression(self, cs_student, matching_college):
        ranked = rank(
            cs_student,
            [matching_college],
            weights=HOLISTIC_WEIGHTS,
            category_weights=CATEGORY_WEIGHTS["BALANCED"],
        )
        
        assert ranked[0].score == 81
        assert ranked[0].to_dict()["name"] == "Target University"
    
    def test_cosine_strategy(self, cs_student, candidate_colleges):
        ranked = rank(cs_student, candidate_colleges, strategy="cosine")
        
        assert all(s.strategy is ScoringStrategy.COSINE for s in ranked)
        assert [s.score for s in ranked] == sorted((s.score for s in ranked), reverse=True)
    
    def test_deterministic(self, cs_student, candidate_colleges):
        first = rank(cs_student, candidate_colleges, top_n=10)
        second = rank(cs_student, candidate_colleges, top_n=10)
        assert first == second


class TestCollegePredictor:
    
    def test_profile_score_depends_on_batch(self):
        student = StudentProfile(extracurriculars=[f"a{i}" for i in range(7)])
        college = CollegeCandidate(name="Target", avg_extracurriculars=4)
        sparse_peer = CollegeCandidate(name="Sparse", avg_extracurriculars=6)
        busy_peers = [
            CollegeCandidate(name="Busy", avg_extracurriculars=9),
            CollegeCandidate(name="Busier", avg_extracurriculars=12),
        ]
        predictor = CollegePredictor()
        
        in_sparse = predictor.score_colleges(student, [college, sparse_peer])
        in_busy = predictor.score_colleges(student, [college, *busy_peers])
        
        def target(scored):
            return next(s for s in scored if s.college.name == "Target")
        
        assert target(in_sparse).breakdown.profile > target(in_busy).breakdown.profile
    
    def test_normalize_student_data_sets_batch_signals(self, cs_student, candidate_colleges):
        normalized = CollegePredictor().normalize_student_data(cs_student, candidate_colleges)
        
        assert normalized.major_alignment == 1.0
        assert normalized.budget_compatibility == pytest.approx(0.5)
    
    def test_score_normalized_matches_score_colleges(self, cs_student, candidate_colleges):
        predictor = CollegePredictor()
        normalized = predictor.normalize_student_data(cs_student, candidate_colleges)

        from_normalized = predictor.score_normalized(normalized, candidate_colleges)
        from_raw = predictor.score_colleges(cs_student, candidate_colleges)

        assert [s.to_dict() for s in from_normalized] == [s.to_dict() for s in from_raw]

    def test_with_weights_leaves_original_untouched(self):
        predictor = CollegePredictor(category_weights={"academic": 0.5, "profile": 0.5, "fit": 0.0})
        updated = predictor.with_weights({"fit": {"location_match": 1.0}})
        
        assert updated is not predictor
        assert predictor.get_weights()["fit"]["location_match"] == pytest.approx(0.04 / 0.15)
        assert updated.get_weights()["fit"]["location_match"] > 0.5
        assert updated.scorer.category_weights == predictor.scorer.category_weights
    
    def test_custom_weights_change_ranking(self):
        student = StudentProfile(sat_score=1500, location_preference="TX", budget=20000)
        academic_match = CollegeCandidate(name="Academic", avg_sat=1500, state="CA", tuition=60000)
        local_match = CollegeCandidate(name="Local", avg_sat=1100, state="TX", tuition=15000)
        colleges = [academic_match, local_match]
        
        academic_first = CollegePredictor(category_weights=CATEGORY_WEIGHTS["ACADEMIC_HEAVY"])
        fit_first = CollegePredictor(
            custom_weights={"fit": {"location_match": 0.5, "budget_compatibility": 0.5}},
            category_weights={"academic": 0.05, "profile": 0.05, "fit": 0.9},
        )
        
        assert academic_first.get_top_colleges(student, colleges)[0].college.name == "Academic"
        assert fit_first.get_top_colleges(student, colleges)[0].college.name == "Local"
