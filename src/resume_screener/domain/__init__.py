"""Domain modules for resume scoring."""

from .candidates import CandidateLinks, CandidateRecord
from .ranking import RankedCandidate, rank_candidates, score_candidates
from .scoring import ScoreResult, score_resume

__all__ = [
    "CandidateLinks",
    "CandidateRecord",
    "RankedCandidate",
    "ScoreResult",
    "rank_candidates",
    "score_candidates",
    "score_resume",
]
