import pytest

from fuzzyrank import InvalidTopKError, best_match, rank, rank_scored
from fuzzyrank.exceptions import InvalidInputError
from fuzzyrank.scoring.ranking import Ranker, ScoredCandidate


def test_note_ranking(ranker):
    # notepad = 4/7, notion = 0.1, firefox = 0.2/7
    assert ranker.rank("note", ["notepad", "firefox", "notion"], 2) == ["notepad", "notion"]
    assert ranker.rank("note", ["notepad", "firefox", "notion"], 3) == [
        "notepad", "notion", "firefox"
    ]


def test_rank_scored_keeps_scores_and_indices(ranker):
    ranked = ranker.rank_scored("note", ["notepad", "firefox", "notion"], 3)
    assert [sc.index for sc in ranked] == [0, 2, 1]
    assert ranked[0].score == pytest.approx(4 / 7)
    assert ranked[1].score == pytest.approx(0.1)
    assert ranked[2].score == pytest.approx(0.2 / 7)
    assert isinstance(ranked[0], ScoredCandidate)


@pytest.mark.parametrize("top_k", [1, 2, 3, 10])
def test_empty_candidates(ranker, top_k):
    assert ranker.rank("chrome", [], top_k) == []


@pytest.mark.parametrize("top_k", [1, 3, 9, 50])
def test_output_length(ranker, process_names, top_k):
    assert len(ranker.rank("chr", process_names, top_k)) == min(top_k, len(process_names))


@pytest.mark.parametrize("top_k", [0, -1, 1.5, "3", True, None])
def test_invalid_top_k(ranker, top_k):
    with pytest.raises(InvalidTopKError):
        ranker.rank("chrome", ["chrome"], top_k)


def test_invalid_top_k_is_a_value_error(ranker):
    with pytest.raises(ValueError):
        ranker.rank("chrome", [], 0)


def test_ties_keep_original_order(ranker):
    # "abe" et "abd" sont à une substitution de "abc" : même score
    assert ranker.rank("abc", ["abe", "abd"], 2) == ["abe", "abd"]
    assert ranker.rank("abc", ["abd", "abe"], 2) == ["abd", "abe"]
    assert ranker.rank("q", ["x", "y", "z"], 3) == ["x", "y", "z"]


def test_exact_name_ranks_first(ranker, process_names):
    assert ranker.rank("spotify", process_names, 1) == ["spotify"]
    assert ranker.rank("chrome", process_names, 2) == ["chrome", "Google Chrome Helper"]


def test_duplicate_candidates_are_kept(ranker):
    ranked = ranker.rank_scored("code", ["code", "Code", "code"], 3)
    assert [sc.index for sc in ranked] == [0, 2, 1]


def test_generator_candidates(ranker):
    candidates = (name for name in ["notion", "notepad"])
    assert ranker.rank("note", candidates, 1) == ["notepad"]


def test_deterministic(ranker, process_names):
    first = ranker.rank_scored("no", process_names, 5)
    for _ in range(5):
        assert ranker.rank_scored("no", process_names, 5) == first


def test_parallel_matches_sequential(scorer):
    candidates = [f"app-{i % 37}-{'x' * (i % 5)}" for i in range(300)] + ["app 12", "app-12"]
    sequential = Ranker(scorer=scorer, parallel=False)
    parallel = Ranker(scorer=scorer, parallel=True, parallel_min_candidates=1, max_workers=4)

    assert parallel.rank_scored("app 12", candidates, 20) == sequential.rank_scored(
        "app 12", candidates, 20
    )
    assert sequential.rank_scored("app 12", candidates, 20, parallel=True) == sequential.rank_scored(
        "app 12", candidates, 20
    )


def test_best_match(ranker, process_names):
    best = ranker.best_match("notepad", process_names)
    assert best.candidate == "notepad"
    assert best.score == 1.0
    assert best.index == 4
    assert ranker.best_match("notepad", []) is None


def test_none_candidate_is_rejected(ranker):
    with pytest.raises(InvalidInputError):
        ranker.rank("chrome", ["chrome", None], 1)


def test_public_entry_points():
    assert rank("note", ["notepad", "firefox", "notion"], 2) == ["notepad", "notion"]
    assert rank_scored("note", ["notion"], 1)[0].candidate == "notion"
    assert best_match("fire", ["notion", "firefox"]).candidate == "firefox"
