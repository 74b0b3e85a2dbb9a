"""
Unit tests for cross-source reconciliation: citation-keyed deduplication with
provider preference, list merging and the optional title check.
"""

from src.services.search.reconciler import (
    apply_limit,
    deduplicate_results,
    merge_search_results,
    titles_compatible,
)
from tests.helpers import make_search_result


def _austlii(title: str, citation: str | None = None):
    return make_search_result(title, neutral_citation=citation)


def _jade(title: str, citation: str | None = None, article_id: int = 1):
    return make_search_result(
        title,
        neutral_citation=citation,
        source="jade",
        url=f"https://jade.io/article/{article_id}",
    )


class TestDeduplicateResults:
    def test_preferred_source_wins_collision(self) -> None:
        austlii = _austlii("Mabo v Queensland (No 2)", "[1992] HCA 23")
        jade = _jade("Mabo v Queensland (No 2)", "[1992] HCA 23", 67683)

        merged = deduplicate_results([austlii, jade], preferred_source="jade")

        assert merged == [jade]

    def test_replacement_keeps_first_seen_position(self) -> None:
        first = _austlii("First", "[2020] HCA 1")
        mabo = _austlii("Mabo v Queensland (No 2)", "[1992] HCA 23")
        last = _austlii("Last", "[2021] HCA 2")
        jade_mabo = _jade("Mabo v Queensland (No 2)", "[1992] HCA 23")

        merged = deduplicate_results([first, mabo, last, jade_mabo], preferred_source="jade")

        assert merged == [first, jade_mabo, last]

    def test_first_wins_for_same_source(self) -> None:
        a = _austlii("Smith v Jones", "[2024] FCA 1")
        b = _austlii("Smith v Jones (appeal)", "[2024] FCA 1")
        assert deduplicate_results([a, b], preferred_source="jade") == [a]

    def test_non_preferred_duplicate_dropped(self) -> None:
        jade = _jade("Smith v Jones", "[2024] FCA 1")
        austlii = _austlii("Smith v Jones", "[2024] FCA 1")
        assert deduplicate_results([jade, austlii], preferred_source="jade") == [jade]

    def test_results_without_citation_always_kept(self) -> None:
        a = _austlii("Unreported matter")
        b = _austlii("Unreported matter")
        c = _jade("Another unreported matter")
        assert deduplicate_results([a, b, c], preferred_source="jade") == [a, b, c]

    def test_default_preference_from_config(self) -> None:
        austlii = _austlii("Mabo", "[1992] HCA 23")
        jade = _jade("Mabo", "[1992] HCA 23")
        assert deduplicate_results([austlii, jade]) == [jade]

    def test_idempotent(self) -> None:
        results = [
            _austlii("A", "[2020] HCA 1"),
            _jade("A", "[2020] HCA 1"),
            _austlii("B"),
            _austlii("C", "[2020] HCA 3"),
        ]
        once = deduplicate_results(results, preferred_source="jade")
        assert deduplicate_results(once, preferred_source="jade") == once

    def test_input_not_modified(self) -> None:
        results = [_austlii("A", "[2020] HCA 1"), _jade("A", "[2020] HCA 1")]
        snapshot = list(results)
        deduplicate_results(results, preferred_source="jade")
        assert results == snapshot

    def test_empty_input(self) -> None:
        assert deduplicate_results([]) == []


class TestTitleCheck:
    def test_compatible_titles(self) -> None:
        assert titles_compatible("Mabo v Queensland (No 2) [1992] HCA 23", "Mabo v Queensland (No 2)")

    def test_incompatible_titles(self) -> None:
        assert not titles_compatible("Mabo v Queensland (No 2)", "Smith v Jones")

    def test_title_check_keeps_both_on_mismatch(self) -> None:
        austlii = _austlii("Mabo v Queensland (No 2)", "[1992] HCA 23")
        jade = _jade("Smith v Jones", "[1992] HCA 23")

        merged = deduplicate_results([austlii, jade], preferred_source="jade", check_titles=True)

        assert merged == [austlii, jade]

    def test_title_check_still_merges_matching_titles(self) -> None:
        austlii = _austlii("Mabo v Queensland (No 2) [1992] HCA 23", "[1992] HCA 23")
        jade = _jade("Mabo v Queensland (No 2)", "[1992] HCA 23")

        merged = deduplicate_results([austlii, jade], preferred_source="jade", check_titles=True)

        assert merged == [jade]

    def test_title_check_matches_every_document_under_a_citation(self) -> None:
        mabo = _austlii("Mabo v Queensland", "[1992] HCA 23")
        smith = _austlii("Smith v Jones", "[1992] HCA 23")
        jade_smith = _jade("Smith v Jones", "[1992] HCA 23")
        austlii_smith_again = _austlii("Smith v Jones", "[1992] HCA 23")

        merged = deduplicate_results(
            [mabo, smith, jade_smith, austlii_smith_again], preferred_source="jade", check_titles=True
        )

        assert merged == [mabo, jade_smith]

    def test_title_check_off_by_default(self) -> None:
        austlii = _austlii("Mabo v Queensland (No 2)", "[1992] HCA 23")
        jade = _jade("Smith v Jones", "[1992] HCA 23")
        assert deduplicate_results([austlii, jade], preferred_source="jade") == [jade]


class TestMergeSearchResults:
    def test_preferred_copy_replaces_primary(self) -> None:
        austlii_mabo = _austlii("Mabo v Queensland (No 2)", "[1992] HCA 23")
        austlii_other = _austlii("Other", "[2000] HCA 5")
        jade_mabo = _jade("Mabo v Queensland (No 2)", "[1992] HCA 23")

        merged = merge_search_results([austlii_mabo, austlii_other], [jade_mabo], preferred_source="jade")

        assert merged == [jade_mabo, austlii_other]

    def test_equivalent_to_dedup_of_concatenation(self) -> None:
        primary = [_austlii("A", "[2020] HCA 1"), _austlii("B"), _austlii("C", "[2020] HCA 3")]
        preferred = [_jade("C", "[2020] HCA 3"), _jade("D", "[2020] HCA 4")]

        merged = merge_search_results(primary, preferred, preferred_source="jade")

        assert merged == deduplicate_results([*preferred, *primary], preferred_source="jade")

    def test_empty_preferred_list(self) -> None:
        primary = [_austlii("A", "[2020] HCA 1"), _austlii("B")]
        assert merge_search_results(primary, [], preferred_source="jade") == primary

    def test_both_empty(self) -> None:
        assert merge_search_results([], []) == []


class TestApplyLimit:
    def test_truncates(self) -> None:
        results = [_austlii(str(n)) for n in range(5)]
        assert apply_limit(results, 3) == results[:3]

    def test_limit_larger_than_list(self) -> None:
        results = [_austlii("A")]
        assert apply_limit(results, 10) == results
