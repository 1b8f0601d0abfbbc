# tests/core/test_refinement.py
"""Tests for colour refinement (the signature engine)."""

from graph_canon.core.refinement import RefinementResult, initial_signatures, refine, refine_round
from graph_canon.core.snapshot import take_snapshot
from graph_canon.gdl import parse_gdl


def _refine(gdl: str, max_rounds: int | None = None) -> RefinementResult:
    return refine(take_snapshot(parse_gdl(gdl)), max_rounds=max_rounds)


class TestInitialSignatures:
    def test_labels_and_properties(self) -> None:
        snapshot = take_snapshot(parse_gdl("(a:B:A {y: 2, x: 1}), (b)"))

        assert initial_signatures(snapshot) == ["[A, B] {x: 1, y: 2}", "[] {}"]

    def test_discrete_partition_needs_no_rounds(self) -> None:
        result = _refine("(a:A), (b:B), (a)-->(b)")

        assert result.rounds == 0
        assert result.converged
        assert result.signatures == ("[A] {}", "[B] {}")


class TestRefinement:
    def test_direction_distinguishes_endpoints(self) -> None:
        """Identical nodes on either end of one relationship get different signatures."""
        result = _refine("(a), (b), (a)-->(b)")

        assert result.signatures[0] != result.signatures[1]
        assert result.class_count == 2
        assert result.converged

    def test_structurally_different_nodes_with_same_content(self) -> None:
        """Same labels/properties, different relationship sets -> different signatures."""
        result = _refine("(a:X), (b:X), (c:Y), (a)-[:R]->(c)")

        assert result.signatures[0] != result.signatures[1]

    def test_relationship_type_matters(self) -> None:
        result = _refine("(a:X), (b:X), (c:Y), (d:Y), (a)-[:R]->(c), (b)-[:S]->(d)")

        assert result.signatures[0] != result.signatures[1]
        assert result.signatures[2] != result.signatures[3]

    def test_relationship_properties_matter(self) -> None:
        result = _refine("(a), (b), (c), (d), (a)-[{w: 1}]->(b), (c)-[{w: 2}]->(d)")

        assert result.signatures[0] != result.signatures[2]

    def test_neighbour_signature_matters(self) -> None:
        result = _refine("(a), (b), (c:L), (d:M), (a)-->(c), (b)-->(d)")

        assert result.signatures[0] != result.signatures[1]

    def test_symmetric_nodes_stay_tied(self) -> None:
        """Automorphic nodes cannot be split by refinement."""
        result = _refine("(a), (b), (c), (a)-->(b)-->(c)-->(a)")

        assert result.class_count == 1
        assert result.converged
        assert result.rounds == 1

    def test_path_needs_two_rounds(self) -> None:
        """Middle nodes of a 5-path are only told apart by their neighbours' neighbours."""
        result = _refine("(a)-->(b)-->(c)-->(d)-->(e)")

        assert result.rounds == 2
        assert result.class_count == 5
        assert result.converged

    def test_round_budget_exhausted(self) -> None:
        result = _refine("(a)-->(b)-->(c)-->(d)-->(e)", max_rounds=1)

        assert result.rounds == 1
        assert not result.converged
        assert result.class_count == 3

    def test_empty_graph(self) -> None:
        result = _refine("")

        assert result.signatures == ()
        assert result.converged


class TestRefineRound:
    def test_reads_previous_round_only(self) -> None:
        """Round results do not depend on node iteration order."""
        forward = take_snapshot(parse_gdl("(a), (b), (c), (a)-->(b), (b)-->(c)"))
        backward = take_snapshot(parse_gdl("(c), (b), (a), (b)-->(c), (a)-->(b)"))

        forward_round = refine_round(forward, initial_signatures(forward))
        backward_round = refine_round(backward, initial_signatures(backward))

        # Node a is index 0 in forward, index 2 in backward
        assert forward_round[0] == backward_round[2]
        assert forward_round[1] == backward_round[1]
        assert forward_round[2] == backward_round[0]

    def test_relationship_order_irrelevant(self) -> None:
        first = take_snapshot(parse_gdl("(a), (b), (c), (a)-[:R]->(b), (a)-[:S]->(c)"))
        second = take_snapshot(parse_gdl("(a), (b), (c), (a)-[:S]->(c), (a)-[:R]->(b)"))

        assert refine_round(first, initial_signatures(first)) == refine_round(second, initial_signatures(second))
