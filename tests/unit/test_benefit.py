"""Unit tests for BenefitEvaluator."""

import pytest

from jabeja.core.benefit import BenefitEvaluator
from jabeja.core.graph import Graph


@pytest.fixture
def alternating(cycle4):
    """4-cycle colored 0, 1, 0, 1: every edge is cut."""
    return Graph.from_adjacency(cycle4, {0: 0, 1: 1, 2: 0, 3: 1})


class TestDegree:
    """Tests for same-color degree."""

    def test_degree(self, alternating):
        ev = BenefitEvaluator(alternating, alpha=2.0)
        node = alternating.get(0)
        assert ev.degree(node, 0) == 0
        assert ev.degree(node, 1) == 2
        assert ev.degree(node, 7) == 0

    def test_degree_follows_current_color(self, alternating):
        ev = BenefitEvaluator(alternating, alpha=1.0)
        alternating.set_color(1, 0)
        assert ev.degree(alternating.get(0), 0) == 1


class TestScore:
    """Tests for old/new benefit."""

    def test_alternating_pair(self, alternating):
        score = BenefitEvaluator(alternating, alpha=2.0).score(0, 1)
        assert score.old_benefit == 0.0  # 0^α + 0^α
        assert score.new_benefit == 8.0  # 2^2 + 2^2

    @pytest.mark.parametrize("alpha", [0.5, 1.0, 2.0, 3.0])
    def test_zero_degree_contributes_zero(self, alternating, alpha):
        score = BenefitEvaluator(alternating, alpha=alpha).score(0, 1)
        assert score.old_benefit == 0.0
        assert score.new_benefit == pytest.approx(2 * 2.0 ** alpha)

    def test_same_color_pair(self, cycle4):
        graph = Graph.from_adjacency(cycle4, {i: 0 for i in cycle4})
        score = BenefitEvaluator(graph, alpha=1.0).score(0, 1)
        assert score.old_benefit == score.new_benefit == 4.0

    def test_alpha_amplifies_homogeneity(self):
        # Star: center 0 with leaves 1..3 colored 1, leaf 4 colored 0
        adj = {0: [1, 2, 3, 4], 1: [0], 2: [0], 3: [0], 4: [0]}
        graph = Graph.from_adjacency(adj, {0: 0, 1: 1, 2: 1, 3: 1, 4: 0})
        linear = BenefitEvaluator(graph, alpha=1.0).score(0, 1)
        squared = BenefitEvaluator(graph, alpha=2.0).score(0, 1)
        # new = d(0, 1)^α + d(1, 0)^α = 3^α + 1^α
        assert linear.new_benefit == 4.0
        assert squared.new_benefit == 10.0
        assert linear.old_benefit == 1.0 + 0.0
        assert squared.old_benefit == 1.0

    def test_benefits_non_negative(self, alternating):
        ev = BenefitEvaluator(alternating, alpha=1.5)
        for p in alternating.node_ids:
            for q in alternating.node_ids:
                if p != q:
                    s = ev.score(p, q)
                    assert s.old_benefit >= 0.0
                    assert s.new_benefit >= 0.0
