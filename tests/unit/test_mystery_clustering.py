"""Tests for mystery detection and clustering."""

import pytest

from fogbinder.core import epistemic_state
from fogbinder.core.epistemic_state import Certainty
from fogbinder.engine import mystery_clustering
from fogbinder.engine.mystery_clustering import OpacityKind, OpacityLevel, ResistanceType


@pytest.fixture
def state_of(philosophy_context):
    """Build a state with the given certainty."""
    def _make(certainty):
        return epistemic_state.make(certainty, philosophy_context, ["e"], timestamp=1)
    return _make


class TestIsMystery:
    """Tests for the mystery predicate."""

    @pytest.mark.parametrize("certainty,expected", [
        (Certainty.known(), False),
        (Certainty.probable(0.2), False),
        (Certainty.vague(), True),
        (Certainty.mysterious(), True),
        (Certainty.contradictory(["x"]), False),
        (Certainty.ambiguous(["a", "b"]), False),
        (Certainty.ambiguous(["a", "b", "c"]), False),
        (Certainty.ambiguous(["a", "b", "c", "d"]), True),
    ])
    def test_is_mystery(self, state_of, certainty, expected):
        """Vague, Mysterious and heavily Ambiguous states are mysteries."""
        assert mystery_clustering.is_mystery(state_of(certainty)) is expected


class TestMake:
    """Tests for opacity and resistance derivation."""

    @pytest.mark.parametrize("certainty,opacity", [
        (Certainty.mysterious(), OpacityLevel.opaque()),
        (Certainty.contradictory(["x"]), OpacityLevel.paradoxical()),
        (Certainty.ambiguous(list("abcdef")), OpacityLevel.paradoxical()),
        (Certainty.ambiguous(list("abcde")), OpacityLevel.translucent(0.3)),
        (Certainty.vague(), OpacityLevel.translucent(0.5)),
        (Certainty.known(), OpacityLevel.translucent(0.3)),
    ])
    def test_opacity(self, state_of, certainty, opacity):
        """Opacity follows the certainty."""
        mystery = mystery_clustering.make("content", state_of(certainty))

        assert mystery.opacity_level == opacity

    @pytest.mark.parametrize("content,resistance", [
        ("The experience is ineffable.", ResistanceType.LINGUISTIC),
        ("Some things are inexpressible.", ResistanceType.LINGUISTIC),
        ("The liar paradox.", ResistanceType.LOGICAL),
        ("The boundary is unclear.", ResistanceType.CONCEPTUAL),
        ("The term is ambiguous.", ResistanceType.CONCEPTUAL),
        ("Qualia are mysterious.", ResistanceType.EVIDENTIAL),
        ("An ineffable paradox.", ResistanceType.LINGUISTIC),
    ])
    def test_resistance(self, state_of, content, resistance):
        """Keywords pick the resistance type in precedence order."""
        mystery = mystery_clustering.make(content, state_of(Certainty.mysterious()))

        assert mystery.resistance_type == resistance

    def test_resistance_is_case_sensitive(self, state_of):
        """Capitalized keywords do not match."""
        mystery = mystery_clustering.make("Ineffable.", state_of(Certainty.mysterious()))

        assert mystery.resistance_type == ResistanceType.EVIDENTIAL

    def test_related_concepts(self, state_of):
        """Related concepts are kept."""
        mystery = mystery_clustering.make("x", state_of(Certainty.vague()), ["qualia", "mind"])

        assert mystery.related_concepts == ("qualia", "mind")


class TestCluster:
    """Tests for grouping by resistance type."""

    def test_empty(self):
        """No mysteries, no clusters."""
        assert mystery_clustering.cluster([]) == []

    def test_groups_by_resistance_in_first_seen_order(self, state_of):
        """One cluster per resistance type, ordered by first appearance."""
        contents = [
            "Qualia are mysterious.",
            "The boundary is unclear.",
            "Consciousness is hard.",
            "It is ineffable.",
        ]
        mysteries = [mystery_clustering.make(c, state_of(Certainty.mysterious())) for c in contents]

        clusters = mystery_clustering.cluster(mysteries)

        assert [c.label for c in clusters] == ["evidential", "conceptual", "linguistic"]
        evidential = clusters[0]
        assert [m.content for m in evidential.mysteries] == [
            "Qualia are mysterious.",
            "Consciousness is hard.",
        ]
        assert evidential.central_mystery is mysteries[0]

    def test_partition(self, state_of):
        """Every mystery lands in exactly one cluster, sizes add up."""
        contents = ["a paradox", "b", "c unclear", "d paradox", "e"]
        mysteries = [mystery_clustering.make(c, state_of(Certainty.vague())) for c in contents]

        clusters = mystery_clustering.cluster(mysteries)

        assert sum(len(c.mysteries) for c in clusters) == len(mysteries)
        labels = [c.label for c in clusters]
        assert len(labels) == len(set(labels))
        for c in clusters:
            assert all(m.resistance_type.value == c.label for m in c.mysteries)

    def test_family_resemblance_shape(self, state_of):
        """Each cluster carries an opacity family over its contents."""
        mysteries = [
            mystery_clustering.make("x", state_of(Certainty.vague())),
            mystery_clustering.make("y", state_of(Certainty.vague())),
        ]

        family = mystery_clustering.cluster(mysteries)[0].family_resemblance

        assert family.label == "evidential"
        assert family.members == ("x", "y")
        assert len(family.features) == 1
        assert family.features[0].name == "opacity"
        assert family.features[0].weight == 1.0
        assert family.features[0].exemplars == frozenset({"x", "y"})


class TestDescriptors:
    """Tests for opacity descriptors and exploration suggestions."""

    @pytest.mark.parametrize("certainty,descriptor", [
        (Certainty.vague(), "Translucent (0.5)"),
        (Certainty.known(), "Translucent (0.3)"),
        (Certainty.mysterious(), "Opaque"),
        (Certainty.contradictory(["x"]), "Paradoxical"),
    ])
    def test_opacity_descriptor(self, state_of, certainty, descriptor):
        """Descriptors are capitalized, with the degree for translucency."""
        mystery = mystery_clustering.make("x", state_of(certainty))

        assert mystery_clustering.get_opacity_descriptor(mystery) == descriptor

    def test_ineffable_descriptor(self, state_of):
        """Ineffable opacity is only reachable by construction."""
        mystery = mystery_clustering.make("x", state_of(Certainty.mysterious()))
        ineffable = mystery.__class__(
            content=mystery.content,
            opacity_level=OpacityLevel(OpacityKind.INEFFABLE),
            resistance_type=mystery.resistance_type,
            epistemic_state=mystery.epistemic_state,
        )

        assert mystery_clustering.get_opacity_descriptor(ineffable) == "Ineffable"

    @pytest.mark.parametrize("content,suggestion", [
        ("unclear", "Examine family resemblances and language games"),
        ("plain", "Acknowledge limits of empirical verification"),
        ("paradox", "Explore paralogical frameworks"),
        ("ineffable", "Consider showing rather than saying (Wittgenstein)"),
    ])
    def test_suggest_exploration(self, state_of, content, suggestion):
        """Each resistance type has its own suggestion."""
        mystery = mystery_clustering.make(content, state_of(Certainty.vague()))

        assert mystery_clustering.suggest_exploration(mystery) == suggestion
