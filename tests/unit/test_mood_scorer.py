"""Tests for mood scoring."""

from dataclasses import replace

import pytest

from fogbinder.core import speech_act
from fogbinder.core.speech_act import Felicity, ForceKind, IllocutionaryForce
from fogbinder.engine import mood_scorer
from fogbinder.engine.mood_scorer import Mood


class TestAnalyze:
    """Tests for keyword classification of raw text."""

    @pytest.mark.parametrize("text,kind,content", [
        ("I promise to finish the chapter.", ForceKind.COMMISSIVE, "commitment"),
        ("You must cite your sources.", ForceKind.DIRECTIVE, "directive"),
        ("I declare the meeting open.", ForceKind.DECLARATION, "declaration"),
        ("Thank you for the reference.", ForceKind.EXPRESSIVE, "gratitude/apology"),
        ("Water boils at 100 degrees.", ForceKind.ASSERTIVE, "statement"),
    ])
    def test_force_keywords(self, text, kind, content):
        """Keywords select the force; everything else is an assertion."""
        mood = mood_scorer.analyze(text)

        assert mood.primary.kind == kind
        assert mood.primary.content == content
        assert mood.confidence == 0.7
        assert mood.felicitous is True
        assert mood.secondary is None

    def test_first_matching_group_wins(self):
        """Commissive keywords are checked before directive ones."""
        mood = mood_scorer.analyze("I promise you must come.")

        assert mood.primary.kind == ForceKind.COMMISSIVE

    def test_case_insensitive(self):
        """Matching ignores case."""
        assert mood_scorer.analyze("PROMISE").primary.kind == ForceKind.COMMISSIVE

    @pytest.mark.parametrize("text,tone", [
        ("A sad and melancholy afternoon.", "melancholic"),
        ("I am worried about the results.", "anxious"),
        ("The team was joyful.", "ecstatic"),
        ("The results are in.", None),
    ])
    def test_emotional_tone(self, text, tone):
        """Tone keywords set the emotional tone."""
        assert mood_scorer.analyze(text).emotional_tone == tone

    def test_context_is_optional(self, philosophy_context):
        """Passing a context does not change the classification."""
        assert mood_scorer.analyze("We must go.", philosophy_context) == mood_scorer.analyze("We must go.")


class TestScore:
    """Tests for scoring built speech acts."""

    def test_happy_act(self, philosophy_context):
        """Felicitous acts score 0.9."""
        act = speech_act.make("Thanks!", IllocutionaryForce.expressive("gratitude"), philosophy_context)

        mood = mood_scorer.score(act)

        assert mood.felicitous is True
        assert mood.confidence == 0.9
        assert mood.emotional_tone == "gratitude"
        assert mood.primary == act.mood.force

    def test_unhappy_act(self, philosophy_context):
        """Infelicitous acts score 0.5."""
        act = speech_act.make("I promise.", IllocutionaryForce.commissive("promise"), philosophy_context)
        insincere = replace(act, mood=replace(act.mood, felicity=Felicity(sincere_intentions=False)))

        mood = mood_scorer.score(insincere)

        assert mood.felicitous is False
        assert mood.confidence == 0.5
        assert mood.emotional_tone is None


class TestDescriptor:
    """Tests for descriptors, comparison and serialization."""

    def test_plain_descriptor(self):
        """Assertions are described as stating."""
        assert mood_scorer.get_descriptor(Mood(primary=IllocutionaryForce.assertive("x"))) == "Stating"

    def test_descriptor_with_tone_and_infelicity(self):
        """Tone and infelicity are appended in order."""
        mood = Mood(
            primary=IllocutionaryForce.expressive("worry"),
            felicitous=False,
            emotional_tone="anxious",
        )

        assert mood_scorer.get_descriptor(mood) == "Expressing [anxious] (infelicitous)"

    def test_compare_same_force(self):
        """Same force tag means similar, regardless of content."""
        m1 = Mood(primary=IllocutionaryForce.directive("a"))
        m2 = Mood(primary=IllocutionaryForce.directive("b"))

        assert mood_scorer.compare(m1, m2) == "Similar illocutionary force"

    def test_compare_different_force(self):
        """Different force tags are different acts."""
        m1 = Mood(primary=IllocutionaryForce.directive("a"))
        m2 = Mood(primary=IllocutionaryForce.assertive("a"))

        assert mood_scorer.compare(m1, m2) == "Different speech acts"

    def test_to_dict(self):
        """Serialization has descriptor, felicity and confidence."""
        mood = mood_scorer.analyze("I declare victory.")

        assert mood_scorer.to_dict(mood) == {
            "descriptor": "Declaring",
            "felicitous": True,
            "confidence": 0.7,
        }
        assert mood.to_dict() == mood_scorer.to_dict(mood)
