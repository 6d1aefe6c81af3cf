"""
Tests unitaires pour le matching des entites dans les chemins.

Tests couvrant:
- Normalisation (accents, casse, separateurs)
- Correspondance par mots entiers et alias
- Ordre des resultats multi-valeurs
- Departage des studios
- Determinisme
"""

from pathlib import Path

import pytest

from src.core.entities import Actor, Studio
from src.services.path_matcher import match_entities, normalize_text, pick_studio


class TestNormalizeText:
    """Tests pour normalize_text."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("abc_actor", "abc actor"),
            ("ABC.Actor", "abc actor"),
            ("Cléo - Élodie", "cleo elodie"),
            ("/videos/ghi_studio/scene.mp4", "videos ghi studio scene mp4"),
            ("  __  ", ""),
        ],
    )
    def test_normalization(self, value, expected):
        assert normalize_text(value) == expected


class TestMatchEntities:
    """Tests pour match_entities."""

    def test_single_match_with_underscores(self):
        actor = Actor(name="abc actor")
        path = Path("/lib/dynamic_video001_abc_actor_def_label.mp4")
        assert match_entities(path, [actor]) == [actor.id]

    def test_no_candidates(self):
        assert match_entities("/lib/abc_actor.mp4", []) == []

    def test_partial_word_does_not_match(self):
        """Le nom doit apparaitre comme suite de mots entiere."""
        actor = Actor(name="abc actor")
        assert match_entities("/lib/abcactor.mp4", [actor]) == []
        assert match_entities("/lib/xabc_actor.mp4", [actor]) == []
        assert match_entities("/lib/abc_actors.mp4", [actor]) == []

    def test_case_and_accents_ignored(self):
        actor = Actor(name="Cléo Dupont")
        assert match_entities("/lib/CLEO.DUPONT.scene.mkv", [actor]) == [actor.id]

    def test_alias_matches(self):
        actor = Actor(name="Jane Roe", aliases=("jr star",))
        assert match_entities("/lib/jr_star_scene.mp4", [actor]) == [actor.id]

    def test_empty_name_never_matches(self):
        actor = Actor(name="", aliases=("__",))
        assert match_entities("/lib/anything.mp4", [actor]) == []

    def test_directory_components_are_searched(self):
        actor = Actor(name="abc actor")
        path = Path("/lib/abc actor/video001.mp4")
        assert match_entities(path, [actor]) == [actor.id]

    def test_results_ordered_by_position_in_path(self):
        first = Actor(name="zed one")
        second = Actor(name="amy two")
        path = "/lib/amy_two_and_zed_one.mp4"
        assert match_entities(path, [first, second]) == [second.id, first.id]

    def test_duplicate_candidates_deduplicated(self):
        actor = Actor(name="abc actor")
        assert match_entities("/lib/abc_actor_abc_actor.mp4", [actor, actor]) == [actor.id]

    def test_deterministic(self):
        candidates = [Actor(name="abc actor"), Actor(name="def actor")]
        path = "/lib/def_actor_abc_actor.mp4"
        assert match_entities(path, candidates) == match_entities(path, candidates)


class TestPickStudio:
    """Tests pour pick_studio."""

    def test_no_match_returns_none(self):
        assert pick_studio("/lib/video001.mp4", [Studio(name="ghi studio")]) is None

    def test_single_match(self):
        studio = Studio(name="ghi studio")
        assert pick_studio("/lib/ghi_studio_scene.mp4", [studio]) == studio.id

    def test_longest_name_wins(self):
        short = Studio(name="ghi")
        long = Studio(name="ghi studio")
        path = "/lib/ghi_studio_scene.mp4"
        assert pick_studio(path, [short, long]) == long.id
        assert pick_studio(path, [long, short]) == long.id

    def test_leftmost_wins_on_equal_length(self):
        right = Studio(name="aaa")
        left = Studio(name="bbb")
        assert pick_studio("/lib/bbb_x_aaa.mp4", [right, left]) == left.id

    def test_index_order_breaks_remaining_ties(self):
        first = Studio(name="ghi studio")
        second = Studio(name="GHI_Studio")
        assert pick_studio("/lib/ghi_studio.mp4", [first, second]) == first.id
        assert pick_studio("/lib/ghi_studio.mp4", [second, first]) == second.id

    def test_alias_length_counts(self):
        plain = Studio(name="abc")
        aliased = Studio(name="zz", aliases=("abc films",))
        assert pick_studio("/lib/abc_films_scene.mp4", [plain, aliased]) == aliased.id
