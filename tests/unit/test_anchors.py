"""Unit tests for anchor id generation."""

from __future__ import annotations

import hashlib

from smarttoc.anchors import AnchorRegistry, generate_anchor_id, hash_id


class TestSlugIds:
    def test_lowercases_and_hyphenates(self) -> None:
        assert generate_anchor_id("Getting Started", set()) == "getting-started"

    def test_strips_punctuation(self) -> None:
        assert generate_anchor_id("Hello, World!", set()) == "hello-world"

    def test_collapses_repeated_separators(self) -> None:
        assert generate_anchor_id("  Step   1 -- Setup  ", set()) == "step-1-setup"

    def test_transliterates_accents(self) -> None:
        assert generate_anchor_id("Café Crème", set()) == "cafe-creme"

    def test_records_id_in_used_set(self) -> None:
        used: set[str] = set()
        anchor_id = generate_anchor_id("Intro", used)
        assert used == {anchor_id}


class TestHashFallback:
    """Headings whose slug is empty or a single character."""

    def test_punctuation_only_uses_hash(self) -> None:
        assert generate_anchor_id("???", set()) == hash_id("???")

    def test_empty_text_still_produces_id(self) -> None:
        anchor_id = generate_anchor_id("", set())
        assert anchor_id == hash_id("")
        assert anchor_id.startswith("heading-")
        assert len(anchor_id) > len("heading-")

    def test_single_character_slug_uses_hash(self) -> None:
        assert generate_anchor_id("A", set()) == hash_id("A")

    def test_hash_is_md5_prefix(self) -> None:
        expected = "heading-" + hashlib.md5(b"???").hexdigest()[:8]
        assert hash_id("???") == expected

    def test_hash_length_is_configurable(self) -> None:
        anchor_id = generate_anchor_id("???", set(), hash_length=12)
        assert len(anchor_id) == len("heading-") + 12

    def test_fallback_ids_are_unique(self) -> None:
        used: set[str] = set()
        first = generate_anchor_id("???", used)
        second = generate_anchor_id("???", used)
        assert first != second
        assert second == f"{first}-1"

    def test_non_latin_text_gets_usable_id(self) -> None:
        used: set[str] = set()
        ids = [generate_anchor_id(text, used) for text in ("소개", "소개", "배경")]
        assert all(len(anchor_id) >= 2 for anchor_id in ids)
        assert len(set(ids)) == 3


class TestUniqueness:
    def test_duplicate_gets_numeric_suffix(self) -> None:
        used: set[str] = set()
        assert generate_anchor_id("Intro", used) == "intro"
        assert generate_anchor_id("Intro", used) == "intro-1"
        assert generate_anchor_id("Intro", used) == "intro-2"

    def test_suffix_skips_ids_already_taken(self) -> None:
        used = {"intro", "intro-1"}
        assert generate_anchor_id("Intro", used) == "intro-2"

    def test_different_texts_same_slug(self) -> None:
        used: set[str] = set()
        assert generate_anchor_id("Setup", used) == "setup"
        assert generate_anchor_id("setup!", used) == "setup-1"

    def test_ids_pairwise_distinct(self) -> None:
        used: set[str] = set()
        texts = ["Intro", "Intro", "intro", "???", "???", "", "", "A", "Intro 1", "intro-1"]
        ids = [generate_anchor_id(text, used) for text in texts]
        assert len(ids) == len(set(ids))


class TestDeterminism:
    def test_same_text_same_state_same_id(self) -> None:
        first = generate_anchor_id("Scope", {"intro", "scope"})
        second = generate_anchor_id("Scope", {"intro", "scope"})
        assert first == second == "scope-1"

    def test_fresh_sets_do_not_share_state(self) -> None:
        assert generate_anchor_id("Intro", set()) == "intro"
        assert generate_anchor_id("Intro", set()) == "intro"


class TestAnchorRegistry:
    def test_generate_tracks_ids(self) -> None:
        registry = AnchorRegistry()
        assert registry.generate("Intro") == "intro"
        assert registry.generate("Intro") == "intro-1"
        assert "intro" in registry
        assert len(registry) == 2

    def test_registries_are_independent(self) -> None:
        first = AnchorRegistry()
        second = AnchorRegistry()
        first.generate("Intro")
        assert second.generate("Intro") == "intro"

    def test_hash_length_passed_through(self) -> None:
        registry = AnchorRegistry(hash_length=16)
        assert registry.generate("") == hash_id("", 16)
