import pytest

from m3ucatalog.core.episode_detector import (
    Episode,
    detect_episode,
    match_episode_patterns,
    scan_episode,
)


# ─── forward scan ────────────────────────────────────────────────────────────
def test_scan_s01e01():
    assert scan_episode("Show Name S01E01") == Episode("Show Name", 1, 1)


def test_scan_single_digits():
    assert scan_episode("Show S1E1") == Episode("Show", 1, 1)


def test_scan_words_between_season_and_episode():
    assert scan_episode("Show S01 Part E05") == Episode("Show", 1, 5)


def test_scan_ignores_s_not_followed_by_digit():
    assert scan_episode("Sons of Anarchy S07E13") == Episode("Sons of Anarchy", 7, 13)


def test_scan_reads_at_most_two_digits():
    assert scan_episode("Show S123E4") == Episode("Show", 12, 4)


def test_scan_first_pair_wins():
    assert scan_episode("Show S01E02 S03E04") == Episode("Show", 1, 2)


def test_scan_season_without_episode_fails():
    assert scan_episode("Show S2") is None


def test_scan_marker_at_start_uses_full_title():
    assert scan_episode("s01e05 Pilot") == Episode("s01e05 Pilot", 1, 5)


def test_scan_requires_compact_marker():
    assert scan_episode("Show S 01 E 05") is None


# ─── pattern fallback ────────────────────────────────────────────────────────
def test_pattern_spaced_tag():
    assert match_episode_patterns("Show S 01 E 05") == Episode("Show", 1, 5)


def test_pattern_1x01():
    assert match_episode_patterns("Another Show 1x05") == Episode("Another Show", 1, 5)


def test_pattern_season_episode_words():
    assert match_episode_patterns("Cool Series Season 2 Episode 10") == Episode("Cool Series", 2, 10)


def test_pattern_episode_only_defaults_to_season_one():
    assert match_episode_patterns("Documentary Ep.7") == Episode("Documentary", 1, 7)
    assert match_episode_patterns("Documentary Episode 12") == Episode("Documentary", 1, 12)


def test_pattern_episode_only_uses_full_title_when_prefix_empty():
    assert match_episode_patterns("Episode 3") == Episode("Episode 3", 1, 3)


def test_pattern_episode_only_matches_inside_words():
    assert match_episode_patterns("Rep5") == Episode("R", 1, 5)
    assert match_episode_patterns("Step2 Special") == Episode("St", 1, 2)


# ─── dispatcher ──────────────────────────────────────────────────────────────
@pytest.mark.parametrize("title, expected", [
    ("Show Name S01E01", Episode("Show Name", 1, 1)),
    ("Another Show 1x05", Episode("Another Show", 1, 5)),
    ("Cool Series Season 2 Episode 10", Episode("Cool Series", 2, 10)),
    ("Show S 01 E 05", Episode("Show", 1, 5)),
])
def test_detect_episode(title, expected):
    assert detect_episode(title) == expected


@pytest.mark.parametrize("title", ["Just a Movie", "Live Channel", "Deep Blue"])
def test_detect_episode_no_match(title):
    assert detect_episode(title) is None


@pytest.mark.parametrize("title", ["show s01e01", "show S01E01", "show S01e01"])
def test_detect_episode_case_insensitive(title):
    assert detect_episode(title) == Episode("show", 1, 1)


@pytest.mark.parametrize("title", [
    "Show S01E05",
    "show s1e2",
    "The Office S09E23",
    "Show (US) S02E11",
    "Sons of Anarchy S07E13",
])
def test_scan_agrees_with_first_pattern(title):
    assert scan_episode(title) is not None
    assert scan_episode(title) == match_episode_patterns(title)
