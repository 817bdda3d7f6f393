from semrange import split_versions, upgrade_list

STEPS = ["1.0.0", "1.5.0", "2.0.0"]


def test_upgrade_list_prefix_up_to_maximum() -> None:
    assert upgrade_list(STEPS, "1.5.0") == ["1.0.0", "1.5.0"]
    assert upgrade_list(STEPS, "1.9.9") == ["1.0.0", "1.5.0"]
    assert upgrade_list(STEPS, "1.0.0") == ["1.0.0"]


def test_upgrade_list_fast_path_returns_everything() -> None:
    assert upgrade_list(STEPS, "3.0.0") == STEPS
    assert upgrade_list(STEPS, "2.0.0") == STEPS


def test_upgrade_list_below_first_step() -> None:
    assert upgrade_list(STEPS, "0.9.0") == []


def test_upgrade_list_prerelease_maximum() -> None:
    assert upgrade_list(STEPS, "2.0.0-rc.1") == ["1.0.0", "1.5.0"]


def test_upgrade_list_accepts_partial_versions() -> None:
    assert upgrade_list(["1", "1.5", "2"], "1.5") == ["1", "1.5"]


def test_upgrade_list_stops_at_first_greater_step() -> None:
    # input order is trusted, never re-sorted
    assert upgrade_list(["1.0.0", "3.0.0", "1.5.0", "4.0.0"], "2.0.0") == ["1.0.0"]


def test_upgrade_list_empty_and_invalid() -> None:
    assert upgrade_list([], "1.0.0") == []
    assert upgrade_list(STEPS, "bogus") is None


def test_upgrade_list_keeps_uncomparable_steps() -> None:
    assert upgrade_list(["1.0.0", "junk", "2.0.0"], "1.5.0") == ["1.0.0", "junk"]


def test_split_versions() -> None:
    assert split_versions("1.0.0 1.5.0,2.0.0\n3.0.0") == ["1.0.0", "1.5.0", "2.0.0", "3.0.0"]
    assert split_versions("  ") == []
    assert split_versions(None) == []
