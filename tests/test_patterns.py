from adapters.cross_reference.patterns import build_pattern, normalize_title


def test_build_pattern_returns_none_for_blank_titles():
    assert build_pattern("") is None
    assert build_pattern("   \n\t") is None
    assert build_pattern(None, "נוהל") is None


def test_build_pattern_escapes_metacharacters():
    pattern = build_pattern("שאלה? (תמיכה)")

    assert pattern.search("ראה שאלה? (תמיכה) כאן")
    assert pattern.search("ראה שאלה (תמיכה) כאן") is None
    assert pattern.search("שאלתמיכה") is None


def test_build_pattern_never_raises_for_pure_metacharacters():
    pattern = build_pattern(r"[(*+?{\|^$.")

    assert pattern is not None
    assert pattern.search(r"x [(*+?{\|^$. y")
    assert pattern.search("anything else") is None


def test_build_pattern_accepts_qualified_form():
    pattern = build_pattern("Alpha", "נוהל")

    match = pattern.search("ראה נוהל   Alpha עכשיו")
    assert match.group(0) == "נוהל   Alpha"


def test_build_pattern_is_case_insensitive_beyond_ascii():
    pattern = build_pattern("Über Setup")

    assert pattern.search("see über setup first")
    assert pattern.search("SEE ÜBER SETUP FIRST")


def test_normalize_title_strips_edges_only():
    assert normalize_title("  Sales  Force \n") == "Sales  Force"
    assert normalize_title(None) == ""
