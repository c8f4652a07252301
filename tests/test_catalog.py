from catalog import COMMON_MEDICATIONS, suggest

CATALOG = ["Lisinopril", "Listerine", "Metformin"]


def test_prefix_match_is_case_insensitive_in_catalog_order():
    assert suggest("Lis", CATALOG) == ["Lisinopril", "Listerine"]
    assert suggest("lIS", CATALOG) == ["Lisinopril", "Listerine"]


def test_empty_prefix_gives_nothing():
    assert suggest("", CATALOG) == []


def test_no_match():
    assert suggest("Zzz", CATALOG) == []


def test_capped_at_limit():
    catalog = [f"Med{i}" for i in range(10)]
    assert suggest("med", catalog) == ["Med0", "Med1", "Med2", "Med3", "Med4"]
    assert suggest("med", catalog, limit=2) == ["Med0", "Med1"]


def test_default_catalog():
    assert "Lisinopril" in suggest("lisin")
    assert all(name.startswith("A") for name in suggest("a"))
    assert len(COMMON_MEDICATIONS) == len(set(COMMON_MEDICATIONS))
