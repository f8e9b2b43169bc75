from joshu.devicons import (
    DEFAULT_DIR,
    DEFAULT_FILE,
    DIR_NODE_EXACT_MATCHES,
    FILE_NODE_EXACT_MATCHES,
    FILE_NODE_EXTENSIONS,
    icon_for,
)


def test_extension_lookup():
    assert icon_for("main.ml", False) == "λ"
    assert icon_for("iface.mli", False) == "λ"
    assert icon_for("pipe.fifo", False) == "|"
    assert icon_for("script.r", False) == "ﳒ"


def test_extension_lookup_ignores_case():
    assert icon_for("MAIN.ML", False) == "λ"


def test_exact_file_match():
    assert icon_for("exact-match-case-sensitive-1.txt", False) == "X1"
    assert icon_for("exact-match-case-sensitive-2", False) == "X2"


def test_exact_file_match_is_case_sensitive():
    assert icon_for("EXACT-MATCH-CASE-SENSITIVE-2", False) == DEFAULT_FILE


def test_exact_match_wins_over_extension():
    assert icon_for("exact-match-case-sensitive-1.txt", False) == FILE_NODE_EXACT_MATCHES[
        "exact-match-case-sensitive-1.txt"
    ]


def test_unknown_file_gets_default():
    assert icon_for("no-extension-here", False) == DEFAULT_FILE
    assert icon_for("data.unknownext", False) == DEFAULT_FILE


def test_directories_ignore_extension():
    assert icon_for("project.ml", True) == DEFAULT_DIR


def test_known_directory_uses_table():
    assert icon_for("Desktop", True) == DIR_NODE_EXACT_MATCHES["Desktop"]
    assert "Vídeos" in DIR_NODE_EXACT_MATCHES


def test_every_extension_maps_to_its_table_entry():
    for ext, glyph in FILE_NODE_EXTENSIONS.items():
        assert icon_for(f"name.{ext}", False) == glyph