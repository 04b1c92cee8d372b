"""Tests for stylesheet helpers, including comment handling."""

from pathlib import Path

from css_var_fallback.core.css_utils import (
    iter_rule_blocks,
    load_root_properties,
    parse_root_properties,
    split_selectors,
    strip_comments,
)


def test_strip_comments_keeps_offsets():
    text = "a/* x */b"

    stripped = strip_comments(text)

    assert stripped == "a       b"
    assert len(stripped) == len(text)


def test_split_selectors():
    assert split_selectors(" :root , .dark,") == [":root", ".dark"]


def test_iter_rule_blocks_includes_rules_inside_at_rules():
    text = ".a { color: red; }\n@media (min-width: 10px) { .b { color: var(--fg, blue); } }\n"

    blocks = list(iter_rule_blocks(text))

    assert [b.selector_text for b in blocks] == [".a", ".b"]
    assert blocks[1].body == " color: var(--fg, blue); "
    assert text[blocks[1].body_start : blocks[1].body_end] == blocks[1].body


def test_iter_rule_blocks_ignores_commented_rules():
    text = "/* .hidden { color: red; } */\n.shown { color: blue; }"

    assert [b.selector_text for b in iter_rule_blocks(text)] == [".shown"]


def test_parse_root_properties_ignores_comments():
    css_content = """
    :root {
        /* Commented out - should NOT be parsed */
        /* --border-radius-8: 0px;
           --border-radius-12: 0px; */

        /* This is active */
        --border-radius-16: 16px;

        /* Another comment
           --test-var: 999px;
        */

        --active-var: 20px;
    }
    """

    props = parse_root_properties(css_content)

    assert "--border-radius-8" not in props
    assert "--border-radius-12" not in props
    assert "--test-var" not in props
    assert props == {"--border-radius-16": "16px", "--active-var": "20px"}


def test_parse_root_properties_only_reads_root_rules():
    css = ":root, .dark { --bg: black; --fg: rgba(0, 0, 0, 0.5) }\n.light { --bg: white; }\n"

    props = parse_root_properties(css)

    assert props == {"--bg": "black", "--fg": "rgba(0, 0, 0, 0.5)"}


def test_load_root_properties(tmp_path: Path):
    css = tmp_path / "theme.css"
    css.write_text(":root { --primary: #112233; --empty: ; }\n", encoding="utf-8")

    assert load_root_properties(css) == {"--primary": "#112233"}
