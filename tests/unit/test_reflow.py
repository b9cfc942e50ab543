from core.constants import POEM_MAXLINELENGTH
from core.reflow import normalize_cjk_title, pair_title_tokens, reflow_title


def test_latin_title_is_returned_unchanged():
    title = "The Road Not Taken"

    assert reflow_title(title) == title


def test_latin_title_keeps_punctuation_and_spaces():
    title = "Ode: Intimations of Immortality"

    assert reflow_title(title) == title


def test_short_cjk_title_stays_single_token_line():
    assert reflow_title("春晓") == "春晓"


def test_short_cjk_title_only_breaks_at_separators():
    # "静夜思 其一" is below the threshold; only the separator becomes a break.
    assert len(normalize_cjk_title("静夜思·其一")) < POEM_MAXLINELENGTH
    assert reflow_title("静夜思·其一") == "静夜思\n其一"


def test_normalize_replaces_punctuation_and_collapses_whitespace():
    assert normalize_cjk_title("  《将进酒》，\t\t李白  ") == "将进酒 李白"


def test_even_tokens_are_paired_before_break_substitution():
    tokens = ["春眠", "不觉", "晓处", "闻啼鸟"]

    assert pair_title_tokens(tokens) == ["春眠 不觉", "晓处 闻啼鸟"]
    assert reflow_title("春眠 不觉 晓处 闻啼鸟") == "春眠\n不觉\n晓处\n闻啼鸟"


def test_odd_tokens_are_left_one_per_line():
    tokens = ["春眠", "不觉", "晓处", "闻啼鸟", "夜来"]

    assert pair_title_tokens(tokens) == tokens
    assert reflow_title("春眠，不觉，晓处，闻啼鸟，夜来") == "春眠\n不觉\n晓处\n闻啼鸟\n夜来"


def test_long_title_with_two_tokens():
    assert reflow_title("水调歌头·明月几时有") == "水调歌头\n明月几时有"


def test_empty_title_returns_empty_string():
    assert reflow_title("") == ""


def test_title_of_only_disallowed_characters_collapses_to_empty():
    assert reflow_title("!!!###") == ""
    assert reflow_title("123 456") == ""


def test_leading_digit_is_not_treated_as_latin():
    assert reflow_title("1 春晓") == "春晓"
