from typeanswer.diff import DiffEngine


def test_wraps_escape_html():
    engine = DiffEngine()
    assert engine.wrap_good("a<b") == '<span class="typeGood">a&lt;b</span>'
    assert engine.wrap_bad("&") == '<span class="typeBad">&amp;</span>'
    assert engine.wrap_missing("x") == '<span class="typeMissed">x</span>'


def test_identical_strings_are_all_good():
    correct, typed = DiffEngine().diffed_html_strings("abc", "abc")
    assert correct == typed == '<span class="typeGood">abc</span>'


def test_missing_characters():
    correct, typed = DiffEngine().diffed_html_strings("abc", "ac")
    assert correct == (
        '<span class="typeGood">a</span>'
        '<span class="typeMissed">b</span>'
        '<span class="typeGood">c</span>'
    )
    assert typed == '<span class="typeGood">a</span><span class="typeGood">c</span>'


def test_extra_characters():
    correct, typed = DiffEngine().diffed_html_strings("ac", "abc")
    assert correct == '<span class="typeGood">a</span><span class="typeGood">c</span>'
    assert typed == (
        '<span class="typeGood">a</span>'
        '<span class="typeBad">b</span>'
        '<span class="typeGood">c</span>'
    )


def test_completely_different():
    correct, typed = DiffEngine().diffed_html_strings("abc", "xyz")
    assert correct == '<span class="typeMissed">abc</span>'
    assert typed == '<span class="typeBad">xyz</span>'
