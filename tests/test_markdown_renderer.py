from quetris.core.markdown_renderer import QuestionTextRenderer, renderer


def test_single_paragraph_is_unwrapped():
    assert renderer.render_fragment("What does **len** return?") == "What does <strong>len</strong> return?"


def test_inline_code_is_kept():
    assert "<code>dict.get</code>" in renderer.render_fragment("Use `dict.get`")


def test_raw_html_is_escaped_by_default():
    html = QuestionTextRenderer().render_fragment("<b>bold</b>")

    assert "<b>" not in html
    assert "&lt;b&gt;" in html


def test_blank_text_gets_placeholder():
    assert renderer.render_fragment("   ") == "<em>No question text.</em>"
