import genanki
import pytest

from typeanswer.cardviewer import TypeAnswer
from typeanswer.config import TypeAnswerConfig
from typeanswer.sources import GenankiCard


@pytest.fixture
def capital_card(basic_model):
    note = genanki.Note(model=basic_model, fields=["Capital of France?", "Paris"])
    return GenankiCard(note)


def test_update_info(capital_card):
    type_answer = TypeAnswer()
    type_answer.update_info(capital_card)
    assert type_answer.correct == "Paris"
    assert type_answer.warning is None
    assert type_answer.font == "Noto Serif"
    assert type_answer.size == 28


def test_update_info_resets_input(capital_card):
    type_answer = TypeAnswer()
    type_answer.update_info(capital_card)
    type_answer.set_input("Par")
    assert type_answer.input == "Par"
    type_answer.update_info(capital_card)
    assert type_answer.input == ""


def test_cloze_card(cloze_model):
    note = genanki.Note(model=cloze_model, fields=["{{c1::Paris}} is in {{c2::France}}", ""])
    type_answer = TypeAnswer()
    type_answer.update_info(GenankiCard(note, ord=1))
    assert type_answer.correct == "France"


def test_warning_cleared_by_next_card(basic_model, capital_card):
    bad = genanki.Note(model=basic_model, fields=["Q", "A"])
    type_answer = TypeAnswer()
    type_answer.update_info(GenankiCard(bad, question="[[type:Nope]]"))
    assert type_answer.warning is not None
    type_answer.update_info(capital_card)
    assert type_answer.warning is None


def test_create_instance():
    type_answer = TypeAnswer.create_instance({"useInputTag": True, "autoFocusTypeInAnswer": True})
    assert type_answer.use_input_tag
    assert type_answer.auto_focus
    assert not type_answer.config.suppress_code_formatting


def test_type_answer_filter(diff_engine):
    type_answer = TypeAnswer(diff_engine=diff_engine)
    result = type_answer.type_answer_filter("[[type:Back]]", "Paris", "Paris")
    assert '<span class="typeGood">Paris</span>' in result
    assert "typecheckmark" in result
    assert diff_engine.diff_calls == []


def test_filter_answer_cleans_input(capital_card):
    type_answer = TypeAnswer()
    type_answer.update_info(capital_card)
    type_answer.set_input("  Paris ")
    assert "typecheckmark" in type_answer.filter_answer("A: [[type:Back]]")


def test_filter_answer_without_expected_answer(basic_model):
    note = genanki.Note(model=basic_model, fields=["Q", ""])
    type_answer = TypeAnswer()
    type_answer.update_info(GenankiCard(note))
    assert type_answer.filter_answer("A<hr>[[type:Back]]") == "A<hr>"


def test_filter_question_prompt(capital_card):
    type_answer = TypeAnswer()
    type_answer.update_info(capital_card)
    assert type_answer.filter_question(capital_card.question()) == \
        '{{Front}}<br><span id="typeans" class="typePrompt">........</span>'


def test_filter_question_input_tag(capital_card):
    type_answer = TypeAnswer(TypeAnswerConfig(use_input_tag=True, auto_focus=True))
    type_answer.update_info(capital_card)
    result = type_answer.filter_question("[[type:Back]]")
    assert '<input type="text" name="typed" id="typeans"' in result
    assert "font-size: 28px;" in result
    assert "autofocus" in result


def test_filter_question_warning(basic_model):
    note = genanki.Note(model=basic_model, fields=["Q", "A"])
    type_answer = TypeAnswer()
    type_answer.update_info(GenankiCard(note, question="[[type:Nope]] [[type:Nope]]"))
    assert type_answer.filter_question("[[type:Nope]] [[type:Nope]]") == \
        "Type answer: unknown field Nope [[type:Nope]]"


def test_filter_question_no_answer(basic_model):
    note = genanki.Note(model=basic_model, fields=["Q", ""])
    type_answer = TypeAnswer()
    type_answer.update_info(GenankiCard(note))
    assert type_answer.filter_question("Q[[type:Back]]") == "Q"
