import genanki
import pytest

from typeanswer.config import SettingsManager
from typeanswer.diff import DiffEngine


class RecordingDiffEngine(DiffEngine):
    """DiffEngine that remembers its diff calls."""

    def __init__(self):
        self.diff_calls = []

    def diffed_html_strings(self, correct, typed):
        self.diff_calls.append((correct, typed))
        return super().diffed_html_strings(correct, typed)


@pytest.fixture
def diff_engine():
    return RecordingDiffEngine()


@pytest.fixture
def basic_model():
    return genanki.Model(
        1607392319,
        'Basic (type in the answer)',
        fields=[
            {'name': 'Front', 'font': 'Arial', 'size': 20},
            {'name': 'Back', 'font': 'Noto Serif', 'size': 28},
        ],
        templates=[{
            'name': 'Card 1',
            'qfmt': '{{Front}}<br>{{type:Back}}',
            'afmt': '{{Front}}<hr id=answer>{{type:Back}}',
        }],
    )


@pytest.fixture
def cloze_model():
    return genanki.Model(
        998877661,
        'Cloze (type in the answer)',
        fields=[{'name': 'Text'}, {'name': 'Extra'}],
        templates=[{
            'name': 'Cloze',
            'qfmt': '{{cloze:Text}}<br>{{type:cloze:Text}}',
            'afmt': '{{cloze:Text}}<br>{{type:cloze:Text}}',
        }],
        model_type=genanki.Model.CLOZE,
    )


@pytest.fixture
def settings(tmp_path, monkeypatch):
    for key in SettingsManager.DEFAULTS:
        monkeypatch.delenv(SettingsManager.env_key(key), raising=False)
    SettingsManager.reset_instance()
    manager = SettingsManager(str(tmp_path / "settings.json"))
    yield manager
    SettingsManager.reset_instance()
