import pytest

from dxt_manifest.collector import FieldCollector


class ScriptedPrompter:
    """Answers questions from a script, in order.

    An empty string (text) or None (confirm/choice) takes the question's
    default, like pressing enter. An exception instance is raised instead
    of answering.
    """

    def __init__(self, answers):
        self.answers = list(answers)
        self.questions = []
        self.rejections = []

    def _next(self, message):
        self.questions.append(message)
        if not self.answers:
            raise AssertionError(f"Unexpected question: {message}")
        answer = self.answers.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return answer

    def text(self, message, default=""):
        answer = self._next(message)
        return answer if answer != "" else default

    def confirm(self, message, default=False):
        answer = self._next(message)
        return default if answer is None else answer

    def choice(self, message, choices, default=None):
        answer = self._next(message)
        if answer is None:
            return default if default is not None else choices[0][0]
        return answer

    def reject(self, reason):
        self.rejections.append(reason)


@pytest.fixture
def scripted():
    def factory(*answers):
        prompter = ScriptedPrompter(answers)
        return prompter, FieldCollector(prompter, interactive=True)
    return factory


@pytest.fixture
def defaulted():
    return FieldCollector(None, interactive=False)
