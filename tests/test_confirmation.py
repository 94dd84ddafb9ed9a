"""Tests for the interactive confirmation gate."""

import pytest

from core.domain.models import QuotaSpec
from core.services.confirmation import (
    CONTINUE_PROMPT,
    INVALID_ANSWER,
    REALLY_SURE_PROMPT,
    SURE_PROMPT,
    ask_yes_no,
    confirm_quota,
)


class ScriptedTerminal:
    """Answers prompts from a fixed script and records everything shown."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.prompts = []
        self.messages = []

    def ask(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def say(self, message):
        self.messages.append(message)


class TestAskYesNo:
    @pytest.mark.parametrize("answer", ["y", "Y", "yes", "Yep", "  y  "])
    def test_yes(self, answer):
        term = ScriptedTerminal(answer)
        assert ask_yes_no("? ", term.ask, term.say)

    @pytest.mark.parametrize("answer", ["n", "N", "no", "nope"])
    def test_no(self, answer):
        term = ScriptedTerminal(answer)
        assert not ask_yes_no("? ", term.ask, term.say)

    def test_reprompts_until_valid(self):
        term = ScriptedTerminal("", "maybe", "ok", "y")
        assert ask_yes_no("? ", term.ask, term.say)
        assert term.prompts == ["? "] * 4
        assert term.messages == [INVALID_ANSWER] * 3

    def test_end_of_input_declines(self):
        term = ScriptedTerminal("what")
        assert not ask_yes_no("? ", term.ask, term.say)


class TestConfirmQuota:
    def test_single_prompt_for_regular_quota(self):
        term = ScriptedTerminal("y")
        assert confirm_quota(QuotaSpec.sized("10", "GB"), term.ask, term.say)
        assert term.prompts == [CONTINUE_PROMPT]
        assert term.messages[0] == "You provided a quota value of: 10GB"
        assert "quota for ALL users being set to 10GB" in term.messages[1]

    def test_decline(self):
        term = ScriptedTerminal("n")
        assert not confirm_quota(QuotaSpec.sentinel("default"), term.ask, term.say)

    @pytest.mark.parametrize("literal", ["0GB", "0MB"])
    def test_zero_quota_needs_two_more_confirmations(self, literal):
        term = ScriptedTerminal("y", "y", "y")
        quota = QuotaSpec.sized("0", literal[-2:])
        assert confirm_quota(quota, term.ask, term.say)
        assert term.prompts == [CONTINUE_PROMPT, SURE_PROMPT, REALLY_SURE_PROMPT]
        assert any("ZERO" in message for message in term.messages)
        assert any("You have been warned" in message for message in term.messages)

    @pytest.mark.parametrize("answers", [("n",), ("y", "n"), ("y", "y", "n")])
    def test_zero_quota_declined_at_any_stage(self, answers):
        term = ScriptedTerminal(*answers)
        assert not confirm_quota(QuotaSpec.sized("0", "GB"), term.ask, term.say)
        assert len(term.prompts) == len(answers)
