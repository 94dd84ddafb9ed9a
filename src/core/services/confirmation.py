"""Interactive confirmation gate run before any quota is touched.

`ask` reads one answer for a prompt and raises `EOFError` once input is
exhausted; `say` prints one message. Keeping both injectable lets the CLI
plug in a Rich console and tests plug in scripted answers.
"""

from __future__ import annotations

import logging
from typing import Callable

from core.domain.models import QuotaSpec

logger = logging.getLogger(__name__)

Ask = Callable[[str], str]
Say = Callable[[str], None]

CONTINUE_PROMPT = "Would you like to continue? (y/n): "
SURE_PROMPT = "Are you sure you would like to continue? (y/n): "
REALLY_SURE_PROMPT = "Are you REALLY, REALLY sure you would like to continue? (y/n): "
INVALID_ANSWER = "\nInvalid input. Please try again.\n"


def ask_yes_no(prompt: str, ask: Ask, say: Say) -> bool:
    """Prompt until the answer starts with y/Y (True) or n/N (False).

    End of input counts as a "no".
    """

    while True:
        try:
            answer = ask(prompt)
        except EOFError:
            logger.info("Input closed while waiting for confirmation; aborting")
            return False

        token = answer.strip()[:1].lower()
        if token == "y":
            return True
        if token == "n":
            return False
        say(INVALID_ANSWER)


def confirm_quota(quota: QuotaSpec, ask: Ask, say: Say) -> bool:
    """Ask the operator to confirm applying `quota` to every user.

    A zero quota (`0GB`/`0MB`) needs two extra confirmations. Returns False as
    soon as any prompt is declined.
    """

    say(f"You provided a quota value of: {quota.literal}")
    say(f"This would result in the quota for ALL users being set to {quota.literal}.\n")

    if not ask_yes_no(CONTINUE_PROMPT, ask, say):
        return False
    say("")

    if quota.is_zero:
        say("WARNING: This will set the quota for ALL USERS to ZERO!")
        say("This will prevent users from being allowed to upload new files to Nextcloud.\n")

        if not ask_yes_no(SURE_PROMPT, ask, say):
            return False
        if not ask_yes_no(REALLY_SURE_PROMPT, ask, say):
            return False
        say("\nOkay, doing it. You have been warned.\n")

    return True
