import json
import re
from typing import Any

from writecheck.llm.llm_client import LLMClient

_NUMBERED_LINE = re.compile(r"^(\d+)\. (.+)$", re.MULTILINE)


class FakeLLMClient(LLMClient):
    """
    Offline-Client für Demos und Tests (LLM_PROVIDER=fake).
    Antwortet völlig deterministisch und ohne Netzwerk.
    """

    def complete(self, prompt: str, **kwargs: Any) -> str:
        if '"impression"' in prompt:
            return json.dumps(
                {
                    "impression": "A clear draft with a solid structure.",
                    "strengths": ["Clear topic", "Logical order", "Good vocabulary"],
                    "improvements": ["Vary sentence length", "Add evidence", "Proofread"],
                }
            )

        # Kriterien aus dem nummerierten Block des Prompts zurückspiegeln
        block = prompt.split("Success criteria (numbered):", 1)[-1].split("\n\n", 1)[0]
        criteria = [
            {
                "criterionNumber": int(number),
                "criterion": text.strip(),
                "rating": "Developing",
                "feedback": "Partly met; add a concrete example.",
            }
            for number, text in _NUMBERED_LINE.findall(block)
        ]
        return "```json\n" + json.dumps(
            {
                "criteria": criteria,
                "summary": [
                    "Support each point with an example.",
                    "Check sentence length in longer paragraphs.",
                ],
            }
        ) + "\n```"
