"""
Prompt-Templates für das AI-Feedback.

Die Prompts sind englisch, weil Drafts und Feedback englisch sind.
"""

CRITERIA_SYSTEM_PROMPT = (
    "You are an experienced English teacher providing constructive feedback "
    "on student writing. Always respond with valid JSON."
)

QUICK_CHECK_SYSTEM_PROMPT = "You are an experienced English teacher. Always respond with valid JSON."

# ab so vielen Kriterien wird das Feedback pro Kriterium gekürzt
SHORT_FEEDBACK_THRESHOLD = 10


def build_criteria_prompt(draft: str, criteria: list[str]) -> str:
    criteria_list = "\n".join(f"{i}. {c}" for i, c in enumerate(criteria, start=1))

    if len(criteria) > SHORT_FEEDBACK_THRESHOLD:
        feedback_length = "Keep each feedback sentence extremely short (max 20 words)."
        summary_length = "Provide exactly 2 bullet points for the summary."
    else:
        feedback_length = "Provide 1 short sentence of feedback (max 30 words)."
        summary_length = "Provide 2-3 bullet points for the summary."

    return f"""You are an English teacher assessing a student's draft against success criteria.

Student draft:
\"\"\"
{draft}
\"\"\"

Success criteria (numbered):
{criteria_list}

For each criterion:
- Rate it using exactly one of: "Exceeding", "Accomplished", "Developing", "Not Evident"
- {feedback_length}

After all criteria:
- {summary_length}
- Focus on the main improvements the student should prioritize.

Output strictly in JSON with this exact schema:
{{
  "criteria": [
    {{
      "criterionNumber": number,
      "criterion": string,
      "rating": "Exceeding" | "Accomplished" | "Developing" | "Not Evident",
      "feedback": string
    }}
  ],
  "summary": [
    string,
    string,
    string (optional)
  ]
}}

Ensure valid JSON formatting."""


def build_quick_feedback_prompt(draft: str) -> str:
    return f"""You are an English teacher providing quick feedback on a student's draft.

Student draft:
\"\"\"
{draft}
\"\"\"

Provide:
1. Overall impression (1-2 sentences)
2. Top 3 strengths
3. Top 3 areas for improvement

Output in JSON:
{{
  "impression": string,
  "strengths": [string, string, string],
  "improvements": [string, string, string]
}}"""
