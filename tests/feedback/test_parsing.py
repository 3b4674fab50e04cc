import json

import pytest

from writecheck.models.pydantic import Rating
from writecheck.services.errors import UpstreamProtocolError
from writecheck.services.feedback import parse_analysis_result, parse_quick_feedback


def _payload(rating="Accomplished"):
    return {
        "criteria": [
            {
                "criterionNumber": 1,
                "criterion": "Uses paragraphs",
                "rating": rating,
                "feedback": "Clear paragraphs.",
            }
        ],
        "summary": ["Add examples.", "Vary sentences."],
    }


def test_parses_plain_json():
    result = parse_analysis_result(json.dumps(_payload()))

    assert result.criteria[0].criterion_number == 1
    assert result.criteria[0].rating is Rating.ACCOMPLISHED
    assert result.summary == ["Add examples.", "Vary sentences."]


def test_parses_json_in_code_fences():
    raw = "```json\n" + json.dumps(_payload("Not Evident")) + "\n```"
    result = parse_analysis_result(raw)
    assert result.criteria[0].rating is Rating.NOT_EVIDENT


def test_unknown_rating_is_protocol_error():
    raw = json.dumps(_payload("Good"))
    with pytest.raises(UpstreamProtocolError) as exc:
        parse_analysis_result(raw)
    assert exc.value.raw == raw
    assert exc.value.status_code == 502


def test_rating_is_case_sensitive():
    with pytest.raises(UpstreamProtocolError):
        parse_analysis_result(json.dumps(_payload("exceeding")))


def test_non_json_is_protocol_error():
    with pytest.raises(UpstreamProtocolError, match="Invalid JSON response"):
        parse_analysis_result("Sorry, I cannot help with that.")

    with pytest.raises(UpstreamProtocolError, match="Invalid JSON response"):
        parse_analysis_result("{not json}")


@pytest.mark.parametrize("missing", ["criteria", "summary"])
def test_missing_arrays_are_protocol_errors(missing):
    payload = _payload()
    del payload[missing]
    with pytest.raises(UpstreamProtocolError, match=f"missing {missing} array"):
        parse_analysis_result(json.dumps(payload))


def test_missing_criterion_field_is_protocol_error():
    payload = _payload()
    del payload["criteria"][0]["feedback"]
    with pytest.raises(UpstreamProtocolError, match="Invalid response structure"):
        parse_analysis_result(json.dumps(payload))


def test_quick_feedback():
    raw = json.dumps({"impression": "Good.", "strengths": ["a"], "improvements": ["b"]})
    result = parse_quick_feedback(raw)
    assert result.impression == "Good."

    with pytest.raises(UpstreamProtocolError):
        parse_quick_feedback(json.dumps({"impression": "Good."}))
