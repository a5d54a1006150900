import pytest

from courtdesk.models import CourtCode, PromptRequest
from courtdesk.prompts import (
    build_firm_list_prompt,
    build_live_board_prompt,
    build_prompt,
    build_single_case_prompt,
)


def test_single_case_prompt_embeds_query_and_template() -> None:
    prompt = build_single_case_prompt("OS 45/2023 Guntur")

    assert "OS 45/2023 Guntur" in prompt
    assert "CASE_SUMMARY_START" in prompt
    assert "CASE_SUMMARY_END" in prompt
    assert prompt.index("CASE_SUMMARY_START") < prompt.index("CASE_SUMMARY_END")
    for label in ("Case Number:", "Current Status:", "Next Hearing Date:", "Judge:", "Court:", "Stage:"):
        assert label in prompt
    assert 'Next Hearing Date: [Date or "Not Fixed"]' in prompt
    for portal in ("services.ecourts.gov.in", "aphc.gov.in", "tshc.gov.in"):
        assert portal in prompt


def test_firm_list_prompt_joins_names() -> None:
    prompt = build_firm_list_prompt(["N DURGA PRASAD (NDP)", "RAMESH BABU VISHWANATHULA"])

    assert "N DURGA PRASAD (NDP), RAMESH BABU VISHWANATHULA" in prompt
    assert "CASE_ITEM_START" in prompt
    assert "CASE_ITEM_END" in prompt
    for label in ("CaseNumber:", "Advocate:", "Parties:", "Status:", "NextDate:", "Location:", "TodayUpdate:", "Link:"):
        assert label in prompt


@pytest.mark.parametrize(
    ("court", "host", "other"),
    [("TG", "tshc.gov.in", "aphc.gov.in"), (CourtCode.AP, "aphc.gov.in", "tshc.gov.in")],
)
def test_live_board_prompt_selects_portal(court, host: str, other: str) -> None:
    prompt = build_live_board_prompt(court)

    assert host in prompt
    assert other not in prompt
    assert "Serial Number" in prompt


def test_live_board_prompt_rejects_unknown_court() -> None:
    with pytest.raises(ValueError):
        build_live_board_prompt("KA")


def test_build_prompt_dispatches_on_use_case() -> None:
    assert build_prompt(PromptRequest.single_case("WP 1/2024")) == build_single_case_prompt("WP 1/2024")
    assert build_prompt(PromptRequest.firm_list(["A", "B"])) == build_firm_list_prompt(["A", "B"])
    assert build_prompt(PromptRequest.live_board("AP")) == build_live_board_prompt(CourtCode.AP)


def test_prompt_request_is_immutable() -> None:
    request = PromptRequest.firm_list(["A"])
    assert request.names == ("A",)
    with pytest.raises(AttributeError):
        request.query = "other"
