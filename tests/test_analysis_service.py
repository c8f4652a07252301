import logging

import pytest

import analysis_service
import llm_client
from analysis_service import NO_MEDICATIONS_ERROR, UNEXPECTED_ERROR, analyze
from schemas import AnalysisRequest, Medication


class FakeModel:
    """Deterministic completion double that counts calls."""

    def __init__(self, output=None, error=None):
        self.output = output if output is not None else {"summary": "Monitor for bleeding."}
        self.error = error
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.output


@pytest.fixture
def request_two():
    return AnalysisRequest(medications=[
        Medication(name="Warfarin", dosage="5mg"),
        Medication(name="Aspirin", dosage="81mg"),
    ])


def fault_records(caplog):
    return [r for r in caplog.records if r.name == analysis_service.__name__ and r.levelno == logging.ERROR]


def test_success_returns_summary(request_two):
    model = FakeModel()
    result = analyze(request_two, complete=model)
    assert result.summary == "Monitor for bleeding."
    assert result.error is None
    assert len(model.prompts) == 1
    assert "- Name: Warfarin, Dosage: 5mg" in model.prompts[0]
    assert "- Name: Aspirin, Dosage: 81mg" in model.prompts[0]


def test_empty_request_skips_model():
    model = FakeModel()
    result = analyze(AnalysisRequest(medications=[]), complete=model)
    assert result.summary is None
    assert result.error == NO_MEDICATIONS_ERROR == "No medications provided for analysis."
    assert model.prompts == []


def test_model_exception_is_logged_once(request_two, caplog):
    caplog.set_level(logging.INFO)
    model = FakeModel(error=ConnectionError("network down"))
    result = analyze(request_two, complete=model)
    assert result.summary is None
    assert result.error == UNEXPECTED_ERROR
    assert UNEXPECTED_ERROR == "An unexpected error occurred while analyzing interactions. Please try again later."
    assert len(fault_records(caplog)) == 1


@pytest.mark.parametrize("output", [{"summary": None}, {}, {"answer": "text"}])
def test_null_or_missing_summary_is_a_fault(request_two, caplog, output):
    result = analyze(request_two, complete=FakeModel(output=output))
    assert result.summary is None
    assert result.error == UNEXPECTED_ERROR
    assert len(fault_records(caplog)) == 1


def test_empty_summary_text_is_success(request_two):
    result = analyze(request_two, complete=FakeModel(output={"summary": ""}))
    assert result.summary == ""
    assert result.error is None


def test_identical_requests_give_identical_results(request_two):
    model = FakeModel()
    first = analyze(request_two, complete=model)
    second = analyze(request_two, complete=model)
    assert first == second
    assert model.prompts[0] == model.prompts[1]


def test_default_completion_is_llm_client(request_two, monkeypatch):
    model = FakeModel(output={"summary": "From client."})
    monkeypatch.setattr(llm_client, "complete", model)
    assert analyze(request_two).summary == "From client."
    assert len(model.prompts) == 1


def test_missing_api_key_becomes_generic_error(request_two, monkeypatch, caplog):
    monkeypatch.setattr(llm_client.config, "API_KEY", None)
    result = analyze(request_two)
    assert result.error == UNEXPECTED_ERROR
    assert len(fault_records(caplog)) == 1
