import json

import pytest
import requests
from pydantic import ValidationError

from salary_estimator.api import NullLookup, SalaryApiClient
from salary_estimator.models import SalaryReport


def _response(status: int, body=None, raw: bytes = b"") -> requests.Response:
    r = requests.Response()
    r.status_code = status
    r._content = json.dumps(body).encode("utf-8") if body is not None else raw
    r.url = "http://backend.test/api/salaries"
    return r


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def _send(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response

    def get(self, url, **kwargs):
        return self._send("GET", url, **kwargs)

    def post(self, url, **kwargs):
        return self._send("POST", url, **kwargs)


def _client(session: FakeSession) -> SalaryApiClient:
    return SalaryApiClient("http://backend.test/", timeout=5, session=session)


def test_estimate_parsed_from_payload():
    session = FakeSession(_response(200, {"min": 28000, "max": 41000, "confidence": "high", "source": "database"}))
    result = _client(session).get_salary_estimate("Wix", "Backend Engineer", "Engineer", "software", "xl")

    assert result.min == 28000
    assert result.is_database

    method, url, kwargs = session.calls[0]
    assert method == "GET"
    assert url == "http://backend.test/api/salaries/estimate"
    assert kwargs["params"] == {
        "company": "Wix",
        "title": "Backend Engineer",
        "level": "Engineer",
        "category": "software",
        "size": "xl",
    }
    assert kwargs["timeout"] == 5


def test_missing_fields_sent_as_empty_params():
    session = FakeSession(_response(404))
    _client(session).get_salary_estimate("Acme", "Engineer", None, None, None)
    assert session.calls[0][2]["params"]["level"] == ""


def test_not_found_and_empty_body_mean_no_data():
    assert _client(FakeSession(_response(404))).get_salary_estimate("Acme", "QA", None, None, None) is None
    assert _client(FakeSession(_response(200, raw=b"null"))).get_salary_estimate("Acme", "QA", None, None, None) is None
    assert _client(FakeSession(_response(200))).get_salary_estimate("Acme", "QA", None, None, None) is None


def test_server_error_raises():
    with pytest.raises(requests.HTTPError):
        _client(FakeSession(_response(500))).get_salary_estimate("Acme", "QA", None, None, None)


def test_malformed_payload_raises():
    with pytest.raises(ValidationError):
        _client(FakeSession(_response(200, {"min": "lots"}))).get_salary_estimate("Acme", "QA", None, None, None)
    with pytest.raises(ValidationError):
        _client(FakeSession(_response(200, {"max": 1000}))).get_salary_estimate("Acme", "QA", None, None, None)


def _report() -> SalaryReport:
    return SalaryReport(company_name="Wix", job_title="Backend Engineer", base_salary=32000, experience_years=4)


def test_submit_report_success():
    session = FakeSession(_response(201, {"id": 7}))
    result = _client(session).submit_salary_report(_report())

    assert result.success is True
    method, url, kwargs = session.calls[0]
    assert (method, url) == ("POST", "http://backend.test/api/salaries")
    assert kwargs["json"] == {
        "company_name": "Wix",
        "job_title": "Backend Engineer",
        "base_salary": 32000,
        "experience_years": 4,
        "location": "Tel Aviv",
    }


def test_submit_report_rejected():
    session = FakeSession(_response(400, {"error": "Duplicate report"}))
    result = _client(session).submit_salary_report(_report())
    assert result.success is False
    assert result.error == "Duplicate report"

    result = _client(FakeSession(_response(502))).submit_salary_report(_report())
    assert result.error == "HTTP 502"


def test_submit_report_network_error():
    session = FakeSession(error=requests.ConnectionError("refused"))
    result = _client(session).submit_salary_report(_report())
    assert result.success is False
    assert "refused" in result.error


def test_report_validation():
    with pytest.raises(ValidationError):
        SalaryReport(company_name="Wix", job_title="QA", base_salary=3000)
    with pytest.raises(ValidationError):
        SalaryReport(company_name="Wix", job_title="QA", base_salary=250000)
    with pytest.raises(ValidationError):
        SalaryReport(company_name="  ", job_title="QA", base_salary=20000)
    assert SalaryReport(company_name=" Wix ", job_title="QA", base_salary=20000).company_name == "Wix"


def test_null_lookup():
    assert NullLookup().get_salary_estimate("Google", "Engineer", "Engineer", "software", "xl") is None


def test_non_finite_payload_raises():
    for raw in (b'{"min": NaN, "max": 40000}', b'{"min": 20000, "max": Infinity}'):
        with pytest.raises(ValidationError):
            _client(FakeSession(_response(200, raw=raw))).get_salary_estimate("Wix", "QA", None, None, None)
