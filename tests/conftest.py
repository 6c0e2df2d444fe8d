import types

import pytest

SF_ENV_VARS = [
    "SALESFORCE_CONNECTION_TYPE",
    "SALESFORCE_INSTANCE_URL",
    "SALESFORCE_CLIENT_ID",
    "SALESFORCE_CLIENT_SECRET",
    "SALESFORCE_USERNAME",
    "SALESFORCE_PASSWORD",
    "SALESFORCE_TOKEN",
    "SALESFORCE_API_VERSION",
    "SALESFORCE_REQUEST_TIMEOUT",
    "LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in SF_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class FakeSObject:
    def __init__(self, sf, name):
        self.sf = sf
        self.name = name

    def describe(self):
        self.sf.calls.append(("describe", self.name))
        return {"name": self.name, "fields": []}


class FakeSalesforce:
    """Stands in for simple_salesforce.Salesforce; never touches the network."""

    def __init__(self, **kwargs):
        self.kwargs = kwargs
        self.calls = []
        self.sf_instance = kwargs.get("instance") or kwargs.get("instance_url")
        self.session_id = kwargs.get("session_id")

    def describe(self):
        self.calls.append(("describe_global",))
        return {"sobjects": [{"name": "Account"}, {"name": "Contact"}]}

    def query(self, soql):
        return {"records": [], "soql": soql}

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)
        return FakeSObject(self, name)


class DummyResp:
    def __init__(self, code=200, payload=None, text=None):
        self.status_code = code
        self._payload = payload
        self.text = text if text is not None else ""
        self.headers = {}

    def json(self):
        if self._payload is None:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


@pytest.fixture
def fake_salesforce(monkeypatch):
    monkeypatch.setattr("sfconn.connection.Salesforce", FakeSalesforce)
    return FakeSalesforce


@pytest.fixture
def fake_login(monkeypatch):
    seen = {}

    def _login(**kwargs):
        seen.update(kwargs)
        return "SESSION-ID", "na1.salesforce.com"

    monkeypatch.setattr("sfconn.connection.SalesforceLogin", _login)
    return seen


def no_post(*a, **k):
    raise AssertionError("requests.post should not be called")


def make_counting_factory(result=None):
    calls = types.SimpleNamespace(n=0)

    def _factory():
        calls.n += 1
        return result if result is not None else object()

    return _factory, calls
