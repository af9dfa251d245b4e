import json

import pytest

from blink_invoice.core.config import Settings

TEST_KEY = "blink_testkey123"


class FakeResponse:
    def __init__(self, status_code=200, body=None, text=None):
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(body)

    def json(self):
        return json.loads(self.text)


class FakeSession:
    """Stands in for requests.Session; replies from a queue and records posts."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def queue(self, *responses):
        self.responses.extend(responses)

    def post(self, url, json=None, headers=None, timeout=None):
        self.calls.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        reply = self.responses.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


def wallets_body(*wallets):
    return {
        "data": {
            "me": {
                "defaultAccount": {
                    "wallets": [{"id": wid, "walletCurrency": cur} for wid, cur in wallets]
                }
            }
        }
    }


def invoice_body(mutation="lnInvoiceCreate", invoice=None, errors=None):
    return {"data": {mutation: {"invoice": invoice, "errors": errors if errors is not None else []}}}


SAMPLE_INVOICE = {
    "paymentRequest": "lnbc10u1pjtest",
    "paymentHash": "h1",
    "paymentSecret": "s1",
    "satoshis": 1000,
    "paymentStatus": "PENDING",
    "createdAt": "2024-01-01T00:00:00Z",
}


@pytest.fixture()
def settings(tmp_path):
    # the profile path points at an empty tmp dir so the real ~/.profile is never read
    return Settings(api_key=TEST_KEY, api_url="https://blink.test/graphql",
                    profile_path=tmp_path / ".profile")


@pytest.fixture()
def session():
    return FakeSession()


@pytest.fixture()
def clean_env(monkeypatch, tmp_path):
    for name in ("BLINK_API_KEY", "BLINK_API_URL", "BLINK_TIMEOUT"):
        # setenv first so teardown also removes anything a .env load adds
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.setenv("BLINK_PROFILE_PATH", str(tmp_path / ".profile"))
    monkeypatch.chdir(tmp_path)
    return monkeypatch
