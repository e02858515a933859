"""
End-to-end check against a running server (python run.py).

Opt-in: deselected by default, run with `pytest -m live` while the server
is listening on TOTP_BASE_URL.
"""

import os
import re

import pyotp
import pytest
import requests

BASE_URL = os.getenv("TOTP_BASE_URL", "http://127.0.0.1:8899")

pytestmark = pytest.mark.live


@pytest.fixture(scope="module")
def http():
    return requests.Session()


def test_enroll_and_login(http):
    before = set(re.findall(r'/login/(account-[A-Za-z]+)"', http.get(f"{BASE_URL}/").text))

    resp = http.get(f"{BASE_URL}/generate")
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "image/png"

    after = set(re.findall(r'/login/(account-[A-Za-z]+)"', http.get(f"{BASE_URL}/").text))
    new = after - before
    assert len(new) == 1

    # The secret only travels inside the QR code, so a wrong code is all we can send
    resp = http.post(
        f"{BASE_URL}/verify",
        data={"username": new.pop(), "key": "abcdef"},
        allow_redirects=False,
    )
    assert resp.status_code == 401


def test_unknown_account_rejected(http):
    resp = http.post(
        f"{BASE_URL}/verify",
        data={"username": "no-such-user", "key": pyotp.TOTP(pyotp.random_base32()).now()},
        allow_redirects=False,
    )
    assert resp.status_code == 401


def test_missing_key_is_bad_request(http):
    resp = http.post(f"{BASE_URL}/verify", data={"username": "no-such-user"}, allow_redirects=False)
    assert resp.status_code == 400
