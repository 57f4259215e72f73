#!/usr/bin/env python3
# ABOUTME: Helpers shared by the translingo tests.
# ABOUTME: Builds fake HTTP responses and translate reply bodies.

import json

import requests

TEST_API_KEY = "test-secret-key"


def make_response(status, body):
    """Build a real requests.Response with the given status and body."""
    response = requests.Response()
    response.status_code = status
    if not isinstance(body, str):
        body = json.dumps(body)
    response._content = body.encode("utf-8")
    response.encoding = "utf-8"
    response.reason = "OK" if status < 400 else "Error"
    return response


def success_body(text="Hola", detected=None):
    entry = {"translatedText": text}
    if detected:
        entry["detectedSourceLanguage"] = detected
    return {"data": {"translations": [entry]}}
