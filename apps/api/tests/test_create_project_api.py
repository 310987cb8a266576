"""End-to-end tests for POST / through the request pipeline."""

from __future__ import annotations

import os
import re
import unittest

from fastapi.testclient import TestClient

from project_api.adapters.users import StaticUserDirectory, UserDirectory
from project_api.core.config import get_settings
from project_api.domain.identifiers import UserId
from project_api.main import create_app

_UUID_RE = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$")
KNOWN_USER = "3fa85f64-5717-4562-b3fc-2c963f66afa6"
UNKNOWN_USER = "9b2c1e47-0d3a-4c6f-8e21-5a7d9f0b3c11"


class _CapturingUserDirectory(UserDirectory):
    def __init__(self, known: bool = True) -> None:
        self.calls: list[str] = []
        self._known = known

    def exists(self, user_id: UserId) -> bool:
        self.calls.append(user_id)
        return self._known


class _ExplodingUserDirectory(UserDirectory):
    def exists(self, user_id: UserId) -> bool:
        raise RuntimeError("user store unavailable")


class _SettingsEnvCase(unittest.TestCase):
    _env_keys = (
        "PROJECT_API_USER_DIRECTORY",
        "PROJECT_API_KNOWN_USER_IDS",
        "PROJECT_API_USER_NOT_FOUND_RATIO",
    )

    def setUp(self) -> None:
        self._old_env = {k: os.environ.get(k) for k in self._env_keys}
        os.environ["PROJECT_API_USER_DIRECTORY"] = "static"
        os.environ["PROJECT_API_KNOWN_USER_IDS"] = f'["{KNOWN_USER}"]'
        os.environ.pop("PROJECT_API_USER_NOT_FOUND_RATIO", None)
        get_settings.cache_clear()

    def tearDown(self) -> None:
        for key, value in self._old_env.items():
            if value is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = value
        get_settings.cache_clear()


class CreateProjectApiTests(_SettingsEnvCase):
    def setUp(self) -> None:
        super().setUp()
        self.client = TestClient(create_app())

    def test_created_returns_project_with_caller_as_owner(self) -> None:
        response = self.client.post("/", headers={"Authorization": KNOWN_USER}, json={"name": "Demo"})

        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertEqual(set(body.keys()), {"id", "userId", "name"})
        self.assertEqual(body["userId"], KNOWN_USER)
        self.assertEqual(body["name"], "Demo")
        self.assertRegex(body["id"], _UUID_RE)

    def test_unknown_user_maps_to_plain_text_404(self) -> None:
        response = self.client.post("/", headers={"Authorization": UNKNOWN_USER}, json={"name": "Demo"})

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.text, "Sry, no user found")
        self.assertTrue(response.headers["content-type"].startswith("text/plain"))
        self.assertNotIn(UNKNOWN_USER, response.text)

    def test_missing_authorization_header_is_rejected_for_any_valid_body(self) -> None:
        # Body validation runs first, so an invalid body reports its own error;
        # see test_body_is_checked_before_header.
        for payload in ({"name": "Demo"}, {"name": "Other", "extra": True}):
            with self.subTest(payload=payload):
                response = self.client.post("/", json=payload)
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.text, "No header Authorization")

    def test_header_lookup_is_case_insensitive(self) -> None:
        response = self.client.post("/", headers={"authorization": KNOWN_USER}, json={"name": "Demo"})

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["userId"], KNOWN_USER)

    def test_invalid_names_return_structured_validation_errors(self) -> None:
        cases = {
            "missing": ({}, "missing"),
            "empty": ({"name": ""}, "value_error"),
            "whitespace": ({"name": "   "}, "value_error"),
            "number": ({"name": 42}, "string_type"),
            "null": ({"name": None}, "string_type"),
        }
        for label, (payload, error_type) in cases.items():
            with self.subTest(case=label):
                response = self.client.post("/", headers={"Authorization": KNOWN_USER}, json=payload)
                self.assertEqual(response.status_code, 400)
                body = response.json()
                self.assertEqual(body["code"], "VALIDATION_ERROR")
                errors = body["details"]["errors"]
                self.assertEqual(errors[0]["loc"], ["name"])
                self.assertEqual(errors[0]["type"], error_type)

    def test_empty_body_is_validated_as_empty_object(self) -> None:
        response = self.client.post("/", headers={"Authorization": KNOWN_USER}, content=b"")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["details"]["errors"][0]["loc"], ["name"])

    def test_non_json_content_type_is_validated_as_empty_object(self) -> None:
        response = self.client.post(
            "/",
            headers={"Authorization": KNOWN_USER, "Content-Type": "text/plain"},
            content=b'{"name":"x"}',
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["details"]["errors"][0]["loc"], ["name"])
        self.assertEqual(response.json()["details"]["errors"][0]["type"], "missing")

    def test_json_suffix_content_type_is_parsed(self) -> None:
        response = self.client.post(
            "/",
            headers={"Authorization": KNOWN_USER, "Content-Type": "application/vnd.api+json; charset=utf-8"},
            content=b'{"name":"x"}',
        )

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["name"], "x")

    def test_malformed_json_is_a_validation_error(self) -> None:
        response = self.client.post(
            "/",
            headers={"Authorization": KNOWN_USER, "Content-Type": "application/json"},
            content=b"{not json",
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["code"], "VALIDATION_ERROR")
        self.assertEqual(response.json()["details"]["errors"][0]["type"], "json_invalid")

    def test_body_is_checked_before_header(self) -> None:
        response = self.client.post("/", json={"name": ""})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["code"], "VALIDATION_ERROR")

    def test_unknown_fields_are_ignored_and_name_is_trimmed(self) -> None:
        response = self.client.post(
            "/",
            headers={"Authorization": KNOWN_USER},
            json={"name": "  Demo  ", "color": "red"},
        )

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["name"], "Demo")
        self.assertNotIn("color", response.json())

    def test_openapi_documents_single_route_contract(self) -> None:
        response = self.client.get("/openapi.json")
        self.assertEqual(response.status_code, 200)
        document = response.json()
        operation = document["paths"]["/"]["post"]

        self.assertEqual(set(operation["responses"].keys()), {"201", "400", "404"})
        self.assertEqual(
            operation["requestBody"]["content"]["application/json"]["schema"]["$ref"],
            "#/components/schemas/CreateProjectRequest",
        )
        self.assertIn("CreateProjectRequest", document["components"]["schemas"])
        self.assertEqual([p["name"] for p in operation["parameters"]], ["Authorization"])


class CallerIdentityApiTests(unittest.TestCase):
    def test_non_uuid_identity_is_rejected_before_domain_call(self) -> None:
        users = _CapturingUserDirectory()
        client = TestClient(create_app(user_directory=users))

        response = client.post("/", headers={"Authorization": "Bearer whatever"}, json={"name": "Demo"})

        self.assertEqual(response.status_code, 400)
        body = response.json()
        self.assertEqual(body["code"], "INVALID_CALLER_IDENTITY")
        self.assertEqual(body["details"]["errors"][0]["loc"], ["header", "Authorization"])
        self.assertEqual(users.calls, [])

    def test_repeated_identity_header_is_rejected(self) -> None:
        users = _CapturingUserDirectory()
        client = TestClient(create_app(user_directory=users))

        response = client.post(
            "/",
            headers=[("Authorization", KNOWN_USER), ("Authorization", UNKNOWN_USER)],
            json={"name": "Demo"},
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["details"]["errors"][0]["type"], "multiple_values")
        self.assertEqual(users.calls, [])

    def test_domain_receives_header_value_as_caller_id(self) -> None:
        users = _CapturingUserDirectory()
        client = TestClient(create_app(user_directory=users, id_factory=lambda: UNKNOWN_USER))

        response = client.post("/", headers={"Authorization": KNOWN_USER}, json={"name": "Demo"})

        self.assertEqual(response.status_code, 201)
        self.assertEqual(users.calls, [KNOWN_USER])
        self.assertEqual(
            response.json(),
            {"id": UNKNOWN_USER, "userId": KNOWN_USER, "name": "Demo"},
        )

    def test_domain_failure_propagates_as_server_error(self) -> None:
        client = TestClient(create_app(user_directory=_ExplodingUserDirectory()), raise_server_exceptions=False)

        response = client.post("/", headers={"Authorization": KNOWN_USER}, json={"name": "Demo"})

        self.assertEqual(response.status_code, 500)

    def test_domain_failure_is_not_swallowed(self) -> None:
        client = TestClient(create_app(user_directory=_ExplodingUserDirectory()))

        with self.assertRaises(RuntimeError):
            client.post("/", headers={"Authorization": KNOWN_USER}, json={"name": "Demo"})


class StaticDirectoryWiringTests(_SettingsEnvCase):
    def test_explicit_directory_overrides_settings(self) -> None:
        client = TestClient(create_app(user_directory=StaticUserDirectory([UNKNOWN_USER])))

        created = client.post("/", headers={"Authorization": UNKNOWN_USER}, json={"name": "Demo"})
        missing = client.post("/", headers={"Authorization": KNOWN_USER}, json={"name": "Demo"})

        self.assertEqual(created.status_code, 201)
        self.assertEqual(missing.status_code, 404)
