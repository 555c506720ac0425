"""
Tests for the Graph session against a mocked HTTP transport.
"""

import json
from urllib.parse import parse_qs

import httpx
import pytest

from ..exceptions import FacebookAPIError, FacebookTimeoutError, FacebookValidationError
from ..session import GraphSession
from ..utils import appsecret_proof

GRAPH = "graph.facebook.com"
VERSION = "v21.0"


def _form(request: httpx.Request) -> dict:
    return {k: v[0] for k, v in parse_qs(request.content.decode()).items()}


@pytest.fixture
def session():
    return GraphSession(access_token="user-token", version=VERSION)


class TestUrlAndCredentials:

    def test_url_versioned(self, session):
        assert session.url("/me") == "https://graph.facebook.com/v21.0/me"
        assert session.url("act_1/customaudiences") == "https://graph.facebook.com/v21.0/act_1/customaudiences"

    def test_url_unversioned(self):
        assert GraphSession(version="").url("/me") == "https://graph.facebook.com/me"

    def test_no_token_no_header(self):
        assert GraphSession().headers == {}

    def test_appsecret_proof_requires_secret(self):
        with pytest.raises(FacebookValidationError):
            GraphSession(access_token="t", enable_appsecret_proof=True)

    @pytest.mark.asyncio
    async def test_get_sends_bearer_and_query(self, session, respx_mock):
        route = respx_mock.get(host=GRAPH, path=f"/{VERSION}/me").mock(
            return_value=httpx.Response(200, json={"id": "42", "name": "Someone"})
        )
        result = await session.get("/me", {"fields": "id,name", "limit": 5})
        assert result == {"id": "42", "name": "Someone"}
        request = route.calls.last.request
        assert request.headers["Authorization"] == "Bearer user-token"
        assert request.url.params["fields"] == "id,name"
        assert request.url.params["limit"] == "5"
        assert "appsecret_proof" not in request.url.params

    @pytest.mark.asyncio
    async def test_appsecret_proof_added(self, respx_mock):
        session = GraphSession(
            access_token="user-token",
            version=VERSION,
            app_secret="app-secret",
            enable_appsecret_proof=True,
        )
        route = respx_mock.get(host=GRAPH, path=f"/{VERSION}/me").mock(
            return_value=httpx.Response(200, json={"id": "42"})
        )
        await session.get("me")
        params = route.calls.last.request.url.params
        assert params["appsecret_proof"] == appsecret_proof("user-token", "app-secret")

    @pytest.mark.asyncio
    async def test_appsecret_proof_in_form_body(self, respx_mock):
        session = GraphSession(
            access_token="user-token",
            version=VERSION,
            app_secret="app-secret",
            enable_appsecret_proof=True,
        )
        post = respx_mock.post(host=GRAPH, path=f"/{VERSION}/act_1/customaudiences").mock(
            return_value=httpx.Response(200, json={"id": "2385"})
        )
        batch = respx_mock.post(host=GRAPH, path=f"/{VERSION}/").mock(
            return_value=httpx.Response(200, json=[{"code": 200, "body": "{}"}])
        )
        expected = appsecret_proof("user-token", "app-secret")
        await session.post("act_1/customaudiences", {"name": "Buyers"})
        form = _form(post.calls.last.request)
        assert form["appsecret_proof"] == expected
        assert form["name"] == "Buyers"
        await session.batch(None, {"method": "GET", "relative_url": "me"})
        assert _form(batch.calls.last.request)["appsecret_proof"] == expected


class TestMethods:

    @pytest.mark.asyncio
    async def test_post_sends_form_body(self, session, respx_mock):
        route = respx_mock.post(host=GRAPH, path=f"/{VERSION}/2385/users").mock(
            return_value=httpx.Response(200, json={"audience_id": "2385", "num_received": 1})
        )
        payload = {"schema": ["EMAIL"], "data": [["abc"]]}
        result = await session.post("2385/users", {"payload": payload})
        assert result["num_received"] == 1
        form = _form(route.calls.last.request)
        assert json.loads(form["payload"]) == payload

    @pytest.mark.asyncio
    async def test_delete(self, session, respx_mock):
        route = respx_mock.delete(host=GRAPH, path=f"/{VERSION}/2385").mock(
            return_value=httpx.Response(200, json={"success": True})
        )
        assert await session.delete("2385") == {"success": True}
        assert route.called

    @pytest.mark.asyncio
    async def test_put_sends_form_body(self, session, respx_mock):
        route = respx_mock.put(host=GRAPH, path=f"/{VERSION}/2385").mock(
            return_value=httpx.Response(200, json={"success": True})
        )
        assert await session.put("2385", {"name": "Renamed", "retention_days": 30}) == {"success": True}
        form = _form(route.calls.last.request)
        assert form == {"name": "Renamed", "retention_days": "30"}

    @pytest.mark.asyncio
    async def test_unsupported_method(self, session):
        with pytest.raises(ValueError):
            await session.api("me", "PATCH")

    @pytest.mark.asyncio
    async def test_list_body_wrapped(self, session, respx_mock):
        respx_mock.get(host=GRAPH, path=f"/{VERSION}/me/permissions").mock(
            return_value=httpx.Response(200, json=[{"permission": "email"}])
        )
        assert await session.get("me/permissions") == {"data": [{"permission": "email"}]}

    @pytest.mark.asyncio
    async def test_injected_http_client(self, respx_mock):
        respx_mock.get(host=GRAPH, path=f"/{VERSION}/me").mock(
            return_value=httpx.Response(200, json={"id": "1"})
        )
        async with httpx.AsyncClient() as http:
            session = GraphSession(access_token="t", version=VERSION, http_client=http)
            assert await session.get("me") == {"id": "1"}

    @pytest.mark.asyncio
    async def test_request_prepared(self, session, respx_mock):
        respx_mock.get(host=GRAPH, path="/538744468").mock(
            return_value=httpx.Response(200, json={"id": "538744468"})
        )
        request = httpx.Request("GET", "https://graph.facebook.com/538744468")
        assert await session.request(request) == {"id": "538744468"}


class TestErrors:
    """Tests for error mapping."""

    @pytest.mark.asyncio
    async def test_http_error_parsed(self, session, respx_mock):
        respx_mock.get(host=GRAPH, path=f"/{VERSION}/me").mock(
            return_value=httpx.Response(400, json={
                "error": {
                    "message": "Invalid OAuth access token.",
                    "type": "OAuthException",
                    "code": 190,
                    "error_subcode": 463,
                    "fbtrace_id": "AbC",
                }
            })
        )
        with pytest.raises(FacebookAPIError) as exc_info:
            await session.get("me")
        err = exc_info.value
        assert err.code == 190
        assert err.error_subcode == 463
        assert err.error_type == "OAuthException"
        assert err.status_code == 400
        assert err.is_auth_error
        assert "reconnect" in err.format_for_user().lower()

    @pytest.mark.asyncio
    async def test_error_in_success_body(self, session, respx_mock):
        respx_mock.get(host=GRAPH, path=f"/{VERSION}/me").mock(
            return_value=httpx.Response(200, json={"error": {"message": "Too many calls", "code": 17}})
        )
        with pytest.raises(FacebookAPIError) as exc_info:
            await session.get("me")
        assert exc_info.value.is_rate_limit

    @pytest.mark.asyncio
    async def test_non_json_error(self, session, respx_mock):
        respx_mock.get(host=GRAPH, path=f"/{VERSION}/me").mock(
            return_value=httpx.Response(502, text="Bad Gateway")
        )
        with pytest.raises(FacebookAPIError) as exc_info:
            await session.get("me")
        assert exc_info.value.code == 502
        assert "Bad Gateway" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_invalid_json_success(self, session, respx_mock):
        respx_mock.get(host=GRAPH, path=f"/{VERSION}/me").mock(
            return_value=httpx.Response(200, text="not json")
        )
        with pytest.raises(FacebookAPIError) as exc_info:
            await session.get("me")
        assert "Invalid JSON" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_timeout(self, session, respx_mock):
        respx_mock.get(host=GRAPH, path=f"/{VERSION}/me").mock(side_effect=httpx.ReadTimeout)
        with pytest.raises(FacebookTimeoutError):
            await session.get("me")

    @pytest.mark.asyncio
    async def test_request_timeout(self, session, respx_mock):
        respx_mock.get(host=GRAPH, path="/538744468").mock(side_effect=httpx.ConnectTimeout)
        request = httpx.Request("GET", "https://graph.facebook.com/538744468")
        with pytest.raises(FacebookTimeoutError) as exc_info:
            await session.request(request)
        assert exc_info.value.timeout == session.timeout

    @pytest.mark.asyncio
    async def test_no_retry(self, session, respx_mock):
        route = respx_mock.get(host=GRAPH, path=f"/{VERSION}/me").mock(
            return_value=httpx.Response(500, json={"error": {"message": "oops", "code": 2}})
        )
        with pytest.raises(FacebookAPIError):
            await session.get("me")
        assert route.call_count == 1


class TestBatch:
    """Tests for batch pass-through."""

    @pytest.mark.asyncio
    async def test_batch(self, session, respx_mock):
        route = respx_mock.post(host=GRAPH, path=f"/{VERSION}/").mock(
            return_value=httpx.Response(200, json=[
                {"code": 200, "headers": [], "body": '{"id": "42"}'},
                {"code": 400, "headers": [], "body": '{"error": {"code": 100, "message": "bad"}}'},
                None,
            ])
        )
        results = await session.batch(
            {"access_token": "batch-token", "include_headers": False},
            {"method": "GET", "relative_url": "me"},
            {"method": "GET", "relative_url": "act_1/customaudiences"},
            {"method": "GET", "relative_url": "act_2/customaudiences"},
        )
        form = _form(route.calls.last.request)
        assert form["access_token"] == "batch-token"
        assert form["include_headers"] == "false"
        assert json.loads(form["batch"]) == [
            {"method": "GET", "relative_url": "me"},
            {"method": "GET", "relative_url": "act_1/customaudiences"},
            {"method": "GET", "relative_url": "act_2/customaudiences"},
        ]
        assert len(results) == 3
        assert results[0].result == {"id": "42"}
        assert not results[1].is_success
        assert results[2].code == 0

    @pytest.mark.asyncio
    async def test_batch_api(self, session, respx_mock):
        route = respx_mock.post(host=GRAPH, path=f"/{VERSION}/").mock(
            return_value=httpx.Response(200, json=[{"code": 200, "body": "{}"}])
        )
        results = await session.batch_api("other-token", {"method": "GET", "relative_url": "me"})
        assert _form(route.calls.last.request)["access_token"] == "other-token"
        assert results[0].is_success

    @pytest.mark.asyncio
    async def test_batch_requires_requests(self, session):
        with pytest.raises(FacebookValidationError):
            await session.batch({"access_token": "t"})

    @pytest.mark.asyncio
    async def test_batch_non_list_response(self, session, respx_mock):
        respx_mock.post(host=GRAPH, path=f"/{VERSION}/").mock(
            return_value=httpx.Response(200, json={"unexpected": True})
        )
        with pytest.raises(FacebookAPIError):
            await session.batch(None, {"method": "GET", "relative_url": "me"})
