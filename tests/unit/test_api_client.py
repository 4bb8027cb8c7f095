"""
Unit tests for the PlaceholderAPIClient.

Tests request building, error handling and response decoding.
"""

import json
from unittest.mock import Mock, patch

import pytest
import requests

from placeholder_client.api.client import PlaceholderAPIClient
from placeholder_client.config import get_settings
from placeholder_client.exceptions import APIError, DecodeError, ParseError
from placeholder_client.models import PlaceholderComment, PlaceholderTodo, PlaceholderUser

COMMENT_JSON = {
    "postId": 1,
    "id": 1,
    "name": "Tom",
    "email": "tom@here.com",
    "body": "Tom has a lovely body",
}

USER_JSON = {
    "id": 1,
    "name": "Leanne Graham",
    "username": "Bret",
    "email": "Sincere@april.biz",
    "address": {
        "street": "Kulas Light",
        "suite": "Apt. 556",
        "city": "Gwenborough",
        "zipcode": "92998-3874",
        "geo": {"lat": "-37.3159", "lng": "81.1496"},
    },
    "phone": "1-770-736-8031 x56442",
    "website": "hildegard.org",
    "company": {
        "name": "Romaguera-Crona",
        "catchPhrase": "Multi-layered client-server neural-net",
        "bs": "harness real-time e-markets",
    },
}


def _response(payload=None, status_code=200, content=None):
    response = Mock()
    response.status_code = status_code
    response.content = content if content is not None else json.dumps(payload).encode("utf-8")
    response.text = response.content.decode("utf-8")
    return response


class TestPlaceholderAPIClient:
    """Test cases for PlaceholderAPIClient."""

    def setup_method(self):
        """Set up test fixtures."""
        self.client = PlaceholderAPIClient(
            base_url="http://test-api.com",
            timeout=10
        )

    def test_init_default_settings(self):
        """Test client initialization with default settings."""
        with patch('placeholder_client.api.client.get_settings') as mock_settings:
            mock_settings.return_value.placeholder_api_base_url = "http://default.com"
            mock_settings.return_value.placeholder_api_timeout = 30
            mock_settings.return_value.default_content_type = "application/json"

            client = PlaceholderAPIClient()
            assert client.base_url == "http://default.com/"
            assert client.timeout == 30
            assert client.content_type == "application/json"

    def test_init_from_environment(self, monkeypatch):
        """Settings come from environment variables."""
        monkeypatch.setenv("PLACEHOLDER_API_BASE_URL", "http://env-api.com")
        monkeypatch.setenv("PLACEHOLDER_API_TIMEOUT", "5")
        get_settings.cache_clear()

        client = PlaceholderAPIClient()
        assert client.base_url == "http://env-api.com/"
        assert client.timeout == 5

    @patch('placeholder_client.api.client.requests.request')
    def test_request_success(self, mock_request):
        """Test successful API request."""
        mock_response = _response({"test": "data"})
        mock_request.return_value = mock_response

        response = self.client.request("get", "/test-endpoint")

        assert response == mock_response
        mock_request.assert_called_once()
        kwargs = mock_request.call_args[1]
        assert kwargs['method'] == "GET"
        assert kwargs['url'] == "http://test-api.com/test-endpoint"
        assert kwargs['data'] is None
        assert kwargs['headers'] == {}
        assert kwargs['timeout'] == 10

    @patch('placeholder_client.api.client.requests.request')
    def test_request_with_body_and_headers(self, mock_request):
        """Bodies are serialized and caller headers override defaults."""
        mock_request.return_value = _response({}, status_code=201)

        self.client.request(
            "PUT",
            "posts/1",
            body={"id": 1},
            headers={"Content-Type": "application/x-www-form-urlencoded", "X-Trace": "1"},
        )

        kwargs = mock_request.call_args[1]
        assert json.loads(kwargs['data']) == {"id": 1}
        assert kwargs['headers'] == {
            "Content-Type": "application/x-www-form-urlencoded",
            "X-Trace": "1",
        }

    @patch('placeholder_client.api.client.requests.request')
    def test_request_not_retried(self, mock_request):
        """Transport errors surface immediately as APIError."""
        mock_request.side_effect = requests.exceptions.ConnectionError("Connection error")

        with pytest.raises(APIError) as exc_info:
            self.client.request("GET", "test-endpoint")

        assert mock_request.call_count == 1
        assert exc_info.value.status_code is None
        assert "Connection error" in str(exc_info.value)

    @patch('placeholder_client.api.client.requests.request')
    def test_request_api_error(self, mock_request):
        """Test API error handling."""
        mock_request.return_value = _response(content=b"Internal Server Error", status_code=500)

        with pytest.raises(APIError) as exc_info:
            self.client.request("GET", "test-endpoint")

        assert "HTTP 500" in str(exc_info.value)
        assert exc_info.value.status_code == 500

    @patch('placeholder_client.api.client.requests.request')
    def test_get_raw_absolute_url(self, mock_request):
        """Absolute URLs bypass the base URL."""
        mock_request.return_value = _response({"results": [], "info": {}})

        data = self.client.get_raw("https://randomuser.me/api")

        assert data == {"results": [], "info": {}}
        assert mock_request.call_args[1]['url'] == "https://randomuser.me/api"

    @patch('placeholder_client.api.client.requests.request')
    def test_get_posts(self, mock_request):
        mock_request.return_value = _response([{"userId": 1, "id": 1, "title": "t", "body": "b"}])

        posts = self.client.get_posts()

        assert posts == [{"userId": 1, "id": 1, "title": "t", "body": "b"}]
        assert mock_request.call_args[1]['url'] == "http://test-api.com/posts"

    @patch('placeholder_client.api.client.requests.request')
    def test_create_post(self, mock_request):
        mock_request.return_value = _response({"userId": 5, "title": "t", "body": "b", "id": 101}, 201)

        created = self.client.create_post(user_id=5, title="t", body="b")

        assert created["id"] == 101
        kwargs = mock_request.call_args[1]
        assert kwargs['method'] == "POST"
        assert json.loads(kwargs['data']) == {"userId": 5, "title": "t", "body": "b"}
        assert kwargs['headers'] == {"Content-Type": "application/json"}

    @patch('placeholder_client.api.client.requests.request')
    def test_update_post(self, mock_request):
        mock_request.return_value = _response({"id": 1, "userId": 1, "title": "New Title", "body": "New Body"})

        self.client.update_post(1, user_id=1, title="New Title", body="New Body")

        kwargs = mock_request.call_args[1]
        assert kwargs['method'] == "PUT"
        assert kwargs['url'] == "http://test-api.com/posts/1"
        assert json.loads(kwargs['data'])["id"] == 1

    @patch('placeholder_client.api.client.requests.request')
    def test_delete_post(self, mock_request):
        mock_request.return_value = _response({})

        assert self.client.delete_post(1) == {}
        kwargs = mock_request.call_args[1]
        assert kwargs['method'] == "DELETE"
        assert kwargs['data'] is None

    @patch('placeholder_client.api.client.requests.request')
    def test_create_comment_decodes_echo(self, mock_request):
        """The echoed body is decoded back into a comment."""
        mock_request.return_value = _response(COMMENT_JSON, 201)
        comment = PlaceholderComment.from_json(COMMENT_JSON)

        echoed = self.client.create_comment(comment)

        assert echoed == comment
        assert json.loads(mock_request.call_args[1]['data']) == COMMENT_JSON

    @patch('placeholder_client.api.client.requests.request')
    def test_get_comments_filters_by_post(self, mock_request):
        mock_request.return_value = _response([COMMENT_JSON])

        comments = self.client.get_comments(post_id=1)

        assert comments == [PlaceholderComment.from_json(COMMENT_JSON)]
        assert mock_request.call_args[1]['params'] == {"postId": 1}

    @patch('placeholder_client.api.client.requests.request')
    def test_get_todo(self, mock_request):
        mock_request.return_value = _response({"userId": 1, "id": 3, "title": "t", "completed": True})

        todo = self.client.get_todo(3)

        assert todo == PlaceholderTodo(user_id=1, id=3, title="t", completed=True)

    @patch('placeholder_client.api.client.requests.request')
    def test_decode_failure_propagates(self, mock_request):
        """A well-formed body with the wrong shape raises DecodeError."""
        mock_request.return_value = _response({"userId": "not-an-int", "id": 1, "title": "x", "completed": True})

        with pytest.raises(DecodeError):
            self.client.get_todo(1)

    @patch('placeholder_client.api.client.requests.request')
    def test_parse_failure_propagates(self, mock_request):
        """Malformed bytes raise ParseError, not DecodeError."""
        mock_request.return_value = _response(content=b"<html>oops</html>")

        with pytest.raises(ParseError):
            self.client.get_todo(1)

    @patch('placeholder_client.api.client.requests.request')
    def test_wrong_top_level_shape(self, mock_request):
        mock_request.return_value = _response({"userId": 1})

        with pytest.raises(ParseError):
            self.client.get_todos()

    @patch('placeholder_client.api.client.requests.request')
    def test_get_post(self, mock_request):
        mock_request.return_value = _response({"userId": 1, "id": 7, "title": "t", "body": "b"})

        post = self.client.get_post(7)

        assert post == {"userId": 1, "id": 7, "title": "t", "body": "b"}
        kwargs = mock_request.call_args[1]
        assert kwargs['method'] == "GET"
        assert kwargs['url'] == "http://test-api.com/posts/7"
        assert kwargs['data'] is None

    @patch('placeholder_client.api.client.requests.request')
    def test_update_comment(self, mock_request):
        mock_request.return_value = _response({**COMMENT_JSON, "body": "Edited"})
        comment = PlaceholderComment.from_json({**COMMENT_JSON, "body": "Edited"})

        updated = self.client.update_comment(comment)

        assert isinstance(updated, PlaceholderComment)
        assert updated.body == "Edited"
        kwargs = mock_request.call_args[1]
        assert kwargs['method'] == "PUT"
        assert kwargs['url'] == "http://test-api.com/comments/1"
        assert json.loads(kwargs['data']) == comment.to_json()

    @patch('placeholder_client.api.client.requests.request')
    def test_delete_comment(self, mock_request):
        mock_request.return_value = _response({})

        assert self.client.delete_comment(3) == {}
        kwargs = mock_request.call_args[1]
        assert kwargs['method'] == "DELETE"
        assert kwargs['url'] == "http://test-api.com/comments/3"
        assert kwargs['data'] is None

    @patch('placeholder_client.api.client.requests.request')
    def test_create_todo(self, mock_request):
        todo = PlaceholderTodo(user_id=1, id=201, title="Buy milk", completed=False)
        mock_request.return_value = _response(todo.to_json(), 201)

        created = self.client.create_todo(todo)

        assert created == todo
        kwargs = mock_request.call_args[1]
        assert kwargs['method'] == "POST"
        assert kwargs['url'] == "http://test-api.com/todos"
        assert json.loads(kwargs['data']) == {"userId": 1, "id": 201, "title": "Buy milk", "completed": False}
        assert kwargs['headers'] == {"Content-Type": "application/json"}

    @patch('placeholder_client.api.client.requests.request')
    def test_get_users_decodes_nested_records(self, mock_request):
        """Users in an array decode with their nested address and company."""
        mock_request.return_value = _response([USER_JSON, {**USER_JSON, "id": 2}])

        users = self.client.get_users()

        assert [user.id for user in users] == [1, 2]
        assert all(isinstance(user, PlaceholderUser) for user in users)
        assert users[0].address.geo.lng == "81.1496"
        assert users[1].company.catch_phrase == "Multi-layered client-server neural-net"
        kwargs = mock_request.call_args[1]
        assert kwargs['method'] == "GET"
        assert kwargs['url'] == "http://test-api.com/users"

    @patch('placeholder_client.api.client.requests.request')
    def test_get_users_rejects_bad_element(self, mock_request):
        broken = {**USER_JSON, "address": {**USER_JSON["address"], "geo": {"lat": "1"}}}
        mock_request.return_value = _response([USER_JSON, broken])

        with pytest.raises(DecodeError) as exc_info:
            self.client.get_users()

        assert exc_info.value.key == "[1].address.geo.lng"

    @patch('placeholder_client.api.client.requests.request')
    def test_get_user(self, mock_request):
        mock_request.return_value = _response(USER_JSON)

        user = self.client.get_user(1)

        assert isinstance(user, PlaceholderUser)
        assert user.to_json() == USER_JSON
        kwargs = mock_request.call_args[1]
        assert kwargs['method'] == "GET"
        assert kwargs['url'] == "http://test-api.com/users/1"
