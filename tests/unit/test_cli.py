"""Tests for the conduitpy CLI."""
import pytest
import typer
from typer.testing import CliRunner

from conduitpy.cli.main import app, parse_headers, parse_params
from conduitpy.core.api import DEFAULT_ORIGIN

runner = CliRunner()


class TestParsers:
    """Test suite for option parsing helpers."""

    def test_parse_params(self):
        """Test NAME=VALUE pairs, keeping '=' inside values."""
        assert parse_params(['limit=10', 'q=a=b']) == {'limit': '10', 'q': 'a=b'}

    @pytest.mark.parametrize("value", ["limit", "=10"])
    def test_parse_params_invalid(self, value):
        """Test malformed parameters are rejected."""
        with pytest.raises(typer.BadParameter):
            parse_params([value])

    def test_parse_headers(self):
        """Test 'Name: value' pairs are stripped."""
        assert parse_headers(['Authorization:  Token abc ']) == {'Authorization': 'Token abc'}

    def test_parse_headers_invalid(self):
        """Test headers without a colon are rejected."""
        with pytest.raises(typer.BadParameter):
            parse_headers(['Authorization Token'])


class TestCompose:
    """Test suite for the compose command."""

    def test_compose_default_origin(self):
        """Test composing against the default origin."""
        result = runner.invoke(app, ['compose', '-p', '/api/articles', '-q', 'limit=10', '-q', 'offset=0'])

        assert result.exit_code == 0
        assert result.output.strip() == f"{DEFAULT_ORIGIN}/api/articles?limit=10&offset=0"

    def test_compose_base_url(self):
        """Test composing against an explicit origin."""
        result = runner.invoke(app, ['compose', '-u', 'https://example.com/', '-p', 'users'])

        assert result.exit_code == 0
        assert result.output.strip() == 'https://example.com/users'

    def test_compose_invalid_origin(self):
        """Test an invalid origin exits with status 1."""
        result = runner.invoke(app, ['compose', '-u', 'not-a-url'])

        assert result.exit_code == 1
        assert 'absolute URL' in result.output

    def test_compose_bad_param(self):
        """Test a malformed parameter is a usage error."""
        result = runner.invoke(app, ['compose', '-q', 'novalue'])

        assert result.exit_code != 0


class TestDescribe:
    """Test suite for the describe command."""

    def test_describe_request(self):
        """Test the descriptor table shows method, headers and body."""
        result = runner.invoke(app, [
            'describe',
            '-X', 'post',
            '-p', '/api/articles/',
            '-H', 'Authorization: Token abc',
            '-b', '{"article": {"title": "Cricket"}}',
        ])

        assert result.exit_code == 0
        assert 'POST' in result.output
        assert 'Authorization' in result.output
        assert 'Token abc' in result.output
        assert 'Cricket' in result.output

    def test_describe_invalid_body(self):
        """Test malformed JSON is a usage error."""
        result = runner.invoke(app, ['describe', '-b', '{not json'])

        assert result.exit_code != 0

    def test_describe_invalid_origin(self):
        """Test an invalid origin exits with status 1."""
        result = runner.invoke(app, ['describe', '-u', 'nope'])

        assert result.exit_code == 1
