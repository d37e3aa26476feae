"""Tests for roost.cli — CLI entrypoint and argument parsing."""

import json

import pytest

from roost.cli import main


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_compile_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["compile", "--help"])
        assert exc_info.value.code == 0

    def test_match_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["match", "--help"])
        assert exc_info.value.code == 0


class TestCLIMissingArgs:
    def test_compile_missing_template(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["compile"])
        assert exc_info.value.code == 2

    def test_match_missing_path(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["match", "/users/{id}"])
        assert exc_info.value.code == 2


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert "roost" in captured.out


class TestCompileCommand:
    def test_prints_pattern(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["compile", "/users/{id}"])
        assert capsys.readouterr().out.strip() == "^/users/(?P<id>[^/]+)$"

    def test_token_and_wildcard(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["compile", "/users/{id}", "--token", r"id=\d+", "--wildcard", "rest"])
        assert capsys.readouterr().out.strip() == r"^/users/(?P<id>\d+)(/(?P<rest>.*))?$"

    def test_invalid_template(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["compile", "/users/{1id}"])
        assert exc_info.value.code == 2
        assert "Invalid route" in capsys.readouterr().err

    def test_malformed_token_option(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["compile", "/users/{id}", "--token", "id"])
        assert exc_info.value.code == 2
        assert "NAME=REGEX" in capsys.readouterr().err


class TestMatchCommand:
    def test_match_prints_params(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["match", "/foo/{id}", "/foo/5/a/b", "--wildcard", "path"])
        assert exc_info.value.code == 0
        assert json.loads(capsys.readouterr().out) == {"id": "5", "path": ["a", "b"]}

    def test_no_match_prints_reason(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["match", "/users/{id}", "/posts/1"])
        assert exc_info.value.code == 1
        assert capsys.readouterr().out.strip() == "not a regex match."

    def test_secure_route(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["match", "/", "/", "--secure", "--port", "80"])
        assert exc_info.value.code == 1
        assert capsys.readouterr().out.strip() == "not a secure match."

    def test_secure_route_over_https(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["match", "/", "/", "--secure", "--https"])
        assert exc_info.value.code == 0

    def test_method_and_accept(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(
                [
                    "match",
                    "/",
                    "/",
                    "--method",
                    "GET",
                    "--accept",
                    "text/html",
                    "--header-accept",
                    "text/html;q=0.0",
                ]
            )
        assert exc_info.value.code == 1
        assert capsys.readouterr().out.strip() == "not an accept match."
