import subprocess
from datetime import datetime

import pytest

from licensit.core import authors
from licensit.core.authors import (
    FALLBACK_AUTHOR,
    AuthorSource,
    read_git_config,
    resolve_author,
    resolve_author_with_source,
    resolve_year,
)
from licensit.core.config import AppSettings


@pytest.fixture
def no_git(monkeypatch):
    monkeypatch.setattr(authors, "read_git_config", lambda key: "")


@pytest.fixture
def no_os_user(monkeypatch):
    monkeypatch.setattr(authors, "_os_user", lambda: "")


def _settings(**values):
    return AppSettings(_env_file=None, **values)


def test_explicit_user_wins(monkeypatch):
    monkeypatch.setenv("LICENSE_AUTHOR", "from env")
    monkeypatch.setattr(authors, "read_git_config", lambda key: "from git")
    assert resolve_author_with_source("Jane Doe") == ("Jane Doe", AuthorSource.OPTION)


def test_environment_beats_git(monkeypatch):
    monkeypatch.setenv("LICENSE_AUTHOR", "from env")
    monkeypatch.setattr(authors, "read_git_config", lambda key: "from git")
    assert resolve_author_with_source() == ("from env", AuthorSource.ENVIRONMENT)


def test_prefixed_environment_alias(monkeypatch, no_git):
    monkeypatch.setenv("LICENSIT_AUTHOR", "prefixed")
    assert resolve_author() == "prefixed"


def test_settings_author_is_used(no_git):
    assert resolve_author(settings=_settings(author="configured")) == "configured"


def test_git_beats_os_user(monkeypatch):
    monkeypatch.setattr(authors, "read_git_config", lambda key: "from git" if key == "user.name" else "")
    monkeypatch.setattr(authors, "_os_user", lambda: "osuser")
    assert resolve_author_with_source(settings=_settings()) == ("from git", AuthorSource.GIT)


def test_os_user_beats_fallback(monkeypatch, no_git):
    monkeypatch.setattr(authors, "_os_user", lambda: "osuser")
    assert resolve_author_with_source(settings=_settings()) == ("osuser", AuthorSource.OS_USER)


def test_literal_fallback(no_git, no_os_user):
    assert resolve_author_with_source(settings=_settings()) == (FALLBACK_AUTHOR, AuthorSource.FALLBACK)
    assert FALLBACK_AUTHOR == "user"


def test_empty_explicit_user_is_ignored(no_git, no_os_user):
    assert resolve_author("", settings=_settings()) == "user"


def test_read_git_config_missing_binary(monkeypatch):
    def _raise(*args, **kwargs):
        raise FileNotFoundError("git")

    monkeypatch.setattr(subprocess, "run", _raise)
    assert read_git_config("user.name") == ""


def test_read_git_config_missing_key(monkeypatch):
    def _raise(*args, **kwargs):
        raise subprocess.CalledProcessError(1, args[0])

    monkeypatch.setattr(subprocess, "run", _raise)
    assert read_git_config("user.name") == ""


def test_read_git_config_strips_output(monkeypatch):
    def _run(cmd, **kwargs):
        assert cmd == ["git", "config", "--get", "user.name"]
        return subprocess.CompletedProcess(cmd, 0, stdout="Jane Doe\n", stderr="")

    monkeypatch.setattr(subprocess, "run", _run)
    assert read_git_config("user.name") == "Jane Doe"


def test_os_user_failure_is_skipped(monkeypatch):
    def _raise():
        raise OSError("no user")

    monkeypatch.setattr(authors.getpass, "getuser", _raise)
    assert authors._os_user() == ""


def test_resolve_year():
    assert resolve_year(1999) == 1999
    assert resolve_year(0) == 0
    assert resolve_year() == datetime.now().year
