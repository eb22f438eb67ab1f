from __future__ import annotations

import pytest

from portfolio_projects.domain.exceptions import InvalidRepoIdentifierError
from portfolio_projects.domain.value_objects import RepoIdentifier


def test_parses_owner_and_repo():
    ident = RepoIdentifier.from_string("  t3-oss/create-t3-app ")
    assert ident.owner == "t3-oss"
    assert ident.repo == "create-t3-app"
    assert ident.full_name == "t3-oss/create-t3-app"
    assert str(ident) == "t3-oss/create-t3-app"


@pytest.mark.parametrize("raw", ["", "trpc", "trpc/", "/trpc", "a/b/c", "has space/repo"])
def test_rejects_malformed_identifiers(raw):
    with pytest.raises(InvalidRepoIdentifierError):
        RepoIdentifier.from_string(raw)


def test_identifiers_are_immutable_and_hashable():
    a = RepoIdentifier.from_string("trpc/trpc")
    assert a == RepoIdentifier("trpc", "trpc")
    assert len({a, RepoIdentifier.from_string("trpc/trpc")}) == 1
    with pytest.raises(AttributeError):
        a.owner = "other"  # type: ignore[misc]
