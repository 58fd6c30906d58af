"""Tests for destination validation.

Author: Michael Economou
Date: 2026-10-06
"""

import os

import pytest

from dropname.core.rename.data_classes import RenamePlan
from dropname.core.rename.validation_manager import ClaimedDestinations, RenameValidator
from dropname.models.file_name_components import FileNameComponents
from dropname.models.rename_result import RenameStatus
from dropname.utils.naming.name_splitter import split_name


def make_plan(source: str, new_name: str) -> RenamePlan:
    directory = os.path.dirname(source)
    return RenamePlan(
        source_path=source,
        directory=directory,
        original=split_name(os.path.basename(source)),
        candidate=split_name(new_name),
    )


def test_valid_rename(make_files):
    (source,) = make_files("a.txt")
    assert RenameValidator().validate(make_plan(source, "b.txt"), ClaimedDestinations()) is None


def test_empty_stem(make_files):
    (source,) = make_files("a.txt")
    plan = RenamePlan(
        source_path=source,
        directory=os.path.dirname(source),
        original=split_name("a.txt"),
        candidate=FileNameComponents("", "txt"),
    )
    assert RenameValidator().validate(plan, ClaimedDestinations()) is RenameStatus.EMPTY_NAME


def test_existing_destination(make_files):
    source, _ = make_files("a.txt", "b.txt")
    status = RenameValidator().validate(make_plan(source, "b.txt"), ClaimedDestinations())
    assert status is RenameStatus.ALREADY_EXISTS


def test_same_path_is_not_a_collision(make_files):
    (source,) = make_files("a.txt")
    assert RenameValidator().validate(make_plan(source, "a.txt"), ClaimedDestinations()) is None


def test_claimed_destination(make_files):
    (source,) = make_files("a.txt")
    claimed = ClaimedDestinations()
    claimed.claim(os.path.join(os.path.dirname(source), "x.txt"))
    status = RenameValidator().validate(make_plan(source, "x.txt"), claimed)
    assert status is RenameStatus.ALREADY_EXISTS


def test_empty_name_checked_before_collisions(make_files):
    source, _ = make_files("a.txt", ".txt")
    plan = make_plan(source, ".txt")
    # ".txt" splits as a dotfile stem, so build the empty-stem candidate directly
    plan = RenamePlan(plan.source_path, plan.directory, plan.original, FileNameComponents("", "txt"))
    assert RenameValidator().validate(plan, ClaimedDestinations()) is RenameStatus.EMPTY_NAME


def test_claimed_destinations_normalize_paths(drop_dir):
    claimed = ClaimedDestinations()
    claimed.claim(str(drop_dir / "sub" / ".." / "x.txt"))
    assert claimed.is_claimed(str(drop_dir / "x.txt"))
    assert str(drop_dir / "x.txt") in claimed
    assert len(claimed) == 1


def test_case_only_change_is_not_a_collision(make_files, case_insensitive_fs):
    (source,) = make_files("photo.jpg")
    status = RenameValidator().validate(make_plan(source, "Photo.jpg"), ClaimedDestinations())
    # On a case-insensitive filesystem "Photo.jpg" exists but is the source itself
    assert status is None
    assert os.path.exists(os.path.join(os.path.dirname(source), "Photo.jpg")) is case_insensitive_fs


@pytest.mark.posix_only
def test_symlink_to_source_is_a_collision(make_files, drop_dir):
    (source,) = make_files("photo.txt")
    os.symlink(source, drop_dir / "x.txt")
    status = RenameValidator().validate(make_plan(source, "x.txt"), ClaimedDestinations())
    assert status is RenameStatus.ALREADY_EXISTS


@pytest.mark.posix_only
def test_hardlink_to_source_is_a_collision(make_files, drop_dir):
    (source,) = make_files("photo.txt")
    os.link(source, drop_dir / "x.txt")
    status = RenameValidator().validate(make_plan(source, "x.txt"), ClaimedDestinations())
    assert status is RenameStatus.ALREADY_EXISTS
