"""Tests for data models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from dirpick.models import (
    CreationOutcome,
    CreationStatus,
    DirectoryCandidate,
    MenuMode,
    MenuSpec,
    NameFailure,
    NameValidationResult,
)


class TestMenuMode:
    def test_modes_exist(self):
        assert MenuMode.SINGLE == "single"
        assert MenuMode.MULTIPLE == "multiple"
        assert MenuMode.YES_NO == "yes_no"


class TestMenuSpec:
    def test_defaults(self):
        spec = MenuSpec(title="Pick", options=["a"])
        assert spec.mode == MenuMode.SINGLE
        assert spec.default_selection is None
        assert spec.cancel_label == "Cancel"
        assert not spec.has_default

    def test_minus_one_means_no_default(self):
        spec = MenuSpec(title="Pick", options=["a", "b"], default_selection=-1)
        assert spec.default_selection is None

    def test_default_in_range(self):
        spec = MenuSpec(title="Pick", options=["a", "b"], default_selection=1)
        assert spec.has_default

    @pytest.mark.parametrize("default", [2, 10, -2])
    def test_default_out_of_range(self, default):
        with pytest.raises(ValidationError):
            MenuSpec(title="Pick", options=["a", "b"], default_selection=default)

    @pytest.mark.parametrize("mode", [MenuMode.SINGLE, MenuMode.MULTIPLE])
    def test_choice_modes_need_options(self, mode):
        with pytest.raises(ValidationError):
            MenuSpec(title="Pick", options=[], mode=mode)

    def test_yes_no_takes_no_options(self):
        with pytest.raises(ValidationError):
            MenuSpec(title="Sure?", options=["a"], mode=MenuMode.YES_NO)

    def test_yes_no_takes_no_default_selection(self):
        with pytest.raises(ValidationError):
            MenuSpec(title="Sure?", mode=MenuMode.YES_NO, default_selection=0)

    def test_yes_no(self):
        spec = MenuSpec(title="Sure?", mode=MenuMode.YES_NO, default_answer=False)
        assert spec.options == []
        assert spec.default_answer is False

    @pytest.mark.parametrize("title", ["", "x" * 201])
    def test_title_length(self, title):
        with pytest.raises(ValidationError):
            MenuSpec(title=title, options=["a"])

    def test_cancel_label_required(self):
        with pytest.raises(ValidationError):
            MenuSpec(title="Pick", options=["a"], cancel_label="")


class TestDirectoryCandidate:
    def test_path(self):
        candidate = DirectoryCandidate(name="docs", full_path="/home/user/docs")
        assert candidate.path == Path("/home/user/docs")
        assert candidate.has_entries is None

    def test_frozen(self):
        candidate = DirectoryCandidate(name="docs", full_path="/home/user/docs")
        with pytest.raises(ValidationError):
            candidate.name = "other"


class TestNameValidationResult:
    def test_accepted_message(self):
        result = NameValidationResult(accepted=True, canonical_name="docs")
        assert "docs" in result.message

    def test_rejected_message(self):
        result = NameValidationResult(accepted=False, failure_reason=NameFailure.EMPTY)
        assert result.message == "Folder name cannot be empty"


class TestCreationOutcome:
    def test_created(self):
        outcome = CreationOutcome(status=CreationStatus.CREATED, path="/tmp/new")
        assert outcome.created
        assert outcome.directory == Path("/tmp/new")

    def test_dry_run_has_no_directory(self):
        outcome = CreationOutcome(status=CreationStatus.CREATED, path="/tmp/new", dry_run=True)
        assert outcome.created
        assert outcome.directory is None

    @pytest.mark.parametrize(
        "status",
        [CreationStatus.ALREADY_EXISTS, CreationStatus.CANCELLED, CreationStatus.FAILED],
    )
    def test_not_created(self, status):
        outcome = CreationOutcome(status=status, path="/tmp/new")
        assert not outcome.created
        assert outcome.directory is None
