"""Data models for dirpick."""

from enum import Enum
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class MenuMode(str, Enum):
    """Kind of prompt a menu presents."""

    SINGLE = "single"
    MULTIPLE = "multiple"
    YES_NO = "yes_no"


class UIPreference(str, Enum):
    """Caller preference for how menus are rendered."""

    AUTO = "auto"
    RICH = "rich"
    PLAIN = "plain"


class UIStrategy(str, Enum):
    """Strategy actually used to render a menu."""

    RICH = "rich"
    PLAIN = "plain"


# single -> Optional[str], multiple -> list[str], yes_no -> bool
MenuResult = Union[Optional[str], list[str], bool]


class MenuSpec(BaseModel):
    """Definition of one prompt shown to the user."""

    title: str = Field(..., min_length=1, max_length=200, description="Prompt title")
    options: list[str] = Field(default_factory=list, description="Choices, in display order")
    mode: MenuMode = Field(MenuMode.SINGLE, description="Single, multiple or yes/no")
    default_selection: Optional[int] = Field(
        None, description="Index of the default option (-1 or None for no default)"
    )
    cancel_label: str = Field("Cancel", min_length=1, max_length=100)
    default_answer: bool = Field(True, description="Pre-selected answer of a yes/no prompt")

    @field_validator("default_selection")
    @classmethod
    def _normalize_default(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value == -1:
            return None
        return value

    @model_validator(mode="after")
    def _check_options(self) -> "MenuSpec":
        if self.mode == MenuMode.YES_NO:
            if self.options:
                raise ValueError("yes/no menus take no options")
            if self.default_selection is not None:
                raise ValueError("yes/no menus take no default selection")
            return self

        if not self.options:
            raise ValueError(f"{self.mode.value} menus need at least one option")
        if self.default_selection is not None and not (
            0 <= self.default_selection < len(self.options)
        ):
            raise ValueError(
                f"default_selection {self.default_selection} is outside 0-{len(self.options) - 1}"
            )
        return self

    @property
    def has_default(self) -> bool:
        """Whether a default option is set."""
        return self.default_selection is not None


class DirectoryCandidate(BaseModel):
    """A directory offered for selection."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Directory name as displayed")
    full_path: str = Field(..., description="Absolute path to the directory")
    has_entries: Optional[bool] = Field(
        None, description="Whether the directory has any entry (None until probed)"
    )

    @property
    def path(self) -> Path:
        """Full path as a Path."""
        return Path(self.full_path)


class NameFailure(str, Enum):
    """Why a proposed directory name was rejected."""

    EMPTY = "empty"
    INVALID_CHARACTERS = "invalid_characters"
    RESERVED_REFERENCE = "reserved_reference"
    RESERVED_DEVICE_NAME = "reserved_device_name"


FAILURE_MESSAGES = {
    NameFailure.EMPTY: "Folder name cannot be empty",
    NameFailure.INVALID_CHARACTERS: "Folder name contains invalid characters",
    NameFailure.RESERVED_REFERENCE: "'.' and '..' are reserved names",
    NameFailure.RESERVED_DEVICE_NAME: "Folder name is a reserved device name on Windows",
}


class NameValidationResult(BaseModel):
    """Result of validating a proposed directory name."""

    accepted: bool = Field(..., description="Whether the name can be used")
    canonical_name: Optional[str] = Field(None, description="Trimmed name, if accepted")
    failure_reason: Optional[NameFailure] = Field(None, description="Reason, if rejected")

    @property
    def message(self) -> str:
        """Human-readable summary."""
        if self.accepted:
            return f"'{self.canonical_name}' is a valid folder name"
        return FAILURE_MESSAGES.get(self.failure_reason, "Invalid folder name")


class CreationStatus(str, Enum):
    """Outcome kind of a create-directory operation."""

    CREATED = "created"
    ALREADY_EXISTS = "already_exists"
    CANCELLED = "cancelled"
    FAILED = "failed"
    INVALID_NAME = "invalid_name"
    PARENT_NOT_FOUND = "parent_not_found"


class CreationOutcome(BaseModel):
    """Result of a create-directory operation."""

    status: CreationStatus = Field(..., description="What happened")
    path: Optional[str] = Field(None, description="Target path, when one was computed")
    message: Optional[str] = Field(None, description="Explanation for non-success outcomes")
    dry_run: bool = Field(False, description="Whether this was a dry run")
    failure_reason: Optional[NameFailure] = Field(None, description="Set for invalid names")

    @property
    def created(self) -> bool:
        """True for a real or simulated creation."""
        return self.status == CreationStatus.CREATED

    @property
    def directory(self) -> Optional[Path]:
        """The created directory, or None when nothing was created."""
        if self.status == CreationStatus.CREATED and not self.dry_run and self.path:
            return Path(self.path)
        return None
