from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Union

from .model import PhotoFile, Status


class Command:
    """Marker base class for all commands (intents)."""
    pass


@dataclass(frozen=True)
class ItemPath:
    section: int
    item: int


@dataclass(frozen=True)
class InstancePath:
    """`instance` is either the positional index or the instance's stable id."""
    section: int
    item: int
    instance: Union[int, str]

    @property
    def item_path(self) -> ItemPath:
        return ItemPath(self.section, self.item)


@dataclass
class SetStatus(Command):
    path: InstancePath
    status: Optional[Status]  # None clears


@dataclass
class SetDescription(Command):
    path: InstancePath
    text: str


@dataclass
class SetPhoto(Command):
    """Engine keeps the raw file only; preview handles live in preview.PreviewBinding."""
    path: InstancePath
    photo: Optional[PhotoFile]


@dataclass
class AddInstance(Command):
    """Append a blank instance to a repeatable item."""
    path: ItemPath


@dataclass
class RemoveInstance(Command):
    path: InstancePath


@dataclass
class SetHeaderField(Command):
    field: str
    value: str


@dataclass
class SetFollowUpField(Command):
    field: str
    value: str
