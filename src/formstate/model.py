from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple
import mimetypes
import uuid


class Status(Enum):
    OK = "OK"
    NOT_OK = "Not OK"
    NA = "N/A"


@dataclass(frozen=True)
class PhotoFile:
    """Raw file reference selected by the user. Previews are derived elsewhere."""
    path: str
    name: str
    content_type: str = "application/octet-stream"

    @classmethod
    def from_path(cls, path: str | Path, content_type: Optional[str] = None) -> "PhotoFile":
        p = Path(path)
        if content_type is None:
            content_type = mimetypes.guess_type(p.name)[0] or "application/octet-stream"
        return cls(path=str(p), name=p.name, content_type=content_type)


@dataclass(frozen=True)
class InstanceState:
    id: str
    status: Optional[Status] = None  # None = unset
    description: str = ""
    photo: Optional[PhotoFile] = None


@dataclass(frozen=True)
class ItemState:
    id: str
    text: str
    is_repeatable: bool = False
    instances: Tuple[InstanceState, ...] = ()


@dataclass(frozen=True)
class SectionState:
    title: str
    items: Tuple[ItemState, ...] = ()


@dataclass(frozen=True)
class HeaderData:
    assessment_date: str = ""
    area_location: str = ""
    assessor_name: str = ""


@dataclass(frozen=True)
class FollowUpData:
    summary: str = ""
    recommendations: str = ""
    person_in_charge: str = ""
    target_date: str = ""


@dataclass(frozen=True)
class FormTree:
    header: HeaderData = field(default_factory=HeaderData)
    sections: Tuple[SectionState, ...] = ()
    follow_up: FollowUpData = field(default_factory=FollowUpData)

    def iter_instances(self):
        """Yield (section_index, item_index, instance_index, item, instance) in form order."""
        for si, sec in enumerate(self.sections):
            for ii, item in enumerate(sec.items):
                for ni, inst in enumerate(item.instances):
                    yield si, ii, ni, item, inst

    def find_instance(self, instance_id: str) -> Optional[Tuple[int, int, int]]:
        """Convenience lookup by stable id; O(n) but forms are small."""
        for si, ii, ni, _item, inst in self.iter_instances():
            if inst.id == instance_id:
                return si, ii, ni
        return None


def new_instance(item_id: str) -> InstanceState:
    return InstanceState(id=new_instance_id(item_id))


def new_instance_id(item_id: str) -> str:
    return f"{item_id}#{uuid.uuid4().hex[:12]}"
