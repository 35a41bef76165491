"""
Public API for the form state package.

Import from here everywhere else, so you can refactor internals freely:
    from formstate import (
        FormTree, HeaderData, SectionState, ItemState, InstanceState, FollowUpData,
        Status, PhotoFile,
        ItemPath, InstancePath,
        SetStatus, SetDescription, SetPhoto, AddInstance, RemoveInstance,
        SetHeaderField, SetFollowUpField,
        reduce, Store
    )
"""
from .model import (
    FormTree, HeaderData, SectionState, ItemState, InstanceState, FollowUpData,
    Status, PhotoFile, new_instance,
)
from .commands import (
    Command, ItemPath, InstancePath,
    SetStatus, SetDescription, SetPhoto, AddInstance, RemoveInstance,
    SetHeaderField, SetFollowUpField,
)
from .errors import FormStateError, InvalidPathError, OperationNotPermitted, UnknownFieldError
from .reducer import reduce
from .store import Store

__all__ = [
    # model
    "FormTree", "HeaderData", "SectionState", "ItemState", "InstanceState", "FollowUpData",
    "Status", "PhotoFile", "new_instance",
    # commands
    "Command", "ItemPath", "InstancePath",
    "SetStatus", "SetDescription", "SetPhoto", "AddInstance", "RemoveInstance",
    "SetHeaderField", "SetFollowUpField",
    # errors
    "FormStateError", "InvalidPathError", "OperationNotPermitted", "UnknownFieldError",
    # reducer & store
    "reduce", "Store",
]
