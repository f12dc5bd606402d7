"""Data models for designs, assets, brand templates, folders, users and comments."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, NamedTuple, Optional, Union

from canva_connect.errors import JsonError

_U32_MAX = 2**32 - 1


class _StrEnum(str, Enum):
    def __str__(self) -> str:
        return self.value

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec)


class AssetType(_StrEnum):
    """Kind of an uploaded asset."""

    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"


class PresetDesignTypeName(_StrEnum):
    """Names of the preset design types."""

    DOC = "doc"
    WHITEBOARD = "whiteboard"
    PRESENTATION = "presentation"


class OwnershipType(_StrEnum):
    """Ownership filter when listing designs."""

    ANY = "any"
    OWNED = "owned"
    SHARED = "shared"


class SortByType(_StrEnum):
    """Sort order when listing designs."""

    RELEVANCE = "relevance"
    MODIFIED_DESCENDING = "modified_descending"
    MODIFIED_ASCENDING = "modified_ascending"
    TITLE_DESCENDING = "title_descending"
    TITLE_ASCENDING = "title_ascending"


class SuggestionStatus(_StrEnum):
    """State of a suggestion thread."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class DataFieldType(_StrEnum):
    """Kind of a brand template dataset field."""

    TEXT = "text"
    IMAGE = "image"
    CHART = "chart"


# --- field codecs -----------------------------------------------------------


class _Codec(NamedTuple):
    decode: Callable[[Any, str], Any]
    encode: Callable[[Any], Any] = lambda value: value


def _expect_object(data: Any, what: str = "value") -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise JsonError(f"invalid type for {what}, expected an object")
    return data


def _checked(kind: type, desc: str) -> Callable[[Any, str], Any]:
    def decode(value: Any, key: str) -> Any:
        if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
            raise JsonError(f"invalid type for `{key}`, expected {desc}")
        return value

    return decode


_check_int = _checked(int, "an integer")


def _decode_u32(value: Any, key: str) -> int:
    value = _check_int(value, key)
    if not 0 <= value <= _U32_MAX:
        raise JsonError(f"invalid value for `{key}`, expected an unsigned 32-bit integer")
    return value


def _decode_timestamp(value: Any, key: str) -> datetime:
    seconds = _check_int(value, key)
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        raise JsonError(f"invalid timestamp for `{key}`") from None


_STR = _Codec(_checked(str, "a string"))
_BOOL = _Codec(_checked(bool, "a boolean"))
_I64 = _Codec(_check_int)
_U32 = _Codec(_decode_u32)
_TIMESTAMP = _Codec(_decode_timestamp, lambda moment: math.floor(moment.timestamp()))


def _enum(enum_cls: type) -> _Codec:
    def decode(value: Any, key: str) -> Any:
        try:
            return enum_cls(value)
        except (ValueError, TypeError):
            raise JsonError(f"unknown variant `{value}` for `{key}`") from None

    return _Codec(decode, lambda member: member.value)


def _model(parse: Callable[[Any], Any]) -> _Codec:
    return _Codec(lambda value, key: parse(value), lambda item: item.to_dict())


def _list_of(item: _Codec) -> _Codec:
    def decode(value: Any, key: str) -> List[Any]:
        if not isinstance(value, list):
            raise JsonError(f"invalid type for `{key}`, expected a list")
        return [item.decode(entry, key) for entry in value]

    return _Codec(decode, lambda values: [item.encode(entry) for entry in values])


def _map_of(item: _Codec) -> _Codec:
    def decode(value: Any, key: str) -> Dict[str, Any]:
        obj = _expect_object(value, f"`{key}`")
        return {str(name): item.decode(entry, key) for name, entry in obj.items()}

    return _Codec(
        decode, lambda values: {name: item.encode(entry) for name, entry in values.items()}
    )


def _f(
    codec: _Codec,
    *,
    key: Optional[str] = None,
    optional: bool = False,
    skip_none: bool = False,
) -> Any:
    metadata = {"codec": codec, "key": key, "optional": optional, "skip_none": skip_none}
    if optional:
        return field(default=None, metadata=metadata)
    return field(metadata=metadata)


def _decode(cls: type, data: Any) -> Any:
    """Build a dataclass instance from a JSON object using its field codecs."""
    data = _expect_object(data, cls.__name__)
    values: Dict[str, Any] = {}
    for item in fields(cls):
        meta = item.metadata
        key = meta["key"] or item.name
        if key not in data:
            if not meta["optional"]:
                raise JsonError(f"missing field `{key}`")
            values[item.name] = None
        elif data[key] is None and meta["optional"]:
            values[item.name] = None
        else:
            values[item.name] = meta["codec"].decode(data[key], key)
    return cls(**values)


def _encode(obj: Any) -> Dict[str, Any]:
    """Turn a dataclass instance into a JSON object using its field codecs."""
    tag = getattr(obj, "_TAG", None)
    result: Dict[str, Any] = {} if tag is None else {"type": tag}
    for item in fields(obj):
        meta = item.metadata
        value = getattr(obj, item.name)
        if value is None:
            if not meta["skip_none"]:
                result[meta["key"] or item.name] = None
        else:
            result[meta["key"] or item.name] = meta["codec"].encode(value)
    return result


def _dispatch(data: Any, variants: Mapping[str, Any], what: str) -> Any:
    obj = _expect_object(data, what)
    if "type" not in obj:
        raise JsonError("missing field `type`")
    variant = variants.get(obj["type"])
    if variant is None:
        raise JsonError(f"unknown variant `{obj['type']}` for {what}")
    return variant.from_dict(obj)


# --- assets and designs -----------------------------------------------------


@dataclass(kw_only=True)
class Thumbnail:
    """A thumbnail image and its size."""

    url: str = _f(_STR)
    width: int = _f(_U32)
    height: int = _f(_U32)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Thumbnail":
        return _decode(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        return _encode(self)


@dataclass(kw_only=True)
class Asset:
    """Metadata of an uploaded asset."""

    id: str = _f(_STR)
    name: str = _f(_STR)
    tags: List[str] = _f(_list_of(_STR))
    asset_type: AssetType = _f(_enum(AssetType), key="type")
    thumbnail: Optional[Thumbnail] = _f(_model(Thumbnail.from_dict), optional=True)
    created_at: datetime = _f(_TIMESTAMP)
    updated_at: datetime = _f(_TIMESTAMP)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Asset":
        return _decode(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        return _encode(self)


@dataclass(kw_only=True)
class TeamUserSummary:
    """A user identified within a team."""

    user_id: str = _f(_STR)
    team_id: str = _f(_STR)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TeamUserSummary":
        return _decode(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        return _encode(self)


@dataclass(kw_only=True)
class DesignLinks:
    """Temporary edit and view URLs of a design, valid for 30 days."""

    edit_url: str = _f(_STR)
    view_url: str = _f(_STR)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DesignLinks":
        return _decode(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        return _encode(self)


@dataclass(kw_only=True)
class Design:
    """Full metadata of a design."""

    id: str = _f(_STR)
    title: Optional[str] = _f(_STR, optional=True)
    owner: TeamUserSummary = _f(_model(TeamUserSummary.from_dict))
    thumbnail: Optional[Thumbnail] = _f(_model(Thumbnail.from_dict), optional=True)
    urls: DesignLinks = _f(_model(DesignLinks.from_dict))
    created_at: datetime = _f(_TIMESTAMP)
    updated_at: datetime = _f(_TIMESTAMP)
    page_count: Optional[int] = _f(_U32, optional=True)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Design":
        return _decode(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        return _encode(self)


@dataclass(kw_only=True)
class DesignSummary:
    """Basic metadata of a design, without its owner."""

    id: str = _f(_STR)
    title: Optional[str] = _f(_STR, optional=True)
    thumbnail: Optional[Thumbnail] = _f(_model(Thumbnail.from_dict), optional=True)
    urls: DesignLinks = _f(_model(DesignLinks.from_dict))
    created_at: datetime = _f(_TIMESTAMP)
    updated_at: datetime = _f(_TIMESTAMP)
    page_count: Optional[int] = _f(_U32, optional=True)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DesignSummary":
        return _decode(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        return _encode(self)


@dataclass(kw_only=True)
class ListDesignsRequest:
    """Filters and paging for listing designs."""

    query: Optional[str] = _f(_STR, optional=True)
    continuation: Optional[str] = _f(_STR, optional=True)
    ownership: Optional[OwnershipType] = _f(_enum(OwnershipType), optional=True)
    sort_by: Optional[SortByType] = _f(_enum(SortByType), optional=True)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ListDesignsRequest":
        return _decode(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        return _encode(self)


@dataclass(kw_only=True)
class GetListDesignResponse:
    """One page of listed designs."""

    items: List[Design] = _f(_list_of(_model(Design.from_dict)))
    continuation: Optional[str] = _f(_STR, optional=True)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GetListDesignResponse":
        return _decode(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        return _encode(self)


@dataclass(kw_only=True)
class PresetDesignType:
    """A design type chosen from the presets."""

    _TAG = "preset"
    name: PresetDesignTypeName = _f(_enum(PresetDesignTypeName))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PresetDesignType":
        return _decode(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        return _encode(self)


@dataclass(kw_only=True)
class CustomDesignType:
    """A design type with a custom size in pixels."""

    _TAG = "custom"
    width: int = _f(_U32)
    height: int = _f(_U32)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CustomDesignType":
        return _decode(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        return _encode(self)


DesignTypeInput = Union[PresetDesignType, CustomDesignType]


def parse_design_type_input(data: Mapping[str, Any]) -> DesignTypeInput:
    """Decode a design type tagged by its `type` field."""
    return _dispatch(
        data, {"preset": PresetDesignType, "custom": CustomDesignType}, "DesignTypeInput"
    )


@dataclass(kw_only=True)
class CreateDesignRequest:
    """Request to create a design."""

    design_type: Optional[DesignTypeInput] = _f(
        _model(parse_design_type_input), optional=True
    )
    asset_id: Optional[str] = _f(_STR, optional=True)
    title: Optional[str] = _f(_STR, optional=True)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CreateDesignRequest":
        return _decode(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        return _encode(self)


@dataclass(kw_only=True)
class CreateDesignResponse:
    """The design that was created."""

    design: Design = _f(_model(Design.from_dict))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CreateDesignResponse":
        return _decode(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        return _encode(self)


@dataclass(kw_only=True)
class GetDesignResponse:
    """The design that was requested."""

    design: Design = _f(_model(Design.from_dict))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GetDesignResponse":
        return _decode(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        return _encode(self)


# --- brand templates --------------------------------------------------------


@dataclass(kw_only=True)
class BrandTemplate:
    """Metadata of a brand template."""

    id: str = _f(_STR)
    title: str = _f(_STR)
    thumbnail: Optional[Thumbnail] = _f(_model(Thumbnail.from_dict), optional=True)
    view_url: str = _f(_STR)
    create_url: str = _f(_STR)
    created_at: datetime = _f(_TIMESTAMP)
    updated_at: datetime = _f(_TIMESTAMP)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BrandTemplate":
        return _decode(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        return _encode(self)


@dataclass(kw_only=True)
class BrandTemplateUrls:
    """Edit and view URLs of a brand template."""

    edit_url: str = _f(_STR)
    view_url: str = _f(_STR)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BrandTemplateUrls":
        return _decode(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        return _encode(self)


@dataclass(kw_only=True)
class DataField:
    """A field of a brand template dataset."""

    field_type: DataFieldType = _f(_enum(DataFieldType), key="type")
    label: Optional[str] = _f(_STR, optional=True)
    description: Optional[str] = _f(_STR, optional=True)
    required: Optional[bool] = _f(_BOOL, optional=True)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DataField":
        return _decode(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        return _encode(self)


@dataclass(kw_only=True)
class BrandTemplateDataset:
    """Dataset fields of a brand template, keyed by field name."""

    dataset: Dict[str, DataField] = _f(_map_of(_model(DataField.from_dict)))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BrandTemplateDataset":
        return _decode(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        return _encode(self)


# --- folders and users ------------------------------------------------------


@dataclass(kw_only=True)
class Folder:
    """Metadata of a folder; timestamps are Unix seconds."""

    id: str = _f(_STR)
    name: str = _f(_STR)
    created_at: int = _f(_I64)
    updated_at: int = _f(_I64)
    thumbnail: Optional[Thumbnail] = _f(
        _model(Thumbnail.from_dict), optional=True, skip_none=True
    )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Folder":
        return _decode(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        return _encode(self)


@dataclass(kw_only=True)
class Team:
    """A team."""

    id: str = _f(_STR)
    name: str = _f(_STR)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Team":
        return _decode(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        return _encode(self)


@dataclass(kw_only=True)
class User:
    """A user profile."""

    id: str = _f(_STR)
    email: str = _f(_STR)
    display_name: str = _f(_STR)
    profile_photo_url: Optional[str] = _f(_STR, optional=True)
    team: Optional[Team] = _f(_model(Team.from_dict), optional=True)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "User":
        return _decode(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        return _encode(self)


# --- comments ---------------------------------------------------------------


@dataclass(kw_only=True)
class SimpleUser:
    """A user as shown in comments."""

    id: str = _f(_STR)
    display_name: str = _f(_STR)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SimpleUser":
        return _decode(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        return _encode(self)


@dataclass(kw_only=True)
class CommentContent:
    """Text of a comment."""

    plaintext: str = _f(_STR)
    markdown: Optional[str] = _f(_STR, optional=True)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CommentContent":
        return _decode(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        return _encode(self)


@dataclass(kw_only=True)
class UserMention:
    """A user mentioned in a comment; the tag reads user_id:team_id."""

    tag: str = _f(_STR)
    user: TeamUserSummary = _f(_model(TeamUserSummary.from_dict))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "UserMention":
        return _decode(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        return _encode(self)


@dataclass(kw_only=True)
class SuggestedEdit:
    """An edit proposed in a suggestion thread."""

    id: str = _f(_STR)
    edit_type: str = _f(_STR, key="type")
    description: str = _f(_STR)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SuggestedEdit":
        return _decode(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        return _encode(self)


_MENTIONS = _map_of(_model(UserMention.from_dict))


@dataclass(kw_only=True)
class CommentThreadComment:
    """A thread that holds a regular comment."""

    _TAG = "comment"
    content: CommentContent = _f(_model(CommentContent.from_dict))
    mentions: Dict[str, UserMention] = _f(_MENTIONS)
    assignee: Optional[SimpleUser] = _f(_model(SimpleUser.from_dict), optional=True)
    resolver: Optional[SimpleUser] = _f(_model(SimpleUser.from_dict), optional=True)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CommentThreadComment":
        return _decode(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        return _encode(self)


@dataclass(kw_only=True)
class CommentThreadSuggestion:
    """A thread that holds a suggestion."""

    _TAG = "suggestion"
    suggested_edits: List[SuggestedEdit] = _f(_list_of(_model(SuggestedEdit.from_dict)))
    status: SuggestionStatus = _f(_enum(SuggestionStatus))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CommentThreadSuggestion":
        return _decode(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        return _encode(self)


CommentThreadType = Union[CommentThreadComment, CommentThreadSuggestion]


def parse_comment_thread_type(data: Mapping[str, Any]) -> CommentThreadType:
    """Decode a thread type tagged by its `type` field."""
    return _dispatch(
        data,
        {"comment": CommentThreadComment, "suggestion": CommentThreadSuggestion},
        "CommentThreadType",
    )


@dataclass(kw_only=True)
class CommentThread:
    """A comment or suggestion thread on a design."""

    id: str = _f(_STR)
    design_id: str = _f(_STR)
    thread_type: CommentThreadType = _f(_model(parse_comment_thread_type))
    author: Optional[SimpleUser] = _f(_model(SimpleUser.from_dict), optional=True)
    created_at: datetime = _f(_TIMESTAMP)
    updated_at: datetime = _f(_TIMESTAMP)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CommentThread":
        return _decode(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        return _encode(self)


@dataclass(kw_only=True)
class CommentReply:
    """A reply in a comment thread."""

    id: str = _f(_STR)
    author: Optional[SimpleUser] = _f(_model(SimpleUser.from_dict), optional=True)
    content: CommentContent = _f(_model(CommentContent.from_dict))
    created_at: datetime = _f(_TIMESTAMP)
    mentions: Dict[str, UserMention] = _f(_MENTIONS)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CommentReply":
        return _decode(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        return _encode(self)


@dataclass(kw_only=True)
class CreateThreadResponse:
    """The thread that was created."""

    thread: CommentThread = _f(_model(CommentThread.from_dict))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CreateThreadResponse":
        return _decode(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        return _encode(self)


# --- folder items -----------------------------------------------------------


@dataclass(kw_only=True)
class FolderItemFolder:
    """A folder inside a folder."""

    _TAG = "folder"
    folder: Folder = _f(_model(Folder.from_dict))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FolderItemFolder":
        return _decode(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        return _encode(self)


@dataclass(kw_only=True)
class FolderItemDesign:
    """A design inside a folder."""

    _TAG = "design"
    design: DesignSummary = _f(_model(DesignSummary.from_dict))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FolderItemDesign":
        return _decode(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        return _encode(self)


@dataclass(kw_only=True)
class FolderItemImage:
    """An image asset inside a folder."""

    _TAG = "image"
    image: Asset = _f(_model(Asset.from_dict))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FolderItemImage":
        return _decode(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        return _encode(self)


FolderItemSummary = Union[FolderItemFolder, FolderItemDesign, FolderItemImage]
FolderItem = FolderItemSummary


def parse_folder_item(data: Mapping[str, Any]) -> FolderItemSummary:
    """Decode a folder item tagged by its `type` field."""
    return _dispatch(
        data,
        {"folder": FolderItemFolder, "design": FolderItemDesign, "image": FolderItemImage},
        "FolderItemSummary",
    )