from .create_tag_use_case import CreateTagUseCase
from .delete_tag_use_case import DeleteTagUseCase
from .dtos import DeleteTagResponse, TagCommand, TagListResponse, TagResponse
from .list_tags_use_case import ListTagsUseCase
from .rename_tag_use_case import RenameTagUseCase

__all__ = [
    "CreateTagUseCase",
    "DeleteTagUseCase",
    "ListTagsUseCase",
    "RenameTagUseCase",
    "DeleteTagResponse",
    "TagCommand",
    "TagListResponse",
    "TagResponse",
]
