from .category import (
    CategoryCreate,
    CategoryUpdate,
    CategoryInDB,
    CategoryResponse,
    CategorySummary,
    CategoryRef,
)
from .code import CodeCreate, CodeInDB, CodeResponse, CodeSnippet
from .doc import (
    DocCreate,
    DocUpdate,
    DocInDB,
    DocResponse,
    DocVariant,
    DocWithCodes,
    DocDetail,
    DocSlugEntry,
    SlugGroup,
    DocWithCodeSnippets,
    MessageResponse,
)

__all__ = [
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryInDB",
    "CategoryResponse",
    "CategorySummary",
    "CategoryRef",
    "CodeCreate",
    "CodeInDB",
    "CodeResponse",
    "CodeSnippet",
    "DocCreate",
    "DocUpdate",
    "DocInDB",
    "DocResponse",
    "DocVariant",
    "DocWithCodes",
    "DocDetail",
    "DocSlugEntry",
    "SlugGroup",
    "DocWithCodeSnippets",
    "MessageResponse",
]
