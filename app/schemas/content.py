from pydantic import BaseModel
from typing import Literal, Optional

BlockKind = Literal["heading", "quote", "list_item", "spacer", "paragraph"]


class ContentBlock(BaseModel):
    kind: BlockKind
    text: str = ""
    level: Optional[int] = None  # headings only, 1-3
    ordered: bool = False  # list items written as "1. "
