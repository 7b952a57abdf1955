from typing import Callable, Dict, List, Optional

from typing_extensions import Protocol

StrHeaderListType = List[str]
AttributeDictType = Dict[str, Optional[str]]
AddNoteMethodType = Callable[..., None]


class OutputMethodType(Protocol):
    def __call__(self, out: str) -> None: ...
