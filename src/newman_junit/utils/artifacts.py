import pathlib
from dataclasses import dataclass
from typing import Optional, Union

@dataclass(frozen=True)
class Export:
    name: str
    default: str
    content: str
    path: Optional[str] = None

    @property
    def target(self) -> str:
        return self.path or self.default

def write_export(export: Export, base_dir: Union[str, pathlib.Path] = ".") -> pathlib.Path:
    p = pathlib.Path(export.target)
    if not p.is_absolute():
        p = pathlib.Path(base_dir) / p
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(export.content, encoding="utf-8")
    return p
