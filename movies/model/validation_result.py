from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


@dataclass
class FieldError:
    path: List[Union[str, int]]
    message: str
    code: str


@dataclass
class ValidationResult:
    ok: bool
    data: Optional[Dict[str, Any]] = None
    errors: List[FieldError] = field(default_factory=list)

    @classmethod
    def success(cls, data: Dict[str, Any]) -> "ValidationResult":
        return cls(ok=True, data=data)

    @classmethod
    def failure(cls, errors: List[FieldError]) -> "ValidationResult":
        return cls(ok=False, errors=errors)
