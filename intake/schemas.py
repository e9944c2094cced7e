from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class ParsedPersonInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    gender: Optional[Literal["Male", "Female"]] = None
    birthday: Optional[str] = None  # YYYY-MM-DD
    id_number: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    city: Optional[str] = None
    district: Optional[str] = None
    # no extraction rule fills this yet
    address: Optional[str] = None

    def filled_fields(self) -> Dict[str, str]:
        return self.model_dump(exclude_none=True)

    def is_empty(self) -> bool:
        return not self.filled_fields()


class ValidationResult(BaseModel):
    is_valid: bool = True
    warnings: List[str] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)
