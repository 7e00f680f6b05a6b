from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
import yaml, pathlib

DEFAULT_REPORT = "newman-run-report.xml"

class ReporterConfig(BaseModel):
    export: Optional[str] = Field(None, description=f"Report path, defaults to {DEFAULT_REPORT}")
    separator: str = Field(" / ", description="Joins folder and request names into a suite name")
    bodyless_methods: List[str] = Field(default_factory=lambda: ["GET"],
                                        description="Methods whose request body is left out of error text")
    indent: str = Field("  ")
    collection_name: Optional[str] = Field(None, description="Overrides the collection name on <testsuites>")

    @field_validator("bodyless_methods")
    @classmethod
    def _upper(cls, v: List[str]) -> List[str]:
        return [m.upper() for m in v]

class AppConfig(BaseModel):
    reporter: ReporterConfig = Field(default_factory=ReporterConfig)
    log_level: str = Field("INFO")

def load_config(path: str) -> AppConfig:
    data = yaml.safe_load(pathlib.Path(path).read_text()) or {}
    return AppConfig.model_validate(data)
