from pydantic import BaseModel, Field
from typing import Optional
import yaml, pathlib

class JUnitConfig(BaseModel):
    enabled: bool = Field(False, description="Write a JUnit XML report when the run ends")
    report_name: Optional[str] = Field(None, description="Report file is named TEST-<report_name>.xml")
    root_directory: str = Field(".", description="Reports land in <root_directory>/target/junit")

class ReporterConfig(BaseModel):
    slow_ms: int = Field(75, description="Tests slower than this are classified slow, above half of it medium")
    color: bool = Field(True)

class AppConfig(BaseModel):
    junit: JUnitConfig = Field(default_factory=JUnitConfig)
    reporter: ReporterConfig = Field(default_factory=ReporterConfig)

def load_config(path: str) -> AppConfig:
    data = yaml.safe_load(pathlib.Path(path).read_text()) or {}
    return AppConfig.model_validate(data)
