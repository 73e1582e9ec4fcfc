from pydantic import BaseModel, Field

from src.domain.entities import Product


class ProjectRules(BaseModel):
    slug: str
    rules_version: str

class OperationDoc(BaseModel):
    summary: str
    description: str = ""
    tags: list[str] = Field(default_factory=list)
    responses: dict[int, str] = Field(default_factory=dict)  # status -> description

class ApiRules(BaseModel):
    title: str
    version: str
    operations: dict[str, OperationDoc] = Field(default_factory=dict)  # keyed by operation id

class CatalogRules(BaseModel):
    seed_products: list[Product] = Field(default_factory=list)

class OpsRules(BaseModel):
    required_env: list[str] = Field(default_factory=list)
    log_level: str = "INFO"

class Rules(BaseModel):
    project: ProjectRules
    api: ApiRules
    catalog: CatalogRules = Field(default_factory=CatalogRules)
    ops: OpsRules = Field(default_factory=OpsRules)
