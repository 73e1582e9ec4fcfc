import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from src.adapters.ids import UuidIdGenerator
from src.adapters.memory.product_repo import InMemoryProductRepo
from src.components.products import IdGeneratorPort, ProductRepoPort, ProductService
from src.rules.loader import load_rules
from src.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.rules_path = Path(
            os.environ.get("CATALOG_RULES_PATH", str(self.base_dir / "rules.yaml"))
        )
        # Overrides ops.log_level from the rules file when set.
        self.log_level = os.environ.get("CATALOG_LOG_LEVEL")


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules() -> Rules:
    return load_rules(get_settings().rules_path)


# --- Repos ---
@lru_cache
def get_product_repo() -> InMemoryProductRepo:
    """One repository per process, seeded from the rules file."""
    return InMemoryProductRepo(seed=get_rules().catalog.seed_products)


def get_id_generator() -> UuidIdGenerator:
    return UuidIdGenerator()


# --- Component Services ---
def get_product_service(
    repo: ProductRepoPort = Depends(get_product_repo),
    id_generator: IdGeneratorPort = Depends(get_id_generator),
) -> ProductService:
    """Get product component service."""
    return ProductService(repo=repo, id_generator=id_generator)


def reset_caches() -> None:
    """Drop cached settings, rules and storage (tests and reloads)."""
    get_settings.cache_clear()
    get_rules.cache_clear()
    get_product_repo.cache_clear()
