from __future__ import annotations
from pathlib import Path
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    family_menu_dir: Path = Path.home() / ".family_menu"
    storage_key: str = "familyMenuApp"
    image_base: str = "assets"
    category_labels: dict[str, str] = {
        "cereales": "Cereales y panes",
        "condimentos": "Condimentos",
        "carnes": "Carnes",
        "despensa": "Despensa",
        "frutas": "Frutas",
        "lacteos": "Lácteos y huevos",
        "legumbres": "Legumbres",
        "otros": "Otros",
        "pescados": "Pescados y mariscos",
        "verduras": "Verduras",
    }

    @field_validator("family_menu_dir", mode="after")
    @classmethod
    def expand_home(cls, v: Path) -> Path:
        return v.expanduser()

    @field_validator("storage_key", mode="after")
    @classmethod
    def require_storage_key(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("storage_key must not be empty")
        return v
