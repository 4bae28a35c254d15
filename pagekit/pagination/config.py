# pagekit/pagination/config.py
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, SORT_SPEC_SEPARATOR


class PaginationSettings(BaseSettings):
    PAGINATION_DEFAULT_SIZE: int = DEFAULT_PAGE_SIZE
    PAGINATION_MAX_SIZE: int = MAX_PAGE_SIZE
    PAGINATION_DEFAULT_SORT: str = ""

    @field_validator("PAGINATION_DEFAULT_SIZE", "PAGINATION_MAX_SIZE")
    def validate_size(cls, v: int) -> int:
        if v < 0:
            raise ValueError("page sizes must not be negative")
        return v

    @property
    def default_sort(self) -> list[str]:
        return [s.strip() for s in self.PAGINATION_DEFAULT_SORT.split(SORT_SPEC_SEPARATOR) if s.strip()]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


pagination_settings = PaginationSettings()
