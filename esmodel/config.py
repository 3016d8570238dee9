"""
esmodel configuration

We read configuration from 2 sources, in order of precedence (higher is more priority)
- Environment variables
- A .env file, either in the current working directory or in a location specified
  by the ESMODEL_ENV_FILE environment variable

Static type mappings (parent/routing fields and other mapping keys) are not part of
these settings, they are read from the JSON file named by mapping_file, see load_type_settings
"""

import functools
import json
from pathlib import Path
from typing import Annotated, Any

from dotenv import load_dotenv
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "esmodel_"


class Settings(BaseSettings):
    env_file: Annotated[
        Path,
        Field(
            description="Location of a .env file (if used) relative to working directory",
        ),
    ] = Path(".env")

    elastic_password: Annotated[
        str | None,
        Field(
            description=(
                "Elasticsearch password. This the password for the 'elastic' user when Elastic xpack security is enabled"
            )
        ),
    ] = None

    elastic_host: Annotated[
        str | None,
        Field(
            description=(
                "Elasticsearch host. "
                "Default: https://localhost:9200 if elastic_password is set, http://localhost:9200 otherwise"
            )
        ),
    ] = None

    elastic_verify_ssl: Annotated[
        bool | None,
        Field(
            description=(
                "Elasticsearch verify SSL (only used if elastic_password is set). Default: True unless host is localhost)"
            ),
        ),
    ] = None

    mapping_file: Annotated[
        Path | None,
        Field(
            description="JSON file with static type mappings, structured as {mapping: {index: {type: {...}}}}",
        ),
    ] = None

    log_level: Annotated[str, Field(description="Log level for the command line interface")] = "INFO"

    @model_validator(mode="after")
    def set_ssl(self: Any) -> "Settings":
        if not self.elastic_host:
            self.elastic_host = ("https" if self.elastic_password else "http") + "://localhost:9200"
        if self.elastic_verify_ssl is None:
            self.elastic_verify_ssl = self.elastic_host not in {
                "http://localhost:9200",
                "https://localhost:9200",
            }
        return self

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX)


@functools.lru_cache()
def get_settings() -> Settings:
    # The first instance only tells us which .env file to load; environment variables win over it
    temp = Settings()
    load_dotenv(temp.env_file, override=False)
    return Settings()


def load_type_settings(path: Path | str | None = None) -> dict[str, Any]:
    """
    Load the static type mapping settings.

    :param path: The JSON file to read, defaults to the mapping_file setting
    :return: a nested dict with the mappings under mapping.<index>.<type>
    """
    if path is None:
        path = get_settings().mapping_file
    if path is None:
        return {"mapping": {}}
    with Path(path).open(encoding="utf-8") as f:
        settings = json.load(f)
    settings.setdefault("mapping", {})
    return settings


if __name__ == "__main__":
    # Echo the settings
    for k, v in get_settings().model_dump().items():
        print(f"{ENV_PREFIX.upper()}{k.upper()}={v}")
