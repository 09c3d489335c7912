"""Data models for apiDoc output.

apiDoc writes every documented endpoint into ``api_data.json`` and the
project metadata into ``api_project.json``. These models are the input
side of the conversion; everything downstream reads them and never
mutates them.
"""

from pydantic import BaseModel, ConfigDict, Field

PARAMETER_GROUP = "Parameter"
BODY_GROUP = "Request Body Fields"
HEADER_GROUP = "Header"


class AnnotatedField(BaseModel):
    """A single documented field (@apiParam, @apiHeader, @apiSuccess, @apiError)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    group: str = PARAMETER_GROUP
    field: str = ""  # dotted path: user.address.city
    type: str | None = None  # String / Number / Object / Object[] / <DefinitionName>
    description: str | None = ""
    optional: bool = False
    allowed_values: list[str] | None = Field(default=None, alias="allowedValues")
    default_value: str | None = Field(default=None, alias="defaultValue")


class FieldSection(BaseModel):
    """Field lists keyed by group name, as apiDoc stores them."""

    model_config = ConfigDict(extra="ignore")

    fields: dict[str, list[AnnotatedField]] = {}


class ApiDocEndpoint(BaseModel):
    """One endpoint record of api_data.json."""

    model_config = ConfigDict(extra="ignore")

    type: str  # get / post / put / patch / delete / del
    url: str  # /users/:id
    name: str = ""
    group: str = ""
    title: str = ""
    description: str | None = ""
    parameter: FieldSection | None = None
    header: FieldSection | None = None
    success: FieldSection | None = None
    error: FieldSection | None = None


class ProjectInfo(BaseModel):
    """Project metadata from api_project.json."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    title: str | None = None
    version: str | None = None
    description: str | None = None
    url: str | None = None  # https://api.example.com/v1
