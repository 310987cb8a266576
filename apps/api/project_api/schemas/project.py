"""Project API schemas."""

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from project_api.domain.identifiers import parse_project_id, parse_project_name, parse_user_id

ProjectNameField = Annotated[str, AfterValidator(parse_project_name)]
ProjectIdField = Annotated[str, AfterValidator(parse_project_id)]
UserIdField = Annotated[str, AfterValidator(parse_user_id)]


class CreateProjectRequest(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    name: ProjectNameField


class Project(BaseModel):
    """A created project; serialized with camel-case ``userId``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: ProjectIdField
    user_id: UserIdField = Field(alias="userId")
    name: ProjectNameField
