from pydantic import BaseModel, ConfigDict, Field


class DepartmentCreate(BaseModel):
    id: str = Field(..., min_length=1, max_length=50)
    name: str


class DepartmentUpdate(BaseModel):
    name: str


class DepartmentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
