from pydantic import BaseModel


class Constraint(BaseModel):
    model_config = {"frozen": True}

    type: str
    description: str = ""
    priority: str = "medium"
    violated: bool = False
